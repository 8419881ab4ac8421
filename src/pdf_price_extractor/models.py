"""
Data models for the PDF Price Extractor.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class PriceRecord:
    """A single price found on one line of one page."""
    price: Decimal
    currency: str
    product_code: Optional[str]
    product_name: Optional[str]
    source_document: str
    page_number: int
    raw_text: str
    extracted_at: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable mapping using camelCase keys."""
        return {
            "price": str(self.price),
            "currency": self.currency,
            "productCode": self.product_code,
            "productName": self.product_name,
            "sourceDocument": self.source_document,
            "pageNumber": self.page_number,
            "rawText": self.raw_text,
            "extractedAt": self.extracted_at.isoformat(),
        }


@dataclass
class PdfDocument:
    """Text pulled out of a PDF, page by page, plus the outcome of the pull."""
    file_name: str
    source: str
    pages: List[str] = field(default_factory=list)
    page_count: int = 0
    status: str = "PENDING"
    error_message: Optional[str] = None
    extracted_at: datetime = field(default_factory=datetime.now)

    @property
    def content(self) -> str:
        return "\n".join(self.pages)

    @property
    def succeeded(self) -> bool:
        return self.status == "SUCCESS"
