"""
PDF Price Extractor

Extracts structured price records from the page text of supplier PDFs.
"""

__version__ = "1.0.0"

from .currency import DEFAULT_CURRENCY, resolve_currency
from .exceptions import InvalidInputError, PDFExtractionError, PriceExtractorError
from .fields import resolve_product_code, resolve_product_name
from .models import PdfDocument, PriceRecord
from .parser import PriceExtractor, extract_prices
from .pdf_extractor import PdfTextExtractor, extract_pdf_document, extract_prices_from_pdf
from .price_matcher import find_prices, normalize_price

__all__ = [
    "DEFAULT_CURRENCY",
    "InvalidInputError",
    "PDFExtractionError",
    "PdfDocument",
    "PdfTextExtractor",
    "PriceExtractor",
    "PriceExtractorError",
    "PriceRecord",
    "extract_pdf_document",
    "extract_prices",
    "extract_prices_from_pdf",
    "find_prices",
    "normalize_price",
    "resolve_currency",
    "resolve_product_code",
    "resolve_product_name",
]
