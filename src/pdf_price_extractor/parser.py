#!/usr/bin/env python3
"""
PDF Price Extractor
Turns per-page text into structured price records using line-oriented patterns.
"""

import re
import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Iterable, List, Optional

from .currency import DEFAULT_CURRENCY, resolve_currency
from .exceptions import InvalidInputError
from .fields import FieldResolver, ProductNameResolver, product_code_resolver, product_name_resolver
from .models import PriceRecord
from .price_matcher import find_prices

logger = logging.getLogger(__name__)

LINE_BREAK_PATTERN = re.compile(r'\r\n|\n|\r')


def split_lines(text: str) -> List[str]:
    """Split page text on \\r\\n, \\n or \\r."""
    return LINE_BREAK_PATTERN.split(text)


class PriceExtractor:
    """Extracts price records from the text of a document, page by page."""

    def __init__(self, default_currency: str = DEFAULT_CURRENCY,
                 max_workers: Optional[int] = None,
                 code_resolver: FieldResolver = product_code_resolver,
                 name_resolver: ProductNameResolver = product_name_resolver):
        self.default_currency = default_currency
        self.max_workers = max_workers
        self.code_resolver = code_resolver
        self.name_resolver = name_resolver

    def build_line_records(self, line: str, previous_line: Optional[str],
                           source_document: str, page_number: int) -> List[PriceRecord]:
        """
        Build one record per price found on a line.

        Currency, product code and product name are resolved once for the
        line and shared by all of its prices.
        """
        prices = find_prices(line)
        if not prices:
            return []

        currency = resolve_currency(line, self.default_currency)
        code = self.code_resolver.resolve(line, previous_line)
        name = self.name_resolver.resolve(line, previous_line)

        records = []
        for match in prices:
            # Digits inside this line's product code (e.g. LAP-001) are not prices
            if code and code.span and code.span[0] <= match.start and match.end <= code.span[1]:
                continue

            records.append(PriceRecord(
                price=match.value,
                currency=currency,
                product_code=code.value if code else None,
                product_name=name.value if name else None,
                source_document=source_document,
                page_number=page_number,
                raw_text=line,
            ))
        return records

    def process_page(self, text: str, source_document: str, page_number: int) -> List[PriceRecord]:
        """Extract records from a single page, top to bottom."""
        records = []
        lines = split_lines(text)

        for i, raw_line in enumerate(lines):
            line = raw_line.strip()
            if not line:
                continue

            # Lookback uses the physical line above, even if it is blank
            previous_line = lines[i - 1] if i > 0 else None
            records.extend(self.build_line_records(line, previous_line, source_document, page_number))

        logger.debug(f"Page {page_number}: {len(lines)} lines, {len(records)} prices")
        return records

    def extract(self, pages: Iterable[str], source_document: str) -> List[PriceRecord]:
        """
        Extract price records from the pages of a document.

        Args:
            pages: Page texts in document order
            source_document: Identifier of the document (e.g. its file name)

        Returns:
            Records ordered by page, then line, then position on the line

        Raises:
            InvalidInputError: If pages or source_document are missing or not text
        """
        page_texts = self._validate(pages, source_document)
        logger.info(f"Extracting prices from {len(page_texts)} page(s) of {source_document}")

        if self.max_workers and self.max_workers > 1 and len(page_texts) > 1:
            records = self._extract_parallel(page_texts, source_document)
        else:
            records = []
            for page_number, text in enumerate(page_texts, 1):
                records.extend(self.process_page(text, source_document, page_number))

        if not records:
            logger.warning(f"No prices found in {source_document}")
        else:
            logger.info(f"Found {len(records)} price(s) in {source_document}")
        return records

    def _extract_parallel(self, page_texts: List[str], source_document: str) -> List[PriceRecord]:
        """Process pages on a thread pool and merge results back in page order."""
        results_map = {}
        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            futures = {
                executor.submit(self.process_page, text, source_document, page_number): page_number
                for page_number, text in enumerate(page_texts, 1)
            }
            for fut in as_completed(futures):
                results_map[futures[fut]] = fut.result()

        records = []
        for page_number in sorted(results_map.keys()):
            records.extend(results_map[page_number])
        return records

    def _validate(self, pages: Iterable[str], source_document: str) -> List[str]:
        if pages is None:
            raise InvalidInputError("pages are required")
        if isinstance(pages, str):
            raise InvalidInputError("pages must be a sequence of page texts, not a single string")
        if not isinstance(source_document, str):
            raise InvalidInputError("source_document must be a string")

        try:
            page_texts = list(pages)
        except TypeError as e:
            raise InvalidInputError(f"pages must be iterable: {e}") from e

        for page_number, text in enumerate(page_texts, 1):
            if not isinstance(text, str):
                raise InvalidInputError(
                    f"page {page_number} of {source_document} is {type(text).__name__}, expected text"
                )
        return page_texts


def extract_prices(pages: Iterable[str], source_document: str) -> List[PriceRecord]:
    """Convenience function to extract price records with default settings."""
    return PriceExtractor().extract(pages, source_document)
