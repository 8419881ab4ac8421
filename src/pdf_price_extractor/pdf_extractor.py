#!/usr/bin/env python3
"""
Page-by-page PDF text extraction feeding the price extractor.
"""

import io
import logging
import os
import shutil
import subprocess
from typing import BinaryIO, List, Optional, Union
from urllib.parse import urlparse

import pdfplumber
import requests

from .exceptions import PDFExtractionError
from .models import PdfDocument, PriceRecord
from .parser import PriceExtractor

logger = logging.getLogger(__name__)

PAGE_SEPARATOR = '\f'
DOWNLOAD_TIMEOUT = (10, 60)


def is_url(source: str) -> bool:
    return urlparse(source).scheme in ('http', 'https')


def file_name_from_source(source: str) -> str:
    """Return the last path or URL segment of a source, or 'unknown.pdf'."""
    if not source:
        return "unknown.pdf"
    if is_url(source):
        source = urlparse(source).path
    name = source.rstrip('/\\').replace('\\', '/').split('/')[-1]
    return name or "unknown.pdf"


def download_pdf(url: str) -> bytes:
    """Fetch the bytes of a PDF served over HTTP(S)."""
    try:
        response = requests.get(url, timeout=DOWNLOAD_TIMEOUT)
    except requests.RequestException as exc:
        raise PDFExtractionError(f"Download failed: {exc}") from exc
    if response.status_code != 200:
        raise PDFExtractionError(f"Download failed with status {response.status_code}: {url}")
    if not response.content:
        raise PDFExtractionError(f"Downloaded PDF is empty: {url}")
    return response.content


class PdfTextExtractor:
    """Pulls the text of each page out of a PDF file or URL."""

    def __init__(self, use_pdftotext_fallback: bool = True):
        self.use_pdftotext_fallback = use_pdftotext_fallback

    def extract_pages(self, pdf: Union[str, BinaryIO]) -> List[str]:
        """
        Extract text from every page of a PDF.

        Args:
            pdf: Path to the PDF file, or a binary file-like object

        Returns:
            One string per page, in page order (empty string for blank pages)
        """
        pages = self._extract_with_pdfplumber(pdf)

        # pdftotext needs a file on disk
        if (self.use_pdftotext_fallback and isinstance(pdf, str)
                and pages and not any(p.strip() for p in pages)):
            logger.warning("pdfplumber returned no text, trying pdftotext")
            fallback = self._extract_with_pdftotext(pdf)
            if fallback:
                return fallback
        return pages

    def _extract_with_pdfplumber(self, pdf: Union[str, BinaryIO]) -> List[str]:
        """Extract text using pdfplumber, retrying blank pages in layout mode."""
        pages = []
        with pdfplumber.open(pdf) as document:
            for i, page in enumerate(document.pages):
                page_text = page.extract_text()
                if not page_text:
                    page_text = page.extract_text(
                        layout=True,
                        x_tolerance=3,
                        y_tolerance=3
                    )
                if not page_text:
                    logger.debug(f"Page {i + 1} has no extractable text")
                pages.append(page_text or "")
        return pages

    def _extract_with_pdftotext(self, pdf_path: str) -> Optional[List[str]]:
        """Extract text using the pdftotext command-line tool, split on form feeds."""
        if not shutil.which('pdftotext'):
            logger.warning("pdftotext not available")
            return None

        result = subprocess.run(
            ['pdftotext', '-layout', pdf_path, '-'],
            capture_output=True, text=True
        )
        if result.returncode != 0:
            logger.warning(f"pdftotext failed: {result.stderr.strip()}")
            return None

        pages = result.stdout.split(PAGE_SEPARATOR)
        # pdftotext terminates the last page with a form feed too
        if pages and not pages[-1].strip():
            pages.pop()
        return pages

    def extract_document(self, pdf_path: str, raise_on_error: bool = False) -> PdfDocument:
        """
        Extract a PDF, given as a local path or an http(s) URL, into a PdfDocument.

        A failure marks the document FAILED with an error message, or raises
        PDFExtractionError when raise_on_error is set.
        """
        document = PdfDocument(file_name=file_name_from_source(pdf_path), source=pdf_path)

        try:
            if is_url(pdf_path):
                document.pages = self.extract_pages(io.BytesIO(download_pdf(pdf_path)))
            elif os.path.isfile(pdf_path):
                document.pages = self.extract_pages(pdf_path)
            else:
                raise FileNotFoundError(f"PDF file not found: {pdf_path}")
        except Exception as e:
            document.status = "FAILED"
            document.error_message = str(e)
            logger.error(f"Failed to extract PDF content from {pdf_path}: {e}")
            if raise_on_error:
                raise PDFExtractionError(f"Failed to extract PDF content: {e}") from e
            return document

        document.page_count = len(document.pages)
        document.status = "SUCCESS"
        logger.info(f"Extracted {document.page_count} page(s) from {document.file_name}")
        return document


def extract_pdf_document(pdf_path: str, raise_on_error: bool = False) -> PdfDocument:
    """Convenience function to extract the page texts of a PDF."""
    return PdfTextExtractor().extract_document(pdf_path, raise_on_error=raise_on_error)


def extract_prices_from_pdf(pdf_path: str, extractor: Optional[PriceExtractor] = None) -> List[PriceRecord]:
    """
    Extract price records from a PDF file.

    Args:
        pdf_path: Path or http(s) URL of the PDF
        extractor: Price extractor to run on the pages (defaults to PriceExtractor())

    Returns:
        Price records in document order

    Raises:
        PDFExtractionError: If the PDF text cannot be extracted
    """
    document = extract_pdf_document(pdf_path, raise_on_error=True)
    extractor = extractor or PriceExtractor()
    return extractor.extract(document.pages, document.file_name)
