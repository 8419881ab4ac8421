"""
Exceptions raised by the price extraction package.
"""


class PriceExtractorError(Exception):
    """Base class for all price extraction errors."""

    pass


class InvalidInputError(PriceExtractorError, ValueError):
    """Raised when the top-level arguments of an extraction call are invalid."""

    pass


class PDFExtractionError(PriceExtractorError):
    """Raised when page text cannot be obtained from a PDF."""

    pass
