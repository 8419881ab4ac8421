"""
Labeled field resolution (product code and product name) with one-line lookback.
"""

import re
from typing import NamedTuple, Optional, Tuple

NAME_FALLBACK_MIN_LENGTH = 10
NAME_MAX_LENGTH = 100

PRODUCT_CODE_PATTERN = re.compile(
    r'(?:SKU|Code|Item|Product\s*#?)\s*:?\s*([A-Z0-9-]+)',
    re.IGNORECASE
)

PRODUCT_NAME_PATTERN = re.compile(
    r'(?:Product|Item|Name)\s*:?\s*([A-Za-z0-9\s\-]+)',
    re.IGNORECASE
)


class FieldValue(NamedTuple):
    """A resolved field value.

    ``span`` is the position of the value on the current line, or None when
    the value came from the previous line or a fallback.
    """
    value: str
    span: Optional[Tuple[int, int]] = None


class FieldResolver:
    """Applies a labeled-prefix pattern to a line, falling back to the line above."""

    def __init__(self, pattern: re.Pattern):
        self.pattern = pattern

    def search(self, text: Optional[str]) -> Optional[FieldValue]:
        """Match the pattern against a single piece of text."""
        if not text:
            return None

        match = self.pattern.search(text)
        if not match:
            return None
        value = match.group(1).strip()
        if not value:
            return None
        return FieldValue(value, match.span(1))

    def resolve(self, line: str, previous_line: Optional[str] = None) -> Optional[FieldValue]:
        """Resolve the field from the current line, then from the previous line."""
        found = self.search(line)
        if found:
            return found

        found = self.search(previous_line)
        if found:
            return FieldValue(found.value)
        return None


class ProductNameResolver(FieldResolver):
    """Product name resolution; uses the line itself when nothing is labeled."""

    def __init__(self, pattern: re.Pattern = PRODUCT_NAME_PATTERN,
                 min_length: int = NAME_FALLBACK_MIN_LENGTH,
                 max_length: int = NAME_MAX_LENGTH):
        super().__init__(pattern)
        self.min_length = min_length
        self.max_length = max_length

    def resolve(self, line: str, previous_line: Optional[str] = None) -> Optional[FieldValue]:
        found = super().resolve(line, previous_line)
        if found:
            return found

        # Hard cut, not a word-boundary trim
        if len(line) > self.min_length:
            return FieldValue(line[:self.max_length])
        return None


product_code_resolver = FieldResolver(PRODUCT_CODE_PATTERN)
product_name_resolver = ProductNameResolver()


def resolve_product_code(line: str, previous_line: Optional[str] = None) -> Optional[str]:
    found = product_code_resolver.resolve(line, previous_line)
    return found.value if found else None


def resolve_product_name(line: str, previous_line: Optional[str] = None) -> Optional[str]:
    found = product_name_resolver.resolve(line, previous_line)
    return found.value if found else None
