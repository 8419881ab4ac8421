"""
Price matching for single lines of page text.
"""

import re
import logging
from typing import List, NamedTuple, Optional
from decimal import Decimal, InvalidOperation

logger = logging.getLogger(__name__)

# Optional currency symbol, 1-3 leading digits, 3-digit groups (comma optional),
# optional 2-digit decimal part. The integer part always runs to the last digit,
# so "1234.56" is one price rather than "123" and "4.56".
PRICE_PATTERN = re.compile(
    r'(?:[$£€¥₹]\s*)?([0-9]{1,3}(?:,?[0-9]{3})*(?![0-9])(?:\.[0-9]{2})?)'
)


class PriceMatch(NamedTuple):
    """One price occurrence on a line."""
    raw_text: str
    value: Decimal
    start: int
    end: int


def normalize_price(price_str: str) -> Optional[Decimal]:
    """Strip thousands separators and parse to an exact Decimal.

    Returns None when the token cannot be parsed.
    """
    if not price_str:
        return None

    cleaned = price_str.replace(',', '')
    try:
        return Decimal(cleaned)
    except InvalidOperation:
        return None


def find_prices(line: str) -> List[PriceMatch]:
    """
    Find every price on a line, left to right.

    Args:
        line: A single line of text

    Returns:
        Matches in the order they appear. Tokens that fail to parse are skipped.
    """
    matches = []
    for match in PRICE_PATTERN.finditer(line):
        value = normalize_price(match.group(1))
        if value is None:
            logger.debug(f"Skipping unparsable price token: {match.group(0)!r}")
            continue
        matches.append(PriceMatch(match.group(0), value, match.start(), match.end()))
    return matches
