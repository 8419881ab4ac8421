"""
Currency detection for lines of page text.
"""

import re

DEFAULT_CURRENCY = 'USD'

# Upper-case codes match anywhere ("EURO" is EUR); other casings must stand
# apart from letters ("Europe" is not EUR).
CURRENCY_PATTERN = re.compile(
    r'(USD|EUR|GBP|JPY|INR'
    r'|(?i:(?<![A-Za-z])(?:usd|eur|gbp|jpy|inr)(?![A-Za-z]))'
    r'|[$£€¥₹])'
)

CURRENCY_SYMBOLS = {
    '$': 'USD',
    '£': 'GBP',
    '€': 'EUR',
    '¥': 'JPY',
    '₹': 'INR',
}


def resolve_currency(text: str, default: str = DEFAULT_CURRENCY) -> str:
    """Return the currency code of the first currency token in the text.

    Symbols are mapped to their ISO code; codes are upper-cased. Falls back
    to ``default`` when the text carries no currency token.
    """
    match = CURRENCY_PATTERN.search(text)
    if not match:
        return default

    token = match.group(1)
    return CURRENCY_SYMBOLS.get(token, token.upper())
