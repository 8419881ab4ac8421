#!/usr/bin/env python3
"""
Tests for currency resolution.
"""

import unittest

# Add src to path for imports
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from pdf_price_extractor.currency import DEFAULT_CURRENCY, resolve_currency


class TestResolveCurrency(unittest.TestCase):
    """Test cases for resolve_currency."""

    def test_symbol_table(self):
        test_cases = [
            ("Price: $5.00", "USD"),
            ("Price: £5.00", "GBP"),
            ("Price: €5.00", "EUR"),
            ("Price: ¥500", "JPY"),
            ("Price: ₹499", "INR"),
        ]

        for line, expected in test_cases:
            with self.subTest(line=line):
                self.assertEqual(resolve_currency(line), expected)

    def test_iso_codes(self):
        for code in ["USD", "EUR", "GBP", "JPY", "INR"]:
            with self.subTest(code=code):
                self.assertEqual(resolve_currency(f"Total 12.00 {code}"), code)

    def test_iso_codes_are_case_insensitive(self):
        self.assertEqual(resolve_currency("Total 12.00 eur"), "EUR")
        self.assertEqual(resolve_currency("gbp 7.50"), "GBP")

    def test_default_when_absent(self):
        self.assertEqual(DEFAULT_CURRENCY, "USD")
        self.assertEqual(resolve_currency("Total 12.00"), "USD")
        self.assertEqual(resolve_currency(""), "USD")

    def test_custom_default(self):
        self.assertEqual(resolve_currency("Total 12.00", default="CAD"), "CAD")

    def test_first_token_wins(self):
        self.assertEqual(resolve_currency("EUR 10.00 or $12.00"), "EUR")
        self.assertEqual(resolve_currency("£8.00 / 10.00 USD"), "GBP")

    def test_code_inside_word_is_ignored(self):
        self.assertEqual(resolve_currency("Shipping within Europe 5.00"), "USD")

    def test_upper_case_code_inside_word(self):
        self.assertEqual(resolve_currency("Price in EURO 1,249.00"), "EUR")

    def test_code_next_to_digits(self):
        self.assertEqual(resolve_currency("EUR1,234.56"), "EUR")


if __name__ == '__main__':
    unittest.main()
