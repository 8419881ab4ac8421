#!/usr/bin/env python3
"""
Tests for price matching and normalization.
"""

import unittest
from decimal import Decimal
from unittest.mock import patch

# Add src to path for imports
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from pdf_price_extractor.price_matcher import find_prices, normalize_price


class TestNormalizePrice(unittest.TestCase):
    """Test cases for normalize_price."""

    def test_normalize_price(self):
        test_cases = [
            ("1,234.56", Decimal("1234.56")),
            ("1234.56", Decimal("1234.56")),
            ("1,000", Decimal("1000")),
            ("42", Decimal("42")),
            ("1,234,567.89", Decimal("1234567.89")),
        ]

        for input_price, expected in test_cases:
            with self.subTest(input_price=input_price):
                self.assertEqual(normalize_price(input_price), expected)

    def test_invalid_tokens(self):
        self.assertIsNone(normalize_price(""))
        self.assertIsNone(normalize_price("invalid"))

    def test_result_is_exact_decimal(self):
        value = normalize_price("0.10")
        self.assertIsInstance(value, Decimal)
        self.assertEqual(value + normalize_price("0.20"), Decimal("0.30"))


class TestFindPrices(unittest.TestCase):
    """Test cases for find_prices."""

    def test_comma_separated_price(self):
        matches = find_prices("Laptop stand 1,234.56")
        self.assertEqual([m.value for m in matches], [Decimal("1234.56")])
        self.assertEqual(matches[0].raw_text, "1,234.56")

    def test_ungrouped_price_is_one_value(self):
        matches = find_prices("Total 1234.56")
        self.assertEqual([m.value for m in matches], [Decimal("1234.56")])

    def test_currency_symbol_is_part_of_raw_text(self):
        matches = find_prices("Price: € 5.00")
        self.assertEqual(len(matches), 1)
        self.assertEqual(matches[0].raw_text, "€ 5.00")
        self.assertEqual(matches[0].value, Decimal("5.00"))

    def test_bare_short_integer(self):
        matches = find_prices("random text 42")
        self.assertEqual([m.value for m in matches], [Decimal("42")])

    def test_no_digits(self):
        self.assertEqual(find_prices("no prices on this line"), [])
        self.assertEqual(find_prices(""), [])

    def test_multiple_prices_left_to_right(self):
        matches = find_prices("$10.00 and $20.00 or $5.25")
        self.assertEqual(
            [m.value for m in matches],
            [Decimal("10.00"), Decimal("20.00"), Decimal("5.25")]
        )
        self.assertEqual([m.raw_text for m in matches], ["$10.00", "$20.00", "$5.25"])
        starts = [m.start for m in matches]
        self.assertEqual(starts, sorted(starts))

    def test_spans_point_into_line(self):
        line = "Cable $3.50"
        match = find_prices(line)[0]
        self.assertEqual(line[match.start:match.end], "$3.50")

    @patch('pdf_price_extractor.price_matcher.normalize_price')
    def test_unparsable_match_is_skipped(self, mock_normalize):
        mock_normalize.side_effect = [None, Decimal("2.00")]

        matches = find_prices("1.00 2.00")

        self.assertEqual(len(matches), 1)
        self.assertEqual(matches[0].value, Decimal("2.00"))
        self.assertEqual(matches[0].raw_text, "2.00")


if __name__ == '__main__':
    unittest.main()
