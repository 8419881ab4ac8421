#!/usr/bin/env python3
"""
Example usage of the PDF Price Extractor
Demonstrates the extractor on sample catalogue text.
"""

import json
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from pdf_price_extractor import PriceExtractor


def create_sample_pages():
    """Create sample page texts, as a PDF text extractor would return them."""
    return [
        """
    ACME SUPPLY CATALOGUE 2025

    SKU: LAP-001
    Price: $999.99

    Item: Mouse $29.99
    Product # KB-200  Keyboard  $79.99 / 10+ units $69.99
    """,
        """
    EUROPEAN PRICE LIST

    Name: Docking Station
    EUR 1,249.00
    Shipping within Europe 15.00
    """,
    ]


def demonstrate_extractor():
    """Demonstrate the price extractor."""
    print("=" * 60)
    print("DEMONSTRATION: Price Extractor")
    print("=" * 60)

    extractor = PriceExtractor()
    records = extractor.extract(create_sample_pages(), "acme_catalogue.pdf")

    print(f"Found {len(records)} prices")
    for record in records:
        print(f"  page {record.page_number}: {record.price} {record.currency}"
              f"  code={record.product_code}  name={record.product_name}")

    output_file = "sample_prices.json"
    with open(output_file, 'w', encoding='utf-8') as f:
        json.dump([record.to_dict() for record in records], f, indent=2, ensure_ascii=False)

    print(f"\nResults saved to: {output_file}")


def demonstrate_cli_usage():
    """Demonstrate CLI usage."""
    print("\n" + "=" * 60)
    print("DEMONSTRATION: CLI Usage")
    print("=" * 60)
    print("CLI Commands to try:")
    print("1. Extract from a PDF:   price-extractor extract catalogue.pdf")
    print("2. Save to file:         price-extractor extract catalogue.pdf -o prices.json")
    print("3. Table output:         price-extractor extract catalogue.pdf --format table")
    print("4. From pdftotext dump:  price-extractor text catalogue.txt --source catalogue.pdf")


if __name__ == "__main__":
    demonstrate_extractor()
    demonstrate_cli_usage()
