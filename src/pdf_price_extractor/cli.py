#!/usr/bin/env python3
"""
PDF Price Extractor CLI
Extracts structured price records from PDFs or plain-text page dumps.
"""

import json
import logging
from pathlib import Path
from typing import List, Optional

import click
from rich.console import Console
from rich.table import Table

from .exceptions import PriceExtractorError
from .models import PriceRecord
from .parser import PriceExtractor
from .pdf_extractor import PAGE_SEPARATOR, extract_pdf_document

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool):
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)


def records_to_json(records: List[PriceRecord]) -> str:
    return json.dumps([record.to_dict() for record in records], indent=2, ensure_ascii=False)


def render_table(records: List[PriceRecord], console: Console):
    """Print records as a rich table."""
    table = Table(title=f"{len(records)} price(s) found")
    table.add_column("Page", justify="right")
    table.add_column("Price", justify="right", style="green")
    table.add_column("Currency")
    table.add_column("Code", style="cyan")
    table.add_column("Name")

    for record in records:
        table.add_row(
            str(record.page_number),
            str(record.price),
            record.currency,
            record.product_code or "",
            record.product_name or "",
        )
    console.print(table)


def emit(records: List[PriceRecord], output: Optional[str], fmt: str):
    """Write records to a file or the terminal."""
    if output:
        with open(output, 'w', encoding='utf-8') as f:
            f.write(records_to_json(records))
        logger.info(f"Results saved to: {output}")
        return

    if fmt == 'table':
        render_table(records, Console())
    else:
        click.echo(records_to_json(records))


@click.group()
def cli():
    """Extract structured price records from supplier PDFs."""


@cli.command()
@click.argument('pdf_path')
@click.option('--output', '-o', type=click.Path(), help='Output JSON file path')
@click.option('--format', 'fmt', type=click.Choice(['json', 'table']), default='json',
              help='Terminal output format')
@click.option('--workers', type=int, default=None, help='Process pages on N threads')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
def extract(pdf_path: str, output: Optional[str], fmt: str, workers: Optional[int], verbose: bool):
    """Extract prices from a PDF file or an http(s) URL."""
    configure_logging(verbose)

    document = extract_pdf_document(pdf_path)
    if not document.succeeded:
        click.echo(f"Error extracting PDF: {document.error_message}", err=True)
        raise click.Abort()

    try:
        records = PriceExtractor(max_workers=workers).extract(document.pages, document.file_name)
    except PriceExtractorError as e:
        click.echo(f"Error extracting prices: {e}", err=True)
        raise click.Abort()

    emit(records, output, fmt)


@cli.command()
@click.argument('text_path', type=click.Path(exists=True, dir_okay=False))
@click.option('--output', '-o', type=click.Path(), help='Output JSON file path')
@click.option('--format', 'fmt', type=click.Choice(['json', 'table']), default='json',
              help='Terminal output format')
@click.option('--source', default=None, help='Source document name (defaults to the file name)')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
def text(text_path: str, output: Optional[str], fmt: str, source: Optional[str], verbose: bool):
    """Extract prices from a UTF-8 text dump; pages are separated by form feeds."""
    configure_logging(verbose)

    try:
        content = Path(text_path).read_text(encoding='utf-8')
    except (UnicodeDecodeError, OSError) as e:
        click.echo(f"Error reading text dump: {e}", err=True)
        raise click.Abort()

    pages = content.split(PAGE_SEPARATOR)
    if len(pages) > 1 and not pages[-1].strip():
        pages.pop()

    try:
        records = PriceExtractor().extract(pages, source or Path(text_path).name)
    except PriceExtractorError as e:
        click.echo(f"Error extracting prices: {e}", err=True)
        raise click.Abort()

    emit(records, output, fmt)


def main():
    cli()


if __name__ == "__main__":
    main()
