#!/usr/bin/env python3
"""
CLI interface for the Apple Card statement converter.
"""
import logging
import sys
import typer
from enum import Enum
from pathlib import Path
from typing import List, Optional
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from .core.detectors import load_layout
from .core.export import to_csv, to_json
from .core.layout import reconstruct_rows
from .core.loader import load_document
from .core.runner import parse_statements, parse_statement_files
from .models.schema import DEFAULT_LAYOUT
from .tools.debug_rows import build_rows_table

app = typer.Typer(help="Convert Apple Card statements to CSV")
console = Console()
err_console = Console(stderr=True)
logger = logging.getLogger(__name__)


class OutputFormat(str, Enum):
    csv = "csv"
    json = "json"


def _configure_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True
    )
    # pdfminer logs recoverable PDF structure problems as warnings.
    logging.getLogger("pdfminer").setLevel(logging.WARNING if verbose else logging.ERROR)


def _read_stdin() -> Optional[bytes]:
    if sys.stdin is None or sys.stdin.isatty():
        return None
    return sys.stdin.buffer.read()


@app.command()
def convert(
    files: Optional[List[Path]] = typer.Argument(None, help="PDF statement files to convert"),
    output: Optional[Path] = typer.Option(None, "--out", "-o", help="Output file path"),
    fmt: OutputFormat = typer.Option(OutputFormat.csv, "--format", "-f", help="Output format"),
    layout_path: Optional[Path] = typer.Option(None, "--layout", "-l", help="YAML layout template"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output")
):
    """Convert statement PDFs (or a PDF piped on stdin) into CSV or JSON."""
    _configure_logging(verbose)

    try:
        layout = load_layout(layout_path) if layout_path else DEFAULT_LAYOUT

        if files:
            transactions = parse_statement_files(files, layout)
        else:
            data = _read_stdin()
            if not data:
                err_console.print("[red]Error: No input files provided[/red]")
                raise typer.Exit(1)
            logger.debug(f"Read {len(data)} bytes from stdin")
            transactions = parse_statements(data, layout)

        rendered = to_json(transactions) if fmt is OutputFormat.json else to_csv(transactions)

        if output:
            output.write_text(rendered, encoding="utf-8")
            err_console.print(f"[green]✓ Wrote {len(transactions)} transactions to: {output}[/green]")
        else:
            sys.stdout.write(rendered)

    except typer.Exit:
        raise
    except Exception as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        if verbose:
            import traceback
            err_console.print(traceback.format_exc(), markup=False)
        raise typer.Exit(1)


@app.command()
def inspect(
    pdf_path: Path = typer.Argument(..., help="Path to PDF file"),
    page: int = typer.Option(2, "--page", "-p", help="Page number (1-indexed)"),
    layout_path: Optional[Path] = typer.Option(None, "--layout", "-l", help="YAML layout template"),
):
    """Show the reconstructed rows of a page."""
    try:
        layout = load_layout(layout_path) if layout_path else DEFAULT_LAYOUT
        with load_document(pdf_path.read_bytes()) as doc:
            fragments = doc.get_page(page - 1).get_text_content()
        rows = reconstruct_rows(fragments, layout.x_scale)
    except Exception as e:
        err_console.print(f"[red]Error inspecting PDF: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    console.print(build_rows_table(rows, layout, title=f"{pdf_path.name} page {page}"))


def main():
    app()


if __name__ == "__main__":
    main()
