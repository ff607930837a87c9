"""
Debug view of reconstructed rows for layout QA.
"""
from typing import List
from rich.table import Table

from ..core.layout import Row
from ..core.tables import classify_row
from ..models.schema import StatementLayout, DEFAULT_LAYOUT


def build_rows_table(rows: List[Row], layout: StatementLayout = DEFAULT_LAYOUT,
                     title: str = None) -> Table:
    """
    Render rows as a table with one column per bucket seen on the page.

    Args:
        rows: Reconstructed rows
        layout: Column scheme used to classify each row
        title: Table title

    Returns:
        rich Table
    """
    buckets = sorted({bucket for row in rows for bucket in row.buckets})

    table = Table(title=title, show_lines=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("y", justify="right", style="dim")
    table.add_column("kind", style="cyan")
    for bucket in buckets:
        table.add_column(str(bucket))

    for index, row in enumerate(rows):
        kind = classify_row(row, layout).value
        cells = [row.get(bucket, "") for bucket in buckets]
        table.add_row(str(index), str(row.y), kind, *cells)

    return table
