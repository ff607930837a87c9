"""
Apple Card Statement Converter

Converts Apple Card statement PDFs into a flat, date-sorted list of
transactions by rebuilding the transaction table from positioned text.
"""

__version__ = "1.0.0"
__author__ = "Apple Card CSV Team"

from .core.runner import parse_statements, parse_statement_files, DocumentParser
from .core.tables import StatementPageParser
from .core.layout import reconstruct_rows
from .core.detectors import load_layout
from .core.export import to_csv, to_json
from .models.schema import Transaction, StatementLayout, DEFAULT_LAYOUT, TRANSACTION_COLUMNS

__all__ = [
    "parse_statements",
    "parse_statement_files",
    "DocumentParser",
    "StatementPageParser",
    "reconstruct_rows",
    "load_layout",
    "to_csv",
    "to_json",
    "Transaction",
    "StatementLayout",
    "DEFAULT_LAYOUT",
    "TRANSACTION_COLUMNS"
]
