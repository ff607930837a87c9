"""
Transaction table extraction from reconstructed statement rows.
"""
from enum import Enum
from typing import List, Optional, Dict, Any
import logging

from .layout import Row
from .detectors import is_statement_page
from .normalize import is_date
from ..models.schema import Transaction, StatementLayout, DEFAULT_LAYOUT


class RowKind(Enum):
    TYPE_MARKER = "type_marker"
    CONTINUATION = "continuation"
    TRANSACTION = "transaction"
    NOISE = "noise"


def row_date(row: Row, layout: StatementLayout = DEFAULT_LAYOUT) -> Optional[str]:
    """Date text of a row: the date column, else the type column."""
    return row.first([layout.date_bucket, layout.type_bucket])


def classify_row(row: Row, layout: StatementLayout = DEFAULT_LAYOUT) -> RowKind:
    """
    Classify a statement row.

    A single-column row continues the previous description when its text sits
    in the description column. Any other single-column row is a type marker
    ("Payments", "Transactions") unless the row's date column holds a date.

    Args:
        row: Row to classify
        layout: Column scheme

    Returns:
        RowKind of the row
    """
    if len(row) == 1:
        if row.get(layout.description_bucket):
            return RowKind.CONTINUATION
        if not is_date(row_date(row, layout)):
            return RowKind.TYPE_MARKER
        return RowKind.NOISE

    if not row.get(layout.description_bucket):
        return RowKind.NOISE

    if not is_date(row_date(row, layout)):
        return RowKind.NOISE

    return RowKind.TRANSACTION


class AssemblerState(Enum):
    IDLE = "idle"
    PENDING = "pending"


class TransactionAssembler:
    """Builds transactions from classified rows.

    ``IDLE`` means no transaction is open; ``PENDING`` means the last
    transaction row may still gain description lines. The current transaction
    type is carried across rows in both states.
    """

    def __init__(self, layout: StatementLayout = DEFAULT_LAYOUT,
                 current_type: Optional[str] = None,
                 logger: Optional[logging.Logger] = None):
        self.layout = layout
        self.current_type = current_type
        self.logger = logger or logging.getLogger(__name__)
        self.results: List[Transaction] = []
        self._pending: Optional[Dict[str, Any]] = None

    @property
    def state(self) -> AssemblerState:
        return AssemblerState.IDLE if self._pending is None else AssemblerState.PENDING

    def feed(self, row: Row, kind: Optional[RowKind] = None):
        """Advance the machine by one row."""
        kind = kind or classify_row(row, self.layout)

        if kind is RowKind.TYPE_MARKER:
            self._finalize()
            self.current_type = row.sole
            self.logger.debug(f"Found transaction type: {self.current_type}")

        elif kind is RowKind.CONTINUATION:
            description = row.get(self.layout.description_bucket)
            if self.state is AssemblerState.IDLE:
                self.logger.debug(f"Continuation row without open transaction: {description!r}. Skipping...")
                return
            self.logger.debug("Row appears to be continuation of previous description")
            self._pending['description'] += '\n' + description

        elif kind is RowKind.TRANSACTION:
            self._finalize()
            self._pending = self._open(row)

        else:
            self.logger.debug(f"Skipping row: {row}")

    def flush(self) -> List[Transaction]:
        """Finalize any open transaction and return everything assembled."""
        self._finalize()
        return self.results

    def _open(self, row: Row) -> Dict[str, Any]:
        layout = self.layout
        return {
            'date': row_date(row, layout),
            'type': self.current_type,
            'description': row.get(layout.description_bucket),
            'daily_cash_percent': row.first(layout.daily_cash_percent_buckets),
            'daily_cash_amount': row.first(layout.daily_cash_amount_buckets),
            'amount': row.first(layout.amount_buckets),
        }

    def _finalize(self):
        if self._pending is None:
            return
        transaction = Transaction(**self._pending)
        self.logger.debug(f"Transaction: {transaction.to_record()}")
        self.results.append(transaction)
        self._pending = None


class StatementPageParser:
    """Extracts transactions from the rows of one statement page."""

    def __init__(self, layout: StatementLayout = DEFAULT_LAYOUT,
                 logger: Optional[logging.Logger] = None):
        self.layout = layout
        self.logger = logger or logging.getLogger(__name__)

    def parse(self, rows: List[Row], page_number: int = None) -> List[Transaction]:
        """
        Extract transaction rows from the page.

        Pages that are not statement pages yield no transactions.

        Args:
            rows: Reconstructed rows in reading order
            page_number: Page number, for diagnostics

        Returns:
            List of Transaction objects
        """
        layout = self.layout
        if len(rows) < layout.min_rows:
            self.logger.debug(f"Page {page_number} contains insufficient data to be a statement. Skipping...")
            return []

        body = list(rows[:len(rows) - layout.footer_rows])
        header = body[:layout.header_rows]
        body = body[layout.header_rows:]

        if not is_statement_page(header, layout, page_number):
            self.logger.info(f"Page {page_number} is not a statement page. Skipping...")
            return []

        self.logger.debug(f"Processing {len(body)} rows on page {page_number}")
        assembler = TransactionAssembler(layout, logger=self.logger)
        for index, row in enumerate(body):
            kind = classify_row(row, layout)
            self.logger.debug(f"Row {index}: {kind.value} ({len(row)} columns)")
            assembler.feed(row, kind)

        return assembler.flush()
