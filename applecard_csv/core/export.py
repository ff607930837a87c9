"""
Serialization of transactions to CSV and JSON.
"""
import csv
import io
from typing import Iterable, List

from pydantic import TypeAdapter

from ..models.schema import Transaction, TRANSACTION_COLUMNS

_transactions_adapter = TypeAdapter(List[Transaction])


def to_csv(transactions: Iterable[Transaction]) -> str:
    """
    Render transactions as CSV with a header row.

    Empty fields are written as empty cells; multi-line descriptions are
    quoted.
    """
    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=TRANSACTION_COLUMNS, lineterminator='\n')
    writer.writeheader()
    for transaction in transactions:
        record = transaction.to_record()
        writer.writerow({k: ('' if v is None else v) for k, v in record.items()})
    return buffer.getvalue()


def to_json(transactions: Iterable[Transaction], indent: int = 2) -> str:
    """Render transactions as a JSON array keyed by column name."""
    return _transactions_adapter.dump_json(list(transactions), by_alias=True, indent=indent).decode('utf-8')
