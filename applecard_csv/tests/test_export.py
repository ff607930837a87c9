"""
Tests for CSV and JSON output.
"""
import csv
import io
import json
import pytest
from pydantic import ValidationError

from ..core.export import to_csv, to_json
from ..models.schema import Transaction, TRANSACTION_COLUMNS


def sample():
    return [
        Transaction(
            Date="03/01/2024", Type="Purchases", Description="Coffee Shop\nStore #1234",
            **{"Daily Cash (%)": "2%", "Daily Cash ($)": "$0.09"}, Amount="$4.50",
        ),
        Transaction(Date="03/02/2024", Description="ACH Deposit", Amount="-$100.00"),
    ]


class TestToCsv:

    def test_header_only(self):
        assert to_csv([]) == ",".join(TRANSACTION_COLUMNS) + "\n"

    def test_rows(self):
        rows = list(csv.DictReader(io.StringIO(to_csv(sample()))))
        assert len(rows) == 2
        assert rows[0]["Description"] == "Coffee Shop\nStore #1234"
        assert rows[0]["Daily Cash (%)"] == "2%"
        assert rows[1]["Type"] == ""
        assert rows[1]["Daily Cash ($)"] == ""
        assert rows[1]["Amount"] == "-$100.00"


class TestToJson:

    def test_keys_and_nulls(self):
        data = json.loads(to_json(sample()))
        assert list(data[0].keys()) == TRANSACTION_COLUMNS
        assert data[1]["Type"] is None
        assert data[1]["Daily Cash (%)"] is None
        assert data[0]["Description"] == "Coffee Shop\nStore #1234"


class TestTransactionModel:

    def test_populate_by_name(self):
        t = Transaction(date="03/01/2024", description="Grocer")
        assert t.to_record() == {
            "Date": "03/01/2024",
            "Type": None,
            "Description": "Grocer",
            "Daily Cash (%)": None,
            "Daily Cash ($)": None,
            "Amount": None,
        }

    def test_empty_description_rejected(self):
        with pytest.raises(ValidationError):
            Transaction(Date="03/01/2024", Description=" ")
