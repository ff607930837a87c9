"""
Tests for statement page detection and layout templates.
"""
import pytest
from pydantic import ValidationError

from ..core.detectors import is_statement_page, load_layout
from ..core.layout import Row
from ..models.schema import DEFAULT_LAYOUT, StatementLayout


class TestIsStatementPage:

    def test_identifiers_match(self):
        header = [Row({7: "Statement"}), Row({7: "Apple Card Customer"}), Row({7: "x"})]
        assert is_statement_page(header)

    def test_leftmost_column_is_checked(self):
        header = [
            Row({60: "March 2024", 7: " statement "}),
            Row({7: "Apple Card Customer", 90: "Jane Doe"}),
        ]
        assert is_statement_page(header)

    def test_substring_is_not_enough(self):
        header = [Row({7: "Statement Summary"}), Row({7: "Apple Card Customer"})]
        assert not is_statement_page(header)

    def test_short_header(self):
        assert not is_statement_page([Row({7: "Statement"})])
        assert not is_statement_page([])

    def test_empty_row(self):
        assert not is_statement_page([Row({}), Row({7: "Apple Card Customer"})])


class TestLoadLayout:

    def test_defaults(self):
        assert DEFAULT_LAYOUT.type_bucket == 7
        assert DEFAULT_LAYOUT.date_bucket == 9
        assert DEFAULT_LAYOUT.description_bucket == 21
        assert DEFAULT_LAYOUT.daily_cash_percent_buckets == [85, 83]
        assert DEFAULT_LAYOUT.daily_cash_amount_buckets == [89]
        assert DEFAULT_LAYOUT.amount_buckets == [111, 110, 109, 108, 107]

    def test_partial_override(self, tmp_path):
        path = tmp_path / "layout.yaml"
        path.write_text("amount_buckets: [120, 119]\ncustomer_identifier: Card Holder\n")
        layout = load_layout(path)
        assert layout.amount_buckets == [120, 119]
        assert layout.customer_identifier == "Card Holder"
        assert layout.description_bucket == 21

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "layout.yaml"
        path.write_text("")
        assert load_layout(path) == StatementLayout()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_layout(tmp_path / "nope.yaml")

    def test_invalid_values(self, tmp_path):
        path = tmp_path / "layout.yaml"
        path.write_text("x_scale: 0\n")
        with pytest.raises(ValidationError):
            load_layout(path)

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "layout.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(ValueError):
            load_layout(path)
