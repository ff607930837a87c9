"""
Pydantic models for Apple Card statement data.
"""
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


# Output column order expected by the CSV writer.
TRANSACTION_COLUMNS = [
    "Date",
    "Type",
    "Description",
    "Daily Cash (%)",
    "Daily Cash ($)",
    "Amount",
]

# Column buckets (x / 5) as rendered by the Apple Card statement layout.
TYPE_BUCKET = 7
DATE_BUCKET = 9
DESCRIPTION_BUCKET = 21
# The percent column drifts left for two-digit values ("10%" vs "2%").
DAILY_CASH_PERCENT_BUCKETS = [85, 83]
DAILY_CASH_AMOUNT_BUCKETS = [89]
# Amounts are right-aligned, so the bucket of the leftmost character moves
# with the number of characters (sign, digits, separators). Rightmost first.
AMOUNT_BUCKETS = [111, 110, 109, 108, 107]

X_SCALE = 5
HEADER_ROWS = 3
FOOTER_ROWS = 2
MIN_PAGE_ROWS = 3
STATEMENT_IDENTIFIER = "Statement"
CUSTOMER_IDENTIFIER = "Apple Card Customer"


class Transaction(BaseModel):
    """Individual transaction record."""
    model_config = ConfigDict(populate_by_name=True)

    date: str = Field(alias="Date")
    type: Optional[str] = Field(default=None, alias="Type")
    description: str = Field(alias="Description")
    daily_cash_percent: Optional[str] = Field(default=None, alias="Daily Cash (%)")
    daily_cash_amount: Optional[str] = Field(default=None, alias="Daily Cash ($)")
    amount: Optional[str] = Field(default=None, alias="Amount")

    @field_validator("date", "description")
    @classmethod
    def validate_not_empty(cls, v):
        if not v or not v.strip():
            raise ValueError("must not be empty")
        return v

    def to_record(self) -> dict:
        """Alias-keyed dict in output column order."""
        return self.model_dump(by_alias=True)


class StatementLayout(BaseModel):
    """Column scheme and page structure of a statement page."""
    x_scale: float = X_SCALE
    type_bucket: int = TYPE_BUCKET
    date_bucket: int = DATE_BUCKET
    description_bucket: int = DESCRIPTION_BUCKET
    daily_cash_percent_buckets: List[int] = Field(default_factory=lambda: list(DAILY_CASH_PERCENT_BUCKETS))
    daily_cash_amount_buckets: List[int] = Field(default_factory=lambda: list(DAILY_CASH_AMOUNT_BUCKETS))
    amount_buckets: List[int] = Field(default_factory=lambda: list(AMOUNT_BUCKETS))
    header_rows: int = HEADER_ROWS
    footer_rows: int = FOOTER_ROWS
    min_rows: int = MIN_PAGE_ROWS
    statement_identifier: str = STATEMENT_IDENTIFIER
    customer_identifier: str = CUSTOMER_IDENTIFIER

    @field_validator("x_scale")
    @classmethod
    def validate_x_scale(cls, v):
        if v <= 0:
            raise ValueError(f"x_scale must be positive: {v}")
        return v

    @field_validator("header_rows")
    @classmethod
    def validate_header_rows(cls, v):
        # Both identifier rows live in the header.
        if v < 2:
            raise ValueError(f"header_rows must be at least 2: {v}")
        return v


DEFAULT_LAYOUT = StatementLayout()
