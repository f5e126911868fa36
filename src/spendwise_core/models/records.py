"""Input records read by the summary engine.

Transactions and budgets are owned by external stores; the engine only
reads immutable snapshots of them. Amounts are magnitudes: direction is
carried by ``Transaction.type``, never by the sign of the amount.
"""

import re
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

SENTINEL_CATEGORY = "uncategorized"

MONTH_KEY_PATTERN = re.compile(r"^(\d{4})-(0[1-9]|1[0-2])$")


def to_decimal(v):
    """Coerce a monetary value to Decimal.

    Floats go through ``str`` so that 0.1 becomes Decimal("0.1") rather
    than its binary expansion.
    """
    if isinstance(v, Decimal):
        return v
    if isinstance(v, float):
        return Decimal(str(v))
    if isinstance(v, (int, str)):
        return Decimal(v)
    return v


def month_key(instant: date) -> str:
    """Return the ``YYYY-MM`` key of the calendar month containing ``instant``."""
    return f"{instant.year:04d}-{instant.month:02d}"


class TransactionType(str, Enum):
    """Direction of a transaction."""

    INCOME = "income"
    EXPENSE = "expense"


class Transaction(BaseModel):
    """A single income or expense event."""

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "examples": [
                {
                    "id": "3f2b9c1e8a",
                    "amount": "42.50",
                    "description": "Weekly groceries",
                    "category": "food",
                    "type": "expense",
                    "date": "2024-03-10T12:00:00",
                }
            ]
        },
    )

    id: Optional[str] = Field(
        default=None,
        description="Store-assigned identifier; None until stored",
    )
    amount: Decimal = Field(
        ge=Decimal("0"),
        description="Non-negative monetary magnitude",
    )
    description: str = Field(
        min_length=1,
        description="What the transaction was for",
    )
    category: Optional[str] = Field(
        default=None,
        description="Category key; missing or empty means uncategorized",
    )
    type: TransactionType = Field(
        default=TransactionType.EXPENSE,
        description="Whether the amount is income or an expense",
    )
    date: datetime = Field(
        description="When the transaction happened",
    )

    @field_validator("amount", mode="before")
    @classmethod
    def coerce_amount_to_decimal(cls, v):
        return to_decimal(v)

    @field_validator("description", mode="before")
    @classmethod
    def strip_description(cls, v):
        """Surrounding whitespace is dropped, so a blank description is empty."""
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("date", mode="before")
    @classmethod
    def coerce_date_to_datetime(cls, v):
        """A bare date is taken as midnight of that day."""
        if isinstance(v, date) and not isinstance(v, datetime):
            return datetime.combine(v, time())
        return v

    @property
    def is_income(self) -> bool:
        return self.type == TransactionType.INCOME

    @property
    def is_expense(self) -> bool:
        return self.type == TransactionType.EXPENSE

    @property
    def month_key(self) -> str:
        return month_key(self.date)

    def effective_category(self, sentinel: str = SENTINEL_CATEGORY) -> str:
        """Return the category, or ``sentinel`` when it is missing or blank."""
        if self.category is None or not self.category.strip():
            return sentinel
        return self.category


class Budget(BaseModel):
    """Spending limit for one category in one calendar month.

    At most one budget exists per (category, month); the budget store
    enforces that.
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "examples": [
                {"category": "food", "month": "2024-03", "amount": "300.00"}
            ]
        },
    )

    category: str = Field(
        min_length=1,
        description="Category key the budget applies to",
    )
    month: str = Field(
        description="Month key in YYYY-MM form",
    )
    amount: Decimal = Field(
        ge=Decimal("0"),
        description="Budgeted monetary magnitude",
    )

    @field_validator("amount", mode="before")
    @classmethod
    def coerce_amount_to_decimal(cls, v):
        return to_decimal(v)

    @field_validator("month")
    @classmethod
    def validate_month_key(cls, v: str) -> str:
        """Month must look like 2024-03."""
        if not MONTH_KEY_PATTERN.match(v):
            raise ValueError(f"{v} is not a valid month format! Use YYYY-MM")
        return v

    @property
    def year(self) -> int:
        return int(self.month[:4])

    @property
    def month_number(self) -> int:
        return int(self.month[5:])
