"""Derived analytics structures.

These are recomputed on every call and never persisted. All magnitudes
are non-negative Decimals; display formatting of money and dates is left
to the presentation layer, with the exception of insight messages.
"""

from calendar import month_abbr
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field


class MonthlyPoint(BaseModel):
    """Income and expense totals for one calendar month."""

    model_config = ConfigDict(frozen=True)

    year: int = Field(ge=1, le=9999, description="Calendar year")
    month: int = Field(ge=1, le=12, description="Month number (1-12)")
    income: Decimal = Field(default=Decimal("0"), ge=Decimal("0"))
    expense: Decimal = Field(default=Decimal("0"), ge=Decimal("0"))

    @computed_field
    @property
    def label(self) -> str:
        """Human-readable label for the month (e.g., 'Mar 2024')."""
        return f"{month_abbr[self.month]} {self.year}"

    @property
    def period(self) -> tuple[int, int]:
        """Chronological sort key."""
        return (self.year, self.month)


class CategorySlice(BaseModel):
    """Expense total for one category, ranked for display."""

    model_config = ConfigDict(frozen=True)

    category: str = Field(description="Display-cased category name")
    total: Decimal = Field(ge=Decimal("0"), description="Summed expense magnitude")
    color_index: int = Field(ge=0, description="Index into the display palette")


class BudgetComparisonRow(BaseModel):
    """Budgeted versus actual spending for one category this month."""

    model_config = ConfigDict(frozen=True)

    category: str = Field(description="Display-cased category name")
    budgeted: Decimal = Field(ge=Decimal("0"), description="Budget amount, 0 if unbudgeted")
    actual: Decimal = Field(ge=Decimal("0"), description="Summed expense magnitude")
    over_budget: bool

    @property
    def difference(self) -> Decimal:
        """Actual minus budgeted; positive when overspent."""
        return self.actual - self.budgeted

    @property
    def remaining(self) -> Decimal:
        return max(self.budgeted - self.actual, Decimal("0"))


class InsightSeverity(str, Enum):
    SUCCESS = "success"
    WARNING = "warning"
    INFO = "info"


class InsightKind(str, Enum):
    """Which rule produced an insight; presentation uses it to pick an icon."""

    NOT_ENOUGH_DATA = "not_enough_data"
    TOP_CATEGORY = "top_category"
    UNDER_BUDGET = "under_budget"
    NEAR_LIMIT = "near_limit"
    OVER_BUDGET = "over_budget"


class Insight(BaseModel):
    """A short, human-readable observation about current spending."""

    model_config = ConfigDict(frozen=True)

    severity: InsightSeverity
    kind: InsightKind
    message: str
    category: Optional[str] = Field(
        default=None,
        description="Display-cased category the insight is about, if any",
    )
    amount: Optional[Decimal] = Field(
        default=None,
        description="Amount the insight quotes, if any",
    )


class Summary(BaseModel):
    """Composite dashboard analytics for one snapshot of records."""

    model_config = ConfigDict(frozen=True)

    total_income: Decimal = Field(default=Decimal("0"), ge=Decimal("0"))
    total_expense: Decimal = Field(default=Decimal("0"), ge=Decimal("0"))
    monthly_trend: list[MonthlyPoint] = Field(default_factory=list)
    category_breakdown: list[CategorySlice] = Field(default_factory=list)
    budget_comparison: list[BudgetComparisonRow] = Field(default_factory=list)

    @computed_field
    @property
    def total_balance(self) -> Decimal:
        """Income minus expenses; may be negative."""
        return self.total_income - self.total_expense
