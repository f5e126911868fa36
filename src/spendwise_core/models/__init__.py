"""Data models for spendwise-core.

- Input records read from the external stores (records.py)
- Derived analytics structures produced by the engine (summary.py)
"""

from spendwise_core.models.records import (
    MONTH_KEY_PATTERN,
    SENTINEL_CATEGORY,
    Budget,
    Transaction,
    TransactionType,
    month_key,
)
from spendwise_core.models.summary import (
    BudgetComparisonRow,
    CategorySlice,
    Insight,
    InsightKind,
    InsightSeverity,
    MonthlyPoint,
    Summary,
)

__all__ = [
    # Records
    "Transaction",
    "TransactionType",
    "Budget",
    "SENTINEL_CATEGORY",
    "MONTH_KEY_PATTERN",
    "month_key",
    # Derived
    "MonthlyPoint",
    "CategorySlice",
    "BudgetComparisonRow",
    "InsightSeverity",
    "InsightKind",
    "Insight",
    "Summary",
]
