"""Spendwise Core - Dashboard analytics for income, expenses and budgets."""

__version__ = "0.1.0"

from .engine import SummaryEngine, compute_insights, compute_summary
from .config import EngineSettings, SpendwiseConfig, configure_logging
from .models import (
    Budget,
    BudgetComparisonRow,
    CategorySlice,
    Insight,
    InsightKind,
    InsightSeverity,
    MonthlyPoint,
    Summary,
    Transaction,
    TransactionType,
)

__all__ = [
    "SummaryEngine",
    "compute_summary",
    "compute_insights",
    "EngineSettings",
    "SpendwiseConfig",
    "configure_logging",
    "Transaction",
    "TransactionType",
    "Budget",
    "MonthlyPoint",
    "CategorySlice",
    "BudgetComparisonRow",
    "Insight",
    "InsightKind",
    "InsightSeverity",
    "Summary",
]
