"""Financial summary aggregation engine.

The engine turns snapshots of transactions and budgets into the dashboard
analytics. It reads no clock: the reference instant ``now`` is always
passed in, so identical inputs give identical outputs.
"""

from collections.abc import Iterable
from datetime import date
from typing import Optional

import structlog

from .aggregation import calculate_totals, category_breakdown, monthly_trend
from .budgets import compare_budgets
from .config import EngineSettings
from .insights import generate_insights
from .models import Budget, Insight, Summary, Transaction

logger = structlog.get_logger()

DEFAULT_SETTINGS = EngineSettings.defaults()


class SummaryEngine:
    """
    Compute dashboard summaries and spending insights.

    The engine holds only its settings and keeps no state between calls,
    so one instance can be shared freely.
    """

    def __init__(self, settings: Optional[EngineSettings] = None):
        """
        Initialize the engine.

        Args:
            settings: Engine tunables (default: built-in defaults; the
                environment is only read through SpendwiseConfig)
        """
        self.settings = settings or DEFAULT_SETTINGS

    def compute_summary(
        self,
        transactions: Iterable[Transaction],
        budgets: Iterable[Budget],
        now: date,
    ) -> Summary:
        """
        Build the composite summary for a snapshot.

        Args:
            transactions: Every transaction known to the store
            budgets: Every budget known to the store
            now: Reference instant deciding the current month

        Returns:
            Summary with totals, monthly trend, category breakdown and
            budget comparison
        """
        transactions = list(transactions)
        budgets = list(budgets)
        settings = self.settings

        totals = calculate_totals(transactions)
        summary = Summary(
            total_income=totals.income,
            total_expense=totals.expense,
            monthly_trend=monthly_trend(
                transactions, window=settings.trend_window_months
            ),
            category_breakdown=category_breakdown(
                transactions,
                palette_size=settings.palette_size,
                sentinel=settings.sentinel_category,
            ),
            budget_comparison=compare_budgets(
                transactions, budgets, now, sentinel=settings.sentinel_category
            ),
        )

        logger.info(
            "summary_computed",
            transactions=len(transactions),
            budgets=len(budgets),
            months=len(summary.monthly_trend),
            categories=len(summary.category_breakdown),
            comparison_rows=len(summary.budget_comparison),
        )
        return summary

    def compute_insights(
        self,
        transactions: Iterable[Transaction],
        budgets: Iterable[Budget],
        now: date,
    ) -> list[Insight]:
        """
        Derive at most ``max_insights`` spending insights for the month of ``now``.
        """
        settings = self.settings
        insights = generate_insights(
            list(transactions),
            list(budgets),
            now,
            max_insights=settings.max_insights,
            warning_threshold=settings.warning_threshold_percent,
            sentinel=settings.sentinel_category,
            currency_symbol=settings.currency_symbol,
        )
        logger.info(
            "insights_generated",
            count=len(insights),
            kinds=[insight.kind.value for insight in insights],
        )
        return insights


def compute_summary(
    transactions: Iterable[Transaction],
    budgets: Iterable[Budget],
    now: date,
    settings: Optional[EngineSettings] = None,
) -> Summary:
    """Compute a summary with a one-off engine."""
    return SummaryEngine(settings).compute_summary(transactions, budgets, now)


def compute_insights(
    transactions: Iterable[Transaction],
    budgets: Iterable[Budget],
    now: date,
    settings: Optional[EngineSettings] = None,
) -> list[Insight]:
    """Compute insights with a one-off engine."""
    return SummaryEngine(settings).compute_insights(transactions, budgets, now)
