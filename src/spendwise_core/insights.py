"""Rule-based spending insights for the current month.

Rules run in a fixed order and the first ``max_insights`` results are
kept:

1. No budgets or no expenses this month: a single "not enough data" note.
2. The category with the highest spend this month.
3. One note per current budget: under budget, near the limit, or over.
4. If nothing was produced, the "not enough data" note again.

Rule 1 fires when *either* side is missing. A month with expenses but no
budgets therefore gets only the generic note, even though rule 2 could
say something useful on its own.
"""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal
from typing import Optional

import structlog

from .aggregation import (
    current_month_budgets,
    current_month_expenses,
    sum_expenses_by_category,
)
from .formatting import display_category, format_currency, round_half_up
from .models import (
    SENTINEL_CATEGORY,
    Budget,
    Insight,
    InsightKind,
    InsightSeverity,
    Transaction,
)

logger = structlog.get_logger()

NOT_ENOUGH_DATA_MESSAGE = "Add more transactions and budgets to see spending insights"


def not_enough_data() -> Insight:
    return Insight(
        severity=InsightSeverity.INFO,
        kind=InsightKind.NOT_ENOUGH_DATA,
        message=NOT_ENOUGH_DATA_MESSAGE,
    )


def percent_spent(actual: Decimal, budgeted: Decimal) -> Optional[int]:
    """Whole percent of the budget spent, rounded half up.

    Returns None for a zero budget, where a percentage has no meaning.
    """
    if budgeted == 0:
        return None
    return int(round_half_up(actual / budgeted * 100))


def highest_category(expenses_by_category: dict[str, Decimal]) -> Optional[tuple[str, Decimal]]:
    """Category with the largest positive spend; the first one wins ties."""
    best: Optional[tuple[str, Decimal]] = None
    for category, amount in expenses_by_category.items():
        if amount > (best[1] if best else Decimal("0")):
            best = (category, amount)
    return best


def classify_budget(
    budget: Budget,
    actual: Decimal,
    warning_threshold: int = 80,
    currency_symbol: str = "$",
) -> Optional[Insight]:
    """Produce at most one insight for a budget.

    The checks run in priority order: under budget, then the warning band
    (``warning_threshold``..100 percent), then over budget. A zero budget
    skips the percentage checks entirely; it is over budget once anything
    is spent and silent otherwise.
    """
    name = display_category(budget.category)
    percent = percent_spent(actual, budget.amount)

    if percent is not None and actual < budget.amount:
        return Insight(
            severity=InsightSeverity.SUCCESS,
            kind=InsightKind.UNDER_BUDGET,
            message=f"You're under budget in {name} ({percent}% spent)",
            category=name,
            amount=actual,
        )
    if percent is not None and warning_threshold <= percent <= 100:
        return Insight(
            severity=InsightSeverity.WARNING,
            kind=InsightKind.NEAR_LIMIT,
            message=f"You've spent {percent}% of your {name} budget",
            category=name,
            amount=actual,
        )
    if actual > budget.amount:
        overage = actual - budget.amount
        return Insight(
            severity=InsightSeverity.WARNING,
            kind=InsightKind.OVER_BUDGET,
            message=(
                f"You're over budget in {name} by "
                f"{format_currency(overage, currency_symbol)}"
            ),
            category=name,
            amount=overage,
        )
    return None


def generate_insights(
    transactions: Iterable[Transaction],
    budgets: Iterable[Budget],
    now: date,
    *,
    max_insights: int = 3,
    warning_threshold: int = 80,
    sentinel: str = SENTINEL_CATEGORY,
    currency_symbol: str = "$",
) -> list[Insight]:
    """Derive up to ``max_insights`` observations about this month's spending."""
    budgets_now = current_month_budgets(budgets, now)
    expenses_now = current_month_expenses(transactions, now)

    if not budgets_now or not expenses_now:
        logger.debug(
            "insights_not_enough_data",
            budgets=len(budgets_now),
            expenses=len(expenses_now),
        )
        return [not_enough_data()]

    by_category = sum_expenses_by_category(expenses_now, sentinel)
    insights: list[Insight] = []

    top = highest_category(by_category)
    if top is not None:
        category, amount = top
        name = display_category(category)
        insights.append(
            Insight(
                severity=InsightSeverity.INFO,
                kind=InsightKind.TOP_CATEGORY,
                message=(
                    f"Your highest spending category is {name} "
                    f"({format_currency(amount, currency_symbol)})"
                ),
                category=name,
                amount=amount,
            )
        )

    for budget in budgets_now:
        insight = classify_budget(
            budget,
            by_category.get(budget.category, Decimal("0")),
            warning_threshold=warning_threshold,
            currency_symbol=currency_symbol,
        )
        if insight is not None:
            insights.append(insight)

    if not insights:
        insights.append(not_enough_data())

    return insights[:max_insights]
