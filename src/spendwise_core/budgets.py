"""Budget versus actual comparison for the current month."""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal

import structlog

from .aggregation import (
    current_month_budgets,
    current_month_expenses,
    sum_expenses_by_category,
)
from .formatting import display_category
from .models import (
    SENTINEL_CATEGORY,
    Budget,
    BudgetComparisonRow,
    Transaction,
    month_key,
)

logger = structlog.get_logger()


def compare_budgets(
    transactions: Iterable[Transaction],
    budgets: Iterable[Budget],
    now: date,
    sentinel: str = SENTINEL_CATEGORY,
) -> list[BudgetComparisonRow]:
    """Compare this month's budgets with this month's expenses.

    Every current budget yields a row. Expense categories without a budget
    yield a row with ``budgeted=0`` that is always flagged over budget.
    Without any current budget there is nothing to compare against and
    the result is empty. Rows are sorted by display name.
    """
    budgets_now = current_month_budgets(budgets, now)
    if not budgets_now:
        return []

    remaining = sum_expenses_by_category(
        current_month_expenses(transactions, now), sentinel
    )

    rows: list[BudgetComparisonRow] = []
    for budget in budgets_now:
        actual = remaining.pop(budget.category, Decimal("0"))
        rows.append(
            BudgetComparisonRow(
                category=display_category(budget.category),
                budgeted=budget.amount,
                actual=actual,
                over_budget=actual > budget.amount,
            )
        )

    unbudgeted = len(remaining)
    for category, actual in remaining.items():
        rows.append(
            BudgetComparisonRow(
                category=display_category(category),
                budgeted=Decimal("0"),
                actual=actual,
                over_budget=True,
            )
        )

    rows.sort(key=lambda row: row.category.casefold())
    logger.debug(
        "budget_comparison_built",
        month=month_key(now),
        budgeted=len(budgets_now),
        unbudgeted=unbudgeted,
    )
    return rows
