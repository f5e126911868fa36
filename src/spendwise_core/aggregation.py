"""Totals, monthly trend and category breakdown aggregators.

Each function is a pure fold over a transaction snapshot. Grouping uses
plain dicts, whose insertion order decides ties when ranking categories.
"""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal
from typing import NamedTuple

from .formatting import display_category
from .models import (
    SENTINEL_CATEGORY,
    Budget,
    CategorySlice,
    MonthlyPoint,
    Transaction,
    month_key,
)

ZERO = Decimal("0")


class Totals(NamedTuple):
    income: Decimal
    expense: Decimal

    @property
    def balance(self) -> Decimal:
        return self.income - self.expense


def calculate_totals(transactions: Iterable[Transaction]) -> Totals:
    """Sum income and expense magnitudes in a single pass."""
    income = ZERO
    expense = ZERO
    for txn in transactions:
        if txn.is_income:
            income += txn.amount
        else:
            expense += txn.amount
    return Totals(income=income, expense=expense)


def monthly_trend(
    transactions: Iterable[Transaction],
    window: int = 6,
) -> list[MonthlyPoint]:
    """Group transactions into calendar months, keeping the latest ``window``.

    Points are ordered by (year, month), never by label text, since
    "Apr 2024" sorts before "Mar 2023" as a string.
    """
    buckets: dict[tuple[int, int], list[Decimal]] = {}
    for txn in transactions:
        sums = buckets.setdefault((txn.date.year, txn.date.month), [ZERO, ZERO])
        if txn.is_income:
            sums[0] += txn.amount
        else:
            sums[1] += txn.amount

    points = [
        MonthlyPoint(year=year, month=month, income=income, expense=expense)
        for (year, month), (income, expense) in sorted(buckets.items())
    ]
    return points[-window:]


def sum_expenses_by_category(
    transactions: Iterable[Transaction],
    sentinel: str = SENTINEL_CATEGORY,
) -> dict[str, Decimal]:
    """Sum expense magnitudes per raw category key, in first-seen order."""
    totals: dict[str, Decimal] = {}
    for txn in transactions:
        if not txn.is_expense:
            continue
        category = txn.effective_category(sentinel)
        totals[category] = totals.get(category, ZERO) + txn.amount
    return totals


def category_breakdown(
    transactions: Iterable[Transaction],
    palette_size: int = 10,
    sentinel: str = SENTINEL_CATEGORY,
) -> list[CategorySlice]:
    """Rank expense categories by total, highest first.

    ``sorted`` is stable, so equal totals keep first-seen order. The color
    index follows the position in the ranked output.
    """
    totals = sum_expenses_by_category(transactions, sentinel)
    ranked = sorted(totals.items(), key=lambda item: item[1], reverse=True)
    return [
        CategorySlice(
            category=display_category(category),
            total=total,
            color_index=position % palette_size,
        )
        for position, (category, total) in enumerate(ranked)
    ]


def current_month_budgets(budgets: Iterable[Budget], now: date) -> list[Budget]:
    """Budgets whose month key matches the month of ``now``."""
    current = month_key(now)
    return [budget for budget in budgets if budget.month == current]


def current_month_expenses(
    transactions: Iterable[Transaction],
    now: date,
) -> list[Transaction]:
    """Expense transactions dated anywhere in the calendar month of ``now``.

    Matching on (year, month) includes the whole of the last day and does
    not require ``now`` and the transaction dates to share a timezone.
    """
    period = (now.year, now.month)
    return [
        txn
        for txn in transactions
        if txn.is_expense and (txn.date.year, txn.date.month) == period
    ]
