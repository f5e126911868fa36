"""Shared fixtures for the spendwise-core test suite."""

from datetime import datetime
from decimal import Decimal

import pytest

from spendwise_core import Budget, Transaction, TransactionType


def make_txn(
    amount,
    when: datetime,
    category=None,
    type: TransactionType = TransactionType.EXPENSE,
    description: str = "Test transaction",
) -> Transaction:
    return Transaction(
        amount=amount,
        description=description,
        category=category,
        type=type,
        date=when,
    )


def income(amount, when: datetime, category=None) -> Transaction:
    return make_txn(amount, when, category, TransactionType.INCOME, "Salary")


def expense(amount, when: datetime, category=None) -> Transaction:
    return make_txn(amount, when, category, TransactionType.EXPENSE, "Purchase")


@pytest.fixture
def now() -> datetime:
    """Reference instant used across tests: mid-March 2024."""
    return datetime(2024, 3, 15, 9, 30)


@pytest.fixture
def march_transactions() -> list[Transaction]:
    """A month of mixed activity plus older history."""
    return [
        income(Decimal("1000"), datetime(2024, 3, 5)),
        expense(Decimal("200"), datetime(2024, 3, 10), "food"),
        expense(Decimal("120.50"), datetime(2024, 3, 12), "transport"),
        expense(Decimal("40"), datetime(2024, 3, 20), "food"),
        expense(Decimal("75"), datetime(2024, 2, 3), "food"),
        income(Decimal("900"), datetime(2024, 2, 1)),
    ]


@pytest.fixture
def march_budgets() -> list[Budget]:
    return [
        Budget(category="food", month="2024-03", amount=Decimal("300")),
        Budget(category="transport", month="2024-03", amount=Decimal("100")),
        Budget(category="food", month="2024-02", amount=Decimal("50")),
    ]
