"""Record store contracts and in-memory reference implementations.

The engine never talks to storage itself; a caller fetches snapshots
from a transaction store and a budget store and hands them over. The
protocols below describe what those collaborators must provide. The
in-memory stores back the tests and the example script and persist
nothing.
"""

from collections.abc import Iterable
from decimal import Decimal
from typing import Any, Optional, Protocol, Union
from uuid import uuid4

import structlog

from .exceptions import (
    BudgetNotFoundError,
    DuplicateBudgetError,
    InvalidMonthError,
    TransactionNotFoundError,
    ValidationError,
)
from .models import MONTH_KEY_PATTERN, Budget, Transaction

logger = structlog.get_logger()

Amount = Union[Decimal, int, str, float]


class TransactionStore(Protocol):
    """Source of transaction snapshots."""

    def list_transactions(
        self,
        limit: Optional[int] = None,
        page: int = 1,
    ) -> list[Transaction]:  # pragma: no cover - interface
        ...


class BudgetStore(Protocol):
    """Source of budget snapshots."""

    def list_budgets(
        self,
        category: Optional[str] = None,
        month: Optional[str] = None,
    ) -> list[Budget]:  # pragma: no cover - interface
        ...


def _check_month(month: str) -> str:
    if not MONTH_KEY_PATTERN.match(month):
        raise InvalidMonthError(month)
    return month


class InMemoryTransactionStore:
    """Transactions keyed by a store-assigned id.

    Listing returns the newest transactions first, the way a ledger view
    shows them; transactions on the same instant keep insertion order.
    """

    def __init__(self, transactions: Iterable[Transaction] = ()):
        self._transactions: dict[str, Transaction] = {}
        for transaction in transactions:
            self.add(transaction)

    def add(self, transaction: Transaction) -> Transaction:
        """Store a transaction, assigning an id when it has none.

        Returns:
            The stored transaction, carrying its id.
        """
        if transaction.id is None:
            transaction = transaction.model_copy(update={"id": uuid4().hex})
        self._transactions[transaction.id] = transaction
        logger.debug("transaction_created", transaction_id=transaction.id)
        return transaction

    def get(self, transaction_id: str) -> Transaction:
        try:
            return self._transactions[transaction_id]
        except KeyError:
            raise TransactionNotFoundError(transaction_id) from None

    def update(self, transaction_id: str, changes: dict[str, Any]) -> Transaction:
        """Apply field changes to a stored transaction.

        The merged record is validated again, so an update cannot store a
        negative amount or a blank description. The id never changes.
        """
        current = self.get(transaction_id)
        transaction = Transaction.model_validate(
            {**current.model_dump(), **changes, "id": transaction_id}
        )
        self._transactions[transaction_id] = transaction
        logger.debug(
            "transaction_updated",
            transaction_id=transaction_id,
            fields=sorted(changes),
        )
        return transaction

    def delete(self, transaction_id: str) -> Transaction:
        transaction = self.get(transaction_id)
        del self._transactions[transaction_id]
        logger.debug("transaction_deleted", transaction_id=transaction_id)
        return transaction

    def list_transactions(
        self,
        limit: Optional[int] = None,
        page: int = 1,
    ) -> list[Transaction]:
        """Transactions ordered by date, newest first.

        Args:
            limit: Page size; None returns every transaction
            page: 1-based page number, used only with ``limit``

        Raises:
            ValidationError: If ``limit`` or ``page`` is below 1.
        """
        if limit is not None and limit < 1:
            raise ValidationError("limit must be at least 1", field="limit", value=limit)
        if page < 1:
            raise ValidationError("page must be at least 1", field="page", value=page)

        ordered = sorted(
            self._transactions.values(), key=lambda t: t.date, reverse=True
        )
        if limit is None:
            return ordered
        start = (page - 1) * limit
        return ordered[start:start + limit]

    def __len__(self) -> int:
        return len(self._transactions)


class InMemoryBudgetStore:
    """Budgets keyed by (category, month); at most one per key."""

    def __init__(self, budgets: Iterable[Budget] = ()):
        self._budgets: dict[tuple[str, str], Budget] = {}
        for budget in budgets:
            key = (budget.category, budget.month)
            if key in self._budgets:
                raise DuplicateBudgetError(budget.category, budget.month)
            self._budgets[key] = budget

    def upsert(self, category: str, month: str, amount: Amount) -> tuple[Budget, bool]:
        """Create the budget, or update its amount if it already exists.

        Returns:
            The stored budget and whether it was newly created.
        """
        _check_month(month)
        created = (category, month) not in self._budgets
        budget = Budget(category=category, month=month, amount=amount)
        self._budgets[(category, month)] = budget
        logger.debug(
            "budget_created" if created else "budget_updated",
            category=category,
            month=month,
        )
        return budget, created

    def get(self, category: str, month: str) -> Budget:
        _check_month(month)
        try:
            return self._budgets[(category, month)]
        except KeyError:
            raise BudgetNotFoundError(category, month) from None

    def update(self, category: str, month: str, amount: Amount) -> Budget:
        """Change the amount of an existing budget."""
        self.get(category, month)
        budget = Budget(category=category, month=month, amount=amount)
        self._budgets[(category, month)] = budget
        logger.debug("budget_updated", category=category, month=month)
        return budget

    def delete(self, category: str, month: str) -> Budget:
        budget = self.get(category, month)
        del self._budgets[(category, month)]
        logger.debug("budget_deleted", category=category, month=month)
        return budget

    def list_budgets(
        self,
        category: Optional[str] = None,
        month: Optional[str] = None,
    ) -> list[Budget]:
        """All budgets matching the optional filters, ordered by (category, month)."""
        if month:
            _check_month(month)
        return [
            budget
            for key, budget in sorted(self._budgets.items())
            if (not category or budget.category == category)
            and (not month or budget.month == month)
        ]

    def __len__(self) -> int:
        return len(self._budgets)
