"""Custom exceptions for spendwise-core.

All exceptions inherit from SpendwiseError. The summary engine itself does
not raise over well-formed records; these errors come from the record
stores and the configuration layer.

    SpendwiseError
    ├── ValidationError
    │   ├── InvalidMonthError        month key is not YYYY-MM
    │   └── DuplicateBudgetError     second budget for a (category, month)
    ├── RecordNotFoundError
    │   ├── BudgetNotFoundError
    │   └── TransactionNotFoundError
    └── ConfigurationError

Example:
    try:
        store.update("food", "2024-03", Decimal("250"))
    except BudgetNotFoundError:
        store.upsert("food", "2024-03", Decimal("250"))
    except SpendwiseError as e:
        logger.error("budget_update_failed", error=str(e), **e.details)
"""

from collections.abc import Iterable
from typing import Any, Optional


class SpendwiseError(Exception):
    """Base exception for all spendwise-core errors.

    Attributes:
        message: Human-readable error description.
        details: Structured context, suitable for passing to a log call.
        recoverable: Whether fixing the input and retrying can succeed.
    """

    recoverable_by_default = False

    def __init__(
        self,
        message: str,
        *,
        details: Optional[dict[str, Any]] = None,
        recoverable: Optional[bool] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details = dict(details or {})
        self.recoverable = (
            self.recoverable_by_default if recoverable is None else recoverable
        )

    def _add_details(self, **context: Any) -> None:
        """Record context entries that are set; None values are skipped."""
        self.details.update({k: v for k, v in context.items() if v is not None})

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"details={self.details!r}, "
            f"recoverable={self.recoverable!r})"
        )


class ValidationError(SpendwiseError):
    """A record was rejected by a store rule.

    Attributes:
        field: Name of the rejected record field.
        value: The rejected value.
    """

    recoverable_by_default = True

    def __init__(
        self,
        message: str,
        *,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, details=details)
        self.field = field
        self.value = value
        self._add_details(field=field, value=value)


class InvalidMonthError(ValidationError):
    """A month key is not in ``YYYY-MM`` form (month 01-12).

    Example:
        >>> raise InvalidMonthError("2024-3")
        InvalidMonthError: Month must be in YYYY-MM format, got '2024-3'
    """

    expected_format = "YYYY-MM"

    def __init__(self, month: str) -> None:
        super().__init__(
            f"Month must be in {self.expected_format} format, got {month!r}",
            field="month",
            value=month,
        )
        self.month = month
        self._add_details(expected_format=self.expected_format)


class DuplicateBudgetError(ValidationError):
    """A second budget was offered for a (category, month) that has one."""

    def __init__(self, category: str, month: str) -> None:
        super().__init__(
            f"Budget for {category!r} in {month} already exists",
            field="category",
            value=category,
        )
        self.category = category
        self.month = month
        self._add_details(month=month)


class RecordNotFoundError(SpendwiseError):
    """A store lookup matched no record.

    Attributes:
        record_type: "budget" or "transaction".
        key: The lookup key, as stored in ``details``.
    """

    recoverable_by_default = True
    record_type = "record"

    def __init__(self, key: dict[str, Any]) -> None:
        shown = ", ".join(f"{k}={v!r}" for k, v in key.items())
        super().__init__(f"{self.record_type.capitalize()} not found ({shown})")
        self.key = key
        self._add_details(record_type=self.record_type, **key)


class BudgetNotFoundError(RecordNotFoundError):
    """No budget exists for a (category, month) pair."""

    record_type = "budget"

    def __init__(self, category: str, month: str) -> None:
        super().__init__({"category": category, "month": month})
        self.category = category
        self.month = month


class TransactionNotFoundError(RecordNotFoundError):
    """No transaction has the given id."""

    record_type = "transaction"

    def __init__(self, transaction_id: str) -> None:
        super().__init__({"transaction_id": transaction_id})
        self.transaction_id = transaction_id


class ConfigurationError(SpendwiseError):
    """A setting holds a value outside its allowed set.

    Attributes:
        setting: Environment variable or settings field at fault.
        actual: The value found.
        allowed: The values that would have been accepted.
    """

    def __init__(
        self,
        setting: str,
        actual: Any,
        allowed: Iterable[str],
    ) -> None:
        allowed = tuple(allowed)
        super().__init__(
            f"Invalid value {actual!r} for {setting}; "
            f"expected one of: {', '.join(allowed)}"
        )
        self.setting = setting
        self.actual = actual
        self.allowed = allowed
        self._add_details(setting=setting, actual=actual, allowed=list(allowed))


__all__ = [
    "SpendwiseError",
    "ValidationError",
    "InvalidMonthError",
    "DuplicateBudgetError",
    "RecordNotFoundError",
    "BudgetNotFoundError",
    "TransactionNotFoundError",
    "ConfigurationError",
]
