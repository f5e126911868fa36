"""Tests for the budget comparison engine."""

from datetime import datetime
from decimal import Decimal

from conftest import expense, income

from spendwise_core.budgets import compare_budgets
from spendwise_core.models import Budget


def food_budget(amount: str = "300", month: str = "2024-03") -> Budget:
    return Budget(category="food", month=month, amount=Decimal(amount))


class TestCompareBudgets:
    """Test suite for compare_budgets."""

    def test_no_budgets_gives_empty_comparison(self, now, march_transactions):
        """Without budgets there is nothing to compare, and no error."""
        assert compare_budgets(march_transactions, [], now) == []

    def test_no_current_month_budgets_gives_empty_comparison(self, now, march_transactions):
        """Budgets for other months are ignored."""
        budgets = [food_budget(month="2024-02")]

        assert compare_budgets(march_transactions, budgets, now) == []

    def test_under_budget_row(self, now):
        """A budget with lower spend is not over budget."""
        txns = [expense(Decimal("200"), datetime(2024, 3, 10), "food")]

        rows = compare_budgets(txns, [food_budget()], now)

        assert len(rows) == 1
        row = rows[0]
        assert row.category == "Food"
        assert row.budgeted == Decimal("300")
        assert row.actual == Decimal("200")
        assert row.over_budget is False
        assert row.remaining == Decimal("100")

    def test_over_budget_row(self, now):
        """Spending above the budget is flagged."""
        txns = [expense(Decimal("350"), datetime(2024, 3, 10), "food")]

        row = compare_budgets(txns, [food_budget()], now)[0]

        assert (row.budgeted, row.actual, row.over_budget) == (
            Decimal("300"),
            Decimal("350"),
            True,
        )
        assert row.difference == Decimal("50")
        assert row.remaining == Decimal("0")

    def test_spending_exactly_the_budget_is_not_over(self, now):
        """actual == budgeted is within budget."""
        txns = [expense(Decimal("300"), datetime(2024, 3, 10), "food")]

        assert compare_budgets(txns, [food_budget()], now)[0].over_budget is False

    def test_budget_without_spending_has_zero_actual(self, now):
        """A budgeted category with no expenses shows actual 0."""
        row = compare_budgets([], [food_budget()], now)[0]

        assert row.actual == Decimal("0")
        assert row.over_budget is False

    def test_unbudgeted_category_is_always_over(self, now):
        """Expenses without a budget get a zero-budget row flagged over."""
        txns = [
            expense(Decimal("100"), datetime(2024, 3, 10), "food"),
            expense(Decimal("80"), datetime(2024, 3, 11), "travel"),
        ]

        rows = compare_budgets(txns, [food_budget()], now)

        travel = next(r for r in rows if r.category == "Travel")
        assert travel.budgeted == Decimal("0")
        assert travel.actual == Decimal("80")
        assert travel.over_budget is True

    def test_zero_budget_zero_spend_is_not_over(self, now):
        """0 > 0 is false, so a zero budget with no spend is fine."""
        rows = compare_budgets([], [food_budget("0")], now)

        assert rows[0].over_budget is False

    def test_zero_budget_with_spend_is_over(self, now):
        """Any positive spend against a zero budget is over."""
        txns = [expense(Decimal("0.01"), datetime(2024, 3, 2), "food")]

        assert compare_budgets(txns, [food_budget("0")], now)[0].over_budget is True

    def test_other_months_and_income_do_not_count(self, now):
        """Only current-month expenses contribute to actual."""
        txns = [
            expense(Decimal("100"), datetime(2024, 3, 10), "food"),
            expense(Decimal("999"), datetime(2024, 2, 10), "food"),
            income(Decimal("500"), datetime(2024, 3, 10), "food"),
        ]

        row = compare_budgets(txns, [food_budget()], now)[0]

        assert row.actual == Decimal("100")

    def test_rows_sorted_alphabetically(self, now):
        """Rows are ordered by display name, case-insensitively."""
        budgets = [
            Budget(category="utilities", month="2024-03", amount=Decimal("90")),
            Budget(category="Bills", month="2024-03", amount=Decimal("50")),
        ]
        txns = [
            expense(Decimal("10"), datetime(2024, 3, 3), "groceries"),
            expense(Decimal("10"), datetime(2024, 3, 3), None),
            expense(Decimal("10"), datetime(2024, 3, 3), "art"),
        ]

        rows = compare_budgets(txns, budgets, now)

        assert [r.category for r in rows] == [
            "Art",
            "Bills",
            "Groceries",
            "Uncategorized",
            "Utilities",
        ]

    def test_one_row_per_category(self, now, march_transactions, march_budgets):
        """The union of budgeted and spent categories, without duplicates."""
        txns = march_transactions + [
            expense(Decimal("12"), datetime(2024, 3, 14), "coffee"),
        ]

        rows = compare_budgets(txns, march_budgets, now)
        names = [r.category for r in rows]

        assert sorted(names) == ["Coffee", "Food", "Transport"]
        assert len(names) == len(set(names))

    def test_inputs_are_not_mutated(self, now, march_transactions, march_budgets):
        """The snapshots passed in are left untouched."""
        txns_before = list(march_transactions)
        budgets_before = list(march_budgets)

        compare_budgets(march_transactions, march_budgets, now)

        assert march_transactions == txns_before
        assert march_budgets == budgets_before
