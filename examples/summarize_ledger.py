#!/usr/bin/env python3
"""
Summarize a Ledger

Reads transactions and budgets from JSON files, runs the summary engine
and prints the dashboard summary and spending insights.

Usage:
    python examples/summarize_ledger.py transactions.json
    python examples/summarize_ledger.py transactions.json --budgets budgets.json
    python examples/summarize_ledger.py transactions.json --budgets budgets.json --now 2024-03-15

File formats:
    transactions.json: [{"amount": "12.50", "description": "Lunch",
                         "category": "food", "type": "expense",
                         "date": "2024-03-10T12:00:00"}, ...]
    budgets.json:      [{"category": "food", "month": "2024-03", "amount": "300"}, ...]
"""

import argparse
import json
import sys
from datetime import datetime
from pathlib import Path

import structlog

from spendwise_core import (
    Budget,
    SpendwiseConfig,
    SummaryEngine,
    Transaction,
    configure_logging,
)
from spendwise_core.formatting import format_currency
from spendwise_core.stores import InMemoryBudgetStore, InMemoryTransactionStore

logger = structlog.get_logger()


def load_records(path: Path, model):
    with path.open(encoding="utf-8") as fp:
        return [model.model_validate(item) for item in json.load(fp)]


def print_summary(summary, insights, symbol: str) -> None:
    print("=" * 60)
    print(f"Total balance:  {format_currency(summary.total_balance, symbol)}")
    print(f"Income:         {format_currency(summary.total_income, symbol)}")
    print(f"Expenses:       {format_currency(summary.total_expense, symbol)}")

    print("\nIncome vs expenses")
    for point in summary.monthly_trend:
        print(
            f"  {point.label:<10} +{format_currency(point.income, symbol):>12}"
            f" -{format_currency(point.expense, symbol):>12}"
        )

    print("\nExpense categories")
    for slice_ in summary.category_breakdown:
        print(f"  {slice_.category:<20} {format_currency(slice_.total, symbol):>12}")

    print("\nBudget vs actual")
    if not summary.budget_comparison:
        print("  No budget data available for current month")
    for row in summary.budget_comparison:
        flag = "OVER" if row.over_budget else "ok"
        print(
            f"  {row.category:<20} {format_currency(row.budgeted, symbol):>12}"
            f" {format_currency(row.actual, symbol):>12}  {flag}"
        )

    print("\nSpending insights")
    for insight in insights:
        print(f"  [{insight.severity.value}] {insight.message}")
    print("=" * 60)


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Print dashboard analytics for a ledger of transactions and budgets",
    )
    parser.add_argument(
        "transactions",
        type=Path,
        help="JSON file with a list of transactions",
    )
    parser.add_argument(
        "--budgets", "-b",
        type=Path,
        help="JSON file with a list of budgets",
    )
    parser.add_argument(
        "--now",
        type=datetime.fromisoformat,
        default=None,
        help="Reference date deciding the current month (default: today)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the summary and insights as JSON",
    )
    args = parser.parse_args()

    config = SpendwiseConfig()
    configure_logging(config)

    if not args.transactions.exists():
        print(f"Error: {args.transactions} does not exist")
        sys.exit(1)

    transactions = InMemoryTransactionStore(load_records(args.transactions, Transaction))
    budgets = InMemoryBudgetStore(
        load_records(args.budgets, Budget) if args.budgets else []
    )
    now = args.now or datetime.now()
    logger.info("ledger_loaded", transactions=len(transactions), budgets=len(budgets))

    engine = SummaryEngine(config.engine)
    summary = engine.compute_summary(
        transactions.list_transactions(), budgets.list_budgets(), now
    )
    insights = engine.compute_insights(
        transactions.list_transactions(), budgets.list_budgets(), now
    )

    if args.json:
        print(json.dumps(
            {
                "summary": summary.model_dump(mode="json"),
                "insights": [i.model_dump(mode="json") for i in insights],
            },
            indent=2,
        ))
    else:
        print_summary(summary, insights, config.engine.currency_symbol)


if __name__ == "__main__":
    main()
