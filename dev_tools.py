#!/usr/bin/env python3
"""
Development tools for the Expense API.
Connection checks, sample data, quick stats.
"""

import argparse
import random
import sys
from collections import Counter
from typing import Optional

from expense_api import database
from expense_api.config import Settings
from expense_api.errors import PersistenceError, StartupError
from expense_api.repository import ExpenseRepository

SAMPLE_EXPENSES = [
    {"description": "Groceries", "amount": 45000, "category": "food"},
    {"description": "Coffee", "amount": 1000, "category": "food"},
    {"description": "Restaurant", "amount": 67000, "category": "food"},
    {"description": "Fuel", "amount": 52000, "category": "transport"},
    {"description": "Train ticket", "amount": 15000, "category": "transport"},
    {"description": "Electric bill", "amount": 125000, "category": "bills"},
    {"description": "Internet bill", "amount": 49000, "category": "bills"},
    {"description": "Cinema", "amount": 25000, "category": "entertainment"},
    {"description": "Pharmacy", "amount": 18000, "category": "health"},
]


def create_sample_expenses(repository: ExpenseRepository, count: int = 20) -> int:
    """Insert ``count`` randomised sample expenses."""
    for i in range(count):
        sample = random.choice(SAMPLE_EXPENSES)
        repository.create(
            sample["amount"] + random.randint(-500, 500),
            f"{sample['description']} {i + 1}",
            sample["category"],
        )
    print(f"💰 Created {count} sample expenses")
    return count


def show_stats(repository: ExpenseRepository, category: Optional[str] = None) -> Counter:
    expenses = repository.list(category)
    per_category = Counter(expense.category for expense in expenses)

    print("📊 Expense Statistics:")
    print(f"   Expenses: {len(expenses)}")
    print(f"   Total amount: {sum(expense.amount for expense in expenses)}")
    for name, count in per_category.most_common():
        print(f"   {name}: {count}")
    return per_category


def main(argv=None) -> int:
    """Main CLI interface."""
    parser = argparse.ArgumentParser(description="Expense API Development Tools")
    parser.add_argument("command", choices=["ping", "demo", "stats"],
                        help="Command to execute")
    parser.add_argument("--expenses", type=int, default=20,
                        help="Number of sample expenses to create")
    parser.add_argument("--category", default=None,
                        help="Only count expenses in this category (stats)")

    args = parser.parse_args(argv)

    try:
        engine = database.connect(Settings.from_env())
    except StartupError as e:
        print(f"❌ {e}")
        return 1

    repository = ExpenseRepository(engine)
    try:
        if args.command == "ping":
            print("✅ Database connection OK")

        elif args.command == "demo":
            create_sample_expenses(repository, args.expenses)
            show_stats(repository)
            print("\n🎉 Demo data ready!")

        elif args.command == "stats":
            show_stats(repository, args.category)
    except PersistenceError as e:
        print(f"❌ {e}")
        return 1
    finally:
        database.close(engine)
    return 0


if __name__ == "__main__":
    sys.exit(main())
