"""Demo transaction set given to new accounts."""

from datetime import date
from decimal import Decimal

from django.db import transaction

from ..models import Transaction, TransactionSource, TransactionType

DEMO_TRANSACTIONS = [
    (date(2023, 10, 1), 'TechCorp Salary', Decimal('4500.00'), 'Income', TransactionType.INCOME),
    (date(2023, 10, 2), 'Starbucks', Decimal('12.50'), 'Food & Drink', TransactionType.EXPENSE),
    (date(2023, 10, 5), 'Whole Foods', Decimal('145.20'), 'Groceries', TransactionType.EXPENSE),
    (date(2023, 10, 8), 'Netflix', Decimal('15.99'), 'Entertainment', TransactionType.EXPENSE),
    (date(2023, 10, 10), 'Uber', Decimal('24.00'), 'Transport', TransactionType.EXPENSE),
    (date(2023, 10, 15), 'Electric Bill', Decimal('120.00'), 'Utilities', TransactionType.EXPENSE),
    (date(2023, 10, 20), 'Amazon', Decimal('65.50'), 'Shopping', TransactionType.EXPENSE),
    (date(2023, 10, 22), 'Local Bistro', Decimal('85.00'), 'Food & Drink', TransactionType.EXPENSE),
]


@transaction.atomic
def seed_demo_transactions(*, user) -> list[Transaction]:
    """
    Give a user the demo transaction set.

    Accounts that already hold transactions are left untouched.

    Returns:
        The created transactions (empty if nothing was seeded).
    """
    if Transaction.objects.filter(owner=user).exists():
        return []

    return Transaction.objects.bulk_create([
        Transaction(
            owner=user,
            date=tx_date,
            merchant=merchant,
            amount=amount,
            category=category,
            type=tx_type,
            source=TransactionSource.DEMO,
        )
        for tx_date, merchant, amount, category, tx_type in DEMO_TRANSACTIONS
    ])
