"""Transaction CRUD helpers and balance calculation."""

from decimal import Decimal
from uuid import UUID

from django.db import transaction
from django.db.models import Sum, Q
from django.db.models.functions import Coalesce
from django.utils import timezone

from ..exceptions import TransactionNotFoundError
from ..models import Transaction, TransactionType, TransactionSource, ReviewStatus

ZERO = Decimal('0.00')


def create_transaction(
    *,
    owner,
    merchant: str,
    amount: Decimal,
    date=None,
    category: str = 'General',
    type: str = TransactionType.EXPENSE,
    description: str = 'Manual Entry',
    source: str = TransactionSource.MANUAL,
) -> Transaction:
    """Create a transaction, defaulting the date to today."""
    return Transaction.objects.create(
        owner=owner,
        merchant=merchant,
        amount=amount,
        date=date or timezone.localdate(),
        category=category or 'General',
        type=type,
        description=description,
        source=source,
    )


def calculate_balance(*, owner) -> dict:
    """
    Total income, total expense and their difference for one user.

    Returns:
        dict with ``income``, ``expense`` and ``balance`` as Decimals.
    """
    totals = Transaction.objects.filter(owner=owner).aggregate(
        income=Coalesce(Sum('amount', filter=Q(type=TransactionType.INCOME)), ZERO),
        expense=Coalesce(Sum('amount', filter=Q(type=TransactionType.EXPENSE)), ZERO),
    )
    return {
        'income': totals['income'],
        'expense': totals['expense'],
        'balance': totals['income'] - totals['expense'],
    }


@transaction.atomic
def set_review_status(*, owner, transaction_id: UUID, status: str) -> Transaction:
    """
    Record the user's verdict on an anomaly flag.

    Raises:
        TransactionNotFoundError: If the transaction is not the owner's.
    """
    try:
        tx = (
            Transaction.objects
            .select_for_update()
            .get(id=transaction_id, owner=owner)
        )
    except Transaction.DoesNotExist:
        raise TransactionNotFoundError()

    if status not in ReviewStatus.values:
        raise ValueError(f"Unknown review status: {status}")

    tx.review_status = status
    tx.save(update_fields=['review_status', 'updated_at'])
    return tx
