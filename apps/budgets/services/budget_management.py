"""Stored per-category limits."""

import logging
from decimal import Decimal

from django.db import transaction

from ..exceptions import BudgetNotFoundError
from ..models import CategoryBudget

logger = logging.getLogger(__name__)

DEFAULT_BUDGETS = {
    'Food & Drink': Decimal('500.00'),
    'Groceries': Decimal('400.00'),
    'Transport': Decimal('200.00'),
    'Utilities': Decimal('300.00'),
    'Entertainment': Decimal('150.00'),
    'Shopping': Decimal('200.00'),
    'Rent/Mortgage': Decimal('1500.00'),
}


def ensure_default_budgets(*, owner) -> bool:
    """Store the default limits if the owner has no budgets. Returns True if stored."""
    if CategoryBudget.objects.filter(owner=owner).exists():
        return False

    CategoryBudget.objects.bulk_create(
        [CategoryBudget(owner=owner, category=c, limit=l) for c, l in DEFAULT_BUDGETS.items()],
        ignore_conflicts=True,
    )
    logger.info("Stored default budgets for user %s", owner.id)
    return True


@transaction.atomic
def get_budgets(*, owner) -> dict:
    """Return ``{category: limit}`` sorted by category, storing defaults on first use."""
    ensure_default_budgets(owner=owner)
    return {
        b.category: b.limit
        for b in CategoryBudget.objects.filter(owner=owner).order_by('category')
    }


@transaction.atomic
def set_budget(*, owner, category: str, limit: Decimal) -> CategoryBudget:
    """Create or replace the limit for one category."""
    ensure_default_budgets(owner=owner)
    budget, _ = CategoryBudget.objects.update_or_create(
        owner=owner,
        category=category,
        defaults={'limit': limit},
    )
    return budget


@transaction.atomic
def merge_budgets(*, owner, limits: dict) -> dict:
    """
    Overwrite the given categories and keep all others.

    Returns:
        The owner's full budget map after the merge.
    """
    ensure_default_budgets(owner=owner)
    for category, limit in limits.items():
        CategoryBudget.objects.update_or_create(
            owner=owner,
            category=category,
            defaults={'limit': limit},
        )
    return get_budgets(owner=owner)


def delete_budget(*, owner, category: str) -> None:
    """
    Remove the limit for one category.

    Raises:
        BudgetNotFoundError: If the owner has no budget for the category.
    """
    deleted, _ = CategoryBudget.objects.filter(owner=owner, category=category).delete()
    if not deleted:
        raise BudgetNotFoundError(f"No budget for category '{category}'.")
