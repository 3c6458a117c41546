"""
Monthly budget statement.

For one month, expenses are summed per category and compared with the
stored limits:

    percentage = spent / budget * 100   (budget > 0)
               = 100                    (no budget, something spent)
               = 0                      (no budget, nothing spent)

    status     = 'over'    percentage >= 100
               = 'warning' percentage >= 80
               = 'ok'      otherwise
"""

from datetime import date
from decimal import Decimal

from django.db.models import Sum
from django.utils import timezone

from apps.transactions.models import Transaction
from .budget_management import get_budgets

ZERO = Decimal('0.00')
WARNING_THRESHOLD = 80
OVER_THRESHOLD = 100


def parse_month(month: str | None) -> tuple[int, int]:
    """'YYYY-MM' to (year, month); None means the current month."""
    if not month:
        today = timezone.localdate()
        return today.year, today.month
    year, month_number = month.split('-')
    return int(year), int(month_number)


def shift_month(year: int, month: int, delta: int) -> str:
    index = year * 12 + (month - 1) + delta
    return f"{index // 12:04d}-{index % 12 + 1:02d}"


def _percentage(spent: Decimal, budget: Decimal) -> float:
    if budget > 0:
        return float(spent / budget * 100)
    return 100.0 if spent > 0 else 0.0


def _status(percentage: float) -> str:
    if percentage >= OVER_THRESHOLD:
        return 'over'
    if percentage >= WARNING_THRESHOLD:
        return 'warning'
    return 'ok'


def build_statement(*, owner, month: str | None = None) -> dict:
    """
    Spending against budget per category for one month.

    Args:
        owner: User whose transactions and budgets are compared
        month: 'YYYY-MM', defaults to the current month

    Returns:
        dict with month, previous_month, next_month, categories and totals.
    """
    year, month_number = parse_month(month)
    budgets = get_budgets(owner=owner)

    spent_rows = (
        Transaction.objects.filter(owner=owner)
        .expenses()
        .in_month(year, month_number)
        .values('category')
        .annotate(total=Sum('amount'))
    )
    spent = {row['category']: row['total'] for row in spent_rows}

    categories = []
    for category in sorted(set(budgets) | set(spent)):
        category_spent = spent.get(category, ZERO)
        category_budget = budgets.get(category, ZERO)
        percentage = _percentage(category_spent, category_budget)
        categories.append({
            'category': category,
            'spent': category_spent,
            'budget': category_budget,
            'remaining': category_budget - category_spent,
            'percentage': round(percentage, 1),
            'status': _status(percentage),
        })

    total_budget = sum(budgets.values(), ZERO)
    total_spent = sum(spent.values(), ZERO)
    total_percentage = float(total_spent / total_budget * 100) if total_budget > 0 else 0.0

    return {
        'month': f"{year:04d}-{month_number:02d}",
        'start_date': date(year, month_number, 1),
        'previous_month': shift_month(year, month_number, -1),
        'next_month': shift_month(year, month_number, 1),
        'categories': categories,
        'total_budget': total_budget,
        'total_spent': total_spent,
        'total_remaining': total_budget - total_spent,
        'total_percentage': round(total_percentage, 1),
    }
