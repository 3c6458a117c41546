"""
Analytics Module
=================

Read-only aggregates over a user's transactions for dashboards and
charts.

Classes:
    FinanceAnalytics: Static methods for the derived values.

Example:
    Getting dashboard numbers::

        from apps.analytics.analytics import FinanceAnalytics

        summary = FinanceAnalytics.summary(owner=user)
        print(f"Balance: {summary['balance']}")

        for slice in FinanceAnalytics.category_breakdown(owner=user):
            print(slice['category'], slice['value'], slice['color'])

Note:
    All methods return plain dictionaries or lists, ready for the
    response serializers.
"""

from decimal import Decimal
from itertools import cycle

from django.db.models import Sum, Count, F, Q
from django.db.models.functions import Coalesce, TruncMonth
from apps.transactions.models import Transaction, TransactionType

ZERO = Decimal('0.00')

# Chart palette, assigned to categories in order
CATEGORY_COLORS = ['#10b981', '#3b82f6', '#f59e0b', '#ef4444', '#8b5cf6', '#ec4899']


class FinanceAnalytics:
    """
    Aggregate queries for analytics endpoints.

    Methods:
        summary: Income, expense, balance and count.
        category_breakdown: Expense totals per category with chart colors.
        cash_flow: Income and expense per day or month.
        dashboard: All of the above in one payload.
    """

    @staticmethod
    def _transactions(owner, date_from=None, date_to=None):
        queryset = Transaction.objects.filter(owner=owner)
        if date_from:
            queryset = queryset.filter(date__gte=date_from)
        if date_to:
            queryset = queryset.filter(date__lte=date_to)
        return queryset

    @staticmethod
    def summary(owner, date_from=None, date_to=None):
        """
        Totals for the user's transactions.

        Args:
            owner (User): Whose transactions to aggregate.
            date_from (date, optional): Include transactions on or after this date.
            date_to (date, optional): Include transactions on or before this date.

        Returns:
            dict: Dictionary containing:
                - total_income (Decimal)
                - total_expense (Decimal)
                - balance (Decimal): income minus expense
                - transaction_count (int)
        """
        totals = FinanceAnalytics._transactions(owner, date_from, date_to).aggregate(
            total_income=Coalesce(Sum('amount', filter=Q(type=TransactionType.INCOME)), ZERO),
            total_expense=Coalesce(Sum('amount', filter=Q(type=TransactionType.EXPENSE)), ZERO),
            transaction_count=Count('id'),
        )
        totals['balance'] = totals['total_income'] - totals['total_expense']
        return totals

    @staticmethod
    def category_breakdown(owner, date_from=None, date_to=None):
        """
        Expense totals per category for a pie chart.

        Categories keep the order in which they first appear, oldest
        transaction first. Colors cycle through
        ``CATEGORY_COLORS``.

        Returns:
            list[dict]: Each with ``category``, ``value`` and ``color``.
        """
        expenses = (
            FinanceAnalytics._transactions(owner, date_from, date_to)
            .expenses()
            .order_by('date', 'created_at')
            .values_list('category', 'amount')
        )

        totals = {}
        for category, amount in expenses:
            totals[category] = totals.get(category, ZERO) + amount

        return [
            {'category': category, 'value': value, 'color': color}
            for (category, value), color in zip(totals.items(), cycle(CATEGORY_COLORS))
        ]

    @staticmethod
    def cash_flow(owner, granularity='day', date_from=None, date_to=None):
        """
        Income and expense per period for a bar chart.

        Args:
            owner (User): Whose transactions to aggregate.
            granularity (str): 'day' (period is an ISO date) or 'month'
                (period is YYYY-MM).

        Returns:
            list[dict]: Chronologically sorted ``{period, income, expense}``.

        Raises:
            ValueError: If granularity is not 'day' or 'month'.
        """
        queryset = FinanceAnalytics._transactions(owner, date_from, date_to)

        if granularity == 'day':
            bucket = F('date')
        elif granularity == 'month':
            bucket = TruncMonth('date')
        else:
            raise ValueError(f"Invalid granularity: {granularity}")

        rows = queryset.annotate(bucket=bucket).values('bucket').annotate(
            income=Coalesce(Sum('amount', filter=Q(type=TransactionType.INCOME)), ZERO),
            expense=Coalesce(Sum('amount', filter=Q(type=TransactionType.EXPENSE)), ZERO),
        ).order_by('bucket')

        period_format = '%Y-%m-%d' if granularity == 'day' else '%Y-%m'
        return [
            {
                'period': row['bucket'].strftime(period_format),
                'income': row['income'],
                'expense': row['expense'],
            }
            for row in rows
        ]

    @staticmethod
    def dashboard(owner):
        """Summary, category breakdown and daily cash flow in one payload."""
        return {
            'summary': FinanceAnalytics.summary(owner),
            'category_breakdown': FinanceAnalytics.category_breakdown(owner),
            'cash_flow': FinanceAnalytics.cash_flow(owner, granularity='day'),
        }
