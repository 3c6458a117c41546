from decimal import Decimal
from rest_framework import serializers


# =============================================================================
# Input Serializers
# =============================================================================

class MonthQuerySerializer(serializers.Serializer):
    """
    Query Parameters:
        month (str): Month in YYYY-MM format, defaults to the current month
    """

    month = serializers.RegexField(
        regex=r'^\d{4}-(0[1-9]|1[0-2])$',
        required=False,
        allow_blank=True,
        help_text='Month in YYYY-MM format',
        error_messages={'invalid': 'Invalid month format. Use YYYY-MM'},
    )


class BudgetSetSerializer(serializers.Serializer):
    category = serializers.CharField(max_length=100)
    limit = serializers.DecimalField(
        max_digits=12,
        decimal_places=2,
        min_value=Decimal('0.00')
    )

    def validate_category(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError('Category cannot be blank')
        return value


# =============================================================================
# Response Serializers
# =============================================================================

class BudgetMapSerializer(serializers.Serializer):
    budgets = serializers.DictField(
        child=serializers.DecimalField(max_digits=12, decimal_places=2)
    )


class GeneratedBudgetsSerializer(BudgetMapSerializer):
    generated = serializers.DictField(
        child=serializers.DecimalField(max_digits=12, decimal_places=2)
    )


class CategoryStatementSerializer(serializers.Serializer):
    category = serializers.CharField()
    spent = serializers.DecimalField(max_digits=14, decimal_places=2)
    budget = serializers.DecimalField(max_digits=14, decimal_places=2)
    remaining = serializers.DecimalField(max_digits=14, decimal_places=2)
    percentage = serializers.FloatField()
    status = serializers.ChoiceField(choices=['ok', 'warning', 'over'])


class StatementSerializer(serializers.Serializer):
    month = serializers.CharField()
    start_date = serializers.DateField()
    previous_month = serializers.CharField()
    next_month = serializers.CharField()
    categories = CategoryStatementSerializer(many=True)
    total_budget = serializers.DecimalField(max_digits=14, decimal_places=2)
    total_spent = serializers.DecimalField(max_digits=14, decimal_places=2)
    total_remaining = serializers.DecimalField(max_digits=14, decimal_places=2)
    total_percentage = serializers.FloatField()
