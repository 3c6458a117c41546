"""
Serializers for analytics app.

Input Serializers:
    DateRangeQuerySerializer - Validates date range parameters
    CashFlowQuerySerializer - Adds granularity

Response Serializers:
    SummarySerializer - Income, expense, balance
    CategorySliceSerializer - One pie chart slice
    CashFlowBucketSerializer - One bar chart bucket
    DashboardResponseSerializer - Dashboard payload
"""

from rest_framework import serializers


# =============================================================================
# Input Serializers (Query Parameter Validation)
# =============================================================================

class DateRangeQuerySerializer(serializers.Serializer):
    """
    Query Parameters:
        date_from (date): Start of date range
        date_to (date): End of date range
    """

    date_from = serializers.DateField(required=False)
    date_to = serializers.DateField(required=False)

    def validate(self, attrs):
        """Validate date range."""
        start = attrs.get('date_from')
        end = attrs.get('date_to')
        if start and end and start > end:
            raise serializers.ValidationError({
                'date_from': 'Start date must be before end date'
            })
        return attrs


class CashFlowQuerySerializer(DateRangeQuerySerializer):
    """
    Query Parameters:
        granularity (str): 'day' or 'month'
    """

    VALID_GRANULARITIES = ('day', 'month')

    granularity = serializers.ChoiceField(
        choices=VALID_GRANULARITIES,
        default='day',
        help_text="Bucket size: 'day' or 'month'"
    )


# =============================================================================
# Response Serializers
# =============================================================================

class SummarySerializer(serializers.Serializer):
    total_income = serializers.DecimalField(max_digits=14, decimal_places=2)
    total_expense = serializers.DecimalField(max_digits=14, decimal_places=2)
    balance = serializers.DecimalField(max_digits=14, decimal_places=2)
    transaction_count = serializers.IntegerField()


class CategorySliceSerializer(serializers.Serializer):
    category = serializers.CharField()
    value = serializers.DecimalField(max_digits=14, decimal_places=2)
    color = serializers.CharField()


class CashFlowBucketSerializer(serializers.Serializer):
    period = serializers.CharField(help_text='YYYY-MM-DD or YYYY-MM')
    income = serializers.DecimalField(max_digits=14, decimal_places=2)
    expense = serializers.DecimalField(max_digits=14, decimal_places=2)


class CashFlowResponseSerializer(serializers.Serializer):
    granularity = serializers.CharField()
    data = CashFlowBucketSerializer(many=True)


class DashboardResponseSerializer(serializers.Serializer):
    summary = SummarySerializer()
    category_breakdown = CategorySliceSerializer(many=True)
    cash_flow = CashFlowBucketSerializer(many=True)
