from datetime import date
from decimal import Decimal, ROUND_HALF_UP

from rest_framework import serializers

from apps.transactions.serializers import TransactionSerializer
from .models import ChatMessage, ChatRole


def to_money(value) -> Decimal:
    """Round a model-supplied number to cents."""
    return Decimal(str(value)).quantize(Decimal('0.01'), rounding=ROUND_HALF_UP)


# =============================================================================
# Model reply serializers
# =============================================================================

class ReceiptReplySerializer(serializers.Serializer):
    """
    Transaction details read from a document.

    Every field is optional; the scanner fills in defaults for whatever
    the model leaves out.
    """

    merchant = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    date = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    amount = serializers.FloatField(required=False, allow_null=True)
    category = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    type = serializers.CharField(required=False, allow_blank=True, allow_null=True)

    def validate_merchant(self, value):
        return (value or '')[:200]

    def validate_date(self, value):
        """Unreadable dates become None so the caller's default applies."""
        if not value:
            return None
        try:
            return date.fromisoformat(value[:10])
        except ValueError:
            return None

    def validate_amount(self, value):
        if value is None:
            return None
        return to_money(abs(value))

    def validate_category(self, value):
        return (value or '')[:100]

    def validate_description(self, value):
        return value or ''

    def validate_type(self, value):
        return value or ''


class HealthReplySerializer(serializers.Serializer):
    score = serializers.FloatField(min_value=0, max_value=100)
    status = serializers.ChoiceField(choices=['Critical', 'Warning', 'Healthy', 'Excellent'])
    cash_flow_status = serializers.CharField(required=False, allow_blank=True, default='')
    projected_savings = serializers.FloatField(required=False, default=0)
    risks = serializers.ListField(child=serializers.CharField())
    recommendations = serializers.ListField(child=serializers.CharField())

    def validate_score(self, value):
        return round(value)


class InsightSerializer(serializers.Serializer):
    type = serializers.ChoiceField(choices=['SAVINGS', 'PATTERN', 'ALERT'])
    title = serializers.CharField()
    description = serializers.CharField()
    impact_amount = serializers.FloatField(required=False, allow_null=True)


class AnomalyReplySerializer(serializers.Serializer):
    transaction_id = serializers.CharField()
    reason = serializers.CharField()
    severity = serializers.ChoiceField(choices=['HIGH', 'MEDIUM', 'LOW'])


class CashFlowPointSerializer(serializers.Serializer):
    date = serializers.DateField()
    balance = serializers.FloatField()
    type = serializers.ChoiceField(choices=['PREDICTED'], required=False, default='PREDICTED')


# =============================================================================
# API serializers
# =============================================================================

class HealthResponseSerializer(serializers.Serializer):
    currency = serializers.CharField()
    metric = HealthReplySerializer(allow_null=True)
    message = serializers.CharField(required=False)


class InsightListSerializer(serializers.Serializer):
    results = InsightSerializer(many=True)


class AnomalySerializer(AnomalyReplySerializer):
    """Anomaly joined with the transaction it refers to."""

    transaction = TransactionSerializer()


class AnomalyListSerializer(serializers.Serializer):
    results = AnomalySerializer(many=True)


class CashFlowForecastSerializer(serializers.Serializer):
    current_balance = serializers.DecimalField(max_digits=14, decimal_places=2)
    days = serializers.IntegerField()
    results = CashFlowPointSerializer(many=True)


class CashFlowQuerySerializer(serializers.Serializer):
    days = serializers.IntegerField(required=False, min_value=1, max_value=90)


class ChatMessageSerializer(serializers.ModelSerializer):
    class Meta:
        model = ChatMessage
        fields = ['id', 'role', 'content', 'created_at']
        read_only_fields = fields


class CoachMessageRequestSerializer(serializers.Serializer):
    message = serializers.CharField(allow_blank=True, trim_whitespace=True)


class CoachReplySerializer(serializers.Serializer):
    message = ChatMessageSerializer()
    reply = ChatMessageSerializer()


# Shown first in every conversation; never sent to the model.
WELCOME_MESSAGE = {
    'id': 'welcome',
    'role': ChatRole.MODEL.value,
    'content': (
        "Hi! I'm ELAG, your personal financial coach. I've analyzed your recent "
        "transactions. How are you feeling about your finances today?"
    ),
    'created_at': None,
}
