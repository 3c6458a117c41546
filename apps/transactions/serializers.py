from decimal import Decimal
from rest_framework import serializers
from .models import Transaction, TransactionType


# =============================================================================
# Input Serializers
# =============================================================================

class TransactionFilterSerializer(serializers.Serializer):
    """
    Validate query parameters for transaction filtering.

    Query Parameters:
        type (str): ALL, INCOME or EXPENSE
        category (str): Exact category name
        date_from (date): Transactions on or after this date
        date_to (date): Transactions on or before this date
    """

    type = serializers.ChoiceField(
        choices=['ALL', *TransactionType.values],
        required=False,
        default='ALL'
    )
    category = serializers.CharField(max_length=100, required=False)
    date_from = serializers.DateField(required=False)
    date_to = serializers.DateField(required=False)

    def validate(self, attrs):
        """Validate date range."""
        date_from = attrs.get('date_from')
        date_to = attrs.get('date_to')

        if date_from and date_to and date_from > date_to:
            raise serializers.ValidationError({
                'date_to': 'End date must be after start date'
            })

        return attrs


class ReceiptUploadSerializer(serializers.Serializer):
    """Multipart upload of a receipt photo, invoice or PDF statement."""

    file = serializers.FileField()


# =============================================================================
# Output / Model Serializers
# =============================================================================

class TransactionSerializer(serializers.ModelSerializer):
    """Full transaction representation; also used for updates."""

    class Meta:
        model = Transaction
        fields = [
            'id',
            'date',
            'merchant',
            'amount',
            'category',
            'type',
            'description',
            'source',
            'review_status',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'source', 'review_status', 'created_at', 'updated_at']

    def validate_merchant(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError('Merchant is required.')
        return value

    def validate_amount(self, value):
        if value <= Decimal('0'):
            raise serializers.ValidationError('Amount must be greater than zero.')
        return value


class TransactionCreateSerializer(TransactionSerializer):
    """Manual entry: merchant and amount required, the rest defaulted."""

    date = serializers.DateField(required=False)
    category = serializers.CharField(max_length=100, required=False, default='General')
    type = serializers.ChoiceField(
        choices=TransactionType.choices,
        required=False,
        default=TransactionType.EXPENSE
    )
    description = serializers.CharField(required=False, allow_blank=True, default='Manual Entry')

    def validate_category(self, value):
        return value.strip() or 'General'


class BalanceSerializer(serializers.Serializer):
    income = serializers.DecimalField(max_digits=14, decimal_places=2)
    expense = serializers.DecimalField(max_digits=14, decimal_places=2)
    balance = serializers.DecimalField(max_digits=14, decimal_places=2)
