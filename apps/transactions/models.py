from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models
from decimal import Decimal
import uuid


class TransactionType(models.TextChoices):
    INCOME = 'INCOME', 'Income'
    EXPENSE = 'EXPENSE', 'Expense'


class TransactionSource(models.TextChoices):
    MANUAL = 'MANUAL', 'Manual entry'
    SCAN = 'SCAN', 'Scanned document'
    DEMO = 'DEMO', 'Demo data'


class ReviewStatus(models.TextChoices):
    """Outcome of the user's review of an anomaly flag."""
    UNREVIEWED = 'UNREVIEWED', 'Unreviewed'
    SAFE = 'SAFE', 'Marked safe'
    FLAGGED = 'FLAGGED', 'Flagged as fraud'


class TransactionQuerySet(models.QuerySet):

    def income(self):
        return self.filter(type=TransactionType.INCOME)

    def expenses(self):
        return self.filter(type=TransactionType.EXPENSE)

    def in_month(self, year, month):
        return self.filter(date__year=year, date__month=month)


class Transaction(models.Model):
    """A single income or expense record owned by one user."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='transactions'
    )

    date = models.DateField()
    merchant = models.CharField(max_length=200)
    amount = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    category = models.CharField(max_length=100, default='General')
    type = models.CharField(
        max_length=10,
        choices=TransactionType.choices,
        default=TransactionType.EXPENSE
    )
    description = models.TextField(blank=True)

    source = models.CharField(
        max_length=10,
        choices=TransactionSource.choices,
        default=TransactionSource.MANUAL
    )
    review_status = models.CharField(
        max_length=12,
        choices=ReviewStatus.choices,
        default=ReviewStatus.UNREVIEWED
    )

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = TransactionQuerySet.as_manager()

    class Meta:
        db_table = 'transactions'
        indexes = [
            models.Index(fields=['owner', 'date'], name='tx_owner_date_idx'),
            models.Index(fields=['owner', 'type'], name='tx_owner_type_idx'),
            models.Index(fields=['owner', 'category'], name='tx_owner_category_idx'),
        ]
        ordering = ['-date', '-created_at']

    def __str__(self):
        sign = '+' if self.type == TransactionType.INCOME else '-'
        return f"{self.date} {self.merchant} {sign}{self.amount}"

    @property
    def signed_amount(self):
        """Amount as it affects the balance."""
        return self.amount if self.type == TransactionType.INCOME else -self.amount
