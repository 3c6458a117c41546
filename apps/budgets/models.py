from decimal import Decimal
from django.db import models
from django.conf import settings
from django.core.validators import MinValueValidator


class CategoryBudget(models.Model):
    """Monthly spending limit for one category."""

    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='budgets'
    )
    category = models.CharField(max_length=100)
    limit = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'category_budgets'
        ordering = ['category']
        constraints = [
            models.UniqueConstraint(fields=['owner', 'category'], name='budget_owner_category_uniq'),
        ]

    def __str__(self):
        return f"{self.category}: {self.limit}"
