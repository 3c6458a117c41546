# ==========================================
# apps/transactions/admin.py
# ==========================================

from django.contrib import admin
from django.utils.html import format_html
from .models import Transaction, TransactionType, ReviewStatus


@admin.register(Transaction)
class TransactionAdmin(admin.ModelAdmin):
    """
    Admin interface for transactions.

    Filtering by type, source and anomaly review outcome; bulk review actions.
    """

    list_display = [
        'date',
        'merchant',
        'signed_amount_display',
        'category',
        'owner',
        'source',
        'review_badge',
    ]

    list_filter = [
        'type',
        'source',
        'review_status',
        'date',
    ]

    search_fields = [
        'merchant',
        'category',
        'description',
        'owner__email',
    ]

    ordering = ['-date', '-created_at']
    date_hierarchy = 'date'
    list_select_related = ['owner']
    readonly_fields = ['created_at', 'updated_at']

    def signed_amount_display(self, obj):
        color = '#10b981' if obj.type == TransactionType.INCOME else '#ef4444'
        return format_html('<span style="color: {};">{}</span>', color, obj.signed_amount)
    signed_amount_display.short_description = 'Amount'
    signed_amount_display.admin_order_field = 'amount'

    def review_badge(self, obj):
        """Display anomaly review status as colored badge."""
        colors = {
            ReviewStatus.UNREVIEWED: ('#e2e8f0', '#475569'),
            ReviewStatus.SAFE: ('#10b981', 'white'),
            ReviewStatus.FLAGGED: ('#ef4444', 'white'),
        }
        bg, fg = colors.get(obj.review_status, ('#ccc', '#666'))
        return format_html(
            '<span style="background: {}; color: {}; padding: 3px 8px; '
            'border-radius: 10px; font-size: 11px;">{}</span>',
            bg, fg, obj.get_review_status_display()
        )
    review_badge.short_description = 'Review'

    actions = ['mark_safe', 'flag_fraud']

    @admin.action(description='Mark selected transactions safe')
    def mark_safe(self, request, queryset):
        count = queryset.update(review_status=ReviewStatus.SAFE)
        self.message_user(request, f'Marked {count} transaction(s) safe.')

    @admin.action(description='Flag selected transactions as fraud')
    def flag_fraud(self, request, queryset):
        count = queryset.update(review_status=ReviewStatus.FLAGGED)
        self.message_user(request, f'Flagged {count} transaction(s).')
