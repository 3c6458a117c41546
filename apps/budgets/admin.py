from django.contrib import admin
from .models import CategoryBudget


@admin.register(CategoryBudget)
class CategoryBudgetAdmin(admin.ModelAdmin):
    list_display = ['category', 'limit', 'owner', 'updated_at']
    list_filter = ['category']
    search_fields = ['category', 'owner__email']
    ordering = ['owner', 'category']
