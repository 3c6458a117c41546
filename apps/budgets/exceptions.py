"""
Domain exceptions for budgets app.
"""
from rest_framework.exceptions import APIException


class BudgetNotFoundError(APIException):
    """No budget stored for the category."""
    status_code = 404
    default_detail = 'Budget not found.'
    default_code = 'budget_not_found'
