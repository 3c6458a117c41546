"""Services for budgets business logic."""

from .budget_management import (
    DEFAULT_BUDGETS,
    ensure_default_budgets,
    get_budgets,
    set_budget,
    merge_budgets,
    delete_budget,
)
from .statement import build_statement
from .generation import generate_budgets

__all__ = [
    'DEFAULT_BUDGETS',
    'ensure_default_budgets',
    'get_budgets',
    'set_budget',
    'merge_budgets',
    'delete_budget',
    'build_statement',
    'generate_budgets',
]
