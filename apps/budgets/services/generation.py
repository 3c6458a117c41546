import logging

from apps.advisor.services import generate_budget_plan
from apps.transactions.models import Transaction
from .budget_management import merge_budgets

logger = logging.getLogger(__name__)


def generate_budgets(*, owner, client=None) -> dict:
    """
    Ask the AI model for limits based on the owner's expenses and merge them.

    Generated categories overwrite stored ones of the same name; other
    stored categories are kept. When the model fails the fallback plan
    (``General: 1000``) is merged instead.

    Returns:
        dict with ``generated`` (the plan) and ``budgets`` (the merged map).
    """
    transactions = list(Transaction.objects.filter(owner=owner).order_by('date', 'created_at'))
    plan = generate_budget_plan(transactions=transactions, currency=owner.currency, client=client)

    budgets = merge_budgets(owner=owner, limits=plan)
    logger.info("Merged %d generated budget(s) for user %s", len(plan), owner.id)

    return {'generated': plan, 'budgets': budgets}
