import logging
from decimal import Decimal

from apps.transactions.models import TransactionType
from ..exceptions import AIServiceError
from ..serializers import to_money
from .base import resolve_client

logger = logging.getLogger(__name__)

FALLBACK_BUDGET = {'General': Decimal('1000')}


def _limits_from_reply(reply) -> dict:
    if isinstance(reply, dict) and isinstance(reply.get('budget'), dict):
        reply = reply['budget']
    if not isinstance(reply, dict):
        raise AIServiceError(f"Expected a JSON object, got {type(reply).__name__}")

    limits = {}
    for category, value in reply.items():
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            continue
        name = str(category).strip()[:100]
        if name and value >= 0:
            limits[name] = to_money(value)

    if not limits:
        raise AIServiceError("Budget reply contained no numeric limits")
    return limits


def generate_budget_plan(*, transactions, currency: str, client=None) -> dict:
    """
    Suggest a monthly limit per category from the user's expenses.

    Returns:
        dict mapping category name to Decimal limit. Falls back to
        ``{'General': 1000}`` when the model fails.
    """
    summary = '\n'.join(
        f"{t.category}: {t.amount}"
        for t in transactions
        if t.type == TransactionType.EXPENSE
    )
    prompt = (
        "Based on these expenses, create a realistic monthly budget for each category to improve savings. "
        f"Amounts are in {currency}. "
        "Return JSON where keys are category names and values are budget limits (numbers). "
        f"Expenses: {summary}"
    )

    try:
        # No schema: category keys are dynamic
        reply = resolve_client(client).generate_json(prompt)
        return _limits_from_reply(reply)
    except AIServiceError as e:
        logger.error("Budget generation failed: %s", e)
        return dict(FALLBACK_BUDGET)
