import logging

from django.utils import timezone

from ..exceptions import AIServiceError
from ..schemas import CASHFLOW_SCHEMA
from ..serializers import CashFlowPointSerializer
from .base import resolve_client, validated_items

logger = logging.getLogger(__name__)


def predict_cash_flow(*, transactions, current_balance, days: int = 30, client=None) -> list[dict]:
    """
    Forecast the daily balance for the next ``days`` days.

    Points before today are discarded and the rest are sorted by date
    and capped at ``days``. Empty on failure.
    """
    today = timezone.localdate()
    summary = '\n'.join(f"{t.date}: {t.amount} ({t.type})" for t in transactions)
    prompt = (
        f"Based on transaction history, predict the daily cash flow balance for the next {days} days "
        f"starting from {today.isoformat()} with starting balance {current_balance}. "
        f"Account for recurring bills/income. Data: {summary}"
    )

    try:
        reply = resolve_client(client).generate_json(prompt, CASHFLOW_SCHEMA)
        points = validated_items(CashFlowPointSerializer, reply)
    except AIServiceError as e:
        logger.error("Cash flow prediction failed: %s", e)
        return []

    points = sorted((p for p in points if p['date'] >= today), key=lambda p: p['date'])
    return points[:days]
