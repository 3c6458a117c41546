import logging

from ..exceptions import AIServiceError
from ..schemas import INSIGHTS_SCHEMA
from ..serializers import InsightSerializer
from .base import resolve_client, validated_items

logger = logging.getLogger(__name__)

MAX_INSIGHTS = 3


def generate_smart_insights(*, transactions, client=None) -> list[dict]:
    """One savings opportunity, one spending pattern and one alert. Empty on failure."""
    summary = '\n'.join(f"{t.date}: {t.merchant} ({t.amount})" for t in transactions)
    prompt = (
        "Analyze these transactions for smart insights. Find 3 insights: one savings opportunity, "
        "one spending pattern, and one alert (e.g. subscription or increase). "
        f"Data: {summary}"
    )

    try:
        reply = resolve_client(client).generate_json(prompt, INSIGHTS_SCHEMA)
        return validated_items(InsightSerializer, reply)[:MAX_INSIGHTS]
    except AIServiceError as e:
        logger.error("Insight generation failed: %s", e)
        return []
