import logging

from ..exceptions import AIServiceError
from ..schemas import HEALTH_SCHEMA
from ..serializers import HealthReplySerializer
from .base import resolve_client, validated_object

logger = logging.getLogger(__name__)

FALLBACK_HEALTH = {
    'score': 50,
    'status': 'Warning',
    'cash_flow_status': 'Unable to analyze at this moment.',
    'projected_savings': 0,
    'risks': ['Data unavailable'],
    'recommendations': ['Try again later'],
}


def analyze_financial_health(*, transactions, currency: str = 'USD', client=None) -> dict:
    """
    Score the user's finances 0-100 with risks and recommendations.

    Falls back to a neutral 'Warning' result when the model fails.
    """
    summary = '\n'.join(
        f"{t.date}: {t.merchant} ({t.category}) - {currency} {t.amount} [{t.type}]"
        for t in transactions
    )
    prompt = (
        "Analyze the following transaction history for a Small/Medium Enterprise (SME) or individual. "
        f"User currency is {currency}.\n"
        "Calculate a 'Business Health Score' (0-100).\n"
        "Identify cash flow status, projected savings/surplus, specific business risks "
        "(e.g., high burn rate, vendor dependency), and actionable business recommendations.\n\n"
        f"Transactions:\n{summary}"
    )

    try:
        reply = resolve_client(client).generate_json(prompt, HEALTH_SCHEMA)
        return validated_object(HealthReplySerializer, reply)
    except AIServiceError as e:
        logger.error("Error analyzing finances: %s", e)
        return dict(FALLBACK_HEALTH)
