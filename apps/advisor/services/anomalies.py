import logging

from ..exceptions import AIServiceError
from ..schemas import ANOMALIES_SCHEMA
from ..serializers import AnomalyReplySerializer
from .base import resolve_client, validated_items

logger = logging.getLogger(__name__)


def detect_anomalies(*, transactions, client=None) -> list[dict]:
    """
    Ask the model for suspicious transactions.

    Returns:
        list of ``{transaction_id, reason, severity}``. The ids are not
        checked here; callers join them against stored transactions.
    """
    summary = '\n'.join(
        f"ID:{t.id}, Date:{t.date}, Merch:{t.merchant}, Amt:{t.amount}, Cat:{t.category}"
        for t in transactions
    )
    prompt = (
        "Analyze these transactions for fraud or anomalies (e.g. duplicates, unusually high amounts, "
        f"strange merchants). Return list of anomalies. Data: {summary}"
    )

    try:
        reply = resolve_client(client).generate_json(prompt, ANOMALIES_SCHEMA)
        return validated_items(AnomalyReplySerializer, reply)
    except AIServiceError as e:
        logger.error("Anomaly detection failed: %s", e)
        return []
