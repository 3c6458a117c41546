"""
Services for the generative-AI features.

Every function takes an optional ``client`` (defaults to the shared
Gemini client). All except ``parse_receipt`` return a fallback value
when the model fails.
"""

from .receipts import parse_receipt
from .health import analyze_financial_health, FALLBACK_HEALTH
from .budget_plan import generate_budget_plan, FALLBACK_BUDGET
from .insights import generate_smart_insights
from .anomalies import detect_anomalies
from .cashflow import predict_cash_flow
from .coach import (
    coach_reply,
    send_coach_message,
    clear_conversation,
    recent_transactions,
    FALLBACK_REPLY,
)

__all__ = [
    'parse_receipt',
    'analyze_financial_health',
    'FALLBACK_HEALTH',
    'generate_budget_plan',
    'FALLBACK_BUDGET',
    'generate_smart_insights',
    'detect_anomalies',
    'predict_cash_flow',
    'coach_reply',
    'send_coach_message',
    'clear_conversation',
    'recent_transactions',
    'FALLBACK_REPLY',
]
