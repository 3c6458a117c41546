"""
Financial coach chat.

The coach ('Fin') answers with the user's currency and most recent
transactions in its system instruction. Conversations are stored as
ChatMessage rows; the welcome message is display-only and never part
of the history sent to the model.
"""

import json
import logging

from django.conf import settings
from django.core.serializers.json import DjangoJSONEncoder

from apps.transactions.models import Transaction
from ..exceptions import AIServiceError, EmptyMessageError
from ..models import ChatMessage, ChatRole
from .base import resolve_client

logger = logging.getLogger(__name__)

FALLBACK_REPLY = (
    "I'm having trouble connecting to my financial database right now. "
    "Please try again in a moment."
)


def build_system_instruction(*, transactions, currency: str) -> str:
    context = json.dumps([
        {
            'id': str(t.id),
            'date': t.date,
            'merchant': t.merchant,
            'amount': t.amount,
            'category': t.category,
            'type': t.type,
            'description': t.description,
        }
        for t in transactions
    ], cls=DjangoJSONEncoder)

    return (
        "You are 'Fin', an empathetic, intelligent, and data-driven financial coach for SMEs and individuals.\n"
        "Your goal is to help users manage cash flow, budgets, and financial decisions.\n"
        f"The user's currency is {currency}.\n"
        f"You have access to the user's recent transactions: {context}.\n\n"
        "Guidelines:\n"
        "1. Be empathetic but professional.\n"
        "2. Be specific. Use the transaction data.\n"
        "3. Focus on cash flow and sustainability.\n"
        "4. Keep responses concise."
    )


def coach_reply(*, message: str, history: list[dict], transactions, currency: str = 'USD', client=None) -> str:
    """
    Get the coach's answer to one message.

    Args:
        message: The user's new message
        history: Prior turns as ``{'role', 'content'}`` dicts, oldest first
        transactions: Recent transactions, oldest first
        currency: ISO currency code

    Returns:
        Reply text, or a fixed apology when the model fails.
    """
    system_instruction = build_system_instruction(transactions=transactions, currency=currency)
    try:
        return resolve_client(client).chat(message, history, system_instruction)
    except AIServiceError as e:
        logger.error("Chat error: %s", e)
        return FALLBACK_REPLY


def recent_transactions(owner, limit: int | None = None) -> list:
    """The owner's newest ``limit`` transactions in chronological order."""
    limit = limit or settings.COACH_CONTEXT_TRANSACTIONS
    newest = Transaction.objects.filter(owner=owner).order_by('-date', '-created_at')[:limit]
    return list(reversed(newest))


def send_coach_message(*, owner, message: str, client=None) -> tuple[ChatMessage, ChatMessage]:
    """
    Store the user's message, ask the coach and store the reply.

    Returns:
        Tuple of (user message, coach reply).

    Raises:
        EmptyMessageError: If the message is blank.
    """
    message = (message or '').strip()
    if not message:
        raise EmptyMessageError('Message cannot be empty.')

    history = [
        {'role': m.role, 'content': m.content}
        for m in ChatMessage.objects.filter(owner=owner).order_by('created_at', 'id')
    ]

    user_message = ChatMessage.objects.create(owner=owner, role=ChatRole.USER, content=message)

    reply_text = coach_reply(
        message=message,
        history=history,
        transactions=recent_transactions(owner),
        currency=owner.currency,
        client=client,
    )
    reply = ChatMessage.objects.create(owner=owner, role=ChatRole.MODEL, content=reply_text)

    return user_message, reply


def clear_conversation(*, owner) -> int:
    """Delete the owner's stored conversation. Returns number of messages removed."""
    deleted, _ = ChatMessage.objects.filter(owner=owner).delete()
    logger.info("Cleared %d coach message(s) for user %s", deleted, owner.id)
    return deleted
