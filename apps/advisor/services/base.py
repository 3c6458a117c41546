"""Helpers shared by the AI feature services."""

import logging

from apps.advisor import client as gemini
from ..exceptions import AIServiceError

logger = logging.getLogger(__name__)


def resolve_client(client=None):
    """Return the given client, or the shared one for the configured key."""
    return client or gemini.get_client()


def validated_object(serializer_class, payload):
    """Validate a single JSON object reply; raise AIServiceError if invalid."""
    if not isinstance(payload, dict):
        raise AIServiceError(f"Expected a JSON object, got {type(payload).__name__}")

    serializer = serializer_class(data=payload)
    if not serializer.is_valid():
        raise AIServiceError(f"Invalid reply: {serializer.errors}")
    return dict(serializer.validated_data)


def validated_items(serializer_class, payload) -> list[dict]:
    """
    Validate a JSON array reply item by item.

    Invalid items are dropped; a reply that is not an array raises
    AIServiceError.
    """
    if not isinstance(payload, list):
        raise AIServiceError(f"Expected a JSON array, got {type(payload).__name__}")

    items = []
    for raw in payload:
        serializer = serializer_class(data=raw)
        if serializer.is_valid():
            items.append(dict(serializer.validated_data))
        else:
            logger.debug("Dropping invalid item %r: %s", raw, serializer.errors)
    return items
