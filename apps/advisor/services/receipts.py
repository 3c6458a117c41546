import logging

from ..exceptions import AIServiceError, ReceiptParsingError
from ..schemas import RECEIPT_SCHEMA
from ..serializers import ReceiptReplySerializer
from .base import resolve_client, validated_object

logger = logging.getLogger(__name__)

RECEIPT_PROMPT = (
    "Extract transaction details from this document (receipt, invoice, or bank statement). "
    "Identify if it is INCOME or EXPENSE. Return JSON."
)


def parse_receipt(*, data: bytes, mime_type: str, client=None) -> dict:
    """
    Read transaction details from a receipt photo, invoice or statement.

    Returns:
        dict with merchant, date (date or None), amount (Decimal),
        category, description and type.

    Raises:
        ReceiptParsingError: Any failure. There is no fallback value.
    """
    contents = [
        {'mime_type': mime_type, 'data': data},
        RECEIPT_PROMPT,
    ]
    try:
        reply = resolve_client(client).generate_json(contents, RECEIPT_SCHEMA)
        return validated_object(ReceiptReplySerializer, reply)
    except AIServiceError as e:
        logger.error("Error parsing receipt: %s", e)
        raise ReceiptParsingError(str(e)) from e
