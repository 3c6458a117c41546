"""Turn an uploaded receipt, invoice or statement into a transaction."""

import logging

from django.utils import timezone

from apps.advisor.exceptions import ReceiptParsingError
from apps.advisor.services import parse_receipt

from ..exceptions import ReceiptScanError
from ..models import Transaction, TransactionSource, TransactionType

logger = logging.getLogger(__name__)


def scan_receipt(*, owner, data: bytes, mime_type: str, client=None) -> Transaction:
    """
    Extract transaction details from a document and store them.

    Missing fields get defaults: today's date, 'Unknown Merchant',
    amount 0 and category 'Uncategorized'. The extracted type is kept
    when it is INCOME or EXPENSE; anything else is stored as EXPENSE.

    Raises:
        ReceiptScanError: If the model could not read the document.
    """
    try:
        extracted = parse_receipt(data=data, mime_type=mime_type, client=client)
    except ReceiptParsingError as e:
        logger.warning("Receipt scan failed for user %s: %s", owner.id, e)
        raise ReceiptScanError(
            'Failed to analyze receipt. Please try again or enter manually.'
        ) from e

    tx_type = extracted.get('type')
    if tx_type not in TransactionType.values:
        tx_type = TransactionType.EXPENSE

    return Transaction.objects.create(
        owner=owner,
        date=extracted.get('date') or timezone.localdate(),
        merchant=extracted.get('merchant') or 'Unknown Merchant',
        amount=extracted.get('amount') or 0,
        category=extracted.get('category') or 'Uncategorized',
        type=tx_type,
        description=extracted.get('description') or '',
        source=TransactionSource.SCAN,
    )
