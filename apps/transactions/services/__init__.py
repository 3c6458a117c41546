"""Services for transactions business logic."""

from .demo_data import DEMO_TRANSACTIONS, seed_demo_transactions
from .transaction_management import create_transaction, calculate_balance, set_review_status
from .receipt_scanning import scan_receipt

__all__ = [
    'DEMO_TRANSACTIONS',
    'seed_demo_transactions',
    'create_transaction',
    'calculate_balance',
    'set_review_status',
    'scan_receipt',
]
