"""
Domain exceptions for transactions app.

Service errors derive from TransactionServiceError; errors that map
directly onto an HTTP response derive from APIException.
"""
from rest_framework.exceptions import APIException


class TransactionServiceError(Exception):
    """Base exception for transaction service errors."""
    pass


class ReceiptScanError(TransactionServiceError):
    """Raised when a scanned document could not be turned into a transaction."""
    pass


class TransactionNotFoundError(APIException):
    """Transaction not found."""
    status_code = 404
    default_detail = 'Transaction not found.'
    default_code = 'transaction_not_found'


class UnsupportedDocumentError(APIException):
    """Uploaded document is not an image or PDF."""
    status_code = 415
    default_detail = 'Upload an image or PDF document.'
    default_code = 'unsupported_document'


class DocumentTooLargeError(APIException):
    """Uploaded document exceeds the configured size limit."""
    status_code = 413
    default_detail = 'Document is too large.'
    default_code = 'document_too_large'
