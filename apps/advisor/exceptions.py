"""
Domain exceptions for advisor app.

Exception Hierarchy:
    AdvisorServiceError (base)
    ├── AIServiceError            model call failed or replied with unusable data
    │   └── AIConfigurationError  no API key configured
    ├── ReceiptParsingError       document could not be read
    └── EmptyMessageError         blank coach message

Every AI feature except receipt parsing catches AIServiceError and
returns its fallback value.
"""


class AdvisorServiceError(Exception):
    """Base exception for advisor services."""
    pass


class AIServiceError(AdvisorServiceError):
    """Raised when the generative model cannot produce a usable reply."""
    pass


class AIConfigurationError(AIServiceError):
    """Raised when the model client is not configured."""
    pass


class ReceiptParsingError(AdvisorServiceError):
    """Raised when transaction details cannot be extracted from a document."""
    pass


class EmptyMessageError(AdvisorServiceError):
    """Raised when a coach message is blank."""
    pass
