"""Services for accounts business logic."""

from .exceptions import (
    AccountsServiceError,
    UserRegistrationError,
    DuplicateEmailError,
    InvalidCredentialsError,
    InactiveAccountError,
)
from .currency import detect_currency, locale_from_accept_language
from .user_registration import register_user
from .user_authentication import authenticate_user

__all__ = [
    # Exceptions
    'AccountsServiceError',
    'UserRegistrationError',
    'DuplicateEmailError',
    'InvalidCredentialsError',
    'InactiveAccountError',
    # Services
    'detect_currency',
    'locale_from_accept_language',
    'register_user',
    'authenticate_user',
]
