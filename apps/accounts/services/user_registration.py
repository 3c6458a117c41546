"""User registration service."""

import logging

from django.conf import settings
from django.db import transaction
from django.contrib.auth import get_user_model

from .currency import detect_currency
from .exceptions import DuplicateEmailError, UserRegistrationError

User = get_user_model()

logger = logging.getLogger(__name__)


@transaction.atomic
def register_user(
    *,
    email: str,
    password: str,
    name: str,
    locale: str = 'en-US',
    seed_demo_data: bool | None = None,
) -> User:
    """
    Register a new user and set their default currency.

    Args:
        email: User's email address
        password: User's password (will be hashed)
        name: Full name shown in the app
        locale: Client locale used to pick the default currency
        seed_demo_data: Give the account the demo transaction set.
            Defaults to settings.SEED_DEMO_TRANSACTIONS.

    Returns:
        Created User instance

    Raises:
        DuplicateEmailError: If the email is already registered
        UserRegistrationError: If any field is missing
    """
    if not (name and email and password):
        raise UserRegistrationError('Please fill in all fields.')

    email = User.objects.normalize_email(email)
    if User.objects.filter(email__iexact=email).exists():
        raise DuplicateEmailError('Email already exists. Please login.')

    user = User.objects.create_user(
        email=email,
        password=password,
        name=name,
        preferences={'currency': detect_currency(locale), 'dark_mode': False},
    )
    logger.info("Registered user %s (currency %s)", user.id, user.currency)

    if seed_demo_data is None:
        seed_demo_data = settings.SEED_DEMO_TRANSACTIONS
    if seed_demo_data:
        from apps.transactions.services import seed_demo_transactions
        seed_demo_transactions(user=user)

    return user
