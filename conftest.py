import pytest
from datetime import date
from decimal import Decimal
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.transactions.models import Transaction, TransactionType


class FakeGeminiClient:
    """Stands in for GeminiClient; replies are set per test."""

    def __init__(self):
        self.json_reply = None
        self.chat_reply = 'Sounds good.'
        self.error = None
        self.calls = []

    def generate_json(self, contents, schema=None):
        self.calls.append({'method': 'generate_json', 'contents': contents, 'schema': schema})
        if self.error:
            raise self.error
        return self.json_reply

    def chat(self, message, history, system_instruction):
        self.calls.append({
            'method': 'chat',
            'message': message,
            'history': history,
            'system_instruction': system_instruction,
        })
        if self.error:
            raise self.error
        return self.chat_reply


@pytest.fixture
def fake_ai(monkeypatch):
    """Route every AI call to a FakeGeminiClient."""
    client = FakeGeminiClient()
    monkeypatch.setattr('apps.advisor.client.get_client', lambda: client)
    return client


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def user(db):
    """Create and return a test user."""
    return User.objects.create_user(
        email='testuser@example.com',
        password='TestPass123!',
        name='Test User',
        preferences={'currency': 'USD', 'dark_mode': False},
    )


@pytest.fixture
def other_user(db):
    """Create and return another test user."""
    return User.objects.create_user(
        email='otheruser@example.com',
        password='OtherPass123!',
        name='Other User',
        preferences={'currency': 'EUR', 'dark_mode': False},
    )


@pytest.fixture
def authenticated_client(api_client, user):
    """Return an authenticated API client using JWT."""
    refresh = RefreshToken.for_user(user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def make_transaction(db, user):
    """Factory for transactions owned by ``user`` unless told otherwise."""
    def _make(**kwargs):
        defaults = {
            'owner': user,
            'date': date(2023, 10, 5),
            'merchant': 'Corner Shop',
            'amount': Decimal('10.00'),
            'category': 'Groceries',
            'type': TransactionType.EXPENSE,
        }
        defaults.update(kwargs)
        return Transaction.objects.create(**defaults)
    return _make


@pytest.fixture
def sample_transactions(make_transaction):
    """One income and three expenses in October 2023."""
    return [
        make_transaction(date=date(2023, 10, 1), merchant='Client Payment', amount=Decimal('3000.00'),
                         category='Salary', type=TransactionType.INCOME),
        make_transaction(date=date(2023, 10, 2), merchant='Landlord', amount=Decimal('1200.00'),
                         category='Rent/Mortgage'),
        make_transaction(date=date(2023, 10, 3), merchant='Starbucks', amount=Decimal('5.50'),
                         category='Food & Drink'),
        make_transaction(date=date(2023, 10, 3), merchant='Whole Foods', amount=Decimal('84.50'),
                         category='Groceries'),
    ]
