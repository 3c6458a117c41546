import pytest
from datetime import date
from decimal import Decimal
from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import override_settings
from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from apps.advisor.exceptions import AIServiceError
from apps.transactions.models import Transaction, TransactionSource, ReviewStatus


def receipt_upload(content=b'fake-image-bytes', name='receipt.jpg', content_type='image/jpeg'):
    return SimpleUploadedFile(name, content, content_type=content_type)


# =============================================================================
# List / Filter Tests
# =============================================================================

@pytest.mark.django_db
class TestTransactionList:
    """Tests for GET /api/transactions/"""

    def test_list_newest_first(self, authenticated_client, sample_transactions):
        url = reverse('transactions:transaction-list')
        response = authenticated_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['count'] == 4
        dates = [item['date'] for item in response.data['results']]
        assert dates == sorted(dates, reverse=True)

    def test_list_only_own_transactions(self, authenticated_client, sample_transactions, make_transaction, other_user):
        make_transaction(owner=other_user, merchant='Not Mine')

        url = reverse('transactions:transaction-list')
        response = authenticated_client.get(url)

        merchants = {item['merchant'] for item in response.data['results']}
        assert 'Not Mine' not in merchants

    def test_filter_by_type(self, authenticated_client, sample_transactions):
        url = reverse('transactions:transaction-list')
        response = authenticated_client.get(url, {'type': 'INCOME'})

        assert response.data['count'] == 1
        assert response.data['results'][0]['merchant'] == 'Client Payment'

    def test_filter_all_type(self, authenticated_client, sample_transactions):
        url = reverse('transactions:transaction-list')
        response = authenticated_client.get(url, {'type': 'ALL'})

        assert response.data['count'] == 4

    def test_filter_by_category_and_dates(self, authenticated_client, sample_transactions):
        url = reverse('transactions:transaction-list')
        response = authenticated_client.get(url, {
            'category': 'Groceries',
            'date_from': '2023-10-03',
            'date_to': '2023-10-31',
        })

        assert response.data['count'] == 1
        assert response.data['results'][0]['merchant'] == 'Whole Foods'

    def test_invalid_type_filter(self, authenticated_client):
        url = reverse('transactions:transaction-list')
        response = authenticated_client.get(url, {'type': 'TRANSFER'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_inverted_date_range(self, authenticated_client):
        url = reverse('transactions:transaction-list')
        response = authenticated_client.get(url, {'date_from': '2023-10-10', 'date_to': '2023-10-01'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'date_to' in response.data

    def test_list_unauthenticated(self, api_client):
        url = reverse('transactions:transaction-list')
        response = api_client.get(url)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


# =============================================================================
# Manual Entry Tests
# =============================================================================

@pytest.mark.django_db
class TestTransactionCreate:
    """Tests for POST /api/transactions/"""

    def test_create_with_defaults(self, authenticated_client, user):
        url = reverse('transactions:transaction-list')
        response = authenticated_client.post(url, {'merchant': 'Bakery', 'amount': '4.20'}, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['category'] == 'General'
        assert response.data['type'] == 'EXPENSE'
        assert response.data['description'] == 'Manual Entry'
        assert response.data['source'] == TransactionSource.MANUAL
        assert response.data['date'] == timezone.localdate().isoformat()

        tx = Transaction.objects.get(id=response.data['id'])
        assert tx.owner == user
        assert tx.amount == Decimal('4.20')

    def test_create_income(self, authenticated_client):
        url = reverse('transactions:transaction-list')
        response = authenticated_client.post(url, {
            'merchant': 'Client',
            'amount': '900.00',
            'type': 'INCOME',
            'category': 'Consulting',
            'date': '2023-10-12',
        }, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['type'] == 'INCOME'
        assert response.data['date'] == '2023-10-12'

    def test_create_requires_merchant(self, authenticated_client):
        url = reverse('transactions:transaction-list')
        response = authenticated_client.post(url, {'merchant': '   ', 'amount': '4.20'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'merchant' in response.data

    @pytest.mark.parametrize('amount', ['0', '-5.00'])
    def test_create_requires_positive_amount(self, authenticated_client, amount):
        url = reverse('transactions:transaction-list')
        response = authenticated_client.post(url, {'merchant': 'Bakery', 'amount': amount}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'amount' in response.data


# =============================================================================
# Detail Tests
# =============================================================================

@pytest.mark.django_db
class TestTransactionDetail:

    def test_update_own_transaction(self, authenticated_client, make_transaction):
        tx = make_transaction()
        url = reverse('transactions:transaction-detail', args=[tx.id])
        response = authenticated_client.patch(url, {'category': 'Food & Drink'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        tx.refresh_from_db()
        assert tx.category == 'Food & Drink'

    def test_delete_own_transaction(self, authenticated_client, make_transaction):
        tx = make_transaction()
        url = reverse('transactions:transaction-detail', args=[tx.id])
        response = authenticated_client.delete(url)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not Transaction.objects.filter(id=tx.id).exists()

    def test_cannot_see_other_users_transaction(self, authenticated_client, make_transaction, other_user):
        tx = make_transaction(owner=other_user)
        url = reverse('transactions:transaction-detail', args=[tx.id])
        response = authenticated_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_source_is_read_only(self, authenticated_client, make_transaction):
        tx = make_transaction()
        url = reverse('transactions:transaction-detail', args=[tx.id])
        authenticated_client.patch(url, {'source': 'SCAN', 'review_status': 'SAFE'}, format='json')

        tx.refresh_from_db()
        assert tx.source == TransactionSource.MANUAL
        assert tx.review_status == ReviewStatus.UNREVIEWED


# =============================================================================
# Balance Tests
# =============================================================================

@pytest.mark.django_db
class TestBalance:
    """Tests for GET /api/transactions/balance/"""

    def test_balance(self, authenticated_client, sample_transactions):
        url = reverse('transactions:transaction-balance')
        response = authenticated_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {
            'income': '3000.00',
            'expense': '1290.00',
            'balance': '1710.00',
        }

    def test_balance_without_transactions(self, authenticated_client):
        url = reverse('transactions:transaction-balance')
        response = authenticated_client.get(url)

        assert response.data['balance'] == '0.00'


# =============================================================================
# Review Tests
# =============================================================================

@pytest.mark.django_db
class TestReviewActions:

    def test_mark_safe(self, authenticated_client, make_transaction):
        tx = make_transaction()
        url = reverse('transactions:transaction-mark-safe', args=[tx.id])
        response = authenticated_client.post(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['review_status'] == ReviewStatus.SAFE

    def test_flag_fraud(self, authenticated_client, make_transaction):
        tx = make_transaction()
        url = reverse('transactions:transaction-flag-fraud', args=[tx.id])
        authenticated_client.post(url)

        tx.refresh_from_db()
        assert tx.review_status == ReviewStatus.FLAGGED

    def test_cannot_review_other_users_transaction(self, authenticated_client, make_transaction, other_user):
        tx = make_transaction(owner=other_user)
        url = reverse('transactions:transaction-mark-safe', args=[tx.id])
        response = authenticated_client.post(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND


# =============================================================================
# Scan Tests
# =============================================================================

@pytest.mark.django_db
class TestScan:
    """Tests for POST /api/transactions/scan/"""

    def test_scan_creates_transaction(self, authenticated_client, fake_ai):
        fake_ai.json_reply = {
            'merchant': 'Trader Joes',
            'date': '2023-10-18',
            'amount': 42.1,
            'category': 'Groceries',
            'description': 'Weekly shop',
            'type': 'EXPENSE',
        }
        url = reverse('transactions:transaction-scan')
        response = authenticated_client.post(url, {'file': receipt_upload()}, format='multipart')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['merchant'] == 'Trader Joes'
        assert response.data['amount'] == '42.10'
        assert response.data['date'] == '2023-10-18'
        assert response.data['source'] == TransactionSource.SCAN

        parts = fake_ai.calls[0]['contents']
        assert parts[0] == {'mime_type': 'image/jpeg', 'data': b'fake-image-bytes'}

    def test_scan_keeps_income_classification(self, authenticated_client, fake_ai):
        fake_ai.json_reply = {
            'merchant': 'Acme Ltd',
            'amount': 1500,
            'category': 'Invoice',
            'type': 'INCOME',
        }
        url = reverse('transactions:transaction-scan')
        response = authenticated_client.post(
            url,
            {'file': receipt_upload(name='invoice.pdf', content_type='application/pdf')},
            format='multipart',
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['type'] == 'INCOME'

    def test_scan_fills_defaults(self, authenticated_client, fake_ai):
        fake_ai.json_reply = {'merchant': '', 'amount': 0, 'category': '', 'type': 'EXPENSE'}
        url = reverse('transactions:transaction-scan')
        response = authenticated_client.post(url, {'file': receipt_upload()}, format='multipart')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['merchant'] == 'Unknown Merchant'
        assert response.data['category'] == 'Uncategorized'
        assert response.data['date'] == timezone.localdate().isoformat()

    def test_scan_failure_returns_error(self, authenticated_client, fake_ai):
        fake_ai.error = AIServiceError('timeout')
        url = reverse('transactions:transaction-scan')
        response = authenticated_client.post(url, {'file': receipt_upload()}, format='multipart')

        assert response.status_code == status.HTTP_502_BAD_GATEWAY
        assert response.data['error'] == 'Failed to analyze receipt. Please try again or enter manually.'
        assert not Transaction.objects.exists()

    def test_scan_partial_reply_uses_defaults(self, authenticated_client, fake_ai):
        fake_ai.json_reply = {'amount': 12.5, 'category': 'Food', 'type': 'EXPENSE'}
        url = reverse('transactions:transaction-scan')
        response = authenticated_client.post(url, {'file': receipt_upload()}, format='multipart')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['merchant'] == 'Unknown Merchant'
        assert response.data['amount'] == '12.50'
        assert Transaction.objects.count() == 1

    def test_scan_unknown_type_stored_as_expense(self, authenticated_client, fake_ai):
        fake_ai.json_reply = {'merchant': 'Bank', 'amount': 5, 'category': 'Fees', 'type': 'TRANSFER'}
        url = reverse('transactions:transaction-scan')
        response = authenticated_client.post(url, {'file': receipt_upload()}, format='multipart')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['type'] == 'EXPENSE'
        assert response.data['merchant'] == 'Bank'

    def test_scan_null_fields_use_defaults(self, authenticated_client, fake_ai):
        fake_ai.json_reply = {'merchant': None, 'amount': None, 'category': None, 'type': None}
        url = reverse('transactions:transaction-scan')
        response = authenticated_client.post(url, {'file': receipt_upload()}, format='multipart')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['merchant'] == 'Unknown Merchant'
        assert response.data['amount'] == '0.00'
        assert response.data['category'] == 'Uncategorized'
        assert response.data['type'] == 'EXPENSE'

    def test_scan_non_object_reply(self, authenticated_client, fake_ai):
        fake_ai.json_reply = ['Shop']
        url = reverse('transactions:transaction-scan')
        response = authenticated_client.post(url, {'file': receipt_upload()}, format='multipart')

        assert response.status_code == status.HTTP_502_BAD_GATEWAY
        assert not Transaction.objects.exists()

    def test_scan_rejects_other_documents(self, authenticated_client, fake_ai):
        url = reverse('transactions:transaction-scan')
        response = authenticated_client.post(
            url,
            {'file': receipt_upload(name='notes.txt', content_type='text/plain')},
            format='multipart',
        )

        assert response.status_code == status.HTTP_415_UNSUPPORTED_MEDIA_TYPE
        assert fake_ai.calls == []

    @override_settings(RECEIPT_MAX_UPLOAD_MB=0)
    def test_scan_rejects_large_documents(self, authenticated_client, fake_ai):
        url = reverse('transactions:transaction-scan')
        response = authenticated_client.post(url, {'file': receipt_upload()}, format='multipart')

        assert response.status_code == status.HTTP_413_REQUEST_ENTITY_TOO_LARGE

    def test_scan_without_api_key(self, authenticated_client):
        url = reverse('transactions:transaction-scan')
        response = authenticated_client.post(url, {'file': receipt_upload()}, format='multipart')

        assert response.status_code == status.HTTP_502_BAD_GATEWAY
