import pytest
from django.test import override_settings
from django.urls import reverse
from rest_framework import status
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User


@pytest.fixture
def user_inactive(db):
    """Create and return an inactive user."""
    return User.objects.create_user(
        email='inactive@example.com',
        password='TestPass123!',
        name='Inactive User',
        is_active=False,
    )


# =============================================================================
# Registration Tests
# =============================================================================

@pytest.mark.django_db
class TestRegistration:
    """Tests for POST /api/auth/register/"""

    def test_register_success(self, api_client):
        """Successfully register a new user."""
        url = reverse('users:register')
        data = {
            'name': 'New User',
            'email': 'newuser@example.com',
            'password': 'SecurePass123!',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_201_CREATED
        assert 'access' in response.data['tokens']
        assert 'refresh' in response.data['tokens']
        assert response.data['user']['name'] == 'New User'
        assert User.objects.filter(email='newuser@example.com').exists()

    def test_register_currency_from_accept_language(self, api_client):
        """Default currency follows the client's locale."""
        url = reverse('users:register')
        data = {
            'name': 'London User',
            'email': 'london@example.com',
            'password': 'SecurePass123!',
        }
        response = api_client.post(url, data, HTTP_ACCEPT_LANGUAGE='en-GB,en;q=0.9')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['user']['currency'] == 'GBP'

    def test_register_unknown_locale_uses_default_currency(self, api_client):
        url = reverse('users:register')
        data = {
            'name': 'US User',
            'email': 'us@example.com',
            'password': 'SecurePass123!',
        }
        response = api_client.post(url, data, HTTP_ACCEPT_LANGUAGE='en-US')

        assert response.data['user']['currency'] == 'USD'

    def test_register_duplicate_email(self, api_client, user):
        """Cannot register with existing email, whatever its case."""
        url = reverse('users:register')
        data = {
            'name': 'Someone',
            'email': user.email.upper(),
            'password': 'SecurePass123!',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'Email already exists. Please login.'

    def test_register_missing_name(self, api_client):
        url = reverse('users:register')
        data = {
            'email': 'noname@example.com',
            'password': 'SecurePass123!',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data == {'error': 'Please fill in all fields.'}

    def test_register_blank_fields(self, api_client):
        """Blank fields get the fill-in message, not per-field errors."""
        url = reverse('users:register')
        data = {'name': '', 'email': '', 'password': ''}
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data == {'error': 'Please fill in all fields.'}
        assert not User.objects.exists()

    def test_register_weak_password(self, api_client):
        """Registration fails with weak password."""
        url = reverse('users:register')
        data = {
            'name': 'Weak',
            'email': 'weak@example.com',
            'password': '123',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'password' in response.data

    def test_register_invalid_email(self, api_client):
        """Registration fails with invalid email format."""
        url = reverse('users:register')
        data = {
            'name': 'Invalid',
            'email': 'not-an-email',
            'password': 'SecurePass123!',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    @override_settings(SEED_DEMO_TRANSACTIONS=True)
    def test_register_seeds_demo_transactions(self, api_client):
        url = reverse('users:register')
        data = {
            'name': 'Demo User',
            'email': 'demo@example.com',
            'password': 'SecurePass123!',
        }
        api_client.post(url, data)

        user = User.objects.get(email='demo@example.com')
        assert user.transactions.count() == 8

    def test_register_without_demo_transactions(self, api_client):
        url = reverse('users:register')
        data = {
            'name': 'Plain User',
            'email': 'plain@example.com',
            'password': 'SecurePass123!',
        }
        api_client.post(url, data)

        user = User.objects.get(email='plain@example.com')
        assert user.transactions.count() == 0


# =============================================================================
# Login Tests
# =============================================================================

@pytest.mark.django_db
class TestLogin:
    """Tests for POST /api/auth/login/"""

    def test_login_success(self, api_client, user):
        """Successfully login with valid credentials."""
        url = reverse('users:login')
        data = {
            'email': user.email,
            'password': 'TestPass123!',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_200_OK
        assert 'access' in response.data['tokens']
        assert response.data['user']['email'] == user.email

    def test_login_email_case_insensitive(self, api_client, user):
        url = reverse('users:login')
        response = api_client.post(url, {'email': 'TestUser@Example.com', 'password': 'TestPass123!'})

        assert response.status_code == status.HTTP_200_OK

    def test_login_wrong_password(self, api_client, user):
        """Login fails with wrong password."""
        url = reverse('users:login')
        data = {
            'email': user.email,
            'password': 'WrongPass123!',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data['error'] == 'Invalid email or password.'

    def test_login_nonexistent_user(self, api_client):
        """Login fails for unknown email."""
        url = reverse('users:login')
        data = {
            'email': 'nobody@example.com',
            'password': 'TestPass123!',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_login_inactive_user(self, api_client, user_inactive):
        """Inactive users cannot login."""
        url = reverse('users:login')
        data = {
            'email': user_inactive.email,
            'password': 'TestPass123!',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_login_missing_fields(self, api_client):
        url = reverse('users:login')
        response = api_client.post(url, {'email': 'someone@example.com'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'password' in response.data

    def test_login_updates_last_login(self, api_client, user):
        """Login updates last_login timestamp."""
        assert user.last_login is None

        url = reverse('users:login')
        api_client.post(url, {'email': user.email, 'password': 'TestPass123!'})

        user.refresh_from_db()
        assert user.last_login is not None


# =============================================================================
# Logout Tests
# =============================================================================

@pytest.mark.django_db
class TestLogout:
    """Tests for POST /api/auth/logout/"""

    def test_logout_success(self, authenticated_client):
        url = reverse('users:logout')
        response = authenticated_client.post(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['message'] == 'Logout successful'

    def test_logout_with_refresh_token(self, authenticated_client, user):
        url = reverse('users:logout')
        refresh = RefreshToken.for_user(user)
        response = authenticated_client.post(url, {'refresh': str(refresh)})

        assert response.status_code == status.HTTP_200_OK

    def test_logout_invalid_refresh_token(self, authenticated_client):
        url = reverse('users:logout')
        response = authenticated_client.post(url, {'refresh': 'not-a-token'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_logout_unauthenticated(self, api_client):
        url = reverse('users:logout')
        response = api_client.post(url)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


# =============================================================================
# Profile Tests
# =============================================================================

@pytest.mark.django_db
class TestGetCurrentUser:
    """Tests for GET /api/auth/user/"""

    def test_get_current_user(self, authenticated_client, user):
        url = reverse('users:current-user')
        response = authenticated_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['email'] == user.email
        assert response.data['currency'] == 'USD'

    def test_get_current_user_unauthenticated(self, api_client):
        url = reverse('users:current-user')
        response = api_client.get(url)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.django_db
class TestUpdateProfile:
    """Tests for PATCH /api/auth/user/update/"""

    def test_update_name(self, authenticated_client, user):
        url = reverse('users:update-profile')
        response = authenticated_client.patch(url, {'name': 'Renamed'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        user.refresh_from_db()
        assert user.name == 'Renamed'

    def test_update_currency_keeps_other_preferences(self, authenticated_client, user):
        url = reverse('users:update-profile')
        response = authenticated_client.patch(
            url, {'preferences': {'currency': 'EUR'}}, format='json'
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data['currency'] == 'EUR'
        user.refresh_from_db()
        assert user.preferences == {'currency': 'EUR', 'dark_mode': False}

    def test_toggle_dark_mode(self, authenticated_client, user):
        url = reverse('users:update-profile')
        authenticated_client.patch(url, {'preferences': {'dark_mode': True}}, format='json')

        user.refresh_from_db()
        assert user.preferences['dark_mode'] is True

    def test_invalid_currency_rejected(self, authenticated_client):
        url = reverse('users:update-profile')
        response = authenticated_client.patch(
            url, {'preferences': {'currency': 'dollars'}}, format='json'
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'preferences' in response.data

    def test_unknown_preference_rejected(self, authenticated_client):
        url = reverse('users:update-profile')
        response = authenticated_client.patch(
            url, {'preferences': {'theme': 'neon'}}, format='json'
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_cannot_update_email(self, authenticated_client, user):
        """Email is read-only."""
        url = reverse('users:update-profile')
        authenticated_client.patch(url, {'email': 'hacked@example.com'}, format='json')

        user.refresh_from_db()
        assert user.email == 'testuser@example.com'

    def test_update_profile_unauthenticated(self, api_client):
        url = reverse('users:update-profile')
        response = api_client.patch(url, {'name': 'X'}, format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
