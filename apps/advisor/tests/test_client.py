import pytest
from django.test import override_settings
from apps.advisor import client as gemini
from apps.advisor.exceptions import AIConfigurationError


@pytest.fixture
def configured_keys(monkeypatch):
    """Record genai.configure calls and start without a shared client."""
    keys = []
    monkeypatch.setattr(gemini.genai, 'configure', lambda api_key: keys.append(api_key))
    monkeypatch.setattr(gemini, '_shared_client', None)
    return keys


class TestGetClient:

    @override_settings(GEMINI_API_KEY='key-one', GEMINI_MODEL='gemini-2.5-flash')
    def test_client_is_shared(self, configured_keys):
        first = gemini.get_client()
        second = gemini.get_client()

        assert first is second
        assert configured_keys == ['key-one']

    def test_key_change_replaces_client(self, configured_keys):
        with override_settings(GEMINI_API_KEY='key-one'):
            first = gemini.get_client()
        with override_settings(GEMINI_API_KEY='key-two'):
            second = gemini.get_client()

        assert first is not second
        assert second.api_key == 'key-two'
        assert configured_keys == ['key-one', 'key-two']

    @override_settings(GEMINI_API_KEY='')
    def test_missing_key(self, configured_keys):
        with pytest.raises(AIConfigurationError):
            gemini.get_client()

        assert configured_keys == []
        assert gemini._shared_client is None
