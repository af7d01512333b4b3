"""
Tests for config/settings.py - Environment configuration
"""
from study_assistant.config.settings import get_api_key


class TestGetApiKey:
    """Test API credential resolution"""

    def test_api_key_preferred(self, monkeypatch):
        monkeypatch.setenv("API_KEY", "primary")
        monkeypatch.setenv("GOOGLE_API_KEY", "secondary")

        assert get_api_key() == "primary"

    def test_google_api_key_fallback(self, monkeypatch):
        monkeypatch.delenv("API_KEY", raising=False)
        monkeypatch.setenv("GOOGLE_API_KEY", "secondary")

        assert get_api_key() == "secondary"

    def test_blank_treated_as_missing(self, monkeypatch):
        monkeypatch.setenv("API_KEY", "   ")
        monkeypatch.delenv("GOOGLE_API_KEY", raising=False)

        assert get_api_key() is None
