"""Test application configuration."""

import pytest
from pydantic import ValidationError

from mention_assistant.config import AppConfig


class TestAppConfig:
    """Test configuration loading and validation."""

    def test_should_use_defaults(self):
        """Test default models and budgets."""
        settings = AppConfig(_env_file=None)

        assert settings.text_model == "llama-3.1-8b-instant"
        assert settings.vision_model == "llama-3.2-90b-vision-preview"
        assert settings.chat_model == "llama-3.3-70b-versatile"
        assert settings.explain_max_tokens == 1000
        assert settings.question_max_tokens == 800
        assert settings.cache_ttl_seconds == 3600

    def test_should_strip_at_from_handle(self):
        """Test handle normalization."""
        assert AppConfig(assistant_handle=" @EduHive ").assistant_handle == "EduHive"

    def test_should_reject_empty_handle(self):
        """Test empty handle."""
        with pytest.raises(ValidationError):
            AppConfig(assistant_handle="@")

    def test_should_reject_zero_ttl(self):
        """Test TTL lower bound."""
        with pytest.raises(ValidationError):
            AppConfig(cache_ttl_seconds=0)

    def test_should_reject_unknown_persona(self):
        """Test persona choices."""
        with pytest.raises(ValidationError):
            AppConfig(persona="chatty")

    def test_should_build_redis_url(self):
        """Test Redis URL with and without password."""
        assert AppConfig(redis_host="cache", redis_port=6380, redis_db=2).redis_url == (
            "redis://cache:6380/2"
        )
        assert AppConfig(redis_password="secret").redis_url == (
            "redis://:secret@localhost:6379/0"
        )

    def test_should_load_from_environment(self, monkeypatch):
        """Test environment variables override defaults."""
        monkeypatch.setenv("GROQ_API_KEY", "env-key")
        monkeypatch.setenv("PERSONA", "concise")

        settings = AppConfig()

        assert settings.groq_api_key == "env-key"
        assert settings.persona == "concise"

    def test_should_split_origins(self):
        """Test CORS origins list."""
        settings = AppConfig(allowed_origins="http://a.test, http://b.test")

        assert settings.allowed_origins_list == ["http://a.test", "http://b.test"]
