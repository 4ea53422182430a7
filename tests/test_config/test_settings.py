"""Tests for application settings."""

import pytest
from pydantic import ValidationError

from src.config.settings import Settings, get_settings


class TestSettings:
    """Test environment-driven configuration."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch):
        for name in ("LLM_PROVIDER", "QUIZ_QUESTION_COUNT", "REQUEST_TIMEOUT_SECONDS"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.llm_provider == "bedrock"
        assert settings.quiz_question_count == 4
        assert settings.request_timeout_seconds == 90.0
        assert settings.evaluation_temperature < settings.generation_temperature

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("QUIZ_QUESTION_COUNT", "6")
        monkeypatch.setenv("LLM_PROVIDER", "anthropic")

        settings = Settings(_env_file=None)

        assert settings.quiz_question_count == 6
        assert settings.llm_provider == "anthropic"

    def test_rejects_unknown_provider(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("LLM_PROVIDER", "gemini")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_question_count_bounds(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("QUIZ_QUESTION_COUNT", "1")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_get_settings_is_cached(self):
        get_settings.cache_clear()
        assert get_settings() is get_settings()
