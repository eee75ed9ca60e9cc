"""Unit tests for settings loading."""
import pytest
from pydantic import ValidationError

from codeassist.config import AssistantSettings, load_settings


class TestLoadSettings:
    """Tests for load_settings."""

    def test_defaults(self, clean_env):
        settings = load_settings()

        assert settings.provider == "openai"
        assert settings.api_key is None
        assert settings.model == "gpt-4o-mini"
        assert settings.request_timeout == 30.0
        assert settings.exchange_timeout == 60.0
        assert settings.cache_size == 256
        assert settings.language == "Python"
        assert not settings.configured

    def test_explicit_values(self, clean_env):
        clean_env.setenv("ASSISTANT_API_KEY", "sk-explicit")
        clean_env.setenv("ASSISTANT_BASE_URL", "http://localhost:11434/v1")
        clean_env.setenv("ASSISTANT_MODEL", "qwen2.5-coder")
        clean_env.setenv("ASSISTANT_TIMEOUT", "12.5")
        clean_env.setenv("ASSISTANT_CACHE_SIZE", "32")
        clean_env.setenv("ASSISTANT_LANGUAGE", "Rust")

        settings = load_settings()

        assert settings.configured
        assert settings.provider_config() == {
            "api_key": "sk-explicit",
            "timeout": 12.5,
            "base_url": "http://localhost:11434/v1",
            "model": "qwen2.5-coder",
        }
        assert settings.cache_size == 32
        assert settings.language == "Rust"

    def test_provider_key_fallback(self, clean_env):
        clean_env.setenv("LLM_PROVIDER", "DeepSeek")
        clean_env.setenv("DEEPSEEK_API_KEY", "sk-deepseek")

        settings = load_settings()

        assert settings.provider == "deepseek"
        assert settings.api_key == "sk-deepseek"
        assert settings.model is None
        assert "model" not in settings.provider_config()

    def test_explicit_key_wins(self, clean_env):
        clean_env.setenv("ASSISTANT_API_KEY", "sk-a")
        clean_env.setenv("OPENAI_API_KEY", "sk-b")

        assert load_settings().api_key == "sk-a"

    def test_unparseable_number(self, clean_env):
        clean_env.setenv("ASSISTANT_CACHE_SIZE", "lots")

        with pytest.raises(ValueError):
            load_settings()

    def test_out_of_range_number(self, clean_env):
        clean_env.setenv("ASSISTANT_TIMEOUT", "0")

        with pytest.raises(ValidationError):
            load_settings()

    def test_settings_are_frozen(self):
        settings = AssistantSettings()

        with pytest.raises(ValidationError):
            settings.model = "other"  # type: ignore

