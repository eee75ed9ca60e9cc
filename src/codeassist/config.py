"""Static configuration resolved at process start.

Values come from the environment (optionally a ``.env`` file loaded by the
CLI). Nothing is reconfigured at runtime.
"""

import os

from pydantic import BaseModel, ConfigDict, Field

from .completion import DEFAULT_CACHE_CAPACITY
from .session import DEFAULT_EXCHANGE_TIMEOUT

DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_PROVIDER = "openai"
DEFAULT_LANGUAGE = "Python"
DEFAULT_REQUEST_TIMEOUT = 30.0

# Provider-specific key variables consulted when ASSISTANT_API_KEY is unset
_PROVIDER_KEY_VARS = {
    "openai": "OPENAI_API_KEY",
    "deepseek": "DEEPSEEK_API_KEY",
}


class AssistantSettings(BaseModel):
    """Endpoint, credentials and tuning for the assistant."""

    model_config = ConfigDict(frozen=True)

    provider: str = Field(default=DEFAULT_PROVIDER, description="'openai' or 'deepseek'")
    api_key: str | None = Field(default=None, description="Bearer token for the endpoint")
    base_url: str | None = Field(default=None, description="OpenAI-compatible API base URL")
    model: str | None = Field(default=None, description="Model identifier (provider default if unset)")
    request_timeout: float = Field(default=DEFAULT_REQUEST_TIMEOUT, gt=0, description="HTTP deadline in seconds")
    exchange_timeout: float = Field(default=DEFAULT_EXCHANGE_TIMEOUT, gt=0, description="Chat exchange deadline in seconds")
    cache_size: int = Field(default=DEFAULT_CACHE_CAPACITY, ge=1, description="Completion cache capacity")
    language: str = Field(default=DEFAULT_LANGUAGE, description="Initial target language")

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    def provider_config(self) -> dict:
        """Keyword arguments for ``create_llm_provider``."""
        config: dict = {"api_key": self.api_key, "timeout": self.request_timeout}
        if self.base_url:
            config["base_url"] = self.base_url
        if self.model:
            config["model"] = self.model
        return config


def load_settings() -> AssistantSettings:
    """Build settings from environment variables.

    Environment variables:
        LLM_PROVIDER: Provider type (openai, deepseek; default: openai)
        ASSISTANT_API_KEY: API key (falls back to OPENAI_API_KEY / DEEPSEEK_API_KEY)
        ASSISTANT_BASE_URL: Custom OpenAI-compatible base URL
        ASSISTANT_MODEL: Model identifier (default: gpt-4o-mini for openai)
        ASSISTANT_TIMEOUT: Request deadline in seconds (default: 30)
        ASSISTANT_EXCHANGE_TIMEOUT: Chat exchange deadline in seconds (default: 60)
        ASSISTANT_CACHE_SIZE: Completion cache capacity (default: 256)
        ASSISTANT_LANGUAGE: Initial target language (default: Python)

    Raises:
        pydantic.ValidationError: If a numeric value is out of range
        ValueError: If a numeric value cannot be parsed
    """
    provider = os.getenv("LLM_PROVIDER", DEFAULT_PROVIDER).lower()

    api_key = os.getenv("ASSISTANT_API_KEY")
    if not api_key and provider in _PROVIDER_KEY_VARS:
        api_key = os.getenv(_PROVIDER_KEY_VARS[provider])

    model = os.getenv("ASSISTANT_MODEL")
    if not model and provider == "openai":
        model = DEFAULT_MODEL

    return AssistantSettings(
        provider=provider,
        api_key=api_key or None,
        base_url=os.getenv("ASSISTANT_BASE_URL") or None,
        model=model,
        request_timeout=float(os.getenv("ASSISTANT_TIMEOUT", str(DEFAULT_REQUEST_TIMEOUT))),
        exchange_timeout=float(os.getenv("ASSISTANT_EXCHANGE_TIMEOUT", str(DEFAULT_EXCHANGE_TIMEOUT))),
        cache_size=int(os.getenv("ASSISTANT_CACHE_SIZE", str(DEFAULT_CACHE_CAPACITY))),
        language=os.getenv("ASSISTANT_LANGUAGE", DEFAULT_LANGUAGE),
    )
