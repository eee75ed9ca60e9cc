from .base import NO_RESPONSE_FALLBACK, LLMProvider
from .errors import (
    AssistantError,
    MalformedResponseError,
    NetworkError,
    RequestTimeoutError,
    TransportError,
)
from .factory import create_llm_provider
from .models import ChatMessage, LLMResponse, PromptPair
from .providers import DeepSeekProvider, OpenAIProvider

__all__ = [
    "LLMProvider",
    "NO_RESPONSE_FALLBACK",
    "create_llm_provider",
    "AssistantError",
    "MalformedResponseError",
    "NetworkError",
    "RequestTimeoutError",
    "TransportError",
    "ChatMessage",
    "LLMResponse",
    "PromptPair",
    "DeepSeekProvider",
    "OpenAIProvider",
]
