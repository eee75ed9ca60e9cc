from abc import ABC, abstractmethod
from typing import Any

from .models import ChatMessage, LLMResponse, PromptPair

# Returned when the endpoint answers successfully but without message content
NO_RESPONSE_FALLBACK = "No response from AI."


class LLMProvider(ABC):
    """Abstract base class for chat-completion providers.

    This module hides the design decision of which endpoint answers prompts.
    Implementations must handle provider-specific details like:
    - API client setup and authentication
    - Request/response format conversion
    - Classifying failures into the error taxonomy in ``errors.py``

    Requests are single-attempt: implementations never retry.

    Supports async context manager protocol for proper resource cleanup:
        async with provider:
            text = await provider.complete(prompt)
        # Automatically cleaned up
    """

    def __init__(self) -> None:
        self._debug_callback: Any | None = None

    def set_debug_callback(self, callback: Any) -> None:
        """Set debug callback for logging.

        Args:
            callback: Callable(level: str, component: str, message: str)
        """
        self._debug_callback = callback

    def _debug(self, level: str, component: str, message: str) -> None:
        """Send debug message if callback is set."""
        if self._debug_callback:
            self._debug_callback(level, component, message)

    @property
    @abstractmethod
    def model(self) -> str:
        """Get the default model name."""
        pass

    @abstractmethod
    async def chat_completion(
        self,
        messages: list[ChatMessage],
        model: str | None = None,
        **kwargs: Any
    ) -> LLMResponse:
        """Generate a chat completion.

        Args:
            messages: List of chat messages forming the exchange
            model: Model to use (None uses provider's default)
            **kwargs: Provider-specific parameters

        Returns:
            LLMResponse containing generated content and metadata

        Raises:
            TransportError: The endpoint returned a non-success status
            NetworkError: The request could not be completed
        """
        pass

    async def complete(self, prompt: PromptPair, **kwargs: Any) -> str:
        """Send a system/user prompt pair and return the response text.

        Args:
            prompt: Prompt pair for this request
            **kwargs: Forwarded to ``chat_completion``

        Returns:
            The first choice's message content, or ``NO_RESPONSE_FALLBACK``
        """
        response = await self.chat_completion(prompt.to_messages(), **kwargs)
        return response.content

    @abstractmethod
    async def close(self) -> None:
        """Close any open connections or resources."""
        pass

    async def __aenter__(self) -> "LLMProvider":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit with automatic cleanup.

        Note: Suppresses "Event loop is closed" errors during cleanup.
        This is a known harmless race condition in httpx/anyio cleanup:
        https://github.com/encode/httpx/issues/914
        """
        try:
            await self.close()
        except RuntimeError as e:
            # Suppress harmless cleanup errors from httpx/anyio
            if "Event loop is closed" not in str(e):
                raise
