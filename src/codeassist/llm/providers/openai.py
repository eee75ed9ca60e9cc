from typing import Any

import openai
from openai import AsyncOpenAI

from ..base import NO_RESPONSE_FALLBACK, LLMProvider
from ..errors import MalformedResponseError, NetworkError, RequestTimeoutError, TransportError
from ..models import ChatMessage, LLMResponse

DEFAULT_TIMEOUT = 30.0


def _extract_content(completion: Any) -> str:
    """Pull ``choices[0].message.content`` out of a completion.

    Raises:
        MalformedResponseError: If the completion lacks that shape or the
            content is empty
    """
    try:
        content = completion.choices[0].message.content
    except (AttributeError, IndexError, KeyError, TypeError) as e:
        raise MalformedResponseError(f"unexpected response shape: {e}") from e
    if not content:
        raise MalformedResponseError("response has no message content")
    return content


def _extract_usage(completion: Any) -> dict[str, int] | None:
    usage = getattr(completion, "usage", None)
    if not usage:
        return None
    return {
        "prompt_tokens": usage.prompt_tokens,
        "completion_tokens": usage.completion_tokens,
        "total_tokens": usage.total_tokens
    }


class OpenAIProvider(LLMProvider):
    """OpenAI-compatible chat-completion provider.

    Hidden design decisions:
    - OpenAI API client initialization (bearer-token auth)
    - Message format conversion
    - Single-attempt requests with an explicit deadline
    - Mapping SDK exceptions onto TransportError / NetworkError
    """

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4o-mini",
        base_url: str | None = None,
        organization: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        **client_kwargs: Any
    ):
        """Initialize OpenAI provider.

        Args:
            api_key: API key sent as the bearer token
            model: Default model identifier
            base_url: Optional custom API base URL (any OpenAI-compatible service)
            organization: Optional organization ID
            timeout: Request deadline in seconds
            **client_kwargs: Additional kwargs for AsyncOpenAI client
        """
        super().__init__()
        self._model = model
        self._timeout = timeout
        self._client = AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            organization=organization,
            timeout=timeout,
            max_retries=0,
            **client_kwargs
        )

    @property
    def model(self) -> str:
        """Get the default model name."""
        return self._model

    @property
    def timeout(self) -> float:
        """Get the request deadline in seconds."""
        return self._timeout

    async def chat_completion(
        self,
        messages: list[ChatMessage],
        model: str | None = None,
        **kwargs: Any
    ) -> LLMResponse:
        """Generate a chat completion with a single POST to the endpoint.

        Args:
            messages: Exchange to send (system and user messages)
            model: Model to use (overrides default)
            **kwargs: Additional OpenAI-specific parameters

        Returns:
            LLMResponse with generated content, or the fallback text when the
            endpoint returned no usable content

        Raises:
            TransportError: Non-success HTTP status
            RequestTimeoutError: The deadline expired
            NetworkError: The request could not be completed
        """
        model_to_use = model or self._model

        request_params: dict[str, Any] = {
            "model": model_to_use,
            "messages": [
                {"role": msg.role, "content": msg.content}
                for msg in messages
            ],
            **kwargs
        }

        self._debug("debug", "LLM", f"POST chat completion (model={model_to_use})")

        try:
            completion = await self._client.chat.completions.create(**request_params)
        except openai.APITimeoutError as e:
            self._debug("error", "LLM", f"Request timed out after {self._timeout:g}s")
            raise RequestTimeoutError(self._timeout) from e
        except openai.APIConnectionError as e:
            self._debug("error", "LLM", f"Request failed: {e}")
            raise NetworkError(str(e)) from e
        except openai.APIStatusError as e:
            status_text = e.response.reason_phrase if e.response is not None else ""
            self._debug("error", "LLM", f"API Error: {e.status_code} {status_text}")
            raise TransportError(e.status_code, status_text) from e
        except openai.APIResponseValidationError as e:
            self._debug("warning", "LLM", f"Unparseable response body: {e}")
            return LLMResponse(content=NO_RESPONSE_FALLBACK, model=model_to_use)

        try:
            content = _extract_content(completion)
        except MalformedResponseError as e:
            self._debug("warning", "LLM", f"{e}; using fallback text")
            content = NO_RESPONSE_FALLBACK

        return LLMResponse(
            content=content,
            model=getattr(completion, "model", None) or model_to_use,
            usage=_extract_usage(completion)
        )

    async def close(self) -> None:
        """Close the OpenAI client.

        Note: Uses the OpenAI SDK's async context manager for proper cleanup.
        See: https://github.com/openai/openai-python#async-usage
        """
        await self._client.close()
