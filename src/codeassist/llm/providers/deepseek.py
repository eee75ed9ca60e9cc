from typing import Any

from .openai import DEFAULT_TIMEOUT, OpenAIProvider


class DeepSeekProvider(OpenAIProvider):
    """DeepSeek provider using its OpenAI-compatible API.

    Hidden design decisions:
    - DeepSeek endpoint and default model
    - Everything else is shared with OpenAIProvider (same wire format)
    """

    def __init__(
        self,
        api_key: str,
        model: str = "deepseek-chat",
        base_url: str = "https://api.deepseek.com",
        timeout: float = DEFAULT_TIMEOUT,
        **client_kwargs: Any
    ):
        """Initialize DeepSeek provider.

        Args:
            api_key: DeepSeek API key
            model: Default model to use ('deepseek-chat' or 'deepseek-reasoner')
            base_url: DeepSeek API base URL (default: https://api.deepseek.com)
            timeout: Request deadline in seconds
            **client_kwargs: Additional kwargs for AsyncOpenAI client
        """
        super().__init__(
            api_key=api_key,
            model=model,
            base_url=base_url,
            timeout=timeout,
            **client_kwargs
        )
