from pydantic import BaseModel, ConfigDict, Field


class ChatMessage(BaseModel):
    """Represents a message sent to the chat-completion endpoint."""

    model_config = ConfigDict(frozen=True)

    role: str = Field(description="Role of the message sender: 'user', 'assistant', or 'system'")
    content: str = Field(description="Content of the message")


class PromptPair(BaseModel):
    """System/user prompt pair built for a single request.

    Constructed per request and never persisted.
    """

    model_config = ConfigDict(frozen=True)

    system_prompt: str = Field(description="Instruction that sets the model's behaviour")
    user_prompt: str = Field(description="The user's query together with its code context")

    def to_messages(self) -> list[ChatMessage]:
        """Return the two-message exchange sent on the wire."""
        return [
            ChatMessage(role="system", content=self.system_prompt),
            ChatMessage(role="user", content=self.user_prompt),
        ]


class LLMResponse(BaseModel):
    """Response from an LLM provider."""

    model_config = ConfigDict(frozen=True)

    content: str = Field(description="Generated text content")
    model: str = Field(description="Model that generated the response")
    usage: dict[str, int] | None = Field(
        default=None,
        description="Token usage information"
    )
