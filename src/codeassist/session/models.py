"""Data models for the chat session.

Hides the internal representation of chat messages, the transcript and
in-flight exchanges.
"""

import asyncio
from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class MessageOrigin(str, Enum):
    """Who produced a chat message."""

    USER = "user"
    ASSISTANT = "assistant"


@dataclass(frozen=True)
class ChatMessage:
    """A message in the transcript.

    Assistant messages carry a display timestamp; user messages do not.
    Provisional messages are placeholders awaiting an exchange's result.
    """

    content: str
    origin: MessageOrigin
    timestamp: datetime | None = None
    provisional: bool = False

    @classmethod
    def user(cls, content: str) -> "ChatMessage":
        return cls(content=content, origin=MessageOrigin.USER)

    @classmethod
    def assistant(cls, content: str, provisional: bool = False) -> "ChatMessage":
        return cls(
            content=content,
            origin=MessageOrigin.ASSISTANT,
            timestamp=datetime.now(),
            provisional=provisional,
        )

    @property
    def is_user(self) -> bool:
        return self.origin is MessageOrigin.USER

    @property
    def display_time(self) -> str:
        """Timestamp as HH:MM, or an empty string when there is none."""
        return self.timestamp.strftime("%H:%M") if self.timestamp else ""


class Transcript:
    """Ordered chat messages.

    Append-only, except that the last element may be replaced in place
    when a provisional message is resolved.
    """

    def __init__(self) -> None:
        self._messages: list[ChatMessage] = []

    def append(self, message: ChatMessage) -> int:
        """Append a message and return its index."""
        self._messages.append(message)
        return len(self._messages) - 1

    def replace_last(self, message: ChatMessage) -> int:
        """Replace the last message and return its index.

        Raises:
            IndexError: If the transcript is empty
        """
        if not self._messages:
            raise IndexError("cannot replace the last message of an empty transcript")
        self._messages[-1] = message
        return len(self._messages) - 1

    @property
    def last(self) -> ChatMessage | None:
        return self._messages[-1] if self._messages else None

    @property
    def has_pending(self) -> bool:
        """Whether the last message is an unresolved placeholder."""
        return self.last is not None and self.last.provisional

    def last_response(self) -> ChatMessage | None:
        """Most recent resolved assistant message."""
        for message in reversed(self._messages):
            if not message.is_user and not message.provisional:
                return message
        return None

    def clear(self) -> None:
        self._messages.clear()

    def __getitem__(self, index: int) -> ChatMessage:
        return self._messages[index]

    def __iter__(self) -> Iterator[ChatMessage]:
        return iter(self._messages)

    def __len__(self) -> int:
        return len(self._messages)


class ExchangeKind(str, Enum):
    """The user action that started an exchange."""

    QUESTION = "question"
    FIX = "fix"
    SELECTION = "selection"


class ExchangeState(str, Enum):
    """Lifecycle of one request/response exchange."""

    AWAITING = "awaiting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    CANCELLED = "cancelled"
    STALE = "stale"  # result arrived after the exchange stopped being current


@dataclass
class Exchange:
    """One dispatched request and the placeholder it will resolve."""

    id: int
    kind: ExchangeKind
    placeholder_index: int = -1
    state: ExchangeState = ExchangeState.AWAITING
    task: "asyncio.Future[str] | None" = field(default=None, repr=False)
    cancel_requested: bool = False

    @property
    def done(self) -> bool:
        return self.state is not ExchangeState.AWAITING
