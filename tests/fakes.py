"""Test doubles for the LLM provider, the host editor and the session view."""
import asyncio
from typing import Any

from codeassist.llm import ChatMessage, LLMProvider, LLMResponse


class FakeLLM(LLMProvider):
    """In-memory provider that records every request.

    ``reply`` may be a string or a callable taking the sent messages.
    When ``gate`` is set, requests block until the event fires.
    """

    def __init__(
        self,
        reply: Any = "ok",
        error: BaseException | None = None,
        gate: asyncio.Event | None = None,
    ) -> None:
        super().__init__()
        self.reply = reply
        self.error = error
        self.gate = gate
        self.calls: list[list[ChatMessage]] = []
        self.closed = False

    @property
    def model(self) -> str:
        return "fake-model"

    async def chat_completion(
        self,
        messages: list[ChatMessage],
        model: str | None = None,
        **kwargs: Any
    ) -> LLMResponse:
        self.calls.append(messages)
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        content = self.reply(messages) if callable(self.reply) else self.reply
        return LLMResponse(content=content, model=model or self.model)

    async def close(self) -> None:
        self.closed = True

    @property
    def last_user_prompt(self) -> str:
        return self.calls[-1][1].content

    @property
    def last_system_prompt(self) -> str:
        return self.calls[-1][0].content


class FakeEditor:
    """Editor stand-in with settable document and selection."""

    def __init__(self, text: str = "", selected: str = "") -> None:
        self.text = text
        self.selected = selected

    def get_text(self) -> str:
        return self.text

    def get_selected_text(self) -> str:
        return self.selected


class RecordingView:
    """Session view that records every notification in order."""

    def __init__(self) -> None:
        self.events: list[tuple] = []

    def message_added(self, message) -> None:
        self.events.append(("added", message))

    def message_replaced(self, index: int, message) -> None:
        self.events.append(("replaced", index, message))

    def busy_changed(self, busy: bool) -> None:
        self.events.append(("busy", busy))

    def clear_input(self) -> None:
        self.events.append(("clear_input",))

    def kinds(self) -> list[str]:
        return [event[0] for event in self.events]


async def wait_until(predicate, attempts: int = 100) -> None:
    """Yield to the event loop until ``predicate()`` holds."""
    for _ in range(attempts):
        if predicate():
            return
        await asyncio.sleep(0)
    raise AssertionError("condition never became true")
