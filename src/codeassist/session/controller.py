"""Chat session controller.

Sequences one exchange at a time through the assistant pipeline:

    Idle -> AwaitingResponse -> Resolved(success | error | cancelled) -> Idle

On dispatch the user's message (if any) and a provisional assistant
message are appended and the busy indicator is raised. On resolution
the provisional message is replaced in place; busy always drops again.

Each exchange carries a unique id. A result is applied only while its
exchange is still the current one and its placeholder is still the last
transcript element; anything else is a stale response and is dropped.
"""

import asyncio
import itertools
from collections.abc import Awaitable, Callable
from typing import Any

from ..collaborators import CompilerErrorProvider, HostEditor, SessionView
from ..llm import RequestTimeoutError
from .models import ChatMessage, Exchange, ExchangeKind, ExchangeState, Transcript
from .service import AssistantService

PROCESSING_MESSAGE = "Processing your request..."
FIX_PROCESSING_MESSAGE = "Analyzing the error and suggesting fixes..."
CANCELLED_MESSAGE = "Request cancelled."

# Seconds an exchange may wait for the pipeline before it fails
DEFAULT_EXCHANGE_TIMEOUT = 60.0


def format_error(error: BaseException) -> str:
    return f"**Error:** {error}"


def format_fix_error(error: BaseException) -> str:
    return f"**Failed to fetch fix suggestion:** {error}"


def format_fix_result(error_text: str, fix: str) -> str:
    """Show the compiler error the fix answers, followed by the suggestion."""
    return (
        "Compilation Error:\n\n"
        f"```\n{error_text}\n```\n\n"
        "**AI Suggestion:**\n\n"
        f"{fix}"
    )


def format_selection_question(question: str, selected_code: str) -> str:
    """User message for a selection query: the question with the snippet inline."""
    return f"{question}\n\n```\n{selected_code}\n```"


class ChatSessionController:
    """Owns the transcript and the busy indicator of one assistant panel.

    Example:
        controller = ChatSessionController(service, editor, view=panel)
        await controller.ask("Why does this loop never end?")
    """

    def __init__(
        self,
        service: AssistantService,
        editor: HostEditor,
        compiler_error: CompilerErrorProvider | None = None,
        view: SessionView | None = None,
        transcript: Transcript | None = None,
        timeout: float | None = DEFAULT_EXCHANGE_TIMEOUT,
    ) -> None:
        self._service = service
        self._editor = editor
        self._compiler_error = compiler_error
        self._view = view
        self._transcript = transcript if transcript is not None else Transcript()
        self._timeout = timeout
        self._ids = itertools.count(1)
        self._current: Exchange | None = None
        self._busy = False
        self._debug_callback: Any | None = None

    @property
    def transcript(self) -> Transcript:
        return self._transcript

    @property
    def busy(self) -> bool:
        """True while an exchange awaits its response."""
        return self._busy

    @property
    def current_exchange(self) -> Exchange | None:
        return self._current

    def set_view(self, view: SessionView | None) -> None:
        self._view = view

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

    def has_compiler_error(self) -> bool:
        """Whether a fix can currently be requested."""
        if self._compiler_error is None:
            return False
        error_text = self._compiler_error()
        return bool(error_text and error_text.strip())

    async def ask(self, question: str) -> Exchange | None:
        """Submit a free-form question about the current document.

        Returns:
            The resolved exchange, or None if nothing was dispatched
        """
        question = question.strip()
        if not question or self._reject_if_busy(ExchangeKind.QUESTION):
            return None

        self._append(ChatMessage.user(question))
        code_context = self._editor.get_text()
        return await self._run_exchange(
            ExchangeKind.QUESTION,
            PROCESSING_MESSAGE,
            lambda: self._service.answer_question(question, code_context),
            on_success=lambda markup: markup,
            on_error=format_error,
            clear_input=True,
        )

    async def suggest_fix(self) -> Exchange | None:
        """Ask for a fix to the current compiler error.

        A no-op when there is no compiler error.
        """
        error_text = self._compiler_error() if self._compiler_error is not None else None
        if not error_text or not error_text.strip():
            return None
        if self._reject_if_busy(ExchangeKind.FIX):
            return None

        code_context = self._editor.get_text()
        return await self._run_exchange(
            ExchangeKind.FIX,
            FIX_PROCESSING_MESSAGE,
            lambda: self._service.suggest_fix(error_text, code_context),
            on_success=lambda fix: format_fix_result(error_text, fix),
            on_error=format_fix_error,
        )

    async def ask_about_selection(self, selected_code: str, question: str) -> Exchange | None:
        """Ask about a highlighted snippet; the full document stays the context.

        A no-op unless both the selection and the question are non-empty.
        """
        question = question.strip()
        if not selected_code.strip() or not question:
            return None
        if self._reject_if_busy(ExchangeKind.SELECTION):
            return None

        self._append(ChatMessage.user(format_selection_question(question, selected_code)))
        full_source = self._editor.get_text()
        return await self._run_exchange(
            ExchangeKind.SELECTION,
            PROCESSING_MESSAGE,
            lambda: self._service.query_selection(selected_code, question, full_source),
            on_success=lambda markup: markup,
            on_error=format_error,
        )

    def cancel(self) -> bool:
        """Cancel the in-flight exchange.

        Returns:
            True if there was a request to cancel
        """
        exchange = self._current
        if exchange is None or exchange.task is None or exchange.task.done():
            return False
        exchange.cancel_requested = True
        exchange.task.cancel()
        self._debug("info", "Session", f"Exchange {exchange.id} cancellation requested")
        return True

    def reset(self) -> None:
        """Clear the transcript, abandoning any in-flight exchange.

        The abandoned exchange's result is discarded when it arrives.
        """
        exchange = self._current
        if exchange is not None:
            self._current = None
            exchange.cancel_requested = True
            if exchange.task is not None and not exchange.task.done():
                exchange.task.cancel()
            self._set_busy(False)
        self._transcript.clear()

    def _reject_if_busy(self, kind: ExchangeKind) -> bool:
        if self._busy:
            self._debug("warning", "Session", f"Ignoring {kind.value} request: exchange in progress")
            return True
        return False

    def _append(self, message: ChatMessage) -> int:
        index = self._transcript.append(message)
        if self._view is not None:
            self._view.message_added(message)
        return index

    def _set_busy(self, busy: bool) -> None:
        self._busy = busy
        if self._view is not None:
            self._view.busy_changed(busy)

    async def _run_exchange(
        self,
        kind: ExchangeKind,
        placeholder: str,
        pipeline: Callable[[], Awaitable[str]],
        on_success: Callable[[str], str],
        on_error: Callable[[BaseException], str],
        clear_input: bool = False,
    ) -> Exchange:
        exchange = Exchange(id=next(self._ids), kind=kind)
        exchange.placeholder_index = self._append(
            ChatMessage.assistant(placeholder, provisional=True)
        )
        self._current = exchange
        self._set_busy(True)
        self._debug("info", "Session", f"Exchange {exchange.id} ({kind.value}) dispatched")

        deadline = asyncio.timeout(self._timeout)

        async def _guarded() -> str:
            async with deadline:
                return await pipeline()

        task = asyncio.ensure_future(_guarded())
        exchange.task = task
        try:
            result = await task
        except asyncio.CancelledError:
            self._resolve(exchange, CANCELLED_MESSAGE, ExchangeState.CANCELLED)
            if not exchange.cancel_requested:
                raise
        except TimeoutError as e:
            # A TimeoutError from the pipeline itself keeps its own text
            error = RequestTimeoutError(self._timeout) if deadline.expired() else e
            self._debug("error", "Session", f"Exchange {exchange.id} failed: {error}")
            self._resolve(exchange, on_error(error), ExchangeState.FAILED)
        except Exception as e:
            self._debug("error", "Session", f"Exchange {exchange.id} failed: {e}")
            self._resolve(exchange, on_error(e), ExchangeState.FAILED)
        else:
            self._resolve(exchange, on_success(result), ExchangeState.SUCCEEDED)
        finally:
            self._finish(exchange, clear_input)
        return exchange

    def _is_current(self, exchange: Exchange) -> bool:
        return (
            exchange is self._current
            and not exchange.done
            and exchange.placeholder_index == len(self._transcript) - 1
        )

    def _resolve(self, exchange: Exchange, content: str, state: ExchangeState) -> None:
        if not self._is_current(exchange):
            exchange.state = ExchangeState.STALE
            self._debug("warning", "Session", f"Discarding stale response for exchange {exchange.id}")
            return

        message = ChatMessage.assistant(content)
        index = self._transcript.replace_last(message)
        exchange.state = state
        if self._view is not None:
            self._view.message_replaced(index, message)
        self._debug("info", "Session", f"Exchange {exchange.id} resolved: {state.value}")

    def _finish(self, exchange: Exchange, clear_input: bool) -> None:
        if self._current is not exchange:
            return
        self._current = None
        self._set_busy(False)
        if clear_input and self._view is not None:
            self._view.clear_input()
