"""Interfaces the host editor and UI must provide.

The assistant never touches widgets or editor internals directly; it
talks to these protocols. Any editor (the bundled Textual app, a test
fake, another frontend) can be plugged in by implementing them.
"""

from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .session.models import ChatMessage

# Async provider of the user's currently selected target language name
LanguageProvider = Callable[[], Awaitable[str]]

# Synchronous accessor for the current compiler error; empty or None when there is none
CompilerErrorProvider = Callable[[], "str | None"]


class HostEditor(Protocol):
    """The editor whose document the assistant reads."""

    def get_text(self) -> str:
        """Return the full document text."""
        ...

    def get_selected_text(self) -> str:
        """Return the currently selected text, or an empty string."""
        ...


class SessionView(Protocol):
    """The transcript container and controls of the assistant panel."""

    def message_added(self, message: "ChatMessage") -> None:
        """A message was appended to the transcript."""
        ...

    def message_replaced(self, index: int, message: "ChatMessage") -> None:
        """The transcript element at ``index`` was replaced in place."""
        ...

    def busy_changed(self, busy: bool) -> None:
        """The busy indicator toggled; submit controls follow it."""
        ...

    def clear_input(self) -> None:
        """Empty the question input field."""
        ...


def static_language(name: str) -> LanguageProvider:
    """Language provider that always answers ``name``."""

    async def _language() -> str:
        return name

    return _language


def check_python_source(source: str, filename: str = "<editor>") -> str | None:
    """Byte-compile ``source`` and describe the first error, if any.

    Serves as the compiler-error provider for Python documents.

    Returns:
        "file:line:col: Kind: message", or None when the source compiles
    """
    try:
        compile(source, filename, "exec")
    except SyntaxError as e:
        return f"{filename}:{e.lineno}:{e.offset}: {type(e).__name__}: {e.msg}"
    except ValueError as e:
        return f"{filename}: {type(e).__name__}: {e}"
    return None
