"""Custom Textual widgets for the TUI.

Hides widget implementation details:
- Editor access for the assistant (document text, selection)
- Chat message rendering and in-place replacement
- Busy indicator and submit-control gating
- Log rendering with level filtering
"""

from datetime import datetime

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.events import Click
from textual.message import Message
from textual.widgets import Button, Input, Markdown, OptionList, RichLog, Static, TextArea

from ..session.models import ChatMessage
from .config import (
    INPUT_HINT,
    INPUT_HISTORY_MAX_SIZE,
    LOG_MAX_MESSAGE_LENGTH,
    LOG_TIMESTAMP_FORMAT,
    PLACEHOLDER_HINT,
    LogLevel,
)


class EditorPane(TextArea):
    """The source editor; implements the assistant's HostEditor protocol."""

    BORDER_TITLE = "Editor"

    def get_text(self) -> str:
        return self.text

    def get_selected_text(self) -> str:
        return self.selected_text

    def char_before_cursor(self) -> str:
        """The character just left of the cursor, or an empty string."""
        row, column = self.cursor_location
        if column == 0:
            return ""
        return self.document.get_line(row)[column - 1:column]

    def set_compiler_error(self, error_text: str | None) -> None:
        """Reflect the current compiler error in the border subtitle."""
        if error_text:
            first_line = error_text.splitlines()[0]
            self.border_subtitle = first_line
            self.add_class("has-error")
        else:
            self.border_subtitle = ""
            self.remove_class("has-error")


class CompletionMenu(OptionList):
    """Suggestion list shown under the editor."""

    BORDER_TITLE = "AI Suggestions"

    def show_suggestions(self, labels: list[str]) -> None:
        self.clear_options()
        if not labels:
            self.display = False
            return
        self.add_options(labels)
        self.highlighted = 0
        self.display = True

    def hide(self) -> None:
        self.clear_options()
        self.display = False


class SelectionAskBar(Horizontal):
    """Floating question box shown while code is selected in the editor."""

    class Asked(Message):
        """Message sent when the user asks about the selection."""

        def __init__(self, question: str) -> None:
            super().__init__()
            self.question = question

    def compose(self) -> ComposeResult:
        yield Input(placeholder="Enter your question...", id="selection-question")
        yield Button("Ask AI", id="ask-btn")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "ask-btn":
            event.stop()
            self._ask()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self._ask()

    def _ask(self) -> None:
        question = self.query_one("#selection-question", Input).value.strip()
        if question:
            self.post_message(self.Asked(question))

    def clear(self) -> None:
        self.query_one("#selection-question", Input).value = ""


class MessageView(Vertical):
    """A single transcript entry; click to copy its content."""

    def __init__(self, message: ChatMessage, **kwargs) -> None:
        super().__init__(classes="chat-message", **kwargs)
        self._message = message

    def compose(self) -> ComposeResult:
        yield Static(self._header_text(), classes="message-header")
        yield Markdown(self._message.content, classes="message-content")

    def on_mount(self) -> None:
        self._apply_classes()

    def _header_text(self) -> str:
        if self._message.is_user:
            return "> You"
        return f"< Assistant [{self._message.display_time}]"

    def _apply_classes(self) -> None:
        user = self._message.is_user
        self.set_class(user, "user-message")
        self.set_class(not user, "assistant-message")
        self.set_class(self._message.provisional, "provisional")

    def show(self, message: ChatMessage) -> None:
        """Replace the displayed message in place."""
        self._message = message
        self._apply_classes()
        self.query_one(".message-header", Static).update(self._header_text())
        self.query_one(".message-content", Markdown).update(message.content)

    def on_click(self, event: Click) -> None:
        event.stop()
        self.app.copy_to_clipboard(self._message.content)
        self.app.notify("Copied to clipboard", timeout=2)


class ChatHistoryWidget(VerticalScroll):
    """Scrollable transcript display."""

    BORDER_TITLE = "Code Assistant"
    BORDER_SUBTITLE = "Conversation history"
    ALLOW_MAXIMIZE = True

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._views: list[MessageView] = []

    def add_message(self, message: ChatMessage) -> None:
        view = MessageView(message)
        self._views.append(view)
        self.mount(view)
        self.border_subtitle = f"{len(self._views)} messages"
        self.scroll_end(animate=False)

    def replace_message(self, index: int, message: ChatMessage) -> None:
        self._views[index].show(message)
        self.scroll_end(animate=False)

    def clear_history(self) -> None:
        self._views.clear()
        self.remove_children()
        self.border_subtitle = "Conversation history"


class StatusIndicator(Static):
    """Busy indicator in the assistant panel header."""

    def on_mount(self) -> None:
        self.set_busy(False)

    def set_busy(self, busy: bool) -> None:
        self.set_class(busy, "active")
        self.update("● thinking" if busy else "○ idle")


class ChatInputBar(Horizontal):
    """Chat input bar with TextArea, Send button and Suggest Fix button."""

    class Submitted(Message):
        """Message sent when user submits input."""

        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    class FixRequested(Message):
        """Message sent when user asks for a compiler-error fix."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._history: list[str] = []
        self._history_index: int = -1

    def compose(self) -> ComposeResult:
        text_area = TextArea(id="chat-input", show_line_numbers=False, placeholder=PLACEHOLDER_HINT)
        text_area.cursor_blink = False
        yield text_area
        yield Button("Send", id="send-btn", variant="success").with_tooltip(
            "Submit message (Ctrl+J)"
        )
        yield Button("Suggest Fix", id="fix-btn", variant="warning")

    def on_mount(self) -> None:
        self.query_one("#chat-input", TextArea).highlight_cursor_line = False

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "send-btn":
            event.stop()
            self._submit()
        elif event.button.id == "fix-btn":
            event.stop()
            self.post_message(self.FixRequested())

    def on_key(self, event) -> None:
        """Handle keyboard shortcuts.

        Note: ctrl+enter cannot work in terminals (terminal doesn't pass
        ctrl/shift modifiers with Enter). Use ctrl+j as the submit shortcut.
        """
        if event.key == "ctrl+j":
            self._submit()
            event.prevent_default()
            event.stop()
        elif event.key == "up" and self._is_cursor_at_start():
            self._navigate_history(-1)
            event.prevent_default()
            event.stop()

    def _is_cursor_at_start(self) -> bool:
        return self.query_one("#chat-input", TextArea).cursor_location == (0, 0)

    def _navigate_history(self, direction: int) -> None:
        if not self._history:
            return
        if self._history_index == -1:
            self._history_index = len(self._history) - 1
        elif self._history_index > 0:
            self._history_index += direction
        self.query_one("#chat-input", TextArea).text = self._history[self._history_index]

    def _submit(self) -> None:
        if self.query_one("#send-btn", Button).disabled:
            return
        value = self.query_one("#chat-input", TextArea).text.strip()
        if value:
            if not self._history or self._history[-1] != value:
                self._history.append(value)
                del self._history[:-INPUT_HISTORY_MAX_SIZE]
            self._history_index = -1
            self.post_message(self.Submitted(value))

    def set_busy(self, busy: bool) -> None:
        """Disable the submit controls while an exchange is outstanding."""
        self.query_one("#send-btn", Button).disabled = busy
        self.query_one("#fix-btn", Button).disabled = busy

    def show_fix(self, show: bool) -> None:
        """Show the Suggest Fix button only while a compiler error exists."""
        self.query_one("#fix-btn", Button).display = show

    def clear(self) -> None:
        self.query_one("#chat-input", TextArea).text = ""

    def focus_input(self) -> None:
        """Focus the text input."""
        self.query_one("#chat-input", TextArea).focus()


class AssistantPanel(Vertical):
    """The assistant panel; implements the controller's SessionView protocol."""

    def compose(self) -> ComposeResult:
        with Horizontal(id="panel-header"):
            yield Static("🤖 Code Assistant", id="panel-title")
            yield StatusIndicator(id="status")
        yield ChatHistoryWidget(id="chat-history")
        yield ChatInputBar(id="chat-input-bar")
        yield Static(INPUT_HINT, id="input-hint")

    def message_added(self, message: ChatMessage) -> None:
        self.query_one("#chat-history", ChatHistoryWidget).add_message(message)

    def message_replaced(self, index: int, message: ChatMessage) -> None:
        self.query_one("#chat-history", ChatHistoryWidget).replace_message(index, message)

    def busy_changed(self, busy: bool) -> None:
        self.query_one("#status", StatusIndicator).set_busy(busy)
        self.query_one("#chat-input-bar", ChatInputBar).set_busy(busy)

    def clear_input(self) -> None:
        self.query_one("#chat-input-bar", ChatInputBar).clear()

    def show_fix(self, show: bool) -> None:
        self.query_one("#chat-input-bar", ChatInputBar).show_fix(show)

    def clear_history(self) -> None:
        self.query_one("#chat-history", ChatHistoryWidget).clear_history()


class DebugPanel(RichLog):
    """Log panel for real-time tracing with level filtering.

    Shows timestamped log messages from all components.
    Supports standard log levels: DEBUG < INFO < WARNING < ERROR.
    Hidden by default, shown with --log-level flag or toggled with Ctrl+G.
    """

    BORDER_TITLE = "Log"
    BORDER_SUBTITLE = "Trace log"

    _LEVEL_COLORS = {
        LogLevel.DEBUG: "dim white",
        LogLevel.INFO: "cyan",
        LogLevel.WARNING: "yellow",
        LogLevel.ERROR: "red",
    }

    _COMPONENT_COLORS = {
        "TUI": "cyan",
        "LLM": "magenta",
        "Session": "green",
        "Assistant": "bright_blue",
        "Complete": "bright_yellow",
        "Parser": "bright_cyan",
    }

    def __init__(self, *args, log_level: int = LogLevel.DEBUG, **kwargs) -> None:
        super().__init__(
            *args,
            markup=True,
            highlight=False,
            auto_scroll=True,
            wrap=False,
            **kwargs
        )
        self._log_level = log_level

    @property
    def log_level(self) -> int:
        """Current log level threshold."""
        return self._log_level

    @log_level.setter
    def log_level(self, level: int) -> None:
        self._log_level = level
        self._update_subtitle()

    def _update_subtitle(self) -> None:
        if self.display:
            self.border_subtitle = f"Level: {LogLevel.name(self._log_level)}"
        else:
            self.border_subtitle = "Hidden"

    def on_mount(self) -> None:
        """Hide by default."""
        self.display = False

    def add_entry(self, component: str, message: str, level: int = LogLevel.DEBUG) -> None:
        """Add a log entry if it meets the current level threshold."""
        if level < self._log_level:
            return

        if len(message) > LOG_MAX_MESSAGE_LENGTH:
            message = message[:LOG_MAX_MESSAGE_LENGTH] + "..."

        timestamp = datetime.now().strftime(LOG_TIMESTAMP_FORMAT)
        level_color = self._LEVEL_COLORS.get(level, "white")
        comp_color = self._COMPONENT_COLORS.get(component, "white")

        self.write(
            f"[dim]{timestamp}[/] "
            f"[{level_color}]{LogLevel.name(level):<5}[/] "
            f"[{comp_color}]\\[{component}][/] {message}"
        )

    def info(self, component: str, message: str) -> None:
        self.add_entry(component, message, LogLevel.INFO)

    def route(self, level: str, component: str, message: str) -> None:
        """Debug callback target: Callable(level, component, message)."""
        self.add_entry(component, message, LogLevel.from_string(level))

    def show(self) -> None:
        self.display = True
        self._update_subtitle()

    def hide(self) -> None:
        self.display = False
        self.border_subtitle = "Hidden"

    def toggle(self) -> bool:
        """Toggle visibility. Returns new state."""
        if self.display:
            self.hide()
            return False
        self.show()
        return True
