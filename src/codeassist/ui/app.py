"""Main Textual TUI application.

Wires the editor, the assistant panel and the completion menu to the
session controller and the completion provider.
"""

import asyncio
from pathlib import Path

from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.css.query import NoMatches
from textual.widgets import Footer, Header, OptionList, Select, TextArea

from ..collaborators import check_python_source
from ..completion import CompletionCache, CompletionItem, CompletionProvider
from ..llm import LLMProvider
from ..session import AssistantService, ChatSessionController, SelectionQueryAdapter
from .config import CHECKED_LANGUAGES, LANGUAGES, LogLevel
from .styles import APP_CSS
from .themes import ASSISTANT_DARK
from .widgets import (
    AssistantPanel,
    ChatInputBar,
    CompletionMenu,
    DebugPanel,
    EditorPane,
    SelectionAskBar,
)


class AssistantApp(App):
    """Source editor with an AI code assistant panel."""

    CSS = APP_CSS
    TITLE = "Code Assistant"

    BINDINGS = [
        Binding("ctrl+space", "complete", "Complete"),
        Binding("escape", "cancel", "Cancel"),
        Binding("ctrl+s", "save", "Save"),
        Binding("ctrl+l", "clear_chat", "Clear Chat"),
        Binding("ctrl+g", "toggle_debug", "Log"),
    ]

    def __init__(
        self,
        llm: LLMProvider,
        source_path: Path | None = None,
        language: str = "Python",
        exchange_timeout: float | None = None,
        cache_size: int | None = None,
        log_level: str | None = None,
    ) -> None:
        super().__init__()
        self._llm = llm
        self._source_path = source_path
        self._language = language if language in LANGUAGES else LANGUAGES[0]
        self._log_level = log_level
        self._compiler_error: str | None = None
        self._completion_items: list[CompletionItem] = []

        service = AssistantService(llm, self._current_language)
        self._editor = EditorPane(self._read_source(), id="editor", show_line_numbers=True)
        controller_kwargs = {} if exchange_timeout is None else {"timeout": exchange_timeout}
        self._controller = ChatSessionController(
            service,
            self._editor,
            compiler_error=lambda: self._compiler_error,
            **controller_kwargs,
        )
        self._selection = SelectionQueryAdapter(self._controller, self._editor)
        cache = CompletionCache(cache_size) if cache_size else None
        self._completion = CompletionProvider(llm, self._current_language, cache=cache)

        for component in (llm, service, self._controller, self._completion):
            component.set_debug_callback(self._route_debug)

    def _read_source(self) -> str:
        if self._source_path is not None and self._source_path.exists():
            return self._source_path.read_text(encoding="utf-8")
        return ""

    async def _current_language(self) -> str:
        value = self.query_one("#language", Select).value
        return value if isinstance(value, str) else self._language

    def _route_debug(self, level: str, component: str, message: str) -> None:
        """Route debug messages to the log panel."""
        try:
            log_panel = self.query_one("#debug-panel", DebugPanel)
        except NoMatches:
            return
        log_panel.route(level, component, message)

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)

        with Vertical(id="editor-pane"):
            yield Select(
                [(name, name) for name in LANGUAGES],
                value=self._language,
                allow_blank=False,
                id="language",
            )
            yield self._editor
            yield CompletionMenu(id="completion-menu")
            yield SelectionAskBar(id="selection-bar")

        yield AssistantPanel(id="assistant-panel")
        yield DebugPanel(id="debug-panel")
        yield Footer()

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.register_theme(ASSISTANT_DARK)
        self.theme = "assistant-dark"

        panel = self.query_one("#assistant-panel", AssistantPanel)
        self._controller.set_view(panel)

        if self._log_level is not None:
            log_panel = self.query_one("#debug-panel", DebugPanel)
            log_panel.log_level = LogLevel.from_string(self._log_level)
            log_panel.show()
            log_panel.info("TUI", f"Log panel enabled with level: {self._log_level.upper()}")

        self.sub_title = f"{self._llm.model} | {self._source_path or 'untitled'}"
        self._check_source()
        self._editor.focus()

    # --- Compile check ---

    def _check_source(self) -> None:
        language = self.query_one("#language", Select).value
        if language in CHECKED_LANGUAGES:
            filename = self._source_path.name if self._source_path else "<editor>"
            self._compiler_error = check_python_source(self._editor.text, filename)
        else:
            self._compiler_error = None

        self._editor.set_compiler_error(self._compiler_error)
        self.query_one("#assistant-panel", AssistantPanel).show_fix(
            self._controller.has_compiler_error()
        )

    def on_select_changed(self, event: Select.Changed) -> None:
        if event.select.id == "language":
            self._route_debug("info", "TUI", f"Language set to {event.value}")
            self._check_source()

    # --- Editor events ---

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        if event.text_area is not self._editor:
            return
        self._check_source()
        if CompletionProvider.is_trigger(self._editor.char_before_cursor()):
            self._request_completions()
        else:
            self.query_one("#completion-menu", CompletionMenu).hide()

    def on_text_area_selection_changed(self, event: TextArea.SelectionChanged) -> None:
        if event.text_area is not self._editor:
            return
        self.query_one("#selection-bar", SelectionAskBar).display = self._selection.is_active()

    # --- Assistant panel events ---

    def on_chat_input_bar_submitted(self, event: ChatInputBar.Submitted) -> None:
        self._run_question(event.value)

    def on_chat_input_bar_fix_requested(self, event: ChatInputBar.FixRequested) -> None:
        self._run_fix()

    def on_selection_ask_bar_asked(self, event: SelectionAskBar.Asked) -> None:
        self._run_selection(event.question)
        self.query_one("#selection-bar", SelectionAskBar).clear()

    @work(group="assistant")
    async def _run_question(self, question: str) -> None:
        await self._controller.ask(question)

    @work(group="assistant")
    async def _run_fix(self) -> None:
        await self._controller.suggest_fix()

    @work(group="assistant")
    async def _run_selection(self, question: str) -> None:
        await self._selection.ask(question)

    # --- Completion ---

    @work(exclusive=True, group="completion")
    async def _request_completions(self) -> None:
        """Fetch suggestions for the cursor; a newer request supersedes this one."""
        location = self._editor.cursor_location
        items = await self._completion.provide_completion_items(self._editor.text, *location)
        if self._editor.cursor_location != location:
            return
        self._completion_items = items
        self.query_one("#completion-menu", CompletionMenu).show_suggestions(
            [item.label for item in items]
        )

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        if event.option_list.id != "completion-menu":
            return
        item = self._completion_items[event.option_index]
        self._editor.replace(
            item.insert_text,
            (item.range.row, item.range.start_column),
            (item.range.row, item.range.end_column),
        )
        self.query_one("#completion-menu", CompletionMenu).hide()
        self._editor.focus()

    # --- Actions ---

    def action_complete(self) -> None:
        """Request completions at the cursor."""
        self._request_completions()

    def action_cancel(self) -> None:
        """Dismiss suggestions, or cancel the in-flight assistant request."""
        menu = self.query_one("#completion-menu", CompletionMenu)
        if menu.display:
            self.workers.cancel_group(self, "completion")
            menu.hide()
        elif self._controller.cancel():
            self.notify("Cancelled", severity="warning", timeout=2)

    def action_save(self) -> None:
        """Write the editor contents back to the source file."""
        if self._source_path is None:
            self.notify("No file to save to", severity="warning")
            return
        self._source_path.write_text(self._editor.text, encoding="utf-8")
        self.notify(f"Saved {self._source_path.name}", timeout=2)

    def action_clear_chat(self) -> None:
        """Clear the chat history."""
        self._controller.reset()
        self.query_one("#assistant-panel", AssistantPanel).clear_history()
        self.notify("Chat cleared", timeout=2)

    def action_toggle_debug(self) -> None:
        """Toggle the log panel visibility."""
        log_panel = self.query_one("#debug-panel", DebugPanel)
        is_visible = log_panel.toggle()
        self.notify(f"Log panel {'shown' if is_visible else 'hidden'}", timeout=2)


async def run_tui(
    llm: LLMProvider,
    source_path: Path | None = None,
    language: str = "Python",
    exchange_timeout: float | None = None,
    cache_size: int | None = None,
    log_level: str | None = None,
) -> None:
    """Run the Textual TUI.

    Args:
        llm: LLM provider instance
        source_path: File to open in the editor (created on save)
        language: Initial target language
        exchange_timeout: Chat exchange deadline in seconds
        cache_size: Completion cache capacity
        log_level: Log level for panel (debug/info/warning/error), None to hide
    """
    app = AssistantApp(
        llm=llm,
        source_path=source_path,
        language=language,
        exchange_timeout=exchange_timeout,
        cache_size=cache_size,
        log_level=log_level,
    )
    try:
        await app.run_async()
    except (KeyboardInterrupt, asyncio.CancelledError):
        pass
    finally:
        await llm.close()
