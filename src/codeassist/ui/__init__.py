"""Terminal UI module for codeassist.

Provides a Textual editor with an AI code assistant panel.

Module structure (Parnas principle - each module hides a design decision):
- config.py: UI constants (languages, log levels, hints)
- widgets.py: Custom widgets (editor, chat history, input bar, log rendering)
- styles.py: CSS styling (layout decisions)
- themes.py: Color palettes and theme configuration
- app.py: Application orchestration (user interaction flow)
"""

from .app import AssistantApp, run_tui
from .config import LogLevel
from .widgets import AssistantPanel, ChatHistoryWidget, ChatInputBar, DebugPanel, EditorPane

__all__ = [
    "AssistantApp",
    "AssistantPanel",
    "ChatHistoryWidget",
    "ChatInputBar",
    "DebugPanel",
    "EditorPane",
    "LogLevel",
    "run_tui",
]
