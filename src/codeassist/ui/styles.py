"""CSS styles for the TUI.

Hides layout and styling decisions from the application logic.
Uses Textual CSS features: nesting, pseudo-classes, variables.
"""

APP_CSS = """
/* ============================================
   Main Screen Layout - Editor | Assistant
   ============================================ */
Screen {
    layout: grid;
    grid-size: 2 2;
    grid-columns: 3fr 2fr;
    grid-rows: 1fr auto;
    background: $background;
}

/* ============================================
   Editor Pane
   ============================================ */
#editor-pane {
    height: 100%;
}

#language {
    width: 30;
    margin-bottom: 1;
}

#editor {
    height: 1fr;
    background: $panel;
    border: round $primary 60%;
    border-title-color: $primary;
    border-title-style: bold;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;

    &:focus {
        border: round $primary;
    }

    &.has-error {
        border-subtitle-color: $error;
    }
}

/* Completion suggestions under the editor */
#completion-menu {
    display: none;
    height: auto;
    max-height: 8;
    border: round $accent 60%;
    border-title-color: $accent;
    background: $surface;
}

/* ============================================
   Selection Ask Bar
   ============================================ */
SelectionAskBar {
    display: none;
    height: 3;
    margin-top: 1;
    border: round $secondary 60%;
    background: $secondary 8%;

    &:focus-within {
        border: round $secondary;
    }
}

#selection-question {
    width: 1fr;
    border: none;
    background: transparent;
}

#ask-btn {
    width: 10;
    min-width: 8;
    background: $secondary;
    color: $background;
    text-style: bold;
    border: none;

    &:hover {
        background: $secondary-darken-1;
    }
}

/* ============================================
   Assistant Panel
   ============================================ */
AssistantPanel {
    height: 100%;
}

#panel-header {
    height: 1;
    padding: 0 1;
    background: $surface;
}

#panel-title {
    width: 1fr;
    text-style: bold;
    color: $primary;
}

StatusIndicator {
    width: auto;
    color: $text-muted;

    &.active {
        color: $accent;
        text-style: bold;
    }
}

#chat-history {
    height: 1fr;
    background: $panel;
    border: round $primary 60%;
    border-title-color: $primary;
    border-title-style: bold;
    border-title-align: left;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    scrollbar-gutter: stable;

    &:focus-within {
        border: round $primary;
    }
}

#input-hint {
    height: 1;
    color: $text-muted;
    padding: 0 1;
}

/* ============================================
   Chat Input Bar - Text Entry + Send / Fix
   ============================================ */
ChatInputBar {
    height: 5;
    border: round $primary 60%;
    background: $panel;

    &:focus-within {
        border: round $primary;
    }
}

#chat-input {
    width: 1fr;
    height: 100%;
    border: none;
    padding: 0 1;
    background: transparent;
}

#send-btn {
    width: 10;
    height: 100%;
    margin: 0 0 0 1;
    min-width: 8;
    background: $success;
    color: $background;
    text-style: bold;
}

#fix-btn {
    display: none;
    width: 14;
    height: 100%;
    margin: 0 0 0 1;
    background: $warning;
    color: $background;
    text-style: bold;
}

/* ============================================
   Chat Messages
   ============================================ */
.chat-message {
    width: 100%;
    height: auto;
    margin: 0 0 1 0;
    padding: 0 1;
    background: transparent;
}

.user-message {
    border-left: tall $success;
    background: $success 8%;

    & .message-header {
        color: $success;
        text-style: bold;
    }
}

.assistant-message {
    border-left: tall $secondary;
    background: $secondary 8%;

    & .message-header {
        color: $secondary;
        text-style: bold;
    }

    &.provisional .message-content {
        color: $text-muted;
        text-style: italic;
    }
}

.message-content {
    height: auto;
}

/* ============================================
   Debug/Log Panel
   ============================================ */
#debug-panel {
    column-span: 2;
    height: auto;
    min-height: 6;
    max-height: 12;
    background: $panel;
    border: round $warning 60%;
    border-title-color: $warning;
    border-title-style: bold;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    scrollbar-gutter: stable;
}
"""
