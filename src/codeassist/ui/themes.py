"""Theme definitions for the TUI.

This module hides the design decisions about:
- Color palettes and visual appearance
- Theme variables (borders, scrollbars, etc.)

To add a new theme, define it here and register in the app.
"""

from textual.theme import Theme

# Blue/teal palette echoing the assistant panel's "Ask AI" accents
ASSISTANT_DARK = Theme(
    name="assistant-dark",
    primary="#1e88e5",      # Blue - panel borders, focus
    secondary="#00897b",    # Teal - assistant messages, Ask AI button
    accent="#ffb300",       # Amber - busy indicator
    foreground="#e3f2fd",   # Pale blue text
    background="#0d1117",
    success="#43a047",      # Send button, user messages
    warning="#fb8c00",      # Suggest Fix button
    error="#e53935",        # Error messages
    surface="#161b22",
    panel="#11161d",
    dark=True,
    variables={
        "block-cursor-foreground": "#0d1117",
        "block-cursor-background": "#e3f2fd",
        "block-cursor-text-style": "bold",
        "input-selection-background": "#1e88e5 30%",

        "border": "#30363d",
        "border-blurred": "#21262d",

        "scrollbar": "#21262d",
        "scrollbar-hover": "#30363d",
        "scrollbar-active": "#1e88e5",
        "scrollbar-background": "#11161d",

        "footer-key-foreground": "#ffb300",
        "footer-background": "#0d1117",

        "text-muted": "#8b949e",
        "text-error": "#e53935",
    },
)
