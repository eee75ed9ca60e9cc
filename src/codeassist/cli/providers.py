"""Provider factory functions for CLI.

Centralizes creation of settings and LLM instances from environment variables.
Hides configuration details from command implementations.
"""

import typer
from pydantic import ValidationError
from rich.console import Console

from ..config import AssistantSettings, load_settings
from ..llm import LLMProvider, create_llm_provider

# Default console for output
_console = Console()


def get_settings(console: Console | None = None) -> AssistantSettings:
    """Load settings, exiting with a message when a value is invalid.

    Raises:
        typer.Exit: If an environment variable cannot be parsed
    """
    con = console or _console
    try:
        return load_settings()
    except (ValidationError, ValueError) as e:
        con.print(f"[red]Error: invalid configuration: {e}[/red]")
        raise typer.Exit(code=1)


def get_llm(
    settings: AssistantSettings | None = None,
    console: Console | None = None,
) -> LLMProvider | None:
    """Create LLM provider from settings.

    Args:
        settings: Resolved settings (loaded from the environment if omitted)
        console: Optional Rich console for output

    Returns:
        LLM provider instance, or None if not configured
    """
    con = console or _console
    settings = settings or get_settings(con)

    if not settings.configured:
        con.print("[yellow]Warning: ASSISTANT_API_KEY not set, LLM features disabled[/yellow]")
        return None

    try:
        return create_llm_provider(settings.provider, **settings.provider_config())
    except ValueError as e:
        con.print(f"[red]Error: {e}[/red]")
        return None


def require_llm(
    settings: AssistantSettings | None = None,
    console: Console | None = None,
) -> LLMProvider:
    """Get LLM provider, raising error if not configured.

    Raises:
        typer.Exit: If LLM provider is not configured
    """
    con = console or _console
    llm = get_llm(settings, con)
    if not llm:
        con.print("[red]Error: LLM provider not configured[/red]")
        raise typer.Exit(code=1)
    return llm
