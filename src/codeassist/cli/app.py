"""Main CLI application using Typer."""
import asyncio
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markdown import Markdown
from rich.table import Table
from rich.text import Text

from ..collaborators import check_python_source, static_language
from ..completion import CompletionCache, CompletionProvider
from ..config import AssistantSettings
from ..llm import AssistantError, LLMProvider, PromptPair
from ..session import AssistantService, ChatSessionController, Exchange, ExchangeState
from .providers import get_settings, require_llm

# Load environment variables
load_dotenv()

# Create Typer app
app = typer.Typer(
    name="codeassist",
    help="AI code assistant: questions, compiler-error fixes and completions for source files",
    no_args_is_help=True,
    add_completion=True,
)

# Console for rich output
console = Console()


class SourceDocument:
    """A file's text and an optional selection, standing in for an editor."""

    def __init__(self, text: str, selected: str = "") -> None:
        self.text = text
        self.selected = selected

    def get_text(self) -> str:
        return self.text

    def get_selected_text(self) -> str:
        return self.selected


def _console_debug(level: str, component: str, message: str) -> None:
    """Debug callback printing trace lines to the console."""
    style = {"error": "red", "warning": "yellow", "info": "cyan"}.get(level, "dim")
    console.print(Text(f"[{component}] {message}", style=style))


def _parse_lines(span: str, text: str) -> str:
    """Select the 1-based inclusive line range ``START:END`` of ``text``."""
    try:
        start_text, _, end_text = span.partition(":")
        start = int(start_text)
        end = int(end_text) if end_text else start
    except ValueError:
        raise typer.BadParameter(f"expected START:END, got {span!r}", param_hint="--lines")

    lines = text.splitlines()
    if start < 1 or end < start or end > len(lines):
        raise typer.BadParameter(
            f"range {start}:{end} is outside 1:{len(lines)}", param_hint="--lines"
        )
    return "\n".join(lines[start - 1:end])


def _build_controller(
    llm: LLMProvider,
    document: SourceDocument,
    language: str,
    settings: AssistantSettings,
    compiler_error: str | None = None,
    verbose: bool = False,
) -> ChatSessionController:
    service = AssistantService(llm, static_language(language))
    controller = ChatSessionController(
        service,
        document,
        compiler_error=lambda: compiler_error,
        timeout=settings.exchange_timeout,
    )
    if verbose:
        for component in (llm, service, controller):
            component.set_debug_callback(_console_debug)
    return controller


def _print_exchange(controller: ChatSessionController, exchange: Exchange | None) -> None:
    """Print the resolved answer; exit non-zero when the exchange failed."""
    if exchange is None:
        console.print("[yellow]Nothing to send.[/yellow]")
        raise typer.Exit(code=1)

    message = controller.transcript.last
    if message is not None:
        console.print(Markdown(message.content))

    if exchange.state is not ExchangeState.SUCCEEDED:
        raise typer.Exit(code=1)


verbose_option = typer.Option(
    False,
    "--verbose",
    "-v",
    help="Print request tracing"
)

language_option = typer.Option(
    None,
    "--language",
    "-L",
    help="Target language name (default: ASSISTANT_LANGUAGE)"
)


@app.command()
def ask(
    file: Path = typer.Argument(
        ...,
        exists=True,
        file_okay=True,
        dir_okay=False,
        help="Source file sent as context"
    ),
    question: str = typer.Argument(..., help="Question about the code"),
    lines: str | None = typer.Option(
        None,
        "--lines",
        "-n",
        help="Ask about a selection instead: START:END (1-based, inclusive)"
    ),
    language: str | None = language_option,
    verbose: bool = verbose_option,
):
    """Ask a question about a source file (or a range of its lines)."""
    settings = get_settings(console)
    text = file.read_text(encoding="utf-8")
    selected = _parse_lines(lines, text) if lines else ""
    document = SourceDocument(text, selected)
    target = language or settings.language

    async def _ask():
        llm = require_llm(settings, console)
        try:
            controller = _build_controller(llm, document, target, settings, verbose=verbose)
            with console.status("[dim]Processing your request...[/dim]"):
                if selected:
                    exchange = await controller.ask_about_selection(selected, question)
                else:
                    exchange = await controller.ask(question)
        finally:
            await llm.close()
        return controller, exchange

    controller, exchange = asyncio.run(_ask())
    _print_exchange(controller, exchange)


@app.command()
def fix(
    file: Path = typer.Argument(
        ...,
        exists=True,
        file_okay=True,
        dir_okay=False,
        help="Source file that fails to compile"
    ),
    error: str | None = typer.Option(
        None,
        "--error",
        "-e",
        help="Compiler output (default: byte-compile Python sources)"
    ),
    language: str | None = language_option,
    verbose: bool = verbose_option,
):
    """Suggest a fix for a compiler error in a source file."""
    settings = get_settings(console)
    text = file.read_text(encoding="utf-8")
    target = language or settings.language

    error_text = error
    if not error_text and target == "Python":
        error_text = check_python_source(text, file.name)
    if not error_text or not error_text.strip():
        console.print("[green]No compiler errors found.[/green]")
        return

    console.print(Text(error_text, style="red"))

    async def _fix():
        llm = require_llm(settings, console)
        try:
            controller = _build_controller(
                llm, SourceDocument(text), target, settings,
                compiler_error=error_text, verbose=verbose,
            )
            with console.status("[dim]Analyzing the error and suggesting fixes...[/dim]"):
                exchange = await controller.suggest_fix()
        finally:
            await llm.close()
        return controller, exchange

    controller, exchange = asyncio.run(_fix())
    _print_exchange(controller, exchange)


@app.command()
def complete(
    file: Path = typer.Argument(
        ...,
        exists=True,
        file_okay=True,
        dir_okay=False,
        help="Source file to complete in"
    ),
    line: int | None = typer.Option(
        None,
        "--line",
        "-l",
        min=1,
        help="Cursor line, 1-based (default: last line)"
    ),
    column: int | None = typer.Option(
        None,
        "--column",
        "-c",
        min=1,
        help="Cursor column, 1-based (default: end of line)"
    ),
    language: str | None = language_option,
    verbose: bool = verbose_option,
):
    """Print AI completion suggestions for a cursor position."""
    settings = get_settings(console)
    text = file.read_text(encoding="utf-8")
    target = language or settings.language

    document_lines = text.split("\n")
    row = (line or len(document_lines)) - 1
    if row >= len(document_lines):
        raise typer.BadParameter(f"file has {len(document_lines)} lines", param_hint="--line")
    current = document_lines[row]
    col = len(current) if column is None else min(column - 1, len(current))

    async def _complete():
        llm = require_llm(settings, console)
        try:
            provider = CompletionProvider(
                llm, static_language(target), cache=CompletionCache(settings.cache_size)
            )
            if verbose:
                llm.set_debug_callback(_console_debug)
                provider.set_debug_callback(_console_debug)
            return await provider.provide_completion_items(text, row, col)
        finally:
            await llm.close()

    items = asyncio.run(_complete())
    if not items:
        console.print("[yellow]No suggestions.[/yellow]")
        return

    table = Table(title=f"Suggestions at {row + 1}:{col + 1}")
    table.add_column("#", style="dim", width=3)
    table.add_column("Suggestion", style="green")
    table.add_column("Replaces", style="dim")
    for i, item in enumerate(items, 1):
        replaced = current[item.range.start_column:item.range.end_column]
        table.add_row(str(i), item.insert_text, replaced or "-")
    console.print(table)


@app.command()
def health(
    ping: bool = typer.Option(
        False,
        "--ping",
        "-p",
        help="Send a one-line request to the endpoint"
    ),
):
    """Check configuration and endpoint health."""
    settings = get_settings(console)

    console.print(f"[dim]Provider:[/dim] {settings.provider}")
    console.print(f"[dim]Model:[/dim] {settings.model or 'provider default'}")
    console.print(f"[dim]Base URL:[/dim] {settings.base_url or 'provider default'}")

    if not settings.configured:
        console.print("[yellow]![/yellow] API key: NOT SET")
        raise typer.Exit(code=1)
    console.print("[green]+[/green] API key: SET")

    if not ping:
        return

    async def _ping():
        llm = require_llm(settings, console)
        try:
            return await llm.complete(PromptPair(
                system_prompt="You are a health check.",
                user_prompt="Reply with OK.",
            ))
        finally:
            await llm.close()

    try:
        reply = asyncio.run(_ping())
    except AssistantError as e:
        console.print(f"[red]x[/red] Endpoint: FAILED ({e})")
        raise typer.Exit(code=1)
    console.print(f"[green]+[/green] Endpoint: OK ({reply.strip()[:40]})")


@app.command(name="tui")
def tui_command(
    file: Path | None = typer.Argument(
        None,
        file_okay=True,
        dir_okay=False,
        help="File to open in the editor (created on save)"
    ),
    language: str | None = language_option,
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Show log panel with level: debug (all), info, warning, or error"
    ),
):
    """Launch the editor with the assistant panel."""
    from ..ui import run_tui

    settings = get_settings(console)
    target = language or settings.language

    async def _tui():
        llm = require_llm(settings, console)
        await run_tui(
            llm,
            source_path=file,
            language=target,
            exchange_timeout=settings.exchange_timeout,
            cache_size=settings.cache_size,
            log_level=log_level,
        )

    asyncio.run(_tui())


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
