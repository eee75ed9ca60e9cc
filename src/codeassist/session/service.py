"""Question/fix/selection pipeline: prompt builder -> completion client -> renderer."""

from collections.abc import Callable
from typing import Any

from ..collaborators import LanguageProvider
from ..llm import LLMProvider, PromptPair
from ..prompts import build_compile_fix_prompt, build_question_prompt, build_selection_prompt


def passthrough_markdown(text: str) -> str:
    """Default renderer: keep the model's markdown for the view to render."""
    return text


class AssistantService:
    """Turns assistant requests into rendered answers.

    Transport and network errors propagate unchanged to the caller.
    """

    def __init__(
        self,
        llm: LLMProvider,
        language_provider: LanguageProvider,
        render: Callable[[str], str] | None = None,
    ) -> None:
        self._llm = llm
        self._language_provider = language_provider
        self._render = render or passthrough_markdown
        self._debug_callback: Any | None = None

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

    async def answer_question(self, question: str, code_context: str) -> str:
        """Answer a free-form question about the document."""
        language = await self._language_provider()
        prompt = build_question_prompt(question, code_context, language)
        return await self._send(prompt, "question")

    async def suggest_fix(self, error_output: str, code_context: str) -> str:
        """Suggest a fix for a compiler error."""
        language = await self._language_provider()
        prompt = build_compile_fix_prompt(error_output, code_context, language)
        return await self._send(prompt, "fix")

    async def query_selection(self, selected_code: str, question: str, full_source: str) -> str:
        """Answer a question about a highlighted snippet."""
        language = await self._language_provider()
        prompt = build_selection_prompt(selected_code, question, full_source, language)
        return await self._send(prompt, "selection")

    async def _send(self, prompt: PromptPair, kind: str) -> str:
        self._debug(
            "debug", "Assistant",
            f"Sending {kind} prompt ({len(prompt.user_prompt)} chars)"
        )
        markdown = await self._llm.complete(prompt)
        self._debug("debug", "Assistant", f"Received {len(markdown)} chars")
        return self._render(markdown)
