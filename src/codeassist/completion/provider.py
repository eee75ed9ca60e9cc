"""AI-backed completion provider for the editor.

Sits between the editor's completion trigger and the completion client:
truncate the pre-cursor text, answer from the cache when the prefix is
unchanged, otherwise ask the model and remember its answer.
"""

from typing import Any

from ..collaborators import LanguageProvider
from ..llm import LLMProvider
from ..prompts import build_autocomplete_prompt
from .cache import CompletionCache
from .context import text_before_cursor, truncate_context, word_start_column
from .models import CompletionItem, CompletionRange
from .parser import parse_completion_response

# Characters that make the editor ask for completions without a shortcut
TRIGGER_CHARACTERS = (".", "(", " ", ":", "{", "[", "=")


class CompletionProvider:
    """Produces completion candidates for a cursor position.

    Remote failures are reported as "no suggestions" and are not cached,
    so the next trigger on the same prefix tries again.
    """

    def __init__(
        self,
        llm: LLMProvider,
        language_provider: LanguageProvider,
        cache: CompletionCache | None = None,
    ) -> None:
        self._llm = llm
        self._language_provider = language_provider
        self._cache = cache if cache is not None else CompletionCache()
        self._debug_callback: Any | None = None

    @property
    def cache(self) -> CompletionCache:
        return self._cache

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

    @staticmethod
    def is_trigger(char: str) -> bool:
        """Whether typing ``char`` should request completions."""
        return char in TRIGGER_CHARACTERS

    async def suggest(self, text_before: str) -> list[str]:
        """Return completion strings for the text preceding the cursor.

        Args:
            text_before: Entire document text up to the cursor

        Returns:
            Suggestions in the model's relevance order (possibly empty)
        """
        key = truncate_context(text_before)

        cached = self._cache.lookup(key)
        if cached is not None:
            self._debug("debug", "Complete", f"Cache hit ({len(cached)} suggestions)")
            return cached

        try:
            language = await self._language_provider()
            prompt = build_autocomplete_prompt(key, language)
            raw = await self._llm.complete(prompt)
        except Exception as e:
            self._debug("error", "Complete", f"LLM completion error: {e}")
            return []

        suggestions = parse_completion_response(raw, debug=self._debug_callback)
        self._cache.store(key, suggestions)
        self._debug("info", "Complete", f"AI suggestions: {suggestions}")
        return list(suggestions)

    async def provide_completion_items(
        self,
        document: str,
        row: int,
        column: int,
    ) -> list[CompletionItem]:
        """Build editor completion items for a 0-based cursor location.

        Each item replaces the word under the cursor.
        """
        lines = document.split("\n")
        line = lines[row] if 0 <= row < len(lines) else ""
        column = min(column, len(line))
        replace = CompletionRange(
            row=max(row, 0),
            start_column=word_start_column(line, column),
            end_column=column,
        )

        suggestions = await self.suggest(text_before_cursor(document, row, column))
        return [
            CompletionItem(label=suggestion, insert_text=suggestion, range=replace)
            for suggestion in suggestions
        ]
