"""Inline auto-completion pipeline.

- context.py: pre-cursor window (also the cache key)
- cache.py: LRU memo of suggestions per window
- parser.py: model text -> candidate list
- provider.py: ties the above to the completion client
"""

from .cache import DEFAULT_CACHE_CAPACITY, CacheStats, CompletionCache
from .context import MAX_CONTEXT_LENGTH, text_before_cursor, truncate_context, word_start_column
from .models import CompletionItem, CompletionRange
from .parser import MAX_SUGGESTIONS, parse_completion_response
from .provider import TRIGGER_CHARACTERS, CompletionProvider

__all__ = [
    "CacheStats",
    "CompletionCache",
    "CompletionItem",
    "CompletionProvider",
    "CompletionRange",
    "DEFAULT_CACHE_CAPACITY",
    "MAX_CONTEXT_LENGTH",
    "MAX_SUGGESTIONS",
    "TRIGGER_CHARACTERS",
    "parse_completion_response",
    "text_before_cursor",
    "truncate_context",
    "word_start_column",
]
