"""
Codeassist: an AI code assistant for source editors.

Answers questions about the open document, suggests fixes for compiler
errors, explains selected snippets and offers inline completions.

This package follows Parnas's information hiding principles,
where each module hides a specific design decision.
"""

__version__ = "0.1.0"

from .collaborators import HostEditor, SessionView, check_python_source, static_language
from .completion import CompletionCache, CompletionItem, CompletionProvider
from .config import AssistantSettings, load_settings
from .llm import LLMProvider, PromptPair, create_llm_provider
from .session import AssistantService, ChatSessionController, SelectionQueryAdapter, Transcript

__all__ = [
    "AssistantService",
    "AssistantSettings",
    "ChatSessionController",
    "CompletionCache",
    "CompletionItem",
    "CompletionProvider",
    "HostEditor",
    "LLMProvider",
    "PromptPair",
    "SelectionQueryAdapter",
    "SessionView",
    "Transcript",
    "check_python_source",
    "create_llm_provider",
    "load_settings",
    "static_language",
]
