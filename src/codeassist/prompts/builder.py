"""Prompt builders for the four assistant scenarios.

Hides the wording and layout of every prompt the assistant sends.
All builders are pure: same inputs, same PromptPair.
"""

from ..llm.models import PromptPair
from . import render_prompt


def build_question_prompt(question: str, code_context: str, language: str) -> PromptPair:
    """Free-form question about the current document.

    Args:
        question: The user's question
        code_context: Full source code of the document
        language: Name of the target language (drives formatting conventions)
    """
    return PromptPair(
        system_prompt=render_prompt("assistant_system", language=language),
        user_prompt=render_prompt(
            "assistant_user", question=question, code_context=code_context
        ),
    )


def build_compile_fix_prompt(error_output: str, code_context: str, language: str) -> PromptPair:
    """Ask for a fix to a compiler error, phrased as a free-form question."""
    question = render_prompt("compile_fix", error_output=error_output)
    return build_question_prompt(question, code_context, language)


def build_selection_prompt(
    selected_code: str,
    question: str,
    full_source: str,
    language: str,
) -> PromptPair:
    """Question about a highlighted snippet.

    The snippet is quoted in the question while the whole document stays
    the code context, so the model keeps the surrounding code in view.
    """
    combined = render_prompt("selection", question=question, selected_code=selected_code)
    return build_question_prompt(combined, full_source, language)


def build_autocomplete_prompt(context: str, language: str) -> PromptPair:
    """Request up to five completions for the truncated pre-cursor context."""
    return PromptPair(
        system_prompt=render_prompt("autocomplete_system", language=language),
        user_prompt=render_prompt("autocomplete_user", context=context, language=language),
    )
