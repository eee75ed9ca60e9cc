"""Parsing of model output into completion candidates.

Structured first: the model is asked for a JSON array of strings. When
the reply holds no usable array, each non-empty line is a candidate.
"""

import json
import re
from typing import Any

# Cap on line-based candidates; the JSON path keeps whatever the model returned
MAX_SUGGESTIONS = 5

_JSON_ARRAY = re.compile(r"\[.*?\]", re.DOTALL)
_LINE_DECORATION = re.compile(r"^[\s\-*>\"']+|[\s\-*>\"']+$")


def _parse_json_array(raw_text: str) -> list[str] | None:
    """Return string elements of the first JSON array in ``raw_text``.

    Returns None when there is no array or it is not valid JSON.
    """
    match = _JSON_ARRAY.search(raw_text)
    if not match:
        return None
    try:
        parsed = json.loads(match.group(0))
    except json.JSONDecodeError:
        return None
    if not isinstance(parsed, list):
        return None
    return [item for item in parsed if isinstance(item, str)]


def _parse_lines(raw_text: str) -> list[str]:
    candidates = []
    for line in raw_text.split("\n"):
        cleaned = _LINE_DECORATION.sub("", line).strip()
        if cleaned:
            candidates.append(cleaned)
        if len(candidates) == MAX_SUGGESTIONS:
            break
    return candidates


def parse_completion_response(raw_text: str, debug: Any | None = None) -> list[str]:
    """Extract completion candidates from free-form model text.

    Never raises: a reply that cannot be interpreted yields no suggestions.

    Args:
        raw_text: The model's reply
        debug: Optional Callable(level, component, message) for logging

    Returns:
        Candidates in the order the model produced them
    """
    try:
        structured = _parse_json_array(raw_text)
        if structured is not None:
            return structured
        return _parse_lines(raw_text)
    except Exception as e:
        if debug:
            debug("warning", "Parser", f"Failed to parse completion response: {e}")
        return []
