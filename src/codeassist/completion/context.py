"""Context window extraction for auto-completion.

Hides how much of the document is sent with a completion request.
The trailing slice doubles as the completion cache key.
"""

import re

# Characters of pre-cursor text sent to the model
MAX_CONTEXT_LENGTH = 2000

_WORD_TAIL = re.compile(r"\w*\Z")


def truncate_context(text: str, max_length: int = MAX_CONTEXT_LENGTH) -> str:
    """Return at most the last ``max_length`` characters of ``text``.

    Earlier context is discarded, never summarized.
    """
    if max_length <= 0:
        return ""
    if len(text) <= max_length:
        return text
    return text[-max_length:]


def text_before_cursor(document: str, row: int, column: int) -> str:
    """Return the document text from the start up to a 0-based cursor location.

    Rows past the end clamp to the end of the document; columns clamp to
    the end of their line.
    """
    lines = document.split("\n")
    if row >= len(lines):
        return document
    row = max(row, 0)
    head = lines[:row]
    head.append(lines[row][:max(column, 0)])
    return "\n".join(head)


def word_start_column(line: str, column: int) -> int:
    """Column where the identifier ending at ``column`` starts.

    Suggestions replace this range, matching how editors report the
    word under the cursor.
    """
    prefix = line[:column]
    match = _WORD_TAIL.search(prefix)
    return match.start() if match else len(prefix)
