"""Unit tests for the completion context window."""
from hypothesis import given
from hypothesis import strategies as st

from codeassist.completion import (
    MAX_CONTEXT_LENGTH,
    text_before_cursor,
    truncate_context,
    word_start_column,
)


class TestTruncateContext:
    """Tests for truncate_context."""

    def test_short_text_unchanged(self):
        """Test that text within the window is returned as-is."""
        assert truncate_context("import os\nos.") == "import os\nos."

    def test_exact_length_unchanged(self):
        """Test the boundary: exactly the window size is not truncated."""
        text = "x" * MAX_CONTEXT_LENGTH
        assert truncate_context(text) == text

    def test_long_text_keeps_trailing_window(self):
        """Test that earlier context is discarded."""
        text = "a" * 500 + "b" * MAX_CONTEXT_LENGTH
        result = truncate_context(text)

        assert len(result) == MAX_CONTEXT_LENGTH
        assert set(result) == {"b"}

    def test_custom_length(self):
        assert truncate_context("abcdef", max_length=3) == "def"

    def test_non_positive_length(self):
        assert truncate_context("abcdef", max_length=0) == ""

    @given(st.text(max_size=5000))
    def test_result_is_suffix(self, text: str):
        """Property test: the window is the trailing min(len, 2000) characters."""
        result = truncate_context(text)

        assert len(result) == min(len(text), MAX_CONTEXT_LENGTH)
        assert text.endswith(result)


class TestTextBeforeCursor:
    """Tests for text_before_cursor."""

    def test_first_line(self):
        assert text_before_cursor("print(x)\nfoo", 0, 5) == "print"

    def test_spans_previous_lines(self):
        assert text_before_cursor("import os\nos.pa", 1, 3) == "import os\nos."

    def test_column_past_end_of_line(self):
        assert text_before_cursor("ab\ncd", 0, 99) == "ab"

    def test_row_past_end_returns_document(self):
        assert text_before_cursor("ab\ncd", 7, 0) == "ab\ncd"


class TestWordStartColumn:
    """Tests for word_start_column."""

    def test_identifier_after_dot(self):
        assert word_start_column("os.pa", 5) == 3

    def test_cursor_after_trigger(self):
        """Test that nothing is replaced right after a trigger character."""
        assert word_start_column("foo(", 4) == 4

    def test_whole_line_identifier(self):
        assert word_start_column("result", 6) == 0

    @given(st.text(), st.integers(min_value=0, max_value=50))
    def test_start_never_after_cursor(self, line: str, column: int):
        """Property test: the replaced range is well-formed."""
        column = min(column, len(line))
        assert 0 <= word_start_column(line, column) <= column
