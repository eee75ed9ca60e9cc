"""Unit tests for the selection query adapter."""
import pytest

from codeassist.collaborators import check_python_source, static_language
from codeassist.session import AssistantService, ChatSessionController, SelectionQueryAdapter

from fakes import FakeEditor, FakeLLM


def _adapter(llm: FakeLLM, editor: FakeEditor) -> SelectionQueryAdapter:
    controller = ChatSessionController(AssistantService(llm, static_language("Python")), editor)
    return SelectionQueryAdapter(controller, editor)


class TestSelectionQueryAdapter:
    """Tests for SelectionQueryAdapter."""

    def test_active_only_with_selection(self):
        editor = FakeEditor("x = 1\ny = 2", selected="")
        adapter = _adapter(FakeLLM(), editor)
        assert not adapter.is_active()

        editor.selected = "   \n"
        assert not adapter.is_active()

        editor.selected = "y = 2"
        assert adapter.is_active()
        assert adapter.editor is editor

    @pytest.mark.asyncio
    async def test_ask_uses_current_selection(self):
        llm = FakeLLM(reply="Assigns 2 to y.")
        editor = FakeEditor("x = 1\ny = 2", selected="y = 2")
        adapter = _adapter(llm, editor)

        exchange = await adapter.ask("What is this?")

        assert exchange is not None
        assert "Highlighted Code:\ny = 2" in llm.last_user_prompt
        assert llm.last_user_prompt.endswith("Source Code:\nx = 1\ny = 2")

    @pytest.mark.asyncio
    async def test_ask_without_selection_is_noop(self):
        llm = FakeLLM()
        adapter = _adapter(llm, FakeEditor("x = 1"))

        assert await adapter.ask("What is this?") is None
        assert llm.calls == []

    @pytest.mark.asyncio
    async def test_blank_question_is_noop(self):
        llm = FakeLLM()
        adapter = _adapter(llm, FakeEditor("x = 1", selected="x"))

        assert await adapter.ask("   ") is None
        assert llm.calls == []


class TestCheckPythonSource:
    """Tests for the Python compile check used as compiler-error provider."""

    def test_valid_source(self, sample_python_code):
        assert check_python_source(sample_python_code) is None

    def test_syntax_error_location(self, broken_python_code):
        error = check_python_source(broken_python_code, "broken.py")

        assert error.startswith("broken.py:1:")
        assert "SyntaxError" in error

    def test_indentation_error(self):
        error = check_python_source("def f():\nreturn 1\n")

        assert "IndentationError" in error

    def test_null_bytes(self):
        assert check_python_source("x = 1\0") is not None

    @pytest.mark.asyncio
    async def test_static_language(self):
        assert await static_language("Swift")() == "Swift"
