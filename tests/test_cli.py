"""Smoke tests for the command-line interface."""
import pytest
from typer.testing import CliRunner

from codeassist.cli import app as cli_app
from codeassist.llm import TransportError

from fakes import FakeLLM

runner = CliRunner()


@pytest.fixture
def use_llm(clean_env, monkeypatch):
    """Install a fake provider in place of the configured endpoint."""

    def _install(llm: FakeLLM) -> FakeLLM:
        monkeypatch.setattr(cli_app, "require_llm", lambda settings, console: llm)
        return llm

    return _install


class TestAsk:
    """Tests for the ask command."""

    def test_prints_answer(self, use_llm, sample_python_file):
        llm = use_llm(FakeLLM(reply="It adds **a** and **b**."))

        result = runner.invoke(cli_app.app, ["ask", str(sample_python_file), "What does add do?"])

        assert result.exit_code == 0, result.output
        assert "It adds a and b." in result.output
        assert "Question: What does add do?" in llm.last_user_prompt
        assert "Python's formatting conventions" in llm.last_system_prompt
        assert llm.closed

    def test_language_option(self, use_llm, sample_python_file):
        llm = use_llm(FakeLLM())

        runner.invoke(cli_app.app, ["ask", str(sample_python_file), "q", "--language", "Ruby"])

        assert "Ruby's formatting conventions" in llm.last_system_prompt

    def test_selected_lines(self, use_llm, sample_python_file):
        llm = use_llm(FakeLLM())

        result = runner.invoke(
            cli_app.app, ["ask", str(sample_python_file), "Explain", "--lines", "2:3"]
        )

        assert result.exit_code == 0, result.output
        assert 'Highlighted Code:\n    """Add two numbers."""\n    return a + b' in llm.last_user_prompt

    def test_bad_line_range(self, use_llm, sample_python_file):
        llm = use_llm(FakeLLM())

        result = runner.invoke(
            cli_app.app, ["ask", str(sample_python_file), "Explain", "--lines", "9:2"]
        )

        assert result.exit_code == 2
        assert llm.calls == []

    def test_failure_exits_non_zero(self, use_llm, sample_python_file):
        use_llm(FakeLLM(error=TransportError(500, "Internal Server Error")))

        result = runner.invoke(cli_app.app, ["ask", str(sample_python_file), "q"])

        assert result.exit_code == 1
        assert "API Error: 500 Internal Server Error" in result.output

    def test_missing_file(self, use_llm, tmp_path):
        result = runner.invoke(cli_app.app, ["ask", str(tmp_path / "nope.py"), "q"])

        assert result.exit_code == 2


class TestFix:
    """Tests for the fix command."""

    def test_clean_file_needs_no_fix(self, use_llm, sample_python_file):
        llm = use_llm(FakeLLM())

        result = runner.invoke(cli_app.app, ["fix", str(sample_python_file)])

        assert result.exit_code == 0
        assert "No compiler errors found." in result.output
        assert llm.calls == []

    def test_broken_file(self, use_llm, broken_python_file):
        llm = use_llm(FakeLLM(reply="Remove the stray `(`."))

        result = runner.invoke(cli_app.app, ["fix", str(broken_python_file)])

        assert result.exit_code == 0, result.output
        assert "AI Suggestion" in result.output
        assert "broken.py:1:" in llm.last_user_prompt

    def test_explicit_error_text(self, use_llm, tmp_path):
        source = tmp_path / "main.go"
        source.write_text("package main\nfunc main() { x := 1 }\n")
        llm = use_llm(FakeLLM(reply="Use `_ = x`."))

        result = runner.invoke(cli_app.app, [
            "fix", str(source),
            "--language", "Go",
            "--error", "./main.go:2:15: declared and not used: x",
        ])

        assert result.exit_code == 0, result.output
        assert "declared and not used" in llm.last_user_prompt
        assert "Go's formatting conventions" in llm.last_system_prompt


class TestComplete:
    """Tests for the complete command."""

    def test_prints_suggestions(self, use_llm, tmp_path):
        source = tmp_path / "snippet.py"
        source.write_text("import os\nos.pa")
        llm = use_llm(FakeLLM(reply='["path", "pardir"]'))

        result = runner.invoke(cli_app.app, ["complete", str(source), "--line", "2", "--column", "6"])

        assert result.exit_code == 0, result.output
        assert "path" in result.output
        assert "pardir" in result.output
        assert llm.last_user_prompt.endswith("```Python\nimport os\nos.pa\n```\n")

    def test_no_suggestions(self, use_llm, tmp_path):
        source = tmp_path / "snippet.py"
        source.write_text("x = ")
        use_llm(FakeLLM(reply=""))

        result = runner.invoke(cli_app.app, ["complete", str(source)])

        assert result.exit_code == 0
        assert "No suggestions." in result.output


class TestHealth:
    """Tests for the health command."""

    def test_missing_key(self, clean_env):
        result = runner.invoke(cli_app.app, ["health"])

        assert result.exit_code == 1
        assert "API key: NOT SET" in result.output

    def test_configured(self, clean_env):
        clean_env.setenv("ASSISTANT_API_KEY", "sk-test")

        result = runner.invoke(cli_app.app, ["health"])

        assert result.exit_code == 0
        assert "API key: SET" in result.output
        assert "gpt-4o-mini" in result.output

    def test_ping(self, use_llm, clean_env):
        clean_env.setenv("ASSISTANT_API_KEY", "sk-test")
        use_llm(FakeLLM(reply="OK"))

        result = runner.invoke(cli_app.app, ["health", "--ping"])

        assert result.exit_code == 0
        assert "Endpoint: OK" in result.output

    def test_invalid_configuration(self, clean_env):
        clean_env.setenv("ASSISTANT_CACHE_SIZE", "many")

        result = runner.invoke(cli_app.app, ["health"])

        assert result.exit_code == 1
        assert "invalid configuration" in result.output
