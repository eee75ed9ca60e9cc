"""Pytest configuration and shared fixtures."""
import os

import pytest

from fakes import FakeEditor, FakeLLM, RecordingView

ENV_VARS = (
    "LLM_PROVIDER",
    "ASSISTANT_API_KEY",
    "OPENAI_API_KEY",
    "DEEPSEEK_API_KEY",
    "ASSISTANT_BASE_URL",
    "ASSISTANT_MODEL",
    "ASSISTANT_TIMEOUT",
    "ASSISTANT_EXCHANGE_TIMEOUT",
    "ASSISTANT_CACHE_SIZE",
    "ASSISTANT_LANGUAGE",
)


@pytest.fixture
def fake_llm():
    """A provider answering "ok" to every request."""
    return FakeLLM()


@pytest.fixture
def editor(sample_python_code):
    """An editor holding the sample code."""
    return FakeEditor(sample_python_code)


@pytest.fixture
def view():
    return RecordingView()


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every variable the settings loader reads."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture(scope="session")
def api_keys():
    """Return API keys from environment."""
    return {
        "openai": os.getenv("OPENAI_API_KEY"),
        "deepseek": os.getenv("DEEPSEEK_API_KEY")
    }


@pytest.fixture
def sample_python_code():
    """Return sample Python code for testing."""
    return '''def add(a, b):
    """Add two numbers."""
    return a + b

class Calculator:
    """A simple calculator."""

    def divide(self, a, b):
        if b == 0:
            raise ValueError("Cannot divide by zero")
        return a / b
'''


@pytest.fixture
def broken_python_code():
    """Return Python code with a syntax error on line 1."""
    return "def broken(:\n    return 1\n"


@pytest.fixture
def sample_python_file(tmp_path, sample_python_code):
    """Create a temporary Python file with sample code."""
    test_file = tmp_path / "calc.py"
    test_file.write_text(sample_python_code)
    return test_file


@pytest.fixture
def broken_python_file(tmp_path, broken_python_code):
    """Create a temporary Python file that does not compile."""
    test_file = tmp_path / "broken.py"
    test_file.write_text(broken_python_code)
    return test_file
