"""Pytest configuration and fixtures."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from moonshell.core.config import ReplConfig
from moonshell.core.runtime import LuaEvaluator
from moonshell.core.types import EvaluationError, EvaluationOutcome, IncompleteInput, Values


class ScriptedReader:
    """Line reader that replays a fixed list of lines.

    Items may be strings or exception classes/instances; exceptions are
    raised in place of a line. Running out of items raises EOFError.
    """

    def __init__(self, lines: list) -> None:
        self._lines = list(lines)
        self.prompts: list[str] = []
        self.history: list[str] = []

    def read_line(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._lines:
            raise EOFError
        item = self._lines.pop(0)
        if isinstance(item, BaseException) or (
            isinstance(item, type) and issubclass(item, BaseException)
        ):
            raise item
        return item

    def record_history(self, entry: str) -> None:
        self.history.append(entry)


class FakeEvaluator:
    """Evaluator double driven by a classification function."""

    def __init__(self, classify: Callable[[str], EvaluationOutcome]) -> None:
        self._classify = classify
        self.submissions: list[str] = []

    def version_banner(self) -> str:
        return "Fake 1.0"

    def submit(self, text: str, chunk_name: str = "=stdin") -> EvaluationOutcome:
        self.submissions.append(text)
        return self._classify(text)


def classify_blocks(text: str) -> EvaluationOutcome:
    """Toy grammar: ``begin`` opens a block that ``end`` closes, ``!`` is invalid."""
    if "!" in text:
        return EvaluationError(f"bad token in {text!r}")
    if text.count("begin") > text.count("end"):
        return IncompleteInput("'end' expected near <eof>")
    return Values()


@pytest.fixture
def quiet_config():
    """Session config without the version banner."""
    return ReplConfig(show_banner=False)


@pytest.fixture
def fake_evaluator():
    """FakeEvaluator using the begin/end toy grammar."""
    return FakeEvaluator(classify_blocks)


@pytest.fixture
def lua_output():
    """Lines written by Lua's print."""
    return []


@pytest.fixture
def lua(lua_output):
    """Real Lua evaluator whose print output is collected in ``lua_output``."""
    return LuaEvaluator(output=lua_output.append)


@pytest.fixture
def make_reader():
    """Factory for ScriptedReader."""
    return ScriptedReader


@pytest.fixture
def make_evaluator():
    """Factory for FakeEvaluator."""
    return FakeEvaluator
