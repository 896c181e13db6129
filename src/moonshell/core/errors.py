"""Moonshell error types.

Fatal errors for one-shot execution. Interactive evaluation failures are
not exceptions; they are reported as ``EvaluationError`` outcomes.
"""

from __future__ import annotations


class MoonshellError(Exception):
    """Base error for moonshell."""


class ScriptError(MoonshellError):
    """A one-shot submission (file or inline text) could not be run.

    Raised when:
    - The script file does not exist or cannot be read
    - The source fails to compile, including unexpected end of input
    - The chunk raises a runtime error
    """


class ScriptNotFoundError(ScriptError):
    """The script file does not exist."""

    def __init__(self, path: str) -> None:
        super().__init__(f"file not found: {path}")
        self.path = path


class ScriptReadError(ScriptError):
    """The script file exists but could not be read."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"failed to read {path}: {reason}")
        self.path = path
        self.reason = reason


class ScriptExecutionError(ScriptError):
    """The evaluator rejected or failed to run a one-shot submission."""

    def __init__(self, chunk_name: str, message: str) -> None:
        super().__init__(message)
        self.chunk_name = chunk_name
