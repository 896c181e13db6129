"""Interactive session for moonshell.

Public API:
    run_interactive: Main interactive session loop
    REPLState: Per-session state
    LineReader: Protocol for the line-editing collaborator
    create_line_reader: Pick a line reader for the current stdin
"""

from __future__ import annotations

from moonshell.frontends.cli.repl.core import run_interactive
from moonshell.frontends.cli.repl.editor import (
    LineReader,
    PromptLineReader,
    StreamLineReader,
    SubmissionHistory,
    create_line_reader,
)
from moonshell.frontends.cli.repl.state import REPLState

__all__ = [
    "run_interactive",
    "REPLState",
    "LineReader",
    "PromptLineReader",
    "StreamLineReader",
    "SubmissionHistory",
    "create_line_reader",
]
