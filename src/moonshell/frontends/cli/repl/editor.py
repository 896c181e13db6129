"""Line-editing collaborators for the interactive session.

The session driver only needs two things from a line editor: a way to read
one line under a prompt, and a way to record a finished submission in
history. End-of-input is signalled with ``EOFError`` and cancellation with
``KeyboardInterrupt``; the driver treats both as the end of the session.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Iterable
from typing import TYPE_CHECKING, Protocol, TextIO

import rich_click as click
from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory, History, InMemoryHistory

if TYPE_CHECKING:
    from prompt_toolkit.input import Input
    from prompt_toolkit.output import Output

    from moonshell.core.config import ReplConfig

logger = logging.getLogger(__name__)


class LineReader(Protocol):
    """Protocol for the line-editing collaborator."""

    def read_line(self, prompt: str) -> str:
        """Read one line without its trailing newline.

        Raises:
            EOFError: At end of input.
            KeyboardInterrupt: If the user cancels input.
        """
        ...

    def record_history(self, entry: str) -> None:
        """Append a successfully evaluated submission to history."""
        ...


class SubmissionHistory(History):
    """prompt_toolkit history that only stores recorded submissions.

    prompt_toolkit appends every accepted line to its history on its own.
    Those appends are dropped here; entries arrive through ``record`` once
    the whole submission has evaluated successfully.
    """

    def __init__(self, store: History) -> None:
        super().__init__()
        self._store = store

    def load_history_strings(self) -> Iterable[str]:
        yield from self._store.load_history_strings()

    def store_string(self, string: str) -> None:
        self._store.store_string(string)

    def append_string(self, string: str) -> None:
        pass

    def record(self, entry: str) -> None:
        super().append_string(entry)


def open_history_store(history_file: str | None, max_bytes: int) -> History:
    """Open the persistent history file, or an in-memory store.

    A history file larger than ``max_bytes`` is left alone and the session
    runs with in-memory history instead.
    """
    if not history_file:
        return InMemoryHistory()

    if os.path.exists(history_file):
        size = os.path.getsize(history_file)
        if size > max_bytes:
            click.echo(
                f"Warning: History file is too large ({size // 1_000_000}MB), skipping load",
                err=True,
            )
            click.echo(f"Consider removing: {history_file}", err=True)
            return InMemoryHistory()
    else:
        parent = os.path.dirname(history_file)
        try:
            if parent:
                os.makedirs(parent, exist_ok=True)
        except OSError as e:
            logger.warning("history_dir_unavailable: path=%s, error=%s", parent, e)
            return InMemoryHistory()

    return FileHistory(history_file)


class PromptLineReader:
    """Terminal line editor backed by a prompt_toolkit ``PromptSession``.

    Args:
        history: Backing store for recorded submissions.
        input: prompt_toolkit input, defaults to the terminal.
        output: prompt_toolkit output, defaults to the terminal.
    """

    def __init__(
        self,
        history: History | None = None,
        input: Input | None = None,
        output: Output | None = None,
    ) -> None:
        self.history = SubmissionHistory(history if history is not None else InMemoryHistory())
        self._session: PromptSession[str] = PromptSession(
            history=self.history,
            input=input,
            output=output,
        )

    def read_line(self, prompt: str) -> str:
        return self._session.prompt(prompt)

    def record_history(self, entry: str) -> None:
        self.history.record(entry)


class StreamLineReader:
    """Line reader over a plain text stream (piped or redirected stdin).

    Prompts are still written to stdout; history is kept in memory only.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream
        self.history: list[str] = []

    def read_line(self, prompt: str) -> str:
        click.echo(prompt, nl=False)
        stream = self._stream if self._stream is not None else sys.stdin
        line = stream.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")

    def record_history(self, entry: str) -> None:
        self.history.append(entry)


def create_line_reader(config: ReplConfig) -> LineReader:
    """Pick the terminal editor for a tty, a stream reader otherwise."""
    if sys.stdin is not None and sys.stdin.isatty():
        store = open_history_store(config.history_file, config.max_history_file_bytes)
        return PromptLineReader(store)
    logger.debug("stdin is not a terminal, using stream reader")
    return StreamLineReader()
