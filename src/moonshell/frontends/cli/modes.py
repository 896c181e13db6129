"""Run modes and the startup dispatcher.

The flag set is resolved once into an ordered tuple of run modes. All modes
of one invocation run against the same evaluator, so globals defined by a
script or inline chunk are visible to a following interactive session.

Composition rules:
    -v                   PrintVersion, nothing else runs
    -s PATH              RunFile first, then at most one of the modes below
    -e TEXT              RunInline, then exit (wins over -i)
    -i TEXT              RunInlineThenInteractive
    no -s / -e / -i      Interactive

``-s`` on its own runs the file and exits; it does not fall through into an
interactive session. Combine it with ``-i`` to keep going interactively.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

import rich_click as click

from moonshell.core.config import ReplConfig
from moonshell.frontends.cli.repl.core import run_interactive

if TYPE_CHECKING:
    from moonshell.core.runtime import LuaEvaluator
    from moonshell.frontends.cli.repl.editor import LineReader

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PrintVersion:
    """Print the runtime version and stop."""


@dataclass(frozen=True)
class RunFile:
    """Execute a script file as one submission."""

    path: str


@dataclass(frozen=True)
class RunInline:
    """Execute inline source as one submission."""

    text: str


@dataclass(frozen=True)
class RunInlineThenInteractive:
    """Execute inline source, then start the interactive session."""

    text: str


@dataclass(frozen=True)
class Interactive:
    """Start the interactive session."""


RunMode = PrintVersion | RunFile | RunInline | RunInlineThenInteractive | Interactive


def resolve_run_modes(
    version: bool = False,
    script: str | None = None,
    execute: str | None = None,
    interactive: str | None = None,
) -> tuple[RunMode, ...]:
    """Turn the parsed flags into the ordered run modes for this invocation."""
    if version:
        return (PrintVersion(),)

    modes: list[RunMode] = []
    if script is not None:
        modes.append(RunFile(script))

    if execute is not None:
        if interactive is not None:
            logger.warning("-e given, ignoring -i")
        modes.append(RunInline(execute))
    elif interactive is not None:
        modes.append(RunInlineThenInteractive(interactive))
    elif not modes:
        modes.append(Interactive())

    return tuple(modes)


def dispatch(
    modes: Sequence[RunMode],
    evaluator: LuaEvaluator,
    reader_factory: Callable[[ReplConfig], LineReader],
    config: ReplConfig | None = None,
) -> None:
    """Run each mode in order against one evaluator.

    The line reader is created only when a mode enters the session.

    Raises:
        ScriptError: If a file or inline submission fails. Nothing after
            the failing mode runs.
    """
    if config is None:
        config = ReplConfig()

    for mode in modes:
        logger.debug("run_mode: %s", mode)
        if isinstance(mode, PrintVersion):
            click.echo(evaluator.version_banner())
        elif isinstance(mode, RunFile):
            evaluator.execute_file(mode.path)
        elif isinstance(mode, RunInline):
            evaluator.execute(mode.text)
        elif isinstance(mode, RunInlineThenInteractive):
            evaluator.execute(mode.text)
            run_interactive(evaluator, reader_factory(config), config)
        elif isinstance(mode, Interactive):
            run_interactive(evaluator, reader_factory(config), config)
        else:
            raise TypeError(f"Unknown run mode: {mode!r}")
