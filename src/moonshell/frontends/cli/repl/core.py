"""Core REPL loop: the interactive session driver.

Each turn moves through the session states:

    AWAITING_LINE -> EVALUATING -> TURN_COMPLETE -> AWAITING_LINE
                                -> AWAITING_MORE_INPUT -> AWAITING_LINE

End-of-input or an interrupt while waiting for a line moves to
SESSION_ENDED and the loop returns.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import rich_click as click

from moonshell.core.config import ReplConfig
from moonshell.core.types import (
    EvaluationError,
    EvaluationOutcome,
    IncompleteInput,
    SessionState,
    Values,
)
from moonshell.frontends.cli.output import print_evaluation_error, print_values
from moonshell.frontends.cli.repl.state import REPLState

if TYPE_CHECKING:
    from moonshell.core.runtime import LuaEvaluator
    from moonshell.frontends.cli.repl.editor import LineReader

logger = logging.getLogger(__name__)


def run_interactive(
    evaluator: LuaEvaluator,
    reader: LineReader,
    config: ReplConfig | None = None,
    state: REPLState | None = None,
) -> REPLState:
    """Run the interactive session until end-of-input or interrupt.

    Args:
        evaluator: Evaluator shared with any earlier run modes.
        reader: Line-editing collaborator.
        config: Prompts and banner settings.
        state: Optional REPL state to resume from.

    Returns:
        The final session state.
    """
    if config is None:
        config = ReplConfig()
    if state is None:
        state = REPLState()

    if config.show_banner:
        click.echo(evaluator.version_banner())

    state.phase = SessionState.AWAITING_LINE
    while state.phase is not SessionState.SESSION_ENDED:
        state.phase = _step(evaluator, reader, config, state)

    # Leave the shell prompt on a fresh line
    click.echo()
    logger.debug("session_ended: turns=%d, failed=%d", state.turns, state.failed_turns)
    return state


def _step(
    evaluator: LuaEvaluator,
    reader: LineReader,
    config: ReplConfig,
    state: REPLState,
) -> SessionState:
    """Read one line and advance the session by one transition."""
    buffer = state.buffer
    try:
        line = reader.read_line(config.prompt_for(continuing=not buffer.is_empty))
    except (EOFError, KeyboardInterrupt):
        return SessionState.SESSION_ENDED

    buffer.append(line)
    state.phase = SessionState.EVALUATING
    source = buffer.contents()
    outcome = evaluator.submit(source)
    logger.debug("submission: outcome=%s, lines=%d", type(outcome).__name__, len(buffer))

    next_phase = _resolve(outcome, source, reader, state)
    if next_phase is SessionState.TURN_COMPLETE:
        buffer.reset()
        state.turns += 1
    return next_phase


def _resolve(
    outcome: EvaluationOutcome,
    source: str,
    reader: LineReader,
    state: REPLState,
) -> SessionState:
    """Render an outcome and pick the state it leads to."""
    if isinstance(outcome, IncompleteInput):
        return SessionState.AWAITING_MORE_INPUT

    if isinstance(outcome, Values):
        reader.record_history(source)
        state.history.append(source)
        print_values(outcome)
        return SessionState.TURN_COMPLETE

    if isinstance(outcome, EvaluationError):
        print_evaluation_error(outcome.message)
        state.failed_turns += 1
        return SessionState.TURN_COMPLETE

    raise TypeError(f"Unknown evaluation outcome: {outcome!r}")
