"""REPL state management."""

from __future__ import annotations

from dataclasses import dataclass, field

from moonshell.core.buffer import SessionBuffer
from moonshell.core.types import SessionState


@dataclass
class REPLState:
    """State for one interactive session."""

    buffer: SessionBuffer = field(default_factory=SessionBuffer)
    phase: SessionState = SessionState.AWAITING_LINE
    history: list[str] = field(default_factory=list)
    turns: int = 0
    failed_turns: int = 0
