"""Pure data types for moonshell.core.

These are simple dataclasses with no behavior coupling. The evaluation
outcome is a closed set of three variants; callers match on the variant
type rather than inspecting error text.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any


class SessionState(Enum):
    """Interactive session states."""

    AWAITING_LINE = auto()  # Waiting for the next line from the editor
    EVALUATING = auto()  # Buffer submitted to the evaluator
    AWAITING_MORE_INPUT = auto()  # Buffer is a valid prefix, keep reading
    TURN_COMPLETE = auto()  # Turn resolved, buffer reset
    SESSION_ENDED = auto()  # End-of-input or interrupt


@dataclass(frozen=True)
class Value:
    """A single result produced by the evaluator.

    Attributes:
        display: Human-readable rendering (Lua ``tostring``).
        raw: The converted Python object, if any. Opaque to the session.
    """

    display: str
    raw: Any = field(default=None, compare=False)

    def __str__(self) -> str:
        return self.display


@dataclass(frozen=True)
class Values:
    """Successful evaluation with its ordered result values."""

    values: tuple[Value, ...] = ()

    def render(self) -> str:
        """Tab-joined display strings; empty string for no values."""
        return "\t".join(value.display for value in self.values)

    def __len__(self) -> int:
        return len(self.values)


@dataclass(frozen=True)
class IncompleteInput:
    """The submission is a valid prefix of a longer statement."""

    message: str = ""


@dataclass(frozen=True)
class EvaluationError:
    """The submission failed to compile or raised while running."""

    message: str

    def __str__(self) -> str:
        return self.message


EvaluationOutcome = Values | IncompleteInput | EvaluationError
