"""Core of moonshell: evaluator adapter, session buffer and outcome types.

Nothing here touches the terminal; the frontends drive these pieces.
"""

from moonshell.core.buffer import SessionBuffer
from moonshell.core.config import ReplConfig
from moonshell.core.errors import (
    MoonshellError,
    ScriptError,
    ScriptExecutionError,
    ScriptNotFoundError,
    ScriptReadError,
)
from moonshell.core.runtime import LuaEvaluator
from moonshell.core.types import (
    EvaluationError,
    EvaluationOutcome,
    IncompleteInput,
    SessionState,
    Value,
    Values,
)

__all__ = [
    "EvaluationError",
    "EvaluationOutcome",
    "IncompleteInput",
    "LuaEvaluator",
    "MoonshellError",
    "ReplConfig",
    "ScriptError",
    "ScriptExecutionError",
    "ScriptNotFoundError",
    "ScriptReadError",
    "SessionBuffer",
    "SessionState",
    "Value",
    "Values",
]
