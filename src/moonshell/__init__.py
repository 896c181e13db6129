"""Moonshell - interactive front-end for an embedded Lua runtime.

Moonshell runs Lua source four ways: print the runtime version, execute a
file, execute an inline string, or enter an interactive session (optionally
after executing an inline string).

Layers:
    core/       Evaluator adapter, session buffer, outcome types, config
    frontends/  Command line entry point and the interactive session driver

Quick Start:
    >>> from moonshell.core import LuaEvaluator, Values
    >>> evaluator = LuaEvaluator()
    >>> outcome = evaluator.submit("1 + 1")
    >>> isinstance(outcome, Values)
    True
    >>> outcome.render()
    '2'
"""

from moonshell.__version__ import __version__
from moonshell.core import (
    EvaluationError,
    EvaluationOutcome,
    IncompleteInput,
    LuaEvaluator,
    SessionBuffer,
    Value,
    Values,
)

__all__ = [
    "__version__",
    "EvaluationError",
    "EvaluationOutcome",
    "IncompleteInput",
    "LuaEvaluator",
    "SessionBuffer",
    "Value",
    "Values",
]
