"""Evaluator adapter for the embedded Lua runtime.

One ``LuaEvaluator`` owns one ``lupa.LuaRuntime``. Globals set by a
submission stay visible to every later submission on the same evaluator,
so a single instance is shared across all run modes of an invocation.

Every submission resolves to exactly one of the outcome variants in
``moonshell.core.types``:

- ``Values``: compiled and ran, with every returned value (nils included)
- ``IncompleteInput``: the text is a valid prefix of a longer chunk
- ``EvaluationError``: any other compile or runtime failure
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

import rich_click as click
from lupa import LuaError, LuaRuntime

from moonshell.core.errors import (
    ScriptExecutionError,
    ScriptNotFoundError,
    ScriptReadError,
)
from moonshell.core.types import (
    EvaluationError,
    EvaluationOutcome,
    IncompleteInput,
    Value,
    Values,
)

logger = logging.getLogger(__name__)

# Trailing marker Lua puts on syntax errors raised at end of input.
# Lua 5.1 and LuaJIT quote it: near '<eof>'
EOF_MARK = "<eof>"

STDIN_CHUNK = "=stdin"
COMMAND_LINE_CHUNK = "=(command line)"

# Compiles the submission (expression form first, then statement form) and
# runs it, rendering included, under xpcall. Returns ("syntax", message),
# ("runtime", message) or ("ok", count, raw_values, rendered_values).
_SUBMIT_LUA = """
function(source, chunkname)
  local load = loadstring or load
  local select, tostring, type, xpcall = select, tostring, type, xpcall
  local traceback = debug.traceback

  local function handler(err)
    if type(err) ~= "string" then
      err = tostring(err)
    end
    return traceback(err, 2)
  end

  local function render(...)
    local n = select("#", ...)
    local raw, rendered = {}, {}
    for i = 1, n do
      local value = (select(i, ...))
      raw[i] = value
      rendered[i] = tostring(value)
    end
    return n, raw, rendered
  end

  local chunk = load("return " .. source, chunkname)
  if chunk == nil then
    local err
    chunk, err = load(source, chunkname)
    if chunk == nil then
      return "syntax", err
    end
  end

  -- Rendering stays inside the guard; __tostring may raise
  local ok, n, raw, rendered = xpcall(function()
    return render(chunk())
  end, handler)
  if not ok then
    return "runtime", n
  end
  return "ok", n, raw, rendered
end
"""

# Rebinds the global print so Lua output goes through the Python sink.
_PRINT_LUA = """
function(write)
  local select, tostring, concat = select, tostring, table.concat
  print = function(...)
    local parts = {}
    for i = 1, select("#", ...) do
      parts[i] = tostring((select(i, ...)))
    end
    write(concat(parts, "\\t"))
  end
end
"""


def is_incomplete(message: str) -> bool:
    """True if a syntax error message means the input ended too early."""
    return message.rstrip().rstrip("'").endswith(EOF_MARK)


class LuaEvaluator:
    """Submit Lua source text and classify the result.

    Args:
        output: Sink for text written by Lua's ``print``. Defaults to
            ``click.echo`` on standard output.
    """

    def __init__(self, output: Callable[[str], None] | None = None) -> None:
        self._output = output or click.echo
        self._lua = LuaRuntime(unpack_returned_tuples=False)
        self._submit = self._lua.eval(_SUBMIT_LUA)
        self._lua.eval(_PRINT_LUA)(self._write)
        logger.debug("runtime_created: version=%s", self.version)

    def _write(self, text: str) -> None:
        self._output(text)

    @property
    def runtime(self) -> LuaRuntime:
        """The owned Lua runtime."""
        return self._lua

    @property
    def version(self) -> str:
        """Lua's ``_VERSION`` string, e.g. ``Lua 5.4``."""
        return str(self._lua.globals()["_VERSION"])

    def version_banner(self) -> str:
        """Version line shown by ``-v`` and on entering a session."""
        return f"Lupa {self.version}"

    def submit(self, text: str, chunk_name: str = STDIN_CHUNK) -> EvaluationOutcome:
        """Compile and run ``text``.

        Args:
            text: Lua source, possibly spanning several lines.
            chunk_name: Lua chunk name used in error messages.

        Returns:
            ``Values``, ``IncompleteInput`` or ``EvaluationError``.
        """
        try:
            result = self._submit(text, chunk_name)
        except LuaError as e:
            return EvaluationError(str(e))
        kind = result[0]

        if kind == "syntax":
            message = str(result[1])
            if is_incomplete(message):
                return IncompleteInput(message)
            return EvaluationError(message)

        if kind == "runtime":
            return EvaluationError(str(result[1]))

        _, count, raw, rendered = result
        values = tuple(Value(display=rendered[i], raw=raw[i]) for i in range(1, int(count) + 1))
        return Values(values)

    def execute(self, source: str, chunk_name: str = COMMAND_LINE_CHUNK) -> Values:
        """Run ``source`` once as a one-shot submission.

        Raises:
            ScriptExecutionError: If the source is incomplete or fails.
        """
        outcome = self.submit(source, chunk_name)
        if isinstance(outcome, Values):
            return outcome
        if isinstance(outcome, IncompleteInput):
            raise ScriptExecutionError(chunk_name, f"unexpected end of input: {outcome.message}")
        raise ScriptExecutionError(chunk_name, outcome.message)

    def execute_file(self, path: str) -> Values:
        """Read ``path`` and run it as one submission.

        Raises:
            ScriptNotFoundError: If the file does not exist.
            ScriptReadError: If the file cannot be read or decoded.
            ScriptExecutionError: If evaluation fails.
        """
        try:
            source = Path(path).read_text(encoding="utf-8")
        except FileNotFoundError:
            raise ScriptNotFoundError(path) from None
        except (OSError, UnicodeDecodeError) as e:
            raise ScriptReadError(path, str(e)) from e

        logger.debug("execute_file: path=%s, bytes=%d", path, len(source))
        return self.execute(strip_shebang(source), f"@{path}")


def strip_shebang(source: str) -> str:
    """Blank a leading ``#`` line (usually ``#!``), keeping line numbers intact."""
    if not source.startswith("#"):
        return source
    _, newline, rest = source.partition("\n")
    return newline + rest
