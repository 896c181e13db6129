"""Tests for run mode resolution and dispatch."""

from __future__ import annotations

from unittest.mock import Mock

import pytest

from moonshell.core.errors import ScriptExecutionError, ScriptNotFoundError
from moonshell.frontends.cli.modes import (
    Interactive,
    PrintVersion,
    RunFile,
    RunInline,
    RunInlineThenInteractive,
    dispatch,
    resolve_run_modes,
)


class TestResolveRunModes:
    """Tests for resolve_run_modes."""

    def test_no_flags_is_interactive(self):
        """No flags starts the session."""
        assert resolve_run_modes() == (Interactive(),)

    def test_version_ignores_everything_else(self):
        """-v short-circuits all other flags."""
        modes = resolve_run_modes(version=True, script="a.lua", execute="x", interactive="y")
        assert modes == (PrintVersion(),)

    def test_script_alone_runs_and_exits(self):
        """-s alone runs the file without entering the session."""
        assert resolve_run_modes(script="a.lua") == (RunFile("a.lua"),)

    def test_execute(self):
        """-e runs inline text."""
        assert resolve_run_modes(execute="x = 1") == (RunInline("x = 1"),)

    def test_interactive(self):
        """-i runs inline text then the session."""
        assert resolve_run_modes(interactive="x = 1") == (RunInlineThenInteractive("x = 1"),)

    def test_script_then_execute(self):
        """-s composes with -e, file first."""
        modes = resolve_run_modes(script="a.lua", execute="print(x)")
        assert modes == (RunFile("a.lua"), RunInline("print(x)"))

    def test_script_then_interactive(self):
        """-s composes with -i, file first."""
        modes = resolve_run_modes(script="a.lua", interactive="")
        assert modes == (RunFile("a.lua"), RunInlineThenInteractive(""))

    def test_execute_wins_over_interactive(self):
        """-e takes precedence over -i."""
        modes = resolve_run_modes(execute="a", interactive="b")
        assert modes == (RunInline("a"),)

    def test_empty_inline_text_still_counts(self):
        """An empty -e string is a request, not an absent flag."""
        assert resolve_run_modes(execute="") == (RunInline(""),)


@pytest.fixture
def evaluator():
    evaluator = Mock()
    evaluator.version_banner.return_value = "Lupa Lua 5.4"
    return evaluator


@pytest.fixture
def reader_factory():
    return Mock()


class TestDispatch:
    """Tests for dispatch."""

    def test_print_version(self, evaluator, reader_factory, capsys):
        """PrintVersion prints the banner and never opens a reader."""
        dispatch((PrintVersion(),), evaluator, reader_factory)

        assert capsys.readouterr().out == "Lupa Lua 5.4\n"
        reader_factory.assert_not_called()

    def test_run_file_then_inline_share_evaluator(self, evaluator, reader_factory):
        """Modes run in order against the same evaluator."""
        dispatch((RunFile("a.lua"), RunInline("print(x)")), evaluator, reader_factory)

        evaluator.execute_file.assert_called_once_with("a.lua")
        evaluator.execute.assert_called_once_with("print(x)")
        reader_factory.assert_not_called()

    def test_inline_then_interactive(self, evaluator, reader_factory, monkeypatch):
        """The inline text runs before the session starts."""
        calls = []
        evaluator.execute.side_effect = lambda text: calls.append(("execute", text))
        monkeypatch.setattr(
            "moonshell.frontends.cli.modes.run_interactive",
            lambda ev, reader, config: calls.append(("session", ev, reader)),
        )

        dispatch((RunInlineThenInteractive("x = 1"),), evaluator, reader_factory)

        assert calls == [
            ("execute", "x = 1"),
            ("session", evaluator, reader_factory.return_value),
        ]

    def test_interactive(self, evaluator, reader_factory, monkeypatch):
        """Interactive creates a reader and starts the session."""
        session = Mock()
        monkeypatch.setattr("moonshell.frontends.cli.modes.run_interactive", session)

        dispatch((Interactive(),), evaluator, reader_factory)

        reader_factory.assert_called_once()
        session.assert_called_once()

    def test_failure_stops_later_modes(self, evaluator, reader_factory, monkeypatch):
        """A fatal error propagates and nothing after it runs."""
        evaluator.execute_file.side_effect = ScriptNotFoundError("a.lua")
        session = Mock()
        monkeypatch.setattr("moonshell.frontends.cli.modes.run_interactive", session)

        with pytest.raises(ScriptNotFoundError):
            dispatch((RunFile("a.lua"), RunInlineThenInteractive("x")), evaluator, reader_factory)

        evaluator.execute.assert_not_called()
        session.assert_not_called()

    def test_inline_failure_skips_session(self, evaluator, reader_factory, monkeypatch):
        """A failing -i chunk is fatal and the session never starts."""
        evaluator.execute.side_effect = ScriptExecutionError("=(command line)", "boom")
        session = Mock()
        monkeypatch.setattr("moonshell.frontends.cli.modes.run_interactive", session)

        with pytest.raises(ScriptExecutionError, match="boom"):
            dispatch((RunInlineThenInteractive("error('boom')"),), evaluator, reader_factory)

        session.assert_not_called()

    def test_unknown_mode_raises(self, evaluator, reader_factory):
        """Anything that is not a run mode is rejected."""
        with pytest.raises(TypeError, match="Unknown run mode"):
            dispatch(("bogus",), evaluator, reader_factory)
