"""Tests for evaluation outcome types."""

from __future__ import annotations

from moonshell.core.types import EvaluationError, IncompleteInput, Value, Values


class TestValues:
    """Tests for the Values outcome."""

    def test_render_joins_with_tabs(self):
        """Display strings are joined with tabs."""
        outcome = Values((Value("1"), Value("nil"), Value("a")))
        assert outcome.render() == "1\tnil\ta"
        assert len(outcome) == 3

    def test_render_empty(self):
        """No values renders as an empty string."""
        assert Values().render() == ""
        assert len(Values()) == 0

    def test_value_equality_ignores_raw(self):
        """Values compare by display string only."""
        assert Value("x", raw=object()) == Value("x", raw=object())
        assert str(Value("true", raw=True)) == "true"


class TestOutcomeVariants:
    """Tests for the outcome variants."""

    def test_variants_are_distinct_types(self):
        """Each variant is its own type."""
        outcomes = [Values(), IncompleteInput("x"), EvaluationError("y")]
        assert [type(o).__name__ for o in outcomes] == [
            "Values",
            "IncompleteInput",
            "EvaluationError",
        ]

    def test_evaluation_error_str(self):
        """EvaluationError renders as its message."""
        assert str(EvaluationError("stdin:1: boom")) == "stdin:1: boom"
