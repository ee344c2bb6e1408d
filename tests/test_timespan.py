"""Tests for duration rendering."""

from __future__ import annotations

import math
from decimal import Decimal

from taskreview.utils.timespan import (
    PLACEHOLDER,
    Timespan,
    ceil_hundredths,
    render_approx_minutes,
    render_minutes,
)


def test_zero_minutes_renders_placeholder() -> None:
    """An empty span is a dash, never an empty string."""

    assert render_minutes(0) == PLACEHOLDER
    assert render_approx_minutes(0.0) == PLACEHOLDER


def test_ninety_minutes_breaks_into_hours_and_minutes() -> None:
    """Ninety minutes is one and a half hours."""

    text = render_minutes(90)
    assert "1h30m" in text
    assert "1.50h" in text
    assert text == "1h30m (1.50h), 90m0s (90.00m)"


def test_breakdown_starts_at_largest_populated_unit() -> None:
    """Weeks lead when the span is longer than a week."""

    clauses = Timespan.exact(8 * 24 * 60 + 60).clauses()
    assert clauses[0] == "1w1d (1.15w)"
    assert clauses[1] == "8d1h (8.05d)"
    assert clauses[2] == "193h0m (193.00h)"
    assert len(clauses) == 4


def test_equivalent_rounds_toward_positive_infinity() -> None:
    """A hundred minutes is 1.666… hours, shown as 1.67h."""

    assert render_minutes(100).startswith("1h40m (1.67h)")
    assert ceil_hundredths(Decimal("1.001")) == Decimal("1.01")
    assert ceil_hundredths(Decimal("-1.009")) == Decimal("-1.00")


def test_non_finite_approximate_values_render_placeholder() -> None:
    """Divisions by zero upstream must not leak into the text."""

    assert render_approx_minutes(math.nan) == PLACEHOLDER
    assert render_approx_minutes(math.inf) == PLACEHOLDER
    assert render_approx_minutes(-math.inf) == PLACEHOLDER


def test_approximate_minutes_keep_seconds() -> None:
    """Fractional averages show the seconds remainder."""

    assert render_approx_minutes(30.5) == "30m30s (30.50m)"


def test_sub_minute_span_renders_seconds_only() -> None:
    """A span below one minute has a single seconds clause."""

    assert render_approx_minutes(0.25) == "15.00s"


def test_negative_span_keeps_sign() -> None:
    """Malformed negative spans are shown as negative, not hidden."""

    assert render_minutes(-90).startswith("-1h30m (-1.50h)")


def test_str_matches_render() -> None:
    """The string form is the rendered breakdown."""

    span = Timespan.approx(61.0)
    assert str(span) == span.render()
    assert span.approximate is True
    assert Timespan.exact(5).approximate is False
