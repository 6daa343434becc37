"""Tests for domain models (core/models.py).

All models are frozen dataclasses — these tests verify immutability,
the ``Expression`` invariant, and the derived segment views.
"""

from __future__ import annotations

import pytest

from powcalc.core.models import (
    Expression,
    RenderConfig,
    Resolution,
    Segment,
    SegmentKind,
    plain_text,
)
from powcalc.exceptions import OperationSyntaxError


def _operation() -> tuple[Segment, ...]:
    return (
        Segment(SegmentKind.NUMBER, "2"),
        Segment(SegmentKind.SPACE, " "),
        Segment(SegmentKind.CARET, "^"),
        Segment(SegmentKind.SPACE, " "),
        Segment(SegmentKind.EXPONENT, "3"),
    )


# ---------------------------------------------------------------------------
# Expression
# ---------------------------------------------------------------------------

class TestExpression:
    def test_fields_accessible(self) -> None:
        e = Expression(number="2", exponent="3")
        assert e.number == "2"
        assert e.exponent == "3"

    @pytest.mark.parametrize(("number", "exponent"), [("2^3", "2"), ("2", "3^2")])
    def test_rejects_unresolved_operands(self, number: str, exponent: str) -> None:
        with pytest.raises(OperationSyntaxError):
            Expression(number=number, exponent=exponent)

    def test_frozen(self) -> None:
        e = Expression(number="2", exponent="3")
        with pytest.raises(AttributeError):
            e.number = "4"  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------

class TestResolution:
    def test_equation(self) -> None:
        r = Resolution(operation=_operation(), result="8")
        assert r.equation == "2 ^ 3 = 8"

    def test_segments_end_with_result(self) -> None:
        r = Resolution(operation=_operation(), result="8")
        assert r.segments[-1] == Segment(SegmentKind.RESULT, "8")
        assert r.segments[-3] == Segment(SegmentKind.EQUALS, "=")

    def test_quiet_segments(self) -> None:
        r = Resolution(operation=_operation(), result="8", quiet=True)
        assert r.segments == (Segment(SegmentKind.RESULT, "8"),)
        assert r.equation == "8"

    def test_frozen(self) -> None:
        r = Resolution(operation=(), result="1")
        with pytest.raises(AttributeError):
            r.result = "2"  # type: ignore[misc]


# ---------------------------------------------------------------------------
# RenderConfig and helpers
# ---------------------------------------------------------------------------

class TestRenderConfig:
    def test_defaults(self) -> None:
        config = RenderConfig()
        assert config.quiet is False
        assert config.color is True

    def test_frozen(self) -> None:
        config = RenderConfig()
        with pytest.raises(AttributeError):
            config.quiet = True  # type: ignore[misc]


def test_plain_text_concatenates() -> None:
    assert plain_text(_operation()) == "2 ^ 3"
