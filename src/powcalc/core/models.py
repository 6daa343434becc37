"""Domain models for powcalc.

All models are **frozen** dataclasses or enums — immutable value objects
with no behaviour beyond data access and trivial derived views.  They
carry zero I/O and no dependencies on external packages.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from powcalc.exceptions import OperationSyntaxError


# ---------------------------------------------------------------------------
# Numeric domain
# ---------------------------------------------------------------------------

class NumericDomain(Enum):
    """Numeric representation chosen for a single expression."""

    SIGNED_INTEGER = "signed integer"
    UNSIGNED_INTEGER = "unsigned integer"
    FLOATING_POINT = "floating point"


# ---------------------------------------------------------------------------
# Expression
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Expression:
    """A ``number ^ exponent`` pair whose operands are already resolved."""

    number: str
    """Base operand text, e.g. ``"2"`` or ``"-1.5"``."""

    exponent: str
    """Exponent operand text."""

    def __post_init__(self) -> None:
        for operand in (self.number, self.exponent):
            if "^" in operand:
                raise OperationSyntaxError(
                    "unresolved sub-expression",
                    f"{self.number}^{self.exponent}",
                )


# ---------------------------------------------------------------------------
# Equation segments
# ---------------------------------------------------------------------------

class SegmentKind(Enum):
    """Semantic role of one piece of equation text."""

    NUMBER = "number"
    EXPONENT = "exponent"
    RESULT = "result"
    CARET = "caret"
    EQUALS = "equals"
    BRACKET = "bracket"
    SPACE = "space"


@dataclass(frozen=True, slots=True)
class Segment:
    """One styled-or-plain piece of an equation."""

    kind: SegmentKind
    text: str


def plain_text(segments: tuple[Segment, ...]) -> str:
    """Concatenate *segments* without any styling."""
    return "".join(segment.text for segment in segments)


# ---------------------------------------------------------------------------
# Resolution result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Resolution:
    """Outcome of resolving one expression fragment.

    ``operation`` holds the left-hand side only (``2 ^ (3 ^ 2)``), which
    is what an enclosing expression embeds in brackets.  ``segments``
    is what gets displayed at the top level.
    """

    operation: tuple[Segment, ...]
    """Segments for ``number ^ exponent`` without the ``= result`` tail."""

    result: str
    """Bare numeric text of the final value."""

    quiet: bool = False
    """When set, :attr:`segments` collapses to the result alone."""

    @property
    def segments(self) -> tuple[Segment, ...]:
        result = Segment(SegmentKind.RESULT, self.result)
        if self.quiet:
            return (result,)
        return (
            *self.operation,
            Segment(SegmentKind.SPACE, " "),
            Segment(SegmentKind.EQUALS, "="),
            Segment(SegmentKind.SPACE, " "),
            result,
        )

    @property
    def equation(self) -> str:
        """Plain-text rendering of :attr:`segments`."""
        return plain_text(self.segments)


# ---------------------------------------------------------------------------
# Presentation configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Presentation switches, fixed before any resolution begins."""

    quiet: bool = False
    """Print only results, without the equation decoration."""

    color: bool = True
    """Apply per-segment styling when the output supports it."""
