"""Rich console helpers and per-segment equation styling.

The core layer hands over equations as ordered
:class:`~powcalc.core.models.Segment` tuples.  This module is the only
place that maps a :class:`~powcalc.core.models.SegmentKind` to a
colour, so disabling colour never changes the text that is printed.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import IO

from rich.console import Console
from rich.text import Text

from powcalc.core.models import Segment, SegmentKind


DEFAULT_PALETTE: Mapping[SegmentKind, str] = {
    SegmentKind.NUMBER: "yellow",
    SegmentKind.EXPONENT: "yellow",
    SegmentKind.RESULT: "green",
    SegmentKind.CARET: "white",
    SegmentKind.EQUALS: "white",
    SegmentKind.BRACKET: "orange1",
}
"""Style per segment kind.  Kinds without an entry print unstyled."""

FATAL_STYLE: str = "bold red"
HINT_STYLE: str = "yellow"


def make_console(
    *,
    color: bool = True,
    stderr: bool = False,
    file: IO[str] | None = None,
    force_terminal: bool | None = None,
) -> Console:
    """Create a console for equation or error output.

    With *color* disabled the console emits no escape sequences at all.
    Otherwise Rich decides from the terminal and from ``NO_COLOR`` /
    ``FORCE_COLOR`` in the environment.
    """
    return Console(
        file=file,
        stderr=stderr,
        color_system="auto" if color else None,
        force_terminal=force_terminal,
        highlight=False,
        soft_wrap=True,
    )


def render_segments(
    segments: tuple[Segment, ...],
    palette: Mapping[SegmentKind, str] = DEFAULT_PALETTE,
) -> Text:
    """Assemble *segments* into one :class:`~rich.text.Text`, styled per kind."""
    text = Text()
    for segment in segments:
        text.append(segment.text, style=palette.get(segment.kind, ""))
    return text


def print_fatal(console: Console, message: str, hint: str | None = None) -> None:
    """Write *message* behind a ``FATAL:`` marker, then the optional *hint*."""
    console.print(Text.assemble(("FATAL:", FATAL_STYLE), " ", message))
    if hint:
        console.print(Text.assemble(("Hint:", HINT_STYLE), " ", hint))
