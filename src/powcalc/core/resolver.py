"""Expression resolver — turns raw fragments into equation segments.

The resolver scans one fragment with an explicit grammar rather than a
pattern search:

* Allowed characters are digits, ``.``, ``-``, ``^``, brackets and
  whitespace; brackets must balance.
* Brackets enclosing a whole fragment or operand are dropped.
* The fragment splits at its first caret outside any bracket, so ``^``
  is right-associative: ``2^3^4`` means ``2^(3^4)`` while ``(2^3)^4``
  groups to the left explicitly.

Each side that still contains a caret is resolved recursively first;
the recursion depth therefore equals the nesting depth of the input.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from contextlib import contextmanager

from powcalc.core.evaluator import evaluate_expression
from powcalc.core.models import (
    Expression,
    RenderConfig,
    Resolution,
    Segment,
    SegmentKind,
)
from powcalc.exceptions import OperationSyntaxError, PowError, UnknownError


_ALLOWED_CHARACTERS: frozenset[str] = frozenset("0123456789.-^() \t\r\n")

_SYNTAX_HINT: str = "Expected <N>^<EXP>, for example 2^8 or 2^(3^2)"

_SPACE = Segment(SegmentKind.SPACE, " ")
_CARET = Segment(SegmentKind.CARET, "^")
_OPEN = Segment(SegmentKind.BRACKET, "(")
_CLOSE = Segment(SegmentKind.BRACKET, ")")


# ---------------------------------------------------------------------------
# Scanning
# ---------------------------------------------------------------------------

def _unrecognized(text: str) -> OperationSyntaxError:
    return OperationSyntaxError("unrecognized operation syntax", text, hint=_SYNTAX_HINT)


def _is_balanced(text: str) -> bool:
    depth = 0
    for char in text:
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth < 0:
                return False
    return depth == 0


def _strip_enclosing(text: str) -> str:
    """Remove bracket pairs that wrap the whole of *text*."""
    text = text.strip()
    # "(1)^(2)" starts and ends with brackets that are not one pair.
    while text.startswith("(") and text.endswith(")") and _is_balanced(text[1:-1]):
        text = text[1:-1].strip()
    return text


def split_operation(text: str) -> tuple[str, str]:
    """Split *text* into raw ``(number, exponent)`` at its top-level caret.

    Either side may still contain carets (nested expressions) and
    enclosing brackets are removed from both sides.

    Raises
    ------
    OperationSyntaxError
        With reason ``unrecognized operation syntax``, ``missing operand
        and exponent``, ``missing operand`` or ``missing exponent``.
    """
    if any(char not in _ALLOWED_CHARACTERS for char in text):
        raise _unrecognized(text)

    body = _strip_enclosing(text)
    if not _is_balanced(body):
        raise _unrecognized(text)

    split_at = None
    depth = 0
    for index, char in enumerate(body):
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
        elif char == "^" and depth == 0:
            split_at = index
            break
    if split_at is None:
        raise _unrecognized(text)

    number = _strip_enclosing(body[:split_at])
    exponent = _strip_enclosing(body[split_at + 1:])

    if not number and not exponent:
        raise OperationSyntaxError("missing operand and exponent", text, hint=_SYNTAX_HINT)
    if not number:
        raise OperationSyntaxError("missing operand", text, hint=_SYNTAX_HINT)
    if not exponent:
        raise OperationSyntaxError("missing exponent", text, hint=_SYNTAX_HINT)
    return number, exponent


# ---------------------------------------------------------------------------
# Recursive descent
# ---------------------------------------------------------------------------

def _resolve_operand(text: str, kind: SegmentKind) -> tuple[tuple[Segment, ...], str]:
    if "^" not in text:
        return (Segment(kind, text),), text

    nested = _resolve(text, quiet=False)
    return (_OPEN, *nested.operation, _CLOSE), nested.result


def _resolve(text: str, *, quiet: bool) -> Resolution:
    raw_number, raw_exponent = split_operation(text)

    number_segments, number = _resolve_operand(raw_number, SegmentKind.NUMBER)
    exponent_segments, exponent = _resolve_operand(raw_exponent, SegmentKind.EXPONENT)

    result = evaluate_expression(Expression(number=number, exponent=exponent))
    operation = (*number_segments, _SPACE, _CARET, _SPACE, *exponent_segments)
    return Resolution(operation=operation, result=result, quiet=quiet)


@contextmanager
def _unknown_errors() -> Iterator[None]:
    """Let :class:`PowError` through; wrap everything else in UnknownError."""
    try:
        yield
    except PowError:
        raise
    except RecursionError as exc:
        raise UnknownError(
            "Expression is nested too deeply to resolve",
        ) from exc
    except Exception as exc:
        raise UnknownError(
            f"An undefined exception occurred: {exc}",
        ) from exc


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def resolve_operand(
    text: str,
    kind: SegmentKind = SegmentKind.NUMBER,
) -> tuple[tuple[Segment, ...], str]:
    """Resolve one side of a caret to ``(display segments, value text)``.

    Bare operands are returned unchanged; nested operations are resolved
    and displayed in brackets.  Raises the same errors as :func:`resolve`.
    """
    with _unknown_errors():
        return _resolve_operand(text, kind)


def resolve(text: str, config: RenderConfig | None = None) -> Resolution:
    """Resolve one top-level expression fragment.

    Parameters
    ----------
    text:
        Raw fragment such as ``"2^3^2"`` or ``" (2^3) ^ 2 "``.
    config:
        Presentation switches; only ``quiet`` affects the returned
        segments.  Defaults to :class:`RenderConfig` ``()``.

    Raises
    ------
    OperationSyntaxError
        If the fragment does not follow the ``<N>^<EXP>`` grammar.
    ConversionError
        If an operand cannot be read in its numeric domain.
    UnknownError
        For any other failure, e.g. nesting too deep to recurse.
    """
    config = config or RenderConfig()
    with _unknown_errors():
        return _resolve(text, quiet=config.quiet)


def split_operations(parameters: Iterable[str]) -> list[str]:
    """Join positional *parameters* with spaces and split on commas.

    Each returned fragment is one independent top-level expression,
    stripped of surrounding whitespace.  An empty parameter list yields
    no fragments.
    """
    joined = " ".join(parameters)
    if not joined.strip():
        return []
    return [fragment.strip() for fragment in joined.split(",")]
