"""Power evaluation over a per-expression numeric domain.

Every function in this module is a **pure** transformation of operand
text into result text.  The domain is derived from the operands'
textual shape every time; nothing is cached.

Domain selection (first match wins):

1. **Floating point** — either operand contains ``.``.
2. **Signed integer** — either operand has ``-`` before its first digit.
3. **Unsigned integer** — otherwise.

Integer domains are 64 bits wide and truncate toward zero.  The
floating domain surfaces whatever the real power primitive yields,
including ``nan`` and ``inf``.
"""

from __future__ import annotations

import math
import re
from decimal import Decimal

from powcalc.core.models import Expression, NumericDomain
from powcalc.exceptions import ConversionError, ResultRangeError


_INTEGER_PATTERNS: dict[NumericDomain, re.Pattern[str]] = {
    NumericDomain.UNSIGNED_INTEGER: re.compile(r"\d+"),
    NumericDomain.SIGNED_INTEGER: re.compile(r"-?\d+"),
}
_FLOAT_PATTERN: re.Pattern[str] = re.compile(r"-?(?:\d+\.?\d*|\.\d+)")

# Inclusive bounds of each integer domain.
_INTEGER_BOUNDS: dict[NumericDomain, tuple[int, int]] = {
    NumericDomain.UNSIGNED_INTEGER: (0, 2**64 - 1),
    NumericDomain.SIGNED_INTEGER: (-(2**63), 2**63 - 1),
}

# Any base with magnitude >= 2 overflows 64 bits at this exponent.
_OVERFLOW_EXPONENT: int = 64


# ---------------------------------------------------------------------------
# Domain selection
# ---------------------------------------------------------------------------

def _has_leading_negative(operand: str) -> bool:
    """Return ``True`` when a ``-`` appears before any digit in *operand*."""
    for char in operand:
        if char.isdigit():
            return False
        if char == "-":
            return True
    return False


def select_domain(number: str, exponent: str) -> NumericDomain:
    """Pick the numeric domain for ``number ^ exponent`` from operand text."""
    operands = (number, exponent)
    if any("." in operand for operand in operands):
        return NumericDomain.FLOATING_POINT
    if any(_has_leading_negative(operand) for operand in operands):
        return NumericDomain.SIGNED_INTEGER
    return NumericDomain.UNSIGNED_INTEGER


# ---------------------------------------------------------------------------
# Conversion
# ---------------------------------------------------------------------------

def _with_article(domain: NumericDomain) -> str:
    article = "an" if domain.value[0] in "aeiou" else "a"
    return f"{article} {domain.value}"


def _conversion_error(operand: str, domain: NumericDomain) -> ConversionError:
    return ConversionError(
        f"Cannot convert '{operand}' to {_with_article(domain)}",
        hint="Operands may only contain digits, an optional leading '-' and one '.'",
    )


def _to_integer(operand: str, domain: NumericDomain) -> int:
    if _INTEGER_PATTERNS[domain].fullmatch(operand) is None:
        raise _conversion_error(operand, domain)
    value = int(operand)
    low, high = _INTEGER_BOUNDS[domain]
    if not low <= value <= high:
        raise ConversionError(
            f"'{operand}' is out of range for {_with_article(domain)} (64-bit)",
        )
    return value


def _to_float(operand: str) -> float:
    if _FLOAT_PATTERN.fullmatch(operand) is None:
        raise _conversion_error(operand, NumericDomain.FLOATING_POINT)
    return float(operand)


# ---------------------------------------------------------------------------
# Power primitives
# ---------------------------------------------------------------------------

def _is_odd_integer(value: float) -> bool:
    return value.is_integer() and value % 2 == 1


def _overflow(base: int, exponent: int, domain: NumericDomain) -> ResultRangeError:
    return ResultRangeError(
        f"{base}^{exponent} does not fit in {_with_article(domain)} (64-bit)",
        hint="Use a floating point operand (e.g. 2.0) for approximate results",
    )


def _integer_power(base: int, exponent: int, domain: NumericDomain) -> int:
    """Raise *base* to *exponent*, truncating toward zero within *domain*."""
    low, high = _INTEGER_BOUNDS[domain]

    if exponent < 0:
        if base == 0:
            raise ResultRangeError(
                "Zero cannot be raised to a negative power",
            )
        # 1 / base**n truncates to zero unless base is 1 or -1.
        value = 0 if abs(base) > 1 else base**-exponent
    elif abs(base) > 1 and exponent >= _OVERFLOW_EXPONENT:
        raise _overflow(base, exponent, domain)
    else:
        value = base**exponent

    if not low <= value <= high:
        raise _overflow(base, exponent, domain)
    return value


def _float_power(base: float, exponent: float) -> float:
    """Real power that returns ``inf``/``nan`` instead of raising."""
    try:
        return math.pow(base, exponent)
    except OverflowError:
        return math.copysign(math.inf, base) if _is_odd_integer(exponent) else math.inf
    except ValueError:
        if base == 0:
            return math.copysign(math.inf, base) if _is_odd_integer(exponent) else math.inf
        return math.nan


def _format_float(value: float) -> str:
    """Render *value* in positional notation that always carries a ``.``.

    Result text may be fed back into an enclosing expression, where the
    ``.`` is what keeps it in the floating domain.  ``nan`` and ``inf``
    are left as Python spells them.
    """
    if not math.isfinite(value):
        return repr(value)
    text = format(Decimal(repr(value)), "f")
    return text if "." in text else f"{text}.0"


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def evaluate_expression(expression: Expression) -> str:
    """Compute *expression* and return the canonical result text.

    Raises
    ------
    ConversionError
        If either operand is malformed for the selected domain.
    ResultRangeError
        If an integer result cannot be represented in 64 bits.
    """
    domain = select_domain(expression.number, expression.exponent)

    if domain is NumericDomain.FLOATING_POINT:
        power = _float_power(_to_float(expression.number), _to_float(expression.exponent))
        return _format_float(power)

    base = _to_integer(expression.number, domain)
    exponent = _to_integer(expression.exponent, domain)
    return str(_integer_power(base, exponent, domain))


def evaluate(number: str, exponent: str) -> str:
    """Compute ``number ^ exponent`` for two operand strings."""
    return evaluate_expression(Expression(number=number, exponent=exponent))
