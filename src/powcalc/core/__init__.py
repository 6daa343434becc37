"""Core layer — pure expression resolution and power evaluation.

Rules
-----
* No ``print()`` calls and no logging.
* No filesystem or terminal I/O.
* No imports from ``cli``.
* Failures are raised as :class:`~powcalc.exceptions.PowError` subclasses.
"""

from powcalc.core.evaluator import evaluate, select_domain
from powcalc.core.models import (
    Expression,
    NumericDomain,
    RenderConfig,
    Resolution,
    Segment,
    SegmentKind,
)
from powcalc.core.resolver import resolve, resolve_operand, split_operations

__all__: list[str] = [
    "Expression",
    "NumericDomain",
    "RenderConfig",
    "Resolution",
    "Segment",
    "SegmentKind",
    "evaluate",
    "resolve",
    "resolve_operand",
    "select_domain",
    "split_operations",
]
