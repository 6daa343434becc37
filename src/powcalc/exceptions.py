"""Custom exception hierarchy for powcalc.

Every failure raised while resolving an expression must inherit from
:class:`PowError`.  The core layer raises these and never catches them;
the CLI error boundary renders the message and maps it to an exit code.

Hierarchy
---------
PowError
├── OperationSyntaxError
├── ConversionError
│   └── ResultRangeError
└── UnknownError
"""

from __future__ import annotations


class PowError(Exception):
    """Base exception for all powcalc errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Parsing ---------------------------------------------------------------

class OperationSyntaxError(PowError):
    """Raised when a fragment does not follow the ``<N>^<EXP>`` grammar."""

    def __init__(self, reason: str, text: str, *, hint: str | None = None) -> None:
        super().__init__(f"{reason.capitalize()} in '{text}'", hint=hint)
        self.reason: str = reason
        """Lower-case description of what is wrong, e.g. ``missing operand``."""

        self.text: str = text
        """The raw fragment that failed to parse."""


# --- Numeric conversion ----------------------------------------------------

class ConversionError(PowError):
    """Raised when an operand cannot be read in its numeric domain."""


class ResultRangeError(ConversionError):
    """Raised when a computed power cannot be represented in its domain."""


# --- Catch-all -------------------------------------------------------------

class UnknownError(PowError):
    """Raised when resolution fails for a reason powcalc does not model."""
