"""CLI application entry point for the ``pow`` command.

This module is the **sole error boundary** for the entire application.
:func:`main` reports :class:`~powcalc.exceptions.PowError` failures on
stderr and returns exit codes; :func:`cli` additionally turns
``KeyboardInterrupt`` and any escaped exception into a clean exit.

Architecture notes
------------------
* No parsing or arithmetic lives here — every expression is handed to
  :func:`powcalc.core.resolver.resolve`.
* Output goes through Rich consoles only: equations on stdout, errors
  and log records on stderr.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import re
import sys
from collections.abc import Sequence

from rich.console import Console

from powcalc.cli import exit_codes
from powcalc.cli.console import make_console, print_fatal, render_segments
from powcalc.cli.log import LOGGER_NAME, configure_logging
from powcalc.core.models import RenderConfig
from powcalc.core.resolver import resolve, split_operations
from powcalc.exceptions import PowError
from powcalc.version import __version__

logger = logging.getLogger(f"{LOGGER_NAME}.cli")

PROG: str = "pow"

# "-2^3" or "-.5^2" are operands, not option flags.
_NEGATIVE_OPERAND = re.compile(r"-[\d.]")


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser."""
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Commandline exponent calculator.",
        usage="%(prog)s [OPTIONS] <N>^<EXP>",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "All parameters that are not options are concatenated together before they are parsed.\n"
            "Operations are delimited using commas ','.\n"
            "\n"
            "examples:\n"
            "  pow 2^8\n"
            "  pow 2^3^2, (2^3)^2\n"
            "  pow -q -- -2^3"
        ),
    )
    parser.add_argument(
        "-v",
        "--version",
        action="store_true",
        help="Shows the current version number, then exits.",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Prevents non-essential console output & formatting.",
    )
    parser.add_argument(
        "-n",
        "--no-color",
        action="store_true",
        help="Disables the use of ANSI color escape sequences in console output.",
    )
    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Writes diagnostic log records to stderr.",
    )
    parser.add_argument(
        "operations",
        nargs="*",
        metavar="<N>^<EXP>",
        help="Expressions to evaluate, e.g. 2^8 or 2^(3^2).",
    )
    return parser


def _separate_operands(argv: Sequence[str]) -> list[str]:
    """Move operand tokens behind ``--`` so argparse never reads them as flags.

    Relative order of operands is preserved, which keeps the comma
    splitting of the joined parameters intact.
    """
    options: list[str] = []
    operands: list[str] = []
    for index, token in enumerate(argv):
        if token == "--":
            operands.extend(argv[index + 1:])
            break
        if token.startswith("-") and not _NEGATIVE_OPERAND.match(token):
            options.append(token)
        else:
            operands.append(token)
    return [*options, "--", *operands]


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _print_version(out: Console, config: RenderConfig) -> int:
    out.print(__version__ if config.quiet else f"{PROG}  v{__version__}")
    return exit_codes.SUCCESS


def _run_operations(operations: list[str], config: RenderConfig, out: Console) -> int:
    """Resolve and print each operation in order, stopping at the first failure.

    Raises
    ------
    PowError
        From the first operation that cannot be resolved.  Lines for the
        operations before it have already been printed.
    """
    for operation in operations:
        logger.debug("Resolving %r", operation)
        resolution = resolve(operation, config)
        logger.debug("Resolved %r to %s", operation, resolution.result)
        out.print(render_segments(resolution.segments))
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the ``pow`` CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(_separate_operands(sys.argv[1:] if argv is None else argv))

    config = RenderConfig(quiet=args.quiet, color=not args.no_color)
    configure_logging(debug=args.debug, color=config.color)
    out = make_console(color=config.color)
    err = make_console(color=config.color, stderr=True)

    if args.version:
        return _print_version(out, config)

    operations = split_operations(args.operations)
    if not operations:
        parser.print_help()
        return exit_codes.SUCCESS

    try:
        return _run_operations(operations, config, out)
    except PowError as exc:
        logger.debug("Resolution failed", exc_info=exc)
        print_fatal(err, str(exc), exc.hint)
        return exit_codes.GENERAL_ERROR


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    err = make_console(stderr=True)
    try:
        code = main()
        sys.exit(code)
    except KeyboardInterrupt:
        err.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        print_fatal(err, f"An undefined exception occurred! {type(exc).__name__}: {exc}")
        sys.exit(exit_codes.GENERAL_ERROR)
