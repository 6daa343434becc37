"""Logging configuration for the ``pow`` command.

Records go to stderr through Rich's handler so they never mix with the
equations printed on stdout.  Only the CLI layer logs; the core raises.
"""

from __future__ import annotations

import logging
import logging.config
from typing import Any

from rich.logging import RichHandler

from powcalc.cli.console import make_console

LOGGER_NAME: str = "powcalc"


def _stderr_handler(color: bool = True) -> logging.Handler:
    return RichHandler(
        console=make_console(color=color, stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )


def _build_logging_config(level: str, color: bool) -> dict[str, Any]:
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "rich": {
                "format": "%(message)s",
                "datefmt": "[%X]",
            },
        },
        "handlers": {
            "default": {
                "()": _stderr_handler,
                "formatter": "rich",
                "color": color,
            },
        },
        "loggers": {
            LOGGER_NAME: {"handlers": ["default"], "level": level, "propagate": False},
        },
    }


def configure_logging(*, debug: bool = False, color: bool = True) -> None:
    """Install the stderr handler; ``DEBUG`` level when *debug* is set.

    *color* set to ``False`` keeps ANSI styling out of log records even
    when the terminal would accept it.
    """
    level = "DEBUG" if debug else "WARNING"
    logging.config.dictConfig(_build_logging_config(level, color))
