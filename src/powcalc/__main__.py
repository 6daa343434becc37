"""Allow ``python -m powcalc`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m powcalc`` behaves identically to the ``pow`` console
script.
"""

from __future__ import annotations

from powcalc.cli.app import cli

if __name__ == "__main__":
    cli()
