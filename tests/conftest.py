"""Shared pytest fixtures and configuration for the powcalc test suite.

Guidelines
----------
* Core tests must be pure — no I/O, no mocking.
* CLI tests drive ``main(argv)`` and read output through ``capsys``.
* Tests must not depend on the caller's terminal or colour settings.
"""

from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _neutral_color_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep Rich from forcing or suppressing colour based on the host shell."""
    for name in ("FORCE_COLOR", "NO_COLOR", "TTY_COMPATIBLE", "TTY_INTERACTIVE"):
        monkeypatch.delenv(name, raising=False)
