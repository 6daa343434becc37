"""Single source of truth for the powcalc version string."""

__version__: str = "1.0.0"
