"""powcalc — command-line exponent calculator.

Evaluates nested ``N^E`` expressions and prints each one as an equation
with its result, built on a pure core and a Rich-rendered CLI layer.
"""

from powcalc.version import __version__

__all__: list[str] = ["__version__"]
