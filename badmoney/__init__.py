"""Floating-point versus fixed-point precision comparison.

Runs the formula a + (b * b + c) repeatedly through float32, float64,
Decimal and the fixed-point Currency type and reports how far each binary
representation drifts from the decimal baseline.
"""

from badmoney.math import Currency

__version__ = "0.1.0"

__all__ = ["Currency", "__version__"]
