"""Mathematical utilities for the precision comparison.

This package provides the fixed-point primitive:
- Currency: 6-decimal scaled-integer arithmetic
"""

from badmoney.math.fixed_point import Currency, CurrencyError, DivideByZero, Overflow, ParseError

__all__ = ["Currency", "CurrencyError", "DivideByZero", "Overflow", "ParseError"]
