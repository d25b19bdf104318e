"""Fixed-point decimal arithmetic (Currency).

This module implements a scaled-integer decimal type. Values are stored as
Python integers scaled by 10^6, so addition and subtraction are exact and
multiplication and division lose at most one unit in the sixth decimal place.

All values are stored as integers scaled by SCALE.
Example: 23.23 is stored as 23_230_000
"""

from __future__ import annotations

import re
from decimal import Decimal, localcontext
from typing import ClassVar

from badmoney.constants import SCALE, SCALE_DIGITS, UINT64_MAX

__all__ = [
    # Classes
    "Currency",
    # Errors
    "CurrencyError",
    "ParseError",
    "Overflow",
    "DivideByZero",
]

# Optional sign, integer part, optional fractional part. No exponent.
_DECIMAL_LITERAL = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)")


# =============================================================================
# Error classes
# =============================================================================


class CurrencyError(ArithmeticError):
    """Base error for Currency operations."""

    pass


class ParseError(CurrencyError, ValueError):
    """Text is not a valid decimal literal."""

    pass


class Overflow(ParseError):
    """Parsed value does not fit the 64-bit unsigned bound once scaled."""

    pass


class DivideByZero(CurrencyError, ZeroDivisionError):
    """Divisor is zero."""

    pass


# =============================================================================
# Integer helpers
# =============================================================================


def _div_trunc(a: int, b: int) -> int:
    """Integer division with truncation toward zero.

    Python's // operator rounds toward negative infinity. Fixed-point results
    must truncate toward zero so that negating an operand negates the result.

    Args:
        a: Dividend (can be positive or negative)
        b: Divisor (must be non-zero)

    Returns:
        a / b truncated toward zero

    Raises:
        DivideByZero: If b is zero

    Examples:
        -7 // 3 = -3 (rounds toward -inf)
        _div_trunc(-7, 3) = -2 (truncates toward zero)
    """
    if b == 0:
        raise DivideByZero(f"Division by zero: {a} / 0")

    if (a >= 0) == (b >= 0):
        return a // b
    return -(abs(a) // abs(b))


def _exact_context_precision(value: int) -> int:
    """Digits needed for value / SCALE to be computed without rounding."""
    return len(str(abs(value))) + SCALE_DIGITS


# =============================================================================
# Currency class
# =============================================================================


class Currency:
    """6-decimal fixed-point number stored as int.

    Instances are immutable: every operation returns a new Currency.

    Example: 1.5 is stored as 1_500_000

    Attributes:
        value: The scaled integer (read-only)
    """

    SCALE: ClassVar[int] = SCALE
    MAX_PARSE_MAGNITUDE: ClassVar[int] = UINT64_MAX

    __slots__ = ("_value",)
    _value: int

    def __init__(self, value: int) -> None:
        """Create Currency from a raw scaled value.

        Raises:
            TypeError: If value is not an int
        """
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"Currency requires a scaled int, got {type(value).__name__}")
        object.__setattr__(self, "_value", value)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"Currency is immutable, cannot set {name!r}")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"Currency is immutable, cannot delete {name!r}")

    # --- Constructors ---

    @classmethod
    def parse(cls, text: str) -> Currency:
        """Parse a decimal literal such as "1000.00" or "-0.5".

        Digits beyond the sixth decimal place are truncated toward zero.

        Raises:
            TypeError: If text is not a str
            ParseError: If text is not a decimal literal
            Overflow: If the scaled magnitude exceeds 2^64 - 1
        """
        if not isinstance(text, str):
            raise TypeError(f"Currency.parse requires str, got {type(text).__name__}")

        literal = text.strip()
        if not _DECIMAL_LITERAL.fullmatch(literal):
            raise ParseError(f"Invalid decimal literal: {text!r}")

        return cls.from_decimal(Decimal(literal))

    @classmethod
    def from_decimal(cls, d: Decimal) -> Currency:
        """Create from decimal (will be scaled by 10^6 and truncated).

        Raises:
            ParseError: If d is NaN or infinite
            Overflow: If the scaled magnitude exceeds 2^64 - 1
        """
        if not d.is_finite():
            raise ParseError(f"Currency cannot represent {d}")

        with localcontext() as ctx:
            ctx.prec = max(ctx.prec, len(d.as_tuple().digits) + SCALE_DIGITS)
            scaled = int(d * cls.SCALE)

        if abs(scaled) > cls.MAX_PARSE_MAGNITUDE:
            raise Overflow(f"Value {d} exceeds the supported range of +/-{UINT64_MAX} units")
        return cls(scaled)

    @classmethod
    def from_int(cls, i: int) -> Currency:
        """Create from integer (will be scaled by 10^6)."""
        return cls(i * cls.SCALE)

    @classmethod
    def zero(cls) -> Currency:
        """Create a Currency with value 0."""
        return cls(0)

    # --- Accessors ---

    @property
    def value(self) -> int:
        """The underlying scaled integer."""
        return self._value

    def to_decimal(self) -> Decimal:
        """Convert to Decimal without losing any stored digit."""
        with localcontext() as ctx:
            ctx.prec = max(ctx.prec, _exact_context_precision(self._value))
            return Decimal(self._value) / Decimal(self.SCALE)

    def to_decimal_string(self) -> str:
        """Render as decimal text, e.g. "1584.8329"."""
        return str(self.to_decimal())

    # --- Named arithmetic ---

    def add(self, other: Currency) -> Currency:
        """Add two Currency values."""
        return Currency(self._value + other._value)

    def subtract(self, other: Currency) -> Currency:
        """Subtract other from self. Result may be negative."""
        return Currency(self._value - other._value)

    def multiply(self, other: Currency) -> Currency:
        """Multiply with truncation toward zero: (a * b) / 10^6"""
        return Currency(_div_trunc(self._value * other._value, self.SCALE))

    def divide(self, other: Currency) -> Currency:
        """Divide with truncation toward zero: (a * 10^6) / b

        Raises:
            DivideByZero: If other is zero
        """
        if other._value == 0:
            raise DivideByZero(f"Currency division by zero: {self} / 0")
        return Currency(_div_trunc(self._value * self.SCALE, other._value))

    # --- Operators ---

    def __add__(self, other: object) -> Currency:
        if not isinstance(other, Currency):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> Currency:
        if not isinstance(other, Currency):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: object) -> Currency:
        if not isinstance(other, Currency):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other: object) -> Currency:
        if not isinstance(other, Currency):
            return NotImplemented
        return self.divide(other)

    def __neg__(self) -> Currency:
        return Currency(-self._value)

    def __pos__(self) -> Currency:
        return self

    def __abs__(self) -> Currency:
        return Currency(abs(self._value))

    # --- Comparison ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Currency):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Currency):
            return NotImplemented
        return self._value < other._value

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Currency):
            return NotImplemented
        return self._value <= other._value

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Currency):
            return NotImplemented
        return self._value > other._value

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Currency):
            return NotImplemented
        return self._value >= other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __bool__(self) -> bool:
        """True if non-zero."""
        return self._value != 0

    # --- Output ---

    def __repr__(self) -> str:
        return f"Currency({self._value})"

    def __str__(self) -> str:
        return self.to_decimal_string()
