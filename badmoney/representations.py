"""Numeric representations compared by the precision demo.

Each representation knows how to parse an operand string, how to render a
value the way a user would see it, and how to turn a value back into a
Decimal for comparison against the decimal baseline.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any

import numpy as np

from badmoney.math.fixed_point import Currency


@dataclass(frozen=True)
class Representation:
    """A numeric type that can run the formula.

    Attributes:
        name: Identifier used in reports and JSON output
        label: Column header used by the console table
        parse: Builds a value from an operand string
        display: Renders a value as text (shortest round-trip for binary floats)
        exact: Converts a value to the Decimal it really holds, or None if not finite
    """

    name: str
    label: str
    parse: Callable[[str], Any]
    display: Callable[[Any], str]
    exact: Callable[[Any], Decimal | None]

    def to_decimal(self, value: Any, exact: bool = False) -> Decimal | None:
        """Convert a value to Decimal for comparison.

        With exact=False the displayed text is re-parsed, which hides binary
        error until it reaches the shortest round-trip digits. With exact=True
        the stored binary value is converted digit for digit.

        Returns:
            The Decimal value, or None when the value is not finite
        """
        if exact:
            return self.exact(value)
        try:
            result = Decimal(self.display(value))
        except InvalidOperation:
            return None
        return result if result.is_finite() else None


def _binary_exact(value: Any) -> Decimal | None:
    """Exact Decimal of a binary float, None for inf/nan."""
    as_float = float(value)
    if not math.isfinite(as_float):
        return None
    return Decimal(as_float)


def _decimal_exact(value: Decimal) -> Decimal | None:
    return value if value.is_finite() else None


# 32-bit IEEE 754 binary float
FLOAT32 = Representation(
    name="float32",
    label="float",
    parse=np.float32,
    display=str,
    exact=_binary_exact,
)

# 64-bit IEEE 754 binary float
FLOAT64 = Representation(
    name="float64",
    label="double",
    parse=float,
    display=repr,
    exact=_binary_exact,
)

# Decimal with the default 28-digit context, the baseline of correctness
DECIMAL = Representation(
    name="decimal",
    label="decimal",
    parse=Decimal,
    display=str,
    exact=_decimal_exact,
)

# Fixed-point scaled integer
CURRENCY = Representation(
    name="currency",
    label="currency",
    parse=Currency.parse,
    display=Currency.to_decimal_string,
    exact=Currency.to_decimal,
)

REPRESENTATIONS: tuple[Representation, ...] = (DECIMAL, CURRENCY, FLOAT32, FLOAT64)
