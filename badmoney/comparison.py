"""Run the demo formula through every representation and diff the results.

The formula is a <- a + (b * b + c), applied repeatedly with b and c fixed.
Decimal is the baseline: every other representation is compared against it
iteration by iteration.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from decimal import Decimal, localcontext
from typing import Any, TypeVar

import numpy as np
import structlog

from badmoney.config import DEFAULT_CONFIG, ComparisonConfig
from badmoney.representations import (
    CURRENCY,
    DECIMAL,
    FLOAT32,
    FLOAT64,
    REPRESENTATIONS,
    Representation,
)

logger = structlog.get_logger()

T = TypeVar("T")

FORMULA = "a + (b * b + c)"


def formula(a: T, b: T, c: T) -> T:
    """The demo formula, written once for every numeric type."""
    return a + (b * b + c)  # type: ignore[operator]


def do_maths(a: T, b: T, c: T, maths: Callable[[T, T, T], T], iterations: int) -> list[T]:
    """Apply maths repeatedly, feeding each result back in as a.

    Args:
        a: Starting accumulator
        b: Second operand (constant)
        c: Third operand (constant)
        maths: Function computing the next accumulator
        iterations: Number of applications (>= 1)

    Returns:
        The accumulator after each iteration

    Raises:
        ValueError: If iterations < 1
    """
    if iterations < 1:
        raise ValueError(f"iterations must be >= 1, got {iterations}")

    values = []
    for _ in range(iterations):
        a = maths(a, b, c)
        values.append(a)
    return values


def run_formula(
    representation: Representation,
    a: str,
    b: str,
    c: str,
    iterations: int,
) -> list[Any]:
    """Parse the operands with a representation and run the formula."""
    pa, pb, pc = (representation.parse(s) for s in (a, b, c))
    # float32 may overflow to inf; the report shows such diffs as missing
    with np.errstate(over="ignore", invalid="ignore"):
        values = do_maths(pa, pb, pc, formula, iterations)
    logger.debug(
        "formula_evaluated",
        representation=representation.name,
        iterations=iterations,
        final=representation.display(values[-1]),
    )
    return values


@dataclass
class ComparisonRow:
    """One iteration across all representations.

    Differences are value - decimal baseline; None means the binary value
    was not finite and cannot be compared.
    """

    iteration: int
    decimal: Decimal
    currency: Any
    float32: Any
    float64: Any
    diff_currency: Decimal | None
    diff_float32: Decimal | None
    diff_float64: Decimal | None


@dataclass
class ComparisonResult:
    """All rows of a comparison run plus the inputs that produced them."""

    a: str
    b: str
    c: str
    iterations: int
    diff_mode: str
    rows: list[ComparisonRow] = field(default_factory=list)

    def max_abs_diff(self, name: str) -> Decimal | None:
        """Largest absolute difference for a representation.

        Args:
            name: "currency", "float32" or "float64"

        Returns:
            The maximum, or None if no finite difference exists
        """
        diffs = [getattr(row, f"diff_{name}") for row in self.rows]
        finite = [abs(d) for d in diffs if d is not None]
        return max(finite) if finite else None


def _exact_subtraction_precision(*values: Decimal) -> int:
    """Digits needed for a difference of values to be computed without rounding."""
    highest = max(v.adjusted() for v in values)
    lowest = min(v.as_tuple().exponent for v in values)
    return highest - lowest + 2


def _diff(
    representation: Representation,
    value: Any,
    baseline: Decimal,
    exact: bool,
) -> Decimal | None:
    converted = representation.to_decimal(value, exact=exact)
    if converted is None:
        return None
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, _exact_subtraction_precision(converted, baseline))
        return converted - baseline


def diff_runs(
    runs: Mapping[str, Sequence[Any]],
    a: str,
    b: str,
    c: str,
    diff_mode: str = "display",
) -> ComparisonResult:
    """Diff precomputed formula runs against the Decimal run.

    No operand bound is applied here, so binary runs may hold inf or nan;
    their diffs are None.

    Args:
        runs: Values per iteration keyed by representation name; must contain
            "decimal", "currency", "float32" and "float64" of equal length
        a: Starting accumulator the runs were computed from
        b: Squared operand
        c: Added operand
        diff_mode: "display" or "exact"

    Returns:
        ComparisonResult with one row per iteration
    """
    iterations = len(runs[DECIMAL.name])
    exact = diff_mode == "exact"
    result = ComparisonResult(a=a, b=b, c=c, iterations=iterations, diff_mode=diff_mode)
    overflowed: set[str] = set()

    for idx in range(iterations):
        baseline = runs[DECIMAL.name][idx]
        diffs = {}
        for rep in (CURRENCY, FLOAT32, FLOAT64):
            diffs[rep.name] = _diff(rep, runs[rep.name][idx], baseline, exact)
            if diffs[rep.name] is None and rep.name not in overflowed:
                overflowed.add(rep.name)
                logger.warning(
                    "representation_not_finite",
                    representation=rep.name,
                    iteration=idx + 1,
                )

        result.rows.append(
            ComparisonRow(
                iteration=idx + 1,
                decimal=baseline,
                currency=runs[CURRENCY.name][idx],
                float32=runs[FLOAT32.name][idx],
                float64=runs[FLOAT64.name][idx],
                diff_currency=diffs[CURRENCY.name],
                diff_float32=diffs[FLOAT32.name],
                diff_float64=diffs[FLOAT64.name],
            )
        )

    logger.info(
        "comparison_complete",
        iterations=iterations,
        diff_mode=diff_mode,
        max_diff_currency=str(result.max_abs_diff("currency")),
        max_diff_float32=str(result.max_abs_diff("float32")),
        max_diff_float64=str(result.max_abs_diff("float64")),
    )
    return result


def compare(config: ComparisonConfig = DEFAULT_CONFIG) -> ComparisonResult:
    """Run every representation and diff each iteration against Decimal.

    Args:
        config: Operands, iteration count and diff mode

    Returns:
        ComparisonResult with one row per iteration
    """
    runs = {
        rep.name: run_formula(rep, config.a, config.b, config.c, config.iterations)
        for rep in REPRESENTATIONS
    }
    return diff_runs(runs, config.a, config.b, config.c, diff_mode=config.diff_mode)
