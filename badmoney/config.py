"""Run configuration for the precision comparison."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from badmoney.constants import (
    DEFAULT_A,
    DEFAULT_B,
    DEFAULT_C,
    DEFAULT_ITERATIONS,
    DEFAULT_WIDTH,
)
from badmoney.math.fixed_point import Currency

DIFF_MODES = ("display", "exact")

# Environment variable prefix for overrides (e.g. BADMONEY_ITERATIONS=30)
ENV_PREFIX = "BADMONEY_"


@dataclass(frozen=True)
class ComparisonConfig:
    """Centralized configuration for a comparison run.

    Attributes:
        a: Starting accumulator value (default: "1000.00")
        b: Value squared on every iteration (default: "23.23")
        c: Value added on every iteration (default: "45.20")
        iterations: Number of times the formula is applied (default: 15)
        width: Column width of the console table (default: 20)
        diff_mode: "display" compares the printed digits of each value, as a
            user reading the table would. "exact" compares the binary value
            actually stored.
    """

    a: str = DEFAULT_A
    b: str = DEFAULT_B
    c: str = DEFAULT_C
    iterations: int = DEFAULT_ITERATIONS
    width: int = DEFAULT_WIDTH
    diff_mode: str = "display"

    def __post_init__(self) -> None:
        # Operands must be valid for every representation; Currency is the strictest
        for name in ("a", "b", "c"):
            Currency.parse(getattr(self, name))
        if self.iterations < 1:
            raise ValueError(f"iterations must be >= 1, got {self.iterations}")
        if self.width < 1:
            raise ValueError(f"width must be >= 1, got {self.width}")
        if self.diff_mode not in DIFF_MODES:
            raise ValueError(f"diff_mode must be one of {DIFF_MODES}, got {self.diff_mode!r}")

    @property
    def exact(self) -> bool:
        return self.diff_mode == "exact"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ComparisonConfig:
        """Build a config from BADMONEY_* environment variables.

        Unset variables keep their defaults.

        Raises:
            ValueError: If a variable holds an invalid value
        """
        env = os.environ if environ is None else environ

        def get(name: str, default: str) -> str:
            return env.get(ENV_PREFIX + name, default)

        try:
            iterations = int(get("ITERATIONS", str(DEFAULT_ITERATIONS)))
            width = int(get("WIDTH", str(DEFAULT_WIDTH)))
        except ValueError as err:
            raise ValueError(f"Invalid integer in {ENV_PREFIX}* environment: {err}") from err

        return cls(
            a=get("A", DEFAULT_A),
            b=get("B", DEFAULT_B),
            c=get("C", DEFAULT_C),
            iterations=iterations,
            width=width,
            diff_mode=get("DIFF_MODE", "display").lower(),
        )


# Default configuration instance
DEFAULT_CONFIG = ComparisonConfig()
