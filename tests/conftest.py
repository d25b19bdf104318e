"""Pytest configuration and fixtures."""

from collections.abc import Iterator
from decimal import Decimal

import pytest
import structlog

from badmoney.comparison import ComparisonResult, compare
from badmoney.config import ComparisonConfig
from badmoney.math.fixed_point import Currency


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Undo any structlog.configure() a test (e.g. the CLI) performed."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def one_unit() -> Decimal:
    """Smallest Currency step (1 / SCALE) as a Decimal."""
    return Decimal(1) / Decimal(Currency.SCALE)


@pytest.fixture
def default_result() -> ComparisonResult:
    """The demo run with default operands, displayed-digit diffs."""
    return compare(ComparisonConfig())


@pytest.fixture
def exact_result() -> ComparisonResult:
    """The demo run with default operands, exact binary diffs."""
    return compare(ComparisonConfig(diff_mode="exact"))
