"""Pydantic models for the serialized comparison report.

Every number is serialized as a decimal string so that no digit is lost to a
JSON float.
"""

from pydantic import BaseModel, Field

from badmoney.constants import SCALE


class ComparisonRowModel(BaseModel):
    """One iteration of the formula in every representation."""

    iteration: int = Field(ge=1, description="1-based iteration number.")
    decimal: str = Field(description="Decimal baseline value.")
    currency: str = Field(description="Fixed-point Currency value.")
    float32: str = Field(description="32-bit float value (shortest round-trip digits).")
    float64: str = Field(description="64-bit float value (shortest round-trip digits).")
    diff_currency: str | None = Field(
        default=None,
        alias="diffCurrency",
        description="currency - decimal.",
    )
    diff_float32: str | None = Field(
        default=None,
        alias="diffFloat32",
        description="float32 - decimal, null when float32 is not finite.",
    )
    diff_float64: str | None = Field(
        default=None,
        alias="diffFloat64",
        description="float64 - decimal, null when float64 is not finite.",
    )

    model_config = {"populate_by_name": True}


class ComparisonReport(BaseModel):
    """A complete comparison run."""

    formula: str = Field(description="The formula applied on every iteration.")
    a: str = Field(description="Starting accumulator.")
    b: str = Field(description="Squared operand.")
    c: str = Field(description="Added operand.")
    scale: int = Field(default=SCALE, description="Currency fixed-point scale.")
    iterations: int = Field(ge=1)
    diff_mode: str = Field(alias="diffMode", description="'display' or 'exact'.")
    rows: list[ComparisonRowModel] = Field(default_factory=list)

    model_config = {"populate_by_name": True}
