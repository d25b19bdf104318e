"""Report generation for comparison results."""

from decimal import Decimal

from badmoney.comparison import FORMULA, ComparisonResult, ComparisonRow
from badmoney.constants import DEFAULT_WIDTH
from badmoney.models import ComparisonReport, ComparisonRowModel
from badmoney.representations import CURRENCY, DECIMAL, FLOAT32, FLOAT64

# Shown in place of a difference that cannot be computed
MISSING = "*****"

COLUMNS = (
    DECIMAL.label,
    CURRENCY.label,
    FLOAT32.label,
    FLOAT64.label,
    "diff(C-m)",
    "diff(f-m)",
    "diff(d-m)",
)


def _fmt_diff(diff: Decimal | None) -> str:
    return MISSING if diff is None else str(diff)


def _row_cells(row: ComparisonRow) -> list[str]:
    return [
        DECIMAL.display(row.decimal),
        CURRENCY.display(row.currency),
        FLOAT32.display(row.float32),
        FLOAT64.display(row.float64),
        _fmt_diff(row.diff_currency),
        _fmt_diff(row.diff_float32),
        _fmt_diff(row.diff_float64),
    ]


def format_table(result: ComparisonResult, width: int = DEFAULT_WIDTH) -> str:
    """Render the console table: operands, header, one line per iteration."""
    lines = [
        f"formula: {FORMULA}",
        f"a = {result.a:>7}",
        f"b = {result.b:>7}",
        f"c = {result.c:>7}",
        "".join(f"{name:>{width}}" for name in COLUMNS),
    ]
    for row in result.rows:
        lines.append("".join(f"{cell:>{width}}" for cell in _row_cells(row)))
    return "\n".join(lines)


def format_markdown_report(result: ComparisonResult) -> str:
    """Generate a markdown report from comparison results."""
    lines = [
        "# Precision Comparison",
        "",
        f"**Formula:** `{FORMULA}`",
        f"**Operands:** a = {result.a}, b = {result.b}, c = {result.c}",
        f"**Iterations:** {result.iterations}",
        f"**Diff mode:** {result.diff_mode}",
        "",
        "## Maximum Absolute Difference vs Decimal",
        "",
        "| Representation | Max diff |",
        "|----------------|----------|",
    ]
    for name in (CURRENCY.name, FLOAT32.name, FLOAT64.name):
        lines.append(f"| {name} | {_fmt_diff(result.max_abs_diff(name))} |")

    lines.extend([
        "",
        "## Iterations",
        "",
        "| # | " + " | ".join(COLUMNS) + " |",
        "|---|" + "|".join("---" for _ in COLUMNS) + "|",
    ])
    for row in result.rows:
        lines.append(f"| {row.iteration} | " + " | ".join(_row_cells(row)) + " |")

    return "\n".join(lines) + "\n"


def to_report_model(result: ComparisonResult) -> ComparisonReport:
    """Convert a result into its serializable pydantic model."""
    rows = []
    for row in result.rows:
        cells = _row_cells(row)
        rows.append(
            ComparisonRowModel(
                iteration=row.iteration,
                decimal=cells[0],
                currency=cells[1],
                float32=cells[2],
                float64=cells[3],
                diff_currency=None if row.diff_currency is None else cells[4],
                diff_float32=None if row.diff_float32 is None else cells[5],
                diff_float64=None if row.diff_float64 is None else cells[6],
            )
        )
    return ComparisonReport(
        formula=FORMULA,
        a=result.a,
        b=result.b,
        c=result.c,
        iterations=result.iterations,
        diff_mode=result.diff_mode,
        rows=rows,
    )


def format_json_report(result: ComparisonResult) -> str:
    """Serialize a result as JSON (camelCase keys)."""
    return to_report_model(result).model_dump_json(by_alias=True, indent=2)
