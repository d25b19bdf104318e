"""Command line entry point for the precision comparison."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

import structlog

from badmoney.comparison import FORMULA, compare
from badmoney.config import DIFF_MODES, ComparisonConfig
from badmoney.report import format_json_report, format_markdown_report, format_table

logger = structlog.get_logger()


def build_parser() -> argparse.ArgumentParser:
    defaults = ComparisonConfig.from_env()
    parser = argparse.ArgumentParser(
        prog="badmoney",
        description=f"Compare float32, float64, Decimal and fixed-point Currency on {FORMULA}",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  badmoney
  badmoney --iterations 40 --diff-mode exact
  badmoney --a 0.10 --b 0.20 --c 0.30 --format json

Defaults can also be set with BADMONEY_A, BADMONEY_B, BADMONEY_C,
BADMONEY_ITERATIONS, BADMONEY_WIDTH and BADMONEY_DIFF_MODE.
        """,
    )
    parser.add_argument("--a", default=defaults.a, help=f"Starting value (default: {defaults.a})")
    parser.add_argument("--b", default=defaults.b, help=f"Squared value (default: {defaults.b})")
    parser.add_argument("--c", default=defaults.c, help=f"Added value (default: {defaults.c})")
    parser.add_argument(
        "--iterations",
        "-n",
        type=int,
        default=defaults.iterations,
        help=f"Number of iterations (default: {defaults.iterations})",
    )
    parser.add_argument(
        "--width",
        type=int,
        default=defaults.width,
        help=f"Table column width (default: {defaults.width})",
    )
    parser.add_argument(
        "--diff-mode",
        choices=DIFF_MODES,
        default=defaults.diff_mode,
        help="Compare displayed digits or exact binary values (default: display)",
    )
    parser.add_argument(
        "--format",
        choices=["table", "markdown", "json"],
        default="table",
        help="Output format (default: table)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser


def configure_logging(verbose: bool) -> None:
    log_level = logging.DEBUG if verbose else logging.WARNING
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the comparison and print it. Returns the process exit code."""
    configure_logging(verbose=False)
    try:
        parser = build_parser()
    except ValueError as e:
        logger.error("invalid_environment", error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    args = parser.parse_args(argv)
    if args.verbose:
        configure_logging(verbose=True)

    try:
        config = ComparisonConfig(
            a=args.a,
            b=args.b,
            c=args.c,
            iterations=args.iterations,
            width=args.width,
            diff_mode=args.diff_mode,
        )
    except ValueError as e:
        logger.error("invalid_configuration", error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    result = compare(config)

    if args.format == "json":
        print(format_json_report(result))
    elif args.format == "markdown":
        print(format_markdown_report(result), end="")
    else:
        print(format_table(result, width=config.width))
    return 0


if __name__ == "__main__":
    sys.exit(main())
