#!/usr/bin/env python3
# run_tabula.py
# This file is part of Tabula - A Propositional Truth Table Generator
#
# Command-line interface for truth table generation with configurable logging levels

import sys
import argparse
from pathlib import Path
from typing import Iterable, List, Optional

from colorama import just_fix_windows_console

from logic.runner import (
    FormulaFileError,
    FormulaRunner,
    RunnerConfig,
    read_formula_file,
)
from logic.truth_table import DEFAULT_MAX_VARIABLES
from utils.logger import configure_logging, get_logger


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Tabula propositional truth table generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  echo "A and B" | python run_tabula.py
  python run_tabula.py -e "A imply B" -e "not (A xor B)"
  python run_tabula.py -f formulas.txt --no-color
  python run_tabula.py --single -e "true or false"

Formula syntax:
  Operators (case-insensitive): not, and, or, xor, imply/implies,
  equals, notequals. Constants: true, false. Parentheses group.
  Quote names containing spaces with backticks: `light on` and door
        """,
    )

    parser.add_argument(
        "-f", "--file", type=Path, help="Read formulas from file (one per line)"
    )

    parser.add_argument(
        "-e",
        "--expr",
        action="append",
        default=[],
        metavar="FORMULA",
        help="Formula to evaluate (repeatable, skips reading stdin)",
    )

    parser.add_argument(
        "--single",
        action="store_true",
        help="Evaluate each formula once instead of printing a truth table",
    )

    parser.add_argument(
        "--no-color", action="store_true", help="Disable colored T/F values"
    )

    parser.add_argument(
        "--max-variables",
        type=int,
        default=DEFAULT_MAX_VARIABLES,
        metavar="N",
        help=f"Refuse formulas with more than N variables (default: {DEFAULT_MAX_VARIABLES})",
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output (overrides --verbose)"
    )

    return parser


def collect_input(args: argparse.Namespace) -> Iterable[str]:
    """Pick the formula source: command line, file, or standard input.

    Raises:
        FormulaFileError: The formula file cannot be read
    """
    if args.expr:
        return args.expr
    if args.file is not None:
        return read_formula_file(args.file)
    return sys.stdin


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the truth table generator.

    Returns:
        Exit code (0 when every formula succeeded, non-zero otherwise)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose, debug=args.debug)
    logger = get_logger()

    if args.max_variables < 0:
        parser.error("--max-variables must not be negative")

    if not args.no_color:
        just_fix_windows_console()

    config = RunnerConfig(
        single=args.single,
        color=not args.no_color,
        max_variables=args.max_variables,
    )

    try:
        lines = collect_input(args)
        summary = FormulaRunner(config).run(lines)
        return 1 if summary.failed else 0

    except FormulaFileError as e:
        logger.error(f"Formula file error: {e}")
        return 3

    except KeyboardInterrupt:
        logger.error("Interrupted by user")
        return 4


if __name__ == "__main__":
    sys.exit(main())
