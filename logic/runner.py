# logic/runner.py

"""
FormulaRunner: glue code that reads formulas line by line, normalizes and
parses each one, evaluates it over every assignment of its variables (or
once, in single mode) and prints the result. A line that fails is reported
and skipped; the run always continues with the next line.
"""

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, TextIO

from formula import normalize, parse
from formula.exceptions import TabulaError

from utils.logger import get_logger
from utils.table_printer import print_table, render_result

from .truth_table import DEFAULT_MAX_VARIABLES, build_truth_table, evaluate_once


class FormulaFileError(TabulaError):
    """Raised when a formula file cannot be read."""


def read_formula_file(path: Path) -> List[str]:
    """
    Read a formula file into its lines, raising FormulaFileError on failure.
    """
    try:
        return path.read_text(encoding="utf-8").splitlines()
    except FileNotFoundError:
        raise FormulaFileError(f"Formula file not found: {path}")
    except (OSError, UnicodeDecodeError) as e:
        raise FormulaFileError(f"Could not read formula file {path}: {e}")


@dataclass(frozen=True)
class RunnerConfig:
    """
    Options of a run, collected from the command line.

    Attributes:
        single: Evaluate each formula once instead of enumerating a table.
        color: Colorize T/F values with ANSI escapes.
        max_variables: Largest variable count a truth table may enumerate.
    """
    single: bool = False
    color: bool = True
    max_variables: int = DEFAULT_MAX_VARIABLES


@dataclass(frozen=True)
class RunSummary:
    processed: int
    failed: int

    @property
    def succeeded(self) -> int:
        return self.processed - self.failed


class FormulaRunner:
    """
    Drives normalization, parsing, evaluation and printing for a stream of
    formula lines. Blank lines and lines starting with '#' are skipped.
    """

    def __init__(self, config: Optional[RunnerConfig] = None,
                 stream: Optional[TextIO] = None):
        self.config = config or RunnerConfig()
        self._stream = stream
        self._logger = get_logger()

    @property
    def stream(self) -> TextIO:
        return self._stream or sys.stdout

    def process_line(self, line_no: int, raw: str) -> None:
        """
        Process one formula line to completion. Raises TabulaError (or a
        subclass) when the line cannot be parsed or evaluated.
        """
        text = raw.strip()
        normalized = normalize(text)
        self._logger.formula_start(line_no, text, normalized)

        tree = parse(normalized)

        if self.config.single:
            value = evaluate_once(tree)
            print(render_result(normalized, value, self.config.color),
                  file=self.stream)
            return

        table = build_truth_table(tree, self.config.max_variables)
        self._logger.table_built(
            len(table.variables), len(table.rows), table.classification()
        )
        print_table(table, normalized, self.stream, self.config.color)

    def run(self, lines: Iterable[str]) -> RunSummary:
        """
        Process every formula line, reporting failures and continuing.
        Returns how many formulas were processed and how many failed.
        """
        processed = 0
        failed = 0

        for line_no, raw in enumerate(lines, start=1):
            text = raw.strip()
            if not text or text.startswith("#"):
                continue

            processed += 1
            try:
                self.process_line(line_no, text)
            except TabulaError as e:
                failed += 1
                self._logger.line_failed(line_no, text, str(e))

        self._logger.run_summary(processed, failed)
        return RunSummary(processed, failed)
