# utils/table_printer.py
# This file is part of Tabula - A Propositional Truth Table Generator
#
# Colorized rendering of truth tables and single results

"""Plain-text rendering of truth tables.

A table has one column per variable followed by a column headed with the
formula text; values are printed as ``T``/``F``, colored green/red through
colorama unless color is disabled::

    | A | B | A ∧ B |
    -----------------
    | F | F |   F   |
    | F | T |   F   |
    | T | F |   F   |
    | T | T |   T   |
    -----------------
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, List, Optional, TextIO

from colorama import Fore, Style

from formula.exceptions import FormulaTooDeep

if TYPE_CHECKING:
    from logic.truth_table import TruthTable


def _truth_cell(value: bool, width: int, color: bool) -> str:
    letter = "T" if value else "F"
    cell = letter.center(width)
    if color:
        prefix = Fore.GREEN if value else Fore.RED
        cell = cell.replace(letter, f"{prefix}{letter}{Style.RESET_ALL}", 1)
    return cell


def _row(cells: List[str]) -> str:
    return "| " + " | ".join(cells) + " |"


def render_table(
    table: TruthTable, formula_text: Optional[str] = None, color: bool = True
) -> str:
    """Render ``table`` as text.

    Args:
        table: Truth table to render
        formula_text: Header of the result column, defaults to ``str(formula)``
        color: Wrap T/F values in ANSI color codes

    Returns:
        The table, lines joined with newlines (no trailing newline)

    Raises:
        FormulaTooDeep: No ``formula_text`` given and the formula is nested
            too deeply to stringify
    """
    if formula_text is not None:
        title = formula_text
    else:
        try:
            title = str(table.formula)
        except RecursionError as exc:
            raise FormulaTooDeep("Formula nesting is too deep to render") from exc
    headers = [*table.variables, title]
    widths = [max(1, len(header)) for header in headers]

    header_line = _row([h.center(w) for h, w in zip(headers, widths)])
    separator = "-" * len(header_line)

    lines = [header_line, separator]
    for row in table.rows:
        values = [row.assignment[name] for name in table.variables]
        values.append(row.result)
        lines.append(
            _row([_truth_cell(v, w, color) for v, w in zip(values, widths)])
        )
    lines.append(separator)
    return "\n".join(lines)


def render_result(formula_text: str, value: bool, color: bool = True) -> str:
    """Render the single-evaluation variant: ``<formula> => T``."""
    return f"{formula_text} => {_truth_cell(value, 1, color)}"


def print_table(
    table: TruthTable,
    formula_text: Optional[str] = None,
    stream: Optional[TextIO] = None,
    color: bool = True,
) -> None:
    """Write the rendered table to ``stream`` (standard output by default)."""
    print(render_table(table, formula_text, color), file=stream or sys.stdout)
