# logic/truth_table.py
# This file is part of Tabula - A Propositional Truth Table Generator
#
# Assignment enumeration and truth table construction

"""Truth table construction for parsed formulas.

For a formula with ``n`` distinct variables, all ``2**n`` assignments are
enumerated in conventional truth table order: row ``r`` gives the variable at
position ``i`` the value of bit ``n - 1 - i`` of ``r``, so the first variable
varies slowest and the last one alternates on every row.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Mapping, Optional, Sequence

from formula.ast_nodes import Expr
from utils.logger import get_logger
from .collector import unique_variables
from .evaluator import evaluate
from .exceptions import TooManyVariables

DEFAULT_MAX_VARIABLES = 16


@dataclass(frozen=True)
class TruthTableRow:
    """One assignment and the formula value under it."""

    assignment: Dict[str, bool]
    result: bool


@dataclass(frozen=True)
class TruthTable:
    """Complete truth table of a formula.

    Attributes:
        formula: The evaluated formula
        variables: Distinct variables in first-occurrence order (column order)
        rows: One row per assignment, in ascending row index
    """

    formula: Expr
    variables: List[str]
    rows: List[TruthTableRow] = field(default_factory=list)

    @property
    def results(self) -> List[bool]:
        return [row.result for row in self.rows]

    def is_tautology(self) -> bool:
        return all(self.results)

    def is_contradiction(self) -> bool:
        return not any(self.results)

    def is_satisfiable(self) -> bool:
        return any(self.results)

    def classification(self) -> str:
        """Name the table as a tautology, contradiction or contingency."""
        if self.is_tautology():
            return "tautology"
        if self.is_contradiction():
            return "contradiction"
        return "contingent"


def enumerate_assignments(variables: Sequence[str]) -> Iterator[Dict[str, bool]]:
    """Yield every assignment of ``variables`` in truth table order.

    Args:
        variables: Distinct variable names; the first one varies slowest

    Yields:
        A fresh dict per row mapping each variable to its value
    """
    count = len(variables)
    max_index = count - 1
    for row in range(2**count):
        yield {
            name: bool(row & (1 << (max_index - position)))
            for position, name in enumerate(variables)
        }


def build_truth_table(
    formula: Expr, max_variables: int = DEFAULT_MAX_VARIABLES
) -> TruthTable:
    """Evaluate ``formula`` under every assignment of its variables.

    Args:
        formula: Root of a parsed formula
        max_variables: Largest number of distinct variables to enumerate

    Returns:
        TruthTable with ``2**n`` rows

    Raises:
        TooManyVariables: The formula has more than ``max_variables`` variables
    """
    logger = get_logger()

    variables = unique_variables(formula)
    if len(variables) > max_variables:
        raise TooManyVariables(len(variables), max_variables)

    logger.debug(f"Enumerating {2 ** len(variables)} rows over {variables}")

    rows = [
        TruthTableRow(assignment, evaluate(formula, assignment))
        for assignment in enumerate_assignments(variables)
    ]
    return TruthTable(formula, variables, rows)


def evaluate_once(
    formula: Expr, assignment: Optional[Mapping[str, bool]] = None
) -> bool:
    """Evaluate ``formula`` a single time without enumeration.

    With no assignment the formula is evaluated against an empty one, which
    only succeeds for formulas built from constants.

    Raises:
        UnboundVariable: The formula references a variable not in ``assignment``
    """
    return evaluate(formula, dict(assignment or {}))
