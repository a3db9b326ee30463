# logic/collector.py
# This file is part of Tabula - A Propositional Truth Table Generator
#
# Free variable collection over formula ASTs

from typing import List

from formula.ast_nodes import BinaryOp, Constant, Expr, Not, Variable
from formula.exceptions import FormulaTooDeep


class VariableCollector:
    """Visitor gathering variable names in pre-order.

    Names are appended each time a Variable node is visited, so repeated
    variables appear repeatedly.
    """

    def __init__(self):
        self.names: List[str] = []

    def visit_constant(self, n: Constant) -> None:
        pass

    def visit_variable(self, n: Variable) -> None:
        self.names.append(n.name)

    def visit_not(self, n: Not) -> None:
        n.operand.accept(self)

    def _visit_binary(self, n: BinaryOp) -> None:
        n.left.accept(self)
        n.right.accept(self)

    visit_and = _visit_binary
    visit_or = _visit_binary
    visit_xor = _visit_binary
    visit_implies = _visit_binary
    visit_equals = _visit_binary
    visit_not_equals = _visit_binary


def collect_variables(formula: Expr) -> List[str]:
    """Return every variable occurrence of ``formula`` in pre-order.

    Duplicates are kept; use unique_variables to size an enumeration.
    """
    collector = VariableCollector()
    try:
        formula.accept(collector)
    except RecursionError as exc:
        raise FormulaTooDeep("Formula nesting is too deep to traverse") from exc
    return collector.names


def unique_variables(formula: Expr) -> List[str]:
    """Return the distinct variables of ``formula`` in first-occurrence order."""
    return list(dict.fromkeys(collect_variables(formula)))
