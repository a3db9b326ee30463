# logic/evaluator.py
# This file is part of Tabula - A Propositional Truth Table Generator
#
# Structural evaluation of formula ASTs under a variable assignment

"""Evaluate a formula AST for one variable assignment.

Evaluation is a plain recursive walk over the tree implemented as a visitor.
Every call re-walks the subtree; formulas are bounded by one input line so no
memoization is done.
"""

from typing import Mapping

from formula.ast_nodes import (
    And,
    Constant,
    Equals,
    Expr,
    Implies,
    Not,
    NotEquals,
    Or,
    Variable,
    Xor,
)
from formula.exceptions import FormulaTooDeep
from .exceptions import UnboundVariable


class Evaluator:
    """Visitor computing the truth value of a formula.

    Attributes:
        assignment: Truth value of every variable the formula references
    """

    def __init__(self, assignment: Mapping[str, bool]):
        self.assignment = assignment

    def visit_constant(self, n: Constant) -> bool:
        return n.value

    def visit_variable(self, n: Variable) -> bool:
        try:
            return self.assignment[n.name]
        except KeyError:
            raise UnboundVariable(n.name) from None

    def visit_not(self, n: Not) -> bool:
        return not n.operand.accept(self)

    # Both operands are always evaluated, no short-circuit.
    def visit_and(self, n: And) -> bool:
        left = n.left.accept(self)
        right = n.right.accept(self)
        return left and right

    def visit_or(self, n: Or) -> bool:
        left = n.left.accept(self)
        right = n.right.accept(self)
        return left or right

    def visit_xor(self, n: Xor) -> bool:
        return n.left.accept(self) != n.right.accept(self)

    def visit_implies(self, n: Implies) -> bool:
        left = n.left.accept(self)
        right = n.right.accept(self)
        return not left or right

    def visit_equals(self, n: Equals) -> bool:
        return n.left.accept(self) == n.right.accept(self)

    def visit_not_equals(self, n: NotEquals) -> bool:
        return n.left.accept(self) != n.right.accept(self)


def evaluate(formula: Expr, assignment: Mapping[str, bool]) -> bool:
    """Evaluate ``formula`` with the given variable values.

    Args:
        formula: Root of a parsed formula
        assignment: Mapping from variable name to truth value

    Returns:
        Truth value of the formula

    Raises:
        UnboundVariable: A referenced variable is missing from ``assignment``
        FormulaTooDeep: The tree is too deep to walk recursively
    """
    try:
        return formula.accept(Evaluator(assignment))
    except RecursionError as exc:
        raise FormulaTooDeep("Formula nesting is too deep to evaluate") from exc
