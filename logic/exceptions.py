# logic/exceptions.py
# This file is part of Tabula - A Propositional Truth Table Generator
#
# Exceptions raised while evaluating parsed formulas

from formula.exceptions import TabulaError


class EvaluationError(TabulaError):
    """Raised when a parsed formula cannot be evaluated."""

    pass


class UnboundVariable(EvaluationError):
    """An assignment has no value for a variable the formula references.

    Attributes:
        name: Name of the unbound variable
    """

    def __init__(self, name: str):
        super().__init__(f"Variable '{name}' does not have a value")
        self.name = name


class TooManyVariables(EvaluationError):
    """Enumerating the truth table would exceed the configured row budget.

    Attributes:
        count: Number of distinct variables in the formula
        limit: Largest variable count allowed
    """

    def __init__(self, count: int, limit: int):
        super().__init__(
            f"Formula has {count} variables, truth tables are limited to {limit} "
            f"({2 ** limit} rows)"
        )
        self.count = count
        self.limit = limit
