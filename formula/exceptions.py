# formula/exceptions.py
# This file is part of Tabula - A Propositional Truth Table Generator
#
# Custom exceptions for formula parsing and evaluation

"""Domain-specific exceptions for propositional formula processing.

This module defines the exceptions raised while parsing normalized formula
text. All of them derive from TabulaError so the line runner can report any
failure for a single input line and move on to the next one.
"""

from typing import Optional


class TabulaError(RuntimeError):
    """Base class for every error raised while processing a formula line."""

    pass


class ParseError(TabulaError):
    """Exception raised when formula parsing fails due to syntax errors.

    Indicates that the normalized input does not conform to the formula
    grammar or contains other structural errors that prevent building an
    abstract syntax tree.
    """

    pass


class BalanceError(ParseError):
    """Parenthesis nesting of a formula fragment is broken.

    Attributes:
        position: Index in the source text where the imbalance was detected
    """

    def __init__(self, message: str, position: int):
        super().__init__(message)
        self.position = position


class UnmatchedOpen(BalanceError):
    """An opening parenthesis is never closed."""

    pass


class UnmatchedClose(BalanceError):
    """A closing parenthesis appears without a matching opening one."""

    pass


class MalformedFormula(ParseError):
    """Formula text cannot be resolved into a valid node.

    Raised for empty operands, operators missing an operand and leaf text that
    is neither a constant, a variable name nor a quoted literal.

    Attributes:
        reason: Short human-readable description of the problem
        text: The offending fragment of formula text
        operator: Glyph of the operator whose operand failed, if any
    """

    def __init__(self, reason: str, text: str, operator: Optional[str] = None):
        super().__init__(f"{reason}: '{text}'")
        self.reason = reason
        self.text = text
        self.operator = operator


class FormulaTooDeep(TabulaError):
    """Formula nesting exceeds the interpreter recursion limit."""

    pass
