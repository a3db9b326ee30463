# formula/__init__.py
# This file is part of Tabula - A Propositional Truth Table Generator
#
# Formula normalization and parsing components

"""Propositional formula normalization and parsing.

This package turns a raw formula line into an abstract syntax tree. Raw text
first goes through keyword normalization, which rewrites word operators into
reserved glyphs, and is then parsed by a character-level recursive-descent
parser that splits the text at its weakest-binding top-level operator.

Core Functions:
    normalize: Rewrites keywords (and, or, not, ...) into glyphs
    parse: Converts normalized formula text into an AST
    normalize_and_parse: Complete pipeline from a raw line to an AST

Supported Logic:
    - Constants true (⊤) and false (⊥)
    - Negation (¬), conjunction (∧)
    - Disjunction (∨), exclusive or (⊕), implication (→)
    - Equivalence (=) and non-equivalence (≠)
    - Parenthetical grouping and backtick-quoted variable names

Example:
    >>> from formula import normalize_and_parse
    >>> ast = normalize_and_parse("A imply (B or not C)")
    >>> str(ast)
    '(A → (B ∨ ¬C))'
"""

from .exceptions import (
    FormulaTooDeep,
    MalformedFormula,
    ParseError,
    TabulaError,
    UnmatchedClose,
    UnmatchedOpen,
)
from .grammar import _FormulaParser
from .lexer import normalize
from utils.logger import get_logger


def parse(source: str):
    """Parse normalized formula text into Abstract Syntax Tree representation.

    Uses a fresh parser instance for each invocation so no state leaks
    between formulas.

    Args:
        source: Formula text whose keywords are already replaced by glyphs

    Returns:
        Root AST node representing the parsed formula structure

    Raises:
        ParseError: Formula syntax is malformed
        FormulaTooDeep: Formula nesting exhausts the interpreter stack

    Example:
        >>> parse("¬A ∧ B")
        And(left=Not(operand=Variable(name='A')), right=Variable(name='B'))
    """
    logger = get_logger()
    logger.debug(f"Parsing formula: {source}")

    parser = _FormulaParser()

    try:
        result = parser.parse(source)
        logger.debug(
            f"Formula parsed successfully into AST with type: {type(result).__name__}"
        )
        return result

    except (ParseError, FormulaTooDeep):
        logger.debug("ParseError encountered during formula parsing")
        raise

    except Exception as exc:
        logger.debug(f"Unexpected parsing error: {type(exc).__name__}: {exc}")
        raise ParseError(str(exc)) from exc


def normalize_and_parse(source: str):
    """Normalize a raw formula line and parse it.

    Args:
        source: Raw formula line using keyword operators

    Returns:
        Root AST node of the formula

    Raises:
        ParseError: Formula parsing fails
    """
    return parse(normalize(source))


__all__ = [
    "parse",
    "normalize",
    "normalize_and_parse",
    "TabulaError",
    "ParseError",
    "MalformedFormula",
    "UnmatchedOpen",
    "UnmatchedClose",
    "FormulaTooDeep",
]

__version__ = "1.0.0"
__description__ = "Propositional formula normalization and parsing components"
