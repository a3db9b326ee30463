# formula/grammar.py
# This file is part of Tabula - A Propositional Truth Table Generator
#
# Recursive-descent parser over raw normalized formula text

"""Recursive-descent parser for normalized propositional formulas.

The parser works directly on characters of the normalized text, without a
token stream. Each recursion level receives a ``(start, end)`` window into
the original string and:

1. validates the parenthesis balance of the window,
2. trims surrounding whitespace,
3. strips one redundant enclosing group when the whole window is wrapped,
4. splits at every top-level operator of the weakest-binding family
   (equality, then disjunction/xor/implication, then conjunction) present,
5. falls back to a top-level negation, and finally
6. resolves the remaining text as a constant or variable leaf.

Operators nested inside a parenthesized group are never chosen as a split
point at an outer level. The operands of one family are folded from the
right, so chains associate to the right: ``A → B → C`` reads as
``A → (B → C)``.
"""

from typing import List, Optional, Tuple

from .ast_nodes import Constant, Expr, Variable
from .balance import check_balance
from .exceptions import BalanceError, FormulaTooDeep, MalformedFormula, ParseError
from .glyphs import (
    BINARY_FAMILIES,
    CLOSE_GROUP,
    FALSE_GLYPH,
    NOT_GLYPH,
    OPEN_GROUP,
    OPERATORS,
    QUOTE,
    RESERVED_GLYPHS,
    TRUE_GLYPH,
)
from utils.logger import get_logger

_LEAF_FORBIDDEN = RESERVED_GLYPHS | {OPEN_GROUP, CLOSE_GROUP, QUOTE}


class _FormulaParser:
    """Character-level parser building an AST from normalized text.

    A parser instance holds the text of the formula currently being parsed;
    create a fresh instance per formula.
    """

    def __init__(self):
        self.logger = get_logger()
        self._text = ""

    def parse(self, text: str) -> Expr:
        """Parse normalized formula text into an AST.

        Args:
            text: Formula whose keywords are already replaced by glyphs

        Returns:
            Root AST node of the formula

        Raises:
            ParseError: Formula is unbalanced or malformed
            FormulaTooDeep: Nesting exhausts the interpreter stack
        """
        self._text = text
        try:
            return self._node(0, len(text))
        except RecursionError as exc:
            raise FormulaTooDeep(
                f"Formula nesting is too deep to parse ({len(text)} characters)"
            ) from exc

    def _node(self, start: int, end: int) -> Expr:
        text = self._text
        check_balance(text, start, end)

        lo, hi = self._trim(start, end)
        if lo == hi:
            raise MalformedFormula("Empty operand", text[start:end])

        if text[lo] == OPEN_GROUP and text[hi - 1] == CLOSE_GROUP:
            grouped = self._strip_group(lo, hi)
            if grouped is not None:
                return grouped

        positions = self._top_level_positions(lo, hi)

        for family in BINARY_FAMILIES:
            splits = [index for index in positions if text[index] in family]
            if splits:
                return self._split_chain(splits, lo, hi)

        for index in positions:
            if text[index] == NOT_GLYPH:
                if index != lo:
                    raise MalformedFormula(
                        f"Unexpected text before '{NOT_GLYPH}'", text[lo:hi]
                    )
                operand = self._operand(NOT_GLYPH, "operand", index + 1, hi, (lo, hi))
                return OPERATORS[NOT_GLYPH].node(operand)

        return self._leaf(lo, hi)

    def _trim(self, start: int, end: int) -> Tuple[int, int]:
        text = self._text
        while start < end and text[start].isspace():
            start += 1
        while end > start and text[end - 1].isspace():
            end -= 1
        return start, end

    def _strip_group(self, lo: int, hi: int) -> Optional[Expr]:
        """Parse the window without its outer parentheses, if they pair up.

        Returns None when the outer characters are not one enclosing pair,
        e.g. ``(A) ∧ (B)``, so the caller continues with the full window.
        """
        try:
            check_balance(self._text, lo + 1, hi - 1)
        except BalanceError:
            self.logger.debug(f"Keeping outer parentheses at positions {lo}, {hi - 1}")
            return None
        return self._node(lo + 1, hi - 1)

    def _top_level_positions(self, lo: int, hi: int) -> List[int]:
        """Indices of the window that are not enclosed by any parenthesis."""
        text = self._text
        positions = []
        depth = 0
        for index in range(lo, hi):
            char = text[index]
            if char == OPEN_GROUP:
                depth += 1
            elif char == CLOSE_GROUP:
                depth -= 1
            elif depth == 0:
                positions.append(index)
        return positions

    def _split_chain(self, splits: List[int], lo: int, hi: int) -> Expr:
        """Build the right-nested chain of one operator family.

        ``splits`` holds the top-level positions of the family's glyphs in
        ``(lo, hi)``. Operands are parsed left to right at this level, so a
        flat chain such as ``A ∧ B ∧ ... ∧ Z`` costs one recursion level,
        not one per operator. ``A ∧ B ∧ C`` yields ``A ∧ (B ∧ C)``.
        """
        text = self._text
        starts = [lo] + [index + 1 for index in splits]
        self.logger.debug(
            f"Splitting {OPERATORS[text[splits[0]]].node.kind.name} chain "
            f"at positions {splits}"
        )

        lefts = []
        for start, index in zip(starts, splits):
            lefts.append(
                self._operand(text[index], "left operand", start, index, (start, hi))
            )
        last = splits[-1]
        tree = self._operand(
            text[last], "right operand", last + 1, hi, (starts[-2], hi)
        )

        for index, left in zip(reversed(splits), reversed(lefts)):
            tree = OPERATORS[text[index]].node(left, tree)
        return tree

    def _operand(
        self, glyph: str, role: str, start: int, end: int, context: Tuple[int, int]
    ) -> Expr:
        """Parse one operand of an operator, naming the operator on failure.

        Errors already attributed to an inner operator propagate unchanged.
        """
        try:
            return self._node(start, end)
        except MalformedFormula as exc:
            if exc.operator is not None:
                raise
            failure = exc
        except ParseError as exc:
            failure = exc

        if self._text[start:end].strip():
            reason = f"'{glyph}' has an invalid {role} ({failure})"
        else:
            reason = f"'{glyph}' is missing its {role}"
        raise MalformedFormula(
            reason, self._text[context[0] : context[1]], operator=glyph
        ) from failure

    def _leaf(self, lo: int, hi: int) -> Expr:
        leaf = self._text[lo:hi]

        if len(leaf) >= 2 and leaf[0] == QUOTE and leaf[-1] == QUOTE:
            name = leaf[1:-1]
            if not name.strip():
                raise MalformedFormula("Empty quoted name", leaf)
            if QUOTE in name:
                raise MalformedFormula("Stray quote inside quoted name", leaf)
            return Variable(leaf)

        if leaf == TRUE_GLYPH:
            return Constant(True)
        if leaf == FALSE_GLYPH:
            return Constant(False)

        if any(char in _LEAF_FORBIDDEN for char in leaf):
            raise MalformedFormula("Unexpected symbol inside operand", leaf)

        if any(char.isspace() for char in leaf):
            raise MalformedFormula("Unexpected whitespace inside operand", leaf)

        return Variable(leaf)
