# tests/formula_tests/test_parse_errors.py
# This file is part of Tabula - A Propositional Truth Table Generator
#
# Test suite for parser error detection and reporting

"""Test suite for parser error detection and reporting.

Every malformed input must raise a ParseError subclass instead of producing a
partial tree, and the error must name what went wrong.
"""

import sys

import pytest
from formula import parse
from formula.exceptions import (
    FormulaTooDeep,
    MalformedFormula,
    ParseError,
    TabulaError,
    UnmatchedClose,
    UnmatchedOpen,
)
from utils.logger import get_logger


class TestParseErrors:
    """Test cases for malformed formulas."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    INVALID_FORMULAS = [
        # Empty input
        "",
        "   ",
        "()",
        # Imbalanced parentheses
        "(A",
        "A)",
        ")A(",
        "((A ∧ B)",
        # Missing operands
        "A ∧",
        "∨ B",
        "=",
        "¬",
        "A ∧ ()",
        "A → (B ∨ )",
        # Malformed leaves
        "A B",
        "(A)(B)",
        "A ¬B",
        "A⊤",
        "``",
        "`a`b`",
    ]

    @pytest.mark.parametrize("formula", INVALID_FORMULAS)
    def test_invalid_formulas_raise_parse_error(self, formula):
        self.logger.debug(f"Testing invalid formula: {formula!r}")
        with pytest.raises(ParseError):
            parse(formula)

    def test_unmatched_open(self):
        with pytest.raises(UnmatchedOpen):
            parse("(A ∧ B")

    def test_unmatched_close(self):
        with pytest.raises(UnmatchedClose):
            parse("A ∧ B)")

    def test_empty_formula_is_malformed(self):
        with pytest.raises(MalformedFormula) as exc_info:
            parse("  ")
        assert exc_info.value.reason == "Empty operand"

    def test_missing_left_operand_names_side_and_operator(self):
        with pytest.raises(MalformedFormula) as exc_info:
            parse(" ∧ B")
        assert exc_info.value.operator == "∧"
        assert "left operand" in exc_info.value.reason

    def test_missing_right_operand_names_side_and_operator(self):
        with pytest.raises(MalformedFormula) as exc_info:
            parse("A → ")
        assert exc_info.value.operator == "→"
        assert "right operand" in exc_info.value.reason

    def test_invalid_operand_keeps_inner_cause(self):
        with pytest.raises(MalformedFormula) as exc_info:
            parse("A ∧ B C")
        assert exc_info.value.operator == "∧"
        assert isinstance(exc_info.value.__cause__, MalformedFormula)
        assert exc_info.value.__cause__.text == "B C"

    def test_innermost_operator_is_reported(self):
        with pytest.raises(MalformedFormula) as exc_info:
            parse("A ∧ (B ∨ )")
        assert exc_info.value.operator == "∨"

    def test_missing_negation_operand(self):
        with pytest.raises(MalformedFormula) as exc_info:
            parse("A ∨ ¬")
        assert exc_info.value.operator == "¬"
        assert exc_info.value.reason == "'¬' is missing its operand"

    def test_interior_whitespace_in_leaf(self):
        with pytest.raises(MalformedFormula) as exc_info:
            parse("light on")
        assert exc_info.value.text == "light on"
        assert exc_info.value.reason == "Unexpected whitespace inside operand"

    def test_adjacent_groups_are_not_merged(self):
        with pytest.raises(MalformedFormula) as exc_info:
            parse("(A)(B)")
        assert exc_info.value.text == "(A)(B)"

    @pytest.mark.parametrize("formula", ["(A ∧ B)(C)", "(A) (B)", "A⊤ B"])
    def test_stray_symbol_reported_before_whitespace(self, formula):
        with pytest.raises(MalformedFormula) as exc_info:
            parse(formula)
        assert exc_info.value.reason == "Unexpected symbol inside operand"
        assert exc_info.value.text == formula

    def test_deep_nesting_is_reported_not_crashing(self):
        depth = sys.getrecursionlimit() * 2
        formula = "(" * depth + "A" + ")" * depth
        with pytest.raises(FormulaTooDeep):
            parse(formula)

    def test_all_errors_share_a_base_class(self):
        for error in (ParseError, MalformedFormula, FormulaTooDeep, UnmatchedOpen):
            assert issubclass(error, TabulaError)
