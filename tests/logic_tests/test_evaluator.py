# tests/logic_tests/test_evaluator.py
# This file is part of Tabula - A Propositional Truth Table Generator
#
# Test suite for formula evaluation

"""Test suite for formula evaluation.

Every connective is checked against Python's own boolean operators over all
operand values, and parsed formulas are compared with an independent
reference computed directly in Python.
"""

import itertools

import pytest
from formula import normalize_and_parse, parse
from formula.ast_nodes import (
    And,
    Constant,
    Equals,
    Implies,
    Not,
    NotEquals,
    Or,
    Variable,
    Xor,
)
from formula.exceptions import FormulaTooDeep
from logic.evaluator import evaluate
from logic.exceptions import EvaluationError, UnboundVariable

P, Q = Variable("P"), Variable("Q")

CONNECTIVES = [
    (And, lambda p, q: p and q),
    (Or, lambda p, q: p or q),
    (Xor, lambda p, q: p != q),
    (Implies, lambda p, q: (not p) or q),
    (Equals, lambda p, q: p == q),
    (NotEquals, lambda p, q: p != q),
]


class TestEvaluator:
    """Test cases for evaluate."""

    @pytest.mark.parametrize("node, reference", CONNECTIVES)
    def test_binary_connectives(self, node, reference):
        for p, q in itertools.product([False, True], repeat=2):
            assert evaluate(node(P, Q), {"P": p, "Q": q}) == reference(p, q)

    def test_negation(self):
        assert evaluate(Not(P), {"P": False}) is True
        assert evaluate(Not(P), {"P": True}) is False

    def test_constants_need_no_assignment(self):
        assert evaluate(Constant(True), {}) is True
        assert evaluate(Or(Constant(False), Not(Constant(True))), {}) is False

    def test_unbound_variable(self):
        with pytest.raises(UnboundVariable) as exc_info:
            evaluate(And(P, Q), {"P": True})
        assert exc_info.value.name == "Q"
        assert isinstance(exc_info.value, EvaluationError)

    def test_operands_are_not_short_circuited(self):
        # Left side already decides the result, the unbound right side still fails
        with pytest.raises(UnboundVariable):
            evaluate(And(Constant(False), Q), {})
        with pytest.raises(UnboundVariable):
            evaluate(Or(Constant(True), Q), {})

    REFERENCE_CASES = [
        ("A and B or not C", lambda a, b, c: (a and b) or not c),
        ("A imply B imply C", lambda a, b, c: (not a) or ((not b) or c)),
        ("(A xor B) equals C", lambda a, b, c: (a != b) == c),
        ("A notequals B and C", lambda a, b, c: a != (b and c)),
        ("not (A or B) imply C", lambda a, b, c: (a or b) or c),
        ("A and true or false", lambda a, b, c: a),
        ("A or B equals B or A", lambda a, b, c: True),
    ]

    @pytest.mark.parametrize("formula, reference", REFERENCE_CASES)
    def test_parsed_formulas_match_reference(self, formula, reference):
        ast = normalize_and_parse(formula)
        for a, b, c in itertools.product([False, True], repeat=3):
            assignment = {"A": a, "B": b, "C": c}
            assert evaluate(ast, assignment) == reference(a, b, c), assignment

    def test_extra_assignment_entries_are_ignored(self):
        assert evaluate(parse("A"), {"A": True, "Z": False}) is True

    def test_deep_tree_is_reported(self):
        tree = Variable("A")
        for _ in range(20000):
            tree = Not(tree)
        with pytest.raises(FormulaTooDeep):
            evaluate(tree, {"A": True})
