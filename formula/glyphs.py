# formula/glyphs.py
# This file is part of Tabula - A Propositional Truth Table Generator
#
# Reserved glyph alphabet and operator binding strengths

"""Reserved glyphs of normalized formula text.

Normalized text spells every operator and constant as a single reserved
character. This module fixes that alphabet once at import time: the keyword
to glyph mapping used by the lexer, and the operator table (arity, binding
strength, node constructor) consumed by the parser. All tables are read-only.

Binding strength (higher is split first, so it ends up outermost):
    8: =, ≠      equality family
    4: ∨, ⊕, →   disjunction family
    2: ∧         conjunction
    0: ¬         negation (unary, scanned last)
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Mapping, Tuple

from .ast_nodes import And, Constant, Equals, Expr, Implies, Not, NotEquals, Or, Xor

OPEN_GROUP = "("
CLOSE_GROUP = ")"
QUOTE = "`"

TRUE_GLYPH = Constant.TRUE_GLYPH
FALSE_GLYPH = Constant.FALSE_GLYPH
NOT_GLYPH = Not.glyph

EQUALITY_STRENGTH = 0b1000
DISJUNCTION_STRENGTH = 0b0100
CONJUNCTION_STRENGTH = 0b0010
NEGATION_STRENGTH = 0


@dataclass(frozen=True)
class OperatorSpec:
    """Parsing properties of one operator glyph.

    Attributes:
        glyph: Reserved character standing for the operator
        arity: Number of operands (1 or 2)
        strength: Binding strength; higher values are split first
        node: Constructor building the AST node from its operands
    """

    glyph: str
    arity: int
    strength: int
    node: Callable[..., Expr]


def _spec(node, arity: int, strength: int) -> Tuple[str, OperatorSpec]:
    return node.glyph, OperatorSpec(node.glyph, arity, strength, node)


OPERATORS: Mapping[str, OperatorSpec] = MappingProxyType(
    dict(
        [
            _spec(Equals, 2, EQUALITY_STRENGTH),
            _spec(NotEquals, 2, EQUALITY_STRENGTH),
            _spec(Or, 2, DISJUNCTION_STRENGTH),
            _spec(Xor, 2, DISJUNCTION_STRENGTH),
            _spec(Implies, 2, DISJUNCTION_STRENGTH),
            _spec(And, 2, CONJUNCTION_STRENGTH),
            _spec(Not, 1, NEGATION_STRENGTH),
        ]
    )
)

KEYWORD_GLYPHS: Mapping[str, str] = MappingProxyType(
    {
        "and": And.glyph,
        "not": Not.glyph,
        "or": Or.glyph,
        "xor": Xor.glyph,
        "imply": Implies.glyph,
        "implies": Implies.glyph,
        "equals": Equals.glyph,
        "notequals": NotEquals.glyph,
        "true": TRUE_GLYPH,
        "false": FALSE_GLYPH,
    }
)

RESERVED_GLYPHS = frozenset(OPERATORS) | {TRUE_GLYPH, FALSE_GLYPH}


def _binary_families() -> Tuple[frozenset, ...]:
    """Group binary glyphs by strength, strongest (outermost) family first."""
    strengths = sorted(
        {spec.strength for spec in OPERATORS.values() if spec.arity == 2},
        reverse=True,
    )
    return tuple(
        frozenset(
            glyph
            for glyph, spec in OPERATORS.items()
            if spec.arity == 2 and spec.strength == strength
        )
        for strength in strengths
    )


BINARY_FAMILIES = _binary_families()
