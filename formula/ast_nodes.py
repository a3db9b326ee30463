# formula/ast_nodes.py
# This file is part of Tabula - A Propositional Truth Table Generator
#
# Abstract Syntax Tree node classes for propositional formula representation

"""AST node classes for representing parsed propositional formulas.

This module defines immutable and hashable node classes used to construct tree
representations of propositional formulas. Each tree is built bottom-up by the
parser, owned by the line that produced it and never mutated afterwards.

Node Types:
    Constant: Boolean constants (⊤, ⊥)
    Variable: Free propositional variables
    Not: Unary negation
    And, Or, Xor, Implies, Equals, NotEquals: Binary connectives

All nodes support the visitor design pattern for traversal and evaluation, and
render back to normalized glyph text through ``str``.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
from typing import ClassVar, Protocol


class Visitor(Protocol):
    """Interface for AST visitors implementing the visitor design pattern.

    Concrete visitors must implement a visit method for every node type so
    that traversal over the tree is exhaustive.
    """

    def visit_constant(self, n: Constant): ...

    def visit_variable(self, n: Variable): ...

    def visit_not(self, n: Not): ...

    def visit_and(self, n: And): ...

    def visit_or(self, n: Or): ...

    def visit_xor(self, n: Xor): ...

    def visit_implies(self, n: Implies): ...

    def visit_equals(self, n: Equals): ...

    def visit_not_equals(self, n: NotEquals): ...


class BinaryKind(Enum):
    """Kinds of binary connectives a BinaryOp node can carry."""

    AND = auto()
    OR = auto()
    XOR = auto()
    IMPLIES = auto()
    EQUALS = auto()
    NOT_EQUALS = auto()


@dataclass(frozen=True, slots=True)
class Expr:
    """Base class for all AST nodes in propositional formulas.

    Provides the foundation for immutable expression trees with visitor
    pattern support. Concrete node types implement ``accept`` for visitor
    dispatch and ``__str__`` for rendering.
    """

    def accept(self, v: Visitor):
        """Dispatch to the appropriate visitor method.

        Args:
            v: Visitor instance to process this node

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError

    def __str__(self) -> str:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class Constant(Expr):
    """Boolean constant leaf.

    Attributes:
        value: The literal truth value
    """

    TRUE_GLYPH: ClassVar[str] = "⊤"
    FALSE_GLYPH: ClassVar[str] = "⊥"

    value: bool

    def accept(self, v: Visitor):
        return v.visit_constant(self)

    def __str__(self) -> str:
        return self.TRUE_GLYPH if self.value else self.FALSE_GLYPH


@dataclass(frozen=True, slots=True)
class Variable(Expr):
    """Free propositional variable leaf.

    The name is the trimmed leaf text taken verbatim from the formula,
    including the surrounding backticks of a quoted name.

    Attributes:
        name: Identifier of the variable
    """

    name: str

    def accept(self, v: Visitor):
        return v.visit_variable(self)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class Not(Expr):
    """Logical negation of a single operand.

    Attributes:
        operand: The expression being negated
    """

    glyph: ClassVar[str] = "¬"

    operand: Expr

    def accept(self, v: Visitor):
        return v.visit_not(self)

    def __str__(self) -> str:
        return f"{self.glyph}{self.operand}"


@dataclass(frozen=True, slots=True)
class BinaryOp(Expr):
    """Base class for connectives with two operands.

    Subclasses only pin down their ``kind`` and ``glyph``; the operands and
    the rendering are shared. Binary nodes always render parenthesized so the
    output re-parses to the same tree.

    Attributes:
        left: Left operand
        right: Right operand
    """

    kind: ClassVar[BinaryKind]
    glyph: ClassVar[str]

    left: Expr
    right: Expr

    def __str__(self) -> str:
        return f"({self.left} {self.glyph} {self.right})"


@dataclass(frozen=True, slots=True)
class And(BinaryOp):
    """Logical conjunction, true when both operands are true."""

    kind: ClassVar[BinaryKind] = BinaryKind.AND
    glyph: ClassVar[str] = "∧"

    def accept(self, v: Visitor):
        return v.visit_and(self)


@dataclass(frozen=True, slots=True)
class Or(BinaryOp):
    """Logical disjunction, true when at least one operand is true."""

    kind: ClassVar[BinaryKind] = BinaryKind.OR
    glyph: ClassVar[str] = "∨"

    def accept(self, v: Visitor):
        return v.visit_or(self)


@dataclass(frozen=True, slots=True)
class Xor(BinaryOp):
    """Exclusive disjunction, true when exactly one operand is true."""

    kind: ClassVar[BinaryKind] = BinaryKind.XOR
    glyph: ClassVar[str] = "⊕"

    def accept(self, v: Visitor):
        return v.visit_xor(self)


@dataclass(frozen=True, slots=True)
class Implies(BinaryOp):
    """Material implication, false only when left is true and right false."""

    kind: ClassVar[BinaryKind] = BinaryKind.IMPLIES
    glyph: ClassVar[str] = "→"

    def accept(self, v: Visitor):
        return v.visit_implies(self)


@dataclass(frozen=True, slots=True)
class Equals(BinaryOp):
    """Logical equivalence, true when both operands agree."""

    kind: ClassVar[BinaryKind] = BinaryKind.EQUALS
    glyph: ClassVar[str] = "="

    def accept(self, v: Visitor):
        return v.visit_equals(self)


@dataclass(frozen=True, slots=True)
class NotEquals(BinaryOp):
    """Logical non-equivalence, true when the operands differ."""

    kind: ClassVar[BinaryKind] = BinaryKind.NOT_EQUALS
    glyph: ClassVar[str] = "≠"

    def accept(self, v: Visitor):
        return v.visit_not_equals(self)
