"""
Expression tree node definitions for prefixer.

The tree has exactly two node kinds:
- Atom: a leaf holding one symbol token
- Apply: an operator token applied to one (unary) or two (binary) operands

Both kinds are checked on construction, so a tree that exists always obeys
those shapes. Nodes compare structurally (token type, lexeme and shape;
source locations are ignored) and support the visitor pattern.

Author: xwest
"""

from abc import ABC, abstractmethod
from typing import Any, Iterator, List, Sequence, Tuple

from ..lexer.tokens import Token, TokenType


class ExpressionVisitor(ABC):
    """Visitor interface; one method per node kind."""

    @abstractmethod
    def visit_atom(self, node: 'Atom') -> Any:
        pass

    @abstractmethod
    def visit_apply(self, node: 'Apply') -> Any:
        pass


class Expression(ABC):
    """Base class for expression tree nodes."""

    __slots__ = ()

    @abstractmethod
    def accept(self, visitor: ExpressionVisitor) -> Any:
        """Accept a visitor (visitor pattern)."""

    @abstractmethod
    def children(self) -> List['Expression']:
        """Get all child nodes."""

    @abstractmethod
    def _key(self) -> Tuple:
        """Structural identity used for equality and hashing."""

    def __eq__(self, other) -> bool:
        if not isinstance(other, Expression):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        from ..render import render
        return render(self)


class Atom(Expression):
    """Leaf node wrapping a symbol token."""

    __slots__ = ("token",)

    def __init__(self, token: Token):
        if token.type is not TokenType.SYMBOL:
            raise TypeError(f"Atom requires a symbol token, got {token!r}")
        self.token = token

    @property
    def text(self) -> str:
        return self.token.lexeme

    def accept(self, visitor: ExpressionVisitor) -> Any:
        return visitor.visit_atom(self)

    def children(self) -> List[Expression]:
        return []

    def _key(self) -> Tuple:
        return ("atom", self.token.lexeme)

    def __repr__(self) -> str:
        return f"Atom({self.token.lexeme!r})"


class Apply(Expression):
    """Operator application; unary (one operand) or binary (two operands)."""

    __slots__ = ("operator", "operands")

    def __init__(self, operator: Token, operands: Sequence[Expression]):
        if operator.type is not TokenType.OPERATOR:
            raise TypeError(f"Apply requires an operator token, got {operator!r}")
        if len(operands) not in (1, 2):
            raise ValueError(f"Apply takes 1 or 2 operands, got {len(operands)}")
        self.operator = operator
        self.operands: Tuple[Expression, ...] = tuple(operands)

    @property
    def operator_text(self) -> str:
        return self.operator.lexeme

    @property
    def is_unary(self) -> bool:
        return len(self.operands) == 1

    @property
    def is_binary(self) -> bool:
        return len(self.operands) == 2

    def accept(self, visitor: ExpressionVisitor) -> Any:
        return visitor.visit_apply(self)

    def children(self) -> List[Expression]:
        return list(self.operands)

    def _key(self) -> Tuple:
        keys = []
        for operand in self.operands:
            keys.append(operand._key())
        return ("apply", self.operator.lexeme, tuple(keys))

    def __repr__(self) -> str:
        operands = ", ".join(repr(op) for op in self.operands)
        return f"Apply({self.operator.lexeme!r}, [{operands}])"


def walk(expression: Expression) -> Iterator[Expression]:
    """Yield every node of the tree in pre-order."""
    stack = [expression]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children()))


def depth(expression: Expression) -> int:
    """Nesting depth of the tree; a lone atom has depth 1."""
    deepest = 0
    for child in expression.children():
        deepest = max(deepest, depth(child))
    return 1 + deepest
