"""
Rendering for prefixer expression trees.

``render`` produces the fully-parenthesized prefix form, e.g.
``1 + 2 * 3`` -> ``(+ 1 (* 2 3))``. The tree already encodes precedence
so rendering is purely structural.

``read_prefix`` reads that form back into a tree, which makes the rendered
text a stable normal form: ``read_prefix(render(tree)) == tree``.

Author: xwest
"""

from typing import List

from rich.tree import Tree

from .lexer.lexer import Lexer
from .lexer.tokens import Token
from .parser.ast_nodes import Expression, Atom, Apply, ExpressionVisitor
from .parser.parser import parse, PREFIX_BINDING_POWER, INFIX_BINDING_POWER
from .parser.errors import (
    create_unexpected_eof_error, create_unmatched_paren_error,
    create_unexpected_prefix_error, create_unexpected_token_error
)


class PrefixRenderer(ExpressionVisitor):
    """Renders a tree as fully-parenthesized prefix notation."""

    def visit_atom(self, node: Atom) -> str:
        return node.token.lexeme

    def visit_apply(self, node: Apply) -> str:
        parts = [node.operator.lexeme]
        for operand in node.operands:
            parts.append(operand.accept(self))
        return "(" + " ".join(parts) + ")"


class TreeRenderer(ExpressionVisitor):
    """Builds a rich Tree for terminal display."""

    def visit_atom(self, node: Atom) -> Tree:
        return Tree(f"[cyan]{node.token.lexeme}[/cyan]")

    def visit_apply(self, node: Apply) -> Tree:
        kind = "unary" if node.is_unary else "binary"
        tree = Tree(f"[bold]{node.operator.lexeme}[/bold] [dim]{kind}[/dim]")
        for operand in node.operands:
            tree.children.append(operand.accept(self))
        return tree


def render(expression: Expression) -> str:
    """Render an expression tree to prefix notation."""
    return expression.accept(PrefixRenderer())


def render_tree(expression: Expression) -> Tree:
    """Build a rich Tree view of an expression tree."""
    return expression.accept(TreeRenderer())


def to_prefix(source: str, filename: str = "<string>") -> str:
    """Parse infix text and render it in prefix notation."""
    return render(parse(source, filename))


class PrefixReader:
    """
    Reader for the prefix notation produced by ``render``.

    Accepts an atom or ``(op operand...)`` where op is one of ``+ - * /``
    with two operands, or ``+``/``-`` with one.
    """

    def __init__(self, lexer: Lexer):
        self.lexer = lexer

    def read(self) -> Expression:
        expression = self._read_expression()

        leftover = self.lexer.pop_front()
        if leftover is not None:
            if leftover.is_right_paren:
                raise create_unmatched_paren_error(leftover.location, leftover)
            raise create_unexpected_token_error(leftover)

        return expression

    def _read_expression(self) -> Expression:
        token = self.lexer.pop_front()
        if token is None:
            raise create_unexpected_eof_error("an operand", self.lexer.end_location)

        if token.is_symbol:
            return Atom(token)
        if token.is_right_paren:
            raise create_unmatched_paren_error(token.location, token)
        if not token.is_left_paren:
            raise create_unexpected_prefix_error(token)

        return self._read_application(token)

    def _read_application(self, open_paren: Token) -> Expression:
        operator = self.lexer.pop_front()
        if operator is None:
            raise create_unexpected_eof_error("an operator", self.lexer.end_location)
        if operator.is_symbol:
            raise create_unexpected_token_error(operator)
        if operator.lexeme not in INFIX_BINDING_POWER:
            raise create_unexpected_prefix_error(operator)

        operands: List[Expression] = []
        while True:
            token = self.lexer.peek_front()
            if token is None:
                raise create_unmatched_paren_error(open_paren.location, open_paren)
            if token.is_right_paren:
                break
            if len(operands) == 2:
                raise create_unexpected_token_error(token)
            operands.append(self._read_expression())

        close_paren = self.lexer.pop_front()
        if not operands:
            raise create_unexpected_token_error(close_paren)
        if len(operands) == 1 and operator.lexeme not in PREFIX_BINDING_POWER:
            raise create_unexpected_prefix_error(operator)

        return Apply(operator, operands)


def read_prefix(text: str, filename: str = "<string>") -> Expression:
    """
    Read prefix notation back into an expression tree.

    Raises:
        ParseError: If the text is not well-formed prefix notation
    """
    return PrefixReader(Lexer(text, filename)).read()
