"""
Prefixer Pratt Parser Implementation

Implements a top-down operator precedence (Pratt) parser for infix
arithmetic. Each operator has a prefix binding power (nud) and/or a pair of
infix binding powers (led); parentheses are handled structurally.

Author: xwest
"""

import logging
from enum import IntEnum
from typing import Dict, Optional, Tuple

from ..lexer.lexer import Lexer
from ..lexer.tokens import Token
from .ast_nodes import Expression, Atom, Apply
from .errors import (
    create_unexpected_eof_error, create_unmatched_paren_error,
    create_unexpected_prefix_error, create_unexpected_token_error
)

logger = logging.getLogger(__name__)


class BindingPower(IntEnum):
    """Binding power levels for Pratt parsing."""
    NONE = 0
    SUM = 10            # +, -
    PRODUCT = 20        # *, /
    PREFIX = 30         # unary +, -


# nud: right binding power of an operator in leading position
PREFIX_BINDING_POWER: Dict[str, int] = {
    "+": BindingPower.PREFIX,
    "-": BindingPower.PREFIX,
}

# led: (left, right) binding power of an operator between two operands.
# Equal left and right powers make the operator left-associative, since
# a right operand stops at the next operator of the same level.
INFIX_BINDING_POWER: Dict[str, Tuple[int, int]] = {
    "+": (BindingPower.SUM, BindingPower.SUM),
    "-": (BindingPower.SUM, BindingPower.SUM),
    "*": (BindingPower.PRODUCT, BindingPower.PRODUCT),
    "/": (BindingPower.PRODUCT, BindingPower.PRODUCT),
}


def prefix_binding_power(token: Token) -> Optional[int]:
    """Right binding power of a prefix operator, None if it has none."""
    if not token.is_operator:
        return None
    return PREFIX_BINDING_POWER.get(token.lexeme)


def infix_binding_power(token: Token) -> Optional[Tuple[int, int]]:
    """(left, right) binding power of an infix operator, None if it has none."""
    if not token.is_operator:
        return None
    return INFIX_BINDING_POWER.get(token.lexeme)


class Parser:
    """
    Pratt parser for infix arithmetic.

    Consumes the lexer's token queue from the front and builds an expression
    tree. A parser instance is good for one parse.
    """

    def __init__(self, lexer: Lexer):
        """
        Initialize parser with a lexer.

        Args:
            lexer: Lexer holding the tokens of one input
        """
        self.lexer = lexer

    def parse(self) -> Expression:
        """
        Parse the whole token queue into one expression.

        Returns:
            Root of the expression tree

        Raises:
            ParseError: On the first failure; no partial tree is returned
        """
        expression = self._parse_binding_power(BindingPower.NONE)

        # The outermost call only stops early on ')', which has nothing to close
        leftover = self.lexer.pop_front()
        if leftover is not None:
            raise create_unmatched_paren_error(leftover.location, leftover)

        return expression

    def _parse_binding_power(self, min_bp: int) -> Expression:
        """Parse an expression whose operators bind tighter than min_bp."""
        token = self.lexer.pop_front()
        if token is None:
            raise create_unexpected_eof_error("an operand", self.lexer.end_location)

        left = self._parse_prefix(token)

        while True:
            token = self.lexer.peek_front()
            if token is None or token.is_right_paren:
                break

            binding_power = infix_binding_power(token)
            if binding_power is None:
                raise create_unexpected_token_error(token)

            left_bp, right_bp = binding_power
            # A tie is left to the enclosing call so same-level chains nest left
            if left_bp <= min_bp:
                break

            self.lexer.pop_front()  # Consume operator
            right = self._parse_binding_power(right_bp)
            left = Apply(token, [left, right])

        return left

    def _parse_prefix(self, token: Token) -> Expression:
        """Parse the leading part of an expression starting at token."""
        if token.is_symbol:
            return Atom(token)

        if token.is_left_paren:
            return self._parse_grouping(token)

        right_bp = prefix_binding_power(token)
        if right_bp is None:
            raise create_unexpected_prefix_error(token)

        operand = self._parse_binding_power(right_bp)
        return Apply(token, [operand])

    def _parse_grouping(self, open_paren: Token) -> Expression:
        """Parse a parenthesized expression; the parentheses leave no node."""
        expression = self._parse_binding_power(BindingPower.NONE)

        close_paren = self.lexer.pop_front()
        if close_paren is None or not close_paren.is_right_paren:
            raise create_unmatched_paren_error(open_paren.location, open_paren)

        return expression


def parse(source: str, filename: str = "<string>") -> Expression:
    """
    Convenience function to parse a source string.

    Args:
        source: Infix expression text
        filename: Filename for error reporting

    Returns:
        Expression tree

    Raises:
        ParseError: If parsing fails
    """
    expression = Parser(Lexer(source, filename)).parse()
    logger.debug("parsed %r from %s", expression, filename)
    return expression
