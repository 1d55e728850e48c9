"""
Prefixer Parser Package

Implements a Pratt (binding power) parser that turns infix arithmetic
tokens into an expression tree with explicit precedence.

Key Features:
- Top-down operator precedence (Pratt parsing)
- Unary prefix '+'/'-' binding tighter than any infix operator
- Left-associative '+ - * /'
- Parenthetical grouping
- Distinct error classes with diagnostics

Author: xwest
"""

from .ast_nodes import Expression, Atom, Apply, ExpressionVisitor, walk, depth
from .parser import (
    Parser, parse, BindingPower, PREFIX_BINDING_POWER, INFIX_BINDING_POWER,
    prefix_binding_power, infix_binding_power
)
from .errors import (
    ParseError, Diagnostic, UnexpectedEndOfInput, UnmatchedParenthesis,
    UnexpectedPrefixOperator, UnexpectedToken, PARSER_ERROR_CODES
)

__all__ = [
    # Core parser
    "Parser",
    "parse",
    "BindingPower",
    "PREFIX_BINDING_POWER",
    "INFIX_BINDING_POWER",
    "prefix_binding_power",
    "infix_binding_power",

    # Tree nodes
    "Expression", "Atom", "Apply", "ExpressionVisitor", "walk", "depth",

    # Error handling
    "ParseError", "Diagnostic", "UnexpectedEndOfInput", "UnmatchedParenthesis",
    "UnexpectedPrefixOperator", "UnexpectedToken", "PARSER_ERROR_CODES",
]
