"""
Prefixer Package

Converts infix arithmetic expressions into fully-parenthesized prefix
notation, making operator precedence and associativity explicit.

Architecture:
    prefixer/
    ├── lexer/           # Tokenization
    ├── parser/          # Pratt parser and expression tree
    ├── render.py        # Prefix rendering and reading
    └── cli.py           # Command-line wrapper

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__email__ = "dev@neuralscript.org"
__license__ = "MIT"

from .lexer import Lexer, Token, TokenType, SourceLocation, tokenize
from .parser import (
    Parser, parse, Expression, Atom, Apply, ExpressionVisitor,
    ParseError, UnexpectedEndOfInput, UnmatchedParenthesis,
    UnexpectedPrefixOperator, UnexpectedToken
)
from .render import render, to_prefix, read_prefix

__all__ = [
    # Core classes
    "Lexer",
    "Parser",
    "Token",
    "TokenType",
    "SourceLocation",
    "Expression",
    "Atom",
    "Apply",
    "ExpressionVisitor",

    # Functions
    "tokenize",
    "parse",
    "render",
    "to_prefix",
    "read_prefix",

    # Errors
    "ParseError",
    "UnexpectedEndOfInput",
    "UnmatchedParenthesis",
    "UnexpectedPrefixOperator",
    "UnexpectedToken",

    # Version info
    "__version__",
    "__author__",
    "__email__",
    "__license__",
]
