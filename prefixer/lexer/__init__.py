"""
Prefixer Lexer Package

Splits infix arithmetic text into symbol and operator tokens.

Key Features:
- Operator characters isolated regardless of spacing
- Opaque symbols (numbers, identifiers, anything else)
- Source location tracking for diagnostics
- Front-of-queue consumption for the parser

Author: xwest
"""

from .tokens import Token, TokenType, SourceLocation, OPERATOR_CHARS, symbol, operator
from .lexer import Lexer, tokenize

__all__ = [
    "Lexer",
    "tokenize",
    "Token",
    "TokenType",
    "SourceLocation",
    "OPERATOR_CHARS",
    "symbol",
    "operator",
]
