"""
Token definitions for the prefixer lexer.

Infix arithmetic only knows two kinds of token:
- Symbols (operands such as numbers or identifiers, kept verbatim)
- Operators (the six single-character operators ``+ - * / ( )``)

Precedence is not stored on tokens; the parser looks it up per role.

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Optional


class TokenType(Enum):
    """Enumeration of all token types."""

    SYMBOL = auto()                 # 1, 42, x, foo
    OPERATOR = auto()               # + - * / ( )


# Every character the lexer isolates as a standalone token
OPERATOR_CHARS = "+-*/()"


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source text.

    Used for error reporting only; it never influences parsing.
    """
    filename: str
    line: int
    column: int
    offset: int  # Character offset from start of input

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


UNKNOWN_LOCATION = SourceLocation("<unknown>", 1, 1, 0)


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token.

    Contains the token type, the raw text and where it came from.
    """
    type: TokenType
    lexeme: str                     # Raw text from source
    location: SourceLocation = UNKNOWN_LOCATION

    def __str__(self) -> str:
        return self.lexeme

    def __repr__(self) -> str:
        name = "Symbol" if self.type is TokenType.SYMBOL else "Operator"
        return f"{name}({self.lexeme!r})"

    @property
    def is_symbol(self) -> bool:
        return self.type is TokenType.SYMBOL

    @property
    def is_operator(self) -> bool:
        return self.type is TokenType.OPERATOR

    @property
    def is_left_paren(self) -> bool:
        return self.is_operator and self.lexeme == "("

    @property
    def is_right_paren(self) -> bool:
        return self.is_operator and self.lexeme == ")"


def symbol(text: str, location: Optional[SourceLocation] = None) -> Token:
    """Build a symbol token."""
    return Token(TokenType.SYMBOL, text, location or UNKNOWN_LOCATION)


def operator(text: str, location: Optional[SourceLocation] = None) -> Token:
    """Build an operator token; only the six operator characters are accepted."""
    if len(text) != 1 or text not in OPERATOR_CHARS:
        raise ValueError(f"Not an operator: {text!r}")
    return Token(TokenType.OPERATOR, text, location or UNKNOWN_LOCATION)
