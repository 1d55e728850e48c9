"""
Error handling for the prefixer parser.

Every parse failure is fatal and raised immediately. Each failure kind is its
own exception class with an error code so callers can tell them apart, and
carries a diagnostic with the source location.

Author: xwest
"""

from typing import Optional, List
from dataclasses import dataclass

from ..lexer.tokens import Token, SourceLocation


@dataclass
class Diagnostic:
    """Diagnostic report attached to a parse error."""
    message: str
    location: SourceLocation
    severity: str  # "error", "warning"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        if self.code:
            severity_prefix += f"[{self.code}]"
        result = f"{severity_prefix}: {self.message}\n"
        result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class ParseError(Exception):
    """
    Base class for all parse failures.

    Contains detailed diagnostic information for error reporting.
    """

    code: Optional[str] = None

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        token: Optional[Token] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.message = message
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=self.code,
            help_text=help_text,
            suggestions=suggestions
        )
        self.token = token

    @property
    def location(self) -> SourceLocation:
        return self.diagnostic.location

    def __str__(self) -> str:
        return str(self.diagnostic)


class UnexpectedEndOfInput(ParseError):
    """Token sequence ran out where a token was required."""
    code = "P010"


class UnmatchedParenthesis(ParseError):
    """A '(' was never closed, or a ')' has no opening partner."""
    code = "P012"


class UnexpectedPrefixOperator(ParseError):
    """An operator in leading position that has no prefix binding power."""
    code = "P009"


class UnexpectedToken(ParseError):
    """A token in infix position that has no infix binding power."""
    code = "P001"


PARSER_ERROR_CODES = {
    UnexpectedToken.code: "Unexpected token",
    UnexpectedPrefixOperator.code: "Invalid operator usage",
    UnexpectedEndOfInput.code: "Unexpected end of input",
    UnmatchedParenthesis.code: "Mismatched parentheses",
}


# Helper functions for creating parser errors

def create_unexpected_eof_error(expected: str, location: SourceLocation) -> UnexpectedEndOfInput:
    """Create an error for unexpected end of input."""
    return UnexpectedEndOfInput(
        message=f"Unexpected end of input, expected {expected}",
        location=location,
        help_text=f"The input ended while the parser was expecting {expected}.",
        suggestions=[f"Add the missing {expected}", "Check for a trailing operator"]
    )


def create_unmatched_paren_error(location: SourceLocation,
                                 token: Optional[Token] = None) -> UnmatchedParenthesis:
    """Create an error for an unclosed '(' or a stray ')'."""
    if token is not None and token.is_right_paren:
        return UnmatchedParenthesis(
            message="Unmatched ')'",
            location=location,
            token=token,
            help_text="This ')' has no opening '(' before it.",
            suggestions=["Remove the ')'", "Add a matching '('"]
        )
    return UnmatchedParenthesis(
        message="Unclosed delimiter '('",
        location=location,
        token=token,
        help_text="An opening '(' was never closed.",
        suggestions=["Add a closing ')'"]
    )


def create_unexpected_prefix_error(token: Token) -> UnexpectedPrefixOperator:
    """Create an error for an operator that cannot start an expression."""
    return UnexpectedPrefixOperator(
        message=f"Unexpected prefix operator '{token.lexeme}'",
        location=token.location,
        token=token,
        help_text=f"'{token.lexeme}' cannot start an expression; only '+' and '-' can be used as prefix operators.",
        suggestions=["Add an operand before the operator"]
    )


def create_unexpected_token_error(token: Token) -> UnexpectedToken:
    """Create an error for a token that cannot continue an expression."""
    if token.is_symbol:
        help_text = f"'{token.lexeme}' follows another operand without an operator in between."
        suggestions = ["Insert an operator such as '+' or '*'"]
    else:
        help_text = f"'{token.lexeme}' cannot be used as an infix operator."
        suggestions = ["Insert an operator before the parenthesis"]

    return UnexpectedToken(
        message=f"Unexpected token '{token.lexeme}'",
        location=token.location,
        token=token,
        help_text=help_text,
        suggestions=suggestions
    )
