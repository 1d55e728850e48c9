"""
Prefixer lexer - turns infix text into a queue of tokens.

Operator characters always become their own token no matter how they
are spaced; everything else between whitespace is a symbol.

xwest
"""

import logging
import re
from typing import List, Optional

from .tokens import Token, TokenType, SourceLocation, OPERATOR_CHARS

logger = logging.getLogger(__name__)

# One operator character, or a run of anything that is neither
# whitespace nor an operator character
_TOKEN_PATTERN = re.compile(
    r"(?P<operator>[" + re.escape(OPERATOR_CHARS) + r"])"
    r"|(?P<symbol>[^\s" + re.escape(OPERATOR_CHARS) + r"]+)"
)


class Lexer:
    """
    Lexical analyzer for infix arithmetic.

    Owns the token sequence of a single parse. The parser consumes it from
    the front with ``pop_front``/``peek_front``; each token is handed out
    exactly once.
    """

    def __init__(self, source: str, filename: str = "<string>"):
        """
        Initialize the lexer with source text.

        Args:
            source: Expression text
            filename: Name used in error locations
        """
        self.source = source
        self.filename = filename
        self.end_location = self._location_at(len(source))

        self._tokens: List[Token] = self._scan()
        # Kept reversed so the front of the queue pops in O(1)
        self._pending: List[Token] = list(reversed(self._tokens))

        logger.debug("lexed %d tokens from %s", len(self._tokens), filename)

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source text.

        Returns:
            Ordered list of tokens; empty for blank input
        """
        return list(self._tokens)

    @property
    def tokens(self) -> List[Token]:
        """All tokens of the source in input order, consumed or not."""
        return list(self._tokens)

    def _scan(self) -> List[Token]:
        tokens: List[Token] = []
        for match in _TOKEN_PATTERN.finditer(self.source):
            token_type = TokenType.OPERATOR if match.lastgroup == "operator" else TokenType.SYMBOL
            location = self._location_at(match.start())
            tokens.append(Token(token_type, match.group(), location))
        return tokens

    def pop_front(self) -> Optional[Token]:
        """Remove and return the next token, or None when exhausted."""
        if not self._pending:
            return None
        return self._pending.pop()

    def peek_front(self) -> Optional[Token]:
        """Return the next token without consuming it, or None when exhausted."""
        if not self._pending:
            return None
        return self._pending[-1]

    @property
    def remaining(self) -> List[Token]:
        """Tokens not yet consumed, in input order."""
        return list(reversed(self._pending))

    @property
    def is_exhausted(self) -> bool:
        return not self._pending

    def _location_at(self, offset: int) -> SourceLocation:
        line = self.source.count("\n", 0, offset) + 1
        line_start = self.source.rfind("\n", 0, offset) + 1
        return SourceLocation(self.filename, line, offset - line_start + 1, offset)


def tokenize(source: str, filename: str = "<string>") -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Expression text
        filename: Filename for error reporting

    Returns:
        List of tokens (never raises; malformed input is the parser's problem)
    """
    return Lexer(source, filename).tokens
