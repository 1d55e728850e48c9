"""
Test suite for the prefixer lexer.

Tests cover:
- Operator isolation regardless of spacing
- Opaque symbols
- Front-of-queue consumption
- Source locations

Author: xwest
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from prefixer.lexer.lexer import Lexer, tokenize
from prefixer.lexer.tokens import Token, TokenType, symbol, operator


def lexemes(source):
    return [token.lexeme for token in tokenize(source)]


class TestTokenize(unittest.TestCase):
    """Test cases for tokenize()."""

    def test_spacing_does_not_matter(self):
        self.assertEqual(lexemes("1+2"), ["1", "+", "2"])
        self.assertEqual(lexemes("  1 +\t2\n"), ["1", "+", "2"])

    def test_every_operator_is_isolated(self):
        self.assertEqual(lexemes("(a+b)*c/-d"), ["(", "a", "+", "b", ")", "*", "c", "/", "-", "d"])

    def test_token_types(self):
        tokens = tokenize("x * 42")
        self.assertEqual([t.type for t in tokens],
                         [TokenType.SYMBOL, TokenType.OPERATOR, TokenType.SYMBOL])

    def test_symbols_are_opaque(self):
        # No validation of symbol content; multi-character text stays whole
        self.assertEqual(lexemes("foo_bar 3.14 $x"), ["foo_bar", "3.14", "$x"])

    def test_operator_chars_split_symbols(self):
        self.assertEqual(lexemes("a-b"), ["a", "-", "b"])

    def test_empty_input(self):
        self.assertEqual(tokenize(""), [])
        self.assertEqual(tokenize("   \n "), [])

    def test_locations(self):
        tokens = tokenize("1 +\n  22", filename="<test>")
        self.assertEqual([(t.location.line, t.location.column) for t in tokens],
                         [(1, 1), (1, 3), (2, 3)])
        self.assertEqual(tokens[2].location.offset, 6)
        self.assertEqual(str(tokens[2].location), "<test>:2:3")


class TestLexerQueue(unittest.TestCase):
    """Test cases for the lexer's pop_front/peek_front primitives."""

    def test_pop_in_input_order(self):
        lexer = Lexer("1 * (2)")
        popped = []
        while (token := lexer.pop_front()) is not None:
            popped.append(token.lexeme)
        self.assertEqual(popped, ["1", "*", "(", "2", ")"])

    def test_peek_does_not_consume(self):
        lexer = Lexer("a b")
        self.assertEqual(lexer.peek_front().lexeme, "a")
        self.assertEqual(lexer.peek_front().lexeme, "a")
        self.assertEqual(lexer.pop_front().lexeme, "a")
        self.assertEqual(lexer.peek_front().lexeme, "b")

    def test_exhaustion(self):
        lexer = Lexer("x")
        self.assertFalse(lexer.is_exhausted)
        lexer.pop_front()
        self.assertTrue(lexer.is_exhausted)
        self.assertIsNone(lexer.pop_front())
        self.assertIsNone(lexer.peek_front())

    def test_remaining(self):
        lexer = Lexer("1 + 2")
        lexer.pop_front()
        self.assertEqual([t.lexeme for t in lexer.remaining], ["+", "2"])

    def test_tokens_survive_consumption(self):
        lexer = Lexer("a + b")
        lexer.pop_front()
        lexer.pop_front()
        self.assertEqual([t.lexeme for t in lexer.tokens], ["a", "+", "b"])
        self.assertEqual(lexer.tokenize(), lexer.tokens)

    def test_tokens_are_copies(self):
        lexer = Lexer("1 * 2")
        lexer.tokens.clear()
        lexer.tokenize().clear()
        self.assertEqual(len(lexer.tokens), 3)
        self.assertEqual(lexer.pop_front().lexeme, "1")

    def test_end_location(self):
        lexer = Lexer("1 +", filename="<eof>")
        self.assertEqual(lexer.end_location.offset, 3)
        self.assertEqual(lexer.end_location.column, 4)


class TestTokens(unittest.TestCase):
    """Test cases for token helpers."""

    def test_paren_helpers(self):
        self.assertTrue(operator("(").is_left_paren)
        self.assertTrue(operator(")").is_right_paren)
        self.assertFalse(operator("+").is_left_paren)
        self.assertFalse(symbol("(x").is_left_paren)

    def test_operator_rejects_non_operators(self):
        with self.assertRaises(ValueError):
            operator("**")
        with self.assertRaises(ValueError):
            operator("+-")
        with self.assertRaises(ValueError):
            operator("")

    def test_tokens_are_immutable(self):
        token = symbol("1")
        with self.assertRaises(AttributeError):
            token.lexeme = "2"

    def test_repr(self):
        self.assertEqual(repr(symbol("x")), "Symbol('x')")
        self.assertEqual(repr(operator("*")), "Operator('*')")
        self.assertIsInstance(symbol("x"), Token)


if __name__ == '__main__':
    unittest.main()
