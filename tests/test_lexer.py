#!/usr/bin/env python3
"""
Unit tests for the MiniLisp lexer.

These tests cover token classification, comments, parenthesis
normalization and numeric range handling.
"""

import unittest
from minilisp import LexError, Token, TokenKind, lex, normalize_parens, tokenize
from minilisp.core import LPAREN, RPAREN


def num(value):
    return Token(TokenKind.NUMBER, value)


def wrd(text):
    return Token(TokenKind.WORD, text)


class TestNormalizeParens(unittest.TestCase):
    """Test cases for parenthesis spacing."""

    def test_parens_are_padded(self):
        self.assertEqual(normalize_parens("(+ 1 2)"), " ( + 1 2 ) ")

    def test_text_without_parens_is_unchanged(self):
        self.assertEqual(normalize_parens("foo bar"), "foo bar")


class TestLexer(unittest.TestCase):
    """Test cases for lex() and tokenize()."""

    def test_simple_form(self):
        """Test the canonical addition form."""
        self.assertEqual(
            tokenize("(+ 1 2)"),
            [LPAREN, wrd("+"), num(1), num(2), RPAREN],
        )

    def test_bare_word(self):
        self.assertEqual(tokenize("foo"), [wrd("foo")])

    def test_empty_input(self):
        """Test that empty and blank inputs produce no tokens."""
        self.assertEqual(lex(""), [])
        self.assertEqual(lex("   \n\t  "), [])

    def test_comment_only(self):
        self.assertEqual(tokenize("; comment only"), [])

    def test_comment_ends_at_newline(self):
        tokens = tokenize("; (+ 1 2) ignored\n(+ 3 4) ; trailing")
        self.assertEqual(tokens, [LPAREN, wrd("+"), num(3), num(4), RPAREN])

    def test_comment_content_is_irrelevant(self):
        """Test that any comment content yields zero tokens."""
        for comment in ["; ", ";;;", "; ( ) 12 foo", ";éè"]:
            with self.subTest(comment=comment):
                self.assertEqual(tokenize(comment + "\n42"), [num(42)])

    def test_semicolon_inside_word(self):
        """A semicolon that does not start a token is part of the word."""
        self.assertEqual(lex("a;b"), [wrd("a;b")])

    def test_digit_run_then_word(self):
        """A digit run ends the number; the rest starts a word."""
        self.assertEqual(lex("12ab"), [num(12), wrd("ab")])

    def test_word_with_digits(self):
        self.assertEqual(lex("ab12"), [wrd("ab12")])

    def test_no_sign_handling(self):
        self.assertEqual(lex("-5"), [wrd("-5")])

    def test_operator_symbols_are_words(self):
        self.assertEqual(lex("+ - * foo-bar"), [wrd("+"), wrd("-"), wrd("*"), wrd("foo-bar")])

    def test_words_stop_at_parens(self):
        """Parentheses delimit words even without normalization."""
        self.assertEqual(lex("(foo)"), [LPAREN, wrd("foo"), RPAREN])

    def test_nested_forms(self):
        tokens = tokenize("(+ (+ 1 2) 3)")
        self.assertEqual(
            tokens,
            [LPAREN, wrd("+"), LPAREN, wrd("+"), num(1), num(2), RPAREN, num(3), RPAREN],
        )

    def test_largest_int64(self):
        self.assertEqual(lex("9223372036854775807"), [num(9223372036854775807)])

    def test_leading_zeros(self):
        self.assertEqual(lex("007"), [num(7)])
        self.assertEqual(lex("0" * 30 + "1"), [num(1)])

    def test_overflow_is_fatal(self):
        with self.assertRaises(LexError):
            lex("9223372036854775808")
        with self.assertRaises(LexError):
            lex("99999999999999999999")

    def test_token_repr(self):
        """Test the debug rendering of tokens."""
        self.assertEqual(repr(tokenize("(+ 1 2)")), "[LParen, Word('+'), Number(1), Number(2), RParen]")


if __name__ == '__main__':
    unittest.main()
