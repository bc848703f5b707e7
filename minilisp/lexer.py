"""
MiniLisp Lexer

This module turns raw source text into a flat, ordered list of tokens.
The scan is a single left-to-right pass over an index cursor with no
backtracking.
"""

import logging
from typing import List

from .core import LPAREN, RPAREN, Token, TokenKind, INT64_MAX

logger = logging.getLogger(__name__)


class LexError(ValueError):
    """Raised when source text cannot be converted into tokens."""


def normalize_parens(text: str) -> str:
    """
    Surround every parenthesis with spaces.

    The lexer expects parentheses to be whitespace-isolated; the driver
    applies this before lexing.
    """
    return text.replace("(", " ( ").replace(")", " ) ")


def _is_digit(ch: str) -> bool:
    return '0' <= ch <= '9'


def _is_delimiter(ch: str) -> bool:
    return ch.isspace() or ch in "()"


def lex(source: str) -> List[Token]:
    """
    Convert source text into tokens.

    Args:
        source: Program text, already passed through normalize_parens()

    Returns:
        Tokens in source order. Whitespace and ``;`` line comments
        produce no tokens.

    Raises:
        LexError: If a numeric literal does not fit in a signed 64-bit integer
    """
    tokens: List[Token] = []
    pos = 0
    end = len(source)

    while pos < end:
        ch = source[pos]

        if ch.isspace():
            pos += 1

        elif ch == '(':
            tokens.append(LPAREN)
            pos += 1

        elif ch == ')':
            tokens.append(RPAREN)
            pos += 1

        elif ch == ';':
            # Comment runs through the newline
            newline = source.find('\n', pos)
            pos = end if newline == -1 else newline + 1

        elif _is_digit(ch):
            start = pos
            while pos < end and _is_digit(source[pos]):
                pos += 1
            literal = source[start:pos]
            digits = literal.lstrip("0") or "0"
            if len(digits) > len(str(INT64_MAX)) or int(digits) > INT64_MAX:
                raise LexError(f"Integer literal out of range: {literal}")
            tokens.append(Token(TokenKind.NUMBER, int(digits)))

        else:
            start = pos
            while pos < end and not _is_delimiter(source[pos]):
                pos += 1
            tokens.append(Token(TokenKind.WORD, source[start:pos]))

    logger.debug(f"Lexed {len(tokens)} tokens from {end} characters")
    return tokens


def tokenize(text: str) -> List[Token]:
    """Normalize parenthesis spacing, then lex."""
    return lex(normalize_parens(text))
