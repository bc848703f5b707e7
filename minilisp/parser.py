"""
MiniLisp Parser

Parser that drains a token queue front-to-back and
builds a single List node. The top-level list is implicit: the source
has no enclosing parentheses, so it ends when the tokens run out.

Unbalanced parentheses are tolerated rather than rejected. An unclosed
``(`` is closed at end of input, and a stray top-level ``)`` ends the
program early. Both are reported as warnings only.
"""

import logging
from collections import deque
from typing import Deque, Iterable

from .core import LispNode, Token, TokenKind, number, word

logger = logging.getLogger(__name__)


def parse(tokens: Iterable[Token]) -> LispNode:
    """
    Parse tokens into a tree.

    Args:
        tokens: The token sequence. A deque is consumed in place; any
            other iterable is copied into a fresh deque first.

    Returns:
        A List node whose children are the top-level forms
    """
    if not isinstance(tokens, deque):
        tokens = deque(tokens)

    tree = _parse_list(tokens)

    logger.debug(f"Parsed {len(tree.children)} top-level forms")
    return tree


def _parse_list(tokens: Deque[Token]) -> LispNode:
    """
    Accumulate nodes until the closing paren of each level or the end of the tokens.

    Open lists are kept on an explicit stack, so nesting depth is not
    bounded by the Python recursion limit.
    """
    stack = [[]]

    while tokens:
        token = tokens.popleft()

        if token.kind == TokenKind.LPAREN:
            stack.append([])
        elif token.kind == TokenKind.RPAREN:
            if len(stack) == 1:
                logger.warning(f"Unmatched ')' ended the program early; {len(tokens)} tokens ignored")
                break
            children = stack.pop()
            stack[-1].append(LispNode('list', None, children))
        elif token.kind == TokenKind.NUMBER:
            stack[-1].append(number(token.value))
        elif token.kind == TokenKind.WORD:
            stack[-1].append(word(token.value))
        else:
            raise ValueError(f"Unknown token kind: {token.kind}")

    if len(stack) > 1:
        logger.warning(f"Unclosed '(' at nesting depth {len(stack) - 1}, closed at end of input")

    # Unclosed lists close at end of input
    while len(stack) > 1:
        children = stack.pop()
        stack[-1].append(LispNode('list', None, children))

    return LispNode('list', None, stack[0])
