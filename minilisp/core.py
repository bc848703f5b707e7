"""
MiniLisp Core Types

This module implements the foundational value types for MiniLisp: the
tokens produced by the lexer and the recursive Node tree shared by the
parser and the interpreter.
"""

import sys
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator, List, Optional, Tuple


INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

# Python frames used per level of nesting by the recursive walkers
FRAMES_PER_LEVEL = 6


def check_int64(value: int) -> int:
    """Return value unchanged, or raise OverflowError if it does not fit in 64 bits."""
    if not INT64_MIN <= value <= INT64_MAX:
        raise OverflowError(f"Integer out of 64-bit range: {value}")
    return value


class TokenKind(Enum):
    """Enumeration of lexical token kinds."""
    LPAREN = "lparen"
    RPAREN = "rparen"
    NUMBER = "number"
    WORD = "word"


@dataclass(frozen=True)
class Token:
    """A single lexical unit. Only NUMBER and WORD tokens carry a value."""
    kind: TokenKind
    value: Any = None

    def __repr__(self):
        if self.kind == TokenKind.LPAREN:
            return "LParen"
        if self.kind == TokenKind.RPAREN:
            return "RParen"
        if self.kind == TokenKind.NUMBER:
            return f"Number({self.value})"
        return f"Word({self.value!r})"


LPAREN = Token(TokenKind.LPAREN)
RPAREN = Token(TokenKind.RPAREN)


class LispNode:
    """
    A node in the MiniLisp tree.

    The same type represents both parsed syntax and evaluation results.
    Each node is one of:
    - 'null': the "no value" placeholder
    - 'list': an ordered sequence of child nodes
    - 'number': a signed 64-bit integer
    - 'word': a symbolic atom stored as text
    """

    def __init__(self, node_type: str, value: Any = None, children: Optional[List['LispNode']] = None):
        self.node_type = node_type
        self.value = value
        self.children = children or []

    @property
    def is_null(self) -> bool:
        return self.node_type == 'null'

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LispNode):
            return NotImplemented
        return (self.node_type == other.node_type
                and self.value == other.value
                and self.children == other.children)

    def __repr__(self):
        if self.node_type == 'null':
            return "Null"
        if self.node_type == 'number':
            return f"Number({self.value})"
        if self.node_type == 'word':
            return f"Word({self.value!r})"
        children_repr = ', '.join(repr(child) for child in self.children)
        return f"List([{children_repr}])"


# Helper functions for creating nodes
def null() -> LispNode:
    """Create a Null node."""
    return LispNode('null')

def list_node(*children: LispNode) -> LispNode:
    """Create a List node."""
    return LispNode('list', None, list(children))

def number(value: int) -> LispNode:
    """Create a Number node."""
    return LispNode('number', check_int64(value))

def word(text: str) -> LispNode:
    """Create a Word node."""
    return LispNode('word', text)


def render(node: LispNode) -> str:
    """
    Render a node back into Lisp-style source text.

    Lists print as parenthesized, space-separated children; Null prints
    as the bare word ``Null``.

    Args:
        node: The node to render

    Returns:
        A string representation in Lisp syntax
    """
    if node.node_type == 'null':
        return "Null"

    elif node.node_type in ('number', 'word'):
        return str(node.value)

    elif node.node_type == 'list':
        return "(" + " ".join(render(child) for child in node.children) + ")"

    else:
        return f"(UNKNOWN-{node.node_type} {node.value})"


def clone_ast(node: LispNode) -> LispNode:
    """
    Create a deep copy of a node and all of its children.

    Args:
        node: The node to clone

    Returns:
        A deep copy of the node
    """
    cloned_children = [clone_ast(child) for child in node.children]
    return LispNode(node.node_type, node.value, cloned_children)


def iter_nodes(ast: LispNode) -> Iterator[Tuple[Optional[LispNode], Optional[int], LispNode]]:
    """
    Generator that yields (parent, child_idx, node) for every node in the tree.

    This performs a depth-first, pre-order traversal with an explicit
    stack, so arbitrarily deep trees are safe. The root is yielded with
    parent and child_idx set to None.
    """
    stack = [(None, None, ast)]
    while stack:
        parent, child_idx, node = stack.pop()
        yield (parent, child_idx, node)
        for idx in range(len(node.children) - 1, -1, -1):
            stack.append((node, idx, node.children[idx]))


def tree_depth(node: LispNode) -> int:
    """Return the maximum depth of the tree, counting the root as 1."""
    deepest = 0
    stack = [(node, 1)]
    while stack:
        current, depth = stack.pop()
        deepest = max(deepest, depth)
        for child in current.children:
            stack.append((child, depth + 1))
    return deepest


@contextmanager
def recursion_headroom(depth: int):
    """
    Temporarily raise the interpreter recursion limit for a tree of the given depth.

    The previous limit is restored on exit.
    """
    previous = sys.getrecursionlimit()
    sys.setrecursionlimit(previous + depth * FRAMES_PER_LEVEL)
    try:
        yield
    finally:
        sys.setrecursionlimit(previous)
