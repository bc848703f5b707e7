"""
MiniLisp: a minimal S-expression evaluator.

This package implements a three-stage pipeline: a lexer that turns text
into tokens, a parser that builds a nested-list tree, and an interpreter
that reduces the tree to a single result.
"""

from .core import LispNode, Token, TokenKind, null, list_node, number, word, render, clone_ast
from .lexer import LexError, lex, normalize_parens, tokenize
from .parser import parse
from .interpreter import EvalError, LispInterpreter, interpret, run_source
from .verify import verify_program

__version__ = "0.1.0"
__all__ = [
    "LispNode", "Token", "TokenKind", "null", "list_node", "number", "word", "render", "clone_ast",
    "LexError", "lex", "normalize_parens", "tokenize", "parse",
    "EvalError", "LispInterpreter", "interpret", "run_source", "verify_program",
]
