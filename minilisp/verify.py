"""
MiniLisp Verification System

This module implements opt-in static checks over a token stream and its
parsed tree. The default pipeline never runs them: the parser tolerates
unbalanced parentheses and the interpreter fails on short ``+`` forms.
The checks let a caller reject such programs up front instead.
"""

from typing import List, Sequence, Tuple

from .core import LispNode, Token, TokenKind, iter_nodes, tree_depth


def check_balance(tokens: Sequence[Token]) -> Tuple[bool, List[str]]:
    """
    Check that every parenthesis in the token stream has a partner.

    Args:
        tokens: Tokens as produced by the lexer

    Returns:
        Tuple of (is_valid, error_messages)
    """
    errors = []
    depth = 0

    for idx, token in enumerate(tokens):
        if token.kind == TokenKind.LPAREN:
            depth += 1
        elif token.kind == TokenKind.RPAREN:
            if depth == 0:
                errors.append(f"Unmatched ')' at token {idx}")
            else:
                depth -= 1

    if depth > 0:
        errors.append(f"{depth} unclosed '(' at end of input")

    return len(errors) == 0, errors


def check_arity(ast: LispNode) -> Tuple[bool, List[str]]:
    """
    Check that every ``+`` form has at least two operands.

    Forms with extra operands are accepted; the interpreter ignores them.

    Args:
        ast: The tree to check

    Returns:
        Tuple of (is_valid, error_messages)
    """
    errors = []

    for parent, child_idx, node in iter_nodes(ast):
        if node.node_type != 'list' or not node.children:
            continue

        head = node.children[0]
        if head.node_type == 'word' and head.value == '+':
            operands = len(node.children) - 1
            if operands < 2:
                errors.append(f"Operation '+' expects 2 arguments, got {operands}")

    return len(errors) == 0, errors


def check_depth(ast: LispNode, max_depth: int = 200) -> Tuple[bool, List[str]]:
    """Check that the tree depth doesn't exceed the maximum allowed."""
    errors = []

    actual_depth = tree_depth(ast)
    if actual_depth > max_depth:
        errors.append(f"Tree depth {actual_depth} exceeds maximum allowed depth {max_depth}")

    return len(errors) == 0, errors


def check_node_count(ast: LispNode, max_nodes: int = 100000) -> Tuple[bool, List[str]]:
    """Check that the tree doesn't have too many nodes."""
    errors = []

    node_count = sum(1 for _ in iter_nodes(ast))
    if node_count > max_nodes:
        errors.append(f"Tree has {node_count} nodes, exceeds maximum allowed {max_nodes}")

    return len(errors) == 0, errors


def verify_program(tokens: Sequence[Token], ast: LispNode,
                   max_depth: int = 200, max_nodes: int = 100000) -> Tuple[bool, List[str]]:
    """
    Run every check against a program.

    Args:
        tokens: The program's tokens (not consumed)
        ast: The tree parsed from those tokens
        max_depth: Maximum allowed tree depth
        max_nodes: Maximum allowed number of nodes

    Returns:
        Tuple of (is_valid, error_messages)
    """
    if not isinstance(ast, LispNode):
        return False, ["Tree root must be a LispNode"]

    all_errors = []
    checks = [
        check_balance(tokens),
        check_arity(ast),
        check_depth(ast, max_depth),
        check_node_count(ast, max_nodes),
    ]

    for is_valid, errors in checks:
        if not is_valid:
            all_errors.extend(errors)

    return len(all_errors) == 0, all_errors
