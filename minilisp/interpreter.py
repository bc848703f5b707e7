"""
MiniLisp Interpreter

This module implements the recursive evaluator and the full
text-to-result pipeline. There is no environment: words carry no value,
and the only special form is ``+``.
"""

import logging
from typing import Optional

from .config import InterpreterConfig, get_config
from .core import LispNode, clone_ast, null, number, recursion_headroom, tree_depth
from .lexer import tokenize
from .parser import parse

logger = logging.getLogger(__name__)


class EvalError(IndexError):
    """Raised when a special form is missing operands."""


class LispInterpreter:
    """
    Recursive evaluator for MiniLisp trees.

    Features:
    - ``+`` special form over exactly two positional operands
    - sequence evaluation that drops Null results
    - optional depth and step limits
    """

    def __init__(self, config: Optional[InterpreterConfig] = None):
        if config is None:
            config = get_config().interpreter
        self.max_recursion_depth = config.max_recursion_depth
        self.max_steps = config.max_steps
        self.step_count = 0

    def evaluate(self, node: LispNode, depth: int = 0) -> LispNode:
        """
        Evaluate a node.

        Args:
            node: The node to evaluate
            depth: Current recursion depth

        Returns:
            The result node. Lists in the result never contain Null.

        Raises:
            EvalError: If a ``+`` form has fewer than two operands
            OverflowError: If a sum leaves the signed 64-bit range
            RuntimeError: If a configured resource limit is exceeded
        """
        if depth == 0:
            self.step_count = 0
            with recursion_headroom(tree_depth(node)):
                return self._evaluate_node(node, depth)
        return self._evaluate_node(node, depth)

    def _evaluate_node(self, node: LispNode, depth: int) -> LispNode:
        self._check_limits(depth)
        self.step_count += 1

        if node.node_type in ('number', 'null'):
            return clone_ast(node)

        elif node.node_type == 'word':
            return null()

        elif node.node_type == 'list':
            result = self._evaluate_list(node, depth)
            if depth == 0:
                logger.debug(f"Evaluation finished in {self.step_count} steps")
            return result

        else:
            raise ValueError(f"Unknown node type: {node.node_type}")

    def _evaluate_list(self, node: LispNode, depth: int) -> LispNode:
        head = node.children[0] if node.children else None

        if head is not None and head.node_type == 'word':
            if head.value == '+':
                return self._evaluate_add(node, depth)
            logger.debug(f"Unrecognized operator: {head.value}")
            return null()

        return self._evaluate_sequence(node, depth)

    def _evaluate_sequence(self, node: LispNode, depth: int) -> LispNode:
        results = []
        for child in node.children:
            result = self.evaluate(child, depth + 1)
            if not result.is_null:
                results.append(result)
        return LispNode('list', None, results)

    def run_program(self, tree: LispNode) -> LispNode:
        """
        Evaluate a parsed program.

        The top-level list is implicit in the source, so it is always a
        sequence of forms: each form is evaluated and the non-Null
        results are collected, whatever the first form is. Unlike ordinary
        list dispatch, a leading word here is not treated as an operator,
        so ``+ 1 2`` yields ``(1 2)`` and ``foo (+ 1 2)`` yields ``(3)``.

        Args:
            tree: The List node returned by the parser

        Returns:
            A List of the non-Null results of the top-level forms
        """
        if tree.node_type != 'list':
            return self.evaluate(tree)

        self.step_count = 0
        self._check_limits(0)
        self.step_count += 1

        with recursion_headroom(tree_depth(tree)):
            result = self._evaluate_sequence(tree, 0)
        logger.debug(f"Program of {len(tree.children)} forms finished in {self.step_count} steps")
        return result

    def _evaluate_add(self, node: LispNode, depth: int) -> LispNode:
        if len(node.children) < 3:
            raise EvalError(
                f"'+' expects 2 operands, got {len(node.children) - 1}"
            )

        left = self.evaluate(node.children[1], depth + 1)
        right = self.evaluate(node.children[2], depth + 1)

        if left.node_type == 'number' and right.node_type == 'number':
            return number(left.value + right.value)
        return null()

    def _check_limits(self, depth: int):
        """Check if resource limits have been exceeded."""
        if self.max_recursion_depth is not None and depth > self.max_recursion_depth:
            raise RuntimeError(f"Maximum recursion depth exceeded: {depth} > {self.max_recursion_depth}")

        if self.max_steps is not None and self.step_count >= self.max_steps:
            raise RuntimeError(f"Maximum step count exceeded: {self.step_count + 1} > {self.max_steps}")


def interpret(tree: LispNode, config: Optional[InterpreterConfig] = None) -> LispNode:
    """Evaluate a parsed program with a fresh interpreter."""
    return LispInterpreter(config).run_program(tree)


def run_source(text: str, config: Optional[InterpreterConfig] = None) -> LispNode:
    """
    Run a complete program: normalize, lex, parse, then evaluate.

    Args:
        text: Raw program source
        config: Interpreter limits (defaults to the global configuration)

    Returns:
        The evaluated result, normally a List of the top-level results
    """
    tree = parse(tokenize(text))
    return interpret(tree, config)
