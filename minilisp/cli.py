#!/usr/bin/env python3
"""Command-line interface for MiniLisp."""

import argparse
import logging
import sys

from .config import InterpreterConfig, MiniLispConfig, VerifierConfig, set_config, setup_logging
from .core import recursion_headroom, render, tree_depth
from .interpreter import EvalError, LispInterpreter
from .lexer import LexError, tokenize
from .parser import parse
from .verify import verify_program

logger = logging.getLogger(__name__)


def _fail(message: str):
    print(f"Error: {message}", file=sys.stderr)
    sys.exit(1)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Evaluate a MiniLisp program")
    parser.add_argument("file", nargs="?", help="Path to the program source")
    parser.add_argument(
        "--format",
        choices=["debug", "sexpr"],
        default="debug",
        help="Result rendering: debug structure or Lisp-style text",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject unbalanced parentheses and short '+' forms before evaluating",
    )
    parser.add_argument("--max-depth", type=int, default=None, help="Maximum evaluation depth")
    parser.add_argument("--max-steps", type=int, default=None, help="Maximum evaluation steps")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Logging level",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")
    return parser


def main(argv=None):
    """Main entry point for the minilisp command."""
    args = build_parser().parse_args(argv)

    config = MiniLispConfig(
        interpreter=InterpreterConfig(
            max_recursion_depth=args.max_depth,
            max_steps=args.max_steps,
        ),
        verifier=VerifierConfig(),
        log_level="DEBUG" if args.verbose else args.log_level,
    )
    set_config(config)
    setup_logging(config.log_level)

    if args.file is None:
        _fail("No file provided.")

    try:
        with open(args.file, "r", encoding="utf-8") as f:
            source = f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"Read of {args.file} failed: {e}")
        _fail("Failed to read the file.")

    try:
        tokens = tokenize(source)
        program = parse(list(tokens))

        if args.strict:
            is_valid, errors = verify_program(
                tokens,
                program,
                max_depth=config.verifier.max_depth,
                max_nodes=config.verifier.max_nodes,
            )
            if not is_valid:
                _fail("; ".join(errors))

        result = LispInterpreter(config.interpreter).run_program(program)
    except (LexError, EvalError, OverflowError, RuntimeError) as e:
        _fail(str(e))

    with recursion_headroom(tree_depth(result)):
        if args.format == "sexpr":
            print(render(result))
        else:
            print(repr(result))


if __name__ == "__main__":
    main()
