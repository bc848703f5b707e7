#!/usr/bin/env python3
"""
Tests for the MiniLisp verification system.

These tests make sure the opt-in checks reject the malformed programs
that the default pipeline tolerates or fails on late.
"""

import unittest
from minilisp import parse, tokenize
from minilisp.verify import check_arity, check_balance, check_depth, check_node_count, verify_program


class TestCheckBalance(unittest.TestCase):

    def test_balanced(self):
        is_valid, errors = check_balance(tokenize("(+ (+ 1 2) 3) (foo)"))
        self.assertTrue(is_valid)
        self.assertEqual(errors, [])

    def test_unclosed(self):
        is_valid, errors = check_balance(tokenize("((+ 1 2)"))
        self.assertFalse(is_valid)
        self.assertIn("1 unclosed '(' at end of input", errors)

    def test_stray_close(self):
        is_valid, errors = check_balance(tokenize("(+ 1 2))"))
        self.assertFalse(is_valid)
        self.assertEqual(len(errors), 1)


class TestCheckArity(unittest.TestCase):

    def test_valid_forms(self):
        """Test that complete and over-full '+' forms pass."""
        for source in ["(+ 1 2)", "(+ (+ 1 2) 3)", "(+ 1 2 3)", "(foo)", "()"]:
            with self.subTest(source=source):
                is_valid, errors = check_arity(parse(tokenize(source)))
                self.assertTrue(is_valid, f"Valid program should pass: {errors}")

    def test_short_forms(self):
        for source in ["(+)", "(+ 1)", "(foo (+ 1))"]:
            with self.subTest(source=source):
                is_valid, errors = check_arity(parse(tokenize(source)))
                self.assertFalse(is_valid)
                self.assertGreater(len(errors), 0)


class TestLimits(unittest.TestCase):

    def test_depth(self):
        tree = parse(tokenize("((((1))))"))
        self.assertTrue(check_depth(tree, max_depth=6)[0])
        self.assertFalse(check_depth(tree, max_depth=5)[0])

    def test_node_count(self):
        tree = parse(tokenize("(+ 1 2)"))
        # root list, form list, three atoms
        self.assertTrue(check_node_count(tree, max_nodes=5)[0])
        self.assertFalse(check_node_count(tree, max_nodes=4)[0])


class TestVerifyProgram(unittest.TestCase):

    def test_valid_program(self):
        tokens = tokenize("(+ 1 2) (+ 3 4)")
        is_valid, errors = verify_program(tokens, parse(tokens))
        self.assertTrue(is_valid)
        self.assertEqual(errors, [])

    def test_errors_are_combined(self):
        tokens = tokenize("(+ 1")
        is_valid, errors = verify_program(tokens, parse(tokens))
        self.assertFalse(is_valid)
        self.assertEqual(len(errors), 2)

    def test_rejects_non_node(self):
        is_valid, errors = verify_program([], "not a tree")
        self.assertFalse(is_valid)


if __name__ == '__main__':
    unittest.main()
