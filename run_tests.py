#!/usr/bin/env python3
"""
Main test runner for the Lox front end.

Author: xwest
"""

import sys
import os
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)


def run_smoke_test() -> bool:
    """Scan a small program and print a tree, reporting each step."""

    print("🚀 Lox Front End Test Suite")
    print("=" * 60)

    try:
        from lox.lexer import Scanner, Token, TokenType
        from lox.syntax import ASTPrinter, Binary, Grouping, Literal, LiteralValue, Unary

        print("✅ All modules imported successfully")
        print()
    except ImportError as e:
        print(f"❌ Failed to import modules: {e}")
        return False

    code = """
    fun add(a, b) {
        return a + b;
    }

    print add(1, 2.5) >= 3; // comparison
    """

    print("  🔧 Scanning...")
    scanner = Scanner(code, "<smoke>")
    tokens = scanner.scan_tokens()
    print(f"     Generated {len(tokens)} tokens")
    if scanner.has_errors():
        print(f"     ❌ Lexical errors: {len(scanner.errors)}")
        for error in scanner.errors:
            print(f"        {error.message}")
        return False

    print("  🔧 Printing...")
    expr = Binary(
        Unary(Token(TokenType.MINUS, "-", None, 1), Literal(LiteralValue.number(123))),
        Token(TokenType.STAR, "*", None, 1),
        Grouping(Literal(LiteralValue.number(45.67))),
    )
    rendered = ASTPrinter().print(expr)
    print(f"     {rendered}")
    if rendered != "(* (- 123) (group 45.67))":
        print("     ❌ Unexpected printer output")
        return False

    print()
    print("✅ Smoke test PASSED")
    print()
    return True


def run_all_tests() -> bool:
    """Run the smoke test and then every unittest under tests/."""
    if not run_smoke_test():
        return False

    suite = unittest.defaultTestLoader.discover(os.path.join(project_root, "tests"))
    result = unittest.TextTestRunner(verbosity=2).run(suite)
    return result.wasSuccessful()


if __name__ == "__main__":
    sys.exit(0 if run_all_tests() else 1)
