"""
Debug Printer Test Suite
========================

Tests for the token dump and the AST pretty printer used by the CLI.
"""

import pytest
from sexpc.compiler.lexer import tokenize
from sexpc.compiler.parser import parse
from sexpc.compiler.transformer import transform
from sexpc.compiler.printer import ASTPrinter, format_tokens
from sexpc.compiler.errors import UnknownNodeTypeError


class TestFormatTokens:
    """format_tokens() output."""

    def test_one_line_per_token(self):
        text = format_tokens(tokenize("(add 2)"))
        assert text.splitlines() == [
            "1:1      PAREN   '('",
            "1:2      NAME    'add'",
            "1:6      NUMBER  '2'",
            "1:7      PAREN   ')'",
        ]

    def test_empty(self):
        assert format_tokens([]) == ""


class TestASTPrinter:
    """ASTPrinter output for both AST families."""

    def test_source_ast(self):
        program = parse(tokenize("(add 2 (subtract 4 2))"))
        assert ASTPrinter().print(program) == "\n".join([
            "Program",
            "  CallExpression add",
            "    NumberLiteral 2",
            "    CallExpression subtract",
            "      NumberLiteral 4",
            "      NumberLiteral 2",
        ])

    def test_target_ast(self):
        program = transform(parse(tokenize("(add 2 (neg 4))")))
        assert ASTPrinter().print(program) == "\n".join([
            "Program",
            "  ExpressionStatement",
            "    CallExpression",
            "      Identifier add",
            "      NumberLiteral 2",
            "      CallExpression",
            "        Identifier neg",
            "        NumberLiteral 4",
        ])

    def test_sibling_top_level_nodes(self):
        program = parse(tokenize("1 (f)"))
        assert ASTPrinter().print(program).splitlines() == [
            "Program",
            "  NumberLiteral 1",
            "  CallExpression f",
        ]

    def test_custom_indent(self):
        program = parse(tokenize("(f 1)"))
        assert ASTPrinter(indent="\t").print(program) == "Program\n\tCallExpression f\n\t\tNumberLiteral 1"

    def test_unknown_node(self):
        with pytest.raises(UnknownNodeTypeError):
            ASTPrinter().print(["not", "a", "node"])
