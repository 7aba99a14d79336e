"""
Debug Printers
==============

Human-readable dumps of the token list and of either AST family, used
by the `sexpc --tokens`, `--ast` and `--target-ast` options.

    Program
      ExpressionStatement
        CallExpression
          Identifier add
          NumberLiteral 2
"""

from typing import Any

from sexpc.compiler import ast
from sexpc.compiler import target
from sexpc.compiler.lexer import Token
from sexpc.compiler.traverser import traverse
from sexpc.compiler.errors import UnknownNodeTypeError


def format_tokens(tokens: list[Token]) -> str:
    """One line per token: position, kind and value."""
    lines = []
    for token in tokens:
        position = f"{token.line}:{token.column}"
        lines.append(f"{position:<8} {token.type.name:<7} {token.value!r}")
    return "\n".join(lines)


class ASTPrinter:
    """
    Pretty printer for AST debugging.

    Walks the tree with the traverser, so any node the traverser accepts
    can be printed. Depth is tracked per node through the parent link.

    Usage:
        printer = ASTPrinter()
        output = printer.print(ast)
        print(output)
    """

    def __init__(self, indent: str = "  "):
        self.indent = indent

    def print(self, node: Any) -> str:
        """Print the tree rooted at node and return it as a string."""
        output: list[str] = []
        depth: dict[int, int] = {}

        def emit(current: Any, parent: Any) -> None:
            level = 0 if parent is None else depth[id(parent)] + 1
            depth[id(current)] = level
            output.append(f"{self.indent * level}{self._describe(current)}")

        visitor = {
            node_type: emit
            for node_type in (
                ast.Program,
                ast.CallExpression,
                ast.NumberLiteral,
                target.Program,
                target.ExpressionStatement,
                target.CallExpression,
                target.Identifier,
                target.NumberLiteral,
            )
        }
        traverse(node, visitor)
        return "\n".join(output)

    def _describe(self, node: Any) -> str:
        """Single-line label for a node."""
        name = type(node).__name__
        if isinstance(node, ast.CallExpression):
            return f"{name} {node.name}"
        if isinstance(node, target.Identifier):
            return f"{name} {node.name}"
        if isinstance(node, (ast.NumberLiteral, target.NumberLiteral)):
            return f"{name} {node.value}"
        if isinstance(node, (
            ast.Program,
            target.Program,
            target.ExpressionStatement,
            target.CallExpression,
        )):
            return name
        raise UnknownNodeTypeError(node, "AST printer")
