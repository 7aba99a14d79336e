"""
Code Generator
==============

Renders a target AST node as C-like source text.

| Node                | Output                               |
|---------------------|--------------------------------------|
| Program             | body rendered, joined by newlines    |
| ExpressionStatement | expression followed by ';'           |
| CallExpression      | callee '(' arguments joined ', ' ')' |
| Identifier          | name                                 |
| NumberLiteral       | value, verbatim                      |

Generation is a pure recursive function of the node: no state is kept
between calls, so one CodeGenerator may be shared freely.

Example Usage
-------------
>>> from sexpc.compiler import target
>>> call = target.CallExpression(target.Identifier("add"),
...                              [target.NumberLiteral("2")])
>>> CodeGenerator().generate(target.ExpressionStatement(call))
'add(2);'
"""

from sexpc.compiler import target
from sexpc.compiler.errors import UnknownNodeTypeError


class CodeGenerator:
    """Target AST to text renderer."""

    def generate(self, node: target.Node) -> str:
        """
        Render node and its descendants.

        Raises:
            UnknownNodeTypeError: If node is not one of the five target
                node types (source AST nodes included)
        """
        if isinstance(node, target.Program):
            return "\n".join(self.generate(child) for child in node.body)

        if isinstance(node, target.ExpressionStatement):
            return self.generate(node.expression) + ";"

        if isinstance(node, target.CallExpression):
            args = ", ".join(self.generate(arg) for arg in node.arguments)
            return f"{self.generate(node.callee)}({args})"

        if isinstance(node, target.Identifier):
            return node.name

        if isinstance(node, target.NumberLiteral):
            return node.value

        raise UnknownNodeTypeError(node, "code generator")


def generate(node: target.Node) -> str:
    """Render a target AST node. See CodeGenerator.generate()."""
    return CodeGenerator().generate(node)
