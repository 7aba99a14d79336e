"""
Generic AST Traverser
=====================

Depth-first, pre-order walker over either AST family, driven by a
visitor: a mapping from node class to a callback.

    traverse(program, {
        CallExpression: on_call,
        NumberLiteral: on_number,
    })

For every node visited, the callback registered for its class (if any)
is invoked as callback(node, parent) before the node's children are
visited. Callback return values are ignored; callbacks act by side
effect. The root is visited with parent=None.

The traverser knows nothing about compilation. It only knows which
fields hold the children of each node class:

| Node class                  | Children visited, in order   |
|-----------------------------|------------------------------|
| ast.Program                 | body                         |
| ast.CallExpression          | params                       |
| ast.NumberLiteral           | (none)                       |
| target.Program              | body                         |
| target.ExpressionStatement  | expression                   |
| target.CallExpression       | callee, then arguments       |
| target.Identifier           | (none)                       |
| target.NumberLiteral        | (none)                       |

Any other node raises UnknownNodeTypeError.
"""

from typing import Any, Callable, Mapping, Optional

from sexpc.compiler import ast
from sexpc.compiler import target
from sexpc.compiler.errors import UnknownNodeTypeError


Callback = Callable[[Any, Optional[Any]], Any]
Visitor = Mapping[type, Callback]


class Traverser:
    """
    Pre-order visitor dispatch engine.

    Usage:
        Traverser(visitor).traverse(root)

    Attributes:
        visitor: Mapping from node class to callback(node, parent)
    """

    def __init__(self, visitor: Visitor):
        self.visitor = visitor

    def traverse(self, root: Any) -> None:
        """
        Walk the tree rooted at root.

        Raises:
            UnknownNodeTypeError: On a node class outside both AST families
        """
        self._traverse_node(root, None)

    def _traverse_node(self, node: Any, parent: Optional[Any]) -> None:
        children = self._children(node)

        callback = self.visitor.get(type(node))
        if callback is not None:
            callback(node, parent)

        for child in children:
            self._traverse_node(child, node)

    def _children(self, node: Any) -> list:
        """Children of node, in visiting order."""
        if isinstance(node, (ast.Program, target.Program)):
            return node.body
        if isinstance(node, ast.CallExpression):
            return node.params
        if isinstance(node, target.CallExpression):
            return [node.callee, *node.arguments]
        if isinstance(node, target.ExpressionStatement):
            return [node.expression]
        if isinstance(node, (ast.NumberLiteral, target.NumberLiteral, target.Identifier)):
            return []
        raise UnknownNodeTypeError(node, "traverser")


def traverse(root: Any, visitor: Visitor) -> None:
    """Walk root with the given visitor. See Traverser."""
    Traverser(visitor).traverse(root)
