"""
AST Transformer
===============

Builds the target AST from the source AST by running the traverser
with two callbacks.

    Source                          Target
    ------                          ------
    Program                         Program
      CallExpression add              ExpressionStatement
        NumberLiteral 2                 CallExpression
        CallExpression subtract           Identifier add
          NumberLiteral 4                 NumberLiteral 2
          NumberLiteral 2                 CallExpression
                                            Identifier subtract
                                            NumberLiteral 4
                                            NumberLiteral 2

Context Table
-------------
Each callback must know where in the new tree its output belongs. The
transformer keeps a table, local to one transform() call, mapping the
id() of a source node to the target list that receives that node's
translated children:

    id(source Program)         -> target Program.body
    id(source CallExpression)  -> its target CallExpression.arguments

The traversal is pre-order, so a call's entry is registered by its own
callback before any of its params are visited. The source tree is
never modified.
"""

import logging
from typing import Optional

from sexpc.compiler import ast
from sexpc.compiler import target
from sexpc.compiler.traverser import traverse


logger = logging.getLogger(__name__)


class Transformer:
    """
    Source AST to target AST transformer.

    A Transformer holds no state between calls; each transform() builds
    a fresh context table and discards it on return.
    """

    def transform(self, program: ast.Program) -> target.Program:
        """
        Translate a source Program into a target Program.

        Raises:
            UnknownNodeTypeError: Propagated from the traverser
        """
        new_program = target.Program()
        context: dict[int, list] = {id(program): new_program.body}

        def on_number(node: ast.NumberLiteral, parent: Optional[ast.ASTNode]) -> None:
            context[id(parent)].append(target.NumberLiteral(value=node.value))

        def on_call(node: ast.CallExpression, parent: Optional[ast.ASTNode]) -> None:
            expression = target.CallExpression(
                callee=target.Identifier(name=node.name),
                arguments=[],
            )
            context[id(node)] = expression.arguments

            # Only calls nested inside other calls stay bare
            result = expression
            if not isinstance(parent, ast.CallExpression):
                result = target.ExpressionStatement(expression=expression)

            context[id(parent)].append(result)

        traverse(program, {
            ast.NumberLiteral: on_number,
            ast.CallExpression: on_call,
        })

        logger.debug(f"Transformed {len(context) - 1} call expressions")
        return new_program


def transform(program: ast.Program) -> target.Program:
    """Translate a source Program. See Transformer.transform()."""
    return Transformer().transform(program)
