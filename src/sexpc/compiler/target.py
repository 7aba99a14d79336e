"""
Target Abstract Syntax Tree
===========================

Node types for the C-like output language, built by the transformer
and consumed by the code generator.

Node Hierarchy
--------------
TargetNode (base)
├── Program - root node
├── ExpressionStatement - top-level call followed by ';'
├── CallExpression - callee(arguments...)
├── Identifier - callee name
└── NumberLiteral - digit text

The shape mirrors the source tree with two differences: the callee is
an Identifier node rather than a plain string, and calls whose source
parent was the Program are wrapped in an ExpressionStatement.
"""

from dataclasses import dataclass, field
from typing import Union


@dataclass
class TargetNode:
    """Base class for all target AST nodes."""
    pass


@dataclass
class Identifier(TargetNode):
    """Name reference. Only used as a call's callee."""
    name: str


@dataclass
class NumberLiteral(TargetNode):
    """Numeric literal, value rendered verbatim."""
    value: str


@dataclass
class CallExpression(TargetNode):
    """
    Function call.

    Attributes:
        callee: The function being called
        arguments: Argument expressions in order
    """
    callee: Identifier
    arguments: list["Expression"] = field(default_factory=list)


@dataclass
class ExpressionStatement(TargetNode):
    """Statement wrapping a top-level expression."""
    expression: "Expression"


@dataclass
class Program(TargetNode):
    """
    Root node holding statements in source order.

    A bare top-level number is carried over unwrapped; only calls are
    wrapped in an ExpressionStatement.
    """
    body: list[Union[ExpressionStatement, "Expression"]] = field(default_factory=list)


Expression = Union[NumberLiteral, CallExpression]
Node = Union[Program, ExpressionStatement, CallExpression, Identifier, NumberLiteral]
