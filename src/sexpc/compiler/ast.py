"""
Source Abstract Syntax Tree
===========================

Node types produced by the parser from the parenthesized call language.

Node Hierarchy
--------------
ASTNode (base)
├── Program - root node, one per compilation
├── CallExpression - (name param...)
└── NumberLiteral - digit run, kept as text

Design Notes
------------
- Nodes are created once by the parser and never modified afterwards.
  The transformer records its per-run bookkeeping in its own side
  table, never on the nodes.
- Each node stores its source location for error reporting. Locations
  are excluded from equality so trees can be compared structurally.
"""

from dataclasses import dataclass, field
from typing import Optional, Union

from sexpc.errors import SourceLocation


@dataclass
class ASTNode:
    """Base class for all source AST nodes."""
    pass


@dataclass
class NumberLiteral(ASTNode):
    """
    Numeric literal.

    Attributes:
        value: The digit text exactly as written
    """
    value: str
    location: Optional[SourceLocation] = field(default=None, compare=False, repr=False)


@dataclass
class CallExpression(ASTNode):
    """
    Call expression, written `(name param...)`.

    Attributes:
        name: The callee identifier
        params: Arguments, each a NumberLiteral or a nested CallExpression
    """
    name: str
    params: list["Expression"] = field(default_factory=list)
    location: Optional[SourceLocation] = field(default=None, compare=False, repr=False)


@dataclass
class Program(ASTNode):
    """
    Root node holding the top-level expressions in source order.

    Attributes:
        body: Zero or more top-level expressions
    """
    body: list["Expression"] = field(default_factory=list)
    location: Optional[SourceLocation] = field(default=None, compare=False, repr=False)


Expression = Union[NumberLiteral, CallExpression]
Node = Union[Program, NumberLiteral, CallExpression]
