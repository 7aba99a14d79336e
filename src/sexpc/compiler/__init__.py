"""
Call-Expression Compiler
========================

This package implements a source-to-source compiler from a small
parenthesized call language to C-like call syntax:

    (add 2 (subtract 4 2))    →    add(2, subtract(4, 2));

Pipeline
--------
    Source → Lexer → Parser → Transformer → Code Generator → Output
                               (Traverser)

- Lexer: text to a flat list of PAREN, NUMBER and NAME tokens
- Parser: tokens to the source AST (Program, CallExpression, NumberLiteral)
- Traverser: generic pre-order visitor dispatch over either AST
- Transformer: source AST to target AST, built on the traverser
- Code Generator: target AST to text

Language Subset
---------------
Supported: decimal digit literals and call expressions, nested to any
depth. Not supported: strings, symbols, conditionals, definitions.

Usage
-----
>>> from sexpc.compiler import compile
>>> compile("(add 2 2)\\n(subtract 4 2)")
'add(2, 2);\\nsubtract(4, 2);'
"""

from sexpc.compiler.compiler import Compiler, CompilerOptions, CompilerResult, compile
from sexpc.compiler.errors import (
    CompilerError,
    CSyntaxError,
    UnrecognizedCharacterError,
    UnexpectedTokenError,
    UnexpectedEndOfInputError,
    UnknownNodeTypeError,
)
from sexpc.compiler.lexer import Lexer, Token, TokenType, tokenize
from sexpc.compiler.parser import Parser, parse
from sexpc.compiler.traverser import Traverser, traverse
from sexpc.compiler.transformer import Transformer, transform
from sexpc.compiler.codegen import CodeGenerator, generate
from sexpc.compiler.printer import ASTPrinter, format_tokens

__all__ = [
    # Main API
    "Compiler",
    "CompilerOptions",
    "CompilerResult",
    "compile",
    # Errors
    "CompilerError",
    "CSyntaxError",
    "UnrecognizedCharacterError",
    "UnexpectedTokenError",
    "UnexpectedEndOfInputError",
    "UnknownNodeTypeError",
    # Stages
    "Lexer",
    "Token",
    "TokenType",
    "tokenize",
    "Parser",
    "parse",
    "Traverser",
    "traverse",
    "Transformer",
    "transform",
    "CodeGenerator",
    "generate",
    # Debugging
    "ASTPrinter",
    "format_tokens",
]
