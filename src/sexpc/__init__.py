"""
sexpc - Call-Expression Source-to-Source Compiler
=================================================

Compiles programs written as parenthesized call expressions into the
equivalent C-like call syntax.

Quick Start
-----------
    >>> from sexpc import compile
    >>> compile("(add 2 (subtract 4 2))")
    'add(2, subtract(4, 2));'

Inspect the intermediate stages:
    >>> from sexpc import Compiler
    >>> result = Compiler().compile_source("(add 2 2)")
    >>> result.token_count
    5

Or use the command-line tool:
    $ sexpc program.lisp -o program.c
    $ sexpc --ast program.lisp
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from sexpc.errors import SexpcError, SourceLocation
from sexpc.compiler import (
    Compiler,
    CompilerOptions,
    CompilerResult,
    compile,
    CompilerError,
    CSyntaxError,
    UnrecognizedCharacterError,
    UnexpectedTokenError,
    UnexpectedEndOfInputError,
    UnknownNodeTypeError,
    Lexer,
    Token,
    TokenType,
    tokenize,
    Parser,
    parse,
    Traverser,
    traverse,
    Transformer,
    transform,
    CodeGenerator,
    generate,
    ASTPrinter,
    format_tokens,
)

__all__ = [
    "__version__",
    "SexpcError",
    "SourceLocation",
    "Compiler",
    "CompilerOptions",
    "CompilerResult",
    "compile",
    "CompilerError",
    "CSyntaxError",
    "UnrecognizedCharacterError",
    "UnexpectedTokenError",
    "UnexpectedEndOfInputError",
    "UnknownNodeTypeError",
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
    "ASTPrinter",
    "format_tokens",
]
