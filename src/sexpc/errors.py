"""
sexpc Error Base
================

This module defines the root of the exception hierarchy for sexpc and
the source location record shared by tokens, AST nodes and errors.

Exception Hierarchy
-------------------
SexpcError (base)
└── CompilerError (see sexpc.compiler.errors)
    ├── CSyntaxError
    │   ├── UnrecognizedCharacterError
    │   ├── UnexpectedTokenError
    │   └── UnexpectedEndOfInputError
    └── UnknownNodeTypeError

Callers can catch every sexpc failure with a single except clause:

    try:
        output = compile(source)
    except SexpcError as e:
        print(e)
"""

from dataclasses import dataclass


# =============================================================================
# Base Exception Class
# =============================================================================

class SexpcError(Exception):
    """
    Base exception for all sexpc errors.

    Nothing raises SexpcError directly; it exists so that callers can
    distinguish compiler failures from unrelated Python errors.
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source code for error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"
