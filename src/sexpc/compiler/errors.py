"""
Compiler Error Hierarchy
========================

Every error raised by the compiler stages inherits from CompilerError,
which itself inherits from SexpcError. All errors are fatal: the stage
that detects a problem raises immediately and the pipeline propagates
the exception unchanged.

Exception Hierarchy
-------------------
CompilerError (base for all compiler errors)
├── CSyntaxError - lexer and parser errors
│   ├── UnrecognizedCharacterError - character matches no token rule
│   ├── UnexpectedTokenError - token illegal at this grammar position
│   └── UnexpectedEndOfInputError - input ended inside an expression
└── UnknownNodeTypeError - node outside the set a component handles

Error Message Format
--------------------
    program.lisp:1:8: error: unrecognized character '#'
        (add 2 #)
               ^
    hint: only '(', ')', digits and letters are allowed
"""

from typing import Optional

from sexpc.errors import SexpcError, SourceLocation


# =============================================================================
# Base Compiler Exception
# =============================================================================

class CompilerError(SexpcError):
    """
    Base exception for all compiler errors.

    Attributes:
        message: The error description
        location: Where in the source the error occurred
        hint: A suggestion for fixing the error
        source_line: The actual source text at the error location
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

            program.lisp:1:8: error: unrecognized character '#'
                (add 2 #)
                       ^
            hint: only '(', ')', digits and letters are allowed
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        # Source context with caret pointer
        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            if self.location.column > 0:
                padding = " " * (4 + self.location.column - 1)
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


# =============================================================================
# Syntax Errors (Lexer and Parser)
# =============================================================================

class CSyntaxError(CompilerError):
    """
    Syntax error in source code.

    Raised when the lexer or parser meets input that cannot be tokenized
    or parsed. There is no recovery; compilation stops at the first one.
    """
    pass


class UnrecognizedCharacterError(CSyntaxError):
    """
    Character that matches no token rule.

    Attributes:
        char: The offending character
        position: Cursor offset of the character in the source text
    """

    def __init__(
        self,
        char: str,
        position: int,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.char = char
        self.position = position
        super().__init__(
            f"unrecognized character {char!r} at position {position}",
            location=location,
            hint="only '(', ')', digits and letters are allowed",
            source_line=source_line,
        )


class UnexpectedTokenError(CSyntaxError):
    """
    Token that is not legal at the current grammar position.

    Raised for a stray ')' or a bare name where a value is expected,
    and for anything other than a name directly after '('.

    Attributes:
        kind: The TokenType of the offending token
        found: The token's text
        position: Index of the token in the token sequence
        expected: Description of what the grammar wanted (optional)
    """

    def __init__(
        self,
        kind,
        found: str,
        position: int,
        expected: Optional[str] = None,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.kind = kind
        self.found = found
        self.position = position
        self.expected = expected

        hint = f"expected {expected}" if expected else None
        super().__init__(
            f"unexpected {kind.name.lower()} token {found!r} at position {position}",
            location=location,
            hint=hint,
            source_line=source_line,
        )


class UnexpectedEndOfInputError(CSyntaxError):
    """
    Input ended while the parser still needed a token.

    Attributes:
        position: Token index at which input ran out
        expected: Description of what the grammar wanted
    """

    def __init__(
        self,
        position: int,
        expected: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.position = position
        self.expected = expected
        super().__init__(
            f"unexpected end of input, expected {expected}",
            location=location,
            hint="check that every '(' has a matching ')'",
            source_line=source_line,
        )


# =============================================================================
# Tree Errors (Traverser, Code Generator, Printer)
# =============================================================================

class UnknownNodeTypeError(CompilerError):
    """
    Node whose type a component does not handle.

    Signals malformed input to that component, or a node kind that has
    not been wired into it yet. Never ignored silently.

    Attributes:
        node_type: Name of the offending node's class
        component: Which component rejected the node
    """

    def __init__(self, node: object, component: str):
        self.node_type = type(node).__name__
        self.component = component
        super().__init__(
            f"{component} cannot handle node type '{self.node_type}'",
            location=getattr(node, "location", None),
        )
