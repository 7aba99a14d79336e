"""
Lexer (Tokenizer)
=================

This module converts source text into a flat list of tokens for the
parser. The language has only three lexical elements:

| Kind   | Matches                 | Example value |
|--------|-------------------------|---------------|
| PAREN  | '(' or ')'              | '('           |
| NUMBER | maximal run of 0-9      | '42'          |
| NAME   | maximal run of a-z, A-Z | 'add'         |

Whitespace (any character of string.whitespace, so form feed and
vertical tab too) separates tokens and produces nothing. Numbers are
kept as text: the language performs no arithmetic, so the digit run is
carried through to the output verbatim.

Example Usage
-------------
>>> from sexpc.compiler.lexer import tokenize
>>> for token in tokenize("(add 2 3)"):
...     print(token)
Token(PAREN, '(', 1:1)
Token(NAME, 'add', 1:2)
Token(NUMBER, '2', 1:6)
Token(NUMBER, '3', 1:8)
Token(PAREN, ')', 1:9)
"""

from dataclasses import dataclass
from enum import Enum, auto
import string

from sexpc.errors import SourceLocation
from sexpc.compiler.errors import UnrecognizedCharacterError


# =============================================================================
# Token Type Enumeration
# =============================================================================

class TokenType(Enum):
    """Token kinds of the call-expression language."""

    PAREN = auto()      # ( or )
    NUMBER = auto()     # digit run
    NAME = auto()       # letter run


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single token from the source text.

    Attributes:
        type: The TokenType classification
        value: The literal text matched
        offset: Cursor index of the first character (0-indexed)
        line: Line number in source (1-indexed)
        column: Column number in source (1-indexed)
        filename: Name of the source file
    """
    type: TokenType
    value: str
    offset: int = 0
    line: int = 1
    column: int = 1
    filename: str = "<input>"

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r}, {self.line}:{self.column})"

    @property
    def location(self) -> SourceLocation:
        """Return a SourceLocation for error reporting."""
        return SourceLocation(self.filename, self.line, self.column)

    def is_paren(self, char: str) -> bool:
        """Return True if this is the given parenthesis."""
        return self.type == TokenType.PAREN and self.value == char


# =============================================================================
# Lexer
# =============================================================================

class Lexer:
    """
    Tokenizes source text with a single forward cursor.

    A Lexer is not resumable: calling tokenize() always scans from the
    start of the source. On the first unrecognized character it raises
    and no tokens are returned.

    Usage:
        lexer = Lexer(source_text, filename)
        tokens = lexer.tokenize()

    Attributes:
        source: The source text being tokenized
        filename: Name of the source file (for error reporting)
    """

    # ASCII whitespace, including form feed and vertical tab
    WHITESPACE = string.whitespace
    DIGITS = string.digits
    LETTERS = string.ascii_letters

    def __init__(self, source: str, filename: str = "<input>"):
        self.source = source
        self.filename = filename
        self._reset()

    def _reset(self) -> None:
        self._pos = 0
        self._line = 1
        self._column = 1
        self._line_start_pos = 0

    def tokenize(self) -> list[Token]:
        """
        Scan the whole source into tokens.

        Returns:
            Tokens in left-to-right order

        Raises:
            UnrecognizedCharacterError: On any character outside the
                token rules
        """
        self._reset()
        tokens: list[Token] = []

        while not self._at_end():
            char = self._peek()

            if char in self.WHITESPACE:
                self._advance()
                continue

            start = (self._pos, self._line, self._column)

            if char in "()":
                self._advance()
                tokens.append(self._make_token(TokenType.PAREN, char, *start))
                continue

            if char in self.DIGITS:
                value = self._scan_run(self.DIGITS)
                tokens.append(self._make_token(TokenType.NUMBER, value, *start))
                continue

            if char in self.LETTERS:
                value = self._scan_run(self.LETTERS)
                tokens.append(self._make_token(TokenType.NAME, value, *start))
                continue

            raise UnrecognizedCharacterError(
                char,
                self._pos,
                SourceLocation(self.filename, self._line, self._column),
                self._get_current_line(),
            )

        return tokens

    # =========================================================================
    # Character Access Methods
    # =========================================================================

    def _at_end(self) -> bool:
        return self._pos >= len(self.source)

    def _peek(self) -> str:
        """Current character, or empty string past the end."""
        if self._at_end():
            return ""
        return self.source[self._pos]

    def _advance(self) -> str:
        """Consume the current character, updating line and column."""
        char = self.source[self._pos]
        self._pos += 1

        if char == "\n":
            self._line += 1
            self._column = 1
            self._line_start_pos = self._pos
        else:
            self._column += 1

        return char

    def _scan_run(self, charset: str) -> str:
        """Consume the maximal run of characters drawn from charset."""
        start = self._pos
        while self._peek() and self._peek() in charset:
            self._advance()
        return self.source[start:self._pos]

    def _make_token(
        self,
        token_type: TokenType,
        value: str,
        offset: int,
        line: int,
        column: int,
    ) -> Token:
        return Token(
            type=token_type,
            value=value,
            offset=offset,
            line=line,
            column=column,
            filename=self.filename,
        )

    def _get_current_line(self) -> str:
        """Get the current line of source text for error reporting."""
        line_end = self.source.find("\n", self._line_start_pos)
        if line_end == -1:
            line_end = len(self.source)
        return self.source[self._line_start_pos:line_end]


# =============================================================================
# Convenience Functions
# =============================================================================

def tokenize(source: str, filename: str = "<input>") -> list[Token]:
    """Tokenize source text. See Lexer.tokenize()."""
    return Lexer(source, filename).tokenize()
