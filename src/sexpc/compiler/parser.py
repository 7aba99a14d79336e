"""
Recursive Descent Parser
========================

This module builds the source AST from the token list produced by the
lexer.

Grammar (EBNF)
--------------
program     ::= expression*
expression  ::= NUMBER | call
call        ::= '(' NAME expression* ')'

Parsing is a single recursive procedure, walk(), which consumes exactly
one expression starting at the cursor. The top level calls walk()
until the cursor reaches the end of the token list, collecting one
node per call into Program.body.

Nesting is handled by native recursion with no explicit depth limit.
Stack depth grows with the nesting depth of the input.

Example Usage
-------------
>>> from sexpc.compiler.lexer import tokenize
>>> from sexpc.compiler.parser import Parser
>>> ast = Parser(tokenize("(add 2 (subtract 4 2))")).parse()
>>> ast.body[0].name
'add'
"""

from typing import Optional

from sexpc.errors import SourceLocation
from sexpc.compiler.lexer import Token, TokenType
from sexpc.compiler.ast import Program, CallExpression, NumberLiteral, Expression
from sexpc.compiler.errors import UnexpectedTokenError, UnexpectedEndOfInputError


class Parser:
    """
    Recursive descent parser for the call-expression language.

    There is no error recovery: the first grammar violation raises and
    no partial tree is returned.

    Attributes:
        tokens: List of tokens to parse
        filename: Source filename for error reporting
    """

    def __init__(
        self,
        tokens: list[Token],
        filename: str = "<input>",
        source_lines: Optional[list[str]] = None,
    ):
        """
        Initialize the parser.

        Args:
            tokens: List of tokens from the lexer
            filename: Source filename for error messages
            source_lines: Original source lines for error context
        """
        self.tokens = tokens
        self.filename = filename
        self.source_lines = source_lines or []

        # Current position in token stream
        self._pos = 0

    def parse(self) -> Program:
        """
        Parse the token list into a Program.

        Returns:
            Program whose body holds one node per top-level expression

        Raises:
            UnexpectedTokenError: If a token is illegal where it appears
            UnexpectedEndOfInputError: If input ends inside a call
        """
        self._pos = 0
        body = []

        while not self._at_end():
            body.append(self._walk())

        return Program(
            body=body,
            location=SourceLocation(self.filename, 1, 1),
        )

    # =========================================================================
    # Grammar
    # =========================================================================

    def _walk(self) -> Expression:
        """Consume one expression at the cursor and return its node."""
        token = self._current("a number or '('")

        if token.type == TokenType.NUMBER:
            self._advance()
            return NumberLiteral(value=token.value, location=token.location)

        if token.is_paren("("):
            self._advance()
            return self._parse_call(token)

        raise self._unexpected(token, "a number or '('")

    def _parse_call(self, open_paren: Token) -> CallExpression:
        """Parse the remainder of a call after its opening paren."""
        name_token = self._current("a callee name")
        if name_token.type != TokenType.NAME:
            raise self._unexpected(name_token, "a callee name after '('")
        self._advance()

        node = CallExpression(name=name_token.value, location=open_paren.location)

        # Nested calls advance the cursor through their own walk()
        while not self._current("')'").is_paren(")"):
            node.params.append(self._walk())

        self._advance()  # consume ')'
        return node

    # =========================================================================
    # Token Access Methods
    # =========================================================================

    def _at_end(self) -> bool:
        return self._pos >= len(self.tokens)

    def _current(self, expected: str) -> Token:
        """
        Return the token at the cursor without consuming it.

        Args:
            expected: What the grammar needs here, for the error message

        Raises:
            UnexpectedEndOfInputError: If the cursor is past the last token
        """
        if self._at_end():
            raise self._end_of_input(expected)
        return self.tokens[self._pos]

    def _advance(self) -> Token:
        token = self.tokens[self._pos]
        self._pos += 1
        return token

    # =========================================================================
    # Error Construction
    # =========================================================================

    def _get_source_line(self, line: int) -> Optional[str]:
        if 0 < line <= len(self.source_lines):
            return self.source_lines[line - 1]
        return None

    def _unexpected(self, token: Token, expected: str) -> UnexpectedTokenError:
        return UnexpectedTokenError(
            token.type,
            token.value,
            self._pos,
            expected=expected,
            location=token.location,
            source_line=self._get_source_line(token.line),
        )

    def _end_of_input(self, expected: str) -> UnexpectedEndOfInputError:
        # Point just past the last token
        location = None
        source_line = None
        if self.tokens:
            last = self.tokens[-1]
            location = SourceLocation(
                last.filename, last.line, last.column + len(last.value)
            )
            source_line = self._get_source_line(last.line)
        return UnexpectedEndOfInputError(
            self._pos,
            expected,
            location=location,
            source_line=source_line,
        )


def parse(
    tokens: list[Token],
    filename: str = "<input>",
    source_lines: Optional[list[str]] = None,
) -> Program:
    """Parse tokens into a Program. See Parser.parse()."""
    return Parser(tokens, filename, source_lines).parse()
