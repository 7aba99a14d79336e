# =============================================================================
# test_lexer.py - Lexer Unit Tests
# =============================================================================
# Tests for the call-expression lexer/tokenizer.
#
# Test coverage includes:
#   - Parentheses, digit runs and letter runs
#   - Maximal munch and whitespace handling
#   - Offsets, line and column tracking
#   - Error conditions (unrecognized characters)
# =============================================================================

import pytest
from sexpc.compiler.lexer import Lexer, TokenType, Token, tokenize
from sexpc.compiler.errors import UnrecognizedCharacterError, CSyntaxError
from sexpc.errors import SexpcError, SourceLocation


# =============================================================================
# Helper Function
# =============================================================================

def kinds_and_values(source: str) -> list[tuple[TokenType, str]]:
    """Tokenize and strip location metadata for compact assertions."""
    return [(t.type, t.value) for t in tokenize(source)]


# =============================================================================
# Basic Token Recognition Tests
# =============================================================================

class TestBasicTokens:
    """Test basic token recognition for simple inputs."""

    def test_empty_source(self):
        """Empty source produces no tokens."""
        assert tokenize("") == []

    def test_whitespace_only(self):
        """Whitespace produces no tokens."""
        assert tokenize("  \t\r\n  \n") == []

    def test_form_feed_and_vertical_tab_are_whitespace(self):
        """Every ASCII whitespace character separates tokens."""
        assert kinds_and_values("(add\f2\v2)") == [
            (TokenType.PAREN, "("),
            (TokenType.NAME, "add"),
            (TokenType.NUMBER, "2"),
            (TokenType.NUMBER, "2"),
            (TokenType.PAREN, ")"),
        ]

    def test_parens(self):
        """Each parenthesis is its own PAREN token."""
        assert kinds_and_values("()") == [
            (TokenType.PAREN, "("),
            (TokenType.PAREN, ")"),
        ]

    def test_number(self):
        """A digit run is one NUMBER token, kept as text."""
        tokens = tokenize("42")
        assert len(tokens) == 1
        assert tokens[0].type == TokenType.NUMBER
        assert tokens[0].value == "42"

    def test_number_leading_zeros_preserved(self):
        """Numbers are not reformatted."""
        assert tokenize("007")[0].value == "007"

    def test_name(self):
        """A letter run is one NAME token."""
        tokens = tokenize("subtract")
        assert len(tokens) == 1
        assert tokens[0].type == TokenType.NAME
        assert tokens[0].value == "subtract"

    def test_mixed_case_name(self):
        """Upper and lower case letters both belong to names."""
        assert kinds_and_values("addAll") == [(TokenType.NAME, "addAll")]

    def test_call_expression(self):
        """A nested call produces a flat token list."""
        assert kinds_and_values("(add 2 (subtract 4 2))") == [
            (TokenType.PAREN, "("),
            (TokenType.NAME, "add"),
            (TokenType.NUMBER, "2"),
            (TokenType.PAREN, "("),
            (TokenType.NAME, "subtract"),
            (TokenType.NUMBER, "4"),
            (TokenType.NUMBER, "2"),
            (TokenType.PAREN, ")"),
            (TokenType.PAREN, ")"),
        ]


# =============================================================================
# Maximal Munch Tests
# =============================================================================

class TestMaximalRuns:
    """Digit and letter runs end at the first character of another class."""

    def test_digits_then_letters(self):
        assert kinds_and_values("12ab") == [
            (TokenType.NUMBER, "12"),
            (TokenType.NAME, "ab"),
        ]

    def test_letters_then_digits(self):
        assert kinds_and_values("abc123") == [
            (TokenType.NAME, "abc"),
            (TokenType.NUMBER, "123"),
        ]

    def test_no_whitespace_needed_around_parens(self):
        assert kinds_and_values("(f(g))") == [
            (TokenType.PAREN, "("),
            (TokenType.NAME, "f"),
            (TokenType.PAREN, "("),
            (TokenType.NAME, "g"),
            (TokenType.PAREN, ")"),
            (TokenType.PAREN, ")"),
        ]


# =============================================================================
# Position Tracking Tests
# =============================================================================

class TestPositions:
    """Offsets, lines and columns recorded on each token."""

    def test_offsets_and_columns(self):
        tokens = tokenize("(add 2 3)")
        assert [t.offset for t in tokens] == [0, 1, 5, 7, 8]
        assert [t.column for t in tokens] == [1, 2, 6, 8, 9]
        assert all(t.line == 1 for t in tokens)

    def test_lines(self):
        tokens = tokenize("(add 2 2)\n  (subtract 4 2)")
        second_open = tokens[5]
        assert second_open.value == "("
        assert second_open.line == 2
        assert second_open.column == 3
        assert second_open.offset == 12

    def test_location_property(self):
        token = tokenize("  7", "prog.lisp")[0]
        assert token.location == SourceLocation("prog.lisp", 1, 3)

    def test_repr(self):
        assert repr(tokenize("add")[0]) == "Token(NAME, 'add', 1:1)"

    def test_tokens_are_immutable(self):
        token = tokenize("1")[0]
        with pytest.raises(AttributeError):
            token.value = "2"


# =============================================================================
# Lexer Object Tests
# =============================================================================

class TestLexerObject:
    """The Lexer class interface."""

    def test_tokenize_restarts_from_scratch(self):
        """Calling tokenize() twice scans the whole input both times."""
        lexer = Lexer("(add 1 2)")
        first = lexer.tokenize()
        second = lexer.tokenize()
        assert first == second
        assert len(first) == 5

    def test_filename_recorded(self):
        tokens = Lexer("(a)", "demo.lisp").tokenize()
        assert all(t.filename == "demo.lisp" for t in tokens)

    def test_is_paren(self):
        open_paren, name, close_paren = tokenize("(f)")
        assert open_paren.is_paren("(")
        assert not open_paren.is_paren(")")
        assert close_paren.is_paren(")")
        assert not name.is_paren("(")


# =============================================================================
# Error Tests
# =============================================================================

class TestErrors:
    """Characters outside the token rules."""

    def test_unrecognized_character(self):
        """'#' is rejected with its character and cursor position."""
        with pytest.raises(UnrecognizedCharacterError) as exc_info:
            tokenize("(add 2 #)")
        error = exc_info.value
        assert error.char == "#"
        assert error.position == 7
        assert error.location == SourceLocation("<input>", 1, 8)

    def test_error_hierarchy(self):
        with pytest.raises(CSyntaxError):
            tokenize("@")
        with pytest.raises(SexpcError):
            tokenize("@")

    @pytest.mark.parametrize("char", ['"', "'", "-", "+", ".", "_", "[", ";", "é"])
    def test_other_characters_rejected(self, char):
        with pytest.raises(UnrecognizedCharacterError) as exc_info:
            tokenize(f"(f {char})")
        assert exc_info.value.char == char
        assert exc_info.value.position == 3

    def test_unicode_digit_rejected(self):
        """Only ASCII digits form numbers."""
        with pytest.raises(UnrecognizedCharacterError):
            tokenize("٣")

    def test_error_on_later_line(self):
        with pytest.raises(UnrecognizedCharacterError) as exc_info:
            tokenize("(a 1)\n(b $)")
        error = exc_info.value
        assert error.position == 9
        assert error.location.line == 2
        assert error.location.column == 4

    def test_error_message_shows_source_line(self):
        with pytest.raises(UnrecognizedCharacterError) as exc_info:
            tokenize("(add 2 #)", "prog.lisp")
        lines = str(exc_info.value).splitlines()
        assert lines[0] == "prog.lisp:1:8: error: unrecognized character '#' at position 7"
        assert lines[1] == "    (add 2 #)"
        assert lines[2] == "           ^"
        assert lines[3].startswith("hint:")
