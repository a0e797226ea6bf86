# Copyright 2026 Bring Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the Bring character scanner."""

import pytest

from bring.parser.errors import (
    ExpectedIdentifierError,
    ExpectedLiteralError,
    InvalidNumberError,
    UnexpectedCharacterError,
    UnexpectedEofError,
    UnterminatedStringError,
)
from bring.parser.scanner import EOF, Location, Scanner

# ###############
# Cursor Navigation
# ###############


class TestCursor:
    def test_initial_position(self) -> None:
        scanner = Scanner("abc")
        assert scanner.location() == Location(offset=0, line=1, column=1)

    def test_peek_does_not_consume(self) -> None:
        scanner = Scanner("ab")
        assert scanner.peek() == "a"
        assert scanner.peek() == "a"
        assert scanner.offset == 0

    def test_advance_returns_and_consumes(self) -> None:
        scanner = Scanner("ab")
        assert scanner.advance() == "a"
        assert scanner.peek() == "b"
        assert scanner.column == 2

    def test_newline_resets_column_and_increments_line(self) -> None:
        scanner = Scanner("a\nb")
        scanner.advance()
        scanner.advance()
        assert scanner.location() == Location(offset=2, line=2, column=1)

    def test_peek_at_eof_returns_sentinel(self) -> None:
        scanner = Scanner("")
        assert scanner.is_eof()
        assert scanner.peek() == EOF

    def test_advance_at_eof_is_noop(self) -> None:
        scanner = Scanner("x")
        scanner.advance()
        assert scanner.advance() == EOF
        assert scanner.location() == Location(offset=1, line=1, column=2)

    def test_peek_at_distance(self) -> None:
        scanner = Scanner("abc")
        assert scanner.peek_at(2) == "c"
        assert scanner.peek_at(3) == EOF


# ###############
# Literal Matching
# ###############


class TestLiterals:
    def test_match_literal_consumes_on_success(self) -> None:
        scanner = Scanner("schema User")
        assert scanner.match_literal("schema")
        assert scanner.offset == 6
        assert scanner.column == 7

    def test_match_literal_leaves_cursor_on_failure(self) -> None:
        scanner = Scanner("scheme")
        assert not scanner.match_literal("schema")
        assert scanner.offset == 0

    def test_match_literal_across_newline_updates_line(self) -> None:
        scanner = Scanner("a\nb")
        assert scanner.match_literal("a\nb")
        assert scanner.line == 2
        assert scanner.column == 2

    def test_expect_literal_raises_with_location(self) -> None:
        scanner = Scanner("  x")
        scanner.skip_whitespace()
        with pytest.raises(ExpectedLiteralError) as exc_info:
            scanner.expect_literal("=")
        err = exc_info.value
        assert err.literal == "="
        assert (err.line, err.column, err.offset) == (1, 3, 2)

    def test_expect_literal_at_eof_raises_unexpected_eof(self) -> None:
        with pytest.raises(UnexpectedEofError):
            Scanner("").expect_literal("}")


# ###############
# Whitespace and Comments
# ###############


class TestSkipping:
    def test_skip_whitespace_counts_lines(self) -> None:
        scanner = Scanner(" \t\r\n  \nx")
        scanner.skip_whitespace()
        assert scanner.peek() == "x"
        assert scanner.line == 3
        assert scanner.column == 1

    def test_skip_comment_stops_before_newline(self) -> None:
        scanner = Scanner("# note\nx")
        scanner.skip_comment()
        assert scanner.peek() == "\n"

    def test_skip_comment_to_eof(self) -> None:
        scanner = Scanner("# trailing")
        scanner.skip_comment()
        assert scanner.is_eof()

    def test_skip_comment_requires_hash(self) -> None:
        with pytest.raises(ExpectedLiteralError):
            Scanner("x").skip_comment()

    def test_skip_trivia_handles_interleaving(self) -> None:
        scanner = Scanner("  # one\n\n# two\n   value")
        scanner.skip_trivia()
        assert scanner.peek() == "v"
        assert scanner.line == 4


# ###############
# Strings
# ###############


class TestStrings:
    def test_double_quoted(self) -> None:
        assert Scanner('"hello"').read_string() == "hello"

    def test_single_quoted(self) -> None:
        assert Scanner("'hello'").read_string() == "hello"

    def test_other_quote_inside_is_literal(self) -> None:
        assert Scanner("'say \"hi\"'").read_string() == 'say "hi"'

    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            (r'"a\nb"', "a\nb"),
            (r'"a\tb"', "a\tb"),
            (r'"a\rb"', "a\rb"),
            (r'"a\\b"', "a\\b"),
            (r'"a\"b"', 'a"b'),
            (r"'a\'b'", "a'b"),
        ],
    )
    def test_known_escapes(self, source: str, expected: str) -> None:
        assert Scanner(source).read_string() == expected

    def test_unknown_escape_passes_through(self) -> None:
        assert Scanner(r'"a\qb"').read_string() == "aqb"

    def test_multiline_string(self) -> None:
        scanner = Scanner('"a\nb" x')
        assert scanner.read_string() == "a\nb"
        assert scanner.line == 2

    def test_cursor_after_closing_quote(self) -> None:
        scanner = Scanner('"ab" rest')
        scanner.read_string()
        assert scanner.peek() == " "
        assert scanner.column == 5

    def test_unterminated_string(self) -> None:
        with pytest.raises(UnterminatedStringError) as exc_info:
            Scanner('"abc').read_string()
        assert (exc_info.value.line, exc_info.value.column, exc_info.value.offset) == (1, 5, 4)
        assert "opened at line 1, column 1" in exc_info.value.message

    def test_unterminated_after_trailing_backslash(self) -> None:
        with pytest.raises(UnterminatedStringError):
            Scanner('"abc\\').read_string()

    def test_mismatched_quotes_are_unterminated(self) -> None:
        with pytest.raises(UnterminatedStringError):
            Scanner("\"abc'").read_string()

    def test_unterminated_is_an_eof_error(self) -> None:
        with pytest.raises(UnexpectedEofError):
            Scanner("'abc").read_string()


# ###############
# Numbers
# ###############


class TestNumbers:
    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ("0", 0),
            ("42", 42),
            ("-5", -5),
            ("3.14159", 3.14159),
            ("-123.45", -123.45),
            ("12345678901234567890123", 12345678901234567890123),
        ],
    )
    def test_valid_numbers(self, source: str, expected: int | float) -> None:
        assert Scanner(source).read_number() == expected

    def test_integer_literal_is_int(self) -> None:
        assert type(Scanner("8080").read_number()) is int

    def test_decimal_literal_is_float(self) -> None:
        assert type(Scanner("1.0").read_number()) is float

    def test_number_stops_at_non_digit(self) -> None:
        scanner = Scanner("12,")
        assert scanner.read_number() == 12
        assert scanner.peek() == ","

    def test_minus_without_digit(self) -> None:
        with pytest.raises(InvalidNumberError) as exc_info:
            Scanner("-x").read_number()
        assert exc_info.value.column == 2

    def test_dot_without_digit(self) -> None:
        with pytest.raises(InvalidNumberError):
            Scanner("1.").read_number()

    def test_dot_followed_by_letter(self) -> None:
        with pytest.raises(InvalidNumberError):
            Scanner("1.x").read_number()

    def test_decimal_overflowing_float(self) -> None:
        scanner = Scanner("  " + "9" * 400 + ".5")
        scanner.skip_whitespace()
        with pytest.raises(InvalidNumberError, match="out of range") as exc_info:
            scanner.read_number()
        assert (exc_info.value.line, exc_info.value.column, exc_info.value.offset) == (1, 3, 2)

    def test_negative_decimal_overflowing_float(self) -> None:
        with pytest.raises(InvalidNumberError, match="out of range"):
            Scanner("-" + "9" * 400 + ".0").read_number()

    def test_long_fraction_is_finite(self) -> None:
        assert Scanner("0." + "1" * 400).read_number() == pytest.approx(0.1111111111111111)


# ###############
# Identifiers and Scalars
# ###############


class TestIdentifiers:
    @pytest.mark.parametrize("name", ["a", "_private", "snake_case", "Camel9", "x1_2"])
    def test_valid_identifiers(self, name: str) -> None:
        assert Scanner(name).read_identifier() == name

    def test_identifier_stops_at_punctuation(self) -> None:
        scanner = Scanner("port=1")
        assert scanner.read_identifier() == "port"
        assert scanner.peek() == "="

    def test_digit_cannot_start_identifier(self) -> None:
        with pytest.raises(ExpectedIdentifierError):
            Scanner("9lives").read_identifier()

    def test_empty_identifier_at_eof(self) -> None:
        with pytest.raises(ExpectedIdentifierError):
            Scanner("").read_identifier()


class TestScalars:
    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ('"email"', "email"),
            ("1024", 1024),
            ("-1.5", -1.5),
            ("true", True),
            ("false", False),
        ],
    )
    def test_scalar_values(self, source: str, expected: object) -> None:
        assert Scanner(source).read_scalar() == expected

    def test_null_is_not_a_scalar(self) -> None:
        with pytest.raises(UnexpectedCharacterError):
            Scanner("null").read_scalar()

    def test_missing_scalar_at_eof(self) -> None:
        with pytest.raises(UnexpectedEofError):
            Scanner("").read_scalar()
