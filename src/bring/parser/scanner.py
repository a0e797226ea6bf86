# Copyright 2026 Bring Contributors
# SPDX-License-Identifier: Apache-2.0

"""Character scanner for Bring source text.

Owns the source buffer and the cursor (offset, line, column) and provides the
primitive navigation used by the grammar, together with the lexical readers for
string, number and identifier literals.
"""

import math
from dataclasses import dataclass

from bring.model.values import AttributeValue
from bring.parser.errors import (
    ExpectedIdentifierError,
    ExpectedLiteralError,
    InvalidNumberError,
    ParseError,
    UnexpectedCharacterError,
    UnexpectedEofError,
    UnterminatedStringError,
)

# ###############
# Public Interface
# ###############

# Returned by peek() and advance() once the input is exhausted.
EOF = ""


@dataclass(frozen=True)
class Location:
    """A snapshot of the cursor.

    Attributes:
        offset: 0-based character offset into the source.
        line: 1-based line number.
        column: 1-based column number.
    """

    offset: int
    line: int
    column: int


class Scanner:
    """Cursor over a single in-memory source text.

    A scanner belongs to exactly one parse invocation and must not be shared.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0
        self._line = 1
        self._column = 1

    # ------------------------------------------------------------------
    # Cursor state
    # ------------------------------------------------------------------

    @property
    def offset(self) -> int:
        return self._pos

    @property
    def line(self) -> int:
        return self._line

    @property
    def column(self) -> int:
        return self._column

    def location(self) -> Location:
        """Return the current cursor position."""
        return Location(self._pos, self._line, self._column)

    # ------------------------------------------------------------------
    # Low-level character access
    # ------------------------------------------------------------------

    def is_eof(self) -> bool:
        """Return True if the cursor is at or past the end of input."""
        return self._pos >= len(self._source)

    def peek(self) -> str:
        """Return the current character without consuming it, or EOF."""
        if self._pos < len(self._source):
            return self._source[self._pos]
        return EOF

    def advance(self) -> str:
        """Consume the current character, update line/column, and return it.

        At end of input this is a no-op returning EOF.
        """
        if self.is_eof():
            return EOF
        ch = self._source[self._pos]
        self._pos += 1
        if ch == "\n":
            self._line += 1
            self._column = 1
        else:
            self._column += 1
        return ch

    def starts_with(self, text: str) -> bool:
        """Return True if the remaining input begins with *text* (without consuming)."""
        return self._source.startswith(text, self._pos)

    def peek_at(self, distance: int) -> str:
        """Return the character *distance* positions ahead of the cursor, or EOF."""
        index = self._pos + distance
        if index < len(self._source):
            return self._source[index]
        return EOF

    def at_number(self) -> bool:
        """Return True if a number literal starts at the cursor."""
        ch = self.peek()
        return ch == "-" or _is_digit(ch)

    def match_literal(self, text: str) -> bool:
        """Consume *text* if the remaining input starts with it.

        Returns False and leaves the cursor untouched otherwise.
        """
        if not self.starts_with(text):
            return False
        for _ in text:
            self.advance()
        return True

    def expect_literal(self, text: str) -> None:
        """Consume *text* or raise ExpectedLiteralError (UnexpectedEofError at end of input)."""
        if self.match_literal(text):
            return
        if self.is_eof():
            raise self.error(UnexpectedEofError, f"Expected {text!r}, got end of input")
        raise ExpectedLiteralError(text, self._line, self._column, self._pos, found=self.peek())

    # ------------------------------------------------------------------
    # Whitespace and comment skipping
    # ------------------------------------------------------------------

    def skip_whitespace(self) -> None:
        """Consume a maximal run of spaces, tabs, carriage returns and newlines."""
        while not self.is_eof() and self.peek() in " \t\r\n":
            self.advance()

    def skip_comment(self) -> None:
        """Consume from '#' up to, but not including, the end of line."""
        self.expect_literal("#")
        while not self.is_eof() and self.peek() != "\n":
            self.advance()

    def skip_trivia(self) -> None:
        """Skip any interleaving of whitespace runs and comments."""
        while True:
            self.skip_whitespace()
            if self.peek() != "#":
                return
            self.skip_comment()

    # ------------------------------------------------------------------
    # Literal readers
    # ------------------------------------------------------------------

    def read_string(self) -> str:
        """Read a single- or double-quoted string literal and return its decoded content.

        Unknown escape sequences yield the escaped character unchanged.
        """
        start = self.location()
        quote = self.peek()
        if quote not in ("'", '"'):
            raise self.error(UnexpectedCharacterError, f"Expected string literal, got {quote!r}")
        self.advance()  # opening quote
        chars: list[str] = []
        while not self.is_eof():
            ch = self.advance()
            if ch == quote:
                return "".join(chars)
            if ch == "\\":
                if self.is_eof():
                    break
                chars.append(_ESCAPES.get(self.peek(), self.peek()))
                self.advance()
            else:
                chars.append(ch)
        raise self.error(
            UnterminatedStringError,
            f"Unterminated string literal opened at line {start.line}, column {start.column}",
        )

    def read_number(self) -> int | float:
        """Read an integer or floating-point literal.

        A float requires at least one digit on both sides of the decimal point.
        Literals that do not fit a finite float, or exceed the interpreter's
        integer digit limit, raise InvalidNumberError at the literal's start.
        """
        start = self.location()
        if self.peek() == "-":
            self.advance()
        if not _is_digit(self.peek()):
            raise self.error(InvalidNumberError, "Expected digit after minus sign")
        self._skip_digits()
        is_float = False
        if self.peek() == ".":
            is_float = True
            self.advance()  # consume the '.'
            if not _is_digit(self.peek()):
                raise self.error(InvalidNumberError, "Expected digit after decimal point")
            self._skip_digits()
        text = self._source[start.offset : self._pos]
        try:
            result = float(text) if is_float else int(text)
        except ValueError:
            raise InvalidNumberError("Number literal out of range", start.line, start.column, start.offset) from None
        if is_float and math.isinf(result):
            raise InvalidNumberError("Number literal out of range", start.line, start.column, start.offset)
        return result

    def read_identifier(self) -> str:
        """Read an identifier matching [A-Za-z_][A-Za-z0-9_]*."""
        if not _is_identifier_start(self.peek()):
            got = repr(self.peek()) if not self.is_eof() else "end of input"
            raise self.error(ExpectedIdentifierError, f"Expected identifier, got {got}")
        start = self._pos
        while _is_identifier_char(self.peek()):
            self.advance()
        return self._source[start : self._pos]

    def read_scalar(self) -> AttributeValue:
        """Read an attribute value: a string, number, or boolean."""
        ch = self.peek()
        if ch in ("'", '"'):
            return self.read_string()
        if self.at_number():
            return self.read_number()
        if self.match_literal("true"):
            return True
        if self.match_literal("false"):
            return False
        if self.is_eof():
            raise self.error(UnexpectedEofError, "Expected attribute value, got end of input")
        raise self.error(UnexpectedCharacterError, f"Expected attribute value, got {ch!r}")

    # ------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------

    def error(self, error_type: type[ParseError], message: str) -> ParseError:
        """Build an error of *error_type* located at the cursor."""
        return error_type(message, self._line, self._column, self._pos)

    def _skip_digits(self) -> None:
        while _is_digit(self.peek()):
            self.advance()


# ################
# Implementation
# ################

_ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "\\": "\\",
    '"': '"',
    "'": "'",
}


def _is_identifier_start(ch: str) -> bool:
    return ch != EOF and ch.isascii() and (ch.isalpha() or ch == "_")


def _is_identifier_char(ch: str) -> bool:
    return ch != EOF and ch.isascii() and (ch.isalnum() or ch == "_")


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"
