# Copyright 2026 Bring Contributors
# SPDX-License-Identifier: Apache-2.0

"""Error types raised while parsing Bring source text.

Every error carries the location of the failure point so callers can report
precise diagnostics. All parse errors are fatal: the parser never recovers and
never returns a partial document.
"""

# ###############
# Public Interface
# ###############


class ParseError(Exception):
    """Base class for all Bring syntax errors.

    Attributes:
        message: The human-readable description without location prefix.
        line: 1-based line number of the error.
        column: 1-based column number of the error.
        offset: 0-based character offset of the error in the source text.
    """

    def __init__(self, message: str, line: int, column: int, offset: int = 0) -> None:
        super().__init__(f"Line {line}, column {column}: {message}")
        self.message = message
        self.line = line
        self.column = column
        self.offset = offset


class UnexpectedCharacterError(ParseError):
    """The lookahead character matches no grammar alternative."""


class ExpectedLiteralError(ParseError):
    """A required literal token such as '=' or '}' was absent.

    Attributes:
        literal: The literal text that was expected.
    """

    def __init__(self, literal: str, line: int, column: int, offset: int = 0, found: str = "") -> None:
        got = repr(found) if found else "end of input"
        super().__init__(f"Expected {literal!r}, got {got}", line, column, offset)
        self.literal = literal


class UnexpectedEofError(ParseError):
    """The input ended while a structure was still open."""


class UnterminatedStringError(UnexpectedEofError):
    """A string literal was not closed before the end of input."""


class InvalidNumberError(ParseError):
    """A numeric literal has a misplaced sign or decimal point."""


class ExpectedIdentifierError(ParseError):
    """An identifier was required but none could be scanned."""


class MaxDepthExceededError(ParseError):
    """Objects and arrays are nested deeper than the configured limit."""
