# Copyright 2026 Bring Contributors
# SPDX-License-Identifier: Apache-2.0

"""Scanner and recursive-descent parser for Bring documents."""

from bring.parser.errors import (
    ExpectedIdentifierError,
    ExpectedLiteralError,
    InvalidNumberError,
    MaxDepthExceededError,
    ParseError,
    UnexpectedCharacterError,
    UnexpectedEofError,
    UnterminatedStringError,
)
from bring.parser.parser import BringFileError, parse, parse_file

__all__ = [
    "parse",
    "parse_file",
    "BringFileError",
    "ParseError",
    "UnexpectedCharacterError",
    "ExpectedLiteralError",
    "UnexpectedEofError",
    "UnterminatedStringError",
    "InvalidNumberError",
    "ExpectedIdentifierError",
    "MaxDepthExceededError",
]
