# Copyright 2026 Bring Contributors
# SPDX-License-Identifier: Apache-2.0

"""Bring: a parser for an attribute-annotated configuration language."""

from bring.config import ParserOptions
from bring.convert import extract_attributes, to_json_text, to_plain_value, to_yaml_text
from bring.model import (
    ArrayValue,
    Attribute,
    Document,
    ObjectValue,
    PrimitiveValue,
    Schema,
    SchemaRule,
    Value,
)
from bring.parser import (
    BringFileError,
    ExpectedIdentifierError,
    ExpectedLiteralError,
    InvalidNumberError,
    MaxDepthExceededError,
    ParseError,
    UnexpectedCharacterError,
    UnexpectedEofError,
    UnterminatedStringError,
    parse,
    parse_file,
)

__all__ = [
    # Parsing
    "parse",
    "parse_file",
    "ParserOptions",
    # Model
    "Attribute",
    "PrimitiveValue",
    "ObjectValue",
    "ArrayValue",
    "Value",
    "SchemaRule",
    "Schema",
    "Document",
    # Conversion
    "to_plain_value",
    "to_json_text",
    "to_yaml_text",
    "extract_attributes",
    # Errors
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
