# Copyright 2026 Bring Contributors
# SPDX-License-Identifier: Apache-2.0

"""Recursive-descent parser for Bring documents.

Turns source text into a Document: a mapping from top-level key to parsed value,
with schema declarations stored under synthesized 'schema:<Name>' keys.
"""

from __future__ import annotations

from pathlib import Path

from bring.config import ParserOptions
from bring.model.values import (
    ArrayValue,
    Attribute,
    Document,
    ObjectValue,
    PrimitiveValue,
    Schema,
    SchemaRule,
    schema_key,
    with_attributes,
)
from bring.parser.errors import (
    MaxDepthExceededError,
    ParseError,
    UnexpectedCharacterError,
    UnexpectedEofError,
)
from bring.parser.scanner import Location, Scanner

# ###############
# Public Interface
# ###############


class BringFileError(Exception):
    """Raised when a Bring source file cannot be read."""


def parse(source: str, options: ParserOptions | None = None) -> Document:
    """Parse Bring source text into a Document.

    Each call uses its own scanner, so concurrent calls never share state.

    Args:
        source: The full text of a Bring document.
        options: Parser tunables; defaults are used when omitted.

    Returns:
        A dict mapping each top-level key to its value, and 'schema:<Name>' to
        each declared schema. Later definitions of a key replace earlier ones.

    Raises:
        ParseError: On the first syntax error. No partial document is returned.
    """
    return _Parser(source, options or ParserOptions()).parse()


def parse_file(path: Path, options: ParserOptions | None = None) -> Document:
    """Read a UTF-8 Bring file from *path* and parse it.

    Raises:
        BringFileError: If the file cannot be read.
        ParseError: If the file content is syntactically invalid.
    """
    try:
        source = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise BringFileError(f"File not found: {path}") from None
    except (OSError, UnicodeDecodeError) as exc:
        raise BringFileError(f"Cannot read file {path}: {exc}") from exc
    return parse(source, options)


# ################
# Implementation
# ################

_SCHEMA_KEYWORD = "schema"

_WORD_LITERALS: tuple[tuple[str, bool | None], ...] = (
    ("true", True),
    ("false", False),
    ("null", None),
)

ValueNode = PrimitiveValue | ObjectValue | ArrayValue


class _Parser:
    """Recursive-descent parser over a single scanner."""

    def __init__(self, source: str, options: ParserOptions) -> None:
        self._scanner = Scanner(source)
        self._max_depth = options.max_depth
        self._depth = 0

    def parse(self) -> Document:
        """Parse the whole input and return the document mapping."""
        document: Document = {}
        scanner = self._scanner
        while True:
            scanner.skip_whitespace()
            if scanner.is_eof():
                break
            if scanner.peek() == "#":
                scanner.skip_comment()
                continue
            if self._at_schema_keyword():
                schema = self._parse_schema()
                _store(document, schema_key(schema.name), schema)
                continue
            key, value = self._parse_pair()
            _store(document, key, value)
        return document

    # ------------------------------------------------------------------
    # Key/value pairs and attributes
    # ------------------------------------------------------------------

    def _parse_pair(self) -> tuple[str, ValueNode]:
        """Parse: key attr* '=' value attr*"""
        scanner = self._scanner
        key = self._parse_key()
        scanner.skip_whitespace()
        attributes = self._parse_attributes()
        scanner.expect_literal("=")
        scanner.skip_whitespace()
        value = self._parse_value()
        scanner.skip_whitespace()
        attributes.extend(self._parse_attributes())
        return key, with_attributes(value, attributes)

    def _parse_key(self) -> str:
        """Parse a quoted string or bare identifier key."""
        if self._scanner.peek() in ("'", '"'):
            return self._scanner.read_string()
        return self._scanner.read_identifier()

    def _parse_attributes(self) -> list[Attribute]:
        """Parse zero or more '@name=scalar' clauses, consuming trailing whitespace."""
        scanner = self._scanner
        attributes: list[Attribute] = []
        while scanner.peek() == "@":
            scanner.advance()  # consume @
            name = scanner.read_identifier()
            scanner.skip_whitespace()
            scanner.expect_literal("=")
            scanner.skip_whitespace()
            attributes.append(Attribute(name=name, value=scanner.read_scalar()))
            scanner.skip_whitespace()
        return attributes

    # ------------------------------------------------------------------
    # Values
    # ------------------------------------------------------------------

    def _parse_value(self) -> ValueNode:
        """Dispatch on the lookahead to an object, array, or primitive."""
        scanner = self._scanner
        ch = scanner.peek()
        if ch == "{":
            return self._parse_object()
        if ch == "[":
            return self._parse_array()
        if ch in ("'", '"'):
            return PrimitiveValue(value=scanner.read_string())
        if scanner.at_number():
            return PrimitiveValue(value=scanner.read_number())
        for literal, data in _WORD_LITERALS:
            if scanner.match_literal(literal):
                return PrimitiveValue(value=data)
        if scanner.is_eof():
            raise scanner.error(UnexpectedEofError, "Expected a value, got end of input")
        raise scanner.error(UnexpectedCharacterError, f"Unexpected character {ch!r}")

    def _parse_object(self) -> ObjectValue:
        """Parse: '{' (comment | pair ','?)* '}'"""
        scanner = self._scanner
        start = scanner.location()
        scanner.expect_literal("{")
        self._enter(start)
        items: dict[str, ValueNode] = {}
        while True:
            scanner.skip_trivia()
            if scanner.is_eof():
                raise _unclosed(scanner, "object", "}", start)
            if scanner.match_literal("}"):
                break
            key, value = self._parse_pair()
            _store(items, key, value)
            scanner.skip_whitespace()
            scanner.match_literal(",")
        self._depth -= 1
        return ObjectValue(items=items)

    def _parse_array(self) -> ArrayValue:
        """Parse: '[' (comment | value ','?)* ']'"""
        scanner = self._scanner
        start = scanner.location()
        scanner.expect_literal("[")
        self._enter(start)
        items: list[ValueNode] = []
        while True:
            scanner.skip_trivia()
            if scanner.is_eof():
                raise _unclosed(scanner, "array", "]", start)
            if scanner.match_literal("]"):
                break
            items.append(self._parse_value())
            scanner.skip_whitespace()
            scanner.match_literal(",")
        self._depth -= 1
        return ArrayValue(items=items)

    def _enter(self, start: Location) -> None:
        """Record one more level of nesting, failing past the configured limit."""
        self._depth += 1
        if self._depth > self._max_depth:
            raise MaxDepthExceededError(
                f"Nesting depth exceeds the maximum of {self._max_depth}",
                start.line,
                start.column,
                start.offset,
            )

    # ------------------------------------------------------------------
    # Schemas
    # ------------------------------------------------------------------

    def _at_schema_keyword(self) -> bool:
        """Return True if a schema declaration starts at the cursor.

        'schema' only acts as a keyword when whitespace and a schema name follow,
        so keys such as `schema = 1` or `schemas = [...]` remain ordinary pairs.
        """
        scanner = self._scanner
        if not scanner.starts_with(_SCHEMA_KEYWORD):
            return False
        distance = len(_SCHEMA_KEYWORD)
        if scanner.peek_at(distance) not in (" ", "\t", "\r", "\n"):
            return False
        while scanner.peek_at(distance) in (" ", "\t", "\r", "\n"):
            distance += 1
        ch = scanner.peek_at(distance)
        return ch.isascii() and (ch.isalpha() or ch == "_")

    def _parse_schema(self) -> Schema:
        """Parse: 'schema' Name '{' (comment | key '=' type attr*)* '}'"""
        scanner = self._scanner
        scanner.expect_literal(_SCHEMA_KEYWORD)
        scanner.skip_whitespace()
        name = scanner.read_identifier()
        scanner.skip_whitespace()
        start = scanner.location()
        scanner.expect_literal("{")
        rules: list[SchemaRule] = []
        while True:
            scanner.skip_trivia()
            if scanner.is_eof():
                raise _unclosed(scanner, f"schema {name!r}", "}", start)
            if scanner.match_literal("}"):
                break
            key = self._parse_key()
            scanner.skip_whitespace()
            scanner.expect_literal("=")
            scanner.skip_whitespace()
            type_name = scanner.read_identifier()
            scanner.skip_whitespace()
            rules.append(SchemaRule(key=key, type=type_name, attributes=self._parse_attributes()))
        return Schema(name=name, rules=rules)


def _store(mapping: dict, key: str, value: object) -> None:
    """Insert *value* under *key*; a repeated key replaces and moves to the end."""
    mapping.pop(key, None)
    mapping[key] = value


def _unclosed(scanner: Scanner, what: str, closer: str, start: Location) -> ParseError:
    return scanner.error(
        UnexpectedEofError,
        f"Expected {closer!r} to close {what} opened at line {start.line}, column {start.column}",
    )
