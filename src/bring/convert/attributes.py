# Copyright 2026 Bring Contributors
# SPDX-License-Identifier: Apache-2.0

"""Flattening of value attributes into dotted/bracketed paths."""

from __future__ import annotations

from bring.model.values import ArrayValue, AttributeValue, Document, ObjectValue, PrimitiveValue, Schema

# ###############
# Public Interface
# ###############


def extract_attributes(node: Document | PrimitiveValue | ObjectValue | ArrayValue) -> dict[str, AttributeValue]:
    """Collect every attribute in the tree under its path.

    Object members extend the path with `.key`, array elements with `[index]`;
    the attribute name is appended last. Attributes on the root value use the
    bare attribute name. When two attributes map to the same path the one
    visited last wins.

    A Document is walked value by value with each top-level key as the path
    prefix; schemas are skipped.

    Example:
        `server = { port = 8080 @min=1024 }` yields `{"server.port.min": 1024}`.
    """
    collected: dict[str, AttributeValue] = {}
    if isinstance(node, dict):
        for key, entry in node.items():
            if not isinstance(entry, Schema):
                _collect(entry, key, collected)
    else:
        _collect(node, "", collected)
    return collected


# ################
# Implementation
# ################


def _collect(
    value: PrimitiveValue | ObjectValue | ArrayValue,
    path: str,
    collected: dict[str, AttributeValue],
) -> None:
    for attribute in value.attributes:
        collected[_join(path, attribute.name)] = attribute.value
    if isinstance(value, ObjectValue):
        for key, item in value.items.items():
            _collect(item, _join(path, key), collected)
    elif isinstance(value, ArrayValue):
        for index, item in enumerate(value.items):
            _collect(item, f"{path}[{index}]", collected)


def _join(path: str, name: str) -> str:
    return f"{path}.{name}" if path else name
