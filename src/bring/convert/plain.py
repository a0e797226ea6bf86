# Copyright 2026 Bring Contributors
# SPDX-License-Identifier: Apache-2.0

"""Projection of parsed Bring trees onto plain Python data, JSON and YAML.

The projection drops attributes and schema declarations and keeps only the
data: objects become dicts, arrays become lists, primitives become scalars.
"""

from __future__ import annotations

import json
from typing import Any

import yaml

from bring.model.values import ArrayValue, Document, ObjectValue, PrimitiveValue, Schema

# ###############
# Public Interface
# ###############


def to_plain_value(node: Document | PrimitiveValue | ObjectValue | ArrayValue) -> Any:
    """Convert a Document or a single Value to nested dicts, lists and scalars.

    Schema entries of a Document are omitted.
    """
    if isinstance(node, dict):
        return _document_to_plain(node)
    return _value_to_plain(node)


def to_json_text(node: Document | PrimitiveValue | ObjectValue | ArrayValue, indent: int | None = 2) -> str:
    """Serialize the plain projection of *node* as JSON.

    Args:
        node: A parsed Document or Value.
        indent: Spaces per indentation level; None produces compact output.
    """
    separators = (",", ":") if indent is None else None
    return json.dumps(
        to_plain_value(node), indent=indent, separators=separators, ensure_ascii=False, allow_nan=False
    )


def to_yaml_text(node: Document | PrimitiveValue | ObjectValue | ArrayValue) -> str:
    """Serialize the plain projection of *node* as block-style YAML, keeping key order."""
    return yaml.safe_dump(
        to_plain_value(node),
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
    )


# ################
# Implementation
# ################


def _document_to_plain(document: Document) -> dict[str, Any]:
    return {key: _value_to_plain(entry) for key, entry in document.items() if not isinstance(entry, Schema)}


def _value_to_plain(value: PrimitiveValue | ObjectValue | ArrayValue) -> Any:
    if isinstance(value, PrimitiveValue):
        return value.value
    if isinstance(value, ObjectValue):
        return {key: _value_to_plain(item) for key, item in value.items.items()}
    # ArrayValue is the only remaining variant.
    assert isinstance(value, ArrayValue)
    return [_value_to_plain(item) for item in value.items]
