# Copyright 2026 Bring Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model for parsed Bring documents (values, attributes, schemas)."""

from bring.model.values import (
    SCHEMA_KEY_PREFIX,
    ArrayValue,
    Attribute,
    AttributeValue,
    Document,
    ObjectValue,
    PrimitiveData,
    PrimitiveValue,
    Schema,
    SchemaRule,
    Value,
    schema_key,
    with_attributes,
)

__all__ = [
    # Values
    "Attribute",
    "AttributeValue",
    "PrimitiveData",
    "PrimitiveValue",
    "ObjectValue",
    "ArrayValue",
    "Value",
    "with_attributes",
    # Schemas and documents
    "SchemaRule",
    "Schema",
    "Document",
    "SCHEMA_KEY_PREFIX",
    "schema_key",
]
