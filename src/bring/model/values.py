# Copyright 2026 Bring Contributors
# SPDX-License-Identifier: Apache-2.0

"""Value tree and schema declarations produced by the Bring parser."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############

# Scalar payload of an attribute. Attributes never nest and never carry null.
AttributeValue = str | int | float | bool

# Scalar payload of a primitive value; None is the null marker.
PrimitiveData = str | int | float | bool | None


class Attribute(BaseModel):
    """A '@name=value' annotation attached to a value or schema rule."""

    model_config = ConfigDict(frozen=True)

    name: str
    value: AttributeValue


class PrimitiveValue(BaseModel):
    """A string, number, boolean, or null."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["primitive"] = "primitive"
    value: PrimitiveData
    attributes: list[Attribute] = _Field(default_factory=list)


class ObjectValue(BaseModel):
    """An ordered mapping from key to value."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["object"] = "object"
    items: dict[str, Value] = _Field(default_factory=dict)
    attributes: list[Attribute] = _Field(default_factory=list)


class ArrayValue(BaseModel):
    """An ordered sequence of values."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["array"] = "array"
    items: list[Value] = _Field(default_factory=list)
    attributes: list[Attribute] = _Field(default_factory=list)


# A parsed right-hand side. The `kind` discriminator tells the variants apart.
Value = Annotated[
    PrimitiveValue | ObjectValue | ArrayValue,
    _Field(discriminator="kind"),
]


class SchemaRule(BaseModel):
    """One 'key = type @attr=...' line of a schema block.

    The type name is kept as written; it is not checked against a fixed set.
    """

    model_config = ConfigDict(frozen=True)

    key: str
    type: str
    attributes: list[Attribute] = _Field(default_factory=list)


class Schema(BaseModel):
    """A named, unenforced declaration of expected fields."""

    model_config = ConfigDict(frozen=True)

    name: str
    rules: list[SchemaRule] = _Field(default_factory=list)


# The result of parsing a full document. Schemas live under 'schema:<Name>'.
Document = dict[str, PrimitiveValue | ObjectValue | ArrayValue | Schema]

SCHEMA_KEY_PREFIX = "schema:"


def schema_key(name: str) -> str:
    """Return the document key under which the schema *name* is stored."""
    return f"{SCHEMA_KEY_PREFIX}{name}"


def with_attributes(
    value: PrimitiveValue | ObjectValue | ArrayValue, attributes: list[Attribute]
) -> PrimitiveValue | ObjectValue | ArrayValue:
    """Return a copy of *value* with *attributes* appended to its own."""
    if not attributes:
        return value
    return value.model_copy(update={"attributes": [*value.attributes, *attributes]})


# Resolve forward references in self-referential models.
ObjectValue.model_rebuild()
ArrayValue.model_rebuild()
