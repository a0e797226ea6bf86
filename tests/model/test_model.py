# Copyright 2026 Bring Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the Bring value and schema model."""

import pytest
from pydantic import TypeAdapter, ValidationError

from bring.model import (
    ArrayValue,
    Attribute,
    ObjectValue,
    PrimitiveValue,
    Schema,
    SchemaRule,
    Value,
    schema_key,
    with_attributes,
)

# ###############
# Public Interface
# ###############


def test_primitive_defaults() -> None:
    value = PrimitiveValue(value="x")
    assert value.kind == "primitive"
    assert value.attributes == []


@pytest.mark.parametrize("data", ["text", 0, -1.5, True, False, None])
def test_primitive_keeps_scalar_type(data: object) -> None:
    value = PrimitiveValue(value=data)
    assert value.value == data
    assert type(value.value) is type(data)


def test_nested_containers() -> None:
    tree = ObjectValue(
        items={
            "xs": ArrayValue(items=[PrimitiveValue(value=1), ObjectValue()]),
        }
    )
    assert isinstance(tree.items["xs"], ArrayValue)
    assert isinstance(tree.items["xs"].items[1], ObjectValue)


def test_values_are_frozen() -> None:
    value = PrimitiveValue(value=1)
    with pytest.raises(ValidationError):
        value.value = 2  # type: ignore[misc]


def test_attribute_rejects_nested_values() -> None:
    with pytest.raises(ValidationError):
        Attribute(name="a", value=[1, 2])  # type: ignore[arg-type]


def test_with_attributes_appends_without_mutating() -> None:
    original = PrimitiveValue(value=1, attributes=[Attribute(name="a", value=1)])
    updated = with_attributes(original, [Attribute(name="b", value=2)])
    assert [attr.name for attr in updated.attributes] == ["a", "b"]
    assert [attr.name for attr in original.attributes] == ["a"]


def test_with_no_attributes_returns_same_value() -> None:
    original = ArrayValue()
    assert with_attributes(original, []) is original


def test_value_discriminator_roundtrip() -> None:
    tree = ObjectValue(items={"a": ArrayValue(items=[PrimitiveValue(value=None)])})
    adapter = TypeAdapter(Value)
    restored = adapter.validate_python(tree.model_dump())
    assert restored == tree


def test_schema_model() -> None:
    schema = Schema(name="User", rules=[SchemaRule(key="id", type="number")])
    assert schema.rules[0].attributes == []
    assert schema_key(schema.name) == "schema:User"
