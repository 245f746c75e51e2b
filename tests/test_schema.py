"""Tests for the Schema Object and its one-or-many fields."""

import pytest
from pydantic import TypeAdapter

from asyncapi_types.kernel.reference import ReferenceOr
from asyncapi_types.kernel.vec_or_single import VecOrSingle
from asyncapi_types.model import Discriminator, Schema


class TestVecOrSingle:
    def test_single_value(self):
        adapter = TypeAdapter(VecOrSingle[str])
        value = adapter.validate_python("string")

        assert not value.is_list
        assert value.as_single() == "string"
        assert value.as_list() == ["string"]
        assert adapter.dump_python(value, mode="json") == "string"

    def test_list_value(self):
        adapter = TypeAdapter(VecOrSingle[str])
        value = adapter.validate_python(["string", "null"])

        assert value.is_list
        assert value.as_single() is None
        assert list(value) == ["string", "null"]
        assert len(value) == 2
        assert adapter.dump_python(value, mode="json") == ["string", "null"]

    def test_one_element_list_stays_a_list(self):
        adapter = TypeAdapter(VecOrSingle[str])
        value = adapter.validate_python(["string"])

        assert value.is_list
        assert adapter.dump_python(value, mode="json") == ["string"]

    def test_single_requires_exactly_one(self):
        with pytest.raises(ValueError):
            VecOrSingle(["a", "b"], is_list=False)

    def test_shapes_are_not_equal(self):
        assert VecOrSingle.from_single("a") != VecOrSingle.from_list(["a"])
        assert VecOrSingle.from_list(["a"]) == VecOrSingle.from_list(["a"])


def test_object_schema_round_trip():
    doc = {
        "type": "object",
        "required": ["email"],
        "properties": {
            "email": {"type": "string", "format": "email", "maxLength": 254},
            "age": {"type": "integer", "minimum": 0, "exclusiveMaximum": 150},
            "address": {"$ref": "#/components/schemas/Address"},
        },
        "additionalProperties": False,
    }
    schema = Schema.model_validate(doc)

    assert schema.is_object()
    assert schema.required == ["email"]
    assert schema.additional_properties is False
    assert schema.get_property("address").as_reference() == "#/components/schemas/Address"
    assert schema.get_property("missing") is None
    assert schema.to_document() == doc


def test_additional_properties_as_schema():
    schema = Schema.model_validate({"additionalProperties": {"type": "string"}})

    assert isinstance(schema.additional_properties, ReferenceOr)
    assert schema.additional_properties.as_item().type.as_single() == "string"
    assert schema.to_document() == {"additionalProperties": {"type": "string"}}


def test_items_single_and_tuple_forms():
    single = Schema.model_validate({"type": "array", "items": {"type": "string"}})
    tuple_form = Schema.model_validate({"type": "array", "items": [{"type": "string"}, {"$ref": "#/s"}]})

    assert not single.items.is_list
    assert tuple_form.items.is_list
    assert tuple_form.items.as_list()[1].as_reference() == "#/s"
    assert single.to_document() == {"type": "array", "items": {"type": "string"}}
    assert tuple_form.to_document() == {"type": "array", "items": [{"type": "string"}, {"$ref": "#/s"}]}


def test_keyword_aliases():
    doc = {
        "not": {"type": "null"},
        "if": {"properties": {"kind": {"const": "a"}}},
        "then": {"required": ["a"]},
        "else": {"required": ["b"]},
        "allOf": [{"$ref": "#/components/schemas/Base"}],
        "oneOf": [{"type": "string"}, {"type": "number"}],
    }
    schema = Schema.model_validate(doc)

    assert schema.not_.as_item().type.as_single() == "null"
    assert schema.if_ is not None and schema.else_ is not None
    assert schema.all_of[0].as_reference() == "#/components/schemas/Base"
    assert schema.to_document() == doc


def test_numbers_keep_their_type():
    schema = Schema.model_validate({"minimum": 0, "maximum": 1.5, "multipleOf": 0.5})

    assert isinstance(schema.minimum, int)
    assert isinstance(schema.maximum, float)
    assert schema.to_document() == {"minimum": 0, "maximum": 1.5, "multipleOf": 0.5}


def test_draft4_boolean_exclusive_minimum():
    schema = Schema.model_validate({"minimum": 0, "exclusiveMinimum": True})

    assert schema.exclusive_minimum is True
    assert schema.to_document() == {"minimum": 0, "exclusiveMinimum": True}


def test_discriminator_string_and_object():
    as_string = Schema.model_validate({"discriminator": "petType"})
    as_object = Schema.model_validate({
        "discriminator": {"propertyName": "petType", "mapping": {"dog": "#/components/schemas/Dog"}}
    })

    assert as_string.discriminator == "petType"
    assert isinstance(as_object.discriminator, Discriminator)
    assert as_object.discriminator.mapping == {"dog": "#/components/schemas/Dog"}
    assert as_object.to_document() == {
        "discriminator": {"propertyName": "petType", "mapping": {"dog": "#/components/schemas/Dog"}}
    }


def test_undeclared_keywords_kept():
    doc = {"$schema": "http://json-schema.org/draft-07/schema#", "$id": "urn:x", "type": "string"}
    schema = Schema.model_validate(doc)

    assert schema.extensions == {"$schema": "http://json-schema.org/draft-07/schema#", "$id": "urn:x"}
    assert schema.to_document() == doc


def test_explicit_null_default_is_kept():
    schema = Schema.model_validate({"type": ["string", "null"], "default": None})

    assert schema.to_document() == {"type": ["string", "null"], "default": None}


def test_model_built_in_python_round_trips():
    schema = Schema(
        type=VecOrSingle.from_single("object"),
        properties={"id": ReferenceOr.from_item(Schema(type=VecOrSingle.from_single("string")))},
        required=["id"],
    )

    assert schema.to_document() == {
        "type": "object",
        "properties": {"id": {"type": "string"}},
        "required": ["id"],
    }
    assert Schema.model_validate(schema.to_document()) == schema
