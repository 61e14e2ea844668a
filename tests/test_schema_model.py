"""Tests for schema descriptor parsing."""

import pytest

from json_schema_pruner.errors import SchemaMismatch
from json_schema_pruner.schema_model import (
    ArrayNode,
    ObjectNode,
    PrimitiveNode,
    count_fields,
    parse_schema,
    properties_to_dict,
)


class TestParseSchema:
    """Tests for parse_schema."""

    def test_parses_all_node_kinds(self):
        """Test primitive, object and array declarations."""
        properties = parse_schema({
            "properties": {
                "name": {"type": "string"},
                "addr": {"type": "object", "properties": {"city": {"type": "string"}}},
                "tags": {"type": "array", "items": {"type": "object", "properties": {}}},
            }
        })
        assert properties["name"] == PrimitiveNode("string")
        assert properties["addr"] == ObjectNode({"city": PrimitiveNode("string")})
        assert properties["tags"] == ArrayNode(ObjectNode({}))

    def test_keeps_declaration_order(self):
        """Test parsed properties keep declaration order."""
        properties = parse_schema({"properties": {"z": {"type": "null"}, "a": {"type": "boolean"}}})
        assert list(properties) == ["z", "a"]

    def test_accepts_primitive_type_union(self):
        """Test a list of primitive tags is a primitive node."""
        properties = parse_schema({"properties": {"n": {"type": ["integer", "null"]}}})
        assert properties["n"] == PrimitiveNode(("integer", "null"))

    def test_ignores_extra_keywords(self):
        """Test descriptor keywords other than type/properties/items are ignored."""
        properties = parse_schema({
            "$schema": "https://json-schema.org/draft/2020-12/schema",
            "type": "object",
            "properties": {"name": {"type": "string", "description": "Full name"}},
        })
        assert properties == {"name": PrimitiveNode("string")}

    def test_requires_top_level_properties(self):
        """Test the envelope must have 'properties'."""
        with pytest.raises(SchemaMismatch) as exc_info:
            parse_schema({"type": "object"})
        assert exc_info.value.path == "(root)"

    def test_requires_object_envelope(self):
        """Test the envelope must be an object."""
        with pytest.raises(SchemaMismatch):
            parse_schema(["properties"])

    def test_rejects_object_without_properties(self):
        """Test 'object' without 'properties' is a SchemaMismatch."""
        with pytest.raises(SchemaMismatch) as exc_info:
            parse_schema({"properties": {"addr": {"type": "object"}}})
        assert exc_info.value.path == "addr"

    def test_rejects_array_without_items(self):
        """Test 'array' without 'items' is a SchemaMismatch."""
        with pytest.raises(SchemaMismatch) as exc_info:
            parse_schema({"properties": {"tags": {"type": "array"}}})
        assert exc_info.value.path == "tags"

    def test_rejects_array_of_primitives(self):
        """Test array items must be declared as objects."""
        with pytest.raises(SchemaMismatch) as exc_info:
            parse_schema({"properties": {"tags": {"type": "array", "items": {"type": "string"}}}})
        assert exc_info.value.path == "tags[]"

    def test_rejects_items_without_properties(self):
        """Test object items must carry 'properties'."""
        with pytest.raises(SchemaMismatch):
            parse_schema({"properties": {"tags": {"type": "array", "items": {"type": "object"}}}})

    def test_rejects_unknown_type(self):
        """Test unrecognised type tags fail when the schema is parsed."""
        with pytest.raises(SchemaMismatch) as exc_info:
            parse_schema({"properties": {"addr": {"type": "obj"}}})
        assert "obj" in exc_info.value.message

    def test_rejects_missing_type(self):
        """Test a declaration without 'type' is a SchemaMismatch."""
        with pytest.raises(SchemaMismatch):
            parse_schema({"properties": {"name": {}}})

    def test_rejects_non_object_declaration(self):
        """Test a declaration must itself be an object."""
        with pytest.raises(SchemaMismatch):
            parse_schema({"properties": {"name": "string"}})

    def test_rejects_nested_problem_with_path(self):
        """Test nested schema errors report the nested path."""
        schema = {
            "properties": {
                "a": {"type": "object", "properties": {"b": {"type": "object", "properties": []}}}
            }
        }
        with pytest.raises(SchemaMismatch) as exc_info:
            parse_schema(schema)
        assert exc_info.value.path == "a.b"


class TestSchemaHelpers:
    """Tests for rendering and counting parsed schemas."""

    def test_round_trips_to_descriptor(self):
        """Test properties_to_dict renders the normalised descriptor."""
        descriptor = {
            "name": {"type": "string"},
            "opt": {"type": ["string", "null"]},
            "tags": {"type": "array", "items": {"type": "object", "properties": {"id": {"type": "string"}}}},
        }
        assert properties_to_dict(parse_schema({"properties": descriptor})) == descriptor

    def test_counts_nested_fields(self):
        """Test count_fields includes nested declarations."""
        properties = parse_schema({
            "properties": {
                "name": {"type": "string"},
                "addr": {"type": "object", "properties": {"city": {"type": "string"}}},
                "tags": {"type": "array", "items": {"type": "object", "properties": {"id": {"type": "string"}}}},
            }
        })
        assert count_fields(properties) == 5
