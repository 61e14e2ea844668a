"""Typed schema tree built from a JSON schema descriptor.

A descriptor declares, per field, a ``type`` and for containers the nested
shape::

    {"properties": {
        "name": {"type": "string"},
        "addr": {"type": "object", "properties": {"city": {"type": "string"}}},
        "tags": {"type": "array", "items": {"type": "object", "properties": {...}}}
    }}

The whole descriptor is checked when it is parsed, so projection never meets
an unsupported declaration halfway through a document.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Tuple, Union

from .errors import SchemaMismatch
from .paths import ROOT, child_path

PRIMITIVE_TYPES = frozenset({"string", "number", "integer", "boolean", "null"})


@dataclass(frozen=True)
class PrimitiveNode:
    type_tag: Union[str, Tuple[str, ...]]


@dataclass(frozen=True)
class ObjectNode:
    properties: Dict[str, "SchemaNode"]


@dataclass(frozen=True)
class ArrayNode:
    items: ObjectNode


SchemaNode = Union[PrimitiveNode, ObjectNode, ArrayNode]


def parse_schema(schema: Any) -> Dict[str, SchemaNode]:
    """Parse a full schema envelope and return its top-level properties."""
    if not isinstance(schema, Mapping):
        raise SchemaMismatch(f"Schema must be a JSON object, got {json_type_name(schema)}.", ROOT)
    if "properties" not in schema:
        raise SchemaMismatch("Schema has no top-level 'properties'.", ROOT)
    return parse_properties(schema["properties"], ROOT)


def parse_properties(properties: Any, path: str) -> Dict[str, SchemaNode]:
    if not isinstance(properties, Mapping):
        raise SchemaMismatch(
            f"'properties' must be a JSON object, got {json_type_name(properties)}.",
            path,
        )
    return {key: parse_node(node, child_path(path, key)) for key, node in properties.items()}


def parse_node(node: Any, path: str) -> SchemaNode:
    if not isinstance(node, Mapping):
        raise SchemaMismatch(
            f"Field declaration must be a JSON object, got {json_type_name(node)}.",
            path,
        )
    if "type" not in node:
        raise SchemaMismatch("Field declaration has no 'type'.", path)

    type_tag = node["type"]
    if type_tag == "object":
        if "properties" not in node:
            raise SchemaMismatch("Declared 'object' without 'properties'.", path)
        return ObjectNode(parse_properties(node["properties"], path))

    if type_tag == "array":
        if "items" not in node:
            raise SchemaMismatch("Declared 'array' without 'items'.", path)
        items = parse_node(node["items"], f"{path}[]")
        if not isinstance(items, ObjectNode):
            raise SchemaMismatch("Array 'items' must be declared as 'object'.", f"{path}[]")
        return ArrayNode(items)

    if isinstance(type_tag, str) and type_tag in PRIMITIVE_TYPES:
        return PrimitiveNode(type_tag)

    # A union such as ["string", "null"] is still a passthrough field.
    if isinstance(type_tag, list) and type_tag and all(
        isinstance(t, str) and t in PRIMITIVE_TYPES for t in type_tag
    ):
        return PrimitiveNode(tuple(type_tag))

    raise SchemaMismatch(f"Unsupported type {type_tag!r}.", path)


def node_to_dict(node: SchemaNode) -> Dict[str, Any]:
    """Render a parsed node back into descriptor form."""
    if isinstance(node, ObjectNode):
        return {"type": "object", "properties": properties_to_dict(node.properties)}
    if isinstance(node, ArrayNode):
        return {"type": "array", "items": node_to_dict(node.items)}
    if isinstance(node.type_tag, tuple):
        return {"type": list(node.type_tag)}
    return {"type": node.type_tag}


def properties_to_dict(properties: Mapping[str, SchemaNode]) -> Dict[str, Any]:
    return {key: node_to_dict(node) for key, node in properties.items()}


def count_fields(properties: Mapping[str, SchemaNode]) -> int:
    """Count every declared field, nested ones included."""
    total = 0
    for node in properties.values():
        total += 1
        if isinstance(node, ObjectNode):
            total += count_fields(node.properties)
        elif isinstance(node, ArrayNode):
            total += count_fields(node.items.properties)
    return total


def json_type_name(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, Mapping):
        return "object"
    return type(value).__name__
