from __future__ import annotations

from typing import Any, Dict, List, Mapping

from .errors import TypeMismatch
from .paths import ROOT, child_path, index_path
from .schema_model import ArrayNode, ObjectNode, SchemaNode, json_type_name


def project(
    document: Mapping[str, Any],
    schema_properties: Mapping[str, SchemaNode],
    path: str = ROOT,
) -> Dict[str, Any]:
    """Return a copy of `document` restricted to the declared fields.

    Output keys follow schema declaration order. Declared keys missing from
    the document are omitted; undeclared keys are dropped. Object fields and
    every element of an array field are projected recursively. Primitive
    fields are copied as-is, without checking the declared primitive type.

    Raises TypeMismatch at the first value whose shape disagrees with an
    'object' or 'array' declaration (array elements must be objects).
    """
    if not isinstance(document, Mapping):
        raise TypeMismatch(f"Expected an object, got {json_type_name(document)}.", path)

    reduced: Dict[str, Any] = {}
    for key, node in schema_properties.items():
        if key not in document:
            continue

        value = document[key]
        key_path = child_path(path, key)

        if isinstance(node, ObjectNode):
            if not isinstance(value, Mapping):
                raise TypeMismatch(f"Expected an object, got {json_type_name(value)}.", key_path)
            reduced[key] = project(value, node.properties, key_path)
        elif isinstance(node, ArrayNode):
            if not isinstance(value, list):
                raise TypeMismatch(f"Expected an array, got {json_type_name(value)}.", key_path)
            reduced[key] = _project_items(value, node.items, key_path)
        else:
            reduced[key] = value

    return reduced


def _project_items(items: List[Any], item_node: ObjectNode, path: str) -> List[Dict[str, Any]]:
    out: List[Dict[str, Any]] = []
    for i, item in enumerate(items):
        item_path = index_path(path, i)
        if not isinstance(item, Mapping):
            raise TypeMismatch(
                f"Expected an object array element, got {json_type_name(item)}.",
                item_path,
            )
        out.append(project(item, item_node.properties, item_path))
    return out
