"""Text-in, text-out pruning entry points.

`prune_json` is what a host (query engine UDF, CLI, web UI) calls: it parses
both texts, projects the document and serialises the result. Failures surface
as a single `ProjectionError`; no partial output is ever returned.
"""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional

from .errors import MalformedInput, SchemaMismatch
from .io_utils import dump_json, parse_json_text
from .paths import ROOT
from .projection import project
from .schema_model import json_type_name, parse_schema

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProjectionMetrics:
    elapsed_us: int
    input_bytes: int
    output_bytes: int
    kept_fields: int


MetricsHook = Callable[[ProjectionMetrics], None]


def prune_document(document: Mapping[str, Any], schema: Mapping[str, Any]) -> Dict[str, Any]:
    """Project an already-parsed document onto a full schema envelope."""
    try:
        properties = parse_schema(schema)
    except RecursionError as exc:
        raise SchemaMismatch("Schema nesting is too deep.", ROOT) from exc

    try:
        return project(document, properties)
    except RecursionError as exc:
        raise MalformedInput("Document nesting is too deep.", ROOT) from exc


def prune_json(
    document_text,
    schema_text,
    *,
    indent: Optional[int] = None,
    metrics_hook: Optional[MetricsHook] = None,
) -> str:
    start = time.perf_counter_ns()

    document = parse_json_text(document_text, "document")
    schema = parse_json_text(schema_text, "schema")
    if not isinstance(document, dict):
        raise MalformedInput(f"Document must be a JSON object, got {json_type_name(document)}.", ROOT)
    if not isinstance(schema, dict):
        raise MalformedInput(f"Schema must be a JSON object, got {json_type_name(schema)}.", ROOT)

    reduced = prune_document(document, schema)
    try:
        output = dump_json(reduced, indent=indent)
    except RecursionError as exc:
        raise MalformedInput("Pruned document nesting is too deep to serialise.", ROOT) from exc

    elapsed_us = (time.perf_counter_ns() - start) // 1000
    logger.debug("Pruned document to %d top-level fields in %d us", len(reduced), elapsed_us)

    if metrics_hook is not None:
        metrics_hook(
            ProjectionMetrics(
                elapsed_us=elapsed_us,
                input_bytes=_byte_length(document_text),
                output_bytes=len(output.encode('utf-8')),
                kept_fields=len(reduced),
            )
        )
    return output


def _byte_length(text) -> int:
    if isinstance(text, (bytes, bytearray)):
        return len(text)
    return len(text.encode('utf-8'))
