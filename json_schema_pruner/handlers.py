from __future__ import annotations

import json
import logging
import os
import tempfile
from typing import Any, Dict

import gradio as gr

from .errors import ProjectionError
from .io_utils import dump_json, parse_json_text, read_json_content
from .pruning import ProjectionMetrics, prune_json
from .schema_model import count_fields, parse_schema, properties_to_dict

logger = logging.getLogger(__name__)


def format_error(exc: ProjectionError) -> str:
    location = f" at {exc.path}" if exc.path is not None else ""
    return f"{exc.kind}{location}: {exc.message}"


def load_file_into_editor(file_obj, label: str):
    """Load an uploaded JSON file into its text editor, pretty-printed."""
    if file_obj is None:
        return gr.update(), f"No {label} file uploaded."

    try:
        data = read_json_content(file_obj, label)
    except ProjectionError as exc:
        return gr.update(), format_error(exc)

    return json.dumps(data, indent=2, ensure_ascii=False), f"Loaded {label}."


def load_document_file(file_obj):
    return load_file_into_editor(file_obj, "document")


def load_schema_file(file_obj):
    return load_file_into_editor(file_obj, "schema")


def describe_schema_handler(schema_text):
    """Show the normalised schema tree, or why it cannot be used."""
    if not schema_text or not schema_text.strip():
        return None, "No schema loaded."

    try:
        properties = parse_schema(parse_json_text(schema_text, "schema"))
    except ProjectionError as exc:
        return None, format_error(exc)

    normalised = {"properties": properties_to_dict(properties)}
    return normalised, f"Schema declares {len(properties)} top-level fields ({count_fields(properties)} in total)."


def prune_handler(document_text, schema_text, pretty: bool = True, file_name: str = ""):
    if not document_text or not document_text.strip():
        return None, None, "No document loaded."
    if not schema_text or not schema_text.strip():
        return None, None, "No schema loaded."

    captured: Dict[str, Any] = {}

    def remember(metrics: ProjectionMetrics) -> None:
        captured["metrics"] = metrics

    try:
        output = prune_json(
            document_text,
            schema_text,
            indent=2 if pretty else None,
            metrics_hook=remember,
        )
    except ProjectionError as exc:
        logger.info("Pruning rejected: %s", exc)
        return None, None, format_error(exc)

    if not file_name or not file_name.strip():
        file_name = "pruned"
    file_name = file_name.strip()
    if not file_name.lower().endswith(".json"):
        file_name += ".json"

    path = os.path.join(tempfile.gettempdir(), os.path.basename(file_name))
    try:
        with open(path, 'w', encoding='utf-8') as f:
            f.write(output)
    except OSError as exc:
        return None, None, f"Error writing output file: {exc}"

    metrics = captured["metrics"]
    summary = (
        f"Kept {metrics.kept_fields} top-level fields | "
        f"{metrics.input_bytes} -> {metrics.output_bytes} bytes | "
        f"{metrics.elapsed_us} us."
    )
    return parse_json_text(output, "output"), path, summary


def clear_result():
    return None, None, ""


def sample_inputs():
    document = {
        "name": "Ann",
        "age": 30,
        "addr": {"city": "NYC", "zip": "10001"},
        "tags": [{"id": "a", "extra": 1}, {"id": "b"}],
    }
    schema = {
        "properties": {
            "name": {"type": "string"},
            "addr": {"type": "object", "properties": {"city": {"type": "string"}}},
            "tags": {
                "type": "array",
                "items": {"type": "object", "properties": {"id": {"type": "string"}}},
            },
        }
    }
    return dump_json(document, indent=2), dump_json(schema, indent=2)
