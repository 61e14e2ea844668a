from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .errors import MalformedInput, ProjectionError
from .logging_utils import configure_split_stream_logging
from .pruning import ProjectionMetrics, prune_json

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="json-schema-pruner",
        description="Keep only the fields of a JSON document that a schema declares.",
    )
    parser.add_argument("document", help="Path to the JSON document, or '-' for stdin.")
    parser.add_argument("schema", help="Path to the JSON schema with top-level 'properties'.")
    parser.add_argument("-o", "--output", help="Write the pruned document here instead of stdout.")
    parser.add_argument("--indent", type=int, default=None, help="Pretty-print with this indent.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser


def _read_bytes(source: str, label: str) -> bytes:
    if source == "-":
        return sys.stdin.buffer.read()
    try:
        return Path(source).read_bytes()
    except OSError as exc:
        raise MalformedInput(f"Cannot read {label} file {source!r}: {exc.strerror}") from exc


def _log_metrics(metrics: ProjectionMetrics) -> None:
    logger.info(
        "Kept %d top-level fields (%d -> %d bytes) in %d us",
        metrics.kept_fields,
        metrics.input_bytes,
        metrics.output_bytes,
        metrics.elapsed_us,
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    # Logs go to stderr so stdout carries only the pruned document.
    configure_split_stream_logging(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        stdout_stream=sys.stderr,
    )

    try:
        document_text = _read_bytes(args.document, "document")
        schema_text = _read_bytes(args.schema, "schema")
        output = prune_json(
            document_text,
            schema_text,
            indent=args.indent,
            metrics_hook=_log_metrics if args.verbose else None,
        )
    except ProjectionError as exc:
        logger.debug("Pruning failed: %s", exc)
        sys.stderr.write(json.dumps(exc.to_dict(), ensure_ascii=False) + "\n")
        return 1

    if args.output:
        try:
            Path(args.output).write_text(output + "\n", encoding="utf-8")
        except OSError as exc:
            error = {
                "kind": "OutputError",
                "path": None,
                "message": f"Cannot write output file {args.output!r}: {exc.strerror}",
            }
            sys.stderr.write(json.dumps(error, ensure_ascii=False) + "\n")
            return 1
    else:
        sys.stdout.write(output + "\n")
    return 0
