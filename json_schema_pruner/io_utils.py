from __future__ import annotations

import json
from typing import Any, Dict, List, Optional, Tuple

from .errors import MalformedInput


def _reject_duplicate_keys(pairs: List[Tuple[str, Any]]) -> Dict[str, Any]:
    obj: Dict[str, Any] = {}
    for key, value in pairs:
        if key in obj:
            raise MalformedInput(f"Duplicate key {key!r}.")
        obj[key] = value
    return obj


def _reject_constant(name: str):
    raise MalformedInput(f"Non-standard JSON constant {name}.")


def parse_json_text(text, label: str = "input") -> Any:
    """Parse standard JSON text (str or UTF-8 bytes) into plain Python values."""
    if text is None:
        raise MalformedInput(f"No {label} provided.")
    if isinstance(text, (bytes, bytearray)):
        try:
            text = text.decode('utf-8')
        except UnicodeDecodeError as exc:
            raise MalformedInput(f"{label.capitalize()} is not valid UTF-8: {exc}") from exc

    try:
        return json.loads(
            text,
            object_pairs_hook=_reject_duplicate_keys,
            parse_constant=_reject_constant,
        )
    except MalformedInput as exc:
        raise MalformedInput(f"Error parsing {label}: {exc.message}") from exc
    except json.JSONDecodeError as exc:
        raise MalformedInput(f"Error parsing {label}: {exc}") from exc
    except RecursionError as exc:
        raise MalformedInput(f"Error parsing {label}: nesting is too deep.") from exc


def read_json_content(file_obj, label: str = "input") -> Any:
    """Read JSON content from an uploaded file or file path."""
    if file_obj is None:
        raise MalformedInput(f"No {label} file uploaded.")

    if hasattr(file_obj, 'read'):
        if hasattr(file_obj, 'seek'):
            file_obj.seek(0)
        return parse_json_text(file_obj.read(), label)

    path = file_obj.name if hasattr(file_obj, 'name') else file_obj
    with open(path, 'rb') as f:
        return parse_json_text(f.read(), label)


def dump_json(value: Any, indent: Optional[int] = None) -> str:
    separators = (',', ':') if indent is None else (',', ': ')
    return json.dumps(value, indent=indent, separators=separators, ensure_ascii=False)
