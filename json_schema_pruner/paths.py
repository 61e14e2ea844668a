from __future__ import annotations

ROOT = "(root)"


def escape_path_segment(segment: str) -> str:
    """Escape a single key segment for dot-path representation.

    - Dots are escaped as '\\.' so keys like 'gpt-3.5-turbo' remain one segment.
    - Opening brackets are escaped as '\\[' so they are not read as an index.
    - Double quotes are escaped as '\\"' and the empty key renders as '""'.
    - A leading '(' is escaped so a key named '(root)' is not the root.
    - Backslashes are escaped as '\\\\' to preserve round-tripping.
    """
    if not isinstance(segment, str):
        segment = str(segment)
    if segment == '':
        return '""'
    escaped = segment.replace('\\', '\\\\').replace('.', '\\.').replace('[', '\\[').replace('"', '\\"')
    if escaped.startswith('('):
        escaped = '\\' + escaped
    return escaped


def child_path(parent: str, key: str) -> str:
    escaped = escape_path_segment(key)
    if parent in (None, '', ROOT):
        return escaped
    return f"{parent}.{escaped}"


def index_path(parent: str, index: int) -> str:
    if parent in (None, '', ROOT):
        return f"{ROOT}[{index}]"
    return f"{parent}[{index}]"
