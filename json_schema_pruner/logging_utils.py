import logging
import sys
from typing import Optional


class _MaxLevelFilter(logging.Filter):
    def __init__(self, max_level: int) -> None:
        super().__init__()
        self._max_level = max_level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno <= self._max_level


def configure_split_stream_logging(
    *,
    level: int = logging.INFO,
    stderr_level: int = logging.WARNING,
    formatter: Optional[logging.Formatter] = None,
    stdout_stream=None,
) -> None:
    """Configure root logging:

    - DEBUG/INFO go to stdout (or `stdout_stream`)
    - WARNING/ERROR/CRITICAL go to stderr

    The CLI passes stderr as `stdout_stream` so diagnostics never mix with a
    pruned document written to stdout.
    """

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)

    if formatter is None:
        formatter = logging.Formatter("%(name)s - %(levelname)s - %(message)s")

    if stderr_level < logging.DEBUG:
        stderr_level = logging.DEBUG

    low_handler = logging.StreamHandler(stream=stdout_stream or sys.stdout)
    low_handler.setLevel(logging.DEBUG)
    low_handler.addFilter(_MaxLevelFilter(stderr_level - 1))
    low_handler.setFormatter(formatter)

    stderr_handler = logging.StreamHandler(stream=sys.stderr)
    stderr_handler.setLevel(stderr_level)
    stderr_handler.setFormatter(formatter)

    root.addHandler(low_handler)
    root.addHandler(stderr_handler)


def level_from_name(name: Optional[str], default: int = logging.INFO) -> int:
    if not name:
        return default
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else default
