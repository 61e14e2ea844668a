import logging

import pytest


@pytest.fixture
def restore_root_logging():
    """Undo root logger changes made by entry points under test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
