"""Exceptions raised while pruning a document against a schema."""
from __future__ import annotations

from typing import Any, Dict, Optional


class ProjectionError(Exception):
    """Base exception for pruning errors.

    Carries the error kind, the dot-path of the offending key (if known)
    and a human-readable message.
    """

    kind = "ProjectionError"

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.path = path

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, "path": self.path, "message": self.message}

    def __str__(self) -> str:
        if self.path is not None:
            return f"{self.kind} at {self.path}: {self.message}"
        return f"{self.kind}: {self.message}"


class MalformedInput(ProjectionError):
    """Raised when document or schema text is not valid JSON."""

    kind = "MalformedInput"


class SchemaMismatch(ProjectionError):
    """Raised when a schema descriptor is structurally invalid."""

    kind = "SchemaMismatch"


class TypeMismatch(ProjectionError):
    """Raised when a document value disagrees with its declared schema type."""

    kind = "TypeMismatch"
