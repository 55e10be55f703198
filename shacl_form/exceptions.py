"""Custom exceptions for the SHACL form editors."""
from __future__ import annotations


class ShaclFormError(ValueError):
    """Base exception for shape handling errors."""


class ShapeError(ShaclFormError):
    """Raised when a property shape cannot be turned into a ``PropertySpec``."""

    def __init__(self, node: object, reason: str) -> None:
        super().__init__(f"Invalid property shape {node}: {reason}")
        self.node = node
        self.reason = reason


__all__ = ["ShaclFormError", "ShapeError"]
