"""Domain errors."""

from __future__ import annotations


class YamlTreeError(Exception):
    """Base yamltree error."""


class ValidationError(YamlTreeError):
    """Validation error for user-visible failures."""


class PrintError(YamlTreeError, RuntimeError):
    """Printing an in-memory tree failed; always a defect, never routine."""
