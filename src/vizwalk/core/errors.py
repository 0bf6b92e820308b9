"""
Core exception types raised by grammar normalization, dataset descriptors, and lessons.

Provides typed exceptions for core-domain failures:
- GrammarError for naming/normalization violations (e.g., unknown dataset name).
- SchemaError for descriptor-level constraints (column sets, dtypes).
- LessonError for unknown lessons and failing lesson steps.

Notes:
    - This module uses only the Python standard library and has no side effects.
    - IO-layer failures (missing columns in a file, unparsable text tables) are raised
      as vizwalk.io.errors.Io* instead.

Examples:
    >>> from vizwalk.core.errors import GrammarError
    >>> try:
    ...     raise GrammarError("dataset name must be lower_snake")
    ... except ValueError as e:
    ...     msg = str(e)
    >>> "lower_snake" in msg
    True
"""

from __future__ import annotations

__all__ = [
    "GrammarError",
    "SchemaError",
    "LessonError",
]


class GrammarError(ValueError):
    """Naming/normalization failure (e.g., not lower_snake or unknown enum value)."""


class SchemaError(ValueError):
    """Descriptor-level validation failure (column sets, dtype names)."""


class LessonError(LookupError):
    """Unknown lesson id, or a lesson step that failed to build its output."""
