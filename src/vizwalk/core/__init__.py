"""
Core package aggregator for vizwalk contracts (grammar, dataset descriptors, constants, errors).

## Contracts (single source of truth)
- Grammar — dataset names, step kinds, encoding types, lower_snake helpers.
- Tables — descriptors of the cleaned columns each dataset reader returns.
- Constants — chart sizing, missing sentinels, map sources.
- Errors — GrammarError, SchemaError, LessonError.

## Notes
- Zero-IO policy: stdlib only; no file/network IO.
- Naming policy: enum `.value` and column names are lower_snake.

## Downstream usage
- vizwalk.io — validates cleaned frames against `tables` descriptors.
- vizwalk.viz — uses `grammar.encoding_shorthand` and `constants` for chart sizing.
- vizwalk.lessons — validates lesson ids with `grammar.assert_lower_snake`.
"""

from __future__ import annotations

from .errors import GrammarError, LessonError, SchemaError
from .grammar import DatasetName, EncodingType, StepKind
from .tables import DatasetDescriptor, get_dataset, list_datasets

__all__ = [
    "DatasetName",
    "EncodingType",
    "StepKind",
    "DatasetDescriptor",
    "get_dataset",
    "list_datasets",
    "GrammarError",
    "LessonError",
    "SchemaError",
]
