"""
vizwalk.wrangle — Cleaning, descriptive statistics, reshaping and geographic joins.

## Responsibilities
- clean — header normalization, missing-value sentinels, numeric parsing, field splitting.
- stats — describe, grouped summaries, proportions, histogram bins, weighted means, changes.
- reshape — wide <-> long.
- geo — country-name to ISO code joins; county FIPS ids.

## Import DAG discipline
- Depends on polars and vizwalk.core only; used by vizwalk.io readers and the lessons.
"""

from __future__ import annotations

from . import clean, geo, reshape, stats

__all__ = ["clean", "geo", "reshape", "stats"]
