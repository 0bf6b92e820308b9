"""
Schema validation utilities for vizwalk.io.

Purpose
- Validate cleaned Polars DataFrames against dataset descriptors from vizwalk.core.tables.
- Apply pragmatic checks with safe casting for scalar dtypes.

Checks performed
- Required columns present.
- When strict=True: no columns outside the descriptor.
- Scalar types ("i64","f64","str") are cast non-strictly when the dtype differs.
- Required columns contain no nulls after casting.
"""

from __future__ import annotations

from collections.abc import Iterable

import polars as pl

from vizwalk.core.grammar import DatasetName
from vizwalk.core.tables import DatasetDescriptor, get_dataset

from .errors import IoSchemaError

# Polars exposes dtype singletons/classes (e.g., pl.Int64); keep this mapping loosely typed.
_DTYPE_MAP: dict[str, object] = {
    "i64": pl.Int64,
    "f64": pl.Float64,
    "str": pl.Utf8,
}


def _safe_cast(df: pl.DataFrame, col: str, target: object) -> pl.DataFrame:
    try:
        return df.with_columns(pl.col(col).cast(target, strict=False))  # type: ignore[arg-type]
    except pl.exceptions.PolarsError as exc:
        raise IoSchemaError(f"failed to cast column {col!r} to {target}: {exc}") from exc


def _ensure_columns_present(df: pl.DataFrame, needed: Iterable[str]) -> None:
    missing = [c for c in needed if c not in df.columns]
    if missing:
        raise IoSchemaError(f"missing required columns: {missing!r}")


def _ensure_no_extra_columns(df: pl.DataFrame, allowed: set[str]) -> None:
    extras = [c for c in df.columns if c not in allowed]
    if extras:
        raise IoSchemaError(f"unexpected columns present: {extras!r} (allowed={sorted(allowed)!r})")


def validate_frame_against_descriptor(
    df: pl.DataFrame,
    desc: DatasetDescriptor,
    *,
    strict: bool = True,
) -> pl.DataFrame:
    """
    Validate a Polars DataFrame against a DatasetDescriptor.

    Args:
        df (pl.DataFrame): Cleaned frame to validate.
        desc (DatasetDescriptor): Descriptor from vizwalk.core.tables.
        strict (bool): Enforce the exact column set (no extras) when True.

    Returns:
        pl.DataFrame: Frame with descriptor column order and safe casts applied.

    Raises:
        IoSchemaError: If required columns are missing or null, or extras are present under
            strict mode.
    """
    _ensure_columns_present(df, desc.required)
    if strict:
        _ensure_no_extra_columns(df, set(desc.columns))

    for col, dtype_name in desc.columns.items():
        if col not in df.columns:
            continue
        expected = _DTYPE_MAP[dtype_name]
        if df.schema[col] != expected:
            df = _safe_cast(df, col, expected)

    if desc.required and df.height:
        nulls = df.select(pl.col(c).null_count() for c in desc.required).row(0)
        bad = [c for c, n in zip(desc.required, nulls) if n]
        if bad:
            raise IoSchemaError(f"required columns contain nulls: {bad!r}")

    ordered = [c for c in desc.columns if c in df.columns]
    ordered += [c for c in df.columns if c not in desc.columns]
    return df.select(ordered)


def validate_frame_for_dataset(
    df: pl.DataFrame,
    name: DatasetName | str,
    *,
    strict: bool = True,
) -> pl.DataFrame:
    """Validate a DataFrame against the descriptor registered for `name`."""
    return validate_frame_against_descriptor(df, get_dataset(name), strict=strict)
