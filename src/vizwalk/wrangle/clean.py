"""
Column-level cleaning steps used by the readers and lessons.

Each function takes and returns a polars DataFrame and performs one named step: normalize
headers, turn sentinel strings into nulls, parse numbers written with thousands separators,
split a combined field, zero-pad codes.
"""

from __future__ import annotations

from collections.abc import Sequence

import polars as pl

from vizwalk.core.constants import MISSING_SENTINELS
from vizwalk.core.grammar import to_lower_snake

__all__ = [
    "rename_to_lower_snake",
    "strip_strings",
    "null_sentinels",
    "parse_numeric",
    "split_combined",
    "zero_pad",
]


def rename_to_lower_snake(df: pl.DataFrame) -> pl.DataFrame:
    """Rename every column to its lower_snake form ("Cancer Site" -> "cancer_site")."""
    return df.rename({c: to_lower_snake(c) for c in df.columns})


def strip_strings(df: pl.DataFrame, columns: Sequence[str] | None = None) -> pl.DataFrame:
    """Strip surrounding whitespace from string columns (all of them when columns is None)."""
    cols = list(columns) if columns is not None else [
        c for c, dt in df.schema.items() if dt == pl.Utf8
    ]
    if not cols:
        return df
    return df.with_columns(pl.col(c).str.strip_chars() for c in cols)


def null_sentinels(
    df: pl.DataFrame,
    columns: Sequence[str],
    sentinels: Sequence[str] = MISSING_SENTINELS,
) -> pl.DataFrame:
    """
    Replace sentinel strings ("~", ".", "N.A.", ...) with nulls.

    Comparison is made on stripped values, so " N.A. " matches "N.A.".

    Examples:
        >>> df = pl.DataFrame({"count": ["12", "~", " . "]})
        >>> null_sentinels(df, ["count"])["count"].to_list()
        ['12', None, None]
    """
    marks = list(sentinels)
    exprs = [
        pl.when(pl.col(c).str.strip_chars().is_in(marks))
        .then(pl.lit(None, dtype=pl.Utf8))
        .otherwise(pl.col(c))
        .alias(c)
        for c in columns
    ]
    return df.with_columns(exprs) if exprs else df


def parse_numeric(
    df: pl.DataFrame,
    columns: Sequence[str],
    dtype: type[pl.DataType] | pl.DataType = pl.Float64,
    *,
    thousands: str = ",",
) -> pl.DataFrame:
    """
    Parse string columns holding numbers such as "26,597" or " 2.6 ".

    Unparsable cells become null (non-strict cast). Integer targets go through Float64 so
    values like "4.0" still parse.

    Examples:
        >>> df = pl.DataFrame({"n": ["26,597", " 695 ", "x"]})
        >>> parse_numeric(df, ["n"], pl.Int64)["n"].to_list()
        [26597, 695, None]
    """
    exprs: list[pl.Expr] = []
    for c in columns:
        e = pl.col(c).cast(pl.Utf8).str.strip_chars()
        if thousands:
            e = e.str.replace_all(thousands, "", literal=True)
        e = e.cast(pl.Float64, strict=False)
        if dtype != pl.Float64:
            e = e.cast(dtype, strict=False)
        exprs.append(e.alias(c))
    return df.with_columns(exprs) if exprs else df


def split_combined(
    df: pl.DataFrame,
    column: str,
    into: Sequence[str],
    pattern: str,
    *,
    drop: bool = True,
) -> pl.DataFrame:
    """
    Split one string field into several using a regex with one capture group per target.

    Args:
        df (pl.DataFrame): Input frame.
        column (str): Combined field, e.g. "Autauga County, AL".
        into (Sequence[str]): Target column names, one per capture group.
        pattern (str): Regex with len(into) capture groups.
        drop (bool): Drop the combined column afterwards.

    Examples:
        >>> df = pl.DataFrame({"name": ["Autauga County, AL"]})
        >>> out = split_combined(df, "name", ["county", "state"], r"^(.*),\\s*([A-Z]{2})$")
        >>> out.row(0)
        ('Autauga County', 'AL')
    """
    exprs = [
        pl.col(column).str.extract(pattern, i + 1).str.strip_chars().alias(name)
        for i, name in enumerate(into)
    ]
    out = df.with_columns(exprs)
    if drop and column not in into:
        out = out.drop(column)
    return out


def zero_pad(df: pl.DataFrame, column: str, width: int) -> pl.DataFrame:
    """Left-pad a code column with zeros ("1" -> "01" for width 2)."""
    return df.with_columns(
        pl.col(column).cast(pl.Utf8).str.strip_chars().str.zfill(width).alias(column)
    )
