"""
Descriptive statistics over polars frames.

Everything here is a thin composition of polars aggregations: counts, means, standard
deviations (sample, ddof=1), standard errors, proportions, histogram bins, weighted means, and
first-to-last changes. Outputs are sorted so repeated runs print identical tables.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Final

import polars as pl

__all__ = [
    "describe",
    "summarize_by",
    "proportions",
    "bin_counts",
    "weighted_mean_by",
    "percent_change",
]

_EDGE_TOL: Final[float] = 1e-9
_EDGE_DIGITS: Final[int] = 10


def _as_list(by: str | Sequence[str]) -> list[str]:
    return [by] if isinstance(by, str) else list(by)


def _bin_edge(index: pl.Expr, width: float, origin: float) -> pl.Expr:
    return (index * width + origin).round(_EDGE_DIGITS)


def describe(df: pl.DataFrame, column: str) -> pl.DataFrame:
    """
    One-row summary of a numeric column: n, mean, sd, min, median, max.

    Nulls are excluded from every statistic; `n` counts non-null values.

    Examples:
        >>> describe(pl.DataFrame({"x": [1.0, 2.0, 3.0]}), "x").row(0, named=True)["mean"]
        2.0
    """
    if column not in df.columns:
        raise ValueError(f"describe requires column {column!r}")
    c = pl.col(column)
    return df.select(
        c.count().alias("n"),
        c.mean().alias("mean"),
        c.std().alias("sd"),
        c.min().alias("min"),
        c.median().alias("median"),
        c.max().alias("max"),
    )


def summarize_by(df: pl.DataFrame, by: str | Sequence[str], value: str) -> pl.DataFrame:
    """
    Per-group n, mean, sd and standard error of `value`, sorted by the group keys.

    Args:
        df (pl.DataFrame): Input frame.
        by (str | Sequence[str]): Grouping column(s).
        value (str): Numeric column to summarize.

    Returns:
        pl.DataFrame: by..., n, mean, sd, se.
    """
    keys = _as_list(by)
    c = pl.col(value)
    return (
        df.group_by(keys)
        .agg(c.count().alias("n"), c.mean().alias("mean"), c.std().alias("sd"))
        .with_columns((pl.col("sd") / pl.col("n").cast(pl.Float64).sqrt()).alias("se"))
        .sort(keys)
    )


def proportions(
    df: pl.DataFrame,
    count: str,
    within: str | Sequence[str] | None = None,
    *,
    name: str = "prop",
) -> pl.DataFrame:
    """
    Add a proportion column: `count` over its grand total, or over each `within` group.

    Proportions sum to 1 per group (or overall when within is None).

    Examples:
        >>> df = pl.DataFrame({"g": ["a", "a", "b"], "n": [1, 3, 2]})
        >>> proportions(df, "n", "g")["prop"].to_list()
        [0.25, 0.75, 1.0]
    """
    total = pl.col(count).sum()
    if within is not None:
        total = total.over(_as_list(within))
    return df.with_columns((pl.col(count) / total).alias(name))


def bin_counts(
    df: pl.DataFrame, column: str, width: float, *, origin: float = 0.0
) -> pl.DataFrame:
    """
    Histogram table with fixed-width bins [bin_start, bin_end).

    Args:
        df (pl.DataFrame): Input frame.
        column (str): Numeric column to bin.
        width (float): Bin width (> 0).
        origin (float): Left edge that bins are aligned to.

    Returns:
        pl.DataFrame: bin_start, bin_end, count (only non-empty bins), sorted by bin_start.

    Raises:
        ValueError: If width is not positive.
    """
    if width <= 0:
        raise ValueError("width must be positive")
    # Values within float noise of an edge belong to the bin that starts there
    index = ((pl.col(column) - origin) / width + _EDGE_TOL).floor()
    return (
        df.drop_nulls(column)
        .select(index.alias("_bin"))
        .group_by("_bin")
        .agg(pl.len().alias("count"))
        .with_columns(
            _bin_edge(pl.col("_bin"), width, origin).alias("bin_start"),
            _bin_edge(pl.col("_bin") + 1, width, origin).alias("bin_end"),
        )
        .select("bin_start", "bin_end", "count")
        .sort("bin_start")
    )


def weighted_mean_by(
    df: pl.DataFrame,
    by: str | Sequence[str],
    value: str,
    weight: str,
    *,
    name: str | None = None,
) -> pl.DataFrame:
    """
    Per-group weighted mean sum(value*weight)/sum(weight), ignoring rows with null value or weight.

    Used for labor-force-weighted unemployment rates.
    """
    keys = _as_list(by)
    out = name or f"{value}_weighted"
    return (
        df.drop_nulls([value, weight])
        .group_by(keys)
        .agg(
            ((pl.col(value) * pl.col(weight)).sum() / pl.col(weight).sum()).alias(out),
            pl.len().alias("n"),
        )
        .sort(keys)
    )


def percent_change(
    df: pl.DataFrame, by: str | Sequence[str], time: str, value: str
) -> pl.DataFrame:
    """
    First-to-last change of `value` per group, ordered by `time`; null values are skipped.

    Returns:
        pl.DataFrame: by..., first_<time>, last_<time>, first, last, change, pct_change.
    """
    keys = _as_list(by)
    return (
        df.drop_nulls(value)
        .sort([*keys, time])
        .group_by(keys, maintain_order=True)
        .agg(
            pl.col(time).first().alias(f"first_{time}"),
            pl.col(time).last().alias(f"last_{time}"),
            pl.col(value).first().alias("first"),
            pl.col(value).last().alias("last"),
        )
        .with_columns((pl.col("last") - pl.col("first")).alias("change"))
        .with_columns((100.0 * pl.col("change") / pl.col("first")).alias("pct_change"))
        .sort(keys)
    )
