"""
Old Faithful views: histograms at several bin widths, a kernel density, and a scatterplot.

The eruption-duration distribution is bimodal; how obvious that is depends on the bin width or
bandwidth chosen, which is the point of `bin_width_comparison`.
"""

from __future__ import annotations

from collections.abc import Sequence

import altair as alt
import polars as pl

from .base import apply_chart_defaults, as_data, empty_chart, sized, validate_schema

__all__ = ["histogram", "bin_width_comparison", "density", "scatter"]

_TITLES = {"eruptions": "eruption duration (min)", "waiting": "waiting time (min)"}


def _histogram(df: pl.DataFrame, column: str, bin_width: float) -> alt.Chart:
    return (
        alt.Chart(as_data(df.select(column)))
        .mark_bar()
        .encode(
            x=alt.X(
                f"{column}:Q",
                bin=alt.Bin(step=bin_width),
                title=_TITLES.get(column, column),
            ),
            y=alt.Y("count():Q", title="eruptions"),
        )
    )


def histogram(
    df: pl.DataFrame,
    bin_width: float = 0.25,
    *,
    column: str = "eruptions",
    width: int | None = None,
    height: int | None = None,
) -> alt.TopLevelMixin:
    """Histogram of one column with a fixed bin width."""
    if bin_width <= 0:
        raise ValueError("bin_width must be positive")
    df = validate_schema(df, {column: pl.Float64})
    ch = sized(_histogram(df, column, bin_width), width, height)
    return apply_chart_defaults(ch.properties(title=f"Bin width {bin_width:g}"))


def bin_width_comparison(
    df: pl.DataFrame,
    widths: Sequence[float] = (0.1, 0.25, 0.5, 1.0),
    *,
    column: str = "eruptions",
) -> alt.TopLevelMixin:
    """Side-by-side histograms of the same column at several bin widths."""
    if not widths or any(w <= 0 for w in widths):
        raise ValueError("widths must be positive")
    panels = [
        _histogram(df, column, w).properties(title=f"bin width {w:g}", width=180, height=160)
        for w in widths
    ]
    return apply_chart_defaults(alt.hconcat(*panels))


def density(
    df: pl.DataFrame,
    bandwidth: float = 0.2,
    *,
    column: str = "eruptions",
    width: int | None = None,
    height: int | None = None,
) -> alt.TopLevelMixin:
    """Gaussian kernel density estimate computed by Vega-Lite's density transform."""
    if bandwidth <= 0:
        raise ValueError("bandwidth must be positive")
    values = df[column].drop_nulls()
    if values.is_empty():
        return empty_chart(f"no {column} values to plot")
    lo, hi = values.min(), values.max()
    ch = (
        alt.Chart(as_data(df.select(column)))
        .transform_density(
            column,
            as_=[column, "density"],
            bandwidth=bandwidth,
            extent=[float(lo), float(hi)],
        )
        .mark_area(opacity=0.6, line=True)
        .encode(
            x=alt.X(f"{column}:Q", title=_TITLES.get(column, column)),
            y=alt.Y("density:Q"),
        )
    )
    ch = sized(ch, width, height).properties(title=f"Density, bandwidth {bandwidth:g}")
    return apply_chart_defaults(ch)


def scatter(
    df: pl.DataFrame,
    *,
    color: str | None = "kind",
    width: int | None = None,
    height: int | None = None,
) -> alt.TopLevelMixin:
    """Waiting time against eruption duration; colored by `color` when the column exists."""
    validate_schema(df, {"eruptions": pl.Float64, "waiting": pl.Int64})
    enc: dict[str, object] = {
        "x": alt.X("eruptions:Q", scale=alt.Scale(zero=False), title=_TITLES["eruptions"]),
        "y": alt.Y("waiting:Q", scale=alt.Scale(zero=False), title=_TITLES["waiting"]),
        "tooltip": ["eruptions:Q", "waiting:Q"],
    }
    if color and color in df.columns:
        enc["color"] = alt.Color(f"{color}:N")
    ch = alt.Chart(as_data(df)).mark_point(filled=True, opacity=0.7).encode(**enc)
    ch = sized(ch, width, height).properties(title="Longer eruptions, longer waits")
    return apply_chart_defaults(ch)
