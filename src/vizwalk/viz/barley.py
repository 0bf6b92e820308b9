"""
Barley yields (Immer et al., as redrawn by Cleveland): the Morris site's years look swapped.

- `dot_plot` is Cleveland's trellis display: one panel per site, varieties ordered by median
  yield, color by year.
- `site_year_means_chart` draws a slope line per site between the two years so that the one
  site going the "wrong" way stands out.
"""

from __future__ import annotations

import altair as alt
import polars as pl

from .base import apply_chart_defaults, as_data, validate_schema

__all__ = ["dot_plot", "site_year_means_chart"]

_SCHEMA = {"yield": pl.Float64, "variety": pl.Utf8, "year": pl.Int64, "site": pl.Utf8}


def dot_plot(df: pl.DataFrame, *, panel_width: int = 260, panel_height: int = 140) -> alt.TopLevelMixin:
    """
    Trellis dot plot of yield by variety, one row per site.

    Varieties and sites are both ordered by median yield so the panels read top-down from the
    most to the least productive.
    """
    df = validate_schema(df, _SCHEMA)
    ch = (
        alt.Chart(as_data(df))
        .mark_point(filled=True, size=50)
        .encode(
            x=alt.X("yield:Q", scale=alt.Scale(zero=False), title="yield (bushels/acre)"),
            y=alt.Y(
                "variety:N",
                sort=alt.EncodingSortField(field="yield", op="median", order="descending"),
                title=None,
            ),
            color=alt.Color("year:N"),
            row=alt.Row(
                "site:N",
                sort=alt.EncodingSortField(field="yield", op="median", order="descending"),
                title=None,
            ),
            tooltip=["site:N", "variety:N", "year:O", "yield:Q"],
        )
        .properties(width=panel_width, height=panel_height)
    )
    return apply_chart_defaults(ch)


def site_year_means_chart(
    means: pl.DataFrame, *, width: int | None = None, height: int | None = None
) -> alt.TopLevelMixin:
    """
    Slope chart of mean yield per site between the two years.

    Args:
        means (pl.DataFrame): site (str), year (i64), mean_yield (f64); see `site_year_means`.
    """
    means = validate_schema(means, {"site": pl.Utf8, "year": pl.Int64, "mean_yield": pl.Float64})
    data = as_data(means)
    lines = alt.Chart().mark_line().encode(
        x=alt.X("year:O", title=None),
        y=alt.Y("mean_yield:Q", scale=alt.Scale(zero=False), title="mean yield"),
        color=alt.Color("site:N"),
    )
    labels = (
        alt.Chart()
        .transform_filter(alt.datum.year == int(means["year"].max()))
        .mark_text(align="left", dx=6)
        .encode(
            x=alt.X("year:O"),
            y=alt.Y("mean_yield:Q"),
            text=alt.Text("site:N"),
            color=alt.Color("site:N", legend=None),
        )
    )
    points = alt.Chart().mark_point(filled=True).encode(
        x="year:O", y="mean_yield:Q", color=alt.Color("site:N")
    )
    ch = alt.layer(lines, points, labels, data=data).properties(
        width=width or 260, height=height or 320, title="Mean yield by site, 1931 to 1932"
    )
    return apply_chart_defaults(ch)
