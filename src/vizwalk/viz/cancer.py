"""
Cancer incidence views.

`trend_chart` plots a measure over time per site with one panel per sex; `site_bars` compares
sites in one year with the sexes side by side (yOffset). Suppressed cells arrive as nulls and
are dropped before drawing so lines break cleanly instead of dropping to zero.
"""

from __future__ import annotations

import altair as alt
import polars as pl

from .base import apply_chart_defaults, as_data, empty_chart, validate_schema

__all__ = ["MEASURES", "trend_chart", "site_bars"]

MEASURES: dict[str, str] = {
    "age_adjusted_rate": "age-adjusted rate per 100,000",
    "crude_rate": "crude rate per 100,000",
    "count": "new cases",
}


def _check_measure(measure: str) -> str:
    if measure not in MEASURES:
        raise ValueError(f"unknown measure {measure!r}; expected one of {sorted(MEASURES)}")
    return MEASURES[measure]


def trend_chart(df: pl.DataFrame, measure: str = "age_adjusted_rate") -> alt.TopLevelMixin:
    """
    Measure by year, one line per cancer site, faceted by sex.

    Raises:
        ValueError: If `measure` is unknown or required columns are missing.
    """
    title = _check_measure(measure)
    df = validate_schema(
        df, {"year": pl.Int64, "sex": pl.Utf8, "cancer_site": pl.Utf8, measure: pl.Float64}
    ).filter(pl.col(measure).is_not_null())
    if df.is_empty():
        return empty_chart(f"no {measure} values to plot")
    enc = {
        "x": alt.X("year:O", title=None),
        "y": alt.Y(f"{measure}:Q", title=title),
        "color": alt.Color("cancer_site:N", title="site"),
    }
    line = alt.Chart().mark_line().encode(**enc)
    points = alt.Chart().mark_point(filled=True, size=30).encode(
        **enc, tooltip=["cancer_site:N", "year:O", alt.Tooltip(f"{measure}:Q", format=".1f")]
    )
    ch = (
        alt.layer(line, points, data=as_data(df))
        .properties(width=260, height=240)
        .facet(column=alt.Column("sex:N", title=None))
        .properties(title=f"{title.capitalize()} by site")
    )
    return apply_chart_defaults(ch)


def site_bars(
    df: pl.DataFrame,
    year: int,
    measure: str = "age_adjusted_rate",
    *,
    width: int | None = None,
    height: int | None = None,
) -> alt.TopLevelMixin:
    """Horizontal bars per site for one year, female and male bars side by side."""
    title = _check_measure(measure)
    df = validate_schema(
        df, {"year": pl.Int64, "sex": pl.Utf8, "cancer_site": pl.Utf8, measure: pl.Float64}
    ).filter((pl.col("year") == year) & pl.col(measure).is_not_null())
    if df.is_empty():
        return empty_chart(f"no {measure} values for {year}")
    ch = (
        alt.Chart(as_data(df))
        .mark_bar()
        .encode(
            x=alt.X(f"{measure}:Q", title=title),
            y=alt.Y(
                "cancer_site:N",
                sort=alt.EncodingSortField(field=measure, op="max", order="descending"),
                title=None,
            ),
            yOffset=alt.YOffset("sex:N"),
            color=alt.Color("sex:N"),
            tooltip=["cancer_site:N", "sex:N", alt.Tooltip(f"{measure}:Q", format=".1f")],
        )
        .properties(width=width or 360, height=height or 280, title=f"{title.capitalize()}, {year}")
    )
    return apply_chart_defaults(ch)
