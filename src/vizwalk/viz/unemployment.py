"""
County unemployment views.

The choropleth joins county rates onto US county geometry by integer FIPS id with a Vega-Lite
lookup transform; counties missing from the table keep the gray background shape.
"""

from __future__ import annotations

import altair as alt
import polars as pl

from vizwalk.core.constants import TOPOJSON_BASE_URL, US_COUNTIES_TOPOJSON

from .base import apply_chart_defaults, as_data, validate_schema

__all__ = ["rate_histogram", "county_choropleth", "state_bars"]

_RATE_TITLE = "unemployment rate (%)"


def rate_histogram(
    df: pl.DataFrame,
    bin_width: float = 0.5,
    *,
    width: int | None = None,
    height: int | None = None,
) -> alt.TopLevelMixin:
    """Distribution of county unemployment rates."""
    if bin_width <= 0:
        raise ValueError("bin_width must be positive")
    df = validate_schema(df, {"unemployment_rate": pl.Float64}).filter(
        pl.col("unemployment_rate").is_not_null()
    )
    ch = (
        alt.Chart(as_data(df.select("unemployment_rate")))
        .mark_bar()
        .encode(
            x=alt.X("unemployment_rate:Q", bin=alt.Bin(step=bin_width), title=_RATE_TITLE),
            y=alt.Y("count():Q", title="counties"),
        )
        .properties(width=width or 420, height=height or 240, title="County unemployment rates")
    )
    return apply_chart_defaults(ch)


def county_choropleth(
    df: pl.DataFrame,
    topo_url: str | None = None,
    *,
    width: int | None = None,
    height: int | None = None,
) -> alt.TopLevelMixin:
    """
    US county map colored by unemployment rate.

    Args:
        df (pl.DataFrame): county_id (i64), county_name, state, unemployment_rate (f64).
        topo_url (str | None): URL of a us-10m style TopoJSON with a `counties` object.
            Defaults to the vega-datasets copy.
    """
    df = validate_schema(
        df,
        {
            "county_id": pl.Int64,
            "county_name": pl.Utf8,
            "state": pl.Utf8,
            "unemployment_rate": pl.Float64,
        },
    )
    url = topo_url or f"{TOPOJSON_BASE_URL}/{US_COUNTIES_TOPOJSON}"
    counties = alt.topo_feature(url, "counties")
    lookup = alt.LookupData(
        data=as_data(df.select("county_id", "county_name", "state", "unemployment_rate")),
        key="county_id",
        fields=["county_name", "state", "unemployment_rate"],
    )
    background = alt.Chart(counties).mark_geoshape(fill="#e5e5e5", stroke="white", strokeWidth=0.25)
    rates = (
        alt.Chart(counties)
        .mark_geoshape(stroke="white", strokeWidth=0.25)
        .transform_lookup(lookup="id", from_=lookup)
        .transform_filter("isValid(datum.unemployment_rate)")
        .encode(
            color=alt.Color("unemployment_rate:Q", scale=alt.Scale(scheme="blues"), title=_RATE_TITLE),
            tooltip=["county_name:N", "state:N", alt.Tooltip("unemployment_rate:Q", format=".1f")],
        )
    )
    ch = (
        alt.layer(background, rates)
        .project(type="albersUsa")
        .properties(width=width or 640, height=height or 400, title="Unemployment rate by county")
    )
    return apply_chart_defaults(ch)


def state_bars(summary: pl.DataFrame, *, width: int | None = None) -> alt.TopLevelMixin:
    """
    Labor-force weighted unemployment rate per state, longest bar first.

    Args:
        summary (pl.DataFrame): state, unemployment_rate_weighted, n; see `state_summary`.
    """
    summary = validate_schema(summary, {"state": pl.Utf8, "unemployment_rate_weighted": pl.Float64})
    tooltip: list[object] = ["state:N", alt.Tooltip("unemployment_rate_weighted:Q", format=".2f")]
    if "n" in summary.columns:
        tooltip.append(alt.Tooltip("n:Q", title="counties"))
    ch = (
        alt.Chart(as_data(summary))
        .mark_bar()
        .encode(
            x=alt.X("unemployment_rate_weighted:Q", title="weighted " + _RATE_TITLE),
            y=alt.Y("state:N", sort="-x", title=None),
            tooltip=tooltip,
        )
        .properties(width=width or 380, height=alt.Step(18), title="Unemployment by state")
    )
    return apply_chart_defaults(ch)
