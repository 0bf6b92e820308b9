"""Under-five mortality: country trend lines and a world choropleth for one year."""

from __future__ import annotations

from collections.abc import Sequence

import altair as alt
import polars as pl

from vizwalk.core.constants import TOPOJSON_BASE_URL, WORLD_TOPOJSON

from .base import apply_chart_defaults, as_data, empty_chart, validate_schema

__all__ = ["country_lines", "world_choropleth"]

_Y_TITLE = "deaths per 1,000 live births"


def country_lines(
    df: pl.DataFrame,
    countries: Sequence[str] | None = None,
    *,
    log_scale: bool = False,
    width: int | None = None,
    height: int | None = None,
) -> alt.TopLevelMixin:
    """
    Mortality over time, one line per country.

    Args:
        df (pl.DataFrame): country, year (i64), deaths_per_1000 (f64).
        countries (Sequence[str] | None): Countries to keep; all when None.
        log_scale (bool): Log y-axis, so equal slopes mean equal percentage declines.
    """
    df = validate_schema(df, {"country": pl.Utf8, "year": pl.Int64, "deaths_per_1000": pl.Float64})
    if countries is not None:
        df = df.filter(pl.col("country").is_in(list(countries)))
    if df.is_empty():
        return empty_chart("no countries selected")
    scale = alt.Scale(type="log") if log_scale else alt.Scale(zero=True)
    ch = (
        alt.Chart(as_data(df))
        .mark_line(point=True)
        .encode(
            x=alt.X("year:O", title=None),
            y=alt.Y("deaths_per_1000:Q", scale=scale, title=_Y_TITLE),
            color=alt.Color("country:N"),
            tooltip=["country:N", "year:O", alt.Tooltip("deaths_per_1000:Q", format=".1f")],
        )
        .properties(
            width=width or 480,
            height=height or 300,
            title="Child mortality" + (" (log scale)" if log_scale else ""),
        )
    )
    return apply_chart_defaults(ch)


def world_choropleth(
    df: pl.DataFrame,
    year: int,
    topo_url: str | None = None,
    *,
    width: int | None = None,
    height: int | None = None,
) -> alt.TopLevelMixin:
    """
    World map colored by mortality in `year`.

    Args:
        df (pl.DataFrame): Rows joined to country codes (needs iso_numeric, country, year,
            deaths_per_1000); see `with_codes`.
        year (int): Year to map.
        topo_url (str | None): world-110m style TopoJSON with a `countries` object.
    """
    df = validate_schema(
        df,
        {"country": pl.Utf8, "year": pl.Int64, "deaths_per_1000": pl.Float64, "iso_numeric": pl.Int64},
    ).filter((pl.col("year") == year) & pl.col("iso_numeric").is_not_null())
    url = topo_url or f"{TOPOJSON_BASE_URL}/{WORLD_TOPOJSON}"
    countries = alt.topo_feature(url, "countries")
    lookup = alt.LookupData(
        data=as_data(df.select("iso_numeric", "country", "deaths_per_1000")),
        key="iso_numeric",
        fields=["country", "deaths_per_1000"],
    )
    background = alt.Chart(countries).mark_geoshape(fill="#e5e5e5", stroke="white", strokeWidth=0.3)
    values = (
        alt.Chart(countries)
        .mark_geoshape(stroke="white", strokeWidth=0.3)
        .transform_lookup(lookup="id", from_=lookup)
        .transform_filter("isValid(datum.deaths_per_1000)")
        .encode(
            color=alt.Color("deaths_per_1000:Q", scale=alt.Scale(scheme="orangered"), title=_Y_TITLE),
            tooltip=["country:N", alt.Tooltip("deaths_per_1000:Q", format=".1f")],
        )
    )
    ch = (
        alt.layer(background, values)
        .project(type="equalEarth")
        .properties(width=width or 640, height=height or 360, title=f"Child mortality, {year}")
    )
    return apply_chart_defaults(ch)
