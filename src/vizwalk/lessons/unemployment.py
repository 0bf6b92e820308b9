"""Lesson: county unemployment, from a fixed-layout text table to a choropleth."""

from __future__ import annotations

import polars as pl

from vizwalk.core.constants import US_COUNTIES_TOPOJSON
from vizwalk.core.grammar import DatasetName
from vizwalk.viz import unemployment
from vizwalk.wrangle.stats import describe, weighted_mean_by

from .base import Lesson, LessonContext, chart, prose, table

__all__ = ["LESSON", "state_summary", "top_counties"]


def state_summary(df: pl.DataFrame) -> pl.DataFrame:
    """
    Labor-force weighted unemployment rate and county count per state, highest rate first.

    Returns:
        pl.DataFrame: state, unemployment_rate_weighted, n, labor_force.
    """
    weighted = weighted_mean_by(df, "state", "unemployment_rate", "labor_force")
    force = df.group_by("state").agg(pl.col("labor_force").sum())
    return (
        weighted.join(force, on="state", how="left")
        .sort("unemployment_rate_weighted", "state", descending=[True, False])
    )


def top_counties(df: pl.DataFrame, n: int = 10) -> pl.DataFrame:
    """Counties with the highest reported rate (null rates excluded)."""
    if n < 1:
        raise ValueError("n must be >= 1")
    return (
        df.filter(pl.col("unemployment_rate").is_not_null())
        .sort("unemployment_rate", "fips", descending=[True, False])
        .head(n)
        .select("fips", "county_name", "state", "labor_force", "unemployment_rate")
    )


def _counties(ctx: LessonContext) -> pl.DataFrame:
    return ctx.dataset(DatasetName.UNEMPLOYMENT)


LESSON = Lesson(
    lesson_id="unemployment",
    title="Unemployment: maps",
    summary="Parse a BLS-style text table, build FIPS ids, and map rates by county.",
    datasets=(DatasetName.UNEMPLOYMENT,),
    steps=(
        prose(
            "The source is a pipe-separated text table with a title block, a dashed rule "
            "under the header, thousands separators, and a footer. The reader keeps only "
            "rows that start with a LAUS code, splits 'County, ST' into two columns, and "
            "zero-pads state and county codes into a 5-digit FIPS id.",
            title="From text to table",
        ),
        table("Rate summary", lambda ctx: describe(_counties(ctx), "unemployment_rate")),
        chart(
            "Distribution of county rates",
            lambda ctx: unemployment.rate_histogram(_counties(ctx), 0.5, **ctx.chart_size()),
        ),
        table("Highest county rates", lambda ctx: top_counties(_counties(ctx), 10)),
        chart(
            "Unemployment by county",
            lambda ctx: unemployment.county_choropleth(
                _counties(ctx), ctx.settings.topojson_url(US_COUNTIES_TOPOJSON), **ctx.chart_size()
            ),
            text="Counties not in the table are drawn in gray.",
        ),
        table("States, labor-force weighted", lambda ctx: state_summary(_counties(ctx))),
        chart(
            "Unemployment by state",
            lambda ctx: unemployment.state_bars(
                state_summary(_counties(ctx)), width=ctx.settings.chart_width
            ),
        ),
    ),
)
