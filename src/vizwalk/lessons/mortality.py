"""
Lesson: child mortality, wide spreadsheets, log scales, and joining names to map codes.

Country names in the spreadsheet do not always match the names in the ISO crosswalk ("Viet
Nam", "Russia"). `with_codes` normalizes names through vizwalk.wrangle.geo and reports the
ones that still fail to match instead of dropping them silently.
"""

from __future__ import annotations

import polars as pl

from vizwalk.core.constants import WORLD_TOPOJSON
from vizwalk.core.grammar import DatasetName
from vizwalk.viz import mortality
from vizwalk.wrangle.geo import attach_country_codes
from vizwalk.wrangle.stats import percent_change

from .base import Lesson, LessonContext, chart, prose, table

__all__ = ["LESSON", "FOCUS_COUNTRIES", "with_codes", "decline", "snapshot"]

FOCUS_COUNTRIES: tuple[str, ...] = ("Brazil", "China", "India", "Nigeria", "United States", "Viet Nam")


def with_codes(df: pl.DataFrame, codes: pl.DataFrame) -> tuple[pl.DataFrame, list[str]]:
    """Attach iso3/iso_numeric/region by normalized country name; also return unmatched names."""
    return attach_country_codes(df, codes)


def decline(df: pl.DataFrame) -> pl.DataFrame:
    """
    Percent decline per country from its first to its last observed year, largest first.

    Returns:
        pl.DataFrame: country, first_year, last_year, first, last, pct_decline.
    """
    return (
        percent_change(df, "country", "year", "deaths_per_1000")
        .with_columns((-pl.col("pct_change")).alias("pct_decline"))
        .select("country", "first_year", "last_year", "first", "last", "pct_decline")
        .sort("pct_decline", "country", descending=[True, False])
    )


def snapshot(df: pl.DataFrame, year: int) -> pl.DataFrame:
    """Rows for one year, highest mortality first.

    Raises:
        ValueError: If the year has no observations.
    """
    out = df.filter(pl.col("year") == year)
    if out.is_empty():
        raise ValueError(f"no observations for {year}")
    return out.sort("deaths_per_1000", "country", descending=[True, False])


def _mortality(ctx: LessonContext) -> pl.DataFrame:
    return ctx.dataset(DatasetName.CHILD_MORTALITY)


def _joined(ctx: LessonContext) -> tuple[pl.DataFrame, list[str]]:
    return with_codes(_mortality(ctx), ctx.dataset(DatasetName.COUNTRY_CODES))


def _unmatched(ctx: LessonContext) -> pl.DataFrame:
    return pl.DataFrame({"unmatched_country": _joined(ctx)[1]}, schema={"unmatched_country": pl.Utf8})


def _latest_year(ctx: LessonContext) -> int:
    return int(_mortality(ctx)["year"].max())


LESSON = Lesson(
    lesson_id="child_mortality",
    title="Child mortality: scales and joins",
    summary="Reshape a wide spreadsheet, compare declines on a log scale, and map one year.",
    datasets=(DatasetName.CHILD_MORTALITY, DatasetName.COUNTRY_CODES),
    steps=(
        prose(
            "The spreadsheet has one row per country and one column per year, with '..' "
            "where no estimate exists. The reader unpivots it to (country, year, value) "
            "rows and drops the missing cells.",
            title="Wide to long",
        ),
        chart(
            "Under-five mortality, selected countries",
            lambda ctx: mortality.country_lines(_mortality(ctx), FOCUS_COUNTRIES, **ctx.chart_size()),
        ),
        chart(
            "Same data, log scale",
            lambda ctx: mortality.country_lines(
                _mortality(ctx), FOCUS_COUNTRIES, log_scale=True, **ctx.chart_size()
            ),
            text="On a log scale equal slopes are equal percentage declines.",
        ),
        table("Largest declines", lambda ctx: decline(_mortality(ctx))),
        table("Names without a country code", _unmatched),
        table("Latest year", lambda ctx: snapshot(_mortality(ctx), _latest_year(ctx))),
        chart(
            "World map, latest year",
            lambda ctx: mortality.world_choropleth(
                _joined(ctx)[0],
                _latest_year(ctx),
                ctx.settings.topojson_url(WORLD_TOPOJSON),
                **ctx.chart_size(),
            ),
        ),
    ),
)
