"""
Lesson: cancer incidence rates over time.

Raw counts track population size; crude rates divide by population; age-adjusted rates also
correct for age structure. Suppressed cells ("~", ".") are nulls after reading and are skipped
by every step here.
"""

from __future__ import annotations

import polars as pl

from vizwalk.core.constants import PER_100K
from vizwalk.core.grammar import DatasetName
from vizwalk.viz import cancer
from vizwalk.wrangle.stats import percent_change

from .base import Lesson, LessonContext, chart, prose, table

__all__ = ["LESSON", "crude_rate", "top_sites", "trend_change"]


def crude_rate(df: pl.DataFrame) -> pl.DataFrame:
    """
    Add `crude_rate` = count / population per 100,000 (null where count is suppressed).

    Examples:
        >>> df = pl.DataFrame({"count": [50], "population": [200_000]})
        >>> crude_rate(df)["crude_rate"].to_list()
        [25.0]
    """
    return df.with_columns(
        (pl.col("count").cast(pl.Float64) / pl.col("population").cast(pl.Float64) * PER_100K).alias(
            "crude_rate"
        )
    )


def top_sites(
    df: pl.DataFrame,
    year: int,
    sex: str,
    n: int = 5,
    *,
    measure: str = "age_adjusted_rate",
) -> pl.DataFrame:
    """Highest-`measure` sites for one year and sex, ranked from 1."""
    if n < 1:
        raise ValueError("n must be >= 1")
    return (
        df.filter((pl.col("year") == year) & (pl.col("sex") == sex) & pl.col(measure).is_not_null())
        .sort(measure, descending=True)
        .head(n)
        .with_row_index("rank", offset=1)
        .select(pl.col("rank").cast(pl.Int64), "cancer_site", measure)
    )


def trend_change(df: pl.DataFrame, measure: str = "age_adjusted_rate") -> pl.DataFrame:
    """Percent change of `measure` from first to last reported year, per (sex, cancer_site)."""
    return percent_change(df, ["sex", "cancer_site"], "year", measure).sort("pct_change")


def _incidence(ctx: LessonContext) -> pl.DataFrame:
    return crude_rate(ctx.dataset(DatasetName.CANCER_INCIDENCE))


def _latest_year(ctx: LessonContext) -> int:
    return int(_incidence(ctx)["year"].max())


LESSON = Lesson(
    lesson_id="cancer_incidence",
    title="Cancer incidence: rates and trends",
    summary="From counts to crude and age-adjusted rates, compared across sites, sexes, and years.",
    datasets=(DatasetName.CANCER_INCIDENCE,),
    steps=(
        prose(
            "The export is a CSV with display headers, quoted fields, and a notes footer. "
            "Small counts are suppressed and appear as '~' or '.', which the reader turns "
            "into nulls rather than zeros.",
            title="Reading the export",
        ),
        table(
            "Crude vs age-adjusted rates",
            lambda ctx: _incidence(ctx).select(
                "year", "sex", "cancer_site", "count", "crude_rate", "age_adjusted_rate"
            ),
        ),
        chart("Age-adjusted rate by site", lambda ctx: cancer.trend_chart(_incidence(ctx), "age_adjusted_rate")),
        table("Top sites, latest year (female)", lambda ctx: top_sites(_incidence(ctx), _latest_year(ctx), "Female")),
        table("Top sites, latest year (male)", lambda ctx: top_sites(_incidence(ctx), _latest_year(ctx), "Male")),
        chart(
            "Sites compared, latest year",
            lambda ctx: cancer.site_bars(_incidence(ctx), _latest_year(ctx), **ctx.chart_size()),
        ),
        table("Change from first to last year", lambda ctx: trend_change(_incidence(ctx))),
        prose(
            "Rates, not counts, are comparable across groups of different size; age "
            "adjustment makes them comparable across populations of different age.",
            title="Takeaway",
        ),
    ),
)
