"""
Lesson: Cleveland's barley trellis and the Morris anomaly.

Every site yields less in 1932 than in 1931 except Morris, where the order is reversed.
Cleveland argued the Morris years were swapped in the original records; `swap_years` lets the
lesson redraw the data with that correction applied.
"""

from __future__ import annotations

import polars as pl

from vizwalk.core.grammar import DatasetName
from vizwalk.viz import barley
from vizwalk.wrangle.reshape import wider

from .base import Lesson, LessonContext, chart, prose, table

__all__ = ["LESSON", "site_year_means", "year_difference", "flag_reversals", "swap_years"]


def site_year_means(df: pl.DataFrame) -> pl.DataFrame:
    """Mean yield per (site, year), sorted by site then year."""
    return (
        df.group_by("site", "year")
        .agg(pl.col("yield").mean().alias("mean_yield"))
        .sort("site", "year")
    )


def year_difference(df: pl.DataFrame, *, first: int = 1931, second: int = 1932) -> pl.DataFrame:
    """
    Per-site mean yield in each year and `difference` = second minus first.

    Returns:
        pl.DataFrame: site, yield_<first>, yield_<second>, difference.

    Raises:
        ValueError: If either year is absent.
    """
    years = set(df["year"].unique().to_list())
    missing = [y for y in (first, second) if y not in years]
    if missing:
        raise ValueError(f"year_difference: no rows for years {missing}")
    means = site_year_means(df.filter(pl.col("year").is_in([first, second]))).with_columns(
        pl.format("yield_{}", pl.col("year")).alias("label")
    )
    wide = wider(means, "site", names_from="label", values_from="mean_yield")
    a, b = f"yield_{first}", f"yield_{second}"
    return wide.select("site", a, b).with_columns((pl.col(b) - pl.col(a)).alias("difference"))


def flag_reversals(diff: pl.DataFrame) -> pl.DataFrame:
    """
    Add `reversed`: True where a site's difference has the opposite sign to the majority.

    Zero differences are never flagged.
    """
    signs = diff["difference"].sign()
    majority = 1.0 if (signs > 0).sum() > (signs < 0).sum() else -1.0
    return diff.with_columns(
        ((pl.col("difference").sign() != majority) & (pl.col("difference") != 0)).alias("reversed")
    )


def swap_years(df: pl.DataFrame, site: str, *, first: int = 1931, second: int = 1932) -> pl.DataFrame:
    """Relabel `first` <-> `second` for one site; other sites are unchanged."""
    at_site = pl.col("site") == site
    return df.with_columns(
        pl.when(at_site & (pl.col("year") == first))
        .then(pl.lit(second))
        .when(at_site & (pl.col("year") == second))
        .then(pl.lit(first))
        .otherwise(pl.col("year"))
        .cast(pl.Int64)
        .alias("year")
    )


def _barley(ctx: LessonContext) -> pl.DataFrame:
    return ctx.dataset(DatasetName.BARLEY)


LESSON = Lesson(
    lesson_id="barley",
    title="Barley: trellis displays",
    summary="A multi-panel dot plot reveals a data error that summary tables hid for decades.",
    datasets=(DatasetName.BARLEY,),
    steps=(
        prose(
            "Ten barley varieties were grown at six Minnesota sites in 1931 and 1932. The dot "
            "plot orders varieties and sites by median yield so each panel reads from best to "
            "worst.",
            title="The experiment",
        ),
        chart("Yield by variety, site, and year", lambda ctx: barley.dot_plot(_barley(ctx))),
        table("Site means, 1932 minus 1931", lambda ctx: flag_reversals(year_difference(_barley(ctx)))),
        chart(
            "Site means by year",
            lambda ctx: barley.site_year_means_chart(site_year_means(_barley(ctx)), **ctx.chart_size()),
        ),
        prose(
            "Morris is the only site where 1932 beats 1931. If the years were recorded the "
            "wrong way round there, swapping them makes Morris behave like every other site.",
            title="The Morris anomaly",
        ),
        chart(
            "With Morris years swapped",
            lambda ctx: barley.site_year_means_chart(
                site_year_means(swap_years(_barley(ctx), "Morris")), **ctx.chart_size()
            ),
        ),
    ),
)
