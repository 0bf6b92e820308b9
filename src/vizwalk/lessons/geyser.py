"""Lesson: Old Faithful eruptions, histograms, bin widths, and densities."""

from __future__ import annotations

import polars as pl

from vizwalk.core.constants import ERUPTION_THRESHOLD
from vizwalk.core.grammar import DatasetName
from vizwalk.viz import geyser
from vizwalk.wrangle.stats import describe, summarize_by

from .base import Lesson, LessonContext, chart, prose, table

__all__ = ["LESSON", "label_eruptions", "summary_by_kind"]


def label_eruptions(df: pl.DataFrame, threshold: float = ERUPTION_THRESHOLD) -> pl.DataFrame:
    """
    Add `kind`: "short" for eruptions under `threshold` minutes, "long" otherwise.

    Examples:
        >>> label_eruptions(pl.DataFrame({"eruptions": [1.8, 4.5]}))["kind"].to_list()
        ['short', 'long']
    """
    return df.with_columns(
        pl.when(pl.col("eruptions") < threshold)
        .then(pl.lit("short"))
        .otherwise(pl.lit("long"))
        .alias("kind")
    )


def summary_by_kind(df: pl.DataFrame) -> pl.DataFrame:
    """Per-kind n/mean/sd/se of duration and mean waiting time."""
    labeled = df if "kind" in df.columns else label_eruptions(df)
    durations = summarize_by(labeled, "kind", "eruptions")
    waits = labeled.group_by("kind").agg(pl.col("waiting").mean().alias("mean_waiting"))
    return durations.join(waits, on="kind", how="left").sort("kind")


def _geyser(ctx: LessonContext) -> pl.DataFrame:
    return ctx.dataset(DatasetName.GEYSER)


LESSON = Lesson(
    lesson_id="geyser",
    title="Old Faithful: distributions",
    summary="Eruption durations are bimodal; whether you see it depends on the bin width.",
    datasets=(DatasetName.GEYSER,),
    steps=(
        prose(
            "Each row is one eruption of Old Faithful: its duration in minutes and the "
            "waiting time before it. A single mean hides the fact that eruptions come in "
            "two kinds.",
            title="The data",
        ),
        table("Duration summary", lambda ctx: describe(_geyser(ctx), "eruptions")),
        chart("Histogram", lambda ctx: geyser.histogram(_geyser(ctx), 0.25, **ctx.chart_size())),
        chart(
            "Bin width changes the story",
            lambda ctx: geyser.bin_width_comparison(_geyser(ctx), (0.1, 0.25, 0.5, 1.0)),
            text="Too narrow and the shape is noise; too wide and the two modes merge.",
        ),
        chart("Kernel density", lambda ctx: geyser.density(_geyser(ctx), 0.2, **ctx.chart_size())),
        table("Short vs long eruptions", lambda ctx: summary_by_kind(_geyser(ctx))),
        chart(
            "Waiting time vs duration",
            lambda ctx: geyser.scatter(label_eruptions(_geyser(ctx)), **ctx.chart_size()),
        ),
        prose(
            "Longer eruptions are followed by longer waits, which is what makes the next "
            "eruption predictable.",
            title="Takeaway",
        ),
    ),
)
