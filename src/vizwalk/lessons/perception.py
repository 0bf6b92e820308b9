"""Lesson: which visual channels are read accurately, and why position beats angle."""

from __future__ import annotations

import polars as pl

from vizwalk.viz import perception

from .base import Lesson, LessonContext, chart, prose, table

SHARES = pl.DataFrame(
    {
        "category": ["A", "B", "C", "D", "E"],
        "share": [0.23, 0.21, 0.20, 0.19, 0.17],
    }
)


def _shares(_: LessonContext) -> pl.DataFrame:
    return SHARES


LESSON = Lesson(
    lesson_id="perception",
    title="Perception: decoding visual channels",
    summary=(
        "Cleveland and McGill ranked elementary perceptual tasks by how accurately people "
        "decode them. Stevens' power law explains why areas and volumes are underestimated."
    ),
    steps=(
        prose(
            "A chart encodes numbers as visual properties: position, length, angle, area, "
            "color. Readers decode some of these far more accurately than others, so the "
            "most important comparison should get the most accurate channel.",
            title="Encoding and decoding",
        ),
        table("Channel ranking", lambda ctx: perception.channel_ranking()),
        chart("Channel ranking", lambda ctx: perception.channel_ranking_chart()),
        prose(
            "Stevens' power law models perceived magnitude as physical magnitude raised to an "
            "exponent. Length has an exponent near 1 and is read faithfully; area (about 0.7) "
            "and volume (about 0.6) are compressed, so a circle with twice the area looks "
            "less than twice as big.",
            title="Stevens' power law",
        ),
        chart("Perceived vs physical magnitude", lambda ctx: perception.stevens_chart()),
        table("Five nearly equal shares", _shares),
        chart(
            "Length vs angle",
            lambda ctx: perception.length_vs_angle(_shares(ctx), "category", "share"),
            text="The ordering is obvious from the bars and nearly invisible in the pie.",
        ),
    ),
)
