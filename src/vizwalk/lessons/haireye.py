"""Lesson: hair and eye color, proportions and conditional distributions of categorical data."""

from __future__ import annotations

import polars as pl

from vizwalk.core.grammar import DatasetName
from vizwalk.viz import haireye
from vizwalk.wrangle.reshape import wider
from vizwalk.wrangle.stats import proportions

from .base import Lesson, LessonContext, chart, prose, table

__all__ = ["LESSON", "collapse_sex", "margins", "conditional", "contingency"]

_HAIR_ORDER = ("Black", "Brown", "Red", "Blond")


def collapse_sex(df: pl.DataFrame) -> pl.DataFrame:
    """Sum `freq` over sex: one row per (hair, eye)."""
    return df.group_by("hair", "eye").agg(pl.col("freq").sum()).sort("hair", "eye")


def margins(df: pl.DataFrame, by: str) -> pl.DataFrame:
    """Marginal counts and proportions of one variable, largest first."""
    counts = df.group_by(by).agg(pl.col("freq").sum())
    return proportions(counts, "freq").sort("freq", by, descending=[True, False])


def conditional(df: pl.DataFrame, given: str) -> pl.DataFrame:
    """
    Proportions conditional on `given`: `prop` sums to 1 within each `given` value.

    Args:
        df (pl.DataFrame): hair, eye, freq (other columns are summed over).
        given (str): "hair" or "eye".
    """
    if given not in ("hair", "eye"):
        raise ValueError(f"given must be 'hair' or 'eye', got {given!r}")
    other = "eye" if given == "hair" else "hair"
    return proportions(collapse_sex(df), "freq", given).select(given, other, "freq", "prop").sort(given, other)


def contingency(df: pl.DataFrame) -> pl.DataFrame:
    """Two-way table: one row per hair color, one count column per eye color."""
    table_ = wider(collapse_sex(df), "hair", names_from="eye", values_from="freq", aggregate="sum")
    order = {h: i for i, h in enumerate(_HAIR_ORDER)}
    return (
        table_.with_columns(pl.col("hair").replace_strict(order, default=len(order)).alias("_o"))
        .sort("_o", "hair")
        .drop("_o")
    )


def _counts(ctx: LessonContext) -> pl.DataFrame:
    return ctx.dataset(DatasetName.HAIR_EYE_COLOR)


LESSON = Lesson(
    lesson_id="hair_eye_color",
    title="Hair and eye color: categorical data",
    summary="Counts become proportions; conditioning on one variable exposes the association.",
    datasets=(DatasetName.HAIR_EYE_COLOR,),
    steps=(
        prose(
            "592 statistics students recorded hair color, eye color, and sex. With only "
            "categorical variables, every chart is built from counts.",
            title="The data",
        ),
        table("Contingency table", lambda ctx: contingency(_counts(ctx))),
        table("Hair color margins", lambda ctx: margins(_counts(ctx), "hair")),
        table("Eye color given hair color", lambda ctx: conditional(_counts(ctx), "hair")),
        chart(
            "Eye color within each hair color",
            lambda ctx: haireye.stacked_proportions(_counts(ctx), "hair", "eye", **ctx.chart_size()),
            text="Blue eyes dominate among blonds; brown eyes among black-haired students.",
        ),
        chart(
            "Counts heatmap",
            lambda ctx: haireye.heatmap(collapse_sex(_counts(ctx)), **ctx.chart_size()),
        ),
    ),
)
