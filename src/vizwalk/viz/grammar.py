"""
Grammar-of-graphics vocabulary, shown by building one chart a component at a time.

`build_up` returns an ordered list of (stage, chart) pairs; each stage adds exactly one
component (mark, mapping, color, scale, statistic, facet, theme) to the previous one.
"""

from __future__ import annotations

import altair as alt
import polars as pl

from .base import apply_chart_defaults, as_data

__all__ = ["grammar_terms", "build_up"]

_TERMS: tuple[tuple[str, str, str], ...] = (
    ("data", "the table being drawn, one row per observation", "alt.Chart(data)"),
    ("aesthetic mapping", "which column drives which visual channel", ".encode(x=..., y=..., color=...)"),
    ("geometric object", "the mark drawn for each row", ".mark_point(), .mark_bar(), .mark_line()"),
    ("statistic", "a summary computed before drawing", "alt.Bin, .transform_density(), .transform_regression()"),
    ("scale", "how data values map to channel values", "alt.Scale(zero=False, type='log')"),
    ("coordinate system", "how positions are laid out on the page", ".project(type='albersUsa'), alt.Theta"),
    ("facet", "small multiples split by a grouping column", ".facet(column=...), alt.Row(...)"),
    ("theme", "non-data ink: fonts, backgrounds, gridlines", "alt.theme.enable('vizwalk_light')"),
)


def grammar_terms() -> pl.DataFrame:
    """Grammar-of-graphics terms with a plain meaning and the altair construct for each."""
    return pl.DataFrame(
        _TERMS,
        schema={"term": pl.Utf8, "meaning": pl.Utf8, "altair": pl.Utf8},
        orient="row",
    )


def build_up(
    df: pl.DataFrame,
    *,
    x: str,
    y: str,
    color: str | None = None,
    facet: str | None = None,
) -> list[tuple[str, alt.TopLevelMixin]]:
    """
    Build a scatterplot one grammar component at a time.

    Args:
        df (pl.DataFrame): Data to draw.
        x (str): Quantitative column on x.
        y (str): Quantitative column on y.
        color (str | None): Nominal column mapped to color (stage skipped when None).
        facet (str | None): Nominal column to facet by (stage skipped when None).

    Returns:
        list[tuple[str, alt.TopLevelMixin]]: Stages in order, ending with the themed chart.

    Raises:
        ValueError: If a referenced column is missing.
    """
    needed = [c for c in (x, y, color, facet) if c]
    missing = [c for c in needed if c not in df.columns]
    if missing:
        raise ValueError(f"build_up missing columns: {missing!r}")

    data = as_data(df)
    stages: list[tuple[str, alt.TopLevelMixin]] = []

    base = alt.Chart(data).mark_point()
    stages.append(("data + geometric object", base))

    enc: dict[str, object] = {"x": alt.X(f"{x}:Q"), "y": alt.Y(f"{y}:Q")}
    mapped = base.encode(**enc)
    stages.append(("aesthetic mapping", mapped))

    if color:
        enc["color"] = alt.Color(f"{color}:N")
        mapped = base.encode(**enc)
        stages.append(("color mapping", mapped))

    enc["x"] = alt.X(f"{x}:Q", scale=alt.Scale(zero=False))
    enc["y"] = alt.Y(f"{y}:Q", scale=alt.Scale(zero=False))
    scaled = base.encode(**enc)
    stages.append(("scale", scaled))

    points = alt.Chart().mark_point().encode(**enc)
    fit = (
        alt.Chart()
        .transform_regression(x, y)
        .mark_line(color="#444")
        .encode(x=alt.X(f"{x}:Q"), y=alt.Y(f"{y}:Q"))
    )
    layered = alt.layer(points, fit, data=data)
    stages.append(("statistic", layered))

    final: alt.TopLevelMixin = layered
    if facet:
        final = (
            alt.layer(points, fit, data=data)
            .properties(width=220, height=220)
            .facet(column=alt.Column(f"{facet}:N"))
        )
        stages.append(("facet", final))

    stages.append(("theme", apply_chart_defaults(final)))
    return stages
