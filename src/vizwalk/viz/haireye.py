"""Hair and eye color counts: normalized stacked bars and a count heatmap."""

from __future__ import annotations

import altair as alt
import polars as pl

from .base import apply_chart_defaults, as_data, validate_schema
from .layers import layer_rect, layer_text

__all__ = ["EYE_COLORS", "HAIR_COLORS", "stacked_proportions", "heatmap"]

# Fill colors close to the thing they encode
EYE_COLORS: dict[str, str] = {
    "Brown": "#6b3e26",
    "Blue": "#4f7fbf",
    "Hazel": "#a07a3f",
    "Green": "#4f8f4f",
}
HAIR_COLORS: dict[str, str] = {
    "Black": "#222222",
    "Brown": "#7a4a2a",
    "Red": "#b5482f",
    "Blond": "#e3c26f",
}

_PALETTES = {"eye": EYE_COLORS, "hair": HAIR_COLORS}


def stacked_proportions(
    df: pl.DataFrame,
    by: str = "hair",
    fill: str = "eye",
    *,
    count: str = "freq",
    width: int | None = None,
    height: int | None = None,
) -> alt.TopLevelMixin:
    """
    One bar per `by` value, split by `fill` and normalized to 1.

    Args:
        df (pl.DataFrame): Counts in `count`; may have extra grouping columns (they are summed).
        by (str): Column on x.
        fill (str): Column stacked within each bar.
        count (str): Count column.

    Raises:
        ValueError: If `by` equals `fill` or a column is missing.
    """
    if by == fill:
        raise ValueError("by and fill must differ")
    df = validate_schema(df, {by: pl.Utf8, fill: pl.Utf8, count: pl.Int64})
    palette = _PALETTES.get(fill)
    if palette is not None and set(df[fill].unique().to_list()) <= set(palette):
        scale = alt.Scale(domain=list(palette), range=list(palette.values()))
    else:
        scale = alt.Scale()
    ch = (
        alt.Chart(as_data(df))
        .mark_bar()
        .encode(
            x=alt.X(f"{by}:N", title=by),
            y=alt.Y(f"sum({count}):Q", stack="normalize", title=f"share of {fill}"),
            color=alt.Color(f"{fill}:N", scale=scale),
            tooltip=[f"{by}:N", f"{fill}:N", alt.Tooltip(f"sum({count}):Q", title=count)],
        )
        .properties(width=width or 320, height=height or 280, title=f"{fill.capitalize()} within {by}")
    )
    return apply_chart_defaults(ch)


def heatmap(
    df: pl.DataFrame,
    *,
    x: str = "eye",
    y: str = "hair",
    count: str = "freq",
    width: int | None = None,
    height: int | None = None,
) -> alt.TopLevelMixin:
    """Count heatmap with the count printed in each cell."""
    df = validate_schema(df, {x: pl.Utf8, y: pl.Utf8, count: pl.Int64})
    rect = layer_rect(df, x=x, y=y, value=count)
    text = layer_text(df, x=x, y=y, text=count)
    ch = alt.layer(rect, text).properties(
        width=width or 300, height=height or 260, title=f"{y} by {x} counts"
    )
    return apply_chart_defaults(ch)
