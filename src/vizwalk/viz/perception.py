"""
Perception: how accurately visual channels are decoded.

- `channel_ranking` tabulates the Cleveland-McGill ordering of elementary perceptual tasks for
  quantitative data (ties share a rank).
- `stevens_curves` evaluates Stevens' power law, perceived = magnitude ** exponent, for the
  channels in vizwalk.core.constants.STEVENS_EXPONENTS.
- `length_vs_angle` draws the same proportions twice, as bar lengths and as pie angles.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

import altair as alt
import polars as pl

from vizwalk.core.constants import STEVENS_EXPONENTS

from .base import apply_chart_defaults, as_data

__all__ = [
    "channel_ranking",
    "channel_ranking_chart",
    "stevens_curves",
    "stevens_chart",
    "length_vs_angle",
]

_RANKING: tuple[tuple[int, str, str], ...] = (
    (1, "position (common scale)", "x/y on a shared axis"),
    (2, "position (non-aligned scales)", "x/y across facets"),
    (3, "length", "bar length"),
    (3, "direction", "line slope"),
    (3, "angle", "arc theta"),
    (4, "area", "point size"),
    (5, "volume", "3-D size"),
    (5, "curvature", "curve bend"),
    (6, "shading", "color lightness"),
    (6, "color saturation", "color saturation"),
)


def channel_ranking() -> pl.DataFrame:
    """
    Channels ranked from most to least accurately decoded for quantitative values.

    Returns:
        pl.DataFrame: rank (i64), channel (str), altair_example (str).
    """
    return pl.DataFrame(
        _RANKING,
        schema={"rank": pl.Int64, "channel": pl.Utf8, "altair_example": pl.Utf8},
        orient="row",
    )


def channel_ranking_chart(df: pl.DataFrame | None = None) -> alt.TopLevelMixin:
    """Dot plot of channel ranks; most accurate at the top."""
    data = channel_ranking() if df is None else df
    ch = (
        alt.Chart(as_data(data))
        .mark_point(filled=True, size=120)
        .encode(
            x=alt.X("rank:O", title="rank (1 = most accurate)"),
            y=alt.Y("channel:N", sort=alt.EncodingSortField(field="rank", order="ascending")),
            tooltip=["channel:N", "altair_example:N"],
        )
        .properties(title="Accuracy of perceptual channels", width=320)
    )
    return apply_chart_defaults(ch)


def stevens_curves(
    exponents: Mapping[str, float] = STEVENS_EXPONENTS,
    magnitudes: Sequence[float] | None = None,
) -> pl.DataFrame:
    """
    Perceived magnitude per channel under Stevens' power law.

    Args:
        exponents (Mapping[str, float]): Channel -> exponent.
        magnitudes (Sequence[float] | None): Physical magnitudes; 0 to 5 by 0.25 when None.

    Returns:
        pl.DataFrame: channel, exponent, magnitude, perceived (long form).
    """
    mags = list(magnitudes) if magnitudes is not None else [i * 0.25 for i in range(21)]
    grid = pl.DataFrame({"magnitude": mags}, schema={"magnitude": pl.Float64})
    exps = pl.DataFrame(
        {"channel": list(exponents), "exponent": [float(v) for v in exponents.values()]}
    )
    return (
        exps.join(grid, how="cross")
        .with_columns(pl.col("magnitude").pow(pl.col("exponent")).alias("perceived"))
        .sort(["channel", "magnitude"])
    )


def stevens_chart(df: pl.DataFrame | None = None) -> alt.TopLevelMixin:
    """Perceived vs physical magnitude, one line per channel."""
    data = stevens_curves() if df is None else df
    ch = (
        alt.Chart(as_data(data))
        .mark_line()
        .encode(
            x=alt.X("magnitude:Q", title="physical magnitude"),
            y=alt.Y("perceived:Q", title="perceived magnitude"),
            color=alt.Color("channel:N"),
            tooltip=["channel:N", "exponent:Q"],
        )
        .properties(title="Stevens' power law", width=360, height=260)
    )
    return apply_chart_defaults(ch)


def length_vs_angle(df: pl.DataFrame, category: str, value: str) -> alt.TopLevelMixin:
    """
    The same shares drawn as bar lengths (left) and as pie angles (right).

    Args:
        df (pl.DataFrame): One row per category.
        category (str): Nominal column.
        value (str): Quantitative column (shares or counts).
    """
    data = as_data(df)
    bars = (
        alt.Chart(data)
        .mark_bar()
        .encode(
            x=alt.X(f"{value}:Q"),
            y=alt.Y(f"{category}:N", sort="-x"),
            color=alt.Color(f"{category}:N", legend=None),
        )
        .properties(title="length", width=260, height=200)
    )
    pie = (
        alt.Chart(data)
        .mark_arc()
        .encode(theta=alt.Theta(f"{value}:Q"), color=alt.Color(f"{category}:N"))
        .properties(title="angle", width=200, height=200)
    )
    return apply_chart_defaults(alt.hconcat(bars, pie))
