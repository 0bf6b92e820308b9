"""
Altair layer primitives.

Each function returns an unconfigured `alt.Chart` with one mark and typed encodings so it can
be layered (`alt.layer`), concatenated, or faceted by the caller.
"""

from __future__ import annotations

import altair as alt

from vizwalk.core.grammar import EncodingType, encoding_shorthand

from .base import ChartData, as_data

__all__ = [
    "layer_points",
    "layer_line",
    "layer_bars",
    "layer_band",
    "layer_rect",
    "layer_text",
    "layer_rule_y",
]

_Q = EncodingType.QUANTITATIVE
_N = EncodingType.NOMINAL


def layer_points(
    data: ChartData,
    *,
    x: str,
    y: str,
    color: str | None = None,
    opacity: float = 0.8,
    size: int = 40,
) -> alt.Chart:
    """Scatter layer; x and y are quantitative, color nominal when given."""
    enc: dict[str, object] = {
        "x": alt.X(encoding_shorthand(x, _Q), scale=alt.Scale(zero=False)),
        "y": alt.Y(encoding_shorthand(y, _Q), scale=alt.Scale(zero=False)),
    }
    if color:
        enc["color"] = alt.Color(encoding_shorthand(color, _N))
    return (
        alt.Chart(as_data(data))
        .mark_point(filled=True, opacity=opacity, size=size)
        .encode(**enc)
    )


def layer_line(
    data: ChartData,
    *,
    x: str,
    y: str,
    color: str | None = None,
    x_type: str = "Q",
    point: bool = False,
) -> alt.Chart:
    """Line layer; one line per color value when color is given."""
    enc: dict[str, object] = {
        "x": alt.X(encoding_shorthand(x, x_type)),
        "y": alt.Y(encoding_shorthand(y, _Q)),
    }
    if color:
        enc["color"] = alt.Color(encoding_shorthand(color, _N))
    return alt.Chart(as_data(data)).mark_line(point=point).encode(**enc)


def layer_bars(
    data: ChartData,
    *,
    x: str,
    y: str,
    color: str | None = None,
    horizontal: bool = False,
) -> alt.Chart:
    """
    Bar layer of precomputed values.

    With horizontal=True, `x` is the quantitative length and `y` the nominal category,
    sorted by length.
    """
    if horizontal:
        enc: dict[str, object] = {
            "x": alt.X(encoding_shorthand(x, _Q)),
            "y": alt.Y(encoding_shorthand(y, _N), sort="-x"),
        }
    else:
        enc = {"x": alt.X(encoding_shorthand(x, _N)), "y": alt.Y(encoding_shorthand(y, _Q))}
    if color:
        enc["color"] = alt.Color(encoding_shorthand(color, _N))
    return alt.Chart(as_data(data)).mark_bar().encode(**enc)


def layer_band(
    data: ChartData,
    *,
    x: str,
    y_low: str,
    y_high: str,
    opacity: float = 0.25,
) -> alt.Chart:
    """Shaded band between two quantitative columns."""
    return (
        alt.Chart(as_data(data))
        .mark_area(opacity=opacity)
        .encode(
            x=alt.X(encoding_shorthand(x, _Q)),
            y=alt.Y(encoding_shorthand(y_low, _Q)),
            y2=alt.Y2(y_high),
        )
    )


def layer_rect(data: ChartData, *, x: str, y: str, value: str) -> alt.Chart:
    """Heatmap cells: nominal x/y, color by the summed value."""
    return (
        alt.Chart(as_data(data))
        .mark_rect()
        .encode(
            x=alt.X(encoding_shorthand(x, _N)),
            y=alt.Y(encoding_shorthand(y, _N)),
            color=alt.Color(f"sum({value}):Q", title=value),
        )
    )


def layer_text(data: ChartData, *, x: str, y: str, text: str, color: str = "#222") -> alt.Chart:
    """Text labels at nominal x/y positions (e.g., counts over heatmap cells)."""
    return (
        alt.Chart(as_data(data))
        .mark_text(color=color)
        .encode(
            x=alt.X(encoding_shorthand(x, _N)),
            y=alt.Y(encoding_shorthand(y, _N)),
            text=alt.Text(f"sum({text}):Q"),
        )
    )


def layer_rule_y(y: float, *, color: str = "#999", dash: bool = True) -> alt.Chart:
    """Horizontal reference rule at y."""
    mark = {"color": color, "strokeDash": [4, 4]} if dash else {"color": color}
    return alt.Chart(alt.Data(values=[{"y": float(y)}])).mark_rule(**mark).encode(y="y:Q")
