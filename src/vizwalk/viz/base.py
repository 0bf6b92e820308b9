"""
Shared helpers for chart builders.

- Data is handed to altair as inline values (`alt.Data(values=...)`), converted from polars
  with `to_values`; no pandas round-trip.
- `apply_chart_defaults` is applied once, to the top-level chart a builder returns. Charts that
  will be layered or concatenated must stay unconfigured.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

import altair as alt
import polars as pl

from vizwalk.core.constants import CHART_HEIGHT, CHART_WIDTH

__all__ = [
    "ChartData",
    "to_values",
    "as_data",
    "validate_schema",
    "apply_chart_defaults",
    "empty_chart",
    "sized",
]

ChartData = pl.DataFrame | Sequence[Mapping[str, Any]]


def to_values(df: pl.DataFrame) -> list[dict[str, Any]]:
    """Rows of a polars frame as JSON-friendly dicts."""
    return df.to_dicts()


def as_data(data: ChartData) -> alt.Data:
    """Wrap a polars frame or a list of row dicts as inline Vega-Lite data."""
    if isinstance(data, pl.DataFrame):
        return alt.Data(values=to_values(data))
    return alt.Data(values=[dict(r) for r in data])


def validate_schema(df: pl.DataFrame, expected: Mapping[str, Any]) -> pl.DataFrame:
    """
    Require columns and cast them to the expected polars dtypes.

    Args:
        df (pl.DataFrame): Frame handed to a chart builder.
        expected (Mapping[str, Any]): Column -> polars dtype (e.g., {"year": pl.Int64}).

    Returns:
        pl.DataFrame: Frame with mismatching columns cast.

    Raises:
        ValueError: If a column is missing or cannot be cast.
    """
    missing = [c for c in expected if c not in df.columns]
    if missing:
        raise ValueError(f"missing required columns: {missing!r}")
    casts = [pl.col(c).cast(t) for c, t in expected.items() if df.schema[c] != t]
    if not casts:
        return df
    try:
        return df.with_columns(casts)
    except pl.exceptions.PolarsError as exc:
        raise ValueError(f"cannot cast columns to {dict(expected)!r}: {exc}") from exc


def apply_chart_defaults(ch: alt.TopLevelMixin) -> alt.TopLevelMixin:
    """Uniform axis/legend/title configuration for top-level charts."""
    try:
        return (
            ch.configure_axis(labelFontSize=12, titleFontSize=12, grid=True)
            .configure_legend(labelFontSize=12, titleFontSize=12)
            .configure_title(fontSize=14, anchor="start")
            .configure_view(strokeOpacity=0)
        )
    except AttributeError:
        # Non-top-level objects have no configure_* methods
        return ch


def empty_chart(message: str) -> alt.Chart:
    """Placeholder chart showing a message (used when a filter leaves no rows)."""
    return (
        alt.Chart(alt.Data(values=[{"message": message}]))
        .mark_text(size=14)
        .encode(text="message:N")
    )


def sized(ch: alt.Chart, width: int | None = None, height: int | None = None) -> alt.Chart:
    """Set width/height, defaulting to the core chart size."""
    return ch.properties(width=width or CHART_WIDTH, height=height or CHART_HEIGHT)
