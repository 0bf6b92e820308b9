"""
Altair themes for vizwalk.

Registers `vizwalk_light` and `vizwalk_dark` with altair's theme registry at import time.
Themes carry only non-data ink (fonts, background, grid, default categorical scheme); chart
builders never hard-code these.
"""

from __future__ import annotations

from typing import Any

import altair as alt

__all__ = ["THEMES", "available", "enable", "active"]

THEMES: tuple[str, ...] = ("vizwalk_light", "vizwalk_dark")

_FONT = "Helvetica Neue, Helvetica, Arial, sans-serif"


def _base(background: str, text: str, grid: str) -> dict[str, Any]:
    return {
        "config": {
            "background": background,
            "font": _FONT,
            "title": {"color": text, "fontSize": 14, "anchor": "start"},
            "axis": {
                "labelColor": text,
                "titleColor": text,
                "gridColor": grid,
                "domainColor": grid,
                "tickColor": grid,
            },
            "legend": {"labelColor": text, "titleColor": text},
            "header": {"labelColor": text, "titleColor": text},
            "range": {"category": {"scheme": "tableau10"}},
            "view": {"stroke": None},
        }
    }


@alt.theme.register("vizwalk_light", enable=False)
def vizwalk_light() -> dict[str, Any]:
    return _base("#ffffff", "#333333", "#e6e6e6")


@alt.theme.register("vizwalk_dark", enable=False)
def vizwalk_dark() -> dict[str, Any]:
    return _base("#1e1e1e", "#dddddd", "#444444")


def available() -> list[str]:
    """Names of the vizwalk themes."""
    return list(THEMES)


def enable(name: str) -> str:
    """
    Enable a vizwalk theme globally for altair.

    Raises:
        ValueError: If the name is not a vizwalk theme.
    """
    if name not in THEMES:
        raise ValueError(f"theme must be one of {list(THEMES)} (got {name!r})")
    alt.theme.enable(name)
    return name


def active() -> str:
    """Name of the currently enabled altair theme."""
    return str(alt.theme.active)
