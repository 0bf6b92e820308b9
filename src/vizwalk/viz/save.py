"""
Save charts to disk.

HTML output is written by altair directly and needs no converter. PNG output goes through
vl-convert; when it is not installed a RuntimeError names the package to install.
"""

from __future__ import annotations

import importlib
from pathlib import Path

import altair as alt

__all__ = ["save"]


def save(
    ch: alt.TopLevelMixin,
    *,
    out_html: str | Path | None = None,
    out_png: str | Path | None = None,
    scale_factor: float = 2.0,
) -> list[Path]:
    """
    Write a chart as HTML and/or PNG.

    Args:
        ch (alt.TopLevelMixin): Chart to save.
        out_html (str | Path | None): Destination for a standalone HTML page.
        out_png (str | Path | None): Destination for a PNG image.
        scale_factor (float): PNG pixel density.

    Returns:
        list[Path]: Paths written.

    Raises:
        RuntimeError: If PNG output was requested and vl-convert-python is missing.
    """
    written: list[Path] = []
    if out_html is not None:
        p = Path(out_html)
        p.parent.mkdir(parents=True, exist_ok=True)
        ch.save(str(p), format="html")
        written.append(p)
    if out_png is not None:
        try:
            importlib.import_module("vl_convert")
        except ImportError as exc:
            raise RuntimeError(
                "PNG export requires the vl-convert-python package "
                "(pip install vl-convert-python)."
            ) from exc
        p = Path(out_png)
        p.parent.mkdir(parents=True, exist_ok=True)
        ch.save(str(p), format="png", scale_factor=scale_factor)
        written.append(p)
    return written
