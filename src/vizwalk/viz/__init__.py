"""
vizwalk.viz — Altair chart builders over cleaned polars frames.

## Responsibilities
- Provide layer primitives and per-dataset charts used by the lessons.
- Pass data inline (`alt.Data(values=...)`); never go through pandas.
- Register the walkthrough themes and save charts to HTML/PNG.

## Public API
- base — Data conversion, schema checks, chart defaults.
- theme — `vizwalk_light` / `vizwalk_dark` registration and switching.
- layers — Single-mark layer primitives.
- save — HTML/PNG output.
- perception, grammar — Charts for the introductory lessons.
- geyser, barley, haireye, cancer, unemployment, mortality — Per-dataset charts.

## Import DAG discipline
- Depends on: vizwalk.core, polars, altair (and stdlib).
- Must not read files; frames are passed in by vizwalk.lessons or the app.

## Examples
```python
from vizwalk.io import load_dataset
from vizwalk.viz import geyser

chart = geyser.histogram(load_dataset("geyser"), bin_width=0.25)  # doctest: +SKIP
chart.to_dict()["mark"]  # doctest: +SKIP
```
"""

from __future__ import annotations

from . import barley, base, cancer, geyser, grammar, haireye, layers, mortality, perception, save, theme, unemployment

__all__ = [
    "barley",
    "base",
    "cancer",
    "geyser",
    "grammar",
    "haireye",
    "layers",
    "mortality",
    "perception",
    "save",
    "theme",
    "unemployment",
]
