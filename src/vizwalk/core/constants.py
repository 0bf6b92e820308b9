"""
vizwalk core defaults.

Defines chart sizing, table preview, missing-value, and map-source defaults consumed by
vizwalk.io (settings), vizwalk.viz (chart builders), and the lessons. This module is zero-IO
and uses only the Python standard library.

Notes:
    - WalkSettings sources its defaults here; change them here rather than in the settings class.
    - Topojson files are referenced by URL only; nothing here is downloaded.
"""

from __future__ import annotations

from typing import Final

__all__ = [
    "CHART_WIDTH",
    "CHART_HEIGHT",
    "MAX_TABLE_ROWS",
    "MISSING_SENTINELS",
    "TOPOJSON_BASE_URL",
    "US_COUNTIES_TOPOJSON",
    "WORLD_TOPOJSON",
    "ERUPTION_THRESHOLD",
    "STEVENS_EXPONENTS",
    "PER_100K",
]

CHART_WIDTH: Final[int] = 480
CHART_HEIGHT: Final[int] = 300

# Rows shown when a lesson step prints a table preview.
MAX_TABLE_ROWS: Final[int] = 10

# Strings treated as missing across the bundled text/CSV formats.
MISSING_SENTINELS: Final[tuple[str, ...]] = ("", ".", "..", "~", "N.A.", "NA", "n/a", "-")

TOPOJSON_BASE_URL: Final[str] = "https://cdn.jsdelivr.net/npm/vega-datasets@v2.11.0/data"
US_COUNTIES_TOPOJSON: Final[str] = "us-10m.json"
WORLD_TOPOJSON: Final[str] = "world-110m.json"

# Old Faithful eruptions shorter than this (minutes) are "short".
ERUPTION_THRESHOLD: Final[float] = 3.0

# Stevens' power-law exponents (perceived = magnitude ** exponent).
STEVENS_EXPONENTS: Final[dict[str, float]] = {
    "length": 1.0,
    "area": 0.7,
    "volume": 0.6,
    "brightness": 0.5,
}

PER_100K: Final[float] = 100_000.0
