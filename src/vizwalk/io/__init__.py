"""
vizwalk.io — Configuration and dataset readers for the walkthrough.

## Responsibilities
- Resolve dataset files (bundled samples or a configured data directory).
- Read each dataset's file format and perform the cleaning the lessons narrate.
- Validate cleaned frames against vizwalk.core.tables descriptors.

## Public API
- WalkSettings — Runtime configuration (env > TOML > defaults).
- load_dataset — Load a cleaned dataset by name.
- dataset_path — Resolve the file backing a dataset.

## Import DAG discipline
- Depends only on stdlib, polars, vizwalk.core, and vizwalk.wrangle.clean.
- MUST NOT import higher layers: viz, lessons, or app.

## Examples
```python
from vizwalk.io import WalkSettings, load_dataset

settings = WalkSettings.load()  # doctest: +SKIP
counties = load_dataset("unemployment", settings)  # doctest: +SKIP
counties.select("fips", "county_name", "state", "unemployment_rate")  # doctest: +SKIP
```
"""

from __future__ import annotations

from .config import WalkSettings
from .paths import dataset_path
from .read import load_dataset

__all__ = [
    "WalkSettings",
    "dataset_path",
    "load_dataset",
]
