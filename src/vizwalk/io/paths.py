"""
Path helpers for vizwalk datasets.

Resolution
- When WalkSettings.data_dir is set, datasets resolve to <data_dir>/<descriptor.filename>.
- Otherwise they resolve to the small samples bundled under vizwalk/data/.

Notes
- Resolution never checks existence; readers raise FileNotFoundError with the resolved path.
"""

from __future__ import annotations

import os
from importlib import resources
from pathlib import Path

from vizwalk.core.grammar import DatasetName
from vizwalk.core.tables import get_dataset

from .config import WalkSettings
from .errors import IoConfigError


def bundled_data_dir() -> Path:
    """Directory holding the bundled sample files."""
    return Path(str(resources.files("vizwalk").joinpath("data")))


def data_dir(settings: WalkSettings) -> Path:
    """
    Effective data directory for the given settings.

    Raises:
        IoConfigError: If the configured data_dir exists but is not a directory.
    """
    if settings.data_dir is None:
        return bundled_data_dir()
    p = Path(os.path.expanduser(settings.data_dir))
    if p.exists() and not p.is_dir():
        raise IoConfigError(f"data_dir is not a directory: {p}")
    return p


def dataset_path(settings: WalkSettings, name: DatasetName | str) -> Path:
    """
    Resolve the file path for a dataset.

    Examples:
        >>> from vizwalk.io import WalkSettings
        >>> dataset_path(WalkSettings(data_dir="/srv/data"), "geyser").as_posix()
        '/srv/data/geyser.csv'
    """
    desc = get_dataset(name)
    return data_dir(settings) / desc.filename


def lesson_out_dir(settings: WalkSettings, lesson_id: str) -> Path:
    """Output directory for an exported lesson: <out_dir>/<lesson_id>."""
    return Path(settings.out_dir) / lesson_id
