from __future__ import annotations

from pathlib import Path

import pytest

from vizwalk.core.constants import CHART_WIDTH, MAX_TABLE_ROWS
from vizwalk.io.config import WalkSettings

_ENV_KEYS = [
    "VIZWALK_DATA_DIR",
    "VIZWALK_OUT_DIR",
    "VIZWALK_THEME",
    "VIZWALK_CHART_WIDTH",
    "VIZWALK_CHART_HEIGHT",
    "VIZWALK_MAX_TABLE_ROWS",
    "VIZWALK_TOPOJSON_BASE_URL",
    "VIZWALK_STRICT_SCHEMA",
]


@pytest.fixture
def clean_env(monkeypatch) -> None:
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def _write_walk_toml(tmp: Path, content: str) -> Path:
    p = tmp / "vizwalk.toml"
    p.write_text(content)
    return p


def test_settings_precedence_env_over_toml(tmp_path: Path, monkeypatch, clean_env) -> None:
    _write_walk_toml(
        tmp_path,
        """
        [walk]
        out_dir = "site_toml"
        theme = "vizwalk_dark"
        chart_width = 640
        """.strip(),
    )
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("VIZWALK_OUT_DIR", "site_env")
    monkeypatch.setenv("VIZWALK_CHART_WIDTH", "800")

    s = WalkSettings.load()

    assert s.out_dir == "site_env"
    assert s.chart_width == 800
    # TOML still applies where env is silent
    assert s.theme == "vizwalk_dark"


def test_settings_from_pyproject_tool_table(tmp_path: Path, monkeypatch, clean_env) -> None:
    (tmp_path / "pyproject.toml").write_text(
        """
        [tool.vizwalk]
        data_dir = "data"
        max_table_rows = 25
        strict_schema = false
        """.strip()
    )
    monkeypatch.chdir(tmp_path)

    s = WalkSettings.load()

    assert s.data_dir == "data"
    assert s.max_table_rows == 25
    assert s.strict_schema is False


def test_invalid_values_are_ignored(tmp_path: Path, monkeypatch, clean_env) -> None:
    _write_walk_toml(tmp_path, 'theme = "neon"\nchart_width = -3\nmax_table_rows = "many"\n')
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("VIZWALK_CHART_HEIGHT", "0")

    s = WalkSettings.load()

    assert s.theme == "vizwalk_light"
    assert s.chart_width == CHART_WIDTH
    assert s.max_table_rows == MAX_TABLE_ROWS
    assert s.chart_height == WalkSettings().chart_height


def test_defaults_when_no_config(tmp_path: Path, monkeypatch, clean_env) -> None:
    monkeypatch.chdir(tmp_path)

    s = WalkSettings.load()

    assert s == WalkSettings()
    assert s.data_dir is None
    assert s.out_dir == "out"
    assert s.topojson_url("us-10m.json").endswith("/data/us-10m.json")


def test_unparsable_toml_falls_back_to_defaults(tmp_path: Path, monkeypatch, clean_env) -> None:
    _write_walk_toml(tmp_path, "[walk\nout_dir = ")
    monkeypatch.chdir(tmp_path)
    assert WalkSettings.from_toml() == WalkSettings()
