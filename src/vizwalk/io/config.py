"""
Configuration for the vizwalk package.

Defines WalkSettings, a frozen dataclass carrying runtime configuration for readers, chart
builders, and exports. Defaults are sourced from vizwalk.core.constants (the single source of
truth).

Source of truth
- vizwalk.core.constants.CHART_WIDTH, CHART_HEIGHT, MAX_TABLE_ROWS, TOPOJSON_BASE_URL
- Dataset filenames come from vizwalk.core.tables descriptors

Import DAG discipline
- Depends only on stdlib and vizwalk.core.constants.
- Does not import higher layers (wrangle, viz, lessons, app).

Notes
- Precedence: environment (VIZWALK_*) > TOML (vizwalk.toml or [tool.vizwalk]) > defaults.
- data_dir None means "use the samples bundled with the package".
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Literal

from vizwalk.core.constants import CHART_HEIGHT, CHART_WIDTH, MAX_TABLE_ROWS, TOPOJSON_BASE_URL

ThemeName = Literal["vizwalk_light", "vizwalk_dark"]
_THEMES: frozenset[str] = frozenset({"vizwalk_light", "vizwalk_dark"})


@dataclass(frozen=True)
class WalkSettings:
    """
    Runtime settings for vizwalk.

    Attributes:
        data_dir (str | None): Directory holding dataset files; None uses the bundled samples.
        out_dir (str): Root under which lesson exports are written.
        theme (Literal["vizwalk_light","vizwalk_dark"]): Altair theme enabled for charts.
        chart_width (int): Default chart width in pixels.
        chart_height (int): Default chart height in pixels.
        max_table_rows (int): Rows shown in table previews (CLI and app).
        topojson_base_url (str): Base URL for us-10m.json / world-110m.json.
        strict_schema (bool): If True, readers reject columns not declared by the descriptor.

    Examples:
        >>> from vizwalk.io import WalkSettings
        >>> WalkSettings(out_dir="site", chart_width=640)  # doctest: +ELLIPSIS
        WalkSettings(...)
    """

    data_dir: str | None = None
    out_dir: str = "out"
    theme: ThemeName = "vizwalk_light"
    chart_width: int = CHART_WIDTH
    chart_height: int = CHART_HEIGHT
    max_table_rows: int = MAX_TABLE_ROWS
    topojson_base_url: str = TOPOJSON_BASE_URL
    strict_schema: bool = True

    def topojson_url(self, filename: str) -> str:
        """Join a topojson file name onto topojson_base_url."""
        return self.topojson_base_url.rstrip("/") + "/" + filename

    # Configuration loaders (env/TOML) with precedence: env > TOML > defaults.

    @classmethod
    def _apply_mapping(cls, base: WalkSettings, cfg: dict[str, Any] | None) -> WalkSettings:
        """Apply a loose config mapping onto WalkSettings, returning a new instance."""
        if not isinstance(cfg, dict):
            return base

        s = base

        def _bool(v: Any) -> bool:
            if isinstance(v, bool):
                return v
            if isinstance(v, (int, float)):
                return bool(v)
            if isinstance(v, str):
                return v.strip().lower() in {"1", "true", "t", "yes", "y", "on"}
            return False

        def _positive_int(v: Any) -> int | None:
            try:
                n = int(v)
            except (TypeError, ValueError):
                return None
            return n if n > 0 else None

        if "data_dir" in cfg and isinstance(cfg["data_dir"], str) and cfg["data_dir"].strip():
            s = replace(s, data_dir=cfg["data_dir"].strip())

        if "out_dir" in cfg and isinstance(cfg["out_dir"], str) and cfg["out_dir"].strip():
            s = replace(s, out_dir=cfg["out_dir"].strip())

        if "theme" in cfg and isinstance(cfg["theme"], str):
            theme = cfg["theme"].strip().lower()
            if theme in _THEMES:
                s = replace(s, theme=theme)  # type: ignore[arg-type]

        for key in ("chart_width", "chart_height", "max_table_rows"):
            if key in cfg:
                n = _positive_int(cfg[key])
                if n is not None:
                    s = replace(s, **{key: n})

        if "topojson_base_url" in cfg and isinstance(cfg["topojson_base_url"], str):
            url = cfg["topojson_base_url"].strip()
            if url:
                s = replace(s, topojson_base_url=url)

        if "strict_schema" in cfg:
            s = replace(s, strict_schema=_bool(cfg["strict_schema"]))

        return s

    @classmethod
    def from_env(cls, base: WalkSettings | None = None, prefix: str = "VIZWALK_") -> WalkSettings:
        """
        Build WalkSettings from environment variables. Precedence is env > base (if provided) > defaults.

        Recognized variables:
            - VIZWALK_DATA_DIR
            - VIZWALK_OUT_DIR
            - VIZWALK_THEME ("vizwalk_light" | "vizwalk_dark")
            - VIZWALK_CHART_WIDTH
            - VIZWALK_CHART_HEIGHT
            - VIZWALK_MAX_TABLE_ROWS
            - VIZWALK_TOPOJSON_BASE_URL
            - VIZWALK_STRICT_SCHEMA (1/0/true/false/yes/no/on/off)
        """
        s = base or cls()

        mapping: dict[str, Any] = {}
        for key in (
            "data_dir",
            "out_dir",
            "theme",
            "chart_width",
            "chart_height",
            "max_table_rows",
            "topojson_base_url",
            "strict_schema",
        ):
            v = os.getenv(prefix + key.upper())
            if v:
                mapping[key] = v

        return cls._apply_mapping(s, mapping)

    @classmethod
    def from_toml(cls, path: str | os.PathLike[str] | None = None) -> WalkSettings:
        """
        Build WalkSettings from a TOML file.

        Search order when `path` is None:
            1) ./vizwalk.toml (with either a [walk] table or direct keys)
            2) ./pyproject.toml under [tool.vizwalk]

        Returns defaults if no file is present or the file cannot be parsed.
        """
        s = cls()

        def _load_toml(p: Path) -> dict[str, Any] | None:
            try:
                with p.open("rb") as fh:
                    return tomllib.load(fh)
            except (OSError, tomllib.TOMLDecodeError):
                return None

        cand: list[Path] = []
        if path is not None:
            cand.append(Path(path))
        else:
            cand.append(Path.cwd() / "vizwalk.toml")
            cand.append(Path.cwd() / "pyproject.toml")

        cfg: dict[str, Any] | None = None
        for p in cand:
            if not p.exists():
                continue
            data = _load_toml(p)
            if not isinstance(data, dict):
                continue
            if p.name == "pyproject.toml":
                tool = data.get("tool", {})
                cfg = tool.get("vizwalk") if isinstance(tool, dict) else None
            elif isinstance(data.get("walk"), dict):
                cfg = data["walk"]
            else:
                cfg = data
            if cfg:
                break

        return cls._apply_mapping(s, cfg)

    @classmethod
    def load(cls, path: str | os.PathLike[str] | None = None) -> WalkSettings:
        """
        Load WalkSettings applying precedence: environment > TOML > defaults.

        Args:
            path: Optional explicit TOML path. If None, search defaults (vizwalk.toml, pyproject.toml).
        """
        s = cls.from_toml(path)
        s = cls.from_env(base=s)
        return s
