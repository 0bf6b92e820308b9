"""
Readers for the walkthrough datasets.

Overview
- One reader per dataset. Each resolves its file via vizwalk.io.paths, performs the cleaning
  the lesson narrates (headers, sentinels, thousands separators, combined fields, wide to long),
  and validates the result against its vizwalk.core.tables descriptor.
- load_dataset() dispatches by DatasetName.

Source of truth
- Column names/dtypes come from vizwalk.core.tables descriptors.
- Missing-value sentinels default to vizwalk.core.constants.MISSING_SENTINELS.

Import DAG discipline
- Depends on stdlib, polars, vizwalk.core, and vizwalk.wrangle.clean; does not import viz, lessons, or app.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from pathlib import Path

import polars as pl

from vizwalk.core.grammar import DatasetName, dataset_name_from_value
from vizwalk.wrangle.clean import (
    null_sentinels,
    parse_numeric,
    rename_to_lower_snake,
    split_combined,
    strip_strings,
    zero_pad,
)
from vizwalk.wrangle.geo import county_ids

from .config import WalkSettings
from .errors import IoConfigError, IoParseError, IoSchemaError
from .paths import dataset_path
from .text import read_delimited_block, read_lines, split_header, strip_preamble_and_footer
from .validate import validate_frame_for_dataset

__all__ = [
    "read_geyser",
    "read_barley",
    "read_hair_eye_color",
    "read_cancer_incidence",
    "read_unemployment",
    "read_child_mortality",
    "read_country_codes",
    "load_dataset",
]

_CANCER_ROW_RE = re.compile(r'^\s*"?\d{4}"?\s*,')
_LAUS_ROW_RE = re.compile(r"^\s*CN\d{13}\s*\|")
_COMBINED_COUNTY_RE = r"^(.*),\s*([A-Z]{2})$"
# Spreadsheet year headers may come back as "1950" or "1950.0"
_YEAR_HEADER_RE = re.compile(r"^\s*(\d{4})(?:\.0+)?\s*$")


def _resolve(settings: WalkSettings | None, name: DatasetName, path: str | Path | None) -> Path:
    p = Path(path) if path is not None else dataset_path(settings or WalkSettings(), name)
    if not p.exists():
        raise FileNotFoundError(f"Required file not found: {p}")
    return p


def _strict(settings: WalkSettings | None) -> bool:
    return True if settings is None else settings.strict_schema


def _read_plain_csv(p: Path) -> pl.DataFrame:
    try:
        df = pl.read_csv(p, infer_schema=False)
    except pl.exceptions.PolarsError as exc:
        raise IoParseError(f"failed to parse {p}: {exc}") from exc
    return strip_strings(rename_to_lower_snake(df))


def read_geyser(
    settings: WalkSettings | None = None, *, path: str | Path | None = None
) -> pl.DataFrame:
    """Old Faithful eruptions: `eruptions` (f64 minutes), `waiting` (i64 minutes)."""
    p = _resolve(settings, DatasetName.GEYSER, path)
    df = _read_plain_csv(p)
    df = parse_numeric(df, ["eruptions"], pl.Float64)
    df = parse_numeric(df, ["waiting"], pl.Int64)
    return validate_frame_for_dataset(df, DatasetName.GEYSER, strict=_strict(settings))


def read_barley(
    settings: WalkSettings | None = None, *, path: str | Path | None = None
) -> pl.DataFrame:
    """Barley yields: `yield`, `variety`, `year`, `site`."""
    p = _resolve(settings, DatasetName.BARLEY, path)
    df = _read_plain_csv(p)
    df = parse_numeric(df, ["yield"], pl.Float64)
    df = parse_numeric(df, ["year"], pl.Int64)
    return validate_frame_for_dataset(df, DatasetName.BARLEY, strict=_strict(settings))


def read_hair_eye_color(
    settings: WalkSettings | None = None, *, path: str | Path | None = None
) -> pl.DataFrame:
    """Hair/eye color counts in long form: `hair`, `eye`, `sex`, `freq`."""
    p = _resolve(settings, DatasetName.HAIR_EYE_COLOR, path)
    df = _read_plain_csv(p)
    df = parse_numeric(df, ["freq"], pl.Int64)
    return validate_frame_for_dataset(df, DatasetName.HAIR_EYE_COLOR, strict=_strict(settings))


def read_cancer_incidence(
    settings: WalkSettings | None = None, *, path: str | Path | None = None
) -> pl.DataFrame:
    """
    Cancer incidence export with display headers, `~`/`.` sentinels and a notes footer.

    Steps:
        1. Keep the header and the contiguous block of rows starting with a year.
        2. Normalize headers to lower_snake ("Age-Adjusted Rate" -> age_adjusted_rate).
        3. Sentinels to null, then cast counts/population to i64 and the rate to f64.

    Raises:
        FileNotFoundError: If the file does not exist.
        IoParseError: If no year rows are found.
    """
    p = _resolve(settings, DatasetName.CANCER_INCIDENCE, path)
    header, rows = strip_preamble_and_footer(read_lines(p), lambda s: bool(_CANCER_ROW_RE.match(s)))
    df = read_delimited_block(split_header(header, ","), rows, separator=",")
    df = strip_strings(rename_to_lower_snake(df))
    df = null_sentinels(df, ["count", "population", "age_adjusted_rate"])
    df = parse_numeric(df, ["year", "count", "population"], pl.Int64)
    df = parse_numeric(df, ["age_adjusted_rate"], pl.Float64)
    return validate_frame_for_dataset(df, DatasetName.CANCER_INCIDENCE, strict=_strict(settings))


def read_unemployment(
    settings: WalkSettings | None = None, *, path: str | Path | None = None
) -> pl.DataFrame:
    """
    County labor-force text table (pipe-separated, title preamble, dashed rule, footer).

    Steps:
        1. Keep the header and rows starting with a LAUS code.
        2. Normalize headers; the numeric State/County columns become state_fips/county_fips.
        3. `N.A.` to null; strip thousands separators; cast counts and rate.
        4. Split "Autauga County, AL" into county_name and state.
        5. Zero-pad FIPS parts and combine into a 5-digit `fips` and integer `county_id`
           (the id used by the us-10m topojson counties).

    Raises:
        FileNotFoundError: If the file does not exist.
        IoParseError: If no LAUS rows are found.
        IoSchemaError: If the combined county field is missing.
    """
    p = _resolve(settings, DatasetName.UNEMPLOYMENT, path)
    header, rows = strip_preamble_and_footer(read_lines(p), lambda s: bool(_LAUS_ROW_RE.match(s)))
    df = read_delimited_block(split_header(header, "|"), rows, separator="|")
    df = strip_strings(rename_to_lower_snake(df))
    df = df.rename({"state": "state_fips", "county": "county_fips"}, strict=False)

    combined = next((c for c in df.columns if c.startswith("county_name")), None)
    if combined is None:
        raise IoSchemaError("unemployment table has no 'County Name/State Abbreviation' column")

    count_cols = [c for c in ("labor_force", "employed", "unemployed") if c in df.columns]
    df = null_sentinels(df, [*count_cols, "unemployment_rate"])
    df = parse_numeric(df, ["year", *count_cols], pl.Int64)
    df = parse_numeric(df, ["unemployment_rate"], pl.Float64)
    df = split_combined(df, combined, ["county_name", "state"], _COMBINED_COUNTY_RE)
    df = zero_pad(zero_pad(df, "state_fips", 2), "county_fips", 3)
    df = df.with_columns((pl.col("state_fips") + pl.col("county_fips")).alias("fips"))
    df = county_ids(df)
    return validate_frame_for_dataset(df, DatasetName.UNEMPLOYMENT, strict=_strict(settings))


def _read_wide_sheet(p: Path, sheet_name: str | None) -> pl.DataFrame:
    suffix = p.suffix.lower()
    if suffix in (".xlsx", ".xlsm", ".xls"):
        try:
            # Every cell as text; sentinels and numbers are sorted out after unpivoting
            if sheet_name:
                return pl.read_excel(p, sheet_name=sheet_name, infer_schema_length=0)
            return pl.read_excel(p, infer_schema_length=0)
        except pl.exceptions.PolarsError as exc:
            raise IoParseError(f"failed to read spreadsheet {p}: {exc}") from exc
    if suffix == ".csv":
        try:
            return pl.read_csv(p, infer_schema=False)
        except pl.exceptions.PolarsError as exc:
            raise IoParseError(f"failed to parse {p}: {exc}") from exc
    raise IoConfigError(f"unsupported spreadsheet format: {p.suffix!r}")


def read_child_mortality(
    settings: WalkSettings | None = None,
    *,
    path: str | Path | None = None,
    sheet_name: str | None = None,
) -> pl.DataFrame:
    """
    Under-five mortality spreadsheet (one row per country, one column per year) to long form.

    The first column is taken as the country whatever its header says. Cells encoded `..` or
    left empty are dropped after unpivoting, so each row is an observed (country, year).

    Returns:
        pl.DataFrame: `country`, `year` (i64), `deaths_per_1000` (f64), sorted by country, year.
    """
    p = _resolve(settings, DatasetName.CHILD_MORTALITY, path)
    wide = _read_wide_sheet(p, sheet_name)
    if wide.width < 2:
        raise IoParseError(f"{p} has no year columns")
    wide = wide.rename({wide.columns[0]: "country"})
    years = {c: m.group(1) for c in wide.columns[1:] if (m := _YEAR_HEADER_RE.match(c))}
    wide = wide.rename(years)
    year_cols = list(years.values())
    if not year_cols:
        raise IoParseError(f"{p} has no year columns")

    long = wide.unpivot(
        index="country", on=year_cols, variable_name="year", value_name="deaths_per_1000"
    )
    long = strip_strings(long)
    long = null_sentinels(long, ["deaths_per_1000"])
    long = parse_numeric(long, ["year"], pl.Int64)
    long = parse_numeric(long, ["deaths_per_1000"], pl.Float64)
    long = long.drop_nulls(["country", "deaths_per_1000"]).sort(["country", "year"])
    return validate_frame_for_dataset(long, DatasetName.CHILD_MORTALITY, strict=_strict(settings))


def read_country_codes(
    settings: WalkSettings | None = None, *, path: str | Path | None = None
) -> pl.DataFrame:
    """ISO 3166 crosswalk: `country`, `iso3`, `iso_numeric`, `region`."""
    p = _resolve(settings, DatasetName.COUNTRY_CODES, path)
    df = _read_plain_csv(p)
    df = null_sentinels(df, ["region"])
    df = parse_numeric(df, ["iso_numeric"], pl.Int64)
    return validate_frame_for_dataset(df, DatasetName.COUNTRY_CODES, strict=_strict(settings))


_READERS: dict[DatasetName, Callable[..., pl.DataFrame]] = {
    DatasetName.GEYSER: read_geyser,
    DatasetName.BARLEY: read_barley,
    DatasetName.HAIR_EYE_COLOR: read_hair_eye_color,
    DatasetName.CANCER_INCIDENCE: read_cancer_incidence,
    DatasetName.UNEMPLOYMENT: read_unemployment,
    DatasetName.CHILD_MORTALITY: read_child_mortality,
    DatasetName.COUNTRY_CODES: read_country_codes,
}


def load_dataset(name: DatasetName | str, settings: WalkSettings | None = None) -> pl.DataFrame:
    """
    Load a cleaned dataset by name.

    Raises:
        GrammarError: Unknown dataset name.
        FileNotFoundError: The resolved file does not exist.
        IoParseError / IoSchemaError: The file could not be cleaned into its descriptor.

    Examples:
        >>> df = load_dataset("geyser")  # doctest: +SKIP
        >>> df.columns  # doctest: +SKIP
        ['eruptions', 'waiting']
    """
    return _READERS[dataset_name_from_value(name)](settings)
