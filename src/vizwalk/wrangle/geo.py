"""
Joining heterogeneous geographic identifiers.

Two joins appear in the walkthrough:
- Country names in an indicator spreadsheet -> ISO 3166 codes, so rows can be matched to the
  numeric ids of world-110m topojson features. Names are normalized (case, punctuation,
  leading "the") and a small alias table covers spellings that differ between sources.
- County FIPS strings -> integer ids used by us-10m topojson county features.
"""

from __future__ import annotations

import re
import unicodedata
from typing import Final

import polars as pl

__all__ = [
    "COUNTRY_ALIASES",
    "normalize_country",
    "attach_country_codes",
    "county_ids",
]

# Normalized alternate spelling -> normalized crosswalk spelling.
COUNTRY_ALIASES: Final[dict[str, str]] = {
    "usa": "united states",
    "us": "united states",
    "united states of america": "united states",
    "uk": "united kingdom",
    "great britain": "united kingdom",
    "russia": "russian federation",
    "viet nam": "vietnam",
    "egypt arab rep": "egypt",
    "iran islamic rep": "iran",
    "korea rep": "south korea",
    "republic of korea": "south korea",
    "cote d ivoire": "ivory coast",
    "czechia": "czech republic",
}

_PUNCT_RE: Final[re.Pattern[str]] = re.compile(r"[^a-z0-9]+")


def normalize_country(name: str) -> str:
    """
    Normalize a country name for matching.

    Examples:
        >>> normalize_country("  Viet Nam ")
        'vietnam'
        >>> normalize_country("The Gambia")
        'gambia'
        >>> normalize_country("Côte d'Ivoire")
        'ivory coast'
    """
    folded = "".join(
        ch for ch in unicodedata.normalize("NFKD", name or "") if not unicodedata.combining(ch)
    )
    key = _PUNCT_RE.sub(" ", folded.lower()).strip()
    if key.startswith("the "):
        key = key[4:]
    return COUNTRY_ALIASES.get(key, key)


def _key_expr(col: str) -> pl.Expr:
    return pl.col(col).map_elements(normalize_country, return_dtype=pl.Utf8)


def attach_country_codes(
    df: pl.DataFrame,
    codes: pl.DataFrame,
    *,
    country_col: str = "country",
    codes_country_col: str = "country",
) -> tuple[pl.DataFrame, list[str]]:
    """
    Left-join ISO codes onto `df` by normalized country name.

    Args:
        df (pl.DataFrame): Frame with a country name column.
        codes (pl.DataFrame): Crosswalk with `country`, `iso3`, `iso_numeric` (and optional `region`).
        country_col (str): Name column in `df`.
        codes_country_col (str): Name column in `codes`.

    Returns:
        tuple[pl.DataFrame, list[str]]: (df with iso3/iso_numeric/region columns added,
        sorted distinct names in `df` that found no code).
    """
    extra = [c for c in ("iso3", "iso_numeric", "region") if c in codes.columns]
    lookup = (
        codes.with_columns(_key_expr(codes_country_col).alias("_key"))
        .select("_key", *extra)
        .unique(subset="_key", keep="first")
    )
    joined = (
        df.with_columns(_key_expr(country_col).alias("_key"))
        .join(lookup, on="_key", how="left", maintain_order="left")
        .drop("_key")
    )
    match_col = "iso3" if "iso3" in extra else extra[0]
    unmatched = sorted(
        set(joined.filter(pl.col(match_col).is_null()).get_column(country_col).to_list())
    )
    return joined, unmatched


def county_ids(df: pl.DataFrame, *, fips_col: str = "fips", name: str = "county_id") -> pl.DataFrame:
    """Integer county ids from 5-digit FIPS strings ("01001" -> 1001)."""
    return df.with_columns(pl.col(fips_col).cast(pl.Int64, strict=False).alias(name))
