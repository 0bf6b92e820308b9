from __future__ import annotations

import polars as pl

from vizwalk.wrangle.clean import (
    null_sentinels,
    parse_numeric,
    rename_to_lower_snake,
    split_combined,
    strip_strings,
    zero_pad,
)


def test_rename_and_strip() -> None:
    df = pl.DataFrame({"Cancer Site": ["  Lung "], "Count": [" 12"]})
    out = strip_strings(rename_to_lower_snake(df))
    assert out.columns == ["cancer_site", "count"]
    assert out.row(0) == ("Lung", "12")


def test_strip_strings_leaves_numeric_columns() -> None:
    df = pl.DataFrame({"a": [" x "], "n": [1]})
    assert strip_strings(df).row(0) == ("x", 1)


def test_null_sentinels_only_touches_named_columns() -> None:
    df = pl.DataFrame({"count": ["12", "~", " N.A. ", ".."], "site": ["~", "~", "~", "~"]})
    out = null_sentinels(df, ["count"])
    assert out["count"].to_list() == ["12", None, None, None]
    assert out["site"].to_list() == ["~"] * 4


def test_parse_numeric_thousands_and_integers() -> None:
    df = pl.DataFrame({"n": ["2,493,000", "4.0", None], "r": [" 2.6", "x", "3"]})
    out = parse_numeric(parse_numeric(df, ["n"], pl.Int64), ["r"])
    assert out.schema["n"] == pl.Int64
    assert out["n"].to_list() == [2493000, 4, None]
    assert out["r"].to_list() == [2.6, None, 3.0]


def test_split_combined_and_zero_pad() -> None:
    df = pl.DataFrame({"where": ["Miami-Dade County, FL", "Orleans Parish,LA", "nowhere"], "c": ["86", "71", "5"]})
    out = zero_pad(split_combined(df, "where", ["county_name", "state"], r"^(.*),\s*([A-Z]{2})$"), "c", 3)
    assert "where" not in out.columns
    assert out["county_name"].to_list() == ["Miami-Dade County", "Orleans Parish", None]
    assert out["state"].to_list() == ["FL", "LA", None]
    assert out["c"].to_list() == ["086", "071", "005"]


def test_split_combined_can_keep_source() -> None:
    df = pl.DataFrame({"where": ["Cook County, IL"]})
    out = split_combined(df, "where", ["county_name", "state"], r"^(.*),\s*([A-Z]{2})$", drop=False)
    assert out.columns == ["where", "county_name", "state"]
