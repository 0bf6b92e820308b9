from __future__ import annotations

import math

import polars as pl
import pytest

from vizwalk.wrangle.stats import (
    bin_counts,
    describe,
    percent_change,
    proportions,
    summarize_by,
    weighted_mean_by,
)


def test_describe_ignores_nulls() -> None:
    row = describe(pl.DataFrame({"x": [1.0, None, 3.0, 5.0]}), "x").row(0, named=True)
    assert row["n"] == 3
    assert row["mean"] == pytest.approx(3.0)
    assert row["median"] == pytest.approx(3.0)
    assert row["sd"] == pytest.approx(2.0)
    assert (row["min"], row["max"]) == (1.0, 5.0)


def test_describe_missing_column() -> None:
    with pytest.raises(ValueError, match="requires column"):
        describe(pl.DataFrame({"x": [1.0]}), "y")


def test_summarize_by_standard_error() -> None:
    df = pl.DataFrame({"g": ["a", "a", "b", "b"], "v": [1.0, 3.0, 2.0, 2.0]})
    out = summarize_by(df, "g", "v")
    a = out.filter(pl.col("g") == "a").row(0, named=True)
    assert a["n"] == 2
    assert a["se"] == pytest.approx(math.sqrt(2.0) / math.sqrt(2.0))
    assert out["g"].to_list() == ["a", "b"]


def test_proportions_within_groups_sum_to_one() -> None:
    df = pl.DataFrame({"hair": ["Black", "Black", "Red"], "eye": ["Brown", "Blue", "Blue"], "freq": [3, 1, 2]})
    within = proportions(df, "freq", "hair")
    sums = within.group_by("hair").agg(pl.col("prop").sum())
    assert all(v == pytest.approx(1.0) for v in sums["prop"].to_list())
    overall = proportions(df, "freq", name="share")
    assert overall["share"].sum() == pytest.approx(1.0)


def test_bin_counts_fixed_width() -> None:
    df = pl.DataFrame({"x": [1.6, 1.9, 2.1, 4.4, None]})
    out = bin_counts(df, "x", 0.5, origin=1.5)
    assert out.rows() == [(1.5, 2.0, 2), (2.0, 2.5, 1), (4.0, 4.5, 1)]
    with pytest.raises(ValueError):
        bin_counts(df, "x", 0)


def test_bin_counts_values_on_edges_stay_in_their_bin() -> None:
    out = bin_counts(pl.DataFrame({"x": [0.3, 0.7, 0.69999]}), "x", 0.1)
    assert out.rows() == [(0.3, 0.4, 1), (0.6, 0.7, 1), (0.7, 0.8, 1)]
    for start, end, _ in out.rows():
        assert start < end


def test_weighted_mean_by_skips_nulls() -> None:
    df = pl.DataFrame(
        {"state": ["NY", "NY", "NY"], "rate": [5.0, 4.0, None], "force": [100, 300, 500]}
    )
    out = weighted_mean_by(df, "state", "rate", "force")
    assert out.columns == ["state", "rate_weighted", "n"]
    assert out.row(0) == ("NY", pytest.approx(4.25), 2)


def test_percent_change_first_to_last() -> None:
    df = pl.DataFrame(
        {"c": ["A", "A", "A", "B", "B"], "t": [2000, 1990, 2010, 1990, 2000], "v": [50.0, 100.0, 25.0, None, 8.0]}
    )
    out = percent_change(df, "c", "t", "v")
    a = out.filter(pl.col("c") == "A").row(0, named=True)
    assert (a["first_t"], a["last_t"]) == (1990, 2010)
    assert a["pct_change"] == pytest.approx(-75.0)
    b = out.filter(pl.col("c") == "B").row(0, named=True)
    assert (b["first_t"], b["change"]) == (2000, 0.0)
