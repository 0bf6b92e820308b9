from __future__ import annotations

from pathlib import Path

import polars as pl
import pytest

from vizwalk.core.errors import GrammarError
from vizwalk.core.grammar import DatasetName
from vizwalk.core.tables import get_dataset
from vizwalk.io import WalkSettings, dataset_path, load_dataset
from vizwalk.io.errors import IoConfigError, IoParseError, IoSchemaError
from vizwalk.io.paths import bundled_data_dir, lesson_out_dir
from vizwalk.io.read import (
    read_cancer_incidence,
    read_child_mortality,
    read_country_codes,
    read_unemployment,
)
from vizwalk.wrangle.geo import county_ids

_DTYPES = {"i64": pl.Int64, "f64": pl.Float64, "str": pl.Utf8}


@pytest.mark.parametrize("name", list(DatasetName))
def test_bundled_datasets_match_descriptors(name: DatasetName) -> None:
    df = load_dataset(name)
    desc = get_dataset(name)
    assert df.columns == list(desc.columns)
    assert df.schema == {c: _DTYPES[t] for c, t in desc.columns.items()}
    assert df.height > 0
    for col in desc.required:
        assert df[col].null_count() == 0, col


def test_load_dataset_unknown_name() -> None:
    with pytest.raises(GrammarError):
        load_dataset("iris")


def test_paths_resolve_bundled_and_configured(tmp_path: Path) -> None:
    assert dataset_path(WalkSettings(), "geyser") == bundled_data_dir() / "geyser.csv"
    assert dataset_path(WalkSettings(data_dir=str(tmp_path)), "barley") == tmp_path / "barley.csv"
    assert lesson_out_dir(WalkSettings(out_dir="site"), "geyser") == Path("site") / "geyser"
    f = tmp_path / "file.txt"
    f.write_text("x")
    with pytest.raises(IoConfigError):
        dataset_path(WalkSettings(data_dir=str(f)), "geyser")


def test_missing_file_in_configured_dir(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_dataset("geyser", WalkSettings(data_dir=str(tmp_path)))


def test_cancer_sentinels_become_nulls() -> None:
    df = read_cancer_incidence()
    male_breast = df.filter((pl.col("sex") == "Male") & (pl.col("cancer_site") == "Breast"))
    assert male_breast.height > 0
    assert male_breast["count"].null_count() == male_breast.height
    assert male_breast["age_adjusted_rate"].null_count() == male_breast.height
    thyroid_2020 = df.filter(
        (pl.col("year") == 2020) & (pl.col("sex") == "Male") & (pl.col("cancer_site") == "Thyroid")
    )
    assert thyroid_2020["count"].to_list() == [20]
    assert thyroid_2020["age_adjusted_rate"].to_list() == [None]
    # Footer lines never become rows
    assert df["year"].min() == 2015 and df["year"].max() == 2020


def test_unemployment_text_table_is_cleaned() -> None:
    df = read_unemployment()
    autauga = df.filter(pl.col("fips") == "01001").row(0, named=True)
    assert autauga["county_name"] == "Autauga County"
    assert autauga["state"] == "AL"
    assert autauga["county_id"] == 1001
    assert autauga["labor_force"] == 26600
    assert autauga["unemployment_rate"] == pytest.approx(2.6)
    bronx = df.filter(pl.col("fips") == "36005").row(0, named=True)
    assert bronx["labor_force"] is None
    assert bronx["unemployment_rate"] is None
    assert df["fips"].str.len_chars().unique().to_list() == [5]
    assert df["county_id"].to_list() == county_ids(df.drop("county_id"))["county_id"].to_list()


def test_unemployment_custom_file(tmp_path: Path) -> None:
    p = tmp_path / "laus.txt"
    p.write_text(
        "\n".join(
            [
                "COUNTY DATA",
                "",
                "LAUS Code | State | County | County Name/State Abbreviation | Year | Labor Force"
                " | Employed | Unemployed | Unemployment Rate (%)",
                "----------+-------+--------+----------+------+------+------+------+------",
                "CN0600100000000 | 6 | 1 | Alameda County, CA | 2023 | 1,000 | 950 | 50 | 5.0",
                "",
                "SOURCE: test",
            ]
        )
    )
    df = read_unemployment(path=p)
    assert df.select("state_fips", "county_fips", "fips", "county_id").row(0) == (
        "06",
        "001",
        "06001",
        6001,
    )


def test_unemployment_without_data_rows(tmp_path: Path) -> None:
    p = tmp_path / "laus.txt"
    p.write_text("title only\n\nSOURCE: none\n")
    with pytest.raises(IoParseError):
        read_unemployment(path=p)


def test_child_mortality_is_long_and_drops_missing() -> None:
    df = read_child_mortality()
    afghanistan = df.filter(pl.col("country") == "Afghanistan")
    assert 1950 not in afghanistan["year"].to_list()
    assert afghanistan["year"].to_list() == sorted(afghanistan["year"].to_list())
    kosovo = df.filter(pl.col("country") == "Kosovo")
    assert kosovo["year"].min() == 1990


def test_child_mortality_any_first_header_and_bad_format(tmp_path: Path) -> None:
    p = tmp_path / "u5mr.csv"
    p.write_text("Country Name,2000,2010,notes\nX,10.0,..,ignore\n")
    df = read_child_mortality(path=p)
    assert df.rows() == [("X", 2000, 10.0)]
    bad = tmp_path / "u5mr.json"
    bad.write_text("{}")
    with pytest.raises(IoConfigError):
        read_child_mortality(path=bad)


def test_strict_schema_rejects_extra_columns(tmp_path: Path) -> None:
    p = tmp_path / "country_codes.csv"
    p.write_text("country,iso3,iso_numeric,region,capital\nPeru,PER,604,Latin America,Lima\n")
    with pytest.raises(IoSchemaError, match="unexpected columns"):
        read_country_codes(WalkSettings(data_dir=str(tmp_path)))
    loose = read_country_codes(WalkSettings(data_dir=str(tmp_path), strict_schema=False))
    assert loose.columns[-1] == "capital"
