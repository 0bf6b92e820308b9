from __future__ import annotations

import polars as pl

from vizwalk.wrangle.geo import attach_country_codes, county_ids, normalize_country
from vizwalk.wrangle.reshape import longer, wider


def test_longer_then_wider_restores_table() -> None:
    wide = pl.DataFrame({"site": ["Crookston", "Morris"], "1931": [1.0, 2.0], "1932": [3.0, 4.0]})
    long = longer(wide, "site", names_to="year", values_to="y")
    assert long.height == 4
    assert set(long.columns) == {"site", "year", "y"}
    back = wider(long, "site", names_from="year", values_from="y")
    assert back.sort("site").equals(wide.sort("site"))


def test_wider_aggregates_duplicates() -> None:
    df = pl.DataFrame({"hair": ["Red", "Red"], "eye": ["Blue", "Blue"], "freq": [3, 4]})
    out = wider(df, "hair", names_from="eye", values_from="freq", aggregate="sum")
    assert out.row(0) == ("Red", 7)


def test_normalize_country_aliases() -> None:
    assert normalize_country("Viet Nam") == "vietnam"
    assert normalize_country("Russia") == normalize_country("Russian Federation")
    assert normalize_country("UK") == "united kingdom"
    assert normalize_country("The Gambia") == "gambia"


def test_accented_names_fold_to_ascii() -> None:
    assert normalize_country("Côte d'Ivoire") == "ivory coast"
    assert normalize_country("São Tomé and Príncipe") == "sao tome and principe"
    assert normalize_country("Curaçao") == "curacao"
    df = pl.DataFrame({"country": ["Côte d'Ivoire"]})
    codes = pl.DataFrame({"country": ["Ivory Coast"], "iso3": ["CIV"], "iso_numeric": [384]})
    joined, unmatched = attach_country_codes(df, codes)
    assert unmatched == []
    assert joined["iso_numeric"].to_list() == [384]


def test_attach_country_codes_reports_unmatched() -> None:
    df = pl.DataFrame({"country": ["Viet Nam", "Kosovo", "USA", "Kosovo"], "v": [1, 2, 3, 4]})
    codes = pl.DataFrame(
        {"country": ["Vietnam", "United States"], "iso3": ["VNM", "USA"], "iso_numeric": [704, 840]}
    )
    joined, unmatched = attach_country_codes(df, codes)
    assert joined.height == df.height
    assert joined["iso_numeric"].to_list() == [704, None, 840, None]
    assert unmatched == ["Kosovo"]
    assert "_key" not in joined.columns


def test_county_ids_from_fips() -> None:
    out = county_ids(pl.DataFrame({"fips": ["01001", "36005", "bad"]}))
    assert out["county_id"].to_list() == [1001, 36005, None]
