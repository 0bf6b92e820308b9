from __future__ import annotations

from pathlib import Path
from typing import Any

import altair as alt
import polars as pl
import pytest

from vizwalk.io import load_dataset
from vizwalk.lessons.barley import site_year_means
from vizwalk.lessons.cancer import crude_rate
from vizwalk.lessons.geyser import label_eruptions
from vizwalk.lessons.mortality import with_codes
from vizwalk.lessons.unemployment import state_summary
from vizwalk.viz import barley, base, cancer, geyser, haireye, layers, mortality, unemployment


def find_in_spec(obj: Any, predicate) -> bool:
    """Recursively scan a chart spec dict for a predicate match."""
    if isinstance(obj, dict):
        if predicate(obj):
            return True
        return any(find_in_spec(v, predicate) for v in obj.values())
    if isinstance(obj, list):
        return any(find_in_spec(v, predicate) for v in obj)
    return False


def mark_type(d: dict) -> str | None:
    m = d.get("mark")
    return m.get("type") if isinstance(m, dict) else m


def has_mark(spec: dict, kind: str) -> bool:
    return find_in_spec(spec, lambda d: mark_type(d) == kind)


# 1) Static guard: charts never go through pandas


def test_no_pandas_in_viz() -> None:
    src_viz = Path("src") / "vizwalk" / "viz"
    assert src_viz.exists(), "src/vizwalk/viz directory must exist"
    for py in src_viz.rglob("*.py"):
        text = py.read_text(encoding="utf-8")
        assert "import pandas" not in text and "from pandas" not in text, py


# 2) Geyser


@pytest.fixture(scope="module")
def eruptions() -> pl.DataFrame:
    return label_eruptions(load_dataset("geyser"))


def test_histogram_uses_bin_step_and_is_configured(eruptions: pl.DataFrame) -> None:
    spec = geyser.histogram(eruptions, 0.25).to_dict()
    assert mark_type(spec) == "bar"
    assert spec["encoding"]["x"]["bin"] == {"step": 0.25}
    assert spec["config"]["axis"]["labelFontSize"] == 12
    with pytest.raises(ValueError):
        geyser.histogram(eruptions, 0)


def test_bin_width_comparison_one_panel_per_width(eruptions: pl.DataFrame) -> None:
    spec = geyser.bin_width_comparison(eruptions, (0.1, 0.5, 1.0)).to_dict()
    assert len(spec["hconcat"]) == 3
    steps = [panel["encoding"]["x"]["bin"]["step"] for panel in spec["hconcat"]]
    assert steps == [0.1, 0.5, 1.0]


def test_density_uses_density_transform(eruptions: pl.DataFrame) -> None:
    spec = geyser.density(eruptions, 0.3).to_dict()
    assert find_in_spec(spec, lambda d: d.get("density") == "eruptions" and d.get("bandwidth") == 0.3)
    lo, hi = eruptions["eruptions"].min(), eruptions["eruptions"].max()
    assert find_in_spec(spec, lambda d: d.get("extent") == [lo, hi])


def test_density_without_values_is_a_placeholder() -> None:
    df = pl.DataFrame({"eruptions": [None, None]}, schema={"eruptions": pl.Float64})
    assert mark_type(geyser.density(df).to_dict()) == "text"


def test_scatter_colors_by_kind_when_present(eruptions: pl.DataFrame) -> None:
    spec = geyser.scatter(eruptions).to_dict()
    assert spec["encoding"]["color"]["field"] == "kind"
    plain = geyser.scatter(eruptions.drop("kind")).to_dict()
    assert "color" not in plain["encoding"]


# 3) Barley


def test_dot_plot_trellis_sorted_by_median() -> None:
    spec = barley.dot_plot(load_dataset("barley")).to_dict()
    enc = spec["encoding"]
    assert enc["row"]["field"] == "site"
    assert enc["y"]["sort"] == {"field": "yield", "op": "median", "order": "descending"}
    assert enc["color"] == {"field": "year", "type": "nominal"}


def test_site_year_means_chart_layers_lines_points_labels() -> None:
    spec = barley.site_year_means_chart(site_year_means(load_dataset("barley"))).to_dict()
    assert len(spec["layer"]) == 3
    assert has_mark(spec, "line") and has_mark(spec, "text")
    assert "values" in spec["data"]


# 4) Hair / eye


def test_stacked_proportions_normalizes() -> None:
    df = load_dataset("hair_eye_color")
    spec = haireye.stacked_proportions(df, "hair", "eye").to_dict()
    assert spec["encoding"]["y"]["stack"] == "normalize"
    assert spec["encoding"]["color"]["scale"]["domain"] == list(haireye.EYE_COLORS)
    with pytest.raises(ValueError):
        haireye.stacked_proportions(df, "hair", "hair")


def test_heatmap_has_rect_and_text() -> None:
    spec = haireye.heatmap(load_dataset("hair_eye_color")).to_dict()
    assert has_mark(spec, "rect") and has_mark(spec, "text")


# 5) Cancer


def test_trend_chart_faceted_by_sex_and_skips_nulls() -> None:
    df = crude_rate(load_dataset("cancer_incidence"))
    spec = cancer.trend_chart(df).to_dict()
    assert spec["facet"]["column"]["field"] == "sex"
    assert len(spec["spec"]["layer"]) == 2
    assert all(row["age_adjusted_rate"] is not None for row in spec["data"]["values"])
    with pytest.raises(ValueError, match="unknown measure"):
        cancer.trend_chart(df, "mortality")


def test_site_bars_offsets_by_sex() -> None:
    df = load_dataset("cancer_incidence")
    spec = cancer.site_bars(df, 2019).to_dict()
    assert spec["encoding"]["yOffset"]["field"] == "sex"
    assert {r["year"] for r in spec["data"]["values"]} == {2019}
    empty = cancer.site_bars(df, 1990).to_dict()
    assert mark_type(empty) == "text"


def test_single_view_builders_take_explicit_size() -> None:
    df = load_dataset("cancer_incidence")
    assert cancer.site_bars(df, 2019).to_dict()["width"] == 360
    sized = cancer.site_bars(df, 2019, width=700, height=420).to_dict()
    assert (sized["width"], sized["height"]) == (700, 420)
    counties = load_dataset("unemployment")
    assert unemployment.county_choropleth(counties, width=500).to_dict()["width"] == 500
    assert unemployment.state_bars(state_summary(counties), width=300).to_dict()["width"] == 300


# 6) Unemployment


def test_county_choropleth_looks_up_rates_by_id() -> None:
    df = load_dataset("unemployment")
    spec = unemployment.county_choropleth(df, "https://example.org/us-10m.json").to_dict()
    assert spec["projection"]["type"] == "albersUsa"
    assert find_in_spec(spec, lambda d: d.get("url") == "https://example.org/us-10m.json")
    assert find_in_spec(spec, lambda d: d.get("type") == "topojson" and d.get("feature") == "counties")
    assert find_in_spec(
        spec, lambda d: d.get("lookup") == "id" and d.get("from", {}).get("key") == "county_id"
    )
    assert has_mark(spec, "geoshape")


def test_rate_histogram_and_state_bars() -> None:
    df = load_dataset("unemployment")
    hist = unemployment.rate_histogram(df, 1.0).to_dict()
    assert hist["encoding"]["x"]["bin"] == {"step": 1.0}
    bars = unemployment.state_bars(state_summary(df)).to_dict()
    assert bars["encoding"]["y"]["sort"] == "-x"


# 7) Mortality


def test_country_lines_filters_and_log_scale() -> None:
    df = load_dataset("child_mortality")
    spec = mortality.country_lines(df, ["Japan", "Chad"], log_scale=True).to_dict()
    assert spec["encoding"]["y"]["scale"]["type"] == "log"
    assert {r["country"] for r in spec["data"]["values"]} == {"Japan", "Chad"}
    none = mortality.country_lines(df, ["Atlantis"]).to_dict()
    assert mark_type(none) == "text"


def test_world_choropleth_uses_iso_numeric() -> None:
    joined, _ = with_codes(load_dataset("child_mortality"), load_dataset("country_codes"))
    spec = mortality.world_choropleth(joined, 2020).to_dict()
    assert spec["projection"]["type"] == "equalEarth"
    assert find_in_spec(spec, lambda d: d.get("feature") == "countries")
    assert find_in_spec(spec, lambda d: d.get("from", {}).get("key") == "iso_numeric")


# 8) Base helpers and layers


def test_validate_schema_casts_and_rejects() -> None:
    df = pl.DataFrame({"year": ["1931"], "v": [1]})
    out = base.validate_schema(df, {"year": pl.Int64})
    assert out.schema["year"] == pl.Int64
    with pytest.raises(ValueError, match="missing"):
        base.validate_schema(df, {"site": pl.Utf8})
    with pytest.raises(ValueError, match="cannot cast"):
        base.validate_schema(pl.DataFrame({"year": ["abc"]}), {"year": pl.Int64})


def test_as_data_accepts_frames_and_rows() -> None:
    assert base.as_data(pl.DataFrame({"a": [1]})).values == [{"a": 1}]
    assert base.as_data([{"a": 2}]).values == [{"a": 2}]


def test_apply_chart_defaults_leaves_layer_members_alone() -> None:
    enc = alt.X("a:Q")
    assert base.apply_chart_defaults(enc) is enc


def test_layer_primitives_compose() -> None:
    rows = [{"x": 1, "y": 2.0, "lo": 1.0, "hi": 3.0, "g": "a"}]
    ch = alt.layer(
        layers.layer_band(rows, x="x", y_low="lo", y_high="hi"),
        layers.layer_line(rows, x="x", y="y", color="g"),
        layers.layer_points(rows, x="x", y="y"),
        layers.layer_rule_y(2.0),
    )
    spec = ch.to_dict()
    assert [mark_type(layer) for layer in spec["layer"]] == ["area", "line", "point", "rule"]
    assert spec["layer"][0]["encoding"]["y2"]["field"] == "hi"
    bars = layers.layer_bars(rows, x="y", y="g", horizontal=True).to_dict()
    assert bars["encoding"]["y"]["sort"] == "-x"


def test_layer_line_measurement_type() -> None:
    rows = [{"year": 1931, "y": 2.0}]
    spec = layers.layer_line(rows, x="year", y="y", x_type="O").to_dict()
    assert spec["encoding"]["x"] == {"field": "year", "type": "ordinal"}
    assert spec["encoding"]["y"]["type"] == "quantitative"
    with pytest.raises(ValueError):
        layers.layer_line(rows, x="year", y="y", x_type="Z")
