from __future__ import annotations

import pytest

from vizwalk.core.errors import GrammarError
from vizwalk.core.grammar import (
    DatasetName,
    EncodingType,
    StepKind,
    assert_lower_snake,
    dataset_name_from_value,
    encoding_shorthand,
    ensure_all_enum_values_lower_snake,
    is_lower_snake,
    step_kind_from_value,
    to_lower_snake,
)


def test_all_enum_values_are_lower_snake() -> None:
    ensure_all_enum_values_lower_snake([DatasetName, StepKind])


@pytest.mark.parametrize(
    ("header", "expected"),
    [
        ("Age-Adjusted Rate", "age_adjusted_rate"),
        ("Cancer Site", "cancer_site"),
        ("  County Name/State Abbreviation ", "county_name_state_abbreviation"),
        ("Unemployment Rate (%)", "unemployment_rate"),
        ("laborForce", "labor_force"),
        ("LAUS Code", "laus_code"),
    ],
)
def test_to_lower_snake_normalizes_display_headers(header: str, expected: str) -> None:
    assert to_lower_snake(header) == expected
    assert is_lower_snake(to_lower_snake(header))


def test_to_lower_snake_rejects_symbol_only_header() -> None:
    with pytest.raises(GrammarError):
        to_lower_snake(" (%) ")


def test_assert_lower_snake_raises_grammar_error() -> None:
    assert_lower_snake("hair_eye_color")
    with pytest.raises(GrammarError, match="lower_snake"):
        assert_lower_snake("HairEye", "lesson_id")


def test_dataset_and_step_parsing() -> None:
    assert dataset_name_from_value(" Hair-Eye_Color ") is DatasetName.HAIR_EYE_COLOR
    assert dataset_name_from_value(DatasetName.BARLEY) is DatasetName.BARLEY
    assert step_kind_from_value("CHART") is StepKind.CHART
    with pytest.raises(GrammarError, match="dataset must be one of"):
        dataset_name_from_value("iris")
    with pytest.raises(GrammarError):
        step_kind_from_value("video")


def test_encoding_shorthand() -> None:
    assert encoding_shorthand("waiting", EncodingType.QUANTITATIVE) == "waiting:Q"
    assert encoding_shorthand("site", "N") == "site:N"
    with pytest.raises(ValueError):
        encoding_shorthand("site", "X")
