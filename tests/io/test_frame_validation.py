from __future__ import annotations

import polars as pl
import pytest

from vizwalk.core.grammar import DatasetName
from vizwalk.io.errors import IoSchemaError
from vizwalk.io.validate import validate_frame_for_dataset


def test_casts_and_reorders_to_descriptor() -> None:
    df = pl.DataFrame({"waiting": [79.0, 54.0], "eruptions": ["3.6", "1.8"]})
    out = validate_frame_for_dataset(df, DatasetName.GEYSER)
    assert out.columns == ["eruptions", "waiting"]
    assert out.schema["eruptions"] == pl.Float64
    assert out.schema["waiting"] == pl.Int64


def test_missing_required_column_raises() -> None:
    with pytest.raises(IoSchemaError, match="missing required columns"):
        validate_frame_for_dataset(pl.DataFrame({"eruptions": [3.6]}), "geyser")


def test_unparseable_required_values_become_nulls_and_fail() -> None:
    df = pl.DataFrame({"eruptions": ["abc"], "waiting": [70]})
    with pytest.raises(IoSchemaError, match="contain nulls"):
        validate_frame_for_dataset(df, "geyser")


def test_extra_columns_only_rejected_when_strict() -> None:
    df = pl.DataFrame({"eruptions": [3.6], "waiting": [79], "note": ["x"]})
    with pytest.raises(IoSchemaError, match="unexpected columns"):
        validate_frame_for_dataset(df, "geyser")
    out = validate_frame_for_dataset(df, "geyser", strict=False)
    assert out.columns == ["eruptions", "waiting", "note"]
