from __future__ import annotations

import pytest

from vizwalk.core.errors import SchemaError
from vizwalk.core.grammar import DatasetName, is_lower_snake
from vizwalk.core.tables import DatasetDescriptor, get_dataset, list_datasets


def test_descriptors_contract() -> None:
    for desc in list_datasets():
        for col in desc.columns:
            assert is_lower_snake(col), f"column {col!r} not lower_snake for {desc.name.value}"
        assert set(desc.required).issubset(desc.columns), desc.name.value
        assert set(desc.required).isdisjoint(desc.nullable), desc.name.value
        assert set(desc.columns.values()) <= {"i64", "f64", "str"}, desc.name.value
        assert desc.filename


def test_get_dataset_roundtrip_and_order() -> None:
    assert [d.name for d in list_datasets()] == list(DatasetName)
    for name in DatasetName:
        assert get_dataset(name.value).name is name


def test_suppressed_cancer_cells_are_nullable() -> None:
    desc = get_dataset("cancer_incidence")
    assert "count" in desc.nullable
    assert "age_adjusted_rate" in desc.nullable
    assert "cancer_site" in desc.required


def test_descriptor_rejects_bad_definitions() -> None:
    with pytest.raises(SchemaError, match="lower_snake"):
        DatasetDescriptor(DatasetName.GEYSER, "g.csv", {"Eruptions": "f64"}, ["Eruptions"])
    with pytest.raises(SchemaError, match="dtypes"):
        DatasetDescriptor(DatasetName.GEYSER, "g.csv", {"eruptions": "float"}, ["eruptions"])
    with pytest.raises(SchemaError, match="subsets"):
        DatasetDescriptor(DatasetName.GEYSER, "g.csv", {"eruptions": "f64"}, ["waiting"])
    with pytest.raises(SchemaError, match="overlap"):
        DatasetDescriptor(
            DatasetName.GEYSER, "g.csv", {"eruptions": "f64"}, ["eruptions"], nullable=["eruptions"]
        )
