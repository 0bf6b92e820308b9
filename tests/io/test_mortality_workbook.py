from __future__ import annotations

from pathlib import Path

import polars as pl
import pytest
from openpyxl import Workbook

from vizwalk.io.read import read_child_mortality


def _write_workbook(path: Path, *, sheet: str = "U5MR") -> Path:
    wb = Workbook()
    ws = wb.active
    ws.title = sheet
    # Year headers are numeric cells, the way statistical offices export them
    ws.append(["Country Name", 1990, 2000, 2010])
    ws.append(["Kenya", 97.0, 83.7, 73.4])
    ws.append(["Kosovo", "..", 28.1, 21.8])
    ws.append(["Niger", 184.9, None, 145.8])
    wb.save(path)
    return path


def test_workbook_is_read_long_with_missing_cells_dropped(tmp_path: Path) -> None:
    p = _write_workbook(tmp_path / "child_mortality.xlsx")
    df = read_child_mortality(path=p)
    assert df.schema["year"] == pl.Int64
    assert df.schema["deaths_per_1000"] == pl.Float64
    assert df.rows() == [
        ("Kenya", 1990, 97.0),
        ("Kenya", 2000, 83.7),
        ("Kenya", 2010, 73.4),
        ("Kosovo", 2000, 28.1),
        ("Kosovo", 2010, 21.8),
        ("Niger", 1990, 184.9),
        ("Niger", 2010, 145.8),
    ]


def test_workbook_named_sheet(tmp_path: Path) -> None:
    p = _write_workbook(tmp_path / "child_mortality.xlsx", sheet="Under five")
    df = read_child_mortality(path=p, sheet_name="Under five")
    assert sorted(df["country"].unique().to_list()) == ["Kenya", "Kosovo", "Niger"]


@pytest.mark.parametrize("header", ["2000", "2000.0"])
def test_year_headers_with_float_text(tmp_path: Path, header: str) -> None:
    p = tmp_path / "u5mr.csv"
    p.write_text(f"country,{header}\nChad,203.3\n")
    assert read_child_mortality(path=p).rows() == [("Chad", 2000, 203.3)]
