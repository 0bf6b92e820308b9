from __future__ import annotations

import polars as pl
import pytest

from vizwalk.core.errors import LessonError
from vizwalk.core.grammar import StepKind
from vizwalk.io.config import WalkSettings
from vizwalk.lessons import LessonContext, export_lesson, get_lesson, list_lessons, run_lesson
from vizwalk.lessons.export import table_markdown

ORDER = [
    "perception",
    "grammar",
    "geyser",
    "barley",
    "hair_eye_color",
    "cancer_incidence",
    "unemployment",
    "child_mortality",
]


def test_registry_order_and_lookup() -> None:
    assert [lesson.lesson_id for lesson in list_lessons()] == ORDER
    assert get_lesson("barley").title
    with pytest.raises(LessonError, match="known lessons: perception, grammar"):
        get_lesson("nope")


@pytest.mark.parametrize("lesson_id", ORDER)
def test_every_lesson_builds_on_bundled_data(lesson_id: str) -> None:
    lesson = get_lesson(lesson_id)
    results = run_lesson(lesson, LessonContext(settings=WalkSettings()))
    assert len(results) == len(lesson.steps)
    for r in results:
        if r.step.kind is StepKind.CHART:
            spec = r.output.to_dict()
            assert "$schema" in spec
        elif r.step.kind is StepKind.TABLE:
            assert isinstance(r.output, pl.DataFrame)
            assert r.output.width > 0


def test_table_markdown_notes_truncation() -> None:
    df = pl.DataFrame({"a": list(range(12)), "b": ["x"] * 12})
    text = table_markdown(df, 5)
    assert text.splitlines()[0].startswith("|")
    assert "_5 of 12 rows shown._" in text
    assert "rows shown" not in table_markdown(df.head(3), 5)


def test_export_writes_index_and_chart_files(tmp_path) -> None:
    lesson = get_lesson("geyser")
    ctx = LessonContext(settings=WalkSettings(out_dir=str(tmp_path / "unused")))
    written = export_lesson(lesson, ctx, tmp_path)

    root = tmp_path / "geyser"
    assert written[0] == root / "index.md"
    chart_files = [p.name for p in written[1:]]
    assert chart_files == [f"step_{i:02d}.html" for i, _ in lesson.charts()]
    assert all(p.exists() for p in written)

    index = (root / "index.md").read_text(encoding="utf-8")
    assert index.startswith(f"# {lesson.title}")
    for name in chart_files:
        assert f"({name})" in index
    assert not (tmp_path / "unused").exists()


def test_export_defaults_to_settings_out_dir(tmp_path) -> None:
    ctx = LessonContext(settings=WalkSettings(out_dir=str(tmp_path)))
    written = export_lesson(get_lesson("perception"), ctx)
    assert written[0] == tmp_path / "perception" / "index.md"


def test_chart_size_settings_reach_lesson_charts() -> None:
    ctx = LessonContext(settings=WalkSettings(chart_width=900, chart_height=250))
    assert ctx.chart_size() == {"width": 900, "height": 250}
    results = {r.step.title: r.output for r in run_lesson(get_lesson("geyser"), ctx)}
    for title in ("Histogram", "Kernel density", "Waiting time vs duration"):
        spec = results[title].to_dict()
        assert (spec["width"], spec["height"]) == (900, 250)
    state = run_lesson(get_lesson("unemployment"), ctx)[-1].output.to_dict()
    assert state["width"] == 900
