from __future__ import annotations

import polars as pl

from app.ui.helpers import default_option_index, lesson_options, table_preview
from vizwalk.lessons import list_lessons


def test_lesson_options_are_numbered_in_walk_order() -> None:
    options = lesson_options()
    labels = list(options)
    assert labels[0].startswith("1. ")
    assert list(options.values()) == [lesson.lesson_id for lesson in list_lessons()]
    assert len(labels) == len(set(labels))


def test_default_option_index() -> None:
    options = lesson_options()
    assert default_option_index(options, "barley") == 3
    assert default_option_index(options, None) == 0
    assert default_option_index(options, "unknown") == 0


def test_table_preview_truncates_with_note() -> None:
    df = pl.DataFrame({"a": list(range(10))})
    head, note = table_preview(df, 4)
    assert head.height == 4
    assert note == "4 of 10 rows shown"

    full, none = table_preview(df, 50)
    assert full.height == 10 and none is None

    one, note = table_preview(df, 0)
    assert one.height == 1
    assert note == "1 of 10 rows shown"
