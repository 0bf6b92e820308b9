"""
Shared UI helper utilities for the vizwalk Streamlit viewer.

Small pure helpers used by the sidebar and step rendering. Keeping them here keeps
app.ui.app focused on layout and makes them testable without a Streamlit runtime.

Notes:
    - No Streamlit state manipulation happens in this module.
"""

from __future__ import annotations

import polars as pl

from vizwalk.lessons import Lesson, list_lessons


def lesson_options(lessons: list[Lesson] | None = None) -> dict[str, str]:
    """Map sidebar labels to lesson ids, in walkthrough order.

    Args:
        lessons (list[Lesson] | None): Lessons to offer; the registry when None.

    Returns:
        dict[str, str]: "N. Title" -> lesson_id (N counts from 1).
    """
    items = list_lessons() if lessons is None else lessons
    return {f"{i}. {lesson.title}": lesson.lesson_id for i, lesson in enumerate(items, start=1)}


def default_option_index(options: dict[str, str], lesson_id: str | None) -> int:
    """Position of `lesson_id` among the option values; 0 when absent or None."""
    ids = list(options.values())
    if lesson_id and lesson_id in ids:
        return ids.index(lesson_id)
    return 0


def table_preview(df: pl.DataFrame, max_rows: int) -> tuple[pl.DataFrame, str | None]:
    """Head of a table for display, with a caption when rows were cut.

    Args:
        df (pl.DataFrame): Table produced by a lesson step.
        max_rows (int): Rows to show (values below 1 show one row).

    Returns:
        tuple[pl.DataFrame, str | None]: (head, "N of M rows shown" or None).
    """
    n = max(1, int(max_rows))
    if df.height <= n:
        return df, None
    return df.head(n), f"{n} of {df.height} rows shown"
