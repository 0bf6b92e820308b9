"""
Export a lesson as a static markdown page with one HTML (and optionally PNG) file per chart.

Layout
- <out_dir>/<lesson_id>/index.md
- <out_dir>/<lesson_id>/step_NN.html (NN is the 0-based step index, zero-padded)
- <out_dir>/<lesson_id>/step_NN.png when png=True
"""

from __future__ import annotations

from pathlib import Path

import polars as pl

from vizwalk.core.grammar import StepKind
from vizwalk.io.paths import lesson_out_dir
from vizwalk.viz.save import save
from vizwalk.viz.theme import enable as enable_theme

from .base import Lesson, LessonContext, StepResult, run_lesson

__all__ = ["table_markdown", "render_markdown", "export_lesson"]


def table_markdown(df: pl.DataFrame, max_rows: int) -> str:
    """Markdown table of the first `max_rows` rows, with a note when rows were cut."""
    shown = df.head(max_rows)
    with pl.Config(
        tbl_formatting="MARKDOWN",
        tbl_hide_column_data_types=True,
        tbl_hide_dataframe_shape=True,
        tbl_rows=max_rows,
        tbl_cols=-1,
        tbl_width_chars=1000,
        fmt_str_lengths=200,
    ):
        text = str(shown)
    if df.height > max_rows:
        text += f"\n\n_{max_rows} of {df.height} rows shown._"
    return text


def _chart_name(index: int) -> str:
    return f"step_{index:02d}"


def render_markdown(lesson: Lesson, results: list[StepResult], max_rows: int) -> str:
    """index.md body for built results; charts link to their step_NN.html file."""
    parts = [f"# {lesson.title}", ""]
    if lesson.summary:
        parts += [lesson.summary, ""]
    for r in results:
        if r.step.title:
            parts += [f"## {r.step.title}", ""]
        if r.step.kind is StepKind.PROSE:
            parts += [r.output, ""]
            continue
        if r.step.text:
            parts += [r.step.text, ""]
        if r.step.kind is StepKind.TABLE:
            parts += [table_markdown(r.output, max_rows), ""]
        else:
            name = _chart_name(r.index)
            parts += [f"[{r.step.title or name}]({name}.html)", ""]
    return "\n".join(parts).rstrip() + "\n"


def export_lesson(
    lesson: Lesson,
    ctx: LessonContext | None = None,
    out_dir: str | Path | None = None,
    *,
    png: bool = False,
) -> list[Path]:
    """
    Build every step and write the lesson page and chart files.

    Args:
        lesson (Lesson): Lesson to export.
        ctx (LessonContext | None): Context; a fresh one with WalkSettings.load() when None.
        out_dir (str | Path | None): Export root; settings.out_dir when None.
        png (bool): Also write PNGs (needs vl-convert-python).

    Returns:
        list[Path]: index.md first, then chart files in step order.

    Raises:
        LessonError: If a step fails to build.
        RuntimeError: If png=True and vl-convert-python is missing.
    """
    ctx = ctx or LessonContext()
    enable_theme(ctx.settings.theme)
    results = run_lesson(lesson, ctx)
    if out_dir is None:
        root = lesson_out_dir(ctx.settings, lesson.lesson_id)
    else:
        root = Path(out_dir) / lesson.lesson_id
    root.mkdir(parents=True, exist_ok=True)

    index = root / "index.md"
    index.write_text(render_markdown(lesson, results, ctx.settings.max_table_rows), encoding="utf-8")
    written = [index]
    for r in results:
        if r.step.kind is not StepKind.CHART:
            continue
        name = _chart_name(r.index)
        written += save(
            r.output,
            out_html=root / f"{name}.html",
            out_png=(root / f"{name}.png") if png else None,
        )
    return written
