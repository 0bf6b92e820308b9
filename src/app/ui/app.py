"""
Streamlit viewer for the vizwalk lessons.

Responsibilities:
    - Configure the Streamlit page.
    - Render the sidebar (lesson picker, theme, table rows, cache preferences).
    - Build the selected lesson step by step through a LessonContext whose loader is
      Streamlit-cached (app.data).
    - Render each step: prose as markdown, tables as dataframes, charts with st.altair_chart.

Notes:
    - A step that fails shows an error in place and the remaining steps still render.
    - Charts carry the vizwalk theme, so Streamlit's own chart theme is disabled (theme=None).
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any, cast

import streamlit as st

from app.data import CacheConfig, cached_loader
from vizwalk.core.errors import LessonError
from vizwalk.core.grammar import StepKind
from vizwalk.io.config import WalkSettings
from vizwalk.lessons import LessonContext, StepResult, get_lesson, iter_results
from vizwalk.viz import theme as walk_theme

from .helpers import default_option_index, lesson_options, table_preview


def _render_sidebar(
    settings: WalkSettings, default_lesson: str | None
) -> tuple[str, WalkSettings, CacheConfig]:
    """Render sidebar controls and return (lesson_id, settings, cache config)."""
    if "theme_choice" not in st.session_state:
        st.session_state["theme_choice"] = settings.theme
    if "cache_ttl" not in st.session_state:
        st.session_state["cache_ttl"] = 600
    if "cache_persist" not in st.session_state:
        st.session_state["cache_persist"] = False

    st.sidebar.markdown("### vizwalk")
    options = lesson_options()
    label = st.sidebar.selectbox(
        "Lesson",
        options=list(options),
        index=default_option_index(options, default_lesson),
        key="lesson_selector",
    )
    themes = walk_theme.available()
    theme_choice = st.sidebar.selectbox(
        "Theme",
        options=themes,
        index=themes.index(st.session_state["theme_choice"])
        if st.session_state["theme_choice"] in themes
        else 0,
        key="theme_choice_sidebar",
    )
    st.session_state["theme_choice"] = theme_choice
    rows = st.sidebar.number_input(
        "Table rows",
        min_value=1,
        value=int(settings.max_table_rows),
        step=5,
        key="table_rows",
    )

    with st.sidebar.expander("Cache", expanded=False):
        ttl = st.number_input(
            "Cache TTL (seconds)",
            min_value=0,
            value=int(st.session_state["cache_ttl"]),
            step=60,
            key="cache_ttl_input",
        )
        persist = st.checkbox(
            "Persist cache to disk",
            value=bool(st.session_state["cache_persist"]),
            key="cache_persist_input",
        )
        st.session_state["cache_ttl"] = int(ttl)
        st.session_state["cache_persist"] = bool(persist)

    cfg = CacheConfig(ttl=int(ttl) or None, persist=bool(persist))
    chosen = replace(settings, theme=theme_choice, max_table_rows=int(rows))
    return options[label], chosen, cfg


def _render_step(result: StepResult, max_rows: int) -> None:
    step = result.step
    if step.title:
        st.subheader(step.title)
    if step.kind is StepKind.PROSE:
        st.markdown(result.output)
        return
    if step.text:
        st.caption(step.text)
    if step.kind is StepKind.TABLE:
        head, note = table_preview(result.output, max_rows)
        st.dataframe(head, use_container_width=True, hide_index=True)
        if note:
            st.caption(note)
    else:
        st.altair_chart(cast(Any, result.output), theme=None, use_container_width=False)


def streamlit_app(default_lesson: str | None = None, default_data_dir: str | None = None) -> None:
    """Render the vizwalk lesson viewer.

    Args:
        default_lesson (str | None): Lesson id preselected in the sidebar.
        default_data_dir (str | None): Overrides WalkSettings.data_dir for this session.
    """
    st.set_page_config(page_title="vizwalk", layout="wide")

    settings = WalkSettings.load()
    if default_data_dir:
        settings = replace(settings, data_dir=default_data_dir)
    lesson_id, settings, cache_cfg = _render_sidebar(settings, default_lesson)
    walk_theme.enable(settings.theme)

    try:
        lesson = get_lesson(lesson_id)
    except LessonError as e:
        st.error(str(e))
        return

    st.title(lesson.title)
    if lesson.summary:
        st.markdown(lesson.summary)

    ctx = LessonContext(settings=settings, loader=cached_loader(cache_cfg))
    for item in iter_results(lesson, ctx):
        if isinstance(item, LessonError):
            st.error(str(item))
            continue
        _render_step(item, settings.max_table_rows)
