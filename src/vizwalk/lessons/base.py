"""
Lesson and step models, the lesson execution context, and the step runner.

A lesson is an ordered list of steps. Prose steps carry markdown text; table and chart steps
carry a `build` callable that receives a LessonContext and returns a polars frame or an altair
chart. Building is lazy: datasets are loaded (once per context) only when a step asks for them.

Notes
- Step and Lesson are frozen pydantic models; lesson ids are lower_snake.
- A failing build surfaces as vizwalk.core.errors.LessonError naming the lesson and the
  0-based step index; the original exception is chained.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any

import polars as pl
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from vizwalk.core.errors import LessonError
from vizwalk.core.grammar import (
    DatasetName,
    StepKind,
    assert_lower_snake,
    dataset_name_from_value,
    step_kind_from_value,
)
from vizwalk.io.config import WalkSettings
from vizwalk.io.read import load_dataset

__all__ = [
    "Step",
    "Lesson",
    "LessonContext",
    "StepResult",
    "prose",
    "table",
    "chart",
    "run_step",
    "iter_results",
    "run_lesson",
]

Builder = Callable[["LessonContext"], Any]


class Step(BaseModel):
    """
    One unit of a lesson.

    Attributes:
        kind (StepKind): prose | table | chart.
        title (str): Short heading shown above the step.
        text (str): Markdown; required for prose, optional caption otherwise.
        build (Callable | None): `build(ctx)` returning a pl.DataFrame (table) or an altair
            chart (chart). Must be None for prose.
    """

    kind: StepKind
    title: str = ""
    text: str = ""
    build: Callable[..., Any] | None = None

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator("kind", mode="before")
    @classmethod
    def _normalize_kind(cls, v: Any) -> StepKind:
        return step_kind_from_value(v)

    @model_validator(mode="after")
    def _check_payload(self) -> Step:
        if self.kind is StepKind.PROSE:
            if not self.text.strip():
                raise ValueError("prose steps need text")
            if self.build is not None:
                raise ValueError("prose steps take no build callable")
        elif self.build is None:
            raise ValueError(f"{self.kind.value} steps need a build callable")
        return self


class Lesson(BaseModel):
    """
    A titled, ordered walkthrough over one or more datasets.

    Attributes:
        lesson_id (str): lower_snake identifier used by the CLI, app, and export paths.
        title (str): Display title.
        summary (str): One-paragraph summary.
        datasets (tuple[DatasetName, ...]): Datasets the steps read.
        steps (tuple[Step, ...]): At least one step.
    """

    lesson_id: str
    title: str
    summary: str = ""
    datasets: tuple[DatasetName, ...] = ()
    steps: tuple[Step, ...] = Field(min_length=1)

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator("lesson_id")
    @classmethod
    def _check_id(cls, v: str) -> str:
        assert_lower_snake(v, "lesson_id")
        return v

    @field_validator("datasets", mode="before")
    @classmethod
    def _normalize_datasets(cls, v: Any) -> tuple[DatasetName, ...]:
        return tuple(dataset_name_from_value(x) for x in v)

    def charts(self) -> list[tuple[int, Step]]:
        """(index, step) for each chart step."""
        return [(i, s) for i, s in enumerate(self.steps) if s.kind is StepKind.CHART]


def prose(text: str, title: str = "") -> Step:
    return Step(kind=StepKind.PROSE, title=title, text=text)


def table(title: str, build: Builder, text: str = "") -> Step:
    return Step(kind=StepKind.TABLE, title=title, text=text, build=build)


def chart(title: str, build: Builder, text: str = "") -> Step:
    return Step(kind=StepKind.CHART, title=title, text=text, build=build)


@dataclass
class LessonContext:
    """
    What a step's build callable receives.

    Attributes:
        settings (WalkSettings): Runtime settings (data directory, chart size, topojson URL).
        loader (Callable[[DatasetName, WalkSettings], pl.DataFrame]): Dataset loader; the app
            swaps in its Streamlit-cached loader.
    """

    settings: WalkSettings = field(default_factory=WalkSettings.load)
    loader: Callable[[DatasetName, WalkSettings], pl.DataFrame] = load_dataset
    _cache: dict[DatasetName, pl.DataFrame] = field(default_factory=dict, init=False, repr=False)

    def dataset(self, name: DatasetName | str) -> pl.DataFrame:
        """Cleaned dataset by name, loaded at most once per context."""
        key = dataset_name_from_value(name)
        if key not in self._cache:
            self._cache[key] = self.loader(key, self.settings)
        return self._cache[key]

    def chart_size(self) -> dict[str, int]:
        """width/height keyword arguments for chart builders, from the settings."""
        return {"width": self.settings.chart_width, "height": self.settings.chart_height}


@dataclass(frozen=True)
class StepResult:
    """A built step: prose text, a polars frame, or an altair chart."""

    index: int
    step: Step
    output: Any


def _looks_like_chart(obj: Any) -> bool:
    return callable(getattr(obj, "to_dict", None)) and callable(getattr(obj, "to_html", None))


def run_step(lesson: Lesson, index: int, ctx: LessonContext) -> StepResult:
    """
    Build one step.

    Raises:
        LessonError: If the index is out of range, the build raises, or it returns the wrong
            kind of object.
    """
    if not 0 <= index < len(lesson.steps):
        raise LessonError(f"lesson {lesson.lesson_id!r} has no step {index}")
    step = lesson.steps[index]
    if step.kind is StepKind.PROSE:
        return StepResult(index, step, step.text)
    assert step.build is not None
    try:
        out = step.build(ctx)
    except Exception as exc:
        raise LessonError(
            f"lesson {lesson.lesson_id!r} step {index} ({step.title or step.kind.value}) failed: {exc}"
        ) from exc
    if step.kind is StepKind.TABLE and not isinstance(out, pl.DataFrame):
        raise LessonError(
            f"lesson {lesson.lesson_id!r} step {index} returned {type(out).__name__}, expected a DataFrame"
        )
    if step.kind is StepKind.CHART and not _looks_like_chart(out):
        raise LessonError(
            f"lesson {lesson.lesson_id!r} step {index} returned {type(out).__name__}, expected a chart"
        )
    return StepResult(index, step, out)


def iter_results(lesson: Lesson, ctx: LessonContext) -> Iterator[StepResult | LessonError]:
    """Yield each step's result, or its LessonError, without stopping at failures."""
    for i in range(len(lesson.steps)):
        try:
            yield run_step(lesson, i, ctx)
        except LessonError as exc:
            yield exc


def run_lesson(lesson: Lesson, ctx: LessonContext | None = None) -> list[StepResult]:
    """
    Build every step in order.

    Raises:
        LessonError: On the first failing step.
    """
    ctx = ctx or LessonContext()
    return [run_step(lesson, i, ctx) for i in range(len(lesson.steps))]
