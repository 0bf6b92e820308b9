"""
vizwalk.lessons — The walkthrough: lessons, their dataset steps, and export.

## Responsibilities
- Define each lesson as an ordered list of prose, table, and chart steps.
- Hold the dataset-specific wrangling each lesson narrates (e.g., barley.year_difference).
- Build lessons lazily against a LessonContext and export them as markdown + HTML.

## Public API
- Lesson, Step, LessonContext, StepResult — models and execution context.
- run_lesson, run_step, iter_results — build steps.
- list_lessons, get_lesson — registry in walkthrough order.
- export_lesson — write <out_dir>/<lesson_id>/index.md and chart files.

## Import DAG discipline
- Depends on: vizwalk.core, vizwalk.io, vizwalk.wrangle, vizwalk.viz.
- Must not import the Streamlit app.

## Examples
```python
from vizwalk.lessons import LessonContext, get_lesson, run_lesson

results = run_lesson(get_lesson("geyser"), LessonContext())  # doctest: +SKIP
[r.step.kind.value for r in results][:3]  # doctest: +SKIP
```
"""

from __future__ import annotations

from .base import Lesson, LessonContext, Step, StepResult, iter_results, run_lesson, run_step
from .export import export_lesson
from .registry import get_lesson, list_lessons

__all__ = [
    "Lesson",
    "LessonContext",
    "Step",
    "StepResult",
    "export_lesson",
    "get_lesson",
    "iter_results",
    "list_lessons",
    "run_lesson",
    "run_step",
]
