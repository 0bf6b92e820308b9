"""Lesson: the grammar of graphics, building one chart a component at a time."""

from __future__ import annotations

from collections.abc import Callable

import altair as alt

from vizwalk.core.grammar import DatasetName
from vizwalk.viz import grammar

from .base import Lesson, LessonContext, Step, chart, prose, table
from .geyser import label_eruptions


def _stage(i: int) -> Callable[[LessonContext], alt.TopLevelMixin]:
    def build(ctx: LessonContext) -> alt.TopLevelMixin:
        df = label_eruptions(ctx.dataset(DatasetName.GEYSER))
        return grammar.build_up(df, x="eruptions", y="waiting", color="kind")[i][1]

    return build


_STAGES = (
    "data + geometric object",
    "aesthetic mapping",
    "color mapping",
    "scale",
    "statistic",
    "theme",
)

_steps: list[Step] = [
    prose(
        "The grammar of graphics describes any statistical chart as a set of independent "
        "components. Altair's API follows it closely: a Chart holds data, a mark is the "
        "geometric object, and encode() declares aesthetic mappings.",
        title="Components",
    ),
    table("Terms and their altair constructs", lambda ctx: grammar.grammar_terms()),
]
_steps += [chart(f"Stage {i + 1}: {name}", _stage(i)) for i, name in enumerate(_STAGES)]

LESSON = Lesson(
    lesson_id="grammar",
    title="The grammar of graphics",
    summary="Data, mappings, marks, statistics, scales, facets, and themes, added one at a time.",
    datasets=(DatasetName.GEYSER,),
    steps=tuple(_steps),
)
