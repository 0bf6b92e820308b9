"""Lesson registry in walkthrough order."""

from __future__ import annotations

from vizwalk.core.errors import LessonError

from . import barley, cancer, geyser, grammar, haireye, mortality, perception, unemployment
from .base import Lesson

__all__ = ["LESSONS", "list_lessons", "get_lesson"]

LESSONS: tuple[Lesson, ...] = (
    perception.LESSON,
    grammar.LESSON,
    geyser.LESSON,
    barley.LESSON,
    haireye.LESSON,
    cancer.LESSON,
    unemployment.LESSON,
    mortality.LESSON,
)


def list_lessons() -> list[Lesson]:
    """All lessons, in the order they are meant to be read."""
    return list(LESSONS)


def get_lesson(lesson_id: str) -> Lesson:
    """
    Look up a lesson by id.

    Raises:
        LessonError: If no lesson has that id; the message lists the known ids.
    """
    for lesson in LESSONS:
        if lesson.lesson_id == lesson_id:
            return lesson
    known = ", ".join(lesson.lesson_id for lesson in LESSONS)
    raise LessonError(f"unknown lesson {lesson_id!r}; known lessons: {known}")
