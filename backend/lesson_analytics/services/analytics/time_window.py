"""Restrict lessons to one calendar month."""

from __future__ import annotations

from datetime import tzinfo
from typing import Iterable, Optional, Tuple

from ...schemas.lesson import Lesson
from ...utils.time_helpers import to_local


def filter_by_month(
    lessons: Iterable[Lesson],
    month: int,
    year: int,
    tz: Optional[tzinfo] = None,
) -> Tuple[Lesson, ...]:
    """
    Return the lessons whose local start falls in ``month`` (0-11) of ``year``.

    This is a calendar month on the local calendar, not a rolling 30-day
    window. Input order is preserved.
    """
    selected = []
    for lesson in lessons:
        start = to_local(lesson.start, tz)
        if start.month - 1 == month and start.year == year:
            selected.append(lesson)
    return tuple(selected)


__all__ = ["filter_by_month"]
