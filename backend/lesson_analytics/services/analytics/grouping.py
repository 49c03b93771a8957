"""
Group-by-key counting with percentages.

Groups come back ordered by count, descending. Equal counts keep the order
in which each key was first seen in the input: dicts preserve insertion
order and ``sorted`` is stable, so no secondary key is needed.
"""

from __future__ import annotations

from typing import Callable, Hashable, Iterable, Optional, Tuple, TypeVar

from ...schemas.analytics_responses import CategoryCount, CoachBreakdown, TypeBreakdown
from ...schemas.lesson import Lesson
from .rounding import percentage

T = TypeVar("T")


def group_by(items: Iterable[T], key_fn: Callable[[T], Hashable]) -> Tuple[CategoryCount, ...]:
    counts: dict[Hashable, int] = {}
    total = 0
    for item in items:
        key = key_fn(item)
        counts[key] = counts.get(key, 0) + 1
        total += 1

    groups = [
        CategoryCount(key=key, count=count, percentage=percentage(count, total))
        for key, count in counts.items()
    ]
    return tuple(sorted(groups, key=lambda group: group.count, reverse=True))


def type_breakdown(lessons: Iterable[Lesson]) -> Tuple[TypeBreakdown, ...]:
    """Lessons per type (title); percentages are relative to the lessons given."""
    return tuple(
        TypeBreakdown(type=group.key, count=group.count, percentage=group.percentage)
        for group in group_by(lessons, lambda lesson: lesson.lesson_type)
    )


def coach_breakdown(
    lessons: Iterable[Lesson], limit: Optional[int] = None
) -> Tuple[CoachBreakdown, ...]:
    groups = group_by(lessons, lambda lesson: lesson.coach_id)
    if limit is not None:
        groups = groups[:limit]
    return tuple(
        CoachBreakdown(coach_id=group.key, lesson_count=group.count, percentage=group.percentage)
        for group in groups
    )


__all__ = ["coach_breakdown", "group_by", "type_breakdown"]
