"""
Money and rate figures for the coach dashboard.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple

from ...schemas.analytics_responses import LessonTypeMetric
from ...schemas.lesson import Lesson
from .rounding import percentage, round_half_up


@dataclass
class _TypeTotals:
    lesson_count: int = 0
    registrations: int = 0
    revenue: float = 0.0
    capacity: int = 0


def total_revenue(lessons: Iterable[Lesson]) -> float:
    """Sum of registrations x price; not rounded."""
    return sum((lesson.revenue for lesson in lessons), 0.0)


def registration_rate(lessons: Sequence[Lesson]) -> int:
    """Registrations as a percentage of declared capacity; 0 when there is no capacity."""
    registrations = sum(lesson.registered_count for lesson in lessons)
    capacity = sum(lesson.capacity_limit for lesson in lessons)
    return percentage(registrations, capacity)


def build_lesson_type_metrics(lessons: Iterable[Lesson]) -> Tuple[LessonTypeMetric, ...]:
    """Per-type counts, revenue, average paid price and fill rate, highest revenue first."""
    totals: dict[str, _TypeTotals] = {}
    for lesson in lessons:
        entry = totals.setdefault(lesson.lesson_type, _TypeTotals())
        entry.lesson_count += 1
        entry.registrations += lesson.registered_count
        entry.revenue += lesson.revenue
        entry.capacity += lesson.capacity_limit

    metrics = [
        LessonTypeMetric(
            type=lesson_type,
            lesson_count=entry.lesson_count,
            registrations=entry.registrations,
            revenue=entry.revenue,
            average_price=(
                round_half_up(entry.revenue / entry.registrations) if entry.registrations > 0 else 0
            ),
            occupancy_rate=percentage(entry.registrations, entry.capacity),
        )
        for lesson_type, entry in totals.items()
    ]
    return tuple(sorted(metrics, key=lambda metric: metric.revenue, reverse=True))


__all__ = ["build_lesson_type_metrics", "registration_rate", "total_revenue"]
