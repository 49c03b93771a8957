"""
Weekly performance within a month.

Weeks are fixed 7-day slices of the month counted from day 1 (days 1-7 are
week 1, 8-14 week 2, ... 29-31 week 5). They do not follow ISO weeks, so a
week can start on any weekday.
"""

from __future__ import annotations

from collections import defaultdict
from datetime import tzinfo
import math
from typing import Iterable, Optional, Tuple

from ...core.constants import DAYS_PER_WEEK_BUCKET
from ...schemas.analytics_responses import WeekBucket
from ...schemas.lesson import Lesson
from ...utils.time_helpers import to_local
from .formatting import week_label


def week_of_month(day: int) -> int:
    return math.ceil(day / DAYS_PER_WEEK_BUCKET)


def build_weekly(lessons: Iterable[Lesson], tz: Optional[tzinfo] = None) -> Tuple[WeekBucket, ...]:
    """Per-week totals; only weeks with lessons appear, in ascending week order."""
    lesson_counts: dict[int, int] = defaultdict(int)
    registrations: dict[int, int] = defaultdict(int)
    revenue: dict[int, float] = defaultdict(float)

    for lesson in lessons:
        week = week_of_month(to_local(lesson.start, tz).day)
        lesson_counts[week] += 1
        registrations[week] += lesson.registered_count
        revenue[week] += lesson.revenue

    return tuple(
        WeekBucket(
            week=week,
            lessons=lesson_counts[week],
            registrations=registrations[week],
            revenue=revenue[week],
            date_range=week_label(week),
        )
        for week in sorted(lesson_counts)
    )


__all__ = ["build_weekly", "week_of_month"]
