"""
Coach dashboard analytics.

``calculate_coach_analytics`` is a pure function of its arguments: the same
lessons, month and year always give an equal result, and nothing is cached
or shared between calls.
"""

from __future__ import annotations

from datetime import tzinfo
import logging
from typing import Iterable, Optional

from ...schemas.analytics_responses import CoachAnalyticsResult
from ...schemas.lesson import Lesson
from .hourly import build_hourly
from .occupancy import build_occupancy_metrics
from .revenue import build_lesson_type_metrics, registration_rate, total_revenue
from .time_window import filter_by_month
from .weekly import build_weekly

logger = logging.getLogger(__name__)


def calculate_coach_analytics(
    lessons: Iterable[Lesson],
    month: int,
    year: int,
    tz: Optional[tzinfo] = None,
) -> CoachAnalyticsResult:
    """
    Aggregate a coach's lessons for one calendar month.

    Args:
        lessons: The coach's lessons, annotated with ``registered_count``.
        month: Zero-based month (0 = January).
        year: Four-digit year.
        tz: Timezone defining the local calendar for aware start times.

    Returns:
        CoachAnalyticsResult; an empty month yields zeroed figures.
    """
    month_lessons = filter_by_month(lessons, month, year, tz)
    logger.debug(f"Coach analytics for {month + 1}/{year}: {len(month_lessons)} lessons in window")

    hours_data = build_hourly(month_lessons, tz)
    return CoachAnalyticsResult(
        total_lessons=len(month_lessons),
        registration_rate=registration_rate(month_lessons),
        total_revenue=total_revenue(month_lessons),
        registered_count=sum(lesson.registered_count for lesson in month_lessons),
        hours_data=hours_data,
        lesson_type_metrics=build_lesson_type_metrics(month_lessons),
        weekly_performance=build_weekly(month_lessons, tz),
        occupancy_metrics=build_occupancy_metrics(month_lessons, hours_data),
    )


__all__ = ["calculate_coach_analytics"]
