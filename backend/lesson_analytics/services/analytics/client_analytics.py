"""
Client dashboard analytics: a client's own lesson habits for one month.
"""

from __future__ import annotations

from datetime import tzinfo
import logging
from typing import Iterable, Optional, Sequence, Tuple

from ...core.constants import DEFAULT_TOP_COACHES_LIMIT
from ...schemas.analytics_responses import ClientAnalyticsResult, CoachDetail
from ...schemas.lesson import CoachId, Lesson
from .grouping import coach_breakdown, type_breakdown
from .hourly import build_hourly
from .time_window import filter_by_month

logger = logging.getLogger(__name__)


def build_coach_details(lessons: Sequence[Lesson]) -> Tuple[CoachDetail, ...]:
    """
    Lesson types taken with each coach.

    Type percentages are relative to the client's lessons with that coach.
    Coaches are ordered by lesson count, busiest first; ties keep the order
    in which coaches first appear.
    """
    by_coach: dict[CoachId, list[Lesson]] = {}
    for lesson in lessons:
        by_coach.setdefault(lesson.coach_id, []).append(lesson)

    details = [
        CoachDetail(
            coach_id=coach_id,
            total_lessons=len(coach_lessons),
            lessons_by_type=type_breakdown(coach_lessons),
        )
        for coach_id, coach_lessons in by_coach.items()
    ]
    return tuple(sorted(details, key=lambda detail: detail.total_lessons, reverse=True))


def calculate_client_analytics(
    lessons: Iterable[Lesson],
    month: int,
    year: int,
    tz: Optional[tzinfo] = None,
    top_coaches_limit: int = DEFAULT_TOP_COACHES_LIMIT,
) -> ClientAnalyticsResult:
    """Aggregate the lessons a client attended in ``month`` (0-11) of ``year``."""
    month_lessons = filter_by_month(lessons, month, year, tz)
    logger.debug(f"Client analytics for {month + 1}/{year}: {len(month_lessons)} lessons in window")

    lessons_by_type = type_breakdown(month_lessons)
    top_coaches = coach_breakdown(month_lessons, limit=top_coaches_limit)
    return ClientAnalyticsResult(
        total_lessons=len(month_lessons),
        lessons_by_type=lessons_by_type,
        hours_data=build_hourly(month_lessons, tz),
        most_popular_type=lessons_by_type[0].type if lessons_by_type else None,
        most_active_coach=top_coaches[0] if top_coaches else None,
        top_coaches=top_coaches,
        coach_details=build_coach_details(month_lessons),
    )


__all__ = ["build_coach_details", "calculate_client_analytics"]
