"""
Hour-of-day distribution of lessons and Top-N hour selection.
"""

from __future__ import annotations

from datetime import tzinfo
from typing import Iterable, Literal, Optional, Sequence, Tuple

from ...core.constants import DEFAULT_TOP_HOURS_LIMIT, HOURS_PER_DAY
from ...schemas.analytics_responses import HourBucket
from ...schemas.lesson import Lesson
from ...utils.time_helpers import to_local

HourMetric = Literal["lesson_count", "registrations", "capacity"]


def build_hourly(lessons: Iterable[Lesson], tz: Optional[tzinfo] = None) -> Tuple[HourBucket, ...]:
    """
    Bucket lessons by local start hour.

    Always returns 24 buckets in ascending hour order; hours without lessons
    are zero-filled.
    """
    lesson_counts = [0] * HOURS_PER_DAY
    registrations = [0] * HOURS_PER_DAY
    capacity = [0] * HOURS_PER_DAY

    for lesson in lessons:
        hour = to_local(lesson.start, tz).hour
        lesson_counts[hour] += 1
        registrations[hour] += lesson.registered_count
        capacity[hour] += lesson.capacity_limit

    return tuple(
        HourBucket(
            hour=hour,
            lesson_count=lesson_counts[hour],
            registrations=registrations[hour],
            capacity=capacity[hour],
        )
        for hour in range(HOURS_PER_DAY)
    )


def top_n(
    buckets: Sequence[HourBucket],
    metric: HourMetric,
    limit: int = DEFAULT_TOP_HOURS_LIMIT,
) -> Tuple[HourBucket, ...]:
    """Highest buckets by ``metric``, zero buckets dropped, ties kept in hour order."""
    ranked = sorted(
        (bucket for bucket in buckets if getattr(bucket, metric) > 0),
        key=lambda bucket: getattr(bucket, metric),
        reverse=True,
    )
    return tuple(ranked[: max(limit, 0)])


def get_top_hours(
    buckets: Sequence[HourBucket], limit: int = DEFAULT_TOP_HOURS_LIMIT
) -> Tuple[HourBucket, ...]:
    """Coach ranking: hours with the most registrations."""
    return top_n(buckets, "registrations", limit)


def get_top_hours_for_client(
    buckets: Sequence[HourBucket], limit: int = DEFAULT_TOP_HOURS_LIMIT
) -> Tuple[HourBucket, ...]:
    """Client ranking: hours the client attended most often."""
    return top_n(buckets, "lesson_count", limit)


__all__ = ["HourMetric", "build_hourly", "get_top_hours", "get_top_hours_for_client", "top_n"]
