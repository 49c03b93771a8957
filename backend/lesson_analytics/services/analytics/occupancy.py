"""
Occupancy insights for the coach dashboard.

Two views are combined here:

* per-lesson fill rates (average/min/max) across every lesson in the window,
* per-hour fill rates across "comparable" hours, i.e. hours that have at
  least one lesson and a non-zero declared capacity, used to name the most
  and least filled hours.

All fill rates are capped at 100.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from ...core.constants import EMPTY_MAX_OCCUPANCY
from ...schemas.analytics_responses import HourBucket, HourOccupancyInsight, OccupancyInsight
from ...schemas.lesson import Lesson
from .rounding import percentage, ratio_percent, round_half_up


def hour_occupancy_insights(buckets: Sequence[HourBucket]) -> HourOccupancyInsight:
    comparable = [
        (bucket.hour, percentage(bucket.registrations, bucket.capacity))
        for bucket in sorted(buckets, key=lambda bucket: bucket.hour)
        if bucket.lesson_count > 0 and bucket.capacity > 0
    ]
    if not comparable:
        return HourOccupancyInsight()

    # Stable sort: equal occupancies stay in ascending hour order.
    ranked = sorted(comparable, key=lambda item: item[1], reverse=True)
    most_hour, most_occupancy = ranked[0]
    if len(ranked) == 1:
        return HourOccupancyInsight(
            most_filled_hour=most_hour,
            most_filled_hour_occupancy=most_occupancy,
            compared_hours_count=1,
        )

    least_hour, least_occupancy = ranked[-1]
    return HourOccupancyInsight(
        most_filled_hour=most_hour,
        least_filled_hour=least_hour,
        most_filled_hour_occupancy=most_occupancy,
        least_filled_hour_occupancy=least_occupancy,
        compared_hours_count=len(ranked),
    )


def lesson_occupancy_stats(lessons: Iterable[Lesson]) -> dict[str, int]:
    """
    Average, min and max fill rate over individual lessons.

    Lessons without declared capacity have no fill rate and are skipped.
    With nothing to measure, average and min are 0 and max is 100.
    """
    rates = [
        ratio_percent(lesson.registered_count, lesson.capacity_limit)
        for lesson in lessons
        if lesson.capacity_limit > 0
    ]
    if not rates:
        return {
            "average_occupancy": 0,
            "min_occupancy": 0,
            "max_occupancy": EMPTY_MAX_OCCUPANCY,
        }
    return {
        "average_occupancy": round_half_up(sum(rates) / len(rates)),
        "min_occupancy": round_half_up(min(rates)),
        "max_occupancy": round_half_up(max(rates)),
    }


def build_occupancy_metrics(
    lessons: Sequence[Lesson], buckets: Sequence[HourBucket]
) -> OccupancyInsight:
    total_lessons = len(lessons)
    total_registrations = sum(lesson.registered_count for lesson in lessons)
    average_class_size = (
        round_half_up(total_registrations / total_lessons) if total_lessons > 0 else 0
    )
    hour_insights = hour_occupancy_insights(buckets)
    return OccupancyInsight(
        **lesson_occupancy_stats(lessons),
        average_class_size=average_class_size,
        **hour_insights.model_dump(),
    )


__all__ = ["build_occupancy_metrics", "hour_occupancy_insights", "lesson_occupancy_stats"]
