"""
Lesson analytics aggregation engine.

Pure, synchronous transforms from a list of lessons plus a target month to
the figures shown on the coach and client dashboards.
"""

from .client_analytics import build_coach_details, calculate_client_analytics
from .coach_analytics import calculate_coach_analytics
from .formatting import format_hour
from .grouping import coach_breakdown, group_by, type_breakdown
from .hourly import build_hourly, get_top_hours, get_top_hours_for_client, top_n
from .occupancy import build_occupancy_metrics, hour_occupancy_insights, lesson_occupancy_stats
from .revenue import build_lesson_type_metrics, registration_rate, total_revenue
from .time_window import filter_by_month
from .weekly import build_weekly, week_of_month

__all__ = [
    "build_coach_details",
    "build_hourly",
    "build_lesson_type_metrics",
    "build_occupancy_metrics",
    "build_weekly",
    "calculate_client_analytics",
    "calculate_coach_analytics",
    "coach_breakdown",
    "filter_by_month",
    "format_hour",
    "get_top_hours",
    "get_top_hours_for_client",
    "group_by",
    "hour_occupancy_insights",
    "lesson_occupancy_stats",
    "registration_rate",
    "top_n",
    "total_revenue",
    "type_breakdown",
    "week_of_month",
]
