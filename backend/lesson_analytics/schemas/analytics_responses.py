"""
Response schemas for lesson analytics.

Every derived entity is an immutable value object. Field names serialize in
camelCase (``totalLessons``, ``hoursData``...) because the dashboard
rendering layer reads them under those names.
"""

from __future__ import annotations

from typing import Any, List, Optional, Tuple

from pydantic import ConfigDict, Field

from ._strict_base import FrozenResponseModel, StrictModel
from .lesson import CoachId, Lesson

Percentage = int


class CategoryCount(FrozenResponseModel):
    """One group produced by the categorical grouper."""

    key: Any = Field(description="Grouping key, exactly as returned by the key function")
    count: int = Field(ge=0)
    percentage: Percentage = Field(ge=0, le=100)


class TypeBreakdown(FrozenResponseModel):
    """Lesson count for a lesson type, as a share of the lessons it was grouped from."""

    type: str
    count: int = Field(ge=0)
    percentage: Percentage = Field(ge=0, le=100)

    model_config = ConfigDict(
        json_schema_extra={"example": {"type": "Yoga", "count": 3, "percentage": 75}}
    )


class CoachBreakdown(FrozenResponseModel):
    """A client's lessons with one coach."""

    coach_id: CoachId
    lesson_count: int = Field(ge=0)
    percentage: Percentage = Field(ge=0, le=100)


class CoachDetail(FrozenResponseModel):
    """Per-coach lesson type breakdown; percentages are relative to this coach's lessons."""

    coach_id: CoachId
    total_lessons: int = Field(ge=0)
    lessons_by_type: Tuple[TypeBreakdown, ...] = ()


class HourBucket(FrozenResponseModel):
    hour: int = Field(ge=0, le=23)
    lesson_count: int = Field(default=0, ge=0)
    registrations: int = Field(default=0, ge=0)
    capacity: int = Field(default=0, ge=0)


class WeekBucket(FrozenResponseModel):
    """Totals for a day-of-month week (days 1-7 are week 1, 8-14 week 2, ...)."""

    week: int = Field(ge=1, le=5)
    lessons: int = Field(ge=0)
    registrations: int = Field(ge=0)
    revenue: float = Field(ge=0)
    date_range: str


class LessonTypeMetric(FrozenResponseModel):
    type: str
    lesson_count: int = Field(ge=0)
    registrations: int = Field(ge=0)
    revenue: float = Field(ge=0)
    average_price: int = Field(ge=0)
    occupancy_rate: Percentage = Field(ge=0, le=100)


class HourOccupancyInsight(FrozenResponseModel):
    """Best and worst filled hours among hours with both lessons and declared capacity."""

    most_filled_hour: Optional[int] = None
    least_filled_hour: Optional[int] = None
    most_filled_hour_occupancy: Percentage = 0
    least_filled_hour_occupancy: Percentage = 0
    compared_hours_count: int = 0


class OccupancyInsight(HourOccupancyInsight):
    average_occupancy: Percentage = Field(default=0, ge=0, le=100)
    min_occupancy: Percentage = Field(default=0, ge=0, le=100)
    max_occupancy: Percentage = Field(default=100, ge=0, le=100)
    average_class_size: int = Field(default=0, ge=0)


class CoachAnalyticsResult(FrozenResponseModel):
    """Coach dashboard figures for one calendar month."""

    total_lessons: int
    registration_rate: Percentage = Field(ge=0, le=100)
    total_revenue: float
    registered_count: int
    hours_data: Tuple[HourBucket, ...] = Field(min_length=24, max_length=24)
    lesson_type_metrics: Tuple[LessonTypeMetric, ...]
    weekly_performance: Tuple[WeekBucket, ...]
    occupancy_metrics: OccupancyInsight


class ClientAnalyticsResult(FrozenResponseModel):
    """Client dashboard figures for one calendar month."""

    total_lessons: int
    lessons_by_type: Tuple[TypeBreakdown, ...]
    hours_data: Tuple[HourBucket, ...] = Field(min_length=24, max_length=24)
    most_popular_type: Optional[str] = None
    most_active_coach: Optional[CoachBreakdown] = None
    top_coaches: Tuple[CoachBreakdown, ...]
    coach_details: Tuple[CoachDetail, ...]


class MonthRef(FrozenResponseModel):
    month: int = Field(ge=0, le=11, description="Zero-based month (0 = January)")
    year: int


class AnalyticsPeriod(MonthRef):
    label: str = Field(description="Display label, e.g. 'March 2025'")
    previous: MonthRef
    next: MonthRef


class TopHour(HourBucket):
    label: str = Field(description="Hour formatted as HH:00")


class CoachDashboardResponse(FrozenResponseModel):
    period: AnalyticsPeriod
    analytics: CoachAnalyticsResult
    top_hours: Tuple[TopHour, ...]


class ClientDashboardResponse(FrozenResponseModel):
    period: AnalyticsPeriod
    analytics: ClientAnalyticsResult
    top_hours: Tuple[TopHour, ...]


class AnalyticsComputeRequest(StrictModel):
    """Lessons posted for an on-demand computation."""

    lessons: List[Lesson] = Field(default_factory=list)
    month: int = Field(ge=0, le=11, description="Zero-based month (0 = January)")
    year: int = Field(ge=1970, le=9999)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "lessons": [
                    {
                        "id": 1,
                        "title": "Tennis",
                        "time": "2025-03-04T09:00:00",
                        "coachId": 7,
                        "price": 50,
                        "capacityLimit": 5,
                        "duration": 60,
                        "registeredCount": 4,
                    }
                ],
                "month": 2,
                "year": 2025,
            }
        }
    )
