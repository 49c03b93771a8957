# backend/lesson_analytics/services/analytics_service.py
"""
Dashboard analytics service.

Loads a user's lessons through a LessonSource, runs the aggregation engine
for the requested month and wraps the result with the period navigation
and top hours that the dashboards display.
"""

from __future__ import annotations

import logging
import time
from typing import Iterable, Optional, Sequence, Tuple
from zoneinfo import ZoneInfo

from ..core.constants import DEFAULT_TOP_COACHES_LIMIT, DEFAULT_TOP_HOURS_LIMIT, MONTHS_PER_YEAR
from ..core.exceptions import ValidationException
from ..integrations.lesson_api_client import LessonSource
from ..monitoring.prometheus_metrics import analytics_compute_seconds, analytics_lessons_in_window
from ..schemas.analytics_responses import (
    AnalyticsPeriod,
    ClientDashboardResponse,
    CoachDashboardResponse,
    HourBucket,
    MonthRef,
    TopHour,
)
from ..schemas.lesson import Lesson
from ..utils.time_helpers import month_label, next_month, previous_month
from .analytics import (
    calculate_client_analytics,
    calculate_coach_analytics,
    format_hour,
    get_top_hours,
    get_top_hours_for_client,
)

logger = logging.getLogger(__name__)


def build_period(month: int, year: int) -> AnalyticsPeriod:
    prev_month, prev_year = previous_month(month, year)
    following_month, following_year = next_month(month, year)
    return AnalyticsPeriod(
        month=month,
        year=year,
        label=month_label(month, year),
        previous=MonthRef(month=prev_month, year=prev_year),
        next=MonthRef(month=following_month, year=following_year),
    )


def to_top_hours(buckets: Sequence[HourBucket]) -> Tuple[TopHour, ...]:
    return tuple(
        TopHour(**bucket.model_dump(), label=format_hour(bucket.hour)) for bucket in buckets
    )


class AnalyticsService:
    """Builds coach and client dashboard payloads."""

    def __init__(
        self,
        source: Optional[LessonSource] = None,
        *,
        tz: Optional[ZoneInfo] = None,
        top_hours_limit: int = DEFAULT_TOP_HOURS_LIMIT,
        top_coaches_limit: int = DEFAULT_TOP_COACHES_LIMIT,
    ):
        """
        Initialize analytics service.

        Args:
            source: Lesson loader; only needed for the fetch-and-compute methods
            tz: Timezone defining the local calendar
            top_hours_limit: Number of top hours returned with each dashboard
            top_coaches_limit: Number of coaches ranked on the client dashboard
        """
        self.source = source
        self.tz = tz
        self.top_hours_limit = top_hours_limit
        self.top_coaches_limit = top_coaches_limit
        self.logger = logging.getLogger(self.__class__.__name__)

    def coach_dashboard(
        self, coach_id: str, month: int, year: int, token: str
    ) -> CoachDashboardResponse:
        """Fetch a coach's lessons and build the coach dashboard for one month."""
        self._validate_period(month, year)
        lessons = self._require_source().fetch_coach_lessons(coach_id, token)
        self.logger.info(f"Loaded {len(lessons)} lessons for coach {coach_id}")
        return self.compute_coach(lessons, month, year)

    def client_dashboard(
        self, client_id: str, month: int, year: int, token: str
    ) -> ClientDashboardResponse:
        """Fetch a client's registered lessons and build the client dashboard for one month."""
        self._validate_period(month, year)
        lessons = self._require_source().fetch_client_lessons(client_id, token)
        self.logger.info(f"Loaded {len(lessons)} lessons for client {client_id}")
        return self.compute_client(lessons, month, year)

    def compute_coach(
        self, lessons: Iterable[Lesson], month: int, year: int
    ) -> CoachDashboardResponse:
        self._validate_period(month, year)
        started = time.perf_counter()
        analytics = calculate_coach_analytics(lessons, month, year, self.tz)
        self._observe("coach", started, analytics.total_lessons)

        return CoachDashboardResponse(
            period=build_period(month, year),
            analytics=analytics,
            top_hours=to_top_hours(get_top_hours(analytics.hours_data, self.top_hours_limit)),
        )

    def compute_client(
        self, lessons: Iterable[Lesson], month: int, year: int
    ) -> ClientDashboardResponse:
        self._validate_period(month, year)
        started = time.perf_counter()
        analytics = calculate_client_analytics(
            lessons, month, year, self.tz, top_coaches_limit=self.top_coaches_limit
        )
        self._observe("client", started, analytics.total_lessons)

        return ClientDashboardResponse(
            period=build_period(month, year),
            analytics=analytics,
            top_hours=to_top_hours(
                get_top_hours_for_client(analytics.hours_data, self.top_hours_limit)
            ),
        )

    def _observe(self, audience: str, started: float, total_lessons: int) -> None:
        elapsed = time.perf_counter() - started
        analytics_compute_seconds.labels(audience=audience).observe(elapsed)
        analytics_lessons_in_window.labels(audience=audience).observe(total_lessons)
        self.logger.info(
            f"Computed {audience} analytics: {total_lessons} lessons in window ({elapsed * 1000:.1f}ms)"
        )

    def _require_source(self) -> LessonSource:
        if self.source is None:
            raise ValidationException(
                "No lesson source configured for analytics", code="LESSON_SOURCE_MISSING"
            )
        return self.source

    @staticmethod
    def _validate_period(month: int, year: int) -> None:
        if not 0 <= month < MONTHS_PER_YEAR:
            raise ValidationException(
                f"Month must be between 0 and {MONTHS_PER_YEAR - 1}",
                code="INVALID_MONTH",
                details={"month": month},
            )
        if year < 1:
            raise ValidationException(
                "Year must be positive", code="INVALID_YEAR", details={"year": year}
            )
