from datetime import datetime
from zoneinfo import ZoneInfo

import pytest

from lesson_analytics.core.exceptions import ValidationException
from lesson_analytics.monitoring.prometheus_metrics import REGISTRY
from lesson_analytics.services.analytics_service import AnalyticsService, build_period


class _FakeSource:
    def __init__(self, lessons):
        self.lessons = lessons
        self.calls: list[tuple[str, str, str]] = []

    def fetch_coach_lessons(self, coach_id, token):
        self.calls.append(("coach", coach_id, token))
        return self.lessons

    def fetch_client_lessons(self, client_id, token):
        self.calls.append(("client", client_id, token))
        return self.lessons


@pytest.fixture
def lessons(make_lesson):
    return [
        make_lesson("Tennis", datetime(2025, 3, 3, 9, 0), coach_id=7, capacity=5, registered=4),
        make_lesson("Tennis", datetime(2025, 3, 10, 9, 0), coach_id=7, capacity=6, registered=5),
        make_lesson("Yoga", datetime(2025, 3, 12, 18, 0), coach_id=8, capacity=10, registered=1),
        make_lesson("Yoga", datetime(2025, 3, 19, 18, 0), coach_id=8, capacity=10, registered=0),
    ]


def _sample(name: str, audience: str) -> float:
    return REGISTRY.get_sample_value(name, {"audience": audience}) or 0.0


def test_build_period_navigation():
    period = build_period(0, 2025)

    assert period.label == "January 2025"
    assert (period.previous.month, period.previous.year) == (11, 2024)
    assert (period.next.month, period.next.year) == (1, 2025)


def test_coach_dashboard_fetches_and_ranks_by_registrations(lessons):
    source = _FakeSource(lessons)
    service = AnalyticsService(source, top_hours_limit=3)

    dashboard = service.coach_dashboard("7", 2, 2025, "tok")

    assert source.calls == [("coach", "7", "tok")]
    assert dashboard.analytics.total_lessons == 4
    assert dashboard.period.label == "March 2025"
    assert [(hour.hour, hour.label, hour.registrations) for hour in dashboard.top_hours] == [
        (9, "09:00", 9),
        (18, "18:00", 1),
    ]


def test_client_dashboard_ranks_by_lesson_count(lessons):
    source = _FakeSource(lessons)
    service = AnalyticsService(source, top_hours_limit=1, top_coaches_limit=1)

    dashboard = service.client_dashboard("33", 2, 2025, "tok")

    assert source.calls == [("client", "33", "tok")]
    # 09:00 and 18:00 both have two lessons; the earlier hour wins the tie.
    assert [hour.hour for hour in dashboard.top_hours] == [9]
    assert [coach.coach_id for coach in dashboard.analytics.top_coaches] == [7]
    assert len(dashboard.analytics.coach_details) == 2


def test_compute_records_metrics(lessons):
    service = AnalyticsService()
    before = _sample("lesson_analytics_compute_seconds_count", "coach")
    before_lessons = _sample("lesson_analytics_lessons_in_window_sum", "coach")

    service.compute_coach(lessons, 2, 2025)

    assert _sample("lesson_analytics_compute_seconds_count", "coach") == before + 1
    assert _sample("lesson_analytics_lessons_in_window_sum", "coach") == before_lessons + 4


def test_timezone_is_applied(make_lesson):
    lesson = make_lesson(when=datetime.fromisoformat("2025-03-31T22:30:00+00:00"))
    service = AnalyticsService(tz=ZoneInfo("Asia/Jerusalem"))

    assert service.compute_client([lesson], 3, 2025).analytics.total_lessons == 1
    assert service.compute_client([lesson], 2, 2025).analytics.total_lessons == 0


@pytest.mark.parametrize("month", [-1, 12])
def test_invalid_month_is_rejected_before_fetching(lessons, month):
    source = _FakeSource(lessons)

    with pytest.raises(ValidationException) as excinfo:
        AnalyticsService(source).coach_dashboard("7", month, 2025, "tok")

    assert excinfo.value.code == "INVALID_MONTH"
    assert source.calls == []


def test_fetching_requires_a_source():
    with pytest.raises(ValidationException) as excinfo:
        AnalyticsService().client_dashboard("33", 2, 2025, "tok")

    assert excinfo.value.code == "LESSON_SOURCE_MISSING"


def test_empty_month_dashboard(lessons):
    dashboard = AnalyticsService().compute_coach(lessons, 5, 2025)

    assert dashboard.analytics.total_lessons == 0
    assert dashboard.top_hours == ()
    assert len(dashboard.analytics.hours_data) == 24
