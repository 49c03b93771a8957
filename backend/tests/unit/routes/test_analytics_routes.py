from __future__ import annotations

from fastapi.testclient import TestClient
import pytest

from lesson_analytics.api.dependencies import get_analytics_service
from lesson_analytics.core.exceptions import LessonFetchError
from lesson_analytics.main import app
from lesson_analytics.schemas.lesson import Lesson
from lesson_analytics.services.analytics_service import AnalyticsService

AUTH = {"Authorization": "Bearer tok-123"}


def _lesson_json(lesson_id: int, title: str, time: str, coach_id: int, registered: int):
    return {
        "id": lesson_id,
        "title": title,
        "time": time,
        "coachId": coach_id,
        "price": 50,
        "capacityLimit": 5,
        "duration": 60,
        "registeredCount": registered,
    }


LESSONS = [
    _lesson_json(1, "Yoga", "2025-03-03T07:00:00", 11, 4),
    _lesson_json(2, "Yoga", "2025-03-10T07:00:00", 11, 2),
    _lesson_json(3, "Yoga", "2025-03-17T07:00:00", 11, 5),
    _lesson_json(4, "Tennis", "2025-03-20T18:00:00", 12, 1),
]


class _FakeSource:
    def __init__(self, error: Exception | None = None):
        self.error = error
        self.tokens: list[str] = []

    def _load(self, token: str) -> list[Lesson]:
        self.tokens.append(token)
        if self.error:
            raise self.error
        return [Lesson.model_validate(item) for item in LESSONS]

    def fetch_coach_lessons(self, coach_id, token):
        return self._load(token)

    def fetch_client_lessons(self, client_id, token):
        return self._load(token)


@pytest.fixture
def source():
    return _FakeSource()


@pytest.fixture
def client(source):
    app.dependency_overrides[get_analytics_service] = lambda: AnalyticsService(source)
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.pop(get_analytics_service, None)


def test_coach_dashboard(client, source):
    response = client.get("/api/v1/analytics/coaches/11?month=2&year=2025", headers=AUTH)

    assert response.status_code == 200
    body = response.json()
    assert source.tokens == ["tok-123"]
    assert body["period"]["label"] == "March 2025"
    assert body["period"]["previous"] == {"month": 1, "year": 2025}
    analytics = body["analytics"]
    assert analytics["totalLessons"] == 4
    assert analytics["totalRevenue"] == 600
    assert analytics["registeredCount"] == 12
    assert analytics["registrationRate"] == 60
    assert len(analytics["hoursData"]) == 24
    assert analytics["occupancyMetrics"]["mostFilledHour"] == 7
    assert body["topHours"][0] == {
        "hour": 7,
        "lessonCount": 3,
        "registrations": 11,
        "capacity": 15,
        "label": "07:00",
    }


def test_client_dashboard(client):
    response = client.get("/api/v1/analytics/clients/5?month=2&year=2025", headers=AUTH)

    assert response.status_code == 200
    analytics = response.json()["analytics"]
    assert analytics["mostPopularType"] == "Yoga"
    assert analytics["mostActiveCoach"] == {"coachId": 11, "lessonCount": 3, "percentage": 75}
    assert [coach["coachId"] for coach in analytics["coachDetails"]] == [11, 12]


@pytest.mark.parametrize("query", ["month=12&year=2025", "month=-1&year=2025", "year=2025"])
def test_month_is_validated(client, query):
    response = client.get(f"/api/v1/analytics/coaches/11?{query}", headers=AUTH)

    assert response.status_code == 422


def test_requires_bearer_token(client):
    response = client.get("/api/v1/analytics/coaches/11?month=2&year=2025")

    assert response.status_code in (401, 403)


def test_upstream_failure_maps_to_bad_gateway():
    failing = _FakeSource(LessonFetchError("Failed to reach lesson API", path="/coach-lessons/11"))
    app.dependency_overrides[get_analytics_service] = lambda: AnalyticsService(failing)
    try:
        response = TestClient(app).get(
            "/api/v1/analytics/coaches/11?month=2&year=2025", headers=AUTH
        )
    finally:
        app.dependency_overrides.pop(get_analytics_service, None)

    assert response.status_code == 502
    assert response.json()["detail"]["code"] == "LessonFetchError"


def test_compute_coach_from_posted_lessons(client):
    response = client.post(
        "/api/v1/analytics/coach/compute",
        json={"lessons": LESSONS, "month": 2, "year": 2025},
    )

    assert response.status_code == 200
    metrics = response.json()["analytics"]["lessonTypeMetrics"]
    assert [metric["type"] for metric in metrics] == ["Yoga", "Tennis"]
    assert metrics[0]["occupancyRate"] == 73


def test_compute_client_with_no_lessons(client):
    response = client.post(
        "/api/v1/analytics/client/compute", json={"lessons": [], "month": 0, "year": 2025}
    )

    assert response.status_code == 200
    body = response.json()
    assert body["analytics"]["totalLessons"] == 0
    assert body["analytics"]["mostPopularType"] is None
    assert body["topHours"] == []


def test_compute_rejects_unknown_fields(client):
    response = client.post(
        "/api/v1/analytics/coach/compute",
        json={"lessons": [], "month": 0, "year": 2025, "mock": True},
    )

    assert response.status_code == 422


def test_health_and_metrics(client):
    assert client.get("/health").json()["status"] == "ok"
    assert client.post(
        "/api/v1/analytics/coach/compute", json={"lessons": [], "month": 0, "year": 2025}
    ).status_code == 200
    metrics = client.get("/metrics")
    assert metrics.status_code == 200
    assert "lesson_analytics_compute_seconds" in metrics.text
