"""Client for the lesson/registration API that feeds the dashboards."""

from __future__ import annotations

import json
import logging
from typing import Any, List, Protocol

import httpx
from pydantic import ValidationError

from ..core.exceptions import LessonFetchError
from ..schemas.lesson import Lesson, LessonId

logger = logging.getLogger(__name__)


class LessonSource(Protocol):
    """Anything that can load a user's lessons, annotated with registration counts."""

    def fetch_coach_lessons(self, coach_id: str, token: str) -> List[Lesson]: ...

    def fetch_client_lessons(self, client_id: str, token: str) -> List[Lesson]: ...


class LessonApiClient:
    """Thin client for the lesson REST API."""

    def __init__(
        self,
        *,
        base_url: str,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        if not base_url:
            raise ValueError("Lesson API base URL must be provided")
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    def fetch_coach_lessons(self, coach_id: str, token: str) -> List[Lesson]:
        """Load a coach's lessons and annotate each with its registration count."""

        with self._client(token) as client:
            payload = self._get_json(client, f"/coach-lessons/{coach_id}")
            lessons = self._parse_lessons(payload, f"/coach-lessons/{coach_id}")
            return [
                lesson.model_copy(
                    update={"registered_count": self._registration_count(client, lesson.id)}
                )
                for lesson in lessons
            ]

    def fetch_client_lessons(self, client_id: str, token: str) -> List[Lesson]:
        """Load the lessons a client is registered to."""

        path = f"/client-lessons/{client_id}"
        with self._client(token) as client:
            return self._parse_lessons(self._get_json(client, path), path)

    def _client(self, token: str) -> httpx.Client:
        return httpx.Client(
            base_url=self._base_url,
            timeout=self._timeout,
            transport=self._transport,
            headers={
                "Accept": "application/json",
                "Content-Type": "application/json",
                "Authorization": f"Bearer {token}",
            },
        )

    def _registration_count(self, client: httpx.Client, lesson_id: LessonId) -> int:
        # A missing count should not hide the lesson from the dashboard.
        path = f"/get-registers-number/{lesson_id}"
        try:
            count = self._get_json(client, path)
        except LessonFetchError:
            logger.warning(f"Registration count unavailable for lesson {lesson_id}; using 0")
            return 0
        if isinstance(count, bool) or not isinstance(count, int) or count < 0:
            logger.warning(f"Unexpected registration count {count!r} for lesson {lesson_id}; using 0")
            return 0
        return count

    def _get_json(self, client: httpx.Client, path: str) -> Any:
        try:
            response = client.get(path)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            logger.error(
                "Lesson API error %s for GET %s: %s",
                status,
                path,
                exc.response.text[:500],
            )
            raise LessonFetchError(
                f"Lesson API responded with status {status}",
                status_code=status,
                path=path,
            ) from exc
        except httpx.RequestError as exc:
            logger.error("Lesson API request failure for GET %s: %s", path, str(exc))
            raise LessonFetchError("Failed to reach lesson API", path=path) from exc

        try:
            return response.json()
        except json.JSONDecodeError as exc:
            logger.error("Invalid JSON from lesson API for GET %s: %s", path, response.text[:500])
            raise LessonFetchError("Received malformed JSON from lesson API", path=path) from exc

    @staticmethod
    def _parse_lessons(payload: Any, path: str) -> List[Lesson]:
        if not isinstance(payload, list):
            raise LessonFetchError("Lesson API returned a non-list payload", path=path)
        try:
            return [Lesson.model_validate(item) for item in payload]
        except ValidationError as exc:
            logger.error("Lesson API returned invalid lessons for GET %s: %s", path, exc)
            raise LessonFetchError("Lesson API returned invalid lessons", path=path) from exc
