# backend/lesson_analytics/api/dependencies.py
"""
Dependency providers for the analytics routes.

Overridden in tests through ``app.dependency_overrides``.
"""

from functools import lru_cache
import logging

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ..core.config import settings
from ..integrations.lesson_api_client import LessonApiClient
from ..services.analytics_service import AnalyticsService

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=True)


@lru_cache(maxsize=1)
def get_lesson_api_client() -> LessonApiClient:
    logger.info(f"Lesson API client targeting {settings.lesson_api_base_url}")
    return LessonApiClient(
        base_url=settings.lesson_api_base_url,
        timeout=settings.lesson_api_timeout_seconds,
    )


def get_analytics_service(
    client: LessonApiClient = Depends(get_lesson_api_client),
) -> AnalyticsService:
    return AnalyticsService(
        client,
        tz=settings.tzinfo,
        top_hours_limit=settings.top_hours_limit,
        top_coaches_limit=settings.top_coaches_limit,
    )


def get_bearer_token(
    credentials: HTTPAuthorizationCredentials = Depends(bearer_scheme),
) -> str:
    """Token forwarded as-is to the lesson API, which owns authentication."""
    return credentials.credentials
