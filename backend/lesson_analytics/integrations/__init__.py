from .lesson_api_client import LessonApiClient, LessonSource

__all__ = ["LessonApiClient", "LessonSource"]
