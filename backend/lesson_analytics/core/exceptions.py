# backend/lesson_analytics/core/exceptions.py
"""
Domain-specific exceptions for lesson analytics.

The aggregation engine itself never raises; these exceptions belong to the
collaborators around it (lesson fetching, the HTTP surface) and can be
converted to HTTP errors at the API layer. Each class carries the HTTP status
it maps to in ``http_status``.
"""

from typing import Any, ClassVar, Dict, Optional

from fastapi import HTTPException, status


class DomainException(Exception):
    """Base exception for lesson analytics errors."""

    http_status: ClassVar[int] = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {"message": self.message, "code": self.code, "details": self.details}

    def to_http_exception(self) -> HTTPException:
        return HTTPException(status_code=self.http_status, detail=self.to_dict())


class ValidationException(DomainException):
    """Raised when a dashboard request is malformed (bad month, year or limit)."""

    http_status = status.HTTP_400_BAD_REQUEST


class ExternalServiceException(DomainException):
    """Raised when an upstream service fails."""

    http_status = status.HTTP_502_BAD_GATEWAY


class LessonFetchError(ExternalServiceException):
    """Raised when lessons cannot be loaded from the lesson API."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        *,
        path: Optional[str] = None,
    ) -> None:
        details: Dict[str, Any] = {}
        if status_code is not None:
            details["upstream_status"] = status_code
        if path:
            details["path"] = path
        super().__init__(message, details=details)
        self.status_code = status_code
        self.path = path
