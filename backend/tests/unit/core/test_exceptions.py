from lesson_analytics.core.exceptions import (
    DomainException,
    LessonFetchError,
    ValidationException,
)


def test_lesson_fetch_error_maps_to_bad_gateway():
    exc = LessonFetchError("Lesson API responded with status 500", status_code=500, path="/x")

    http_exc = exc.to_http_exception()

    assert http_exc.status_code == 502
    assert http_exc.detail == {
        "message": "Lesson API responded with status 500",
        "code": "LessonFetchError",
        "details": {"upstream_status": 500, "path": "/x"},
    }


def test_validation_exception_maps_to_bad_request():
    exc = ValidationException("Month must be between 0 and 11", code="INVALID_MONTH")

    assert exc.to_http_exception().status_code == 400
    assert exc.code == "INVALID_MONTH"


def test_domain_exception_defaults():
    exc = DomainException("boom")

    assert exc.code == "DomainException"
    assert exc.details == {}
    assert exc.to_http_exception().status_code == 500


def test_lesson_fetch_error_without_upstream_response():
    exc = LessonFetchError("Lesson API request failed")

    assert exc.status_code is None
    assert exc.path is None
    assert exc.to_dict() == {
        "message": "Lesson API request failed",
        "code": "LessonFetchError",
        "details": {},
    }
    assert exc.to_http_exception().status_code == LessonFetchError.http_status == 502
