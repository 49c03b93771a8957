"""Shared fixtures for the lesson analytics test suite."""

from __future__ import annotations

from datetime import datetime
import itertools
from typing import Any, Callable, Optional

import pytest

from lesson_analytics.schemas.lesson import Lesson

LessonFactory = Callable[..., Lesson]


@pytest.fixture
def make_lesson() -> LessonFactory:
    """
    Build lessons with sensible defaults; only override what a test cares about.

    ``when`` defaults to 10:00 on 4 March 2025.
    """
    ids = itertools.count(1)

    def _make(
        title: str = "Tennis",
        when: Optional[datetime] = None,
        *,
        coach_id: int | str = 1,
        price: float = 50.0,
        capacity: int = 5,
        registered: Optional[int] = 0,
        **extra: Any,
    ) -> Lesson:
        return Lesson(
            id=extra.pop("id", next(ids)),
            title=title,
            start=when or datetime(2025, 3, 4, 10, 0),
            coach_id=coach_id,
            price=price,
            capacity_limit=capacity,
            duration=extra.pop("duration", 60),
            registered_count=registered,
            **extra,
        )

    return _make
