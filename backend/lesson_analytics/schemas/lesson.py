"""
Lesson records as delivered by the lesson API.

Lessons are read-only inputs to the analytics engine. ``title`` doubles as
the lesson type used for grouping.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional, Union

from pydantic import Field, field_validator

from ._strict_base import CamelModel

LessonId = Union[int, str]
CoachId = Union[int, str]


class Location(CamelModel):
    city: str = ""
    country: str = ""
    address: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None


class Lesson(CamelModel):
    """A scheduled coaching session with its accrued registrations."""

    id: LessonId
    title: str
    description: Optional[str] = None
    start: datetime = Field(alias="time", description="Lesson start instant")
    coach_id: CoachId
    price: float = Field(ge=0)
    capacity_limit: int = Field(ge=0)
    duration: int = Field(default=0, ge=0, description="Duration in minutes")
    location: Optional[Location] = None
    registered_count: int = Field(default=0, ge=0)

    @field_validator("registered_count", mode="before")
    @classmethod
    def _absent_count_is_zero(cls, value: object) -> object:
        return 0 if value is None else value

    @property
    def lesson_type(self) -> str:
        return self.title

    @property
    def revenue(self) -> float:
        return self.registered_count * self.price


__all__ = ["CoachId", "Lesson", "LessonId", "Location"]
