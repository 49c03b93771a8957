"""Lesson analytics for the coaching marketplace dashboards."""

__version__ = "1.0.0"
