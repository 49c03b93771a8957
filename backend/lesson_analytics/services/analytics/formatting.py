from __future__ import annotations


def format_hour(hour: int) -> str:
    """Format an hour of day as ``HH:00`` (5 -> "05:00")."""
    return f"{hour:02d}:00"


def week_label(week: int) -> str:
    return f"Week {week}"


__all__ = ["format_hour", "week_label"]
