# backend/lesson_analytics/core/constants.py
"""
Engine-wide constants for lesson analytics.
"""

from typing import Final

HOURS_PER_DAY: Final = 24

# Weeks are fixed-width day-of-month partitions (days 1-7 -> week 1, 8-14 -> week 2, ...)
DAYS_PER_WEEK_BUCKET: Final = 7

DEFAULT_TOP_HOURS_LIMIT: Final = 3
DEFAULT_TOP_COACHES_LIMIT: Final = 3

# Reported when there are no lessons with declared capacity in the window
EMPTY_MAX_OCCUPANCY: Final = 100

MONTHS_PER_YEAR: Final = 12
