"""Streaks module for the frequency engine.

Provides longest, current and perfect streak detection.
"""

from .models import StreakResult, StreakSummary
from .search import DEFAULT_FLOOR_MULTIPLE, StreakSearch

__all__ = [
    "DEFAULT_FLOOR_MULTIPLE",
    "StreakResult",
    "StreakSearch",
    "StreakSummary",
]
