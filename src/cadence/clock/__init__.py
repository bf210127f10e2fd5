"""Clock module for the frequency engine.

Provides calendar-day conversion and fixed-season boundaries.
"""

from .calendar import CalendarClock, day_difference, resolve_time_zone, to_calendar_day
from .seasons import (
    Season,
    SeasonWindow,
    end_of_season,
    previous_season,
    season_length,
    season_of,
    start_of_season,
)

__all__ = [
    "CalendarClock",
    "Season",
    "SeasonWindow",
    "day_difference",
    "end_of_season",
    "previous_season",
    "resolve_time_zone",
    "season_length",
    "season_of",
    "start_of_season",
    "to_calendar_day",
]
