"""Fixed calendar seasons.

The year is split into four three-month quarters. Winter starts on Dec 1 and
runs through the end of February of the following year.
"""

import calendar
from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum


class Season(Enum):
    """A three-month calendar quarter."""

    WINTER = "winter"
    SPRING = "spring"
    SUMMER = "summer"
    FALL = "fall"


# (start month, end month, end day); winter's end is computed.
_BOUNDS: dict[Season, tuple[int, int, int]] = {
    Season.SPRING: (3, 5, 31),
    Season.SUMMER: (6, 8, 31),
    Season.FALL: (9, 11, 30),
}


def start_of_season(season: Season, year: int) -> date:
    """First day of a season.

    Args:
        season: The season.
        year: Year the season starts in (Dec for winter).
    """
    if season is Season.WINTER:
        return date(year, 12, 1)
    start_month, _, _ = _BOUNDS[season]
    return date(year, start_month, 1)


def end_of_season(season: Season, year: int) -> date:
    """Last day of a season (inclusive).

    Winter ends on the last day of February of ``year + 1``; the leap-year
    test is applied to that following year.
    """
    if season is Season.WINTER:
        next_year = year + 1
        return date(next_year, 2, 29 if calendar.isleap(next_year) else 28)
    _, end_month, end_day = _BOUNDS[season]
    return date(year, end_month, end_day)


def season_length(season: Season, year: int) -> int:
    """Number of days in a season, both ends included."""
    return (end_of_season(season, year) - start_of_season(season, year)).days + 1


@dataclass(frozen=True)
class SeasonWindow:
    """One concrete season, e.g. the winter starting December 2023."""

    season: Season
    year: int

    @property
    def start(self) -> date:
        return start_of_season(self.season, self.year)

    @property
    def end(self) -> date:
        return end_of_season(self.season, self.year)

    @property
    def total_days(self) -> int:
        return season_length(self.season, self.year)

    @property
    def label(self) -> str:
        """Human-readable label, e.g. "Winter 2023–2024" or "Fall 2024"."""
        name = self.season.value.capitalize()
        if self.season is Season.WINTER:
            return f"{name} {self.year}–{self.year + 1}"
        return f"{name} {self.year}"

    def contains(self, day: date) -> bool:
        """Check whether a calendar day falls inside the season."""
        return self.start <= day <= self.end

    def previous(self) -> "SeasonWindow":
        """The season immediately before this one."""
        return season_of(self.start - timedelta(days=1))

    def to_dict(self) -> dict[str, object]:
        return {
            "season": self.season.value,
            "year": self.year,
            "label": self.label,
            "start": self.start.isoformat(),
            "end": self.end.isoformat(),
            "totalDays": self.total_days,
        }


def season_of(day: date) -> SeasonWindow:
    """The season containing a calendar day.

    January and February belong to the winter that began the previous
    December.
    """
    month = day.month
    if month == 12:
        return SeasonWindow(Season.WINTER, day.year)
    if month <= 2:
        return SeasonWindow(Season.WINTER, day.year - 1)
    if month <= 5:
        return SeasonWindow(Season.SPRING, day.year)
    if month <= 8:
        return SeasonWindow(Season.SUMMER, day.year)
    return SeasonWindow(Season.FALL, day.year)


def previous_season(day: date) -> SeasonWindow:
    """The most recently completed season as of a calendar day."""
    return season_of(day).previous()


__all__ = [
    "Season",
    "SeasonWindow",
    "end_of_season",
    "previous_season",
    "season_length",
    "season_of",
    "start_of_season",
]
