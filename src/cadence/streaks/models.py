"""Data models for streak detection."""

from dataclasses import dataclass
from datetime import date
from typing import Any


@dataclass(frozen=True)
class StreakResult:
    """A window of activity history that met the frequency target.

    Attributes:
        length_in_days: Net (off-time adjusted) days from start to end
        average_gap: Mean net gap inside the window, one decimal
        start_day: Calendar day of the first activity in the window
        end_day: Calendar day of the last activity in the window
    """

    length_in_days: int
    average_gap: float
    start_day: date
    end_day: date

    def to_dict(self) -> dict[str, Any]:
        return {
            "length": self.length_in_days,
            "averageFrequency": self.average_gap,
            "start": self.start_day.isoformat(),
            "end": self.end_day.isoformat(),
        }


@dataclass(frozen=True)
class StreakSummary:
    """The three streak variants for one activity type."""

    longest: StreakResult | None = None
    current: StreakResult | None = None
    perfect: StreakResult | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "longest": self.longest.to_dict() if self.longest else None,
            "current": self.current.to_dict() if self.current else None,
            "perfect": self.perfect.to_dict() if self.perfect else None,
        }


__all__ = ["StreakResult", "StreakSummary"]
