"""Lifetime analytics per activity type.

Provides the all-time average gap (including the open gap up to today) and
the longest historical streak.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date
from typing import Any

from cadence.activities import ActivityType
from cadence.clock import season_of
from cadence.intervals import IntervalCalculator
from cadence.streaks import StreakResult, StreakSearch

logger = logging.getLogger(__name__)


@dataclass
class AnalyticsSummary:
    """All-time figures for one activity type."""

    activity_type_id: str
    name: str
    desired_frequency: float
    number_of_activities: int
    first_activity_day: date | None
    lifetime_average: float | None
    longest_streak: StreakResult | None

    def to_dict(self) -> dict[str, Any]:
        streak = self.longest_streak
        return {
            "activityTypeId": self.activity_type_id,
            "activityType": self.name,
            "desiredFrequency": self.desired_frequency,
            "totalAvgFrequency": self.lifetime_average,
            "dateOfFirstActivity": (
                self.first_activity_day.isoformat() if self.first_activity_day else None
            ),
            "numberOfActivities": self.number_of_activities,
            "longestStreak": streak.length_in_days if streak else 0,
            "averageFrequency": streak.average_gap if streak else None,
            "streakStart": streak.start_day.isoformat() if streak else None,
            "streakEnd": streak.end_day.isoformat() if streak else None,
        }


class AnalyticsBuilder:
    """Builds lifetime analytics for activity types."""

    def __init__(self, calculator: IntervalCalculator, streaks: StreakSearch) -> None:
        self._calculator = calculator
        self._streaks = streaks

    def build(
        self,
        activity_type: ActivityType,
        activity_days: Sequence[date],
        today: date,
    ) -> AnalyticsSummary:
        """Summarize one activity type's full history."""
        desired = activity_type.desired_frequency(season_of(today).season)
        days = self._calculator.off_times.filter_days(activity_type.id, activity_days)

        return AnalyticsSummary(
            activity_type_id=activity_type.id,
            name=activity_type.name,
            desired_frequency=desired,
            number_of_activities=len(days),
            first_activity_day=days[0] if days else None,
            lifetime_average=self._calculator.lifetime_mean(days, activity_type.id, today),
            longest_streak=self._streaks.longest(days, activity_type.id, desired),
        )


__all__ = ["AnalyticsBuilder", "AnalyticsSummary"]
