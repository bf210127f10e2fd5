"""Per-activity-type recommendations.

Combines days since the last activity, rolling averages, trend, urgency
status and the current streak into one record per activity type, and ranks
the records by urgency.
"""

import logging
import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from datetime import date
from typing import Any

from cadence.activities import ActivityType
from cadence.clock import season_of
from cadence.intervals import IntervalCalculator, Trend
from cadence.streaks import StreakResult, StreakSearch

from .classifier import RecommendationStatus, classify

logger = logging.getLogger(__name__)


@dataclass
class Recommendation:
    """Where one activity type stands against its target."""

    activity_type_id: str
    name: str
    desired_frequency: float
    status: RecommendationStatus
    priority_score: float
    trend: Trend = Trend.INSUFFICIENT_DATA
    last_performed_day: date | None = None
    first_activity_day: date | None = None
    days_since_last_activity: int | None = None
    difference: float | None = None
    recent_average: float | None = None
    long_average: float | None = None
    current_streak: StreakResult | None = None
    short_window: int = 3
    long_window: int = 10

    def to_dict(self) -> dict[str, Any]:
        """Convert to the field names used by the recommendation list."""
        streak = self.current_streak
        return {
            "activityTypeId": self.activity_type_id,
            "name": self.name,
            "desiredFrequency": self.desired_frequency,
            "lastPerformedDate": _iso(self.last_performed_day),
            "firstActivityDate": _iso(self.first_activity_day),
            "daysSinceLastActivity": self.days_since_last_activity,
            f"averageFrequencyLast{self.short_window}": self.recent_average,
            f"averageFrequencyLast{self.long_window}": self.long_average,
            "trend": self.trend.value,
            "difference": self.difference,
            "status": self.status.value,
            "priorityScore": None if math.isinf(self.priority_score) else self.priority_score,
            "currentStreak": streak.length_in_days if streak else 0,
            "currentStreakStart": _iso(streak.start_day) if streak else None,
        }


def _iso(day: date | None) -> str | None:
    return day.isoformat() if day is not None else None


@dataclass
class DueBuckets:
    """Recommendations due today and due tomorrow."""

    today: list[Recommendation] = field(default_factory=list)
    tomorrow: list[Recommendation] = field(default_factory=list)


class RecommendationBuilder:
    """Builds recommendations for activity types.

    Activity days that fall inside off-time are ignored entirely.
    """

    def __init__(
        self,
        calculator: IntervalCalculator,
        streaks: StreakSearch,
        short_window: int = 3,
        long_window: int = 10,
        trend_stable_threshold: float = 0.5,
    ) -> None:
        """Initialize builder.

        Args:
            calculator: Interval calculator carrying the user's off-time
            streaks: Streak search sharing the same calculator
            short_window: Gaps in the recent rolling average
            long_window: Gaps in the long rolling average
            trend_stable_threshold: Average difference still considered stable
        """
        self._calculator = calculator
        self._streaks = streaks
        self._short_window = short_window
        self._long_window = long_window
        self._trend_stable_threshold = trend_stable_threshold

    def build(
        self,
        activity_type: ActivityType,
        activity_days: Sequence[date],
        today: date,
    ) -> Recommendation:
        """Build the recommendation for one activity type.

        Args:
            activity_type: The activity type
            activity_days: Calendar days of its activities, ascending
            today: Today's calendar day in the user's zone

        Returns:
            Recommendation for the type
        """
        desired = activity_type.desired_frequency(season_of(today).season)
        days = self._calculator.off_times.filter_days(activity_type.id, activity_days)

        if not days:
            status, priority = classify(None, desired)
            return Recommendation(
                activity_type_id=activity_type.id,
                name=activity_type.name,
                desired_frequency=desired,
                status=status,
                priority_score=priority,
                short_window=self._short_window,
                long_window=self._long_window,
            )

        days_since = self._calculator.days_since(days[-1], today, activity_type.id)
        status, priority = classify(days_since, desired)

        gaps = self._calculator.net_gaps(days, activity_type.id)
        recent_average = self._calculator.rolling_mean(gaps, self._short_window)
        long_average = self._calculator.rolling_mean(gaps, self._long_window)
        trend = self._calculator.trend(
            recent_average, long_average, self._trend_stable_threshold
        )

        recommendation = Recommendation(
            activity_type_id=activity_type.id,
            name=activity_type.name,
            desired_frequency=desired,
            status=status,
            priority_score=priority,
            trend=trend,
            last_performed_day=days[-1],
            first_activity_day=days[0],
            days_since_last_activity=days_since,
            difference=days_since - desired if desired > 0 else None,
            recent_average=recent_average,
            long_average=long_average,
            current_streak=self._streaks.current(days, activity_type.id, desired, today),
            short_window=self._short_window,
            long_window=self._long_window,
        )
        logger.debug(
            f"{activity_type.name}: {days_since} days since last, "
            f"target {desired}, status {status.value}"
        )
        return recommendation


def rank(recommendations: Iterable[Recommendation]) -> list[Recommendation]:
    """Sort by priority, most urgent first; equal scores keep their order."""
    return sorted(recommendations, key=lambda r: r.priority_score, reverse=True)


def partition_due(recommendations: Iterable[Recommendation]) -> DueBuckets:
    """Split recommendations into due today and due tomorrow.

    Today: difference above -1 (due today or overdue). Tomorrow: difference
    in (-2, -1]. Types never performed, or without a positive target, have no
    difference and appear in neither bucket.
    """
    buckets = DueBuckets()
    for recommendation in recommendations:
        difference = recommendation.difference
        if difference is None:
            continue
        if difference > -1:
            buckets.today.append(recommendation)
        elif difference > -2:
            buckets.tomorrow.append(recommendation)
    return buckets


__all__ = [
    "DueBuckets",
    "Recommendation",
    "RecommendationBuilder",
    "partition_due",
    "rank",
]
