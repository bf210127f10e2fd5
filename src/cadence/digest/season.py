"""Season review generation.

Summarizes each activity type over one fixed calendar season: first and
last activity, coverage of the season, average gap, best streak, and
suggestions for adjusting targets next season.
"""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Any

from cadence.activities import ActivityType
from cadence.clock import SeasonWindow, day_difference
from cadence.intervals import IntervalCalculator
from cadence.streaks import StreakSearch

logger = logging.getLogger(__name__)


class SuggestionKind(Enum):
    """What a season suggestion asks for."""

    FOCUS = "focus"  # average gap above target
    INCREASE = "increase"  # average gap well below target


@dataclass
class SeasonSuggestion:
    """A suggested target adjustment for next season."""

    activity_type_id: str
    name: str
    kind: SuggestionKind
    desired_frequency: float
    average_gap: float
    message: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "activityTypeId": self.activity_type_id,
            "name": self.name,
            "type": self.kind.value,
            "desiredFrequency": self.desired_frequency,
            "avgFrequency": self.average_gap,
            "message": self.message,
        }


@dataclass
class ActivityTypeReview:
    """One activity type's season."""

    activity_type_id: str
    name: str
    first_day: date
    last_day: date
    total_activities: int
    off_time_days: int
    tracked_days: int
    season_days: int
    coverage_days: int
    coverage_pct: int
    desired_frequency: float
    average_gap: float | None
    best_streak: int
    full_net_span: int

    @property
    def is_perfect(self) -> bool:
        """Best streak covers the whole span from first to last activity."""
        return self.best_streak > 0 and self.best_streak >= self.full_net_span

    def to_dict(self) -> dict[str, Any]:
        return {
            "activityTypeId": self.activity_type_id,
            "name": self.name,
            "firstDate": self.first_day.isoformat(),
            "lastDate": self.last_day.isoformat(),
            "totalActivities": self.total_activities,
            "offTimeDays": self.off_time_days,
            "trackedDays": self.tracked_days,
            "seasonDays": self.season_days,
            "coverageDays": self.coverage_days,
            "coveragePct": self.coverage_pct,
            "desiredFrequency": self.desired_frequency,
            "avgFrequency": self.average_gap,
            "bestStreak": self.best_streak,
            "fullNetSpan": self.full_net_span,
            "isPerfect": self.is_perfect,
        }


@dataclass
class SeasonReview:
    """Summary of one season across activity types."""

    window: SeasonWindow
    activity_types: list[ActivityTypeReview]  # best streak first
    total_activities: int
    unique_activity_days: int
    most_active_type: str | None
    suggestions: list[SeasonSuggestion] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "season": self.window.to_dict(),
            "activityTypes": [review.to_dict() for review in self.activity_types],
            "totalActivities": self.total_activities,
            "uniqueActivityDays": self.unique_activity_days,
            "mostActiveType": self.most_active_type,
            "recommendations": [suggestion.to_dict() for suggestion in self.suggestions],
        }


def _percentage(part: int, whole: int) -> int:
    return int((Decimal(part) * 100 / Decimal(whole)).quantize(Decimal(1), rounding=ROUND_HALF_UP))


class SeasonAggregator:
    """Builds season reviews from activity days.

    Only activities whose calendar day falls inside the season count.
    """

    def __init__(
        self,
        calculator: IntervalCalculator,
        streaks: StreakSearch,
        suggestion_threshold: float = 1.0,
    ) -> None:
        """Initialize aggregator.

        Args:
            calculator: Interval calculator carrying the user's off-time
            streaks: Streak search sharing the same calculator
            suggestion_threshold: Days the average may differ from the
                target before a suggestion is made
        """
        self._calculator = calculator
        self._streaks = streaks
        self._suggestion_threshold = suggestion_threshold

    def review_type(
        self,
        window: SeasonWindow,
        activity_type: ActivityType,
        activity_days: Sequence[date],
    ) -> ActivityTypeReview | None:
        """Review one activity type, or None if it has no activity in season."""
        in_season = sorted(day for day in activity_days if window.contains(day))
        if not in_season:
            return None

        type_id = activity_type.id
        first_day = max(in_season[0], window.start)
        last_day = min(in_season[-1], window.end)

        off_time_days = self._calculator.off_times.excluded_days(type_id, first_day, last_day)
        tracked_days = max(0, day_difference(first_day, last_day) + 1 - off_time_days)
        coverage_days = min(tracked_days, window.total_days)

        desired = activity_type.desired_frequency(window.season)
        qualifying = self._calculator.off_times.filter_days(type_id, in_season)
        gaps = self._calculator.net_gaps(qualifying, type_id)
        best = self._streaks.longest(qualifying, type_id, desired)

        return ActivityTypeReview(
            activity_type_id=type_id,
            name=activity_type.name,
            first_day=first_day,
            last_day=last_day,
            total_activities=len(in_season),
            off_time_days=off_time_days,
            tracked_days=tracked_days,
            season_days=window.total_days,
            coverage_days=coverage_days,
            coverage_pct=_percentage(coverage_days, window.total_days),
            desired_frequency=desired,
            average_gap=self._calculator.rolling_mean(gaps, len(gaps)),
            best_streak=best.length_in_days if best else 0,
            full_net_span=sum(gaps),
        )

    def review(
        self,
        window: SeasonWindow,
        entries: Iterable[tuple[ActivityType, Sequence[date]]],
    ) -> SeasonReview | None:
        """Review a season.

        Args:
            window: The season
            entries: (activity type, ascending activity days) pairs

        Returns:
            SeasonReview, or None if nothing happened in the season
        """
        reviews: list[ActivityTypeReview] = []
        all_days: set[date] = set()

        for activity_type, days in entries:
            review = self.review_type(window, activity_type, days)
            if review is None:
                continue
            reviews.append(review)
            all_days.update(day for day in days if window.contains(day))

        if not reviews:
            logger.info(f"No activity in {window.label}")
            return None

        reviews.sort(key=lambda r: (r.best_streak, r.coverage_days), reverse=True)
        most_active = max(reviews, key=lambda r: r.total_activities)

        return SeasonReview(
            window=window,
            activity_types=reviews,
            total_activities=sum(r.total_activities for r in reviews),
            unique_activity_days=len(all_days),
            most_active_type=most_active.name,
            suggestions=self._suggest(reviews),
        )

    def _suggest(self, reviews: list[ActivityTypeReview]) -> list[SeasonSuggestion]:
        """Suggest target changes where the average missed or beat it."""
        suggestions: list[SeasonSuggestion] = []
        for review in reviews:
            if review.average_gap is None:
                continue
            diff = review.average_gap - review.desired_frequency
            if diff > self._suggestion_threshold:
                kind = SuggestionKind.FOCUS
                message = (
                    f"You averaged every {review.average_gap} days vs. a target of every "
                    f"{review.desired_frequency} days. Consider focusing on this activity "
                    "next season, or relaxing the target to build momentum."
                )
            elif diff < -self._suggestion_threshold:
                kind = SuggestionKind.INCREASE
                message = (
                    f"You averaged every {review.average_gap} days vs. a target of every "
                    f"{review.desired_frequency} days. Consider a more frequent target "
                    "next season."
                )
            else:
                continue

            suggestions.append(
                SeasonSuggestion(
                    activity_type_id=review.activity_type_id,
                    name=review.name,
                    kind=kind,
                    desired_frequency=review.desired_frequency,
                    average_gap=review.average_gap,
                    message=message,
                )
            )
        return suggestions


__all__ = [
    "ActivityTypeReview",
    "SeasonAggregator",
    "SeasonReview",
    "SeasonSuggestion",
    "SuggestionKind",
]
