"""Frequency engine facade.

Wires the clock, off-time index, interval calculator, streak search and the
builders together for one user's request. The off-time index is built once
and shared read-only by every activity type computed through the engine.
"""

import logging
from collections import defaultdict
from collections.abc import Iterable, Mapping
from datetime import date, datetime, tzinfo

from cadence.activities import ActivityRecord, ActivityType
from cadence.clock import CalendarClock, SeasonWindow, previous_season, season_of
from cadence.config import EngineConfig
from cadence.digest import AnalyticsBuilder, AnalyticsSummary, SeasonAggregator, SeasonReview
from cadence.intervals import IntervalCalculator
from cadence.offtime import OffTimeIndex, OffTimePeriod
from cadence.recommendations import Recommendation, RecommendationBuilder, rank
from cadence.streaks import StreakSearch, StreakSummary

logger = logging.getLogger(__name__)


class FrequencyEngine:
    """Analytics for one user.

    Example:
        >>> engine = FrequencyEngine("America/Denver", off_times=periods)
        >>> engine.recommendations(types, records, as_of=datetime.now(UTC))
    """

    def __init__(
        self,
        time_zone: str | tzinfo | None = None,
        off_times: Iterable[OffTimePeriod] = (),
        tag_members: Mapping[str, Iterable[str]] | None = None,
        config: EngineConfig | None = None,
    ) -> None:
        """Initialize engine.

        Args:
            time_zone: User's IANA zone; defaults to the configured zone
            off_times: User's off-time periods
            tag_members: Tag id -> activity type ids carrying the tag
            config: Engine settings

        Raises:
            InvalidTimeZone: If the zone cannot be resolved.
        """
        self._config = config or EngineConfig()
        self._clock = CalendarClock(
            time_zone if time_zone is not None else self._config.default_time_zone
        )
        self._off_times = OffTimeIndex(off_times, tag_members)
        self._calculator = IntervalCalculator(self._off_times)
        self._streaks = StreakSearch(self._calculator, self._config.streak_floor_multiple)
        self._recommendations = RecommendationBuilder(
            self._calculator,
            self._streaks,
            short_window=self._config.short_window,
            long_window=self._config.long_window,
            trend_stable_threshold=self._config.trend_stable_threshold,
        )
        self._analytics = AnalyticsBuilder(self._calculator, self._streaks)
        self._seasons = SeasonAggregator(
            self._calculator,
            self._streaks,
            suggestion_threshold=self._config.suggestion_threshold,
        )

    @property
    def clock(self) -> CalendarClock:
        return self._clock

    @property
    def off_times(self) -> OffTimeIndex:
        return self._off_times

    @property
    def calculator(self) -> IntervalCalculator:
        return self._calculator

    @property
    def streak_search(self) -> StreakSearch:
        return self._streaks

    def activity_days(self, records: Iterable[ActivityRecord]) -> list[date]:
        """Calendar days of records in the user's zone, ascending."""
        return [self._clock.to_day(record.instant) for record in _sorted(records)]

    def group_days(self, records: Iterable[ActivityRecord]) -> dict[str, list[date]]:
        """Ascending calendar days per activity type."""
        grouped: dict[str, list[date]] = defaultdict(list)
        for record in _sorted(records):
            grouped[record.activity_type_id].append(self._clock.to_day(record.instant))
        return dict(grouped)

    def recommendations(
        self,
        activity_types: Iterable[ActivityType],
        records: Iterable[ActivityRecord],
        as_of: datetime,
    ) -> list[Recommendation]:
        """Ranked recommendations, most urgent first."""
        today = self._clock.today(as_of)
        grouped = self.group_days(records)
        items = [
            self._recommendations.build(activity_type, grouped.get(activity_type.id, []), today)
            for activity_type in activity_types
        ]
        logger.debug(f"Built {len(items)} recommendations for {today.isoformat()}")
        return rank(items)

    def analytics(
        self,
        activity_types: Iterable[ActivityType],
        records: Iterable[ActivityRecord],
        as_of: datetime,
    ) -> list[AnalyticsSummary]:
        """Lifetime analytics, in the order the types were given."""
        today = self._clock.today(as_of)
        grouped = self.group_days(records)
        return [
            self._analytics.build(activity_type, grouped.get(activity_type.id, []), today)
            for activity_type in activity_types
        ]

    def streaks(
        self,
        activity_type: ActivityType,
        records: Iterable[ActivityRecord],
        as_of: datetime,
    ) -> StreakSummary:
        """Longest, current and perfect streaks for one activity type."""
        today = self._clock.today(as_of)
        days = self.activity_days(r for r in records if r.activity_type_id == activity_type.id)
        desired = activity_type.desired_frequency(season_of(today).season)
        return self._streaks.search(days, activity_type.id, desired, today)

    def season_review(
        self,
        activity_types: Iterable[ActivityType],
        records: Iterable[ActivityRecord],
        window: SeasonWindow | None = None,
        as_of: datetime | None = None,
    ) -> SeasonReview | None:
        """Review a season; defaults to the season completed before as_of.

        Raises:
            ValueError: If neither window nor as_of is given.
        """
        if window is None:
            if as_of is None:
                raise ValueError("season_review needs a season window or an as_of instant")
            window = previous_season(self._clock.today(as_of))

        grouped = self.group_days(records)
        logger.info(f"Building review for {window.label}")
        return self._seasons.review(
            window,
            ((activity_type, grouped.get(activity_type.id, [])) for activity_type in activity_types),
        )


def _sorted(records: Iterable[ActivityRecord]) -> list[ActivityRecord]:
    return sorted(records, key=lambda record: record.instant)


__all__ = ["FrequencyEngine"]
