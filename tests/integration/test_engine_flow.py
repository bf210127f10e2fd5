"""Integration tests for the frequency engine.

One user in Denver with a tagged off-time period, activities logged late in
the evening, and a season review of the winter that just ended.
"""

from datetime import UTC, date, datetime

import pytest

from cadence import FrequencyEngine, InvalidTimeZone
from cadence.activities import ActivityRecord, ActivityType, SeasonalFrequency
from cadence.clock import Season, SeasonWindow
from cadence.config import EngineConfig
from cadence.intervals import Trend
from cadence.offtime import OffTimePeriod
from cadence.recommendations import RecommendationStatus

# 23:00 MDT on Apr 9
AS_OF = datetime(2024, 4, 10, 5, 0, tzinfo=UTC)


def record(type_id: str, *args: int) -> ActivityRecord:
    return ActivityRecord(activity_type_id=type_id, instant=datetime(*args, tzinfo=UTC))


@pytest.fixture
def activity_types() -> list[ActivityType]:
    return [
        ActivityType(id="run", name="Running", frequency=2, tag_id="outdoor"),
        ActivityType(
            id="bike",
            name="Cycling",
            frequency=SeasonalFrequency(winter=7, spring=4, summer=3, fall=4),
            tag_id="outdoor",
        ),
        ActivityType(id="read", name="Reading", frequency=3),
        ActivityType(id="yoga", name="Yoga", frequency=7),
    ]


@pytest.fixture
def records() -> list[ActivityRecord]:
    """Activities in UTC, deliberately out of order."""
    return [
        record("run", 2024, 4, 8, 4, 30),  # Apr 7 22:30 MDT
        record("run", 2024, 4, 2, 4, 30),  # Apr 1
        record("run", 2024, 4, 4, 4, 30),  # Apr 3
        record("run", 2024, 4, 6, 4, 30),  # Apr 5
        record("run", 2024, 2, 20, 19, 0),
        record("run", 2024, 2, 22, 19, 0),
        record("bike", 2024, 3, 15, 18, 0),
        record("bike", 2024, 3, 28, 18, 0),
        record("read", 2024, 3, 1, 5, 30),  # Feb 29 22:30 MST
        record("read", 2024, 4, 8, 15, 0),
    ]


@pytest.fixture
def engine() -> FrequencyEngine:
    return FrequencyEngine(
        "America/Denver",
        off_times=[
            OffTimePeriod(start_day=date(2024, 3, 20), end_day=date(2024, 3, 25), tag_id="outdoor")
        ],
        tag_members={"outdoor": ["run", "bike"]},
    )


class TestEngineFlow:
    """End-to-end engine computations."""

    def test_days_in_user_zone(
        self, engine: FrequencyEngine, records: list[ActivityRecord]
    ) -> None:
        """Late-evening activities land on the local day."""
        grouped = engine.group_days(records)
        assert grouped["run"][-4:] == [
            date(2024, 4, 1),
            date(2024, 4, 3),
            date(2024, 4, 5),
            date(2024, 4, 7),
        ]
        assert grouped["read"][0] == date(2024, 2, 29)
        assert engine.clock.today(AS_OF) == date(2024, 4, 9)

    def test_recommendations_ranked(
        self,
        engine: FrequencyEngine,
        activity_types: list[ActivityType],
        records: list[ActivityRecord],
    ) -> None:
        items = engine.recommendations(activity_types, records, AS_OF)
        assert [r.activity_type_id for r in items] == ["yoga", "bike", "run", "read"]

        by_id = {r.activity_type_id: r for r in items}
        assert by_id["yoga"].status is RecommendationStatus.NO_DATA
        assert by_id["bike"].desired_frequency == 4
        assert by_id["bike"].days_since_last_activity == 12
        assert by_id["bike"].status is RecommendationStatus.CRITICALLY_OVERDUE
        assert by_id["read"].status is RecommendationStatus.AHEAD

    def test_run_recommendation(
        self,
        engine: FrequencyEngine,
        activity_types: list[ActivityType],
        records: list[ActivityRecord],
    ) -> None:
        """Tag off-time shortens the gap across March."""
        items = engine.recommendations(activity_types, records, AS_OF)
        run = next(r for r in items if r.activity_type_id == "run")

        assert run.last_performed_day == date(2024, 4, 7)
        assert run.days_since_last_activity == 2
        assert run.status is RecommendationStatus.DUE_TODAY
        assert run.recent_average == 2.0
        assert run.long_average == 8.2
        assert run.trend is Trend.IMPROVING
        assert run.current_streak is not None
        assert run.current_streak.length_in_days == 6
        assert run.current_streak.start_day == date(2024, 4, 1)

    def test_analytics(
        self,
        engine: FrequencyEngine,
        activity_types: list[ActivityType],
        records: list[ActivityRecord],
    ) -> None:
        summaries = {
            s.activity_type_id: s for s in engine.analytics(activity_types, records, AS_OF)
        }

        assert summaries["run"].lifetime_average == 7.2
        assert summaries["run"].number_of_activities == 6
        assert summaries["bike"].lifetime_average == 9.5
        assert summaries["read"].lifetime_average == 20.0
        assert summaries["yoga"].lifetime_average is None

    def test_streaks(
        self,
        engine: FrequencyEngine,
        activity_types: list[ActivityType],
        records: list[ActivityRecord],
    ) -> None:
        summary = engine.streaks(activity_types[0], records, AS_OF)

        assert summary.longest is not None
        assert summary.longest.length_in_days == 6
        assert summary.current == summary.longest
        assert summary.perfect is None

    def test_previous_season_review(
        self,
        engine: FrequencyEngine,
        activity_types: list[ActivityType],
        records: list[ActivityRecord],
    ) -> None:
        """Without a window, the winter before as_of is reviewed."""
        review = engine.season_review(activity_types, records, as_of=AS_OF)

        assert review is not None
        assert review.window == SeasonWindow(Season.WINTER, 2023)
        assert review.total_activities == 3
        assert review.unique_activity_days == 3
        assert review.most_active_type == "Running"
        assert [r.activity_type_id for r in review.activity_types] == ["run", "read"]

    def test_explicit_season_review(
        self,
        engine: FrequencyEngine,
        activity_types: list[ActivityType],
        records: list[ActivityRecord],
    ) -> None:
        review = engine.season_review(
            activity_types, records, window=SeasonWindow(Season.SPRING, 2024)
        )

        assert review is not None
        bike = next(r for r in review.activity_types if r.activity_type_id == "bike")
        assert bike.off_time_days == 6
        assert bike.tracked_days == 8
        assert bike.average_gap == 7.0

    def test_season_review_needs_window_or_as_of(
        self,
        engine: FrequencyEngine,
        activity_types: list[ActivityType],
        records: list[ActivityRecord],
    ) -> None:
        with pytest.raises(ValueError):
            engine.season_review(activity_types, records)


class TestEngineSetup:
    """Engine construction."""

    def test_invalid_zone(self) -> None:
        with pytest.raises(InvalidTimeZone):
            FrequencyEngine("Mars/Base")

    def test_default_zone_from_config(self) -> None:
        engine = FrequencyEngine(config=EngineConfig(default_time_zone="Asia/Tokyo"))
        assert engine.clock.name == "Asia/Tokyo"

    def test_floor_from_config(self) -> None:
        """The configured floor multiple reaches streak search."""
        run = ActivityType(id="run", name="Running", frequency=2)
        records = [record("run", 2024, 4, day, 12, 0) for day in (1, 2, 3)]
        as_of = datetime(2024, 4, 3, 18, 0, tzinfo=UTC)

        strict = FrequencyEngine("UTC").streaks(run, records, as_of)
        relaxed = FrequencyEngine(
            "UTC", config=EngineConfig(streak_floor_multiple=1.0)
        ).streaks(run, records, as_of)

        assert strict.current is None
        assert relaxed.current is not None
