"""Unit tests for activity data models."""

from datetime import UTC, datetime, timedelta, timezone

import pytest

from cadence.activities import (
    ActivityRecord,
    ActivityType,
    SeasonalFrequency,
    resolve_frequency,
    tag_membership,
)
from cadence.clock import Season


class TestSeasonalFrequency:
    """Tests for SeasonalFrequency."""

    def test_for_season(self) -> None:
        frequency = SeasonalFrequency(winter=3, spring=4, summer=5, fall=6)
        assert frequency.for_season(Season.WINTER) == 3
        assert frequency.for_season(Season.FALL) == 6

    def test_from_dict_stored_keys(self) -> None:
        """freqWinter-style keys are accepted."""
        frequency = SeasonalFrequency.from_dict(
            {"freqWinter": 3, "freqSpring": 4, "freqSummer": 5, "freqFall": 6}
        )
        assert frequency == SeasonalFrequency(winter=3, spring=4, summer=5, fall=6)

    def test_from_dict_missing_season(self) -> None:
        with pytest.raises(ValueError):
            SeasonalFrequency.from_dict({"winter": 3, "spring": 4, "summer": 5})

    def test_resolve_flat(self) -> None:
        """A flat target applies in every season."""
        assert resolve_frequency(2, Season.SUMMER) == 2.0


class TestActivityRecord:
    """Tests for ActivityRecord."""

    def test_naive_instant_is_utc(self) -> None:
        record = ActivityRecord(activity_type_id="run", instant=datetime(2024, 3, 1, 12, 0))
        assert record.instant.tzinfo is UTC

    def test_from_dict(self) -> None:
        record = ActivityRecord.from_dict(
            {"id": 42, "typeId": "run", "date": "2024-03-01T04:30:00.000Z"}
        )
        assert record.id == "42"
        assert record.activity_type_id == "run"
        assert record.instant == datetime(2024, 3, 1, 4, 30, tzinfo=UTC)

    def test_to_dict_is_utc(self) -> None:
        """Stored instants are written in UTC."""
        local = datetime(2024, 3, 1, 23, 30, tzinfo=timezone(timedelta(hours=-5)))
        data = ActivityRecord(activity_type_id="run", instant=local).to_dict()
        assert data["date"] == "2024-03-02T04:30:00+00:00"

    def test_from_dict_missing_type(self) -> None:
        with pytest.raises(ValueError):
            ActivityRecord.from_dict({"date": "2024-03-01T00:00:00Z"})

    def test_from_dict_bad_instant(self) -> None:
        with pytest.raises(ValueError):
            ActivityRecord.from_dict({"typeId": "run", "date": 12})


class TestActivityType:
    """Tests for ActivityType."""

    def test_flat_frequency(self) -> None:
        activity_type = ActivityType.from_dict(
            {"id": "run", "name": "Running", "desiredFrequency": 2}
        )
        assert activity_type.desired_frequency(Season.WINTER) == 2.0

    def test_seasonal_mapping(self) -> None:
        activity_type = ActivityType.from_dict(
            {
                "id": "read",
                "name": "Reading",
                "seasonalFrequency": {"winter": 3, "spring": 4, "summer": 5, "fall": 6},
            }
        )
        assert activity_type.desired_frequency(Season.SPRING) == 4.0

    def test_stored_seasonal_keys(self) -> None:
        activity_type = ActivityType.from_dict(
            {"id": 9, "freqWinter": 1, "freqSpring": 2, "freqSummer": 3, "freqFall": 4}
        )
        assert activity_type.id == "9"
        assert activity_type.name == "9"
        assert activity_type.desired_frequency(Season.SUMMER) == 3.0

    def test_missing_frequency(self) -> None:
        with pytest.raises(ValueError):
            ActivityType.from_dict({"id": "run", "name": "Running"})


class TestTagMembership:
    """Tests for tag_membership."""

    def test_groups_by_tag(self) -> None:
        types = [
            ActivityType(id="run", name="Running", frequency=2, tag_id="outdoor"),
            ActivityType(id="bike", name="Cycling", frequency=3, tag_id="outdoor"),
            ActivityType(id="read", name="Reading", frequency=1),
        ]
        assert tag_membership(types) == {"outdoor": ["run", "bike"]}
