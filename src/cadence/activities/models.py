"""Data models for activity history.

Defines ActivityRecord, ActivityType and the desired-frequency types.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, TypeAlias

from cadence.clock import Season


@dataclass(frozen=True)
class SeasonalFrequency:
    """Desired frequency, in days, for each season."""

    winter: float
    spring: float
    summer: float
    fall: float

    def for_season(self, season: Season) -> float:
        """Target applicable in a season."""
        return {
            Season.WINTER: self.winter,
            Season.SPRING: self.spring,
            Season.SUMMER: self.summer,
            Season.FALL: self.fall,
        }[season]

    def to_dict(self) -> dict[str, float]:
        return {
            "winter": self.winter,
            "spring": self.spring,
            "summer": self.summer,
            "fall": self.fall,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SeasonalFrequency":
        """Create from a dict keyed by season (or freqWinter-style keys)."""

        def pick(season: str) -> float:
            value = data.get(season, data.get(f"freq{season.capitalize()}"))
            if value is None:
                raise ValueError(f"Missing {season} frequency in {data!r}")
            return float(value)

        return cls(
            winter=pick("winter"),
            spring=pick("spring"),
            summer=pick("summer"),
            fall=pick("fall"),
        )


DesiredFrequency: TypeAlias = float | SeasonalFrequency


def resolve_frequency(frequency: DesiredFrequency, season: Season) -> float:
    """Single target in days for a season."""
    if isinstance(frequency, SeasonalFrequency):
        return frequency.for_season(season)
    return float(frequency)


def _parse_instant(value: Any) -> datetime:
    if isinstance(value, str):
        value = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    if not isinstance(value, datetime):
        raise ValueError(f"Not an instant: {value!r}")
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value


@dataclass(frozen=True)
class ActivityRecord:
    """One performed activity.

    Attributes:
        activity_type_id: Activity type identifier
        instant: When the activity happened (UTC)
        id: Identifier in the owning store
    """

    activity_type_id: str
    instant: datetime
    id: str | None = None

    def __post_init__(self) -> None:
        if self.instant.tzinfo is None:
            object.__setattr__(self, "instant", self.instant.replace(tzinfo=UTC))

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for storage."""
        return {
            "id": self.id,
            "typeId": self.activity_type_id,
            "date": self.instant.astimezone(UTC).isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ActivityRecord":
        """Create from a stored document (camelCase or snake_case keys)."""
        type_id = data.get("typeId", data.get("activity_type_id"))
        if type_id is None:
            raise ValueError(f"Activity is missing its type: {data!r}")

        return cls(
            activity_type_id=str(type_id),
            instant=_parse_instant(data.get("date", data.get("instant"))),
            id=str(data["id"]) if data.get("id") is not None else None,
        )


@dataclass(frozen=True)
class ActivityType:
    """A kind of activity the user wants to repeat.

    Attributes:
        id: Activity type identifier
        name: Display name
        frequency: Desired days between activities, flat or per season
        tag_id: Tag grouping the type, if any
        icon: Icon name chosen by the user
    """

    id: str
    name: str
    frequency: DesiredFrequency
    tag_id: str | None = None
    icon: str | None = None

    def desired_frequency(self, season: Season) -> float:
        """Target in days for a season."""
        return resolve_frequency(self.frequency, season)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ActivityType":
        """Create from a stored document.

        The frequency is read from ``desiredFrequency`` (flat) or from a
        ``seasonalFrequency`` mapping / ``freqWinter``-style keys.
        """
        seasonal = data.get("seasonalFrequency", data.get("seasonal_frequency"))
        frequency: DesiredFrequency
        if isinstance(seasonal, dict):
            frequency = SeasonalFrequency.from_dict(seasonal)
        elif "freqWinter" in data:
            frequency = SeasonalFrequency.from_dict(data)
        else:
            flat = data.get("desiredFrequency", data.get("desired_frequency"))
            if flat is None:
                raise ValueError(f"Activity type has no desired frequency: {data!r}")
            frequency = float(flat)

        return cls(
            id=str(data["id"]),
            name=data.get("name", str(data["id"])),
            frequency=frequency,
            tag_id=data.get("tagId", data.get("tag_id")),
            icon=data.get("icon"),
        )


def tag_membership(activity_types: Iterable[ActivityType]) -> dict[str, list[str]]:
    """Tag id -> ids of the activity types carrying that tag."""
    members: dict[str, list[str]] = {}
    for activity_type in activity_types:
        if activity_type.tag_id is not None:
            members.setdefault(activity_type.tag_id, []).append(activity_type.id)
    return members


__all__ = [
    "ActivityRecord",
    "ActivityType",
    "DesiredFrequency",
    "SeasonalFrequency",
    "resolve_frequency",
    "tag_membership",
]
