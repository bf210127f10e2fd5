"""Data models for off-time periods.

Defines the OffTimePeriod entity. Periods are stored by the owning
application as calendar dates (or UTC midnights of those dates).
"""

from dataclasses import dataclass
from datetime import UTC, date, datetime
from typing import Any

from cadence.errors import InvalidRange


def parse_calendar_day(value: Any) -> date:
    """Read a stored calendar day.

    Accepts a date, an ISO date string, or a datetime / ISO timestamp whose
    UTC calendar date is taken as-is (no zone shift).

    Raises:
        ValueError: If the value cannot be read as a day.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(UTC)
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        if len(text) == 10:
            return date.fromisoformat(text)
        return parse_calendar_day(datetime.fromisoformat(text.replace("Z", "+00:00")))
    raise ValueError(f"Not a calendar day: {value!r}")


@dataclass(frozen=True)
class OffTimePeriod:
    """A declared range of days exempt from frequency accounting.

    Attributes:
        start_day: First excluded day (inclusive)
        end_day: Last excluded day (inclusive)
        activity_type_id: Activity type the period applies to directly
        tag_id: Tag whose member activity types the period applies to
        id: Identifier in the owning store
    """

    start_day: date
    end_day: date
    activity_type_id: str | None = None
    tag_id: str | None = None
    id: str | None = None

    def __post_init__(self) -> None:
        if self.start_day > self.end_day:
            raise InvalidRange(self.start_day, self.end_day)

    def applies_to(self, activity_type_id: str, tag_members: dict[str, frozenset[str]]) -> bool:
        """Check whether the period covers an activity type.

        Args:
            activity_type_id: Activity type to test
            tag_members: Tag id -> ids of activity types carrying the tag
        """
        if self.activity_type_id is not None and self.activity_type_id == activity_type_id:
            return True
        if self.tag_id is not None:
            return activity_type_id in tag_members.get(self.tag_id, frozenset())
        return False

    def overlap_days(self, start: date, end: date) -> int:
        """Days of [start, end] inside this period, both ends included."""
        overlap_start = max(start, self.start_day)
        overlap_end = min(end, self.end_day)
        if overlap_start > overlap_end:
            return 0
        return (overlap_end - overlap_start).days + 1

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for storage."""
        return {
            "id": self.id,
            "startDate": self.start_day.isoformat(),
            "endDate": self.end_day.isoformat(),
            "activityTypeId": self.activity_type_id,
            "tagId": self.tag_id,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "OffTimePeriod":
        """Create from a stored document (camelCase or snake_case keys)."""
        start = data.get("startDate", data.get("start_day"))
        end = data.get("endDate", data.get("end_day"))
        if start is None or end is None:
            raise ValueError(f"Off-time period is missing its dates: {data!r}")

        return cls(
            start_day=parse_calendar_day(start),
            end_day=parse_calendar_day(end),
            activity_type_id=data.get("activityTypeId", data.get("activity_type_id")),
            tag_id=data.get("tagId", data.get("tag_id")),
            id=str(data["id"]) if data.get("id") is not None else None,
        )


__all__ = ["OffTimePeriod", "parse_calendar_day"]
