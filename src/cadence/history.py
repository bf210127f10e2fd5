"""History documents for the command line.

A history document is a YAML (or JSON) export of one user's data as the
owning application stores it:

    time_zone: America/Denver
    activity_types:
      - {id: run, name: Running, desiredFrequency: 2, tagId: outdoor}
    activities:
      - {typeId: run, date: "2024-03-01T14:00:00Z"}
    off_times:
      - {startDate: "2024-03-10", endDate: "2024-03-12", tagId: outdoor}
    tags:                      # optional, derived from activity types if absent
      outdoor: [run]
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from cadence.activities import ActivityRecord, ActivityType, tag_membership
from cadence.offtime import OffTimePeriod

logger = logging.getLogger(__name__)


@dataclass
class History:
    """One user's activity types, activities and off-time."""

    activity_types: list[ActivityType] = field(default_factory=list)
    records: list[ActivityRecord] = field(default_factory=list)
    off_times: list[OffTimePeriod] = field(default_factory=list)
    tag_members: dict[str, list[str]] = field(default_factory=dict)
    time_zone: str | None = None


def _entries(data: dict[str, Any], key: str) -> list[dict[str, Any]]:
    """List of mappings stored under a section key."""
    entries = data.get(key) or []
    if not isinstance(entries, list):
        raise ValueError(f"'{key}' must be a list, got {type(entries).__name__}")
    for entry in entries:
        if not isinstance(entry, dict):
            raise ValueError(f"Entries in '{key}' must be mappings, got {entry!r}")
    return entries


def _tag_members(tags: Any) -> dict[str, list[str]]:
    if not isinstance(tags, dict):
        raise ValueError(f"'tags' must map tag ids to activity type ids, got {tags!r}")
    members: dict[str, list[str]] = {}
    for tag, type_ids in tags.items():
        if not isinstance(type_ids, list):
            raise ValueError(f"Members of tag {tag!r} must be a list, got {type_ids!r}")
        members[str(tag)] = [str(type_id) for type_id in type_ids]
    return members


def parse_history(data: dict[str, Any]) -> History:
    """Build a History from a parsed document.

    Raises:
        ValueError: If a section or an entry is malformed.
        InvalidRange: If an off-time period ends before it starts.
    """
    activity_types = [ActivityType.from_dict(item) for item in _entries(data, "activity_types")]
    records = [ActivityRecord.from_dict(item) for item in _entries(data, "activities")]
    off_times = [OffTimePeriod.from_dict(item) for item in _entries(data, "off_times")]

    tags = data.get("tags")
    if tags is None:
        tag_members = tag_membership(activity_types)
    else:
        tag_members = _tag_members(tags)

    time_zone = data.get("time_zone")
    if time_zone is not None and not isinstance(time_zone, str):
        raise ValueError(f"'time_zone' must be a zone name, got {time_zone!r}")

    known = {activity_type.id for activity_type in activity_types}
    unknown = {record.activity_type_id for record in records} - known
    if unknown:
        logger.warning(f"Ignoring activities for unknown types: {sorted(unknown)}")

    return History(
        activity_types=activity_types,
        records=[record for record in records if record.activity_type_id in known],
        off_times=off_times,
        tag_members=tag_members,
        time_zone=time_zone,
    )


def load_history(path: Path) -> History:
    """Load a history document from a YAML or JSON file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the document is not a mapping or an entry is malformed.
    """
    if not path.exists():
        raise FileNotFoundError(f"History file not found: {path}")

    try:
        with open(path) as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"History document is not valid YAML or JSON: {path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"History document must be a mapping: {path}")

    history = parse_history(data)
    logger.debug(
        f"Loaded {len(history.activity_types)} activity types, "
        f"{len(history.records)} activities, {len(history.off_times)} off-time periods"
    )
    return history


__all__ = ["History", "load_history", "parse_history"]
