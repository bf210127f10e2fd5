"""Calendar-day arithmetic in a named civil time zone.

Every gap, overlap and span in the engine is measured between calendar days,
never between raw instants or UTC midnights.
"""

import logging
from datetime import UTC, date, datetime, tzinfo
from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from cadence.errors import InvalidTimeZone

logger = logging.getLogger(__name__)


@lru_cache(maxsize=64)
def _load_zone(name: str) -> ZoneInfo:
    return ZoneInfo(name)


def resolve_time_zone(time_zone: str | tzinfo) -> tzinfo:
    """Resolve an IANA zone name.

    Args:
        time_zone: Zone name (e.g. "America/Denver") or an existing tzinfo.

    Returns:
        The tzinfo for the zone.

    Raises:
        InvalidTimeZone: If the name is blank or not a known zone.
    """
    if isinstance(time_zone, tzinfo):
        return time_zone
    if not isinstance(time_zone, str) or not time_zone.strip():
        raise InvalidTimeZone(time_zone)

    try:
        return _load_zone(time_zone.strip())
    except (ZoneInfoNotFoundError, ValueError, OSError) as e:
        logger.error(f"Rejected time zone {time_zone!r}: {e}")
        raise InvalidTimeZone(time_zone) from e


def to_calendar_day(instant: datetime, time_zone: str | tzinfo) -> date:
    """Convert an instant to its civil date in a time zone.

    Naive datetimes are treated as UTC.
    """
    zone = resolve_time_zone(time_zone)
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=UTC)
    return instant.astimezone(zone).date()


def day_difference(a: date, b: date) -> int:
    """Whole days from a to b (negative when b precedes a)."""
    return (b - a).days


class CalendarClock:
    """A calendar bound to one user's time zone.

    The clock never reads the system time; "today" is always derived from an
    as-of instant handed in by the caller.
    """

    def __init__(self, time_zone: str | tzinfo) -> None:
        """Initialize clock.

        Args:
            time_zone: IANA zone name or tzinfo.

        Raises:
            InvalidTimeZone: If the zone cannot be resolved.
        """
        self._zone = resolve_time_zone(time_zone)
        self._name = time_zone if isinstance(time_zone, str) else str(time_zone)

    @property
    def time_zone(self) -> tzinfo:
        """The resolved zone."""
        return self._zone

    @property
    def name(self) -> str:
        """The zone name as supplied."""
        return self._name

    def to_day(self, instant: datetime) -> date:
        """Calendar day of an instant in this zone."""
        return to_calendar_day(instant, self._zone)

    def today(self, as_of: datetime) -> date:
        """Calendar day of the as-of instant in this zone."""
        return self.to_day(as_of)

    def day_difference(self, a: date, b: date) -> int:
        """Whole days from a to b."""
        return day_difference(a, b)


__all__ = [
    "CalendarClock",
    "day_difference",
    "resolve_time_zone",
    "to_calendar_day",
]
