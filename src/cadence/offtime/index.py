"""Off-time lookup for one user's request.

Resolves which declared off-time periods apply to an activity type and
counts excluded days in calendar-day ranges.
"""

import logging
from collections.abc import Iterable, Mapping
from datetime import date

from cadence.errors import InvalidRange

from .models import OffTimePeriod

logger = logging.getLogger(__name__)


class OffTimeIndex:
    """Read-only snapshot of a user's off-time periods.

    Build one per request and share it across activity types; the index is
    never mutated after construction apart from its per-type lookup cache,
    whose entries are deterministic.
    """

    def __init__(
        self,
        periods: Iterable[OffTimePeriod] = (),
        tag_members: Mapping[str, Iterable[str]] | None = None,
    ) -> None:
        """Initialize index.

        Args:
            periods: Off-time periods declared by the user
            tag_members: Tag id -> activity type ids carrying that tag
        """
        self._periods = tuple(periods)
        self._tag_members: dict[str, frozenset[str]] = {
            tag_id: frozenset(members) for tag_id, members in (tag_members or {}).items()
        }
        self._by_type: dict[str, tuple[OffTimePeriod, ...]] = {}
        logger.debug(
            f"Off-time index built with {len(self._periods)} periods "
            f"and {len(self._tag_members)} tags"
        )

    def __len__(self) -> int:
        return len(self._periods)

    @property
    def periods(self) -> tuple[OffTimePeriod, ...]:
        return self._periods

    def applicable_periods(self, activity_type_id: str) -> tuple[OffTimePeriod, ...]:
        """Periods covering an activity type, directly or through a tag."""
        cached = self._by_type.get(activity_type_id)
        if cached is None:
            cached = tuple(
                period
                for period in self._periods
                if period.applies_to(activity_type_id, self._tag_members)
            )
            self._by_type[activity_type_id] = cached
        return cached

    def excluded_days(self, activity_type_id: str, start_day: date, end_day: date) -> int:
        """Count off-time days in the inclusive range [start_day, end_day].

        Each applicable period contributes its own overlap. Periods that
        overlap each other are not merged, so a day covered by two periods
        counts twice.

        Raises:
            InvalidRange: If start_day is after end_day.
        """
        if start_day > end_day:
            raise InvalidRange(start_day, end_day)

        periods = self.applicable_periods(activity_type_id)
        if not periods:
            return 0

        return sum(period.overlap_days(start_day, end_day) for period in periods)

    def is_excluded(self, activity_type_id: str, day: date) -> bool:
        """Check whether a day falls in any applicable period."""
        return any(
            period.start_day <= day <= period.end_day
            for period in self.applicable_periods(activity_type_id)
        )

    def filter_days(self, activity_type_id: str, days: Iterable[date]) -> list[date]:
        """Drop activity days that fall inside an applicable period."""
        days = list(days)
        if not self.applicable_periods(activity_type_id):
            return days

        kept = [day for day in days if not self.is_excluded(activity_type_id, day)]
        if len(kept) != len(days):
            logger.debug(
                f"Dropped {len(days) - len(kept)} activities inside off-time "
                f"for type {activity_type_id}"
            )
        return kept


__all__ = ["OffTimeIndex"]
