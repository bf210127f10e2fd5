"""Off-time adjusted gaps between activities and their averages.

Gaps are measured in calendar days and reduced by the off-time days that
fall between the two activities. Averages are rounded to one decimal place,
half away from zero, before they are shown or compared to a target.
"""

import logging
from collections.abc import Sequence
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum

from cadence.clock import day_difference
from cadence.offtime import OffTimeIndex

logger = logging.getLogger(__name__)

_ONE_DECIMAL = Decimal("0.1")


def round_one_decimal(value: float) -> float:
    """Round to one decimal place, halves away from zero.

    Works on the shortest decimal form of the float, so 2.25 rounds to 2.3
    and -2.25 to -2.3. Values that already have one decimal are unchanged.
    """
    return float(Decimal(repr(value)).quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP))


class Trend(Enum):
    """Direction of recent frequency compared to the longer average."""

    IMPROVING = "improving"
    STABLE = "stable"
    DECLINING = "declining"
    INSUFFICIENT_DATA = "insufficient_data"


class IntervalCalculator:
    """Computes net gaps and rolling averages for one user's activity days."""

    def __init__(self, off_times: OffTimeIndex | None = None) -> None:
        """Initialize calculator.

        Args:
            off_times: Off-time index for the user. Defaults to no off-time.
        """
        self._off_times = off_times if off_times is not None else OffTimeIndex()

    @property
    def off_times(self) -> OffTimeIndex:
        return self._off_times

    def net_gap(self, activity_type_id: str, earlier: date, later: date) -> int:
        """Days from earlier to later minus the off-time days between them."""
        raw = day_difference(earlier, later)
        return raw - self._off_times.excluded_days(activity_type_id, earlier, later)

    def net_gaps(self, activity_days: Sequence[date], activity_type_id: str) -> list[int]:
        """Net gap for each consecutive pair of ascending activity days."""
        return [
            self.net_gap(activity_type_id, activity_days[i], activity_days[i + 1])
            for i in range(len(activity_days) - 1)
        ]

    @staticmethod
    def rolling_mean(gaps: Sequence[int], window_size: int) -> float | None:
        """Rounded mean of the most recent ``window_size`` gaps.

        Returns None when there are no gaps, i.e. fewer than two activities.
        """
        if window_size < 1 or not gaps:
            return None
        recent = gaps[-window_size:]
        return round_one_decimal(sum(recent) / len(recent))

    def days_since(self, last_day: date, today: date, activity_type_id: str) -> int:
        """Off-time adjusted days between the last activity and today."""
        if today < last_day:
            return day_difference(last_day, today)
        return self.net_gap(activity_type_id, last_day, today)

    def lifetime_mean(
        self,
        activity_days: Sequence[date],
        activity_type_id: str,
        today: date,
    ) -> float | None:
        """Rounded mean of every gap plus the open gap up to today.

        Returns None when there are no activities.
        """
        if not activity_days:
            return None
        gaps = self.net_gaps(activity_days, activity_type_id)
        gaps.append(self.days_since(activity_days[-1], today, activity_type_id))
        return round_one_decimal(sum(gaps) / len(gaps))

    @staticmethod
    def trend(
        recent_average: float | None,
        long_average: float | None,
        stable_threshold: float = 0.5,
    ) -> Trend:
        """Compare the short rolling average to the long one.

        A smaller recent average means the activity is done more often.
        """
        if recent_average is not None and long_average is not None:
            if abs(recent_average - long_average) < stable_threshold:
                return Trend.STABLE
            if recent_average < long_average:
                return Trend.IMPROVING
            return Trend.DECLINING
        if recent_average is not None or long_average is not None:
            return Trend.STABLE
        return Trend.INSUFFICIENT_DATA


__all__ = ["IntervalCalculator", "Trend", "round_one_decimal"]
