"""Streak search over one activity type's history.

A window (s, e) over the ascending activity days is valid when the mean of
the net gaps between consecutive activities from s to e, rounded to one
decimal, does not exceed the desired frequency. Its span is the net day
difference between the days at s and e.

Activity days that fall inside an applicable off-time period are dropped
before searching. With those days gone, the net span of a window equals the
sum of its net gaps, so a single prefix-sum pass makes every window O(1).
"""

import logging
from collections.abc import Sequence
from datetime import date

from cadence.intervals import IntervalCalculator, round_one_decimal

from .models import StreakResult, StreakSummary

logger = logging.getLogger(__name__)

DEFAULT_FLOOR_MULTIPLE = 3.0


class _Windows:
    """Prefix sums of net gaps for O(1) window span and average."""

    def __init__(self, days: list[date], gaps: list[int]) -> None:
        self.days = days
        self._prefix = [0]
        for gap in gaps:
            self._prefix.append(self._prefix[-1] + gap)

    def __len__(self) -> int:
        return len(self.days)

    def span(self, start: int, end: int) -> int:
        return self._prefix[end] - self._prefix[start]

    def average(self, start: int, end: int) -> float:
        return round_one_decimal(self.span(start, end) / (end - start))

    def result(self, start: int, end: int) -> StreakResult:
        return StreakResult(
            length_in_days=self.span(start, end),
            average_gap=self.average(start, end),
            start_day=self.days[start],
            end_day=self.days[end],
        )


class StreakSearch:
    """Finds longest, current and perfect streaks.

    Current and perfect streaks are only reported when the last activity is
    recent (days since it do not exceed the target) and the window spans at
    least ``floor_multiple`` times the target.
    """

    def __init__(
        self,
        calculator: IntervalCalculator | None = None,
        floor_multiple: float = DEFAULT_FLOOR_MULTIPLE,
    ) -> None:
        """Initialize search.

        Args:
            calculator: Interval calculator carrying the user's off-time
            floor_multiple: Minimum span, in multiples of the target, for
                current and perfect streaks
        """
        self._calculator = calculator if calculator is not None else IntervalCalculator()
        self._floor_multiple = floor_multiple

    def _windows(
        self, activity_days: Sequence[date], activity_type_id: str
    ) -> _Windows | None:
        days = self._calculator.off_times.filter_days(activity_type_id, activity_days)
        if len(days) < 2:
            return None
        return _Windows(days, self._calculator.net_gaps(days, activity_type_id))

    def _is_recent(
        self, windows: _Windows, activity_type_id: str, desired_frequency: float, today: date
    ) -> bool:
        days_since = self._calculator.days_since(windows.days[-1], today, activity_type_id)
        return days_since <= desired_frequency

    def _meets_floor(self, result: StreakResult, desired_frequency: float) -> bool:
        return result.length_in_days >= self._floor_multiple * desired_frequency

    def longest(
        self,
        activity_days: Sequence[date],
        activity_type_id: str,
        desired_frequency: float,
    ) -> StreakResult | None:
        """Valid window with the greatest span anywhere in the history.

        Windows are scanned by start then end, ascending; on equal spans the
        first window found is kept.
        """
        if desired_frequency <= 0:
            return None
        windows = self._windows(activity_days, activity_type_id)
        if windows is None:
            return None

        best: tuple[int, int] | None = None
        best_span = 0
        count = len(windows)
        for start in range(count - 1):
            for end in range(start + 1, count):
                span = windows.span(start, end)
                if span > best_span and windows.average(start, end) <= desired_frequency:
                    best = (start, end)
                    best_span = span

        if best is None:
            return None
        return windows.result(*best)

    def current(
        self,
        activity_days: Sequence[date],
        activity_type_id: str,
        desired_frequency: float,
        today: date,
    ) -> StreakResult | None:
        """Longest valid window ending at the most recent activity."""
        if desired_frequency <= 0:
            return None
        windows = self._windows(activity_days, activity_type_id)
        if windows is None:
            return None
        if not self._is_recent(windows, activity_type_id, desired_frequency, today):
            return None

        end = len(windows) - 1
        best: StreakResult | None = None
        for start in range(end):
            span = windows.span(start, end)
            if (best is None or span > best.length_in_days) and (
                windows.average(start, end) <= desired_frequency
            ):
                best = windows.result(start, end)

        if best is None or not self._meets_floor(best, desired_frequency):
            return None
        return best

    def perfect(
        self,
        activity_days: Sequence[date],
        activity_type_id: str,
        desired_frequency: float,
        today: date,
    ) -> StreakResult | None:
        """The whole history, if it qualifies as a current streak."""
        if desired_frequency <= 0:
            return None
        windows = self._windows(activity_days, activity_type_id)
        if windows is None:
            return None

        end = len(windows) - 1
        if windows.average(0, end) > desired_frequency:
            return None
        result = windows.result(0, end)
        if not self._meets_floor(result, desired_frequency):
            return None
        if not self._is_recent(windows, activity_type_id, desired_frequency, today):
            return None
        return result

    def search(
        self,
        activity_days: Sequence[date],
        activity_type_id: str,
        desired_frequency: float,
        today: date,
    ) -> StreakSummary:
        """Run all three streak queries."""
        summary = StreakSummary(
            longest=self.longest(activity_days, activity_type_id, desired_frequency),
            current=self.current(activity_days, activity_type_id, desired_frequency, today),
            perfect=self.perfect(activity_days, activity_type_id, desired_frequency, today),
        )
        logger.debug(f"Streaks for type {activity_type_id}: {summary}")
        return summary


__all__ = ["DEFAULT_FLOOR_MULTIPLE", "StreakSearch"]
