"""Unit tests for urgency classification."""

import math

import pytest

from cadence.recommendations import (
    NO_DATA_PRIORITY,
    RecommendationStatus,
    classify,
    status_for_difference,
)


class TestStatusForDifference:
    """Tests for the status bands."""

    @pytest.mark.parametrize(
        ("difference", "expected"),
        [
            (-3, RecommendationStatus.AHEAD),
            (-1.5, RecommendationStatus.AHEAD),
            (-1, RecommendationStatus.DUE_TODAY),
            (0, RecommendationStatus.DUE_TODAY),
            (0.5, RecommendationStatus.DUE_TODAY),
            (1, RecommendationStatus.DUE_SOON),
            (2, RecommendationStatus.DUE_SOON),
            (2.5, RecommendationStatus.OVERDUE),
            (4, RecommendationStatus.OVERDUE),
            (4.5, RecommendationStatus.CRITICALLY_OVERDUE),
        ],
    )
    def test_bands(self, difference: float, expected: RecommendationStatus) -> None:
        """Boundaries fall into the band listed first in the table."""
        assert status_for_difference(difference) is expected


class TestClassify:
    """Tests for classify()."""

    @pytest.mark.parametrize(
        ("days_since", "expected"),
        [
            (0, RecommendationStatus.AHEAD),
            (1, RecommendationStatus.DUE_TODAY),
            (2, RecommendationStatus.DUE_TODAY),
            (3, RecommendationStatus.DUE_SOON),
            (4, RecommendationStatus.DUE_SOON),
            (6, RecommendationStatus.OVERDUE),
            (7, RecommendationStatus.CRITICALLY_OVERDUE),
        ],
    )
    def test_target_of_two_days(self, days_since: int, expected: RecommendationStatus) -> None:
        status, _ = classify(days_since, 2)
        assert status is expected

    def test_priority_is_ratio(self) -> None:
        """Priority is days since last over the target."""
        _, priority = classify(11, 4)
        assert priority == 2.75

    def test_never_performed(self) -> None:
        """Never-performed types outrank everything."""
        status, priority = classify(None, 7)
        assert status is RecommendationStatus.NO_DATA
        assert priority == NO_DATA_PRIORITY
        assert math.isinf(priority)

    @pytest.mark.parametrize("desired", [0, -2])
    def test_non_positive_target(self, desired: float) -> None:
        """Without a usable target there is no status and no urgency."""
        assert classify(5, desired) == (RecommendationStatus.NO_DATA, 0.0)
