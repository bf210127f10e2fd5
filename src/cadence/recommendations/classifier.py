"""Urgency classification for an activity type.

Maps the days since the last activity and the desired frequency, both in
days, to a status band and a sort priority.
"""

import math
from enum import Enum


class RecommendationStatus(Enum):
    """How urgently an activity type should be done again."""

    AHEAD = "ahead"
    DUE_SOON = "due_soon"
    DUE_TODAY = "due_today"
    OVERDUE = "overdue"
    CRITICALLY_OVERDUE = "critically_overdue"
    NO_DATA = "no_data"


# Never-performed types sort above every finite priority.
NO_DATA_PRIORITY = math.inf

# Priority for a type without a usable (positive) target.
NO_TARGET_PRIORITY = 0.0


def status_for_difference(difference: float) -> RecommendationStatus:
    """Status band for days since last activity minus desired frequency.

    Bands: (4, inf) critically overdue, (2, 4] overdue, [1, 2] due soon,
    [-1, 1) due today, (-inf, -1) ahead.
    """
    if difference > 4:
        return RecommendationStatus.CRITICALLY_OVERDUE
    if difference > 2:
        return RecommendationStatus.OVERDUE
    if difference >= 1:
        return RecommendationStatus.DUE_SOON
    if difference >= -1:
        return RecommendationStatus.DUE_TODAY
    return RecommendationStatus.AHEAD


def classify(
    days_since_last: int | None,
    desired_frequency: float,
) -> tuple[RecommendationStatus, float]:
    """Classify an activity type.

    Args:
        days_since_last: Off-time adjusted days since the last activity, or
            None if it was never performed
        desired_frequency: Target days between activities

    Returns:
        (status, priority score); a higher score is more urgent
    """
    if days_since_last is None:
        return RecommendationStatus.NO_DATA, NO_DATA_PRIORITY
    if desired_frequency <= 0:
        return RecommendationStatus.NO_DATA, NO_TARGET_PRIORITY

    difference = days_since_last - desired_frequency
    return status_for_difference(difference), days_since_last / desired_frequency


__all__ = [
    "NO_DATA_PRIORITY",
    "NO_TARGET_PRIORITY",
    "RecommendationStatus",
    "classify",
    "status_for_difference",
]
