"""Recommendations module for the frequency engine.

Provides urgency classification and the ranked recommendation list.
"""

from .builder import DueBuckets, Recommendation, RecommendationBuilder, partition_due, rank
from .classifier import (
    NO_DATA_PRIORITY,
    NO_TARGET_PRIORITY,
    RecommendationStatus,
    classify,
    status_for_difference,
)

__all__ = [
    "NO_DATA_PRIORITY",
    "NO_TARGET_PRIORITY",
    "DueBuckets",
    "Recommendation",
    "RecommendationBuilder",
    "RecommendationStatus",
    "classify",
    "partition_due",
    "rank",
    "status_for_difference",
]
