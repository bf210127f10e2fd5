"""Digest module for the frequency engine.

Provides season reviews and lifetime analytics.
"""

from .analytics import AnalyticsBuilder, AnalyticsSummary
from .season import (
    ActivityTypeReview,
    SeasonAggregator,
    SeasonReview,
    SeasonSuggestion,
    SuggestionKind,
)

__all__ = [
    "ActivityTypeReview",
    "AnalyticsBuilder",
    "AnalyticsSummary",
    "SeasonAggregator",
    "SeasonReview",
    "SeasonSuggestion",
    "SuggestionKind",
]
