"""Activities module for the frequency engine.

Provides activity records, activity types and desired frequencies.
"""

from .models import (
    ActivityRecord,
    ActivityType,
    DesiredFrequency,
    SeasonalFrequency,
    resolve_frequency,
    tag_membership,
)

__all__ = [
    "ActivityRecord",
    "ActivityType",
    "DesiredFrequency",
    "SeasonalFrequency",
    "resolve_frequency",
    "tag_membership",
]
