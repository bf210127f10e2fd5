"""Off-time module for the frequency engine.

Provides off-time periods and the per-request exclusion index.
"""

from .index import OffTimeIndex
from .models import OffTimePeriod, parse_calendar_day

__all__ = [
    "OffTimeIndex",
    "OffTimePeriod",
    "parse_calendar_day",
]
