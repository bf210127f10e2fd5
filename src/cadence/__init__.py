"""Cadence - frequency and off-time analytics for recurring activities.

Cadence turns a history of timestamped activities, a desired frequency and
a set of off-time periods into:
- Urgency status and priority (ahead, due today, overdue, ...)
- Rolling averages of the gaps between activities
- Longest, current and perfect streaks
- Season reviews

All calendar arithmetic happens on civil dates in the user's time zone.
The engine performs no I/O and never reads the system clock.

Usage:
    python -m cadence recommendations history.yaml --as-of 2024-03-01T12:00:00Z
    python -m cadence season history.yaml --season winter --year 2023
"""

__version__ = "0.1.0"

from .config import CadenceConfig
from .config.loader import load_config
from .engine import FrequencyEngine
from .errors import CadenceError, InvalidRange, InvalidTimeZone

__all__ = [
    "CadenceConfig",
    "CadenceError",
    "FrequencyEngine",
    "InvalidRange",
    "InvalidTimeZone",
    "__version__",
    "load_config",
]
