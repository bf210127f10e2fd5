"""Error types for the frequency engine.

Custom exceptions raised for caller and configuration errors. Empty
histories and missing targets are not errors and never raise.
"""

from datetime import date


class CadenceError(Exception):
    """Base exception for engine errors."""

    pass


class InvalidTimeZone(CadenceError, ValueError):
    """Raised when a time zone name is not a known IANA zone."""

    def __init__(self, time_zone: object) -> None:
        """Initialize time zone error.

        Args:
            time_zone: The rejected zone name.
        """
        super().__init__(f"Unknown time zone: {time_zone!r}")
        self.time_zone = time_zone


class InvalidRange(CadenceError, ValueError):
    """Raised when a calendar-day range starts after it ends."""

    def __init__(self, start: date, end: date) -> None:
        """Initialize range error.

        Args:
            start: First day of the range.
            end: Last day of the range.
        """
        super().__init__(f"Invalid range: {start.isoformat()} is after {end.isoformat()}")
        self.start = start
        self.end = end


__all__ = [
    "CadenceError",
    "InvalidRange",
    "InvalidTimeZone",
]
