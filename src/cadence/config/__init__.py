"""Configuration module for the frequency engine.

This module provides configuration loading and profile management.
"""

from dataclasses import dataclass, field


@dataclass
class EngineConfig:
    """Analytics engine configuration."""

    default_time_zone: str = "America/New_York"
    short_window: int = 3
    long_window: int = 10
    streak_floor_multiple: float = 3.0
    trend_stable_threshold: float = 0.5
    suggestion_threshold: float = 1.0


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    format: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"


@dataclass
class CadenceConfig:
    """Main configuration."""

    engine: EngineConfig = field(default_factory=EngineConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


__all__ = [
    "CadenceConfig",
    "EngineConfig",
    "LoggingConfig",
]
