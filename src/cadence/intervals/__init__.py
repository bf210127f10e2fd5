"""Intervals module for the frequency engine.

Provides net gaps, rolling averages and trend detection.
"""

from .calculator import IntervalCalculator, Trend, round_one_decimal

__all__ = [
    "IntervalCalculator",
    "Trend",
    "round_one_decimal",
]
