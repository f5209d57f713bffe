"""
Statistics and ordering engines.

This package contains the pure logic that runs before every redisplay:
summary statistics and the table's sort order.
"""

from .aggregator import GradeAggregator
from .sorting import SortEngine, SortState, UnicodeCollator, LocaleCollator

__all__ = [
    "GradeAggregator",
    "SortEngine",
    "SortState",
    "UnicodeCollator",
    "LocaleCollator",
]
