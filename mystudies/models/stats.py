"""
Statistics data model.

Contains the GradeStats dataclass returned by the aggregator.
"""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class GradeStats:
    """
    Derived statistics for a list of courses.

    Example for Calculus (6 ECTS, 4.5) and Physics (6 ECTS, 9.0):
        total_credits: 12.0
        weighted_average: 6.75
        passed_count: 1
        total_count: 2

    weighted_average is NaN when there is no credit weight at all (no courses,
    or only zero-credit courses). Displays show a dash for it, never 0.
    """
    total_credits: float
    weighted_average: float
    passed_count: int
    total_count: int

    @property
    def has_average(self) -> bool:
        return math.isfinite(self.weighted_average)
