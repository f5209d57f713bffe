"""
Statistics engine.

Computes the summary shown under the course table.
"""

from ..config import PASS_THRESHOLD
from ..models import GradeStats


class GradeAggregator:
    """
    Computes GradeStats for a list of courses.

    FORMULAS:
    ---------
    total_credits    = Σ credits
    weighted_average = Σ (grade × credits) / total_credits
                       NaN when total_credits is 0
    passed_count     = number of courses with grade ≥ PASS_THRESHOLD
    total_count      = number of courses

    compute() only reads the records; calling it any number of times on the
    same list gives the same result.
    """

    def __init__(self, pass_threshold: float = PASS_THRESHOLD):
        self.pass_threshold = pass_threshold

    def compute(self, records) -> GradeStats:
        total_credits = 0.0
        weighted_sum = 0.0
        passed = 0
        count = 0
        for r in records:
            credits = r.credits or 0.0
            grade = r.grade or 0.0
            total_credits += credits
            weighted_sum += grade * credits
            if grade >= self.pass_threshold:
                passed += 1
            count += 1

        average = weighted_sum / total_credits if total_credits > 0 else float("nan")
        return GradeStats(
            total_credits=total_credits,
            weighted_average=average,
            passed_count=passed,
            total_count=count,
        )
