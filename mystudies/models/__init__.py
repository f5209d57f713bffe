"""
Data models for the grade tracker.

This package contains all dataclasses and enums used throughout the system.
These serve as "contracts" between different parts of the system.
"""

from .course import CourseRecord, SortField, new_record_id
from .stats import GradeStats
from .events import ChangeEvent, ChangeKind

__all__ = [
    # Course models
    "CourseRecord",
    "SortField",
    "new_record_id",
    # Statistics
    "GradeStats",
    # Change notifications
    "ChangeEvent",
    "ChangeKind",
]
