"""
Course data models.

Contains the CourseRecord dataclass and the SortField enum that describe a
student's list of courses.
"""

import secrets
from dataclasses import dataclass
from enum import Enum

from ..config import PASS_THRESHOLD


class SortField(Enum):
    """
    Columns the course table can be sorted by.

    The values double as the field names accepted by RecordStore.update().
    """
    NAME = "name"
    CREDITS = "credits"
    GRADE = "grade"


def new_record_id() -> str:
    """Return a short random identifier (8 hex characters)."""
    return secrets.token_hex(4)


def _wire_number(value: float):
    """Write whole numbers as ints so exported files read naturally (6, not 6.0)."""
    if float(value).is_integer():
        return int(value)
    return value


@dataclass
class CourseRecord:
    """
    A single course on the student's list.

    Attributes:
        id: Opaque identifier, assigned once and never changed
        name: Course title, trimmed (may be empty for imported data)
        credits: Credit weight (ECTS), always within [0, 60]
        grade: Grade on the 0-10 scale

    On the wire (storage and export files) the credits field is called
    "ects".
    """
    id: str
    name: str
    credits: float
    grade: float

    @property
    def passed(self) -> bool:
        return self.grade >= PASS_THRESHOLD

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "ects": _wire_number(self.credits),
            "grade": _wire_number(self.grade),
        }

    def triple(self) -> tuple:
        """(name, credits, grade), the part of a record that survives export/import."""
        return (self.name, self.credits, self.grade)
