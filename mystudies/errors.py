"""
Error hierarchy for the grade tracker.

Only failures the user must be told about are exceptions. Lenient paths
(editing a numeric field with garbage, reading corrupted storage, updating
an unknown id) never raise.

    MyStudiesError
    ├── ValidationError     add-path input rejected before any mutation
    └── ImportFormatError   import file unreadable or not a list of courses
"""

from typing import Optional


class MyStudiesError(Exception):
    """Base exception for all user-facing tracker errors."""

    code = "mystudies_error"

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code

    def to_dict(self) -> dict:
        """Render the error for a display layer."""
        return {"code": self.code, "message": self.message}


class ValidationError(MyStudiesError):
    """A new course was rejected by the strict add-path policy."""

    code = "validation_error"

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["field"] = self.field
        return data


class ImportFormatError(MyStudiesError):
    """External course data could not be parsed or has the wrong shape."""

    code = "import_format_error"
