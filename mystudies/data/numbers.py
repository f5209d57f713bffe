"""
Number parsing and the two validation policies.

Users type numbers either way: "8.5" or "8,5". to_number() accepts both and
returns NaN for anything it cannot read. What happens to a NaN depends on
where the value came from, and the two call sites deliberately differ:

    ADD PATH (strict_number / validate_new_course):
        An unreadable number rejects the new course with a ValidationError.
        Nothing is added.

    EDIT PATH (lenient_number):
        An unreadable number is ignored and the field keeps its old value.
        No error is shown.
"""

import math

from ..config import CREDITS_MIN, CREDITS_MAX, GRADE_MIN, GRADE_MAX
from ..errors import ValidationError

NAN = float("nan")
INF = float("inf")


def to_number(value) -> float:
    """
    Parse a user or file supplied value as a float.

    - ints and floats pass through (bools do not count as numbers); ints
      too large for a float become +/-infinity
    - strings: the first "," becomes ".", surrounding whitespace is ignored
    - empty strings, unreadable strings (including "1_000" digit groups)
      and any other type give NaN
    """
    if isinstance(value, bool):
        return NAN
    if isinstance(value, (int, float)):
        try:
            return float(value)
        except OverflowError:
            return INF if value > 0 else -INF
    if not isinstance(value, str):
        return NAN
    cleaned = value.replace(",", ".", 1).strip()
    if cleaned == "" or "_" in cleaned:
        return NAN
    try:
        return float(cleaned)
    except ValueError:
        return NAN


def clamp(value: float, low: float, high: float) -> float:
    return min(high, max(low, value))


def finite_or_zero(value: float) -> float:
    return value if math.isfinite(value) else 0.0


def clamp_credits(value: float) -> float:
    """Clamp a credit weight to [0, 60]; non-finite values become 0."""
    return clamp(finite_or_zero(value), CREDITS_MIN, CREDITS_MAX)


def clamp_grade(value: float) -> float:
    """Clamp a grade to [0, 10]; non-finite values become 0."""
    return clamp(finite_or_zero(value), GRADE_MIN, GRADE_MAX)


def clean_name(value) -> str:
    """Course names are trimmed text; None becomes the empty string."""
    if value is None:
        return ""
    return str(value).strip()


# =============================================================================
# STRICT POLICY (add path)
# =============================================================================

def strict_number(value, field: str, message: str) -> float:
    """Parse value or raise ValidationError(message) when it is not a finite number."""
    number = to_number(value)
    if not math.isfinite(number):
        raise ValidationError(message, field=field)
    return number


def validate_new_course(name, credits, grade) -> tuple:
    """
    Check the fields of a course typed into the add form.

    Returns:
        (name, credits, grade) with the name trimmed and the numbers parsed
        (not yet clamped; RecordStore.add clamps).

    Raises:
        ValidationError for a blank name or an unreadable number. Checks run
        in form order so the user sees the first problem.
    """
    cleaned = clean_name(name)
    if not cleaned:
        raise ValidationError("Enter a course name.", field="name")
    credits_value = strict_number(credits, "credits", "Enter valid credits (ECTS).")
    grade_value = strict_number(grade, "grade", "Enter a valid grade (0–10).")
    return cleaned, credits_value, grade_value


# =============================================================================
# LENIENT POLICY (edit path)
# =============================================================================

def lenient_number(value, current: float, low: float, high: float) -> float:
    """Parse and clamp value, or return current unchanged when it is not a finite number."""
    number = to_number(value)
    if not math.isfinite(number):
        return current
    return clamp(number, low, high)
