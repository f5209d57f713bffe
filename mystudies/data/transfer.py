"""
Import normalization and export.

Import accepts any JSON the user hands us and turns it into valid
CourseRecords. The only thing that makes an import fail is the overall
shape: the top level must be a list, and each entry must be an object.
Inside an entry everything is coerced:

    name            → trimmed text, "" when missing
    ects / credits  → number (comma decimals allowed), 0 when unreadable, clamped to [0, 60]
    grade           → number, 0 when unreadable, clamped to [0, 10]
    id              → ignored, a fresh one is assigned

Export is the dual: the current records as pretty JSON in the same shape as
the stored data, ids included.
"""

import json
from typing import Callable, Optional

from ..errors import ImportFormatError
from ..models import CourseRecord, new_record_id
from .numbers import to_number, clamp_credits, clamp_grade, clean_name


def normalize_item(item: dict, record_id: str) -> CourseRecord:
    """
    Coerce one raw dict into a CourseRecord with the given id.

    The credits value is read from "ects" (the stored field name) and falls
    back to "credits".
    """
    credits = item.get("ects")
    if credits is None:
        credits = item.get("credits")
    return CourseRecord(
        id=record_id,
        name=clean_name(item.get("name")),
        credits=clamp_credits(to_number(credits)),
        grade=clamp_grade(to_number(item.get("grade"))),
    )


def normalize_items(data, id_factory: Optional[Callable[[], str]] = None) -> list:
    """
    Normalize already-decoded import data.

    Args:
        data: Decoded JSON (anything)
        id_factory: Callable returning fresh ids (defaults to new_record_id)

    Returns:
        List of CourseRecord in input order

    Raises:
        ImportFormatError if data is not a list or an entry is not an object
    """
    if not isinstance(data, list):
        raise ImportFormatError("Invalid file format: expected a list of courses.")
    make_id = id_factory or new_record_id
    records = []
    for index, item in enumerate(data):
        if not isinstance(item, dict):
            raise ImportFormatError(
                f"Invalid file format: entry {index + 1} is not a course object."
            )
        records.append(normalize_item(item, make_id()))
    return records


def parse_import(text: str, id_factory: Optional[Callable[[], str]] = None) -> list:
    """
    Parse the text of an import file into CourseRecords.

    Raises:
        ImportFormatError for invalid JSON or a wrong top-level shape
    """
    try:
        data = json.loads(text)
    except (TypeError, ValueError) as e:
        raise ImportFormatError(f"Invalid file format: not valid JSON ({e}).") from e
    return normalize_items(data, id_factory)


def export_json(records) -> str:
    """Serialize records as an indented JSON array (stored shape, ids included)."""
    return json.dumps([r.to_dict() for r in records], indent=2, ensure_ascii=False)
