"""
Data handling module.

This package handles number parsing, storage, persistence and
import/export of course lists.
"""

from .numbers import (
    to_number,
    clamp,
    clamp_credits,
    clamp_grade,
    clean_name,
    strict_number,
    validate_new_course,
    lenient_number,
)
from .storage import JsonFileStorage, MemoryStorage
from .persistence import PersistenceAdapter
from .transfer import normalize_item, normalize_items, parse_import, export_json

__all__ = [
    "to_number",
    "clamp",
    "clamp_credits",
    "clamp_grade",
    "clean_name",
    "strict_number",
    "validate_new_course",
    "lenient_number",
    "JsonFileStorage",
    "MemoryStorage",
    "PersistenceAdapter",
    "normalize_item",
    "normalize_items",
    "parse_import",
    "export_json",
]
