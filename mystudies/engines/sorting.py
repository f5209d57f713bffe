"""
Sort engine.

Orders the course table by name, credits or grade. Name comparison is
delegated to a collator so the ordering logic does not depend on which
locales happen to be installed on the machine.
"""

import locale
import unicodedata
from dataclasses import dataclass
from functools import cmp_to_key
from typing import Callable, Union

from ..config import DEFAULT_SORT_FIELD
from ..models import SortField


def _sign(value: float) -> int:
    return (value > 0) - (value < 0)


class UnicodeCollator:
    """
    Case-insensitive alphabetic comparison for Greek and Latin names.

    Primary key: the casefolded name with accents removed, so "Άλφα",
    "άλφα" and "ΑΛΦΑ" are alphabetically the same word and sort before
    "βήτα". Final sigma folds to sigma. Secondary key: the casefolded name
    with accents, so names differing only in accents still get a fixed
    order. Names that differ only in case compare equal.
    """

    @staticmethod
    def key(text: str) -> tuple:
        folded = text.casefold()
        decomposed = unicodedata.normalize("NFD", folded)
        base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
        return (base, decomposed)

    def __call__(self, a: str, b: str) -> int:
        ka, kb = self.key(a), self.key(b)
        if ka < kb:
            return -1
        if ka > kb:
            return 1
        return 0


class LocaleCollator:
    """
    Collation through the platform's locale database.

    Sets LC_COLLATE for the whole process (the tracker is single-threaded).
    Raises locale.Error when the locale is not installed.

    Usage:
        engine = SortEngine(collator=LocaleCollator("el_GR.UTF-8"))
    """

    def __init__(self, locale_name: str):
        self.locale_name = locale_name
        locale.setlocale(locale.LC_COLLATE, locale_name)

    def __call__(self, a: str, b: str) -> int:
        return _sign(locale.strcoll(a.casefold(), b.casefold()))


@dataclass
class SortState:
    """Current sort column and direction."""
    field: SortField = SortField(DEFAULT_SORT_FIELD)
    ascending: bool = True


class SortEngine:
    """
    Keeps the sort state and produces the display order.

    INTERACTION RULE:
    -----------------
    Selecting the column that is already active flips the direction.
    Selecting another column switches to it, ascending.

    The engine never reorders the store's list: sorted() returns a new list
    and the stored (insertion) order stays as it was.

    Usage:
        engine = SortEngine()
        engine.select("grade")        # grade ascending
        engine.select("grade")        # grade descending
        rows = engine.sorted(store.records)
    """

    def __init__(self, collator: Callable[[str, str], int] = None):
        self.collator = collator or UnicodeCollator()
        self.state = SortState()

    @property
    def field(self) -> SortField:
        return self.state.field

    @property
    def ascending(self) -> bool:
        return self.state.ascending

    def select(self, field: Union[SortField, str]) -> SortState:
        """Apply a column click and return the new state."""
        field = SortField(field)
        if field == self.state.field:
            self.state.ascending = not self.state.ascending
        else:
            self.state.field = field
            self.state.ascending = True
        return self.state

    def compare(self, a, b) -> int:
        """Compare two records on the active column, ascending."""
        if self.state.field == SortField.NAME:
            return self.collator((a.name or "").strip(), (b.name or "").strip())
        attr = self.state.field.value
        va = getattr(a, attr, None)
        vb = getattr(b, attr, None)
        return _sign((va if va is not None else 0) - (vb if vb is not None else 0))

    def sorted(self, records) -> list:
        """Return records in display order; equal rows keep their stored order."""
        return sorted(records, key=cmp_to_key(self.compare), reverse=not self.state.ascending)
