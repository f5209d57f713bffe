"""
Record store.

The single owner of the in-memory course list. Every mutation runs to
completion and then notifies the subscribed listeners with a ChangeEvent.
"""

import logging
from dataclasses import replace
from typing import Callable, Optional

from .config import CREDITS_MIN, CREDITS_MAX, GRADE_MIN, GRADE_MAX, CONFIRM_CLEAR, CONFIRM_IMPORT
from .data.numbers import to_number, clamp_credits, clamp_grade, clean_name, lenient_number
from .models import CourseRecord, ChangeEvent, ChangeKind, SortField, new_record_id

logger = logging.getLogger(__name__)

# Accepted field names for update(); "ects" is the stored name of credits
_FIELD_ALIASES = {
    "name": SortField.NAME,
    "credits": SortField.CREDITS,
    "ects": SortField.CREDITS,
    "grade": SortField.GRADE,
}


def _always_confirm(message: str) -> bool:
    return True


class RecordStore:
    """
    Ordered collection of CourseRecords.

    ═══════════════════════════════════════════════════════════════════════════
    MUTATE → NOTIFY
    ═══════════════════════════════════════════════════════════════════════════

    add / update / delete / clear / replace_all change the list and then call
    every listener (in subscription order) with one ChangeEvent. The store
    knows nothing about files or screens; GradeTracker subscribes the
    persistence adapter first and the display second.

    Operations that do not happen emit nothing:
    - update() on an unknown id
    - clear() / replace_all() when the confirmation is declined

    ═══════════════════════════════════════════════════════════════════════════
    IDS
    ═══════════════════════════════════════════════════════════════════════════

    Every id the store has ever held or handed out is remembered, so an id is
    never given to a second record during the process lifetime, even after
    the first one was deleted. replace_all() re-keys incoming records whose
    id belongs to a live or removed record.

    Usage:
        store = RecordStore(confirm=lambda message: input(message) == "y")
        record = store.add("Calculus", 6, 4.5)
        store.update(record.id, "grade", "8,5")
        store.delete(record.id)
    """

    def __init__(self, records=None, confirm: Optional[Callable[[str], bool]] = None):
        self._records = []
        self._issued = set()
        self._retired = set()
        self._listeners = []
        self.confirm = confirm or _always_confirm
        for record in records or []:
            if record.id in self._issued:
                record = replace(record, id=self.next_id())
            self._issued.add(record.id)
            self._records.append(record)

    # -------------------------------------------------------------------------
    # Read access
    # -------------------------------------------------------------------------

    @property
    def records(self) -> list:
        """Copy of the list in insertion order."""
        return list(self._records)

    def get(self, record_id: str) -> Optional[CourseRecord]:
        for record in self._records:
            if record.id == record_id:
                return record
        return None

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self):
        return iter(list(self._records))

    # -------------------------------------------------------------------------
    # Listeners
    # -------------------------------------------------------------------------

    def subscribe(self, listener: Callable[[ChangeEvent], None]) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: Callable[[ChangeEvent], None]) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _emit(self, kind: ChangeKind, record_id: Optional[str] = None) -> ChangeEvent:
        event = ChangeEvent(kind=kind, record_id=record_id, records=tuple(self._records))
        logger.debug("Store changed: %s", kind.value,
                     extra={"event": kind.value, "record_id": record_id, "count": len(self._records)})
        for listener in list(self._listeners):
            listener(event)
        return event

    # -------------------------------------------------------------------------
    # Ids
    # -------------------------------------------------------------------------

    def next_id(self) -> str:
        """Hand out an id no record of this store has had before."""
        record_id = new_record_id()
        while record_id in self._issued:
            record_id = new_record_id()
        self._issued.add(record_id)
        return record_id

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def add(self, name, credits, grade) -> CourseRecord:
        """
        Append a new course.

        Numbers that are not finite become 0, then credits are clamped to
        [0, 60] and grade to [0, 10]. The name is trimmed. Input validation
        (rejecting a blank name or unreadable numbers) is the caller's job;
        see validate_new_course().
        """
        record = CourseRecord(
            id=self.next_id(),
            name=clean_name(name),
            credits=clamp_credits(to_number(credits)),
            grade=clamp_grade(to_number(grade)),
        )
        self._records.append(record)
        self._emit(ChangeKind.ADDED, record.id)
        return record

    def update(self, record_id: str, field, raw_value) -> bool:
        """
        Edit one field of a course in place.

        Unknown ids are ignored (returns False, nothing emitted). Numeric
        fields use the lenient edit policy: input that is not a number leaves
        the old value in place. The id itself can never be edited.

        Raises:
            ValueError for a field name other than name / credits (ects) / grade
        """
        key = field.value if isinstance(field, SortField) else str(field)
        if key not in _FIELD_ALIASES:
            raise ValueError(f"Unknown course field: {field!r}")
        target = _FIELD_ALIASES[key]

        record = self.get(record_id)
        if record is None:
            return False

        if target == SortField.NAME:
            record.name = clean_name(raw_value)
        elif target == SortField.CREDITS:
            record.credits = lenient_number(raw_value, record.credits, CREDITS_MIN, CREDITS_MAX)
        else:
            record.grade = lenient_number(raw_value, record.grade, GRADE_MIN, GRADE_MAX)

        self._emit(ChangeKind.UPDATED, record_id)
        return True

    def delete(self, record_id: str) -> bool:
        """Remove a course. Returns False if no course had that id (not an error)."""
        removed = [r for r in self._records if r.id == record_id]
        self._records = [r for r in self._records if r.id != record_id]
        self._retire(removed)
        self._emit(ChangeKind.DELETED, record_id)
        return bool(removed)

    def clear(self, message: str = CONFIRM_CLEAR) -> bool:
        """Delete every course after confirmation. Declining changes nothing."""
        if not self.confirm(message):
            return False
        self._retire(self._records)
        self._records = []
        self._emit(ChangeKind.CLEARED)
        return True

    def replace_all(self, records, message: str = CONFIRM_IMPORT) -> bool:
        """
        Swap the whole list for records after confirmation.

        Incoming records whose id was already used by this store (or appears
        twice in records) get a fresh id.
        """
        if not self.confirm(message):
            return False
        used = self._retired | {r.id for r in self._records}
        incoming = []
        seen = set()
        for record in records:
            if record.id in used or record.id in seen:
                record = replace(record, id=self.next_id())
            seen.add(record.id)
            self._issued.add(record.id)
            incoming.append(record)
        self._retire(self._records)
        self._records = incoming
        self._emit(ChangeKind.REPLACED)
        return True

    def _retire(self, records) -> None:
        self._retired.update(r.id for r in records)
