"""
Change event models.

Every mutating RecordStore operation emits exactly one ChangeEvent after the
mutation has completed. Persistence and the display subscribe to these
events instead of being called from inside each mutation.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class ChangeKind(Enum):
    """What happened to the collection."""
    ADDED = "added"
    UPDATED = "updated"
    DELETED = "deleted"
    CLEARED = "cleared"
    REPLACED = "replaced"


@dataclass(frozen=True)
class ChangeEvent:
    """
    Notification sent to store listeners.

    Attributes:
        kind: ChangeKind of the mutation
        record_id: Affected record for single-record operations, else None
        records: Snapshot of the collection after the mutation (insertion order)
    """
    kind: ChangeKind
    record_id: Optional[str] = None
    records: tuple = field(default_factory=tuple)
