"""
Persistence adapter.

Saves the whole course list under one versioned key and restores it at
startup. Loading never fails: anything unexpected in storage means "start
with an empty list".
"""

import json
import logging

from ..config import STORAGE_KEY
from ..models import new_record_id
from .storage import JsonFileStorage
from .transfer import normalize_item

logger = logging.getLogger(__name__)


class PersistenceAdapter:
    """
    Reads and writes the course list in a string-keyed storage.

    STORED LAYOUT:
    One key (STORAGE_KEY) whose value is the JSON text of an array of
    {"id", "name", "ects", "grade"} objects, in insertion order. There is no
    schema version field; a new record shape gets a new key.

    READ TOLERANCE:
    - missing key, invalid JSON, top level not an array,
      or an entry that is not an object     → empty list
    - out-of-range or unreadable numbers    → coerced like an import
    - missing or duplicate ids              → fresh ids

    Usage:
        adapter = PersistenceAdapter(JsonFileStorage())
        records = adapter.load()
        adapter.save(records)
    """

    def __init__(self, storage=None, key: str = STORAGE_KEY):
        self.storage = storage if storage is not None else JsonFileStorage()
        self.key = key

    def save(self, records) -> None:
        """Overwrite the stored list with records."""
        payload = json.dumps([r.to_dict() for r in records], ensure_ascii=False)
        self.storage.set_item(self.key, payload)
        logger.debug("Saved %d course(s)", len(records), extra={"count": len(records)})

    def load(self) -> list:
        """Return the stored records, or an empty list if there is nothing usable."""
        raw = self.storage.get_item(self.key)
        if raw is None:
            return []
        try:
            data = json.loads(raw)
        except ValueError:
            logger.warning("Stored course data is not valid JSON; starting empty")
            return []
        if not isinstance(data, list):
            logger.warning("Stored course data is not a list; starting empty")
            return []
        if not all(isinstance(item, dict) for item in data):
            logger.warning("Stored course data has non-object entries; starting empty")
            return []

        records = []
        seen = set()
        for item in data:
            record_id = item.get("id")
            if not isinstance(record_id, str) or not record_id or record_id in seen:
                record_id = new_record_id()
                while record_id in seen:
                    record_id = new_record_id()
            seen.add(record_id)
            records.append(normalize_item(item, record_id))

        logger.debug("Loaded %d course(s)", len(records), extra={"count": len(records)})
        return records
