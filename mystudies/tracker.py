"""
Grade Tracker - Main Orchestrator.

This module contains the GradeTracker class that connects the record store
and engines (algorithm layer) to storage and to the presentation layer.
"""

import logging
from pathlib import Path
from typing import Callable, Optional

from .config import CONFIRM_DEMO, DEMO_COURSES, EXPORT_FILENAME
from .data import PersistenceAdapter, validate_new_course, parse_import, export_json
from .engines import GradeAggregator, SortEngine
from .errors import ImportFormatError
from .models import ChangeEvent, CourseRecord, GradeStats
from .store import RecordStore
from .ui import TerminalDisplay

logger = logging.getLogger(__name__)


def _always_confirm(message: str) -> bool:
    return True


class GradeTracker:
    """
    Main interface for the grade tracker.

    ═══════════════════════════════════════════════════════════════════════════
    ROLE: ORCHESTRATOR
    ═══════════════════════════════════════════════════════════════════════════

    1. Restores the course list from storage at construction
    2. Forwards user intents (add, edit, delete, sort, import, ...) to the
       RecordStore / SortEngine
    3. Listens to store changes: first saves, then redisplays

    Every redisplay sorts a copy of the list and recomputes the statistics,
    so what is shown always reflects the state after the last mutation.

    TO CHANGE THE UI:
    -----------------
    Pass any object with render(rows, stats, sort_state) as display.

    ═══════════════════════════════════════════════════════════════════════════

    USAGE:
        tracker = GradeTracker(confirm=ask_yes_no)
        tracker.add_course("Calculus", "6", "4,5")
        tracker.sort_by("grade")
        tracker.export_to("backup.json")
    """

    def __init__(self, storage=None, display=None,
                 confirm: Optional[Callable[[str], bool]] = None,
                 collator: Optional[Callable[[str, str], int]] = None):
        self.confirm = confirm or _always_confirm
        self.persistence = PersistenceAdapter(storage)
        self.store = RecordStore(self.persistence.load(), confirm=self.confirm)
        self.sorter = SortEngine(collator)
        self.aggregator = GradeAggregator()
        self.display = display if display is not None else TerminalDisplay()

        # Order matters: the file is written before the screen is redrawn
        self.store.subscribe(self._save_on_change)
        self.store.subscribe(self._render_on_change)

    # -------------------------------------------------------------------------
    # View
    # -------------------------------------------------------------------------

    def rows(self) -> list:
        """Courses in display order."""
        return self.sorter.sorted(self.store.records)

    def stats(self) -> GradeStats:
        return self.aggregator.compute(self.store.records)

    def refresh(self):
        """Recompute and redisplay everything."""
        self.display.render(self.rows(), self.stats(), self.sorter.state)

    def _save_on_change(self, event: ChangeEvent):
        try:
            self.persistence.save(event.records)
        except OSError as e:
            # The change is already in memory; show it before reporting the failure
            logger.warning("Could not save courses: %s", e)
            self.refresh()
            raise

    def _render_on_change(self, event: ChangeEvent):
        self.refresh()

    # -------------------------------------------------------------------------
    # Intents
    # -------------------------------------------------------------------------

    def add_course(self, name, credits, grade) -> CourseRecord:
        """
        Add a course typed in by the user.

        Raises:
            ValidationError for a blank name or unreadable credits/grade;
            nothing is added in that case.
        """
        name, credits, grade = validate_new_course(name, credits, grade)
        return self.store.add(name, credits, grade)

    def edit_course(self, record_id: str, field, value) -> bool:
        """Edit one field; unreadable numbers keep the previous value."""
        return self.store.update(record_id, field, value)

    def delete_course(self, record_id: str) -> bool:
        return self.store.delete(record_id)

    def clear_all(self) -> bool:
        cleared = self.store.clear()
        if cleared:
            logger.info("All courses deleted")
        return cleared

    def sort_by(self, field):
        """Apply a column selection and redisplay (sorting is not saved)."""
        state = self.sorter.select(field)
        self.refresh()
        return state

    def load_demo(self) -> int:
        """
        Append the sample courses after confirmation.

        Unlike import, demo data is added to the existing courses.

        Returns:
            Number of courses added (0 when declined)
        """
        if not self.confirm(CONFIRM_DEMO):
            return 0
        for course in DEMO_COURSES:
            self.store.add(course["name"], course["ects"], course["grade"])
        logger.info("Loaded %d demo course(s)", len(DEMO_COURSES),
                    extra={"count": len(DEMO_COURSES)})
        return len(DEMO_COURSES)

    # -------------------------------------------------------------------------
    # Import / export
    # -------------------------------------------------------------------------

    def export_text(self) -> str:
        """The current courses as pretty JSON (insertion order, ids included)."""
        return export_json(self.store.records)

    def export_to(self, path=None) -> Path:
        """Write the export file and return its path."""
        target = Path(path) if path is not None else Path(EXPORT_FILENAME)
        target.write_text(self.export_text() + "\n", encoding="utf-8")
        logger.info("Exported %d course(s)", len(self.store), extra={"path": target, "count": len(self.store)})
        return target

    def import_text(self, text: str) -> bool:
        """
        Replace all courses with the ones in text, after confirmation.

        Returns:
            True if the courses were replaced, False if the user declined

        Raises:
            ImportFormatError if text is not a JSON list of course objects;
            the current courses are untouched in that case.
        """
        try:
            records = parse_import(text, id_factory=self.store.next_id)
        except ImportFormatError as e:
            logger.warning("Import rejected: %s", e.message)
            raise
        replaced = self.store.replace_all(records)
        if replaced:
            logger.info("Imported %d course(s)", len(records), extra={"count": len(records)})
        return replaced

    def import_from(self, path) -> bool:
        """Read an import file and hand it to import_text()."""
        try:
            text = Path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Import file unreadable: %s", e, extra={"path": path})
            raise ImportFormatError(f"Could not read {path}: {e}") from e
        return self.import_text(text)

    # -------------------------------------------------------------------------
    # Print
    # -------------------------------------------------------------------------

    def report(self) -> str:
        """Printable plain-text version of the current view."""
        return TerminalDisplay.report_text(self.rows(), self.stats(), self.sorter.state)

    def print_report(self, path=None) -> Optional[Path]:
        """Write the report to path, or to stdout when no path is given."""
        text = self.report()
        if path is None:
            print(text, end="")
            return None
        target = Path(path)
        target.write_text(text, encoding="utf-8")
        return target
