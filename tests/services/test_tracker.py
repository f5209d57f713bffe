"""GradeTracker tests: the mutate → save → redisplay pipeline.

Tests cover:
    - Add path validation (nothing saved or rendered on failure)
    - Every mutation is saved before it is rendered, with sorted rows
    - Sorting re-renders but never changes stored order
    - Import (replace, confirmed) vs demo data (append, confirmed)
    - Export / import round trip, report printing
"""

import json

import pytest

from mystudies import GradeTracker, STORAGE_KEY
from mystudies.config import CONFIRM_CLEAR, CONFIRM_DEMO, CONFIRM_IMPORT, DEMO_COURSES
from mystudies.data import MemoryStorage
from mystudies.errors import ImportFormatError, ValidationError
from mystudies.models import SortField

HUGE_PAYLOAD = '[{"id": "a", "name": "X", "ects": 1' + "0" * 400 + ', "grade": 5}]'


def _stored(storage):
    raw = storage.get_item(STORAGE_KEY)
    return json.loads(raw) if raw is not None else None


def _names(records):
    return [r.name for r in records]


# --- add / edit / delete --------------------------------------------------------

def test_example_scenario_statistics(tracker):
    tracker.add_course("Calculus", 6, 4.5)
    tracker.add_course("Physics", 6, 9.0)
    stats = tracker.stats()
    assert stats.total_credits == 12
    assert stats.weighted_average == 6.75
    assert stats.passed_count == 1
    assert stats.total_count == 2


def test_add_course_accepts_form_strings(tracker):
    record = tracker.add_course("  Calculus ", "6", "4,5")
    assert record.triple() == ("Calculus", 6, 4.5)


def test_add_course_is_saved_and_rendered(tracker, storage, display):
    tracker.add_course("Calculus", "6", "4,5")
    assert [item["name"] for item in _stored(storage)] == ["Calculus"]
    assert _names(display.last["rows"]) == ["Calculus"]
    assert display.last["stats"].total_count == 1


def test_invalid_add_changes_nothing(tracker, storage, display):
    with pytest.raises(ValidationError):
        tracker.add_course("", "6", "5")
    with pytest.raises(ValidationError):
        tracker.add_course("Calculus", "six", "5")
    with pytest.raises(ValidationError):
        tracker.add_course("Calculus", "6", "")
    assert len(tracker.store) == 0
    assert _stored(storage) is None
    assert display.renders == []


def test_edit_with_comma_decimal(tracker, storage):
    record = tracker.add_course("Calculus", 6, 4.5)
    tracker.edit_course(record.id, "grade", "8,5")
    assert tracker.store.get(record.id).grade == 8.5
    assert _stored(storage)[0]["grade"] == 8.5


def test_edit_with_garbage_keeps_credits(tracker):
    record = tracker.add_course("Calculus", 6, 4.5)
    tracker.edit_course(record.id, "credits", "abc")
    assert tracker.store.get(record.id).credits == 6


def test_edit_unknown_id_is_silent(tracker, display):
    tracker.add_course("Calculus", 6, 4.5)
    renders = len(display.renders)
    assert tracker.edit_course("nope", "grade", "9") is False
    assert len(display.renders) == renders


def test_delete_course(tracker, storage):
    keep = tracker.add_course("Physics", 6, 9)
    gone = tracker.add_course("Calculus", 6, 4.5)
    tracker.delete_course(gone.id)
    assert [item["id"] for item in _stored(storage)] == [keep.id]


def test_save_happens_before_render(storage, display, confirmer):
    order = []

    class SpyStorage(type(storage)):
        def set_item(self, key, value):
            order.append("save")
            super().set_item(key, value)

    class SpyDisplay:
        def render(self, rows, stats, sort_state=None):
            order.append("render")

    tracker = GradeTracker(storage=SpyStorage(), display=SpyDisplay(), confirm=confirmer)
    tracker.add_course("Physics", 6, 9)
    assert order == ["save", "render"]


# --- persistence across sessions ------------------------------------------------

def test_courses_survive_a_restart(storage, display, confirmer):
    first = GradeTracker(storage=storage, display=display, confirm=confirmer)
    record = first.add_course("Physics", 6, 9)
    second = GradeTracker(storage=storage, display=display, confirm=confirmer)
    assert second.store.records == [record]


def test_corrupted_storage_starts_empty(storage, display, confirmer):
    storage.set_item(STORAGE_KEY, "{corrupted")
    tracker = GradeTracker(storage=storage, display=display, confirm=confirmer)
    assert len(tracker.store) == 0


def test_huge_stored_integer_does_not_break_startup(storage, display, confirmer):
    storage.set_item(STORAGE_KEY, HUGE_PAYLOAD)
    tracker = GradeTracker(storage=storage, display=display, confirm=confirmer)
    assert [r.triple() for r in tracker.store.records] == [("X", 0, 5)]


def test_import_with_huge_integer_is_clamped(tracker):
    assert tracker.import_text(HUGE_PAYLOAD) is True
    assert [r.triple() for r in tracker.store.records] == [("X", 0, 5)]


def test_failed_save_still_redisplays(display, confirmer):
    class ReadOnlyStorage(MemoryStorage):
        def set_item(self, key, value):
            raise OSError("disk full")

    tracker = GradeTracker(storage=ReadOnlyStorage(), display=display, confirm=confirmer)
    with pytest.raises(OSError):
        tracker.add_course("Physics", 6, 9)
    assert _names(display.last["rows"]) == ["Physics"]


# --- sorting ---------------------------------------------------------------------

def test_rows_are_sorted_by_name_by_default(tracker):
    tracker.add_course("βήτα", 5, 5)
    tracker.add_course("Άλφα", 5, 5)
    assert _names(tracker.rows()) == ["Άλφα", "βήτα"]


def test_sort_by_toggles_and_renders(tracker, display):
    tracker.add_course("A", 5, 3)
    tracker.add_course("B", 5, 9)
    tracker.sort_by("grade")
    assert display.last["sort"] == (SortField.GRADE, True)
    assert _names(display.last["rows"]) == ["A", "B"]
    tracker.sort_by("grade")
    assert display.last["sort"] == (SortField.GRADE, False)
    assert _names(display.last["rows"]) == ["B", "A"]
    tracker.sort_by("grade")
    assert display.last["sort"] == (SortField.GRADE, True)


def test_sorting_does_not_change_stored_order(tracker, storage):
    tracker.add_course("Zoology", 5, 5)
    tracker.add_course("Algebra", 5, 5)
    tracker.sort_by("name")
    tracker.edit_course(tracker.store.records[0].id, "grade", "6")
    assert [item["name"] for item in _stored(storage)] == ["Zoology", "Algebra"]
    assert _names(tracker.store.records) == ["Zoology", "Algebra"]


def test_render_after_mutation_uses_current_sort(tracker, display):
    tracker.sort_by("credits")
    tracker.add_course("Heavy", 10, 5)
    tracker.add_course("Light", 2, 5)
    assert _names(display.last["rows"]) == ["Light", "Heavy"]


# --- clear ---------------------------------------------------------------------

def test_clear_all_confirmed(tracker, storage, confirmer):
    tracker.add_course("Physics", 6, 9)
    assert tracker.clear_all() is True
    assert confirmer.messages[-1] == CONFIRM_CLEAR
    assert _stored(storage) == []


def test_clear_all_declined(tracker, storage, confirmer):
    tracker.add_course("Physics", 6, 9)
    confirmer.answer = False
    assert tracker.clear_all() is False
    assert len(tracker.store) == 1
    assert len(_stored(storage)) == 1


# --- import / export ---------------------------------------------------------------

def test_import_replaces_after_confirmation(tracker, confirmer):
    tracker.add_course("Old", 5, 5)
    payload = json.dumps([{"name": "New", "ects": 6, "grade": "7,5"}])
    assert tracker.import_text(payload) is True
    assert confirmer.messages[-1] == CONFIRM_IMPORT
    assert [r.triple() for r in tracker.store.records] == [("New", 6, 7.5)]


def test_import_declined_keeps_courses(tracker, confirmer):
    tracker.add_course("Old", 5, 5)
    confirmer.answer = False
    assert tracker.import_text(json.dumps([{"name": "New"}])) is False
    assert _names(tracker.store.records) == ["Old"]


def test_import_non_array_keeps_courses(tracker, storage, confirmer):
    tracker.add_course("Old", 5, 5)
    with pytest.raises(ImportFormatError):
        tracker.import_text(json.dumps({"name": "New"}))
    assert _names(tracker.store.records) == ["Old"]
    assert [item["name"] for item in _stored(storage)] == ["Old"]
    assert CONFIRM_IMPORT not in confirmer.messages


def test_import_from_missing_file(tracker, tmp_path):
    with pytest.raises(ImportFormatError) as exc:
        tracker.import_from(tmp_path / "missing.json")
    assert "Could not read" in exc.value.message


def test_export_then_import_round_trip(tracker, tmp_path):
    tracker.add_course("Calculus", 6, 4.5)
    tracker.add_course("Βάσεις Δεδομένων", 6, 9.3)
    before = sorted(r.triple() for r in tracker.store.records)
    old_ids = {r.id for r in tracker.store.records}

    path = tracker.export_to(tmp_path / "backup.json")
    tracker.import_from(path)

    assert sorted(r.triple() for r in tracker.store.records) == before
    assert not old_ids & {r.id for r in tracker.store.records}


def test_export_text_contains_ids(tracker):
    record = tracker.add_course("Calculus", 6, 4.5)
    assert json.loads(tracker.export_text())[0]["id"] == record.id


# --- demo data -------------------------------------------------------------------

def test_load_demo_appends(tracker, confirmer):
    tracker.add_course("Mine", 5, 5)
    assert tracker.load_demo() == len(DEMO_COURSES)
    assert confirmer.messages[-1] == CONFIRM_DEMO
    assert len(tracker.store) == len(DEMO_COURSES) + 1
    assert tracker.store.records[0].name == "Mine"


def test_load_demo_declined(tracker, confirmer):
    confirmer.answer = False
    assert tracker.load_demo() == 0
    assert len(tracker.store) == 0


# --- report ----------------------------------------------------------------------

def test_print_report_to_file(tracker, tmp_path):
    tracker.add_course("Calculus", 6, 4.5)
    tracker.add_course("Physics", 6, 9.0)
    target = tracker.print_report(tmp_path / "report.txt")
    text = target.read_text(encoding="utf-8")
    assert "Calculus" in text
    assert "6,75" in text
    assert "\033[" not in text


def test_print_report_to_stdout(tracker, capsys):
    tracker.add_course("Calculus", 6, 4.5)
    assert tracker.print_report() is None
    assert "Calculus" in capsys.readouterr().out
