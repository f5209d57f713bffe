"""
Command-Line Interface for the grade tracker.

This module provides the interactive menu. It handles user input and
forwards every action to GradeTracker, which saves and redisplays.

Run it with:
    python -m mystudies
    mystudies --storage ./my-courses.json
"""

import argparse

from .config import STORAGE_FILE, EXPORT_FILENAME, LOG_LEVEL, LOG_FORMAT
from .data import JsonFileStorage
from .errors import MyStudiesError
from .models import SortField
from .observability import setup_logging
from .tracker import GradeTracker
from .ui import TerminalDisplay

MENU = [
    ("a", "Add course"),
    ("e", "Edit course"),
    ("d", "Delete course"),
    ("s", "Sort table"),
    ("c", "Clear all"),
    ("x", "Export to file"),
    ("i", "Import from file"),
    ("p", "Print report"),
    ("m", "Load demo data"),
    ("q", "Quit"),
]


def _prompt(text: str) -> str:
    """input() that treats end-of-input as an empty answer."""
    try:
        return input(text).strip()
    except EOFError:
        return ""


def ask_yes_no(message: str) -> bool:
    """Blocking yes/no confirmation; anything but y/yes means no."""
    answer = _prompt(f"\n  {TerminalDisplay.YELLOW}{message}{TerminalDisplay.RESET} [y/N]: ")
    return answer.lower() in ("y", "yes")


def _pick_row(tracker: GradeTracker):
    """Ask for a row number as shown in the table; returns the record or None."""
    rows = tracker.rows()
    if not rows:
        TerminalDisplay.print_error("There are no courses yet.")
        return None
    choice = _prompt(f"  Row number (1-{len(rows)}): ")
    try:
        index = int(choice)
    except ValueError:
        return None
    if not 1 <= index <= len(rows):
        return None
    return rows[index - 1]


def _add(tracker: GradeTracker):
    name = _prompt("  Course name: ")
    credits = _prompt("  ECTS: ")
    grade = _prompt("  Grade (0-10): ")
    tracker.add_course(name, credits, grade)


def _edit(tracker: GradeTracker):
    record = _pick_row(tracker)
    if record is None:
        return
    field = _prompt("  Field (name/credits/grade): ").lower()
    if field not in ("name", "credits", "ects", "grade"):
        TerminalDisplay.print_error(f"Unknown field: {field or '(empty)'}")
        return
    value = _prompt(f"  New {field}: ")
    tracker.edit_course(record.id, field, value)


def _delete(tracker: GradeTracker):
    record = _pick_row(tracker)
    if record is not None:
        tracker.delete_course(record.id)


def _sort(tracker: GradeTracker):
    options = ", ".join(f.value for f in SortField)
    field = _prompt(f"  Sort by ({options}): ").lower()
    try:
        tracker.sort_by(field)
    except ValueError:
        TerminalDisplay.print_error(f"Cannot sort by: {field or '(empty)'}")


def _export(tracker: GradeTracker):
    path = _prompt(f"  File name [{EXPORT_FILENAME}]: ") or EXPORT_FILENAME
    target = tracker.export_to(path)
    TerminalDisplay.print_message(f"Exported {len(tracker.store)} course(s) to {target}")


def _import(tracker: GradeTracker):
    path = _prompt("  File to import: ")
    if not path:
        return
    tracker.import_from(path)


def _print(tracker: GradeTracker):
    path = _prompt("  Save report to file (Enter for screen): ")
    target = tracker.print_report(path or None)
    if target is not None:
        TerminalDisplay.print_message(f"Report written to {target}")


ACTIONS = {
    "a": _add,
    "e": _edit,
    "d": _delete,
    "s": _sort,
    "c": lambda tracker: tracker.clear_all(),
    "x": _export,
    "i": _import,
    "p": _print,
    "m": lambda tracker: tracker.load_demo(),
}


def run_action(tracker: GradeTracker, key: str) -> bool:
    """
    Run one menu action. Returns False when the user chose to quit.

    User-facing failures are printed and the menu keeps running.
    """
    if key == "q":
        return False
    action = ACTIONS.get(key)
    if action is None:
        TerminalDisplay.print_error(f"Unknown option: {key or '(empty)'}")
        return True
    try:
        action(tracker)
    except MyStudiesError as e:
        TerminalDisplay.print_error(e.message)
    except OSError as e:
        TerminalDisplay.print_error(f"File error: {e}")
    return True


def _parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Track course grades and your weighted average.")
    parser.add_argument("--storage", default=str(STORAGE_FILE),
                        help=f"storage file (default: {STORAGE_FILE})")
    parser.add_argument("--log-level", default=LOG_LEVEL, help="logging level (default: %(default)s)")
    parser.add_argument("--log-format", default=LOG_FORMAT, choices=["text", "json"],
                        help="log output format (default: %(default)s)")
    return parser.parse_args(argv)


def main(argv=None):
    """
    Interactive grade tracker.

    Shows the course table, then loops over the menu until the user quits
    or input ends.
    """
    args = _parse_args(argv)
    setup_logging(args.log_level, args.log_format)

    tracker = GradeTracker(storage=JsonFileStorage(args.storage), confirm=ask_yes_no)
    tracker.refresh()

    while True:
        print()
        print("  " + "  ".join(f"{TerminalDisplay.BOLD}{k}{TerminalDisplay.RESET}) {label}" for k, label in MENU))
        try:
            key = input(f"{TerminalDisplay.BOLD}Choose: {TerminalDisplay.RESET}").strip().lower()
        except EOFError:
            break
        if not run_action(tracker, key):
            break


if __name__ == "__main__":
    main()
