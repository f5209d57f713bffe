"""
Terminal Display Implementation.

This module handles all console/terminal output formatting.
It's the ONLY place where printing happens in the mystudies package.

To create a different UI (web, GUI, etc.), create a new class with
the same method signatures but different output handling.
"""

import math

from ..config import DECIMAL_SEPARATOR, THOUSANDS_SEPARATOR, MISSING_VALUE
from ..models import GradeStats, SortField


def format_number(value, digits: int = 2) -> str:
    """
    Format a number with the display locale's separators.

    format_number(1234.5)  -> "1.234,50"
    format_number(nan)     -> "—"
    """
    if value is None or not math.isfinite(value):
        return MISSING_VALUE
    text = f"{value:,.{digits}f}"
    return text.replace(",", "\0").replace(".", DECIMAL_SEPARATOR).replace("\0", THOUSANDS_SEPARATOR)


def format_plain(value) -> str:
    """Short form for table cells: 6 instead of 6,00, 7,5 instead of 7,50."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}".replace(".", DECIMAL_SEPARATOR)


class TerminalDisplay:
    """
    Pretty terminal output for the course table and statistics.

    ═══════════════════════════════════════════════════════════════════════════
    HOW TO REPLACE THIS UI
    ═══════════════════════════════════════════════════════════════════════════

    GradeTracker only calls render(rows, stats, sort_state) after every change
    and print_error() / print_message() for feedback. Any object with those
    methods can be passed as the tracker's display.

    ═══════════════════════════════════════════════════════════════════════════
    """

    # ANSI color codes for terminal styling
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    CYAN = "\033[96m"
    WHITE = "\033[97m"

    BG_GREEN = "\033[42m"
    BG_RED = "\033[41m"

    NAME_WIDTH = 36

    COLUMNS = (
        (SortField.NAME, "COURSE"),
        (SortField.CREDITS, "ECTS"),
        (SortField.GRADE, "GRADE"),
    )

    @classmethod
    def print_header(cls, title: str):
        """Print a major section header with decorative borders."""
        width = 70
        print()
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}  {title}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")

    @classmethod
    def print_subheader(cls, title: str):
        """Print a subsection header."""
        print()
        print(f"{cls.BOLD}{cls.WHITE}  ── {title} ──{cls.RESET}")

    @classmethod
    def status_badge(cls, passed: bool) -> str:
        """Return a colored pass/fail badge."""
        if passed:
            return f"{cls.BG_GREEN}{cls.WHITE} Passed {cls.RESET}"
        return f"{cls.BG_RED}{cls.WHITE} Failed {cls.RESET}"

    @classmethod
    def column_title(cls, field: SortField, title: str, sort_state=None) -> str:
        """Column title with ▲/▼ on the active sort column."""
        if sort_state is not None and sort_state.field == field:
            return f"{title} {'▲' if sort_state.ascending else '▼'}"
        return title

    @classmethod
    def _truncate(cls, text: str) -> str:
        if len(text) <= cls.NAME_WIDTH:
            return text
        return text[:cls.NAME_WIDTH - 1] + "…"

    @classmethod
    def table_lines(cls, rows, sort_state=None, color: bool = True) -> list:
        """
        Build the course table as lines of text.

        Rows are numbered from 1 in display order; the CLI uses these numbers
        to pick a course for editing or deletion.
        """
        bold, dim, reset = (cls.BOLD, cls.DIM, cls.RESET) if color else ("", "", "")
        titles = [cls.column_title(f, t, sort_state) for f, t in cls.COLUMNS]
        lines = [
            f"  {bold}{'#':>3}  {titles[0]:<{cls.NAME_WIDTH}} {titles[1]:>7} {titles[2]:>7}  STATUS{reset}",
            f"  {dim}{'-' * (cls.NAME_WIDTH + 30)}{reset}",
        ]
        if not rows:
            lines.append(f"  {dim}(no courses yet){reset}")
            return lines
        for i, r in enumerate(rows, 1):
            name = cls._truncate(r.name) if r.name else "(unnamed)"
            if color:
                status = cls.status_badge(r.passed)
            else:
                status = "Passed" if r.passed else "Failed"
            lines.append(
                f"  {i:>3}  {name:<{cls.NAME_WIDTH}} {format_plain(r.credits):>7} "
                f"{format_plain(r.grade):>7}  {status}"
            )
        return lines

    @classmethod
    def stats_lines(cls, stats: GradeStats, color: bool = True) -> list:
        bold, reset = (cls.BOLD, cls.RESET) if color else ("", "")
        return [
            f"  {bold}Weighted average:{reset} {format_number(stats.weighted_average)}",
            f"  {bold}Total ECTS:{reset}       {format_number(stats.total_credits, 1)}",
            f"  {bold}Passed:{reset}           {stats.passed_count}",
            f"  {bold}Courses:{reset}          {stats.total_count}",
        ]

    @classmethod
    def render(cls, rows, stats: GradeStats, sort_state=None):
        """Print the whole view: table then statistics."""
        cls.print_header("MY STUDIES")
        for line in cls.table_lines(rows, sort_state):
            print(line)
        cls.print_subheader("Summary")
        for line in cls.stats_lines(stats):
            print(line)

    @classmethod
    def report_text(cls, rows, stats: GradeStats, sort_state=None) -> str:
        """Plain-text rendering (no colors) for printing or saving to a file."""
        lines = ["MY STUDIES", "=" * 10, ""]
        lines.extend(cls.table_lines(rows, sort_state, color=False))
        lines.append("")
        lines.extend(cls.stats_lines(stats, color=False))
        return "\n".join(lines) + "\n"

    @classmethod
    def print_error(cls, message: str):
        print(f"\n  {cls.RED}✗ {message}{cls.RESET}")

    @classmethod
    def print_message(cls, message: str):
        print(f"\n  {cls.GREEN}✓ {message}{cls.RESET}")
