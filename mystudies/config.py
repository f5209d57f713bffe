"""
Configuration constants for the grade tracker.

This module contains all configuration values and constants used throughout
the tracker. Centralizing these makes it easy to adjust ranges, storage
locations and prompt texts in one place.
"""

import os
from pathlib import Path

# =============================================================================
# FILE PATHS
# =============================================================================

# User data directory (override with MYSTUDIES_HOME)
DATA_DIR = Path(os.environ.get("MYSTUDIES_HOME", Path.home() / ".mystudies"))
STORAGE_FILE = DATA_DIR / "storage.json"

# Default name for exported course files
EXPORT_FILENAME = "mystudies-data.json"


# =============================================================================
# STORAGE
# =============================================================================
# The key is versioned: a new record shape means a new key, there is no
# migration between versions.
STORAGE_KEY = "mystudies-data-v1"


# =============================================================================
# RECORD RANGES
# =============================================================================

# Credit weight (ECTS) of a single course
CREDITS_MIN = 0.0
CREDITS_MAX = 60.0

# Grades are on the 0-10 scale
GRADE_MIN = 0.0
GRADE_MAX = 10.0

# A course counts as passed at or above this grade
PASS_THRESHOLD = 5.0


# =============================================================================
# DISPLAY
# =============================================================================

# Default sort column ("name", "credits" or "grade")
DEFAULT_SORT_FIELD = "name"

# Numbers are shown the Greek way: 1.234,56
DECIMAL_SEPARATOR = ","
THOUSANDS_SEPARATOR = "."

# Placeholder for values that cannot be computed (e.g. average of nothing)
MISSING_VALUE = "—"


# =============================================================================
# LOGGING
# =============================================================================

LOG_LEVEL = os.environ.get("MYSTUDIES_LOG_LEVEL", "WARNING")
LOG_FORMAT = os.environ.get("MYSTUDIES_LOG_FORMAT", "text")


# =============================================================================
# PROMPTS
# =============================================================================

CONFIRM_CLEAR = "Delete ALL courses?"
CONFIRM_IMPORT = "Replace the current courses with the ones from the file?"
CONFIRM_DEMO = "Load sample courses? (They will be added to the existing ones)"


# =============================================================================
# DEMO DATA
# =============================================================================

DEMO_COURSES = [
    {"name": "Γραμμική Άλγεβρα", "ects": 6, "grade": 7.5},
    {"name": "Δομές Δεδομένων", "ects": 6, "grade": 8.0},
    {"name": "Λειτουργικά Συστήματα", "ects": 6, "grade": 6.0},
    {"name": "Ανάλυση ΙΙ", "ects": 5, "grade": 4.5},
    {"name": "Βάσεις Δεδομένων", "ects": 6, "grade": 9.3},
]
