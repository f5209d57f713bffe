"""
My Studies - Course Grade Tracker
=================================

Keep a list of courses (name, ECTS credits, grade), see the weighted
average, sort, import and export. Everything is local to one user.

ARCHITECTURE OVERVIEW
---------------------

┌─────────────────────────────────────────────────────────────────────────┐
│                         ALGORITHM LAYER                                  │
│            (Pure logic - returns data, NO UI/printing)                  │
│                                                                         │
│  ┌─────────────┐  ┌─────────────────┐  ┌─────────────────────────────┐  │
│  │ RecordStore │  │ GradeAggregator │  │ SortEngine (+ collator)     │  │
│  │ (mutations) │  │ (statistics)    │  │ (display order)             │  │
│  └─────────────┘  └─────────────────┘  └─────────────────────────────┘  │
│                                                                         │
│  ┌─────────────────────────┐  ┌─────────────────────────────────────┐  │
│  │   PersistenceAdapter    │  │   parse_import / export_json        │  │
│  │ (string-keyed storage)  │  │   (normalization of outside data)   │  │
│  └─────────────────────────┘  └─────────────────────────────────────┘  │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   │ ChangeEvent after every mutation
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                        GradeTracker                                      │
│        (Orchestrator - save, then redisplay, on every change)           │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                      PRESENTATION LAYER                                  │
│          TerminalDisplay + interactive menu (cli.py)                    │
└─────────────────────────────────────────────────────────────────────────┘

PACKAGE STRUCTURE
-----------------

mystudies/
├── __init__.py          # This file - main exports
├── config.py            # Configuration constants
├── errors.py            # MyStudiesError, ValidationError, ImportFormatError
├── observability.py     # Logging setup (text or JSON)
├── store.py             # RecordStore
├── tracker.py           # GradeTracker orchestrator
├── cli.py               # Command-line interface
│
├── models/              # Data classes and enums
│   ├── course.py        # CourseRecord, SortField
│   ├── stats.py         # GradeStats
│   └── events.py        # ChangeEvent, ChangeKind
│
├── data/                # Parsing, storage and import/export
│   ├── numbers.py       # to_number, strict and lenient policies
│   ├── storage.py       # JsonFileStorage, MemoryStorage
│   ├── persistence.py   # PersistenceAdapter
│   └── transfer.py      # parse_import, export_json
│
├── engines/             # Pure computations
│   ├── aggregator.py    # GradeAggregator
│   └── sorting.py       # SortEngine, UnicodeCollator, LocaleCollator
│
└── ui/                  # User interface implementations
    └── terminal.py      # TerminalDisplay

USAGE
-----

    from mystudies import GradeTracker, MemoryStorage

    tracker = GradeTracker(storage=MemoryStorage())
    tracker.add_course("Calculus", "6", "4,5")
    tracker.add_course("Physics", 6, 9)
    tracker.stats().weighted_average     # 6.75

Running from command line:

    python -m mystudies

"""

# Version
__version__ = "1.0.0"

# Main exports
from .tracker import GradeTracker
from .store import RecordStore
from .cli import main

# Model exports
from .models import (
    CourseRecord,
    SortField,
    GradeStats,
    ChangeEvent,
    ChangeKind,
)

# Engine exports
from .engines import (
    GradeAggregator,
    SortEngine,
    SortState,
    UnicodeCollator,
    LocaleCollator,
)

# Data exports
from .data import (
    JsonFileStorage,
    MemoryStorage,
    PersistenceAdapter,
    parse_import,
    export_json,
    to_number,
    validate_new_course,
    lenient_number,
)

# Error exports
from .errors import MyStudiesError, ValidationError, ImportFormatError

# UI exports
from .ui import TerminalDisplay

# Configuration exports
from .config import (
    STORAGE_KEY,
    STORAGE_FILE,
    PASS_THRESHOLD,
    CREDITS_MIN,
    CREDITS_MAX,
    GRADE_MIN,
    GRADE_MAX,
)

__all__ = [
    # Version
    "__version__",
    # Main entry points
    "GradeTracker",
    "RecordStore",
    "main",
    # Models
    "CourseRecord",
    "SortField",
    "GradeStats",
    "ChangeEvent",
    "ChangeKind",
    # Engines
    "GradeAggregator",
    "SortEngine",
    "SortState",
    "UnicodeCollator",
    "LocaleCollator",
    # Data
    "JsonFileStorage",
    "MemoryStorage",
    "PersistenceAdapter",
    "parse_import",
    "export_json",
    "to_number",
    "validate_new_course",
    "lenient_number",
    # Errors
    "MyStudiesError",
    "ValidationError",
    "ImportFormatError",
    # UI
    "TerminalDisplay",
    # Config
    "STORAGE_KEY",
    "STORAGE_FILE",
    "PASS_THRESHOLD",
    "CREDITS_MIN",
    "CREDITS_MAX",
    "GRADE_MIN",
    "GRADE_MAX",
]
