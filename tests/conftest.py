"""Root conftest: shared fixtures for store, tracker and CLI tests."""

import os
import tempfile

# Keep the default storage location away from the real home directory
os.environ.setdefault("MYSTUDIES_HOME", tempfile.mkdtemp(prefix="mystudies-test-"))

import pytest

from mystudies import GradeTracker, MemoryStorage


class RecordingDisplay:
    """Display stand-in that remembers every render call."""

    def __init__(self):
        self.renders = []

    def render(self, rows, stats, sort_state=None):
        direction = None
        if sort_state is not None:
            direction = (sort_state.field, sort_state.ascending)
        self.renders.append({"rows": list(rows), "stats": stats, "sort": direction})

    @property
    def last(self):
        return self.renders[-1]


class Confirmer:
    """Confirmation callable with a fixed answer; records the questions asked."""

    def __init__(self, answer: bool = True):
        self.answer = answer
        self.messages = []

    def __call__(self, message: str) -> bool:
        self.messages.append(message)
        return self.answer


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def display():
    return RecordingDisplay()


@pytest.fixture
def confirmer():
    return Confirmer(True)


@pytest.fixture
def tracker(storage, display, confirmer):
    return GradeTracker(storage=storage, display=display, confirm=confirmer)
