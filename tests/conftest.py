"""Shared fixtures."""

import pytest

from s_todo.models import AppData, Project, Todo
from s_todo.timer import TimeTracker

START = 1_700_000_000


class FakeClock:
    """Deterministic clock: returns ``now`` until advanced."""

    def __init__(self, now: int = START) -> None:
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, seconds: int) -> None:
        self.now += seconds


class RecordingSave:
    """Stands in for the persistence boundary; counts and snapshots saves."""

    def __init__(self) -> None:
        self.calls = 0
        self.snapshots: list[dict] = []

    def __call__(self, data: AppData) -> None:
        self.calls += 1
        self.snapshots.append(data.to_dict())


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def recorder():
    return RecordingSave()


@pytest.fixture
def sample_data(clock):
    """Two projects with two todos and one empty project."""

    def todo(title: str) -> Todo:
        return Todo(title, timer=TimeTracker(clock=clock))

    return AppData(
        projects=[
            Project("Work", [todo("Report"), todo("Slides")]),
            Project("Home", [todo("Groceries")]),
            Project("Empty"),
        ]
    )
