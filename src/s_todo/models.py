"""Data models for S-Todo."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from s_todo.timer import Clock, TimeTracker, system_clock

COMPLETED_ICON = "✅"
PENDING_ICON = "⭕"
WORKING_ICON = "⏱️"
PROJECT_ICON = "📁"


@dataclass
class Todo:
    """A single to-do item with its own work timer."""

    title: str
    description: str = ""
    completed: bool = False
    timer: TimeTracker = field(default_factory=TimeTracker)

    def is_working(self) -> bool:
        return self.timer.is_working()

    def start_work(self) -> None:
        self.timer.start_work()

    def end_work(self) -> None:
        self.timer.end_work()

    def toggle_work(self) -> None:
        self.timer.toggle_work()

    def toggle_completed(self) -> None:
        """Flip completion. Completing a running todo stops its timer first."""
        if self.is_working() and not self.completed:
            self.timer.end_work()
        self.completed = not self.completed

    @property
    def total_duration(self) -> int:
        return self.timer.total_duration

    def format_duration(self) -> str:
        return self.timer.format_duration()

    @property
    def status_icon(self) -> str:
        return COMPLETED_ICON if self.completed else PENDING_ICON

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "completed": self.completed,
            "start_time": self.timer.start_time,
            "end_time": self.timer.end_time,
            "total_duration": self.timer.total_duration,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any], clock: Clock = system_clock) -> Todo:
        start = data.get("start_time")
        end = data.get("end_time")
        completed = data.get("completed", False)
        if not isinstance(completed, bool):
            raise TypeError(f"completed must be a boolean, got {completed!r}")
        timer = TimeTracker.from_fields(
            start_time=int(start) if start is not None else None,
            end_time=int(end) if end is not None else None,
            total_duration=int(data.get("total_duration", 0)),
            clock=clock,
        )
        return cls(
            title=str(data["title"]),
            description=str(data.get("description", "")),
            completed=completed,
            timer=timer,
        )


@dataclass
class Project:
    """A named, ordered list of todos. Owns its todos."""

    name: str
    todos: list[Todo] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "todos": [t.to_dict() for t in self.todos]}

    @classmethod
    def from_dict(cls, data: dict[str, Any], clock: Clock = system_clock) -> Project:
        todos = data.get("todos", [])
        if not isinstance(todos, list):
            raise TypeError("todos must be a list")
        return cls(
            name=str(data["name"]),
            todos=[Todo.from_dict(t, clock) for t in todos],
        )


@dataclass
class AppData:
    """The persisted root: every project, in display order."""

    projects: list[Project] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"projects": [p.to_dict() for p in self.projects]}

    @classmethod
    def from_dict(cls, data: dict[str, Any], clock: Clock = system_clock) -> AppData:
        projects = data["projects"]
        if not isinstance(projects, list):
            raise TypeError("projects must be a list")
        return cls(projects=[Project.from_dict(p, clock) for p in projects])


def default_data(clock: Clock = system_clock) -> AppData:
    """Seed data used when nothing could be loaded."""
    return AppData(
        projects=[
            Project(
                name="Work Project",
                todos=[Todo("Finish report", timer=TimeTracker(clock=clock))],
            ),
            Project(
                name="Personal Study",
                todos=[Todo("Learn Rust", timer=TimeTracker(clock=clock))],
            ),
        ]
    )
