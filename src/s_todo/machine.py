"""Keyboard-driven state machine over the application state.

One key event is processed to completion per call. Persistence is an
injected callable so the machine can be driven without touching disk.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable

from s_todo.models import AppData, Project, Todo
from s_todo.selection import NEXT, PREVIOUS, SelectionModel
from s_todo.timer import Clock, TimeTracker, system_clock

logger = logging.getLogger(__name__)

SaveFn = Callable[[AppData], None]

# Keybindings (key names as reported by the terminal layer)
QUIT_KEYS = frozenset({"q"})
SAVE_KEYS = frozenset({"s"})
SWITCH_PANEL_KEYS = frozenset({"tab"})
DOWN_KEYS = frozenset({"j", "down"})
UP_KEYS = frozenset({"k", "up"})
TOGGLE_COMPLETE_KEYS = frozenset({"space", " "})
ADD_KEYS = frozenset({"a"})
RENAME_KEYS = frozenset({"r"})
TIMER_KEYS = frozenset({"t"})
DELETE_KEYS = frozenset({"d"})
ENTER_KEYS = frozenset({"enter"})
ESCAPE_KEYS = frozenset({"escape"})
BACKSPACE_KEYS = frozenset({"backspace"})


class Mode(Enum):
    """Input mode. Every mode except NORMAL edits the text buffer."""

    NORMAL = "normal"
    ADDING_PROJECT = "adding_project"
    ADDING_TODO = "adding_todo"
    RENAMING_PROJECT = "renaming_project"
    RENAMING_TODO = "renaming_todo"

    @property
    def is_text_entry(self) -> bool:
        return self is not Mode.NORMAL


class Panel(Enum):
    """Which list receives navigation and edit keys."""

    PROJECTS = "projects"
    TODOS = "todos"


class Effect(Enum):
    """Outcome of handling one key."""

    NONE = "none"
    SAVED = "saved"
    QUIT = "quit"


MODE_TITLES = {
    Mode.ADDING_PROJECT: "Add project",
    Mode.ADDING_TODO: "Add todo",
    Mode.RENAMING_PROJECT: "Rename project",
    Mode.RENAMING_TODO: "Rename todo",
}


@dataclass
class AppState:
    """Everything the view renders and the machine mutates."""

    data: AppData
    selection: SelectionModel = field(init=False)
    mode: Mode = Mode.NORMAL
    panel: Panel = Panel.PROJECTS
    input: str = ""

    def __post_init__(self) -> None:
        self.selection = SelectionModel(self.data.projects)

    @property
    def projects(self) -> list[Project]:
        return self.data.projects


class InputStateMachine:
    """Interprets key presses according to the current mode and panel."""

    def __init__(
        self,
        state: AppState,
        save: SaveFn,
        clock: Clock = system_clock,
    ) -> None:
        self.state = state
        self._save = save
        self._clock = clock

    def persist(self) -> None:
        self._save(self.state.data)

    def handle_key(self, key: str, character: str | None = None) -> Effect:
        """Process one key press. Never raises for well-formed state."""
        if self.state.mode.is_text_entry:
            return self._handle_text_entry(key, character)
        return self._handle_normal(key)

    # ── Normal mode ──

    def _handle_normal(self, key: str) -> Effect:
        state = self.state
        sel = state.selection

        if key in QUIT_KEYS:
            self.persist()
            return Effect.QUIT
        if key in SAVE_KEYS:
            self.persist()
            return Effect.SAVED
        if key in SWITCH_PANEL_KEYS:
            self._switch_panel()
            return Effect.NONE
        if key in DOWN_KEYS:
            self._move(NEXT)
            return Effect.NONE
        if key in UP_KEYS:
            self._move(PREVIOUS)
            return Effect.NONE
        if key in TOGGLE_COMPLETE_KEYS:
            todo = sel.current_todo()
            if state.panel is Panel.TODOS and todo is not None:
                todo.toggle_completed()
                return self._changed()
            return Effect.NONE
        if key in ADD_KEYS:
            state.mode = (
                Mode.ADDING_PROJECT if state.panel is Panel.PROJECTS else Mode.ADDING_TODO
            )
            state.input = ""
            logger.debug("Entered %s", state.mode.value)
            return Effect.NONE
        if key in TIMER_KEYS:
            todo = sel.current_todo()
            if state.panel is Panel.TODOS and todo is not None:
                todo.toggle_work()
                logger.debug("Timer %s for %r", "started" if todo.is_working() else "stopped", todo.title)
                return self._changed()
            return Effect.NONE
        if key in RENAME_KEYS:
            self._begin_rename()
            return Effect.NONE
        if key in DELETE_KEYS:
            return self._delete_selected()
        return Effect.NONE

    def _switch_panel(self) -> None:
        state = self.state
        if state.panel is Panel.PROJECTS:
            state.selection.ensure_todo_selected()
            state.panel = Panel.TODOS
        else:
            state.selection.ensure_project_selected()
            state.panel = Panel.PROJECTS

    def _move(self, direction: int) -> None:
        if self.state.panel is Panel.PROJECTS:
            self.state.selection.move_project(direction)
        else:
            self.state.selection.move_todo(direction)

    def _begin_rename(self) -> None:
        state = self.state
        if state.panel is Panel.PROJECTS:
            project = state.selection.current_project()
            if project is None:
                return
            state.mode = Mode.RENAMING_PROJECT
            state.input = project.name
        else:
            todo = state.selection.current_todo()
            if todo is None:
                return
            state.mode = Mode.RENAMING_TODO
            state.input = todo.title
        logger.debug("Entered %s", state.mode.value)

    def _delete_selected(self) -> Effect:
        state = self.state
        sel = state.selection
        if state.panel is Panel.PROJECTS:
            idx = sel.selected_project
            if idx is None or not 0 <= idx < len(state.projects):
                return Effect.NONE
            removed = state.projects.pop(idx)
            sel.project_deleted(idx)
            logger.debug("Deleted project %r with %d todos", removed.name, len(removed.todos))
        else:
            todos = sel.current_todos()
            idx = sel.selected_todo
            if idx is None or not 0 <= idx < len(todos):
                return Effect.NONE
            removed_todo = todos.pop(idx)
            sel.todo_deleted(idx)
            logger.debug("Deleted todo %r", removed_todo.title)
        return self._changed()

    def _changed(self) -> Effect:
        self.persist()
        return Effect.SAVED

    # ── Text entry modes ──

    def _handle_text_entry(self, key: str, character: str | None) -> Effect:
        state = self.state
        if key in ENTER_KEYS:
            return self._commit()
        if key in ESCAPE_KEYS:
            state.input = ""
            state.mode = Mode.NORMAL
            return Effect.NONE
        if key in BACKSPACE_KEYS:
            state.input = state.input[:-1]
            return Effect.NONE
        if character is None and len(key) == 1:
            character = key
        if character and character.isprintable():
            state.input += character
        return Effect.NONE

    def _commit(self) -> Effect:
        state = self.state
        sel = state.selection
        text = state.input
        mode = state.mode
        state.input = ""
        state.mode = Mode.NORMAL

        if not text:
            return Effect.NONE

        if mode is Mode.ADDING_PROJECT:
            state.projects.append(Project(name=text))
            sel.project_added()
        elif mode is Mode.ADDING_TODO:
            project = sel.current_project()
            if project is None:
                return Effect.NONE
            project.todos.append(Todo(title=text, timer=TimeTracker(clock=self._clock)))
            sel.todo_added()
        elif mode is Mode.RENAMING_PROJECT:
            project = sel.current_project()
            if project is None:
                return Effect.NONE
            project.name = text
        elif mode is Mode.RENAMING_TODO:
            todo = sel.current_todo()
            if todo is None:
                return Effect.NONE
            todo.title = text
        logger.debug("Committed %s: %r", mode.value, text)
        return self._changed()
