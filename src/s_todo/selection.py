"""Selection bookkeeping for the coupled projects/todos panels.

Invariants kept after every operation:

- ``selected_project`` is None iff there are no projects, else a valid index.
- ``selected_todo`` is None iff the current project has no todos, else a
  valid index into the current project's todos.

The model only reads the project list; it never mutates it.
"""

from __future__ import annotations

from s_todo.models import Project, Todo

NEXT = 1
PREVIOUS = -1


def reindex_after_delete(deleted_index: int, new_length: int) -> int | None:
    """Return the selection after removing the selected *deleted_index*.

    The selection keeps its position (now pointing at the following item)
    unless the list became empty or the position fell off the end.
    """
    if new_length <= 0:
        return None
    if deleted_index >= new_length:
        return new_length - 1
    return deleted_index


def _wrap(current: int | None, direction: int, length: int) -> int:
    if current is None:
        return 0
    return (current + direction) % length


class SelectionModel:
    """Selected project and todo indices over a shared project list."""

    def __init__(self, projects: list[Project]) -> None:
        self._projects = projects
        self.selected_project: int | None = None
        self.selected_todo: int | None = None
        if projects:
            self.selected_project = 0
            self._reset_todo()

    def __repr__(self) -> str:
        return (
            f"SelectionModel(project={self.selected_project}, "
            f"todo={self.selected_todo})"
        )

    # ── Lookups ──

    def current_project(self) -> Project | None:
        if self.selected_project is None:
            return None
        if 0 <= self.selected_project < len(self._projects):
            return self._projects[self.selected_project]
        return None

    def current_todos(self) -> list[Todo]:
        project = self.current_project()
        return project.todos if project else []

    def current_todo(self) -> Todo | None:
        todos = self.current_todos()
        if self.selected_todo is None:
            return None
        if 0 <= self.selected_todo < len(todos):
            return todos[self.selected_todo]
        return None

    # ── Direct selection ──

    def select_project(self, index: int | None) -> None:
        if index is not None and not 0 <= index < len(self._projects):
            return
        self.selected_project = index
        self._reset_todo()

    def select_todo(self, index: int | None) -> None:
        if index is not None and not 0 <= index < len(self.current_todos()):
            return
        self.selected_todo = index

    def _reset_todo(self) -> None:
        self.selected_todo = 0 if self.current_todos() else None

    # ── Navigation ──

    def move_project(self, direction: int) -> None:
        """Step the project selection with wrap-around. Resets the todo selection."""
        if not self._projects:
            return
        self.selected_project = _wrap(self.selected_project, direction, len(self._projects))
        self._reset_todo()

    def move_todo(self, direction: int) -> None:
        todos = self.current_todos()
        if not todos:
            return
        self.selected_todo = _wrap(self.selected_todo, direction, len(todos))

    def ensure_project_selected(self) -> None:
        if self.selected_project is None and self._projects:
            self.select_project(0)

    def ensure_todo_selected(self) -> None:
        if self.selected_todo is None and self.current_todos():
            self.selected_todo = 0

    # ── Structural changes ──

    def project_added(self) -> None:
        """Select the project just appended to the list."""
        self.selected_project = len(self._projects) - 1 if self._projects else None
        self._reset_todo()

    def todo_added(self) -> None:
        """Select the todo just appended to the current project."""
        todos = self.current_todos()
        self.selected_todo = len(todos) - 1 if todos else None

    def project_deleted(self, deleted_index: int) -> None:
        self.selected_project = reindex_after_delete(deleted_index, len(self._projects))
        self._reset_todo()

    def todo_deleted(self, deleted_index: int) -> None:
        self.selected_todo = reindex_after_delete(deleted_index, len(self.current_todos()))
