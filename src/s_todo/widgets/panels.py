"""Project and todo list panels."""

from __future__ import annotations

from rich.text import Text
from textual.widgets import Static

from s_todo import theme
from s_todo.models import PROJECT_ICON, WORKING_ICON, Project, Todo

HIGHLIGHT_SYMBOL = ">> "
NARROW_PROJECT_WIDTH = 20
NARROW_TODO_WIDTH = 30


def project_label(project: Project, width: int) -> str:
    """Row label for a project; only the icon and name when very narrow."""
    if width < NARROW_PROJECT_WIDTH:
        if len(project.name) > width - 5:
            return f"{PROJECT_ICON}{project.name[:max(0, width - 8)]}"
        return f"{PROJECT_ICON}{project.name}"
    return f"{PROJECT_ICON} {project.name} ({len(project.todos)})"


def todo_label(todo: Todo, width: int) -> str:
    """Row label for a todo: completion icon, timer marker, title, time spent."""
    timer = f"{WORKING_ICON} " if todo.is_working() else ""
    spent = f" [{todo.format_duration()}]" if todo.total_duration > 0 else ""
    if width < NARROW_TODO_WIDTH:
        max_len = max(0, width - 12)
        if len(todo.title) > max_len:
            return f"{todo.status_icon} {timer}{todo.title[:max_len]}..."
    return f"{todo.status_icon} {timer}{todo.title}{spent}"


def render_rows(labels: list[str], selected: int | None, highlight: str) -> Text:
    text = Text(no_wrap=True, overflow="ellipsis")
    for i, label in enumerate(labels):
        if i:
            text.append("\n")
        if i == selected:
            text.append(f"{HIGHLIGHT_SYMBOL}{label}", style=highlight)
        else:
            text.append(" " * len(HIGHLIGHT_SYMBOL) + label)
    return text


class ListPanel(Static):
    """A bordered list whose border shows whether it has the keyboard."""

    DEFAULT_CSS = """
    ListPanel {
        height: 1fr;
        border: round $surface-lighten-2;
        border-title-align: left;
        padding: 0 1;
    }
    """

    def set_active(self, active: bool) -> None:
        is_dark = self.app.current_theme.dark
        pair = theme.ACTIVE_BORDER if active else theme.INACTIVE_BORDER
        self.styles.border = ("round", pair.resolve(is_dark))
        self.set_class(active, "-active")

    def _row_width(self) -> int:
        return max(0, self.content_size.width - len(HIGHLIGHT_SYMBOL))


class ProjectPanel(ListPanel):
    """Left panel: every project with its todo count."""

    def show(self, projects: list[Project], selected: int | None, title: str) -> None:
        width = self._row_width()
        highlight = theme.ROW_HIGHLIGHT.resolve(self.app.current_theme.dark)
        self.border_title = title
        self.update(render_rows([project_label(p, width) for p in projects], selected, highlight))


class TodoPanel(ListPanel):
    """Right panel: the todos of the selected project."""

    def show(self, todos: list[Todo], selected: int | None, title: str) -> None:
        width = self._row_width()
        is_dark = self.app.current_theme.dark
        highlight = theme.ROW_HIGHLIGHT.resolve(is_dark)
        text = Text(no_wrap=True, overflow="ellipsis")
        for i, todo in enumerate(todos):
            if i:
                text.append("\n")
            label = todo_label(todo, width)
            if i == selected:
                text.append(f"{HIGHLIGHT_SYMBOL}{label}", style=highlight)
            elif todo.completed:
                text.append(" " * len(HIGHLIGHT_SYMBOL) + label, style=theme.ROW_COMPLETED.resolve(is_dark))
            elif todo.is_working():
                text.append(" " * len(HIGHLIGHT_SYMBOL) + label, style=theme.ROW_WORKING.resolve(is_dark))
            else:
                text.append(" " * len(HIGHLIGHT_SYMBOL) + label)
        self.border_title = title
        self.update(text)
