"""Main Textual App for S-Todo."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container
from textual.css.query import NoMatches
from textual.widgets import Header, Static

from s_todo import theme
from s_todo.machine import MODE_TITLES, AppState, Effect, InputStateMachine, Mode, Panel
from s_todo.storage import JsonStore
from s_todo.timer import Clock, system_clock
from s_todo.widgets.input_popup import InputPopup
from s_todo.widgets.panels import ProjectPanel, TodoPanel

logger = logging.getLogger(__name__)

HELP_TEXT = (
    "Tab(switch) j/k(down/up) Space(done) a(add) r(rename) "
    "t(timer) d(delete) s(save) q(quit)"
)

NARROW_WIDTH = 80
MEDIUM_WIDTH = 120
NARROW_POPUP_WIDTH = 60


class TodoApp(App):
    """S-Todo Application: projects on the left, their todos on the right."""

    TITLE = "S-Todo"
    ENABLE_COMMAND_PALETTE = False
    CSS = """
    Screen {
        layers: base overlay;
    }
    #panels {
        layout: horizontal;
        height: 1fr;
    }
    #projects {
        width: 30%;
    }
    #todos {
        width: 70%;
    }
    #panels.-medium #projects {
        width: 25;
    }
    #panels.-medium #todos {
        width: 1fr;
    }
    #panels.-narrow {
        layout: vertical;
    }
    #panels.-narrow #projects {
        width: 100%;
        height: 40%;
    }
    #panels.-narrow #todos {
        width: 100%;
        height: 60%;
    }
    #help-bar {
        dock: bottom;
        height: 1;
        padding: 0 1;
    }
    """

    # Tab is taken at priority so focus cycling never swallows it.
    BINDINGS = [
        Binding("tab", "switch_panel", "Switch panel", show=False, priority=True),
    ]

    def __init__(
        self,
        store: JsonStore | None = None,
        clock: Clock = system_clock,
        no_color: bool = False,
        theme_file: Path | None = None,
    ) -> None:
        if no_color:
            os.environ["NO_COLOR"] = "1"
        super().__init__()
        self.store = store if store is not None else JsonStore(clock=clock)
        self.no_color = no_color
        self._theme_file = theme_file
        self.state = AppState(self.store.load())
        self.machine = InputStateMachine(self.state, self.store.save, clock=clock)

    def compose(self) -> ComposeResult:
        yield Header()
        with Container(id="panels"):
            yield ProjectPanel(id="projects")
            yield TodoPanel(id="todos")
        yield InputPopup(id="input-popup")
        yield Static(HELP_TEXT, id="help-bar")

    def on_mount(self) -> None:
        theme.load_theme(self._theme_file)
        self.sub_title = str(self.store.path)
        logger.info("Loaded %d projects from %s", len(self.state.projects), self.store.path)
        self.call_after_refresh(self._refresh_view)

    def on_resize(self, event: events.Resize) -> None:
        self.call_after_refresh(self._refresh_view)

    # ── Input ──

    def on_key(self, event: events.Key) -> None:
        event.stop()
        event.prevent_default()
        self._dispatch(event.key, event.character)

    def action_switch_panel(self) -> None:
        self._dispatch("tab", None)

    async def action_quit(self) -> None:
        self.machine.persist()
        self.exit(return_code=0)

    def _dispatch(self, key: str, character: str | None) -> None:
        effect = self.machine.handle_key(key, character)
        if effect is Effect.QUIT:
            self.exit(return_code=0)
            return
        self._refresh_view()

    # ── View ──

    def _refresh_view(self) -> None:
        try:
            projects_panel = self.query_one("#projects", ProjectPanel)
            todos_panel = self.query_one("#todos", TodoPanel)
            popup = self.query_one("#input-popup", InputPopup)
            panels = self.query_one("#panels", Container)
            help_bar = self.query_one("#help-bar", Static)
        except NoMatches:
            return

        width = self.size.width
        narrow = width < NARROW_WIDTH
        panels.set_class(narrow, "-narrow")
        panels.set_class(NARROW_WIDTH <= width < MEDIUM_WIDTH, "-medium")

        state = self.state
        sel = state.selection
        projects_active = state.panel is Panel.PROJECTS

        if narrow:
            projects_title = f"Projects [{'active' if projects_active else 'inactive'}]"
            todos_title = f"Todo [{'inactive' if projects_active else 'active'}]"
        else:
            project = sel.current_project()
            projects_title = "Projects"
            todos_title = f"Todo - {project.name if project else '(no project)'}"

        projects_panel.set_active(projects_active)
        todos_panel.set_active(not projects_active)
        projects_panel.show(state.projects, sel.selected_project, projects_title)
        todos_panel.show(sel.current_todos(), sel.selected_todo, todos_title)

        help_bar.styles.color = theme.HELP_TEXT.resolve(self.current_theme.dark)

        if state.mode is Mode.NORMAL:
            popup.hide()
        else:
            popup.show(MODE_TITLES[state.mode], state.input, wide=width < NARROW_POPUP_WIDTH)
