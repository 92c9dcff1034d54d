"""Single-line popup showing the text buffer while adding or renaming."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.widgets import Static

from s_todo import theme


class InputPopup(Container):
    """Overlay that centers an input line over the panels.

    The buffer itself lives in the application state; this widget only
    displays it, so it never takes focus.
    """

    DEFAULT_CSS = """
    InputPopup {
        layer: overlay;
        width: 100%;
        height: 100%;
        align: center middle;
        display: none;
    }
    InputPopup.-visible {
        display: block;
    }
    InputPopup #input-box {
        width: 60%;
        height: 3;
        background: $surface;
        border: round $primary;
        border-title-align: left;
        padding: 0 1;
    }
    InputPopup.-wide #input-box {
        width: 90%;
    }
    """

    def compose(self) -> ComposeResult:
        yield Static("", id="input-box")

    def show(self, title: str, value: str, wide: bool = False) -> None:
        box = self.query_one("#input-box", Static)
        box.border_title = title
        box.styles.border = ("round", theme.POPUP_BORDER.resolve(self.app.current_theme.dark))
        box.update(Text(value + "▏", no_wrap=True, overflow="ellipsis"))
        self.set_class(wide, "-wide")
        self.add_class("-visible")

    def hide(self) -> None:
        self.remove_class("-visible")
