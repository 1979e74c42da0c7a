"""
Detail Screen

Full-screen view of one declaration.
"""

from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.screen import Screen
from textual.widgets import Footer, Header, Static


class DetailScreen(Screen):
    """
    Full-screen detail view.

    Used when more space is needed to read a long signature.
    Press Escape or left arrow to return to the main screen.
    """

    DEFAULT_CSS = """
    DetailScreen {
        layout: vertical;
    }

    DetailScreen VerticalScroll {
        height: 1fr;
        border: solid $primary;
        padding: 1;
    }
    """

    BINDINGS = [
        ("escape", "go_back", "Back"),
        ("left", "go_back", "Back"),
    ]

    def __init__(self, title: str, text: str):
        super().__init__()
        self.detail_title = title
        self.detail_text = text

    def compose(self) -> ComposeResult:
        """Create the layout."""
        yield Header()
        yield VerticalScroll(Static(self.detail_text))
        yield Footer()

    def on_mount(self) -> None:
        self.sub_title = self.detail_title

    def action_go_back(self) -> None:
        """Return to the main screen."""
        self.app.pop_screen()
