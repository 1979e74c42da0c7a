"""
Detail Panel Widget

Displays the selected contract summary or member declaration.
"""

from rich.markup import escape
from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.widget import Widget
from textual.widgets import Static

from solexplorer.ast.models import Contract
from solexplorer.browser.formatting import Member, format_contract_summary, format_member


class DetailPanel(Widget):
    """
    Panel displaying declaration details.

    Shows either a contract header (pragma, inheritance, counts) or the
    full signature of one member.
    """

    DEFAULT_CSS = """
    DetailPanel {
        width: 100%;
        height: 100%;
        border: solid $primary;
    }

    DetailPanel .detail-content {
        padding: 1;
    }

    DetailPanel .detail-empty {
        padding: 2;
        text-align: center;
        color: $text-muted;
    }
    """

    EMPTY_MESSAGE = "Select a contract to view details"

    def compose(self) -> ComposeResult:
        """Create child widgets."""
        yield VerticalScroll(
            Static(self.EMPTY_MESSAGE, classes="detail-empty"),
            id="detail-body",
        )

    def _show(self, text: str, css_class: str = "detail-content") -> None:
        body = self.query_one("#detail-body", VerticalScroll)
        body.remove_children()
        body.mount(Static(text, classes=css_class))

    def set_contract(self, contract: Contract) -> None:
        self._show(format_contract_summary(contract))

    def set_member(self, member: Member) -> None:
        self._show(format_member(member))

    def set_error(self, message: str) -> None:
        self._show(f"[red]Error: {escape(message)}[/red]", "detail-empty")

    def clear(self) -> None:
        """Clear the detail view."""
        self._show(self.EMPTY_MESSAGE, "detail-empty")
