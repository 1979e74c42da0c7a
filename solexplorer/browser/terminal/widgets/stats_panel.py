"""
Stats Panel Widget

Displays registry statistics: contract count, declaration totals, and
documents skipped during a lenient load.
"""

from rich.markup import escape
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widget import Widget
from textual.widgets import Static

from solexplorer.ast.registry import ContractRegistry


def registry_totals(registry: ContractRegistry) -> dict[str, int]:
    """Sum member counts across every contract in the registry."""
    totals: dict[str, int] = {}
    for contract in registry.values():
        for key, count in contract.member_counts().items():
            totals[key] = totals.get(key, 0) + count
    return totals


class StatsPanel(Widget):
    """
    Panel displaying registry statistics.

    Shows:
    - Contract count and source folder
    - Declaration totals by kind
    - Skipped documents (lenient mode only)
    """

    DEFAULT_CSS = """
    StatsPanel {
        width: 100%;
        height: auto;
        border: solid $primary;
        padding: 1;
    }

    StatsPanel .stats-title {
        text-style: bold;
        color: $text;
        margin-bottom: 1;
    }

    StatsPanel .stats-row {
        color: $text;
    }

    StatsPanel .stats-warning {
        color: $warning;
        margin-top: 1;
    }

    StatsPanel .stats-loading {
        color: $text-muted;
        text-style: italic;
    }
    """

    def compose(self) -> ComposeResult:
        """Create child widgets."""
        with Vertical(id="stats-content"):
            yield Static("Loading...", classes="stats-loading")

    def _content(self) -> Vertical:
        content = self.query_one("#stats-content", Vertical)
        content.remove_children()
        return content

    def set_stats(self, registry: ContractRegistry, folder: str) -> None:
        content = self._content()
        content.mount(Static(f"{len(registry)} contract(s)", classes="stats-title"))
        content.mount(Static(f"[dim]{escape(folder)}[/dim]", classes="stats-row"))

        rows = [
            f"{key}: [green]{count}[/green]"
            for key, count in registry_totals(registry).items()
            if count
        ]
        if rows:
            content.mount(Static("\n".join(rows), classes="stats-row"))

        if registry.diagnostics:
            skipped = "\n".join(escape(str(d)) for d in registry.diagnostics)
            content.mount(Static(
                f"[bold]Skipped {len(registry.diagnostics)} file(s):[/bold]\n{skipped}",
                classes="stats-warning",
            ))

    def set_is_loading(self) -> None:
        self._content().mount(Static("Loading...", classes="stats-loading"))

    def set_error(self, message: str) -> None:
        self._content().mount(Static(f"[red]Error: {escape(message)}[/red]", classes="stats-row"))
