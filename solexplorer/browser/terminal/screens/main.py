"""
Main Screen

The explorer dashboard: contract list, member list, and detail panel.
"""

import asyncio
from typing import Callable, Optional

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.screen import Screen
from textual.widgets import Footer, Header

from solexplorer.ast.models import Contract
from solexplorer.ast.registry import ContractRegistry
from solexplorer.browser.formatting import (
    SECTIONS,
    contract_sections,
    format_member,
    member_label,
)
from solexplorer.browser.terminal.screens.detail import DetailScreen
from solexplorer.browser.terminal.widgets.detail_panel import DetailPanel
from solexplorer.browser.terminal.widgets.list_browser import (
    Entry,
    EntryHighlighted,
    EntrySelected,
    ListBrowser,
)
from solexplorer.browser.terminal.widgets.stats_panel import StatsPanel
from solexplorer.configs import get_logger
from solexplorer.exceptions import SolExplorerError

logger = get_logger("browser.main")


class MainScreen(Screen):
    """
    Main dashboard screen.

    Layout:
    ┌──────────────┬──────────────────┬───────────────────────────┐
    │  Stats       │  Members         │  Detail                   │
    ├──────────────┤                  │                           │
    │  Contracts   │                  │                           │
    │              │                  │                           │
    └──────────────┴──────────────────┴───────────────────────────┘
    """

    DEFAULT_CSS = """
    MainScreen {
        layout: grid;
        grid-size: 3 1;
        grid-columns: 1fr 1fr 2fr;
    }

    #left-column {
        height: 100%;
    }

    #left-column ListBrowser {
        height: 1fr;
    }
    """

    BINDINGS = [
        ("r", "refresh", "Reload"),
        ("left", "back", "Back"),
        ("escape", "back", "Back"),
    ]

    def __init__(self, load_registry: Callable[[], ContractRegistry], folder: str):
        super().__init__()
        self.load_registry = load_registry
        self.folder = folder
        self.registry: Optional[ContractRegistry] = None
        self.selected_contract: Optional[Contract] = None

    def compose(self) -> ComposeResult:
        """Create the layout."""
        yield Header()
        with Vertical(id="left-column"):
            yield StatsPanel(id="stats")
            yield ListBrowser("Contracts", "No contracts found", id="contracts")
        yield ListBrowser("Members", "Select a contract", id="members")
        yield DetailPanel(id="detail")
        yield Footer()

    async def on_mount(self) -> None:
        """Called when screen is mounted."""
        await self._load_data()

    async def _load_data(self) -> None:
        """Rebuild the registry from disk and repopulate the contract list."""
        stats_panel = self.query_one("#stats", StatsPanel)
        contracts = self.query_one("#contracts", ListBrowser)
        members = self.query_one("#members", ListBrowser)
        detail = self.query_one("#detail", DetailPanel)

        stats_panel.set_is_loading()
        contracts.set_is_loading()
        members.set_entries([])
        detail.clear()
        self.selected_contract = None

        try:
            # Blocking batch load; keep the UI responsive while it runs
            registry = await asyncio.to_thread(self.load_registry)
        except SolExplorerError as e:
            logger.error(f"Error parsing contract files: {e}")
            self.registry = None
            stats_panel.set_error(str(e))
            contracts.set_error(str(e))
            self.app.sub_title = "Load failed"
            return

        self.registry = registry
        stats_panel.set_stats(registry, self.folder)
        contracts.set_entries([Entry(name, name) for name in registry.names()])
        contracts.focus_list()
        self.app.sub_title = self.folder

    def _select_contract(self, name: str) -> None:
        if self.registry is None or name not in self.registry:
            return
        contract = self.registry[name]
        self.selected_contract = contract

        entries = [
            Entry(member_label(member), member, key)
            for key, section_members in contract_sections(contract)
            for member in section_members
        ]
        categories = [(SECTIONS[key], key) for key, _ in contract_sections(contract)]

        members = self.query_one("#members", ListBrowser)
        members.set_title(f"Members of {contract.name}")
        members.set_entries(entries, categories)
        members.focus_list()
        self.query_one("#detail", DetailPanel).set_contract(contract)

    def on_entry_highlighted(self, event: EntryHighlighted) -> None:
        detail = self.query_one("#detail", DetailPanel)
        if event.browser_id == "contracts" and self.registry is not None:
            contract = self.registry.get(event.payload)
            if contract is not None:
                detail.set_contract(contract)
        elif event.browser_id == "members":
            detail.set_member(event.payload)

    def on_entry_selected(self, event: EntrySelected) -> None:
        if event.browser_id == "contracts":
            self._select_contract(event.payload)
        elif event.browser_id == "members":
            title = member_label(event.payload)
            self.app.push_screen(DetailScreen(title, format_member(event.payload)))

    def action_back(self) -> None:
        """Leave the member list and return to the contract list."""
        if self.selected_contract is None:
            return
        self.selected_contract = None
        members = self.query_one("#members", ListBrowser)
        members.set_title("Members")
        members.set_entries([])
        self.query_one("#contracts", ListBrowser).focus_list()

    def action_refresh(self) -> None:
        """Reload every document from disk."""
        self.run_worker(self._load_data(), exclusive=True)
