"""
List Browser Widget

Displays a filterable, navigable list of entries (contracts or members).
"""

from dataclasses import dataclass
from typing import Any

from rich.markup import escape
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.message import Message
from textual.reactive import reactive
from textual.widget import Widget
from textual.widgets import Label, ListItem, ListView, Select, Static

ALL_CATEGORIES = "all"


@dataclass(frozen=True)
class Entry:
    """One row of a ListBrowser."""

    label: str
    payload: Any
    category: str = ""


class EntrySelected(Message):
    """Message sent when an entry is chosen with Enter or right arrow."""

    def __init__(self, browser_id: str | None, payload: Any) -> None:
        self.browser_id = browser_id
        self.payload = payload
        super().__init__()


class EntryHighlighted(Message):
    """Message sent when the cursor moves onto an entry."""

    def __init__(self, browser_id: str | None, payload: Any) -> None:
        self.browser_id = browser_id
        self.payload = payload
        super().__init__()


class EntryListItem(ListItem):
    """A single entry in the list."""

    def __init__(self, entry: Entry) -> None:
        super().__init__()
        self.entry = entry

    def compose(self) -> ComposeResult:
        if self.entry.category:
            yield Static(f"[dim]{self.entry.category[:4]}[/dim] {escape(self.entry.label)}")
        else:
            yield Static(escape(self.entry.label))


class ListBrowser(Widget):
    """
    Filterable list of entries.

    Features:
    - Optional category filter (shown only when categories are given)
    - Keyboard navigation (arrows)
    - Select entry with Enter or right arrow
    """

    DEFAULT_CSS = """
    ListBrowser {
        width: 100%;
        height: 100%;
        border: solid $primary;
    }

    ListBrowser:focus-within {
        border: solid $success;
    }

    ListBrowser .list-header {
        height: auto;
        padding: 0 1;
        background: $surface;
    }

    ListBrowser .list-title {
        text-style: bold;
        padding: 1 0;
    }

    ListBrowser Select {
        width: 100%;
    }

    ListBrowser ListView {
        height: 1fr;
    }

    ListBrowser .list-empty {
        padding: 2;
        text-align: center;
        color: $text-muted;
    }

    ListBrowser .list-loading {
        padding: 2;
        text-align: center;
        color: $text-muted;
        text-style: italic;
    }
    """

    BINDINGS = [
        ("right", "choose", "Open"),
    ]

    entries: reactive[list[Entry]] = reactive(list)
    categories: reactive[list[tuple[str, str]]] = reactive(list)
    selected_category: reactive[str] = reactive(ALL_CATEGORIES)

    def __init__(self, title: str, empty_message: str = "Nothing to show", **kwargs) -> None:
        super().__init__(**kwargs)
        self.list_title = title
        self.empty_message = empty_message

    def compose(self) -> ComposeResult:
        """Create child widgets."""
        with Vertical():
            with Vertical(classes="list-header"):
                yield Label(self.list_title, classes="list-title", id="list-title")
                yield Select(
                    [("All", ALL_CATEGORIES)],
                    value=ALL_CATEGORIES,
                    allow_blank=False,
                    id="category-filter",
                )
            yield ListView(id="entry-list")

    def on_mount(self) -> None:
        self.query_one("#category-filter", Select).display = False

    def on_select_changed(self, event: Select.Changed) -> None:
        """Handle filter selection changes."""
        event.stop()
        self.selected_category = str(event.value)
        self._filter_entries()

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        event.stop()
        if isinstance(event.item, EntryListItem):
            self.post_message(EntrySelected(self.id, event.item.entry.payload))

    def on_list_view_highlighted(self, event: ListView.Highlighted) -> None:
        event.stop()
        if isinstance(event.item, EntryListItem):
            self.post_message(EntryHighlighted(self.id, event.item.entry.payload))

    def action_choose(self) -> None:
        """Right arrow behaves like Enter."""
        list_view = self.query_one("#entry-list", ListView)
        item = list_view.highlighted_child
        if isinstance(item, EntryListItem):
            self.post_message(EntrySelected(self.id, item.entry.payload))

    def watch_entries(self, entries: list[Entry]) -> None:
        self._filter_entries()

    def watch_categories(self, categories: list[tuple[str, str]]) -> None:
        """Update category filter options."""
        category_filter = self.query_one("#category-filter", Select)
        options = [("All", ALL_CATEGORIES)]
        options.extend(categories)
        category_filter.set_options(options)
        category_filter.value = ALL_CATEGORIES
        category_filter.display = bool(categories)
        self.selected_category = ALL_CATEGORIES

    def _filter_entries(self) -> None:
        """Apply the category filter and update the list view."""
        list_view = self.query_one("#entry-list", ListView)
        list_view.clear()

        filtered = self.entries
        if self.selected_category != ALL_CATEGORIES:
            filtered = [e for e in filtered if e.category == self.selected_category]

        if not filtered:
            list_view.append(ListItem(Static(self.empty_message, classes="list-empty")))
        else:
            for entry in filtered:
                list_view.append(EntryListItem(entry))

    def set_title(self, title: str) -> None:
        self.list_title = title
        self.query_one("#list-title", Label).update(title)

    def set_entries(self, entries: list[Entry], categories: list[tuple[str, str]] | None = None) -> None:
        """Replace the entries (and optionally the category filter)."""
        self.categories = categories or []
        self.entries = entries
        self._filter_entries()

    def set_is_loading(self) -> None:
        list_view = self.query_one("#entry-list", ListView)
        list_view.clear()
        list_view.append(ListItem(Static("Loading...", classes="list-loading")))

    def set_error(self, message: str) -> None:
        list_view = self.query_one("#entry-list", ListView)
        list_view.clear()
        list_view.append(ListItem(Static(f"[red]Error: {escape(message)}[/red]", classes="list-empty")))

    def focus_list(self) -> None:
        self.query_one("#entry-list", ListView).focus()
