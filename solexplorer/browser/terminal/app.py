"""
Explorer App

Textual application hosting the contract explorer screens.
"""

from functools import partial

from textual.app import App

from solexplorer.ast.registry import build_registry
from solexplorer.browser.terminal.screens.main import MainScreen


class ExplorerApp(App):
    """Interactive explorer over a folder of compiler AST documents."""

    TITLE = "SolExplorer"

    BINDINGS = [
        ("q", "quit", "Quit"),
    ]

    def __init__(
        self,
        folder: str,
        extension: str = ".json",
        recursive: bool = True,
        strict: bool = True,
    ):
        super().__init__()
        self.folder = folder
        self.load_registry = partial(
            build_registry,
            folder,
            extension=extension,
            recursive=recursive,
            strict=strict,
        )

    def on_mount(self) -> None:
        self.push_screen(MainScreen(self.load_registry, self.folder))
