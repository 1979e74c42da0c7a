"""
Contract Registry

Loads every AST document in a folder into a name-keyed, read-only
collection of contracts. The registry is rebuilt from scratch on every
call; nothing is cached between runs.
"""

import os
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from solexplorer.ast.loader import load_contract
from solexplorer.ast.models import Contract
from solexplorer.configs import get_logger
from solexplorer.exceptions import DocumentError, DocumentReadError

logger = get_logger("ast.registry")

DEFAULT_EXTENSION = ".json"


@dataclass(frozen=True)
class LoadDiagnostic:
    """A document skipped during a lenient load."""

    path: str
    error: DocumentError

    def __str__(self) -> str:
        return f"{self.path}: {self.error.message}"


class ContractRegistry(Mapping[str, Contract]):
    """
    Read-only mapping of contract name to Contract.

    Usage:
        registry = build_registry("data")
        for name in registry.names():
            contract = registry[name]
    """

    def __init__(
        self,
        contracts: Optional[dict[str, Contract]] = None,
        diagnostics: tuple[LoadDiagnostic, ...] = (),
    ):
        self._contracts = dict(contracts or {})
        self.diagnostics = diagnostics

    def __getitem__(self, name: str) -> Contract:
        return self._contracts[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._contracts)

    def __len__(self) -> int:
        return len(self._contracts)

    def __repr__(self) -> str:
        return f"ContractRegistry({sorted(self._contracts)!r})"

    def names(self) -> list[str]:
        """Contract names in sorted order."""
        return sorted(self._contracts)


def iter_documents(
    folder: str | Path,
    extension: str = DEFAULT_EXTENSION,
    recursive: bool = True,
) -> Iterator[Path]:
    """
    Yield document paths under a folder in a stable order.

    Files and subdirectories of each directory are visited together in
    lexical name order, descending into a subdirectory where its name
    falls. ``a/t.json`` therefore comes before ``b.json``, and the order
    (with it, which document wins a name collision) does not depend on
    the filesystem.

    Args:
        folder: Root folder
        extension: Document extension to match (case-sensitive, e.g. ".json")
        recursive: Descend into subdirectories

    Yields:
        Paths of matching files

    Raises:
        DocumentReadError: If the folder or a subdirectory cannot be listed
    """
    root = Path(folder)
    if not root.is_dir():
        raise DocumentReadError("Contract folder does not exist or is not a directory", root)

    yield from _walk(root, extension, recursive)


def _walk(directory: Path, extension: str, recursive: bool) -> Iterator[Path]:
    try:
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda entry: entry.name)
    except OSError as e:
        raise DocumentReadError(f"Error accessing folder: {e.strerror or e}", directory) from e

    for entry in entries:
        # Symlinked directories are not followed
        if entry.is_dir(follow_symlinks=False):
            if recursive:
                yield from _walk(Path(entry.path), extension, recursive)
        elif Path(entry.name).suffix == extension:
            yield Path(entry.path)


def build_registry(
    folder: str | Path,
    *,
    extension: str = DEFAULT_EXTENSION,
    recursive: bool = True,
    strict: bool = True,
) -> ContractRegistry:
    """
    Load every document in a folder into a ContractRegistry.

    Contracts with an empty name are dropped. When two documents yield the
    same name the one loaded later replaces the earlier one.

    Args:
        folder: Folder holding the AST documents
        extension: Document extension to match
        recursive: Descend into subdirectories
        strict: If True, the first failing document aborts the whole load.
                If False, failing documents are recorded in
                ``registry.diagnostics`` and the load continues.

    Returns:
        ContractRegistry

    Raises:
        DocumentError: In strict mode, the first document that failed to load.
            An unreadable folder raises DocumentReadError in either mode.
    """
    contracts: dict[str, Contract] = {}
    diagnostics: list[LoadDiagnostic] = []

    for path in iter_documents(folder, extension=extension, recursive=recursive):
        try:
            contract = load_contract(path)
        except DocumentError as e:
            if strict:
                raise
            logger.warning(f"Skipping {path}: {e.message}")
            diagnostics.append(LoadDiagnostic(path=str(path), error=e))
            continue

        if not contract.name:
            logger.debug(f"Dropping unnamed contract from {path}")
            continue

        if contract.name in contracts:
            logger.debug(f"Contract {contract.name} from {path} replaces an earlier definition")
        contracts[contract.name] = contract

    logger.info(f"Loaded {len(contracts)} contract(s) from {folder}")
    return ContractRegistry(contracts, tuple(diagnostics))
