"""
SolExplorer Command Line

Loads a folder of compiler AST documents and opens the explorer, or prints
a plain listing with --list.
"""

import argparse
import sys
from typing import Optional

from solexplorer.ast.registry import ContractRegistry, build_registry
from solexplorer.configs import (
    create_default_config,
    get_config_path,
    get_full_config,
    get_logger,
    setup_logging,
)
from solexplorer.exceptions import SolExplorerError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="solexplorer",
        description="Explore Solidity contracts from compiler AST output",
    )
    parser.add_argument(
        "folder",
        nargs="?",
        help="Folder of AST documents (default: data_folder from config)",
    )
    parser.add_argument(
        "--no-recursive",
        action="store_true",
        help="Only load documents directly inside the folder",
    )
    parser.add_argument(
        "--lenient",
        action="store_true",
        help="Skip unreadable or malformed documents instead of aborting",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--list",
        action="store_true",
        help="Print the loaded contracts and exit instead of opening the explorer",
    )
    parser.add_argument(
        "--init-config",
        action="store_true",
        help="Write a default config.yaml and exit",
    )
    return parser


def format_listing(registry: ContractRegistry) -> str:
    """One line per contract with its non-zero member counts."""
    lines = []
    for name in registry.names():
        contract = registry[name]
        counts = ", ".join(
            f"{count} {key}" for key, count in contract.member_counts().items() if count
        )
        line = name
        if contract.inherits:
            line += f" is {', '.join(contract.inherits)}"
        if counts:
            line += f" ({counts})"
        lines.append(line)
    for diagnostic in registry.diagnostics:
        lines.append(f"skipped {diagnostic}")
    return "\n".join(lines)


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.init_config:
        if create_default_config():
            print(f"Created {get_config_path()}")
        else:
            print(f"Config already exists: {get_config_path()}")
        return 0

    try:
        config = get_full_config()
    except SolExplorerError as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return 1

    # --list writes to the terminal; only the explorer needs a log file
    setup_logging(debug=args.debug or config["debug"], log_file="" if args.list else None)
    logger = get_logger("cli")

    folder = args.folder or config["data_folder"]
    recursive = config["recursive"] and not args.no_recursive
    strict = config["strict"] and not args.lenient

    if args.list:
        try:
            registry = build_registry(
                folder,
                extension=config["extension"],
                recursive=recursive,
                strict=strict,
            )
        except SolExplorerError as e:
            logger.error(f"Error parsing contract files: {e}")
            print(f"Error parsing contract files: {e}", file=sys.stderr)
            return 1
        print(format_listing(registry))
        return 0

    # Textual is only needed for the interactive explorer
    from solexplorer.browser.terminal.app import ExplorerApp

    app = ExplorerApp(
        folder,
        extension=config["extension"],
        recursive=recursive,
        strict=strict,
    )
    app.run()
    return 0
