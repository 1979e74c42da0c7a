"""
Document Loader

Reads one AST document from disk and hands it to the extractor.
"""

import json
from pathlib import Path

from solexplorer.ast.extractor import extract_contract
from solexplorer.ast.models import Contract
from solexplorer.configs import get_logger
from solexplorer.exceptions import DocumentDecodeError, DocumentReadError

logger = get_logger("ast.loader")


def load_contract(path: str | Path) -> Contract:
    """
    Load a single AST document and extract its contract.

    Args:
        path: Path to the JSON document

    Returns:
        Contract model (its name may be empty)

    Raises:
        DocumentReadError: If the file cannot be read
        DocumentDecodeError: If the file is not valid JSON
        MissingASTError: If the document has no top-level AST nodes
    """
    path = Path(path)

    try:
        data = path.read_bytes()
    except OSError as e:
        raise DocumentReadError(f"Failed to read contract file: {e.strerror or e}", path) from e

    try:
        document = json.loads(data)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DocumentDecodeError(f"Failed to parse contract file: {e}", path) from e

    contract = extract_contract(document, path)
    logger.debug(f"Loaded {contract.name or '<unnamed>'} from {path}")
    return contract
