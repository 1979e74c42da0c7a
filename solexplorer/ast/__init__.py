"""
Solidity AST Extraction

Turns compiler-emitted JSON ASTs into an immutable, queryable model of each
contract's declarations: variables, mappings, functions, constructor,
events, modifiers, structs, enums, and inheritance.
"""

from solexplorer.ast.models import (
    Contract,
    Enum,
    Event,
    Function,
    Import,
    Modifier,
    Parameter,
    Struct,
    Variable,
)
from solexplorer.ast.type_names import render_type
from solexplorer.ast.values import render_value
from solexplorer.ast.extractor import extract_contract
from solexplorer.ast.loader import load_contract
from solexplorer.ast.registry import (
    ContractRegistry,
    LoadDiagnostic,
    build_registry,
    iter_documents,
)

__all__ = [
    # Models
    "Contract",
    "Import",
    "Variable",
    "Function",
    "Event",
    "Modifier",
    "Struct",
    "Enum",
    "Parameter",
    # Renderers
    "render_type",
    "render_value",
    # Extraction
    "extract_contract",
    "load_contract",
    # Registry
    "ContractRegistry",
    "LoadDiagnostic",
    "build_registry",
    "iter_documents",
]
