"""
Pytest fixtures for SolExplorer tests.
"""

import json
import logging
import sys
import tempfile
from pathlib import Path
from typing import Any, Callable, Generator

import pytest

# Add project root to path for package imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def isolated_data_path(temp_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep config and log files out of the real home directory."""
    data_path = temp_dir / ".solexplorer"
    monkeypatch.setenv("SOLEXPLORER_DATA_PATH", str(data_path))
    for name in ("SOLEXPLORER_DEBUG", "SOLEXPLORER_LOG_FILE", "SOLEXPLORER_DATA_FOLDER", "SOLEXPLORER_STRICT"):
        monkeypatch.delenv(name, raising=False)
    return data_path


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """Drop handlers installed by setup_logging so they don't outlive a test."""
    yield
    logger = logging.getLogger("solexplorer")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


@pytest.fixture
def write_document(temp_dir: Path) -> Callable[..., Path]:
    """Write a JSON document under temp_dir/data and return its path."""

    def _write(relative: str, document: Any) -> Path:
        path = temp_dir / "data" / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(document, str):
            path.write_text(document)
        else:
            path.write_text(json.dumps(document))
        return path

    return _write


@pytest.fixture
def data_dir(temp_dir: Path) -> Path:
    """The folder write_document writes into."""
    path = temp_dir / "data"
    path.mkdir(parents=True, exist_ok=True)
    return path


@pytest.fixture
def token_document() -> dict:
    """A realistic compiler artifact for an ERC20-style token."""
    return {
        "contractName": "Token",
        "ast": {
            "nodeType": "SourceUnit",
            "nodes": [
                {
                    "id": 1,
                    "nodeType": "PragmaDirective",
                    "literals": ["solidity", "^", "0.8", ".20"],
                },
                {
                    "id": 2,
                    "nodeType": "ImportDirective",
                    "absolutePath": "@openzeppelin/contracts/access/Ownable.sol",
                    "file": "@openzeppelin/contracts/access/Ownable.sol",
                    "unitAlias": "",
                },
                {
                    "id": 100,
                    "nodeType": "ContractDefinition",
                    "name": "Token",
                    "contractKind": "contract",
                    "baseContracts": [
                        {
                            "nodeType": "InheritanceSpecifier",
                            "baseName": {"nodeType": "IdentifierPath", "name": "Ownable"},
                        },
                        {
                            "nodeType": "InheritanceSpecifier",
                            "baseName": {"nodeType": "IdentifierPath", "name": "Pausable"},
                        },
                    ],
                    "nodes": [
                        {
                            "id": 10,
                            "nodeType": "VariableDeclaration",
                            "name": "balances",
                            "visibility": "public",
                            "stateVariable": True,
                            "storageLocation": "default",
                            "constant": False,
                            "mutability": "mutable",
                            "functionSelector": "27e235e3",
                            "typeName": {
                                "nodeType": "Mapping",
                                "keyType": {"nodeType": "ElementaryTypeName", "name": "address"},
                                "valueType": {"nodeType": "ElementaryTypeName", "name": "uint256"},
                            },
                        },
                        {
                            "id": 11,
                            "nodeType": "VariableDeclaration",
                            "name": "MAX_SUPPLY",
                            "visibility": "public",
                            "stateVariable": True,
                            "storageLocation": "default",
                            "constant": True,
                            "mutability": "constant",
                            "typeName": {"nodeType": "ElementaryTypeName", "name": "uint256"},
                            "value": {
                                "nodeType": "BinaryOperation",
                                "operator": "*",
                                "leftExpression": {"nodeType": "Literal", "kind": "number", "value": "1000000"},
                                "rightExpression": {
                                    "nodeType": "BinaryOperation",
                                    "operator": "**",
                                    "leftExpression": {"nodeType": "Literal", "kind": "number", "value": "10"},
                                    "rightExpression": {"nodeType": "Identifier", "name": "DECIMALS"},
                                },
                            },
                        },
                        {
                            "id": 12,
                            "nodeType": "FunctionDefinition",
                            "name": "",
                            "kind": "constructor",
                            "visibility": "public",
                            "stateMutability": "nonpayable",
                            "parameters": {
                                "nodeType": "ParameterList",
                                "parameters": [
                                    {
                                        "nodeType": "VariableDeclaration",
                                        "name": "owner",
                                        "typeName": {"nodeType": "ElementaryTypeName", "name": "address"},
                                    }
                                ],
                            },
                            "returnParameters": {"nodeType": "ParameterList", "parameters": []},
                            "modifiers": [],
                        },
                        {
                            "id": 13,
                            "nodeType": "FunctionDefinition",
                            "name": "transfer",
                            "kind": "function",
                            "visibility": "external",
                            "stateMutability": "nonpayable",
                            "parameters": {
                                "nodeType": "ParameterList",
                                "parameters": [
                                    {
                                        "nodeType": "VariableDeclaration",
                                        "name": "to",
                                        "typeName": {"nodeType": "ElementaryTypeName", "name": "address"},
                                    },
                                    {
                                        "nodeType": "VariableDeclaration",
                                        "name": "amount",
                                        "typeName": {"nodeType": "ElementaryTypeName", "name": "uint256"},
                                    },
                                ],
                            },
                            "returnParameters": {
                                "nodeType": "ParameterList",
                                "parameters": [
                                    {
                                        "nodeType": "VariableDeclaration",
                                        "name": "",
                                        "typeName": {"nodeType": "ElementaryTypeName", "name": "bool"},
                                    }
                                ],
                            },
                            "modifiers": [
                                {
                                    "nodeType": "ModifierInvocation",
                                    "modifierName": {"nodeType": "IdentifierPath", "name": "whenNotPaused"},
                                },
                                {
                                    "nodeType": "ModifierInvocation",
                                    "modifierName": {"nodeType": "IdentifierPath", "name": "onlyOwner"},
                                },
                            ],
                            "baseFunctions": [55],
                            "overrides": {
                                "nodeType": "OverrideSpecifier",
                                "overrides": [{"nodeType": "IdentifierPath", "name": "IERC20"}],
                            },
                        },
                        {
                            "id": 14,
                            "nodeType": "EventDefinition",
                            "name": "Transfer",
                            "parameters": {
                                "nodeType": "ParameterList",
                                "parameters": [
                                    {
                                        "nodeType": "VariableDeclaration",
                                        "name": "from",
                                        "indexed": True,
                                        "typeName": {"nodeType": "ElementaryTypeName", "name": "address"},
                                    },
                                    {
                                        "nodeType": "VariableDeclaration",
                                        "name": "value",
                                        "typeName": {"nodeType": "ElementaryTypeName", "name": "uint256"},
                                    },
                                ],
                            },
                        },
                        {
                            "id": 15,
                            "nodeType": "ModifierDefinition",
                            "name": "onlyOwner",
                            "parameters": {"nodeType": "ParameterList", "parameters": []},
                        },
                        {
                            "id": 16,
                            "nodeType": "StructDefinition",
                            "name": "Checkpoint",
                            "members": [
                                {
                                    "nodeType": "VariableDeclaration",
                                    "name": "block",
                                    "typeName": {"nodeType": "ElementaryTypeName", "name": "uint64"},
                                },
                                {
                                    "nodeType": "VariableDeclaration",
                                    "name": "allowances",
                                    "typeName": {
                                        "nodeType": "Mapping",
                                        "keyType": {"nodeType": "ElementaryTypeName", "name": "address"},
                                        "valueType": {"nodeType": "ElementaryTypeName", "name": "uint256"},
                                    },
                                },
                            ],
                        },
                        {
                            "id": 17,
                            "nodeType": "EnumDefinition",
                            "name": "Status",
                            "members": [
                                {"nodeType": "EnumValue", "name": "Active"},
                                {"nodeType": "EnumValue", "name": "Paused"},
                            ],
                        },
                        {
                            "id": 18,
                            "nodeType": "UsingForDirective",
                            "libraryName": {"nodeType": "IdentifierPath", "name": "SafeMath"},
                        },
                    ],
                },
            ],
        },
    }
