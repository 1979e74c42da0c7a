"""
SolExplorer Exception Hierarchy

Centralized exception classes for structured error handling across the codebase.
All SolExplorer-specific exceptions inherit from SolExplorerError.

Usage:
    from solexplorer.exceptions import DocumentError, MissingASTError

    try:
        registry = build_registry(folder)
    except DocumentError as e:
        logger.error(f"Load failed: {e}")
"""

from pathlib import Path


class SolExplorerError(Exception):
    """Base exception for all SolExplorer errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} ({self.details})"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(SolExplorerError):
    """Error in SolExplorer configuration."""

    pass


# =============================================================================
# Document Errors
# =============================================================================


class DocumentError(SolExplorerError):
    """Base class for errors tied to one AST document on disk."""

    def __init__(self, message: str, path: str | Path | None = None):
        details = {}
        if path is not None:
            details["path"] = str(path)
        super().__init__(message, details)
        self.path = str(path) if path is not None else None


class DocumentReadError(DocumentError):
    """Document (or the folder holding it) could not be read."""

    pass


class DocumentDecodeError(DocumentError):
    """Document bytes are not valid JSON."""

    pass


class MissingASTError(DocumentError):
    """Document has no top-level AST nodes."""

    pass
