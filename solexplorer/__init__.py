"""
SolExplorer

Terminal explorer for Solidity contracts, built from compiler AST output.
"""

from solexplorer.version import __version__

__all__ = ["__version__"]
