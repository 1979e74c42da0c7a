"""
SolExplorer Data Paths

Location of the per-user data directory (config file, log file).
"""

import os
from pathlib import Path

DEFAULT_DATA_PATH = Path.home() / ".solexplorer"


def get_data_path() -> Path:
    """Get the SolExplorer data directory path.

    SOLEXPLORER_DATA_PATH overrides the default of ~/.solexplorer.
    """
    data_path = os.environ.get("SOLEXPLORER_DATA_PATH")
    if data_path:
        return Path(data_path).expanduser()
    return DEFAULT_DATA_PATH


def ensure_data_dir() -> Path:
    """Ensure the data directory exists and return it."""
    data_path = get_data_path()
    data_path.mkdir(parents=True, exist_ok=True)
    return data_path
