"""
SolExplorer Configuration Module

Re-exports commonly used functions for cleaner imports across the codebase.
"""

# Logging (most commonly used)
from solexplorer.configs.logging import get_logger, setup_logging

# Paths
from solexplorer.configs.paths import ensure_data_dir, get_data_path

# YAML config
from solexplorer.configs.yaml_config import (
    DEFAULT_CONFIG_YAML,
    create_default_config,
    get_config_path,
    load_yaml_config,
    save_yaml_config,
)

# Runtime
from solexplorer.configs.runtime import DEFAULT_CONFIG, get_full_config

__all__ = [
    # Logging
    "get_logger",
    "setup_logging",
    # Paths
    "get_data_path",
    "ensure_data_dir",
    # YAML config
    "DEFAULT_CONFIG_YAML",
    "get_config_path",
    "load_yaml_config",
    "save_yaml_config",
    "create_default_config",
    # Runtime
    "DEFAULT_CONFIG",
    "get_full_config",
]
