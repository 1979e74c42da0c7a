"""
SolExplorer YAML Configuration

Loading, saving, and defaults for ~/.solexplorer/config.yaml.
"""

from pathlib import Path

import yaml

from solexplorer.configs.paths import ensure_data_dir, get_data_path
from solexplorer.exceptions import ConfigurationError

# --- Default Config Template ---

DEFAULT_CONFIG_YAML = """\
# SolExplorer Configuration
# Edit this file to customize SolExplorer behavior.

explorer:
  # Folder holding compiler AST documents (one JSON file per compilation unit)
  data_folder: "data"

  # Only files with this extension are loaded
  extension: ".json"

  # Descend into subdirectories of data_folder
  recursive: true

  # Abort the whole load on the first unreadable or malformed file.
  # Set to false to skip bad files and report them as diagnostics.
  strict: true

# Enable debug logging
debug: false
"""


def get_config_path() -> Path:
    """Get the path to config.yaml."""
    return get_data_path() / "config.yaml"


def load_yaml_config() -> dict:
    """
    Load configuration from ~/.solexplorer/config.yaml.

    Returns:
        Configuration dictionary (empty if file doesn't exist)

    Raises:
        ConfigurationError: If the file exists but is not valid YAML
    """
    config_path = get_config_path()
    if not config_path.exists():
        return {}

    try:
        content = yaml.safe_load(config_path.read_text())
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid config file: {e}", {"path": str(config_path)}) from e

    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ConfigurationError(
            "Config file must contain a mapping", {"path": str(config_path)}
        )
    return content


def save_yaml_config(config: dict) -> Path:
    """
    Save configuration to ~/.solexplorer/config.yaml.

    Args:
        config: Configuration dictionary to save

    Returns:
        Path the config was written to
    """
    config_path = get_config_path()
    ensure_data_dir()
    config_path.write_text(yaml.safe_dump(config, default_flow_style=False, sort_keys=False))
    return config_path


def create_default_config() -> bool:
    """
    Create default config.yaml if it doesn't exist.

    Returns:
        True if file was created, False if it already exists
    """
    config_path = get_config_path()
    if config_path.exists():
        return False

    ensure_data_dir()
    config_path.write_text(DEFAULT_CONFIG_YAML)
    return True
