"""
SolExplorer Runtime Configuration

Configuration merging logic.
Combines defaults, YAML config, and environment variables.
"""

import os

from solexplorer.configs.yaml_config import load_yaml_config

# --- Default Runtime Configuration ---

DEFAULT_CONFIG = {
    "data_folder": "data",
    "extension": ".json",
    "recursive": True,
    "strict": True,
    "debug": False,
}


def _env_flag(name: str) -> bool | None:
    value = os.environ.get(name)
    if value is None or value == "":
        return None
    return value.lower() in ("true", "1", "yes")


def get_full_config() -> dict:
    """
    Get full configuration merged from defaults, YAML, and environment.

    Priority (highest wins):
    1. Environment variables
    2. YAML config file (explorer section, top-level debug)
    3. DEFAULT_CONFIG

    Returns:
        Merged configuration dictionary
    """
    config = dict(DEFAULT_CONFIG)

    yaml_config = load_yaml_config()

    explorer_section = yaml_config.get("explorer") or {}
    for key, value in explorer_section.items():
        if key in config and value is not None:
            config[key] = value

    if "debug" in yaml_config:
        config["debug"] = bool(yaml_config["debug"])

    # Environment overrides
    if os.environ.get("SOLEXPLORER_DATA_FOLDER"):
        config["data_folder"] = os.environ["SOLEXPLORER_DATA_FOLDER"]

    strict = _env_flag("SOLEXPLORER_STRICT")
    if strict is not None:
        config["strict"] = strict

    debug = _env_flag("SOLEXPLORER_DEBUG")
    if debug is not None:
        config["debug"] = debug

    return config
