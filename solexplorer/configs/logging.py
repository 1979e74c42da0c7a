"""
SolExplorer Logging Configuration

Configures logging based on environment variables:
- SOLEXPLORER_DEBUG: Enable debug logging (default: false)
- SOLEXPLORER_LOG_FILE: Log file path (default: ~/.solexplorer/solexplorer.log)
"""

import logging
import os
import sys
from pathlib import Path
from typing import Optional

from solexplorer.configs.paths import get_data_path


def setup_logging(
    debug: Optional[bool] = None,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Configure logging for SolExplorer.

    The explorer owns the terminal while it runs, so by default only
    warnings reach stderr and everything else goes to the log file.
    Plain command-line runs pass an empty log_file to log to stderr only.

    Args:
        debug: Enable debug level. Defaults to SOLEXPLORER_DEBUG env var.
        log_file: Log file path. Defaults to SOLEXPLORER_LOG_FILE env var,
                  or $SOLEXPLORER_DATA_PATH/solexplorer.log if not set.
                  An empty string disables the file handler.

    Returns:
        Root logger for solexplorer
    """
    # Read from env if not provided
    if debug is None:
        debug = os.environ.get("SOLEXPLORER_DEBUG", "").lower() in ("true", "1", "yes")
    if log_file is None:
        log_file = os.environ.get("SOLEXPLORER_LOG_FILE")
        if not log_file:
            log_file = str(get_data_path() / "solexplorer.log")

    level = logging.DEBUG if debug else logging.INFO

    formatter = logging.Formatter(
        "%(asctime)s %(levelname)-5s [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    logger = logging.getLogger("solexplorer")
    logger.setLevel(level)

    # Clear existing handlers
    logger.handlers.clear()

    # Only warnings on stderr while a log file is active
    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(formatter)
    if log_file:
        stderr_handler.setLevel(logging.WARNING)
    else:
        stderr_handler.setLevel(level)
    logger.addHandler(stderr_handler)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        file_handler.setLevel(level)
        logger.addHandler(file_handler)
        logger.info(f"Logging to file: {log_file}")

    return logger


def get_logger(component: str) -> logging.Logger:
    """
    Get a logger for a specific component.

    Args:
        component: Component name (e.g., "ast.extractor", "browser")

    Returns:
        Logger instance for the component
    """
    return logging.getLogger(f"solexplorer.{component}")
