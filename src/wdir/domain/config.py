from __future__ import annotations

"""
Configuration Domain Management.

Provides the default session configuration and loads user preferences from
an optional JSON file in the user data directory. CLI flags are merged on
top by the interface layer.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from wdir.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
CONFIG_FILE_NAME = "config.json"


def get_config_path() -> str:
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Target
        "directory": ".",
        "pattern": "*",

        # Recursion
        "recursive": False,
        "depth": None,

        # Selection
        "all": False,

        # Presentation
        "bare": False,
        "quiet": False,
        "raw": False,
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load user preferences from disk, merged over the defaults.

    Unknown keys are dropped. A missing file is normal; an unreadable or
    malformed one is reported and ignored.

    Args:
        path: Config file location. Defaults to the user data directory.

    Returns:
        Dict[str, Any]: The merged configuration.
    """
    config = get_default_config()
    config_path = path or get_config_path()

    if not os.path.exists(config_path):
        logger.debug(f"Config file not found at '{config_path}'. Using defaults.")
        return config

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning(f"Failed to load config '{config_path}': {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning(f"Corrupted config file '{config_path}'. Using defaults.")
        return config

    for key, value in data.items():
        if key in config:
            config[key] = value
        else:
            logger.debug(f"Ignoring unknown config key '{key}'")

    return config
