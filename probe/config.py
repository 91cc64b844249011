"""
Probe configuration: built-in defaults, optionally overridden by a JSON file.
"""

import copy
import json
import logging
import os
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "FAAS_INSPECTOR_CONFIG"

DEFAULT_CONFIG = {
    "paths": {
        "marker_file": "/tmp/container-id",
        "cpuinfo": "/proc/cpuinfo",
        "stat": "/proc/stat",
    },
    "collectors": {
        "memory": False,
    },
    "logging": {
        "level": "INFO",
    },
}


def load_config(config_path: Optional[str] = None) -> dict:
    """Defaults updated section by section from config_path (or $FAAS_INSPECTOR_CONFIG)."""
    config = copy.deepcopy(DEFAULT_CONFIG)

    config_path = config_path or os.environ.get(CONFIG_ENV_VAR)
    if not config_path:
        return config

    if not Path(config_path).exists():
        logger.warning(f"Config file {config_path} not found, using defaults")
        return config

    try:
        with open(config_path) as f:
            user_config = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning(f"Failed to load config: {e}, using defaults")
        return config

    if not isinstance(user_config, dict):
        logger.warning(f"Config in {config_path} is not an object, using defaults")
        return config

    for section, values in user_config.items():
        if isinstance(values, dict) and isinstance(config.get(section), dict):
            config[section].update(values)
        else:
            config[section] = values

    logger.info(f"Loaded config from {config_path}")
    return config
