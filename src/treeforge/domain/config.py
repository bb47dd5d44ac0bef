from __future__ import annotations

"""
Configuration Domain Management.

Handles persistent storage of the last session (structure source, target
base directory and rendering options) as JSON in the user data directory.
Missing or corrupted files fall back to defaults.
"""

import json
import logging
import os
from typing import Any, Dict

from treeforge.domain.constants import CURRENT_CONFIG_VERSION
from treeforge.infra.fs import get_user_data_dir, safe_mkdir

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "config.json"
DEFAULT_MAX_WORKERS = 4

# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------

def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration (Session State).

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # IO Paths
        "input_file": "",
        "base_dir": "",

        # Preview
        "print_preview": True,
        "show_icons": False,

        # Materialization
        "parallel": False,
        "max_workers": DEFAULT_MAX_WORKERS,
    }


def get_default_app_state() -> Dict[str, Any]:
    """
    Generate the complete default application state structure.

    Returns:
        Dict[str, Any]: The full JSON structure for config.json.
    """
    return {
        "version": CURRENT_CONFIG_VERSION,
        "last_session": get_default_config(),
    }


def get_config_file() -> str:
    """Resolve the absolute path of the persistent config file."""
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)

# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------

def load_app_state() -> Dict[str, Any]:
    """
    Load application state from disk.

    Returns:
        Dict[str, Any]: The loaded state or a default structure on failure.
    """
    state = get_default_app_state()
    config_file = get_config_file()

    if not os.path.exists(config_file):
        logger.debug("Config file not found. Returning defaults.")
        return state

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return state

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Resetting to defaults.")
        return state

    # Merge with defaults to ensure new keys exist
    session = data.get("last_session")
    if isinstance(session, dict):
        state["last_session"].update(session)

    state["version"] = CURRENT_CONFIG_VERSION
    return state


def save_app_state(state: Dict[str, Any]) -> bool:
    """
    Persist application state to disk.

    Args:
        state: The state dictionary to save.

    Returns:
        bool: True if the file was written.
    """
    config_file = get_config_file()
    ok, err = safe_mkdir(os.path.dirname(config_file))
    if not ok:
        logger.error(f"Failed to prepare configuration directory: {err}")
        return False

    state["version"] = CURRENT_CONFIG_VERSION
    try:
        with open(config_file, "w", encoding="utf-8") as f:
            json.dump(state, f, ensure_ascii=False, indent=4)
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")
        return False

    logger.debug(f"Configuration saved to {config_file}")
    return True

# -----------------------------------------------------------------------------
# Facade API
# -----------------------------------------------------------------------------

def load_config() -> Dict[str, Any]:
    """Retrieve the active configuration (Last Session) merged over defaults."""
    defaults = get_default_config()
    defaults.update(load_app_state().get("last_session", {}))
    return defaults


def save_config(config: Dict[str, Any]) -> bool:
    """Save the provided config as the 'last_session'."""
    state = load_app_state()
    state["last_session"] = dict(config)
    return save_app_state(state)
