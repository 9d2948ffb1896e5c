"""
Common configuration settings used throughout the application.

This module contains globally shared settings: the loguru format string, the
process exit statuses and the loader for the optional user defaults file.
The user file lets someone who always converts with the same options (say,
FLAC at level 8 with a `folder.jpg` cover) keep those choices out of every
command line.
"""
from pathlib import Path
from typing import Any, Dict

import yaml
from loguru import logger

# --- User-Defined Defaults ---
# A 'config.user.yaml' file at the project root may override the built-in
# defaults of the command-line options. Values given on the command line
# always win over values from this file.

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
USER_CONFIG_PATH = PROJECT_ROOT / "config.user.yaml"

# Keys accepted under the `defaults:` section, with the type each value must have.
# The keys match the `dest` names of the command-line options.
USER_DEFAULT_TYPES: Dict[str, type] = {
    "format": str,
    "cover": str,
    "compression": int,
    "sample_rate": int,
}


# --- Logging Configuration ---

# The format string for the Loguru logger: timestamp, level, origin and message.
LOGGER_FORMAT = (
    "<green>{time:MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


# --- Process Exit Statuses ---

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


def load_user_defaults(config_path: Path = USER_CONFIG_PATH) -> Dict[str, Any]:
    """
    Loads option defaults from a user YAML file.

    The file is optional. A missing file yields an empty mapping; a file that
    cannot be read or parsed is reported with a warning and otherwise ignored,
    since the built-in defaults are always a valid fallback. Entries with an
    unknown key or a value of the wrong type are skipped with a warning.

    Args:
        config_path: Path to the YAML file. Defaults to `config.user.yaml` at
                     the project root.

    Returns:
        A dictionary mapping option names (e.g. "format", "compression") to the
        user's default values. Only validated entries are included.
    """
    if not config_path.is_file():
        logger.debug(f"User config '{config_path}' not found. Using built-in defaults.")
        return {}

    try:
        with config_path.open("r", encoding="utf-8") as f:
            user_config = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Could not load or parse '{config_path}': {e}")
        return {}

    if not isinstance(user_config, dict):
        if user_config is not None:
            logger.warning(f"Ignoring '{config_path}': expected a mapping at the top level.")
        return {}

    defaults_section = user_config.get("defaults") or {}
    if not isinstance(defaults_section, dict):
        logger.warning(f"Ignoring 'defaults' in '{config_path}': expected a mapping.")
        return {}

    defaults: Dict[str, Any] = {}
    for key, value in defaults_section.items():
        expected_type = USER_DEFAULT_TYPES.get(key)
        if expected_type is None:
            logger.warning(f"Ignoring unknown key '{key}' in '{config_path}'.")
            continue
        # bool is a subclass of int, but `compression: true` is not a level.
        if isinstance(value, bool) or not isinstance(value, expected_type):
            logger.warning(
                f"Ignoring '{key}' in '{config_path}': expected {expected_type.__name__}, "
                f"got {type(value).__name__}."
            )
            continue
        defaults[key] = value

    logger.debug(f"Loaded user defaults from '{config_path}': {defaults}")
    return defaults
