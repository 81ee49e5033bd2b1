"""
Configuration Loader

Loads, validates and saves the plugin configuration (config.yml).
"""

import copy
import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .config import CONFIG_FILE_NAME, DATA_DIR, DEFAULT_CONFIG

logger = logging.getLogger(__name__)


def get_config_paths(data_dir: Optional[Path] = None) -> list[Path]:
    """
    Get list of config file paths to check in priority order

    Args:
        data_dir: Optional plugin data folder, checked first

    Returns:
        List of paths to check (first found wins)
    """
    paths = []

    # 1. Plugin data folder
    if data_dir:
        paths.append(Path(data_dir) / CONFIG_FILE_NAME)

    # 2. User config directory
    paths.append(DATA_DIR / CONFIG_FILE_NAME)

    # 3. Current working directory
    paths.append(Path.cwd() / CONFIG_FILE_NAME)

    return paths


def load_config(config_path: Optional[Path] = None, data_dir: Optional[Path] = None) -> Dict:
    """
    Load configuration from YAML file

    Args:
        config_path: Optional explicit path to config file
        data_dir: Optional plugin data folder to search

    Returns:
        Configuration dict, user values merged over DEFAULT_CONFIG
    """
    config = copy.deepcopy(DEFAULT_CONFIG)

    # Determine which config file to use
    if config_path:
        config_files = [Path(config_path)]
    else:
        config_files = get_config_paths(data_dir)

    loaded_from = None
    for path in config_files:
        if path.exists():
            loaded_from = path
            break

    if not loaded_from:
        logger.info("No config file found, using defaults")
        return config

    logger.info(f"Loading configuration from: {loaded_from}")

    try:
        with open(loaded_from, 'r', encoding='utf-8') as f:
            user_config = yaml.safe_load(f)

        if not user_config:
            logger.warning(f"Config file {loaded_from} is empty")
            return config

        # Process environment variable substitution
        user_config = substitute_env_vars(user_config)

        return merge_config(config, user_config)

    except yaml.YAMLError as e:
        logger.error(f"Error parsing YAML config: {e}")
        logger.info("Falling back to defaults")
        return config
    except Exception as e:
        logger.error(f"Error loading config: {e}")
        logger.info("Falling back to defaults")
        return config


def merge_config(base: Dict, override: Dict) -> Dict:
    """Recursively merge override into base (in place) and return base"""
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            merge_config(base[key], value)
        else:
            base[key] = value
    return base


def substitute_env_vars(config: Dict) -> Dict:
    """
    Substitute environment variables in config values

    Handles patterns like:
    - ${ENV_VAR}
    - ${ENV_VAR:-default_value}

    Args:
        config: Configuration dict

    Returns:
        Config with environment variables substituted
    """
    pattern = r'\$\{([A-Z_][A-Z0-9_]*)(?::-([^}]*))?\}'

    def replacer(match):
        var_name = match.group(1)
        default_value = match.group(2) or ""
        return os.environ.get(var_name, default_value)

    def substitute_value(value):
        if isinstance(value, str):
            return re.sub(pattern, replacer, value)
        elif isinstance(value, dict):
            return {k: substitute_value(v) for k, v in value.items()}
        elif isinstance(value, list):
            return [substitute_value(item) for item in value]
        else:
            return value

    return substitute_value(config)


def get_option(config: Dict, path: str, default: Any = None) -> Any:
    """
    Look up a dotted option path such as "tab-list.header"

    Returns default when any segment is missing or the value is None.
    """
    node: Any = config
    for key in path.split('.'):
        if not isinstance(node, dict) or key not in node:
            return default
        node = node[key]
    return default if node is None else node


def validate_config(config: Dict) -> tuple[bool, list[str]]:
    """
    Validate configuration structure

    Args:
        config: Configuration dict to validate

    Returns:
        Tuple of (is_valid, list of error messages)
    """
    errors = []

    interval = get_option(config, 'tab-list.update-interval', 30)
    if not isinstance(interval, int) or isinstance(interval, bool) or interval < 1:
        errors.append("'tab-list.update-interval' must be a positive whole number of seconds")

    spacing = get_option(config, 'holograms.line-spacing', 0.25)
    if not isinstance(spacing, (int, float)) or isinstance(spacing, bool) or spacing <= 0:
        errors.append("'holograms.line-spacing' must be a positive number")

    for key in ('welcome.join-message', 'tab-list.header', 'tab-list.footer',
                'messages.prefix', 'messages.no-permission', 'discord.link'):
        if not isinstance(get_option(config, key, ''), str):
            errors.append(f"'{key}' must be a string")

    # Validate panel config (if present)
    panel = config.get('panel')
    if panel:
        if 'panel_url' not in panel:
            errors.append("Panel config missing 'panel_url'")

        if 'api_key' not in panel:
            errors.append("Panel config missing 'api_key'")

        if 'server' not in panel:
            errors.append("Panel config missing 'server' (server identifier)")

        worlds = panel.get('worlds')
        if worlds is not None and not isinstance(worlds, dict):
            errors.append("Panel 'worlds' must map world names to dimension ids")

    is_valid = len(errors) == 0
    return is_valid, errors


def save_config(config: Dict, config_path: Optional[Path] = None) -> bool:
    """
    Save configuration to YAML file

    Args:
        config: Configuration dict to save
        config_path: Optional path to save to (defaults to user config)

    Returns:
        True if saved successfully
    """
    if not config_path:
        config_path = DATA_DIR / CONFIG_FILE_NAME

    try:
        # Create directory if it doesn't exist
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, 'w', encoding='utf-8') as f:
            yaml.dump(config, f, default_flow_style=False, sort_keys=False, allow_unicode=True)

        logger.info(f"✓ Configuration saved to: {config_path}")
        return True

    except Exception as e:
        logger.error(f"Failed to save config: {e}")
        return False


def save_default_config(data_dir: Path) -> Path:
    """
    Write DEFAULT_CONFIG to <data_dir>/config.yml unless the file already exists

    Returns:
        Path to the config file
    """
    config_path = Path(data_dir) / CONFIG_FILE_NAME
    if not config_path.exists():
        save_config(copy.deepcopy(DEFAULT_CONFIG), config_path)
    return config_path
