"""Global configuration file access for jays.

Handles user-level configuration stored in ~/.jays/config.yaml.
"""

from pathlib import Path
from typing import Any, Dict

import yaml


class GlobalConfigError(Exception):
    """Raised when there's an error with global configuration."""
    pass


_CONFIG_DIR = Path.home() / ".jays"


def get_global_config_dir() -> Path:
    """Get the global jays configuration directory.

    Returns:
        Path to ~/.jays/
    """
    return _CONFIG_DIR


def get_config_file_path() -> Path:
    """Get path to config.yaml file.

    Returns:
        Path to ~/.jays/config.yaml
    """
    return get_global_config_dir() / "config.yaml"


def load_global_config() -> Dict[str, Any]:
    """Load global configuration from ~/.jays/config.yaml.

    Returns:
        Dictionary with configuration values. Empty dict if file doesn't exist.

    Raises:
        GlobalConfigError: If the file cannot be read or is not a mapping.
    """
    config_file = get_config_file_path()

    if not config_file.exists():
        return {}

    try:
        with open(config_file, "r") as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise GlobalConfigError(f"Failed to load config from {config_file}: {e}")

    if not isinstance(config, dict):
        raise GlobalConfigError(f"Config file {config_file} must contain a mapping")
    return config
