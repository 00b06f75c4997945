"""Configuration loader with YAML and environment variable support.

This module reads ~/.config/antisync/config.yaml and allows per-target
environment variable overrides using the ANTISYNC_* prefix.

Environment variables (TARGET is the upper-cased target name, with '-'
replaced by '_'):
- ANTISYNC_<TARGET>_URL: Override the target's base URL
- ANTISYNC_<TARGET>_API_KEY: Override the target's API key
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

from antisync.models.config import Config, SAMPLE_CONFIG
from antisync.utils.logging import get_logger


logger = get_logger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "antisync" / "config.yaml"


def env_prefix(target: str) -> str:
    """Environment variable prefix for a target name."""
    return "ANTISYNC_" + target.upper().replace("-", "_") + "_"


def load_config(config_path: Optional[Path] = None, target: Optional[str] = None) -> Config:
    """Load configuration from YAML file with environment variable overrides.

    Args:
        config_path: Path to config file. If None, uses ~/.config/antisync/config.yaml
        target: Target whose ANTISYNC_<TARGET>_* overrides should be applied

    Returns:
        Validated Config object

    Raises:
        FileNotFoundError: If config file doesn't exist and no overrides are set
        PermissionError: If config file permissions are too open
        ValueError: If config file is invalid
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    if config_path.exists():
        logger.info("config_loading", path=str(config_path))
        data = Config.load(config_path).model_dump(mode="json")
    else:
        data = {"targets": []}

    if target is not None:
        data = _apply_env_overrides(data, target)

    if not data["targets"]:
        raise FileNotFoundError(
            f"Configuration file not found at {config_path} and no ANTISYNC_* environment variables set.\n"
            f"Either create a config file or set environment variables. Example config:\n\n"
            f"{SAMPLE_CONFIG}"
        )

    config = Config.from_data(data)
    logger.info("config_loaded", path=str(config_path), targets=[t.name for t in config.targets])
    return config


def _apply_env_overrides(data: Dict[str, Any], target: str) -> Dict[str, Any]:
    """Apply environment variable overrides for one target.

    A target that only exists in the environment is added when both its
    URL and API key are set.

    Args:
        data: Configuration dictionary (``{"targets": [...]}``)
        target: Target name

    Returns:
        Configuration dictionary with environment overrides applied
    """
    prefix = env_prefix(target)
    overrides = {}
    if env_url := os.getenv(prefix + "URL"):
        overrides["url"] = env_url
    if env_api_key := os.getenv(prefix + "API_KEY"):
        overrides["api_key"] = env_api_key

    if not overrides:
        return data

    targets = [dict(t) for t in data["targets"]]
    for entry in targets:
        if entry["name"] == target:
            entry.update(overrides)
            break
    else:
        if "url" in overrides and "api_key" in overrides:
            targets.append({"name": target, **overrides})

    logger.info("config_env_override", target=target, keys=sorted(overrides))
    return {**data, "targets": targets}
