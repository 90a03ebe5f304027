"""
Configuration Loader - YAML Files and Profile Overlays.

A config file is a YAML mapping validated into PipelineConfig. A profile
is a named overlay in the ``profiles`` directory next to that file
(``config/default.yaml`` pairs with ``config/profiles/<name>.yaml``) and
is deep-merged over it before validation.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from assignment_pipeline.config.models import PipelineConfig

logger = logging.getLogger(__name__)

PROFILE_DIR = "profiles"

# Profile names are bare file stems, never paths
_PROFILE_NAME = re.compile(r"^[A-Za-z0-9_-]+$")


class ConfigError(ValueError):
    """Raised for malformed config files or unusable profile names."""

    def __init__(self, message: str, path: Optional[Path] = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = path


def load_config(
    config_path: Optional[Union[str, Path]] = None,
    profile: Optional[str] = None,
    base_path: Optional[Path] = None,
) -> PipelineConfig:
    """
    Load and validate pipeline configuration.

    Args:
        config_path: YAML config file; model defaults if omitted
        profile: Optional overlay name from the file's profiles directory
        base_path: Directory that relative config paths are resolved against

    Returns:
        Validated PipelineConfig object

    Raises:
        FileNotFoundError: If the config or profile file doesn't exist
        ConfigError: If a file is not a mapping or the profile name is bad
        ValidationError: If the merged values are invalid
    """
    if config_path is None:
        if profile:
            raise ConfigError(f"Profile '{profile}' given without a config file")
        return PipelineConfig()

    path = Path(config_path)
    if not path.is_absolute():
        path = (base_path or Path(".")) / path

    data = _read_mapping(path)
    if profile:
        data = deep_merge(data, _read_mapping(profile_path(path, profile)))

    config = PipelineConfig.model_validate(data)
    logger.debug(
        f"Loaded config {path.name}"
        + (f" with profile {profile}" if profile else "")
    )
    return config


def config_from_dict(data: Dict[str, Any]) -> PipelineConfig:
    """Validate an in-memory configuration mapping."""
    return PipelineConfig.model_validate(data)


def profile_path(config_file: Path, profile: str) -> Path:
    """
    Locate a profile overlay for a config file.

    Raises:
        ConfigError: If the name is not a bare stem or escapes the directory
        FileNotFoundError: If no such profile exists
    """
    if not _PROFILE_NAME.match(profile):
        raise ConfigError(f"Invalid profile name: {profile!r}")

    profiles_dir = (config_file.parent / PROFILE_DIR).resolve()
    path = (profiles_dir / f"{profile}.yaml").resolve()
    # A symlinked profile must still live under the profiles directory
    if profiles_dir not in path.parents:
        raise ConfigError(f"Profile outside {profiles_dir}: {profile}", path)
    if not path.is_file():
        raise FileNotFoundError(f"Profile not found: {profile}")
    return path


def available_profiles(config_file: Union[str, Path]) -> List[str]:
    """Names of the profiles that can be applied to a config file."""
    profiles_dir = Path(config_file).parent / PROFILE_DIR
    if not profiles_dir.is_dir():
        return []
    return sorted(p.stem for p in profiles_dir.glob("*.yaml"))


def deep_merge(base: Dict[str, Any], overlay: Dict[str, Any]) -> Dict[str, Any]:
    """Merge overlay into a copy of base; nested mappings merge key by key."""
    result = dict(base)
    for key, value in overlay.items():
        current = result.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            result[key] = deep_merge(current, value)
        else:
            result[key] = value
    return result


def _read_mapping(path: Path) -> Dict[str, Any]:
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(
            f"{path.name}: expected a mapping, got {type(data).__name__}", path
        )
    return data
