"""
Configuration Package - Models and Loaders.

Configuration Structure:
    - PipelineConfig: Root configuration object
    - ValidationConfig: Field validation settings
    - RulesConfig: Assignment limit and enforcement policy
    - OutputConfig: Final JSON formatting

Profiles (e.g. ``strict``) are YAML overlays kept in a ``profiles``
directory beside the base file and merged over it.
"""

from assignment_pipeline.config.loader import (
    ConfigError,
    available_profiles,
    config_from_dict,
    load_config,
)
from assignment_pipeline.config.models import (
    OutputConfig,
    PipelineConfig,
    RulesConfig,
    ValidationConfig,
)

__all__ = [
    "ConfigError",
    "available_profiles",
    "config_from_dict",
    "load_config",
    "OutputConfig",
    "PipelineConfig",
    "RulesConfig",
    "ValidationConfig",
]
