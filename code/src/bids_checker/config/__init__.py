"""Configuration module for bids-checker."""

from bids_checker.config.loader import (
    DEFAULT_CONFIG_PATH,
    ConfigLoadError,
    create_example_config,
    load_config,
)
from bids_checker.config.models import ValidationOptions, ValidatorConfig

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "ConfigLoadError",
    "ValidationOptions",
    "ValidatorConfig",
    "create_example_config",
    "load_config",
]
