"""Configuration loading utilities."""

from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from bids_checker.config.models import ValidatorConfig

DEFAULT_CONFIG_PATH = ".bids-checker.yaml"


class ConfigLoadError(Exception):
    """Raised when configuration cannot be loaded or validated."""

    pass


def load_config(config_path: Optional[str] = None) -> ValidatorConfig:
    """Load and validate configuration from a YAML file.

    Args:
        config_path: Path to configuration file. If None, .bids-checker.yaml in
                     the current directory is used when it exists, otherwise
                     defaults are returned.

    Returns:
        Validated ValidatorConfig instance

    Raises:
        ConfigLoadError: If an explicitly given file is not found, the YAML is
                         invalid, the file is empty, or validation fails
    """
    if config_path is None:
        if not Path(DEFAULT_CONFIG_PATH).exists():
            return ValidatorConfig()
        config_path = DEFAULT_CONFIG_PATH

    config_file = Path(config_path)

    if not config_file.exists():
        raise ConfigLoadError(f"Configuration file not found: {config_path}")

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            config_data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"Invalid YAML in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigLoadError(f"Failed to read {config_path}: {e}") from e

    if config_data is None:
        raise ConfigLoadError(f"Configuration file is empty: {config_path}")

    if not isinstance(config_data, dict):
        raise ConfigLoadError(f"Configuration must be a mapping: {config_path}")

    try:
        return ValidatorConfig(**config_data)
    except ValidationError as e:
        raise ConfigLoadError(f"Configuration validation failed:\n{e}") from e


def create_example_config(output_path: str = DEFAULT_CONFIG_PATH) -> None:
    """Create an example configuration file.

    Args:
        output_path: Where to write the example config

    Raises:
        ConfigLoadError: If file cannot be written
    """
    example_config = {
        "ignore_warnings": False,
        "ignore_nifti_headers": False,
        "max_workers": 8,
    }

    output_file = Path(output_path)
    output_file.parent.mkdir(parents=True, exist_ok=True)

    try:
        with open(output_file, "w", encoding="utf-8") as f:
            yaml.dump(example_config, f, default_flow_style=False, sort_keys=False)
    except OSError as e:
        raise ConfigLoadError(f"Failed to write example config to {output_path}: {e}") from e
