"""Unit tests for configuration loading."""

from pathlib import Path

import pytest
import yaml

from bids_checker.config import (
    ConfigLoadError,
    ValidationOptions,
    ValidatorConfig,
    create_example_config,
    load_config,
)


@pytest.mark.unit
class TestLoadConfig:
    """Tests for load_config function."""

    def test_load_valid_config(self, tmp_path: Path) -> None:
        """Test loading a valid configuration file."""
        config_file = tmp_path / "config.yaml"
        with open(config_file, "w") as f:
            yaml.dump({"ignore_warnings": True, "max_workers": 2}, f)

        config = load_config(str(config_file))
        assert config.ignore_warnings is True
        assert config.ignore_nifti_headers is False
        assert config.max_workers == 2

    def test_defaults_without_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that defaults are used when no config file exists."""
        monkeypatch.chdir(tmp_path)
        assert load_config() == ValidatorConfig()

    def test_default_file_in_working_directory(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test that .bids-checker.yaml is picked up from the working directory."""
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".bids-checker.yaml").write_text("ignore_nifti_headers: true\n")
        assert load_config().ignore_nifti_headers is True

    def test_missing_config_file(self) -> None:
        """Test error when config file doesn't exist."""
        with pytest.raises(ConfigLoadError, match="Configuration file not found"):
            load_config("/nonexistent/config.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        """Test error with invalid YAML syntax."""
        config_file = tmp_path / "bad_config.yaml"
        with open(config_file, "w") as f:
            f.write("invalid: yaml: syntax: here:")

        with pytest.raises(ConfigLoadError, match="Invalid YAML"):
            load_config(str(config_file))

    def test_empty_config_file(self, tmp_path: Path) -> None:
        """Test error with empty config file."""
        config_file = tmp_path / "empty.yaml"
        config_file.touch()

        with pytest.raises(ConfigLoadError, match="empty"):
            load_config(str(config_file))

    def test_not_a_mapping(self, tmp_path: Path) -> None:
        """Test error when the document is not a mapping."""
        config_file = tmp_path / "list.yaml"
        config_file.write_text("- a\n- b\n")

        with pytest.raises(ConfigLoadError, match="must be a mapping"):
            load_config(str(config_file))

    def test_validation_error(self, tmp_path: Path) -> None:
        """Test error with invalid config values."""
        config_file = tmp_path / "invalid.yaml"
        with open(config_file, "w") as f:
            yaml.dump({"max_workers": 0}, f)

        with pytest.raises(ConfigLoadError, match="Configuration validation failed"):
            load_config(str(config_file))


@pytest.mark.unit
class TestExampleConfig:
    """Tests for create_example_config."""

    def test_round_trip(self, tmp_path: Path) -> None:
        """Test that the example config loads back as the defaults."""
        output = tmp_path / "nested" / "config.yaml"
        create_example_config(str(output))

        assert output.exists()
        assert load_config(str(output)) == ValidatorConfig()


@pytest.mark.unit
class TestValidatorConfig:
    """Tests for ValidatorConfig."""

    def test_options(self) -> None:
        """Test deriving run options from the configuration."""
        config = ValidatorConfig(ignore_warnings=True, max_workers=4)
        assert config.options == ValidationOptions(ignore_warnings=True)
