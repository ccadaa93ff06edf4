"""Unit tests for configuration management."""

import pytest
from pathlib import Path

import yaml

from funcdemo.config.defaults import DEMO_ORDER, get_default_config
from funcdemo.config.loader import ConfigLoader
from funcdemo.config.validation import ConfigValidator
from funcdemo.errors import ConfigurationError


def write_yaml(directory: Path, data) -> None:
    with open(directory / "demos.yaml", "w") as f:
        yaml.safe_dump(data, f)


class TestDefaultConfig:
    """Test suite for default configuration."""

    def test_default_config_creation(self) -> None:
        """Test that default configuration can be created."""
        config = get_default_config()
        assert config.inputs.numbers == (1, 2, 3, 4, 5)
        assert config.inputs.optional_fallback == "fallback"
        assert config.output.format == "text"
        assert config.runner.enabled_demos == DEMO_ORDER
        assert config.runner.stop_on_error is False


class TestConfigLoader:
    """Test suite for configuration loader."""

    def test_config_loader_creation(self) -> None:
        """Test that ConfigLoader can be created."""
        loader = ConfigLoader.create()
        assert isinstance(loader.config_dir, Path)
        assert loader.config_dir.name == "config"

    def test_merge_config_defaults_only(self, tmp_path: Path) -> None:
        """Missing file means defaults only."""
        config = ConfigLoader.create(tmp_path).merge_config()

        assert config["inputs"]["numbers"] == [1, 2, 3, 4, 5]
        assert config["output"]["show_headers"] is True

    def test_file_overrides_defaults(self, tmp_path: Path) -> None:
        """YAML values replace defaults; unspecified keys remain."""
        write_yaml(tmp_path, {"inputs": {"numbers": [10, 20]}})

        config = ConfigLoader.create(tmp_path).load()

        assert config.inputs.numbers == (10, 20)
        assert config.inputs.words == ("alpha", "beta", "gamma", "delta")

    def test_explicit_overrides_win(self, tmp_path: Path) -> None:
        """Explicit overrides beat the file."""
        write_yaml(tmp_path, {"output": {"format": "json", "show_headers": False}})

        config = ConfigLoader.create(tmp_path).load({"output": {"format": "text"}})

        assert config.output.format == "text"
        assert config.output.show_headers is False

    def test_empty_file(self, tmp_path: Path) -> None:
        (tmp_path / "demos.yaml").write_text("")
        assert ConfigLoader.create(tmp_path).load() == get_default_config()

    def test_invalid_yaml_raises(self, tmp_path: Path) -> None:
        (tmp_path / "demos.yaml").write_text("inputs: [unclosed\n")
        with pytest.raises(ConfigurationError):
            ConfigLoader.create(tmp_path).load()

    def test_non_mapping_file_raises(self, tmp_path: Path) -> None:
        write_yaml(tmp_path, [1, 2, 3])
        with pytest.raises(ConfigurationError):
            ConfigLoader.create(tmp_path).load()

    def test_invalid_values_raise_with_errors(self, tmp_path: Path) -> None:
        """Validation failures are reported on the exception."""
        with pytest.raises(ConfigurationError) as exc_info:
            ConfigLoader.create(tmp_path).load({"output": {"format": "xml"}})

        assert [e.field for e in exc_info.value.errors] == ["output.format"]

    def test_unknown_key_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError):
            ConfigLoader.create(tmp_path).load({"inputs": {"colour": "blue"}})

    def test_shipped_config_is_valid(self) -> None:
        """The repository's config/demos.yaml loads cleanly."""
        config = ConfigLoader.create().load()
        assert config.inputs.numbers == (1, 2, 3, 4, 5)


class TestConfigValidator:
    """Test suite for configuration validation."""

    def test_valid_defaults(self) -> None:
        merged = ConfigLoader.create(Path("/nonexistent")).merge_config()
        assert ConfigValidator.validate_config(merged) == []

    def test_input_validation(self) -> None:
        errors = ConfigValidator.validate_input_params({
            "numbers": [1, "2"],
            "words": "not-a-list",
            "predicate_input": True,
            "transform_text": 5,
            "reference_time": "2014-03-18T12:00:00",
            "display_timezone": "Mars/Olympus_Mons",
        })
        fields = {e.field for e in errors}
        assert fields == {
            "inputs.numbers",
            "inputs.words",
            "inputs.predicate_input",
            "inputs.transform_text",
            "inputs.reference_time",
            "inputs.display_timezone",
        }

    def test_runner_validation(self) -> None:
        errors = ConfigValidator.validate_runner_params({
            "enabled_demos": ["predicate", "teleport"],
            "stop_on_error": "yes",
        })
        assert [e.field for e in errors] == ["runner.enabled_demos", "runner.stop_on_error"]
        assert "teleport" in errors[0].message

    def test_logging_validation(self) -> None:
        assert ConfigValidator.validate_logging_params({"level": "debug"}) == []
        errors = ConfigValidator.validate_logging_params({"level": "LOUD", "format_json": 1})
        assert len(errors) == 2

    def test_empty_section_is_reported(self) -> None:
        """A section key with nothing under it parses to None."""
        errors = ConfigValidator.validate_config({"inputs": None, "output": "json"})

        assert [(e.field, e.message) for e in errors] == [
            ("inputs", "Must be a mapping"),
            ("output", "Must be a mapping"),
        ]

    def test_empty_section_in_file_raises(self, tmp_path: Path) -> None:
        (tmp_path / "demos.yaml").write_text("inputs:\n")
        with pytest.raises(ConfigurationError) as exc_info:
            ConfigLoader.create(tmp_path).load()

        assert [e.field for e in exc_info.value.errors] == ["inputs"]

    @pytest.mark.parametrize("zone", ["Europe", "America"])
    def test_timezone_region_is_rejected(self, zone: str) -> None:
        """Region directories of the zone database are not zones."""
        errors = ConfigValidator.validate_input_params({"display_timezone": zone})
        assert [e.field for e in errors] == ["inputs.display_timezone"]
