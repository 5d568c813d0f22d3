"""Unit tests for configuration and constants."""

from __future__ import annotations

import re
from pathlib import Path

import pytest

from collada_writer.config import ConfigLoader, WriterConfig
from collada_writer.constants import Constraints, Defaults, Patterns


class TestWriterConfig:
    """Test suite for WriterConfig class."""

    def test_default_config(self):
        """Test default configuration values."""
        config = WriterConfig()

        assert config.collada_version == "1.4.1"
        assert config.indent == 2
        assert config.xml_declaration is True
        assert config.authoring_tool == "collada-writer"
        assert config.unit_name == "meter"
        assert config.unit_meter == 1.0
        assert config.up_axis == "Y_UP"

    def test_config_is_immutable(self):
        """Test that config is frozen and cannot be modified."""
        config = WriterConfig()

        with pytest.raises(Exception):  # FrozenInstanceError
            config.indent = 4  # type: ignore[misc]

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"indent": -1},
            {"indent": Constraints.MAX_INDENT + 1},
            {"unit_meter": 0.0},
            {"unit_name": ""},
            {"up_axis": "W_UP"},
            {"collada_version": "1.5.0"},
        ],
    )
    def test_config_validation(self, kwargs):
        """Test that invalid values are rejected."""
        with pytest.raises(ValueError):
            WriterConfig(**kwargs)

    def test_config_from_env(self, monkeypatch):
        """Test loading configuration from environment variables."""
        monkeypatch.setenv("COLLADA_INDENT", "4")
        monkeypatch.setenv("COLLADA_AUTHORING_TOOL", "layout-exporter")
        monkeypatch.setenv("COLLADA_UNIT_NAME", "centimeter")
        monkeypatch.setenv("COLLADA_UNIT_METER", "0.01")
        monkeypatch.setenv("COLLADA_UP_AXIS", "z_up")

        config = WriterConfig.from_env()

        assert config.indent == 4
        assert config.authoring_tool == "layout-exporter"
        assert config.unit_name == "centimeter"
        assert config.unit_meter == 0.01
        assert config.up_axis == "Z_UP"

    def test_blank_authoring_tool_disables_it(self, monkeypatch):
        monkeypatch.setenv("COLLADA_AUTHORING_TOOL", "  ")

        assert WriterConfig.from_env().authoring_tool is None


class TestConfigLoader:
    """Test suite for ConfigLoader class."""

    def test_load_with_no_toml_file(self):
        """Test loading config when TOML file doesn't exist."""
        config = ConfigLoader.load(config_file=Path("/nonexistent/collada_writer.toml"))

        assert config == WriterConfig()

    def test_load_from_toml(self, tmp_path: Path):
        """Test loading config from TOML file."""
        toml_file = tmp_path / "collada_writer.toml"
        toml_file.write_text("""
[output]
indent = 4
xml_declaration = false

[asset]
authoring_tool = "layout-exporter"
unit_name = "inch"
unit_meter = 0.0254
up_axis = "Z_UP"
""")

        config = ConfigLoader.load(config_file=toml_file)

        assert config.indent == 4
        assert config.xml_declaration is False
        assert config.authoring_tool == "layout-exporter"
        assert config.unit_name == "inch"
        assert config.unit_meter == 0.0254
        assert config.up_axis == "Z_UP"

    def test_load_toml_with_partial_config(self, tmp_path: Path):
        """Test loading TOML with only some values (others use defaults)."""
        toml_file = tmp_path / "collada_writer.toml"
        toml_file.write_text("""
[asset]
up_axis = "X_UP"
""")

        config = ConfigLoader.load(config_file=toml_file)

        assert config.up_axis == "X_UP"
        assert config.indent == Defaults.INDENT
        assert config.unit_name == Defaults.UNIT_NAME

    def test_toml_overrides_environment(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("COLLADA_INDENT", "3")
        monkeypatch.setenv("COLLADA_UNIT_NAME", "centimeter")
        toml_file = tmp_path / "collada_writer.toml"
        toml_file.write_text("[output]\nindent = 1\n")

        config = ConfigLoader.load(config_file=toml_file)

        assert config.indent == 1
        assert config.unit_name == "centimeter"

    def test_broken_toml_warns_and_falls_back(self, tmp_path: Path):
        toml_file = tmp_path / "collada_writer.toml"
        toml_file.write_text("[output\nindent = ")

        with pytest.warns(UserWarning, match="Failed to load config"):
            config = ConfigLoader.load(config_file=toml_file)

        assert config == WriterConfig()

    def test_invalid_value_warns_and_falls_back(self, tmp_path: Path):
        toml_file = tmp_path / "collada_writer.toml"
        toml_file.write_text("[output]\nindent = true\n")

        with pytest.warns(UserWarning):
            config = ConfigLoader.load(config_file=toml_file)

        assert config.indent == Defaults.INDENT


class TestConstants:
    """Test suite for constants."""

    def test_defaults_values(self):
        assert Defaults.OUTPUT_SUFFIX == ".dae"
        assert Defaults.CONFIG_FILE == "collada_writer.toml"

    def test_supported_versions(self):
        assert Constraints.COLLADA_VERSION in Constraints.SUPPORTED_VERSIONS

    @pytest.mark.parametrize("value", ["camera", "main_cam", "node.001", "_joint-2"])
    def test_element_id_pattern_accepts(self, value):
        assert re.match(Patterns.ELEMENT_ID, value)

    @pytest.mark.parametrize("value", ["", "1camera", "has space", "#ref"])
    def test_element_id_pattern_rejects(self, value):
        assert not re.match(Patterns.ELEMENT_ID, value)
