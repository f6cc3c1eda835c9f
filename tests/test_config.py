"""
Tests for exporter configuration and error reporting.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from chuk_mcp_tokens.config import load_configuration
from chuk_mcp_tokens.constants import (
    ColorFormat,
    FileStructure,
    StringCase,
    ThemeExportStyle,
    TokenNameStructure,
    TokenType,
)
from chuk_mcp_tokens.errors import (
    ArtifactMissingError,
    AuthenticationError,
    ConfigurationError,
    MissingContextError,
    NotFoundError,
    RemoteFetchError,
    describe_error,
)
from chuk_mcp_tokens.models import ExporterConfiguration


class TestExporterConfiguration:
    """Tests for ExporterConfiguration."""

    def test_defaults(self):
        """Defaults match the documented option table."""
        config = ExporterConfiguration()
        assert config.show_descriptions is True
        assert config.use_references is True
        assert config.token_name_style == StringCase.CAMEL
        assert config.color_format == ColorFormat.SMART_HASH_HEX
        assert config.color_precision == 3
        assert config.indent == 2
        assert config.file_structure == FileStructure.SINGLE_FILE
        assert config.output_filename == "tokens.json"
        assert config.token_name_structure == TokenNameStructure.PATH_AND_NAME
        assert config.export_themes_as == ThemeExportStyle.SEPARATE_FILES
        assert config.base_style_file_path == "./base"
        assert config.include_component_tokens is False

    def test_camel_case_keys(self):
        """Platform-style camelCase keys are accepted."""
        config = ExporterConfiguration.model_validate(
            {"tokenNameStyle": "kebabCase", "fileStructure": "separateByType", "indent": 4}
        )
        assert config.token_name_style == StringCase.KEBAB
        assert config.file_structure == FileStructure.SEPARATE_BY_TYPE
        assert config.indent == 4

    def test_output_filename_extension(self):
        """The output filename always ends in .json."""
        assert ExporterConfiguration(output_filename="design").output_filename == "design.json"
        assert ExporterConfiguration(output_filename="a.json").output_filename == "a.json"

    def test_output_filename_required(self):
        """An empty output filename is rejected."""
        with pytest.raises(ValidationError):
            ExporterConfiguration(output_filename="  ")

    def test_frozen(self):
        """Configuration cannot be changed in place."""
        config = ExporterConfiguration()
        with pytest.raises(ValidationError):
            config.indent = 8

    def test_token_prefix(self):
        """Type prefixes apply only when enabled."""
        assert ExporterConfiguration().token_prefix(TokenType.COLOR) == ""
        assert ExporterConfiguration().token_prefix(TokenType.COLOR, force=True) == "color"
        config = ExporterConfiguration(
            use_token_type_prefixes=True,
            customize_token_prefixes=True,
            token_prefixes={TokenType.COLOR: " clr "},
        )
        assert config.token_prefix(TokenType.COLOR) == "clr"
        assert config.token_prefix(TokenType.SPACE) == "space"

    def test_style_file_name(self):
        """Per-type file names default to the type name."""
        assert ExporterConfiguration().style_file_name(TokenType.BORDER_WIDTH) == "borderWidth.json"


class TestLoadConfiguration:
    """Tests for load_configuration."""

    def test_no_file(self):
        """Without a file the defaults apply."""
        assert load_configuration() == ExporterConfiguration()

    def test_yaml_file(self, temp_dir: Path):
        """YAML files with camelCase keys load."""
        path = temp_dir / "exporter.yaml"
        path.write_text("colorFormat: rgba\nuseReferences: false\n")
        config = load_configuration(path)
        assert config.color_format == ColorFormat.RGBA
        assert config.use_references is False

    def test_overrides_win(self, temp_dir: Path):
        """Keyword overrides take precedence; None overrides are ignored."""
        path = temp_dir / "exporter.yaml"
        path.write_text("indent: 4\n")
        config = load_configuration(path, indent=8, file_structure=None)
        assert config.indent == 8
        assert config.file_structure == FileStructure.SINGLE_FILE

    def test_overrides_beat_camel_case_keys(self, temp_dir: Path):
        """Snake_case overrides replace camelCase file keys."""
        path = temp_dir / "exporter.yaml"
        path.write_text("fileStructure: separateByType\n")
        config = load_configuration(path, file_structure="singleFile")
        assert config.file_structure == FileStructure.SINGLE_FILE

    def test_missing_file(self, temp_dir: Path):
        """A named file that does not exist is a missing artifact."""
        with pytest.raises(ArtifactMissingError):
            load_configuration(temp_dir / "missing.yaml")

    def test_not_a_mapping(self, temp_dir: Path):
        """Top-level lists are rejected."""
        path = temp_dir / "exporter.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigurationError):
            load_configuration(path)

    def test_invalid_value(self, temp_dir: Path):
        """Unknown option values are configuration errors."""
        path = temp_dir / "exporter.yaml"
        path.write_text("colorFormat: cmyk\n")
        with pytest.raises(ConfigurationError):
            load_configuration(path)


class TestDescribeError:
    """Tests for user-facing error messages."""

    def test_configuration_problem(self):
        """Configuration and context errors share a prefix."""
        assert describe_error(MissingContextError("x")).startswith("Configuration problem")
        assert describe_error(ConfigurationError("x")).startswith("Configuration problem")

    def test_platform_problem(self):
        """Fetch errors distinguish authentication from not-found."""
        assert "authentication" in describe_error(AuthenticationError("x", 401))
        assert "not found" in describe_error(NotFoundError("x", 404))
        assert describe_error(RemoteFetchError("x", 500)).startswith("Platform data problem")

    def test_missing_artifact(self):
        """Missing files are reported as missing artifacts."""
        assert describe_error(ArtifactMissingError("x")).startswith("Missing artifact")
