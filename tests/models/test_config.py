"""Tests for the configuration models.

Tests validate the behavior of Pydantic models in config.py, including:
- Default values
- Validators
- Configuration loading from YAML
- Command line overrides
"""

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from svg_combine.constants import DEFAULT_SVG_TAG
from svg_combine.models.config import AppConfig, LoggingConfig, SpriteConfig


class TestLoggingConfig:
    """Test cases for LoggingConfig model."""

    def test_default_values(self) -> None:
        """Test default values for LoggingConfig."""
        config = LoggingConfig()

        assert config.level == "WARNING"
        assert config.file is None
        assert config.format == "text"
        assert config.max_size_mb == 5
        assert config.backup_count == 3

    def test_level_is_normalized(self) -> None:
        """Test that level names are upper-cased."""
        assert LoggingConfig(level="debug").level == "DEBUG"

    def test_invalid_level(self) -> None:
        """Test that unknown level names are rejected."""
        with pytest.raises(ValidationError) as exc_info:
            LoggingConfig(level="chatty")
        assert "Unknown logging level" in str(exc_info.value)

    def test_format_validation(self) -> None:
        """Test that only json and text formats are accepted."""
        assert LoggingConfig(format="JSON").format == "json"
        with pytest.raises(ValidationError) as exc_info:
            LoggingConfig(format="xml")
        assert "Log format must be one of: json, text" in str(exc_info.value)


class TestSpriteConfig:
    """Test cases for SpriteConfig model."""

    def test_default_values(self) -> None:
        """Test default values for SpriteConfig."""
        config = SpriteConfig()

        assert config.prefix == ""
        assert config.output is None
        assert config.svg_tag == DEFAULT_SVG_TAG

    def test_output_is_a_path(self) -> None:
        """Test that string outputs are converted to Path."""
        assert SpriteConfig(output="out/sprite.svg").output == Path("out/sprite.svg")

    def test_is_frozen(self) -> None:
        """Test that the settings cannot change after creation."""
        config = SpriteConfig(prefix="a-")
        with pytest.raises(ValidationError):
            config.prefix = "b-"  # type: ignore[misc]

    def test_svg_tag_validation(self) -> None:
        """Test that the opening tag must be an svg tag."""
        assert SpriteConfig(svg_tag='<svg class="sprite">').svg_tag == '<svg class="sprite">'
        with pytest.raises(ValidationError) as exc_info:
            SpriteConfig(svg_tag="<div>")
        assert "svg_tag must be an opening <svg ...> tag" in str(exc_info.value)


class TestAppConfig:
    """Test cases for AppConfig model."""

    def test_default_values(self) -> None:
        """Test that every section has defaults."""
        config = AppConfig()
        assert config.sprite == SpriteConfig()
        assert config.logging == LoggingConfig()

    def test_from_yaml(self, tmp_path: Path) -> None:
        """Test loading configuration from YAML file."""
        config_path = tmp_path / "svgcombine.yaml"
        config_path.write_text(
            yaml.safe_dump(
                {
                    "sprite": {"prefix": "icon-", "output": "dist/sprite.svg"},
                    "logging": {"level": "info", "format": "json"},
                }
            )
        )

        config = AppConfig.from_yaml(config_path)

        assert config.sprite.prefix == "icon-"
        assert config.sprite.output == Path("dist/sprite.svg")
        assert config.sprite.svg_tag == DEFAULT_SVG_TAG
        assert config.logging.level == "INFO"
        assert config.logging.format == "json"

    def test_from_yaml_string_path(self, tmp_path: Path) -> None:
        """Test loading with a string path."""
        config_path = tmp_path / "svgcombine.yaml"
        config_path.write_text("sprite:\n  prefix: x-\n")
        assert AppConfig.from_yaml(str(config_path)).sprite.prefix == "x-"

    def test_from_empty_yaml(self, tmp_path: Path) -> None:
        """Test that an empty file gives the defaults."""
        config_path = tmp_path / "svgcombine.yaml"
        config_path.write_text("")
        assert AppConfig.from_yaml(config_path) == AppConfig()

    def test_from_yaml_missing_file(self, tmp_path: Path) -> None:
        """Test loading from a file that does not exist."""
        with pytest.raises(FileNotFoundError):
            AppConfig.from_yaml(tmp_path / "missing.yaml")

    def test_from_yaml_invalid_syntax(self, tmp_path: Path) -> None:
        """Test loading a file with broken YAML."""
        config_path = tmp_path / "svgcombine.yaml"
        config_path.write_text("sprite: [unclosed\n")
        with pytest.raises(yaml.YAMLError):
            AppConfig.from_yaml(config_path)

    def test_from_yaml_invalid_values(self, tmp_path: Path) -> None:
        """Test loading a file that violates the schema."""
        config_path = tmp_path / "svgcombine.yaml"
        config_path.write_text("sprite:\n  svg_tag: '<g>'\n")
        with pytest.raises(ValidationError):
            AppConfig.from_yaml(config_path)

    def test_with_overrides(self) -> None:
        """Test that overrides replace values and keep the rest."""
        config = AppConfig(sprite=SpriteConfig(prefix="file-", svg_tag="<svg>"))

        updated = config.with_overrides(prefix="cli-", output="out.svg")

        assert updated.sprite.prefix == "cli-"
        assert updated.sprite.output == Path("out.svg")
        assert updated.sprite.svg_tag == "<svg>"
        assert config.sprite.prefix == "file-"

    def test_with_overrides_ignores_none(self) -> None:
        """Test that unset flags keep the file values."""
        config = AppConfig(sprite=SpriteConfig(prefix="file-"))
        assert config.with_overrides(prefix=None, output=None) is config

    def test_with_overrides_validates(self) -> None:
        """Test that overrides go through validation."""
        with pytest.raises(ValidationError):
            AppConfig().with_overrides(svg_tag="<g>")
