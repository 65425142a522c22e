"""Configuration models for svg-combine.

Defines Pydantic models for the sprite settings and logging options. The
sprite settings are frozen: a run receives one immutable value and never
changes it.
"""

import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from svg_combine.constants import DEFAULT_LOG_LEVEL, DEFAULT_SVG_TAG


def _normalize_path(path: str | Path) -> Path:
    """Convert a string path to a Path object.

    Internal utility function to avoid circular imports with path_resolver.

    Args:
        path: String or Path object

    Returns:
        A Path object.
    """
    return Path(path) if isinstance(path, str) else path


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = DEFAULT_LOG_LEVEL
    file: str | None = None
    format: str = "text"
    max_size_mb: int = 5
    backup_count: int = 3

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate the level is a standard logging level name.

        Args:
            v: The level name, in any case.

        Returns:
            The upper-cased level name.

        Raises:
            ValueError: If the name is not a known logging level.
        """
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown logging level: {v}")
        return level

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        """Validate the log format is one of the supported renderers.

        Args:
            v: The format name.

        Returns:
            The validated format name.

        Raises:
            ValueError: If the format is neither "json" nor "text".
        """
        valid_formats = ["json", "text"]
        if v.lower() not in valid_formats:
            raise ValueError(f"Log format must be one of: {', '.join(valid_formats)}")
        return v.lower()


class SpriteConfig(BaseModel):
    """Settings for one sprite build."""

    model_config = ConfigDict(frozen=True)

    prefix: str = ""
    output: Path | None = None  # None writes to stdout
    svg_tag: str = DEFAULT_SVG_TAG

    @field_validator("svg_tag")
    @classmethod
    def validate_svg_tag(cls, v: str) -> str:
        """Validate the opening tag looks like an svg start tag.

        Args:
            v: The literal opening tag.

        Returns:
            The validated tag.

        Raises:
            ValueError: If the tag does not start with ``<svg``.
        """
        if not v.lstrip().startswith("<svg"):
            raise ValueError("svg_tag must be an opening <svg ...> tag")
        return v


class AppConfig(BaseModel):
    """Main application configuration."""

    sprite: SpriteConfig = Field(default_factory=SpriteConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_yaml(cls, config_path: str | Path) -> "AppConfig":
        """Load configuration from YAML file.

        Args:
            config_path: Path to the YAML configuration file. Can be a string path
                or a Path object.

        Returns:
            An initialized AppConfig object with values from the YAML file.

        Raises:
            FileNotFoundError: If the specified config file doesn't exist.
            yaml.YAMLError: If the YAML file has invalid syntax.
            ValidationError: If the configuration values don't match the expected schema.
        """
        import yaml

        # Use direct import to avoid circular imports
        from svg_combine.utils.file_utils import read_text

        path = _normalize_path(config_path)

        yaml_content = read_text(path)
        # An empty file means "all defaults"
        config_data = yaml.safe_load(yaml_content) or {}

        return cls.model_validate(config_data)

    def with_overrides(self, **sprite_values: Any) -> "AppConfig":
        """Return a copy with the given sprite settings replaced.

        Values that are None are ignored so that unset command line flags keep
        the value from the configuration file.

        Args:
            **sprite_values: SpriteConfig field names and their new values.

        Returns:
            A new AppConfig; this instance is left untouched.
        """
        updates = {key: value for key, value in sprite_values.items() if value is not None}
        if not updates:
            return self
        sprite = SpriteConfig.model_validate({**self.sprite.model_dump(), **updates})
        return self.model_copy(update={"sprite": sprite})
