"""Custom exception hierarchy for svg-combine.

This module defines domain-specific exceptions so that every failure of a run
can be classified as fatal or skippable, and reported with useful context.

Exception Hierarchy:
    SvgCombineError (Base)
    ├── ConfigurationError
    │   ├── InvalidConfigError
    │   └── ConfigFileNotFoundError
    ├── InputError
    │   └── NoInputFilesError
    ├── SvgError
    │   ├── InvalidSvgError
    │   └── SvgExtractionError
    └── OutputError
        └── OutputWriteError
"""

from typing import Any


# Base Exception
class SvgCombineError(Exception):
    """Base exception for all svg-combine errors.

    This is the root exception that all custom exceptions inherit from,
    allowing the command line entry point to handle every run failure in
    one place.

    Attributes:
        message: Human-readable error description
        details: Optional dictionary containing additional error context
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize the exception with message and optional details.

        Args:
            message: Human-readable error description
            details: Optional dictionary containing additional error context
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation of the exception."""
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


# Configuration Exceptions
class ConfigurationError(SvgCombineError):
    """Base exception for configuration-related errors."""
    pass


class InvalidConfigError(ConfigurationError):
    """Raised when configuration contains invalid values.

    Example:
        raise InvalidConfigError(
            "Invalid configuration file",
            {"path": "svgcombine.yaml", "error": "sprite.svg_tag must start with <svg"}
        )
    """
    pass


class ConfigFileNotFoundError(ConfigurationError):
    """Raised when configuration file cannot be found.

    Example:
        raise ConfigFileNotFoundError(
            "Configuration file not found",
            {"path": "/home/user/svgcombine.yaml"}
        )
    """
    pass


# Input Exceptions
class InputError(SvgCombineError):
    """Base exception for problems with the input file list."""
    pass


class NoInputFilesError(InputError):
    """Raised when no usable input file is left to process.

    Example:
        raise NoInputFilesError(
            "No input files specified",
            {"requested": 2, "missing": ["a.svg", "b.svg"]}
        )
    """
    pass


# SVG Exceptions
class SvgError(SvgCombineError):
    """Base exception for SVG parsing and extraction errors."""
    pass


class InvalidSvgError(SvgError):
    """Raised when an input is not well-formed XML.

    Fatal for the whole run: no output is written.

    Example:
        raise InvalidSvgError(
            "icons/broken.svg: Invalid SVG",
            {"path": "icons/broken.svg", "error": "mismatched tag: line 3, column 2"}
        )
    """
    pass


class SvgExtractionError(SvgError):
    """Raised when content cannot be located in an otherwise valid document.

    The builder skips the file and keeps going.

    Example:
        raise SvgExtractionError(
            "Root element not found in source text",
            {"path": "icons/odd.svg"}
        )
    """
    pass


# Output Exceptions
class OutputError(SvgCombineError):
    """Base exception for output errors."""
    pass


class OutputWriteError(OutputError):
    """Raised when the sprite cannot be written completely.

    Example:
        raise OutputWriteError(
            "Failed to write output file",
            {"path": "/readonly/sprite.svg", "error": "Permission denied"}
        )
    """
    pass


# Utility function for exception chaining
def chain_exception(new_exception: SvgCombineError, cause: Exception) -> SvgCombineError:
    """Chain a new exception with its underlying cause.

    Args:
        new_exception: The new domain-specific exception to raise
        cause: The underlying exception that caused this error

    Returns:
        The new exception with cause properly chained

    Example:
        try:
            ET.fromstring(text)
        except ET.ParseError as e:
            raise chain_exception(
                InvalidSvgError("Invalid SVG", {"path": path}),
                e
            )
    """
    new_exception.__cause__ = cause
    return new_exception
