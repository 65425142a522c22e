"""Module initialization."""

from svg_combine.utils.path_utils import path_resolver, validate_config_path

__all__ = [
    # Path utilities
    "path_resolver",
    "validate_config_path",
]
