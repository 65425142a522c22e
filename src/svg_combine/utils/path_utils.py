"""Path utility module for svg-combine.

Provides centralized path resolution so that input files, the output file,
and the optional configuration file are all handled the same way.
"""

import tempfile
from pathlib import Path

from svg_combine.constants import APP_NAME, DEFAULT_CONFIG_FILENAME
from svg_combine.exceptions import ConfigFileNotFoundError


class PathResolver:
    """Centralized utility for path resolution and management.

    Attributes:
        user_config_dir: User-specific configuration directory
        temp_dir: Default directory for temporary files
    """

    def __init__(self) -> None:
        """Initialize the path resolver."""
        self.user_config_dir = Path.home() / ".config" / APP_NAME
        self.temp_dir = Path(tempfile.gettempdir())

    def get_config_path(self, config_filename: str = DEFAULT_CONFIG_FILENAME) -> Path | None:
        """Find a configuration file in the standard locations.

        Checks, in priority order:
        1. Current working directory
        2. User's configuration directory

        Args:
            config_filename: Name of the configuration file

        Returns:
            The first existing candidate, or None when there is none.
        """
        candidate_paths = [
            Path.cwd() / config_filename,
            self.user_config_dir / config_filename,
        ]

        for path in candidate_paths:
            if path.is_file():
                return path

        return None

    def normalize_path(self, path: str | Path) -> Path:
        """Convert a string path to a Path object.

        Args:
            path: String or Path object

        Returns:
            A Path object.
        """
        return Path(path) if isinstance(path, str) else path

    def ensure_dir_exists(self, path: str | Path) -> Path:
        """Ensure a directory exists, creating it if necessary.

        Args:
            path: Directory path

        Returns:
            Path to the directory.
        """
        dir_path = self.normalize_path(path)
        dir_path.mkdir(exist_ok=True, parents=True)
        return dir_path


# Create a global instance for easy import
path_resolver = PathResolver()


def validate_config_path(config_path: str | Path | None = None) -> Path | None:
    """Validate and resolve the configuration file path.

    An explicitly requested file must exist. Without one, the standard
    locations are searched and running without any configuration file is fine.

    Args:
        config_path: Optional path to configuration file

    Returns:
        Resolved Path to the configuration file, or None when no file was
        requested and none was found.

    Raises:
        ConfigFileNotFoundError: If an explicitly requested file does not exist.
    """
    if config_path is None:
        return path_resolver.get_config_path()

    resolved_path = path_resolver.normalize_path(config_path)

    if not resolved_path.is_file():
        raise ConfigFileNotFoundError(
            f"Configuration file not found: {resolved_path}",
            {"path": str(resolved_path), "cwd": str(Path.cwd())},
        )

    return resolved_path
