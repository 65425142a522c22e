"""File system helpers for svg-combine.

Provides a consistent interface for the few file operations a build needs:
checking inputs, reading SVG files, and writing the sprite so that a failed
write never leaves a half-written destination behind.
"""

import os
import stat
import tempfile
from pathlib import Path

from svg_combine.utils.path_utils import path_resolver

# Type aliases for clarity and documentation
PathLike = str | Path

# Mode of a newly created file before the umask is applied
DEFAULT_FILE_MODE = 0o666


def read_text(file_path: PathLike) -> str:
    """Read UTF-8 text content from a file.

    Args:
        file_path: Path to the file (string or Path object)

    Returns:
        The text content of the file

    Raises:
        FileNotFoundError: If the file does not exist
        PermissionError: If the file cannot be read due to permissions
        UnicodeDecodeError: If the file content cannot be decoded as text
    """
    normalized_path = path_resolver.normalize_path(file_path)
    with open(normalized_path, encoding="utf-8") as f:
        return f.read()


def read_bytes(file_path: PathLike) -> bytes:
    """Read a file without decoding it or translating line endings.

    Args:
        file_path: Path to the file (string or Path object)

    Returns:
        The raw file content

    Raises:
        FileNotFoundError: If the file does not exist
        PermissionError: If the file cannot be read due to permissions
    """
    normalized_path = path_resolver.normalize_path(file_path)
    return normalized_path.read_bytes()


def write_text(file_path: PathLike, content: str) -> None:
    """Write text content to a file.

    Args:
        file_path: Path to the file (string or Path object)
        content: Text content to write

    Raises:
        FileNotFoundError: If the parent directory does not exist
        PermissionError: If the file cannot be written due to permissions
    """
    normalized_path = path_resolver.normalize_path(file_path)

    # newline="" keeps the bytes identical on every platform
    with open(normalized_path, "w", encoding="utf-8", newline="") as f:
        f.write(content)


def file_exists(file_path: PathLike) -> bool:
    """Check if a file exists.

    Args:
        file_path: Path to the file (string or Path object)

    Returns:
        True if the file exists, False otherwise
    """
    normalized_path = path_resolver.normalize_path(file_path)
    return normalized_path.exists() and normalized_path.is_file()


def create_temp_file(
    suffix: str | None = None, prefix: str | None = None, directory: PathLike | None = None
) -> Path:
    """Create an empty temporary file and return its path.

    Args:
        suffix: Optional suffix for the filename
        prefix: Optional prefix for the filename
        directory: Optional directory to create the file in

    Returns:
        Path to the created temporary file
    """
    temp_dir = (
        path_resolver.temp_dir if directory is None else path_resolver.normalize_path(directory)
    )

    temp_file = tempfile.NamedTemporaryFile(
        dir=temp_dir, prefix=prefix, suffix=suffix, delete=False
    )

    # Close the file handle but keep the file
    temp_file.close()

    return Path(temp_file.name)


def replacement_mode(file_path: PathLike) -> int:
    """Permission bits a file written to file_path should end up with.

    An existing file keeps its mode. A new file gets the mode ``open()`` would
    give it under the current umask.

    Args:
        file_path: Path to the destination (string or Path object)

    Returns:
        The permission bits.
    """
    normalized_path = path_resolver.normalize_path(file_path)
    try:
        return stat.S_IMODE(normalized_path.stat().st_mode)
    except FileNotFoundError:
        # The umask can only be read by setting it
        umask = os.umask(0)
        os.umask(umask)
        return DEFAULT_FILE_MODE & ~umask


def atomic_write(file_path: PathLike, content: str) -> None:
    """Write to a file atomically by using a temporary file.

    The destination is either completely replaced or not changed at all. The
    parent directory must already exist.

    Args:
        file_path: Path to the file (string or Path object)
        content: Text to write

    Raises:
        FileNotFoundError: If the parent directory does not exist
        PermissionError: If the file cannot be written due to permissions
    """
    normalized_path = path_resolver.normalize_path(file_path)
    mode = replacement_mode(normalized_path)

    # Same directory as the target so that os.replace stays on one filesystem
    temp_file = create_temp_file(
        suffix=normalized_path.suffix,
        prefix=f".{normalized_path.name}.",
        directory=normalized_path.parent,
    )

    try:
        write_text(temp_file, content)
        # Temporary files are created 0600
        os.chmod(temp_file, mode)
        os.replace(temp_file, normalized_path)
    except BaseException:
        if temp_file.exists():
            temp_file.unlink()
        raise
