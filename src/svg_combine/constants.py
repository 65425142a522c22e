"""Application-wide constants for svg-combine.

Constants are grouped into the following categories:
- Version: The version string printed by ``--version``
- Sprite Constants: Markup used when assembling the sprite document
- Slug Constants: Patterns used to derive symbol identifiers from filenames
- Configuration Constants: Config file names and logging defaults
"""

# Version
VERSION = "1.0"  # Printed by --version

# Sprite constants
SVG_NAMESPACE = "http://www.w3.org/2000/svg"
XLINK_NAMESPACE = "http://www.w3.org/1999/xlink"
DEFAULT_SVG_TAG = (
    f'<svg xmlns="{SVG_NAMESPACE}" xmlns:xlink="{XLINK_NAMESPACE}" '
    'width="0" height="0" style="width:0;height:0;display:block">'
)
SVG_CLOSE_TAG = "</svg>"
DEFS_ELEMENT = "defs"  # Local name of the definitions container
VIEWBOX_ATTRIBUTE = "viewBox"
DEFAULT_XML_ENCODING = "utf-8"  # Used when there is neither a BOM nor a declaration

# Slug constants
SVG_EXTENSION = ".svg"  # Removed from filenames wherever it occurs
SLUG_SEPARATOR = "-"  # Replaces every run of non-word characters
NON_WORD_PATTERN = r"\W+"
FIRST_DUPLICATE_SUFFIX = 2  # First number tried when a slug is taken

# Configuration constants
APP_NAME = "svg-combine"
PROG_NAME = "svgcombine"  # Command name, prefixes messages written before logging exists
LOGGER_NAME = "svg_combine"
INPUT_LOGGER_NAME = "svg_combine.inputs"  # Skipped-input reports, never quieter than WARNING
DEFAULT_CONFIG_FILENAME = "svgcombine.yaml"
DEFAULT_LOG_LEVEL = "WARNING"
BYTES_PER_MEGABYTE = 1024 * 1024

# Exit codes
EXIT_SUCCESS = 0
EXIT_FAILURE = 1
