"""Sprite builder.

Coordinates one build: queue the input files, run every file through the
parser, collect the results in input order, assemble and write the sprite.

Failure policy for a run:
- missing input file: warning, the file is skipped
- no input file left: NoInputFilesError
- file that is not well-formed XML: InvalidSvgError, the run stops
- any other read or extraction problem: warning, the file is skipped
- output that cannot be written: OutputWriteError
"""

import logging
from collections.abc import Iterable
from pathlib import Path

from svg_combine.constants import INPUT_LOGGER_NAME
from svg_combine.exceptions import NoInputFilesError, SvgExtractionError
from svg_combine.models.config import SpriteConfig
from svg_combine.models.sprite import SpriteParts, SpriteSymbol
from svg_combine.sprite.assembler import assemble_sprite
from svg_combine.sprite.output import write_sprite
from svg_combine.sprite.parser import parse_svg
from svg_combine.sprite.slug import SlugRegistry
from svg_combine.utils import file_utils, path_resolver

logger = logging.getLogger(__name__)
input_logger = logging.getLogger(INPUT_LOGGER_NAME)


def queue_input_files(paths: Iterable[str | Path]) -> list[Path]:
    """Keep the paths that exist, in their original order.

    Each missing path is logged and dropped.

    Args:
        paths: Input paths as given on the command line.

    Returns:
        The existing paths.
    """
    queued: list[Path] = []
    for raw_path in paths:
        path = path_resolver.normalize_path(raw_path)
        if file_utils.file_exists(path):
            queued.append(path)
        else:
            input_logger.warning(f"File does not exist: {path}")
    return queued


def process_file(path: Path, registry: SlugRegistry, parts: SpriteParts) -> SpriteParts:
    """Add one SVG file to the sprite.

    Args:
        path: The input file.
        registry: Identifiers issued so far in this run.
        parts: What earlier files contributed.

    Returns:
        The accumulator with this file's symbol and defs added. When the file
        cannot be read or its content cannot be extracted, ``parts`` is
        returned unchanged and nothing is reserved in the registry.

    Raises:
        InvalidSvgError: If the file is not well-formed XML.
    """
    try:
        data = file_utils.read_bytes(path)
    except OSError as e:
        input_logger.warning(f"Skipping {path}: {e}")
        return parts

    try:
        document = parse_svg(data, source=str(path))
    except SvgExtractionError as e:
        input_logger.warning(f"Skipping {path}: {e}")
        return parts

    identifier = registry.issue(path.name)
    logger.debug(f"{path} -> #{identifier}")

    symbol = SpriteSymbol(
        identifier=identifier,
        view_box=document.view_box,
        content=document.content,
    )
    return parts.add(symbol, document.defs)


class SpriteBuilder:
    """Builds one sprite from an ordered list of SVG files.

    Attributes:
        config: Immutable sprite settings for the run
    """

    def __init__(self, config: SpriteConfig | None = None) -> None:
        """Initialize the builder.

        Args:
            config: Sprite settings; defaults when omitted.
        """
        self.config = config or SpriteConfig()

    def build(self, paths: Iterable[str | Path]) -> str:
        """Build the sprite document without writing it.

        Args:
            paths: Input files, in output order.

        Returns:
            The assembled sprite.

        Raises:
            NoInputFilesError: If none of the paths exists.
            InvalidSvgError: If any input is not well-formed XML.
        """
        requested = list(paths)
        files = queue_input_files(requested)
        if not files:
            raise NoInputFilesError("No input files specified", {"requested": len(requested)})

        logger.debug(f"Using prefix: {self.config.prefix!r}")

        registry = SlugRegistry(self.config.prefix)
        parts = SpriteParts()
        for path in files:
            parts = process_file(path, registry, parts)

        return assemble_sprite(parts, self.config.svg_tag)

    def run(self, paths: Iterable[str | Path]) -> str:
        """Build the sprite and deliver it to the configured output.

        Nothing is written unless the whole build succeeds.

        Args:
            paths: Input files, in output order.

        Returns:
            The assembled sprite.

        Raises:
            NoInputFilesError: If none of the paths exists.
            InvalidSvgError: If any input is not well-formed XML.
            OutputWriteError: If the output file cannot be written.
        """
        logger.debug(f"Output to: {self.config.output or '<stdout>'}")
        document = self.build(paths)
        write_sprite(document, self.config.output)
        return document
