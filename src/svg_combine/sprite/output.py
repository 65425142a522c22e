"""Output sink for the assembled sprite."""

import logging
import sys
from pathlib import Path
from typing import TextIO

from svg_combine.exceptions import OutputWriteError, chain_exception
from svg_combine.utils import file_utils

logger = logging.getLogger(__name__)


def write_sprite(document: str, output: Path | None = None, stream: TextIO | None = None) -> None:
    """Deliver the sprite to a file or to standard output.

    A destination file is replaced atomically: it either holds the complete
    new document afterwards or is left exactly as it was. The stdout form
    gets one trailing newline, the file form none.

    Args:
        document: The assembled sprite.
        output: Destination file, or None for standard output.
        stream: Stream used instead of sys.stdout when output is None.

    Raises:
        OutputWriteError: If the destination cannot be written completely.
    """
    if output is None:
        target = stream if stream is not None else sys.stdout
        target.write(f"{document}\n")
        target.flush()
        return

    try:
        file_utils.atomic_write(output, document)
    except OSError as e:
        raise chain_exception(
            OutputWriteError(
                "Failed to write output file", {"path": str(output), "error": str(e)}
            ),
            e,
        )

    logger.info(f"Wrote sprite to {output}")
