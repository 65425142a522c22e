"""Sprite building: identifiers, parsing, assembly and output."""

from svg_combine.sprite.builder import SpriteBuilder, process_file, queue_input_files
from svg_combine.sprite.slug import SlugRegistry, filename_to_slug

__all__ = [
    "SlugRegistry",
    "SpriteBuilder",
    "filename_to_slug",
    "process_file",
    "queue_input_files",
]
