"""Combine standalone SVG files into a single <symbol> sprite."""

from svg_combine.constants import VERSION

__version__ = VERSION
