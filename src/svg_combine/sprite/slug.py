"""Symbol identifier generation.

Turns input filenames into fragment-safe identifiers that are unique within
one sprite.
"""

import re

from svg_combine.constants import (
    FIRST_DUPLICATE_SUFFIX,
    NON_WORD_PATTERN,
    SLUG_SEPARATOR,
    SVG_EXTENSION,
)

_NON_WORD_RE = re.compile(NON_WORD_PATTERN)


def filename_to_slug(filename: str) -> str:
    """Derive the base identifier for a filename.

    Every occurrence of ``.svg`` is removed, not only a trailing one, and each
    run of non-word characters becomes a single hyphen.

    Args:
        filename: The file's basename, extension included.

    Returns:
        The slug, without prefix or disambiguation suffix.
    """
    name = filename.replace(SVG_EXTENSION, "")
    return _NON_WORD_RE.sub(SLUG_SEPARATOR, name)


class SlugRegistry:
    """Issues unique identifiers for a single sprite build.

    The registry only grows. Numbering depends on the order in which
    filenames are registered, so the same filenames in the same order always
    produce the same identifiers.

    Attributes:
        prefix: String prepended to every issued identifier
    """

    def __init__(self, prefix: str = "") -> None:
        """Initialize an empty registry.

        Args:
            prefix: String prepended to every issued identifier. It is not
                part of the uniqueness check.
        """
        self.prefix = prefix
        self._issued: set[str] = set()

    def __contains__(self, slug: object) -> bool:
        return slug in self._issued

    def __len__(self) -> int:
        return len(self._issued)

    def reserve(self, slug: str) -> str:
        """Record a slug, numbering it if it was already taken.

        Args:
            slug: The base slug.

        Returns:
            The slug itself, or ``slug-2``, ``slug-3``, ... for repeats.
        """
        candidate = slug
        number = FIRST_DUPLICATE_SUFFIX
        while candidate in self._issued:
            candidate = f"{slug}{SLUG_SEPARATOR}{number}"
            number += 1
        self._issued.add(candidate)
        return candidate

    def issue(self, filename: str) -> str:
        """Return the prefixed, unique identifier for a filename."""
        return self.prefix + self.reserve(filename_to_slug(filename))
