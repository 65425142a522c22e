"""Sprite document assembly."""

from svg_combine.constants import DEFAULT_SVG_TAG, SVG_CLOSE_TAG
from svg_combine.models.sprite import SpriteParts


def assemble_sprite(parts: SpriteParts, svg_tag: str = DEFAULT_SVG_TAG) -> str:
    """Join the accumulated parts into one SVG document.

    Layout::

        {svg_tag}
        <defs>
        {defs...}</defs>
        <symbol .../>
        ...
        </svg>

    Defs content is concatenated without separator; each symbol is followed
    by a newline. Nothing is escaped or re-validated.

    Args:
        parts: Defs content and symbols, in input order.
        svg_tag: Literal opening ``<svg>`` tag.

    Returns:
        The sprite document.
    """
    defs = "".join(parts.defs)
    symbols = "".join(f"{symbol.to_markup()}\n" for symbol in parts.symbols)
    return f"{svg_tag}\n<defs>\n{defs}</defs>\n{symbols}{SVG_CLOSE_TAG}"
