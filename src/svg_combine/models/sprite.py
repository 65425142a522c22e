"""Sprite data models.

Defines the values that flow through a build: the parts extracted from one
SVG document, the symbol built from it, and the immutable accumulator that is
threaded from one input file to the next.
"""

from pydantic import BaseModel, ConfigDict


class SvgDocument(BaseModel):
    """The parts of one parsed SVG file that end up in the sprite."""

    model_config = ConfigDict(frozen=True)

    view_box: str = ""  # Empty when the root has no viewBox attribute
    defs: tuple[str, ...] = ()  # Inner content of each direct <defs> child
    content: str = ""  # Root inner content, verbatim


class SpriteSymbol(BaseModel):
    """One <symbol> element of the sprite."""

    model_config = ConfigDict(frozen=True)

    identifier: str
    view_box: str = ""
    content: str = ""

    def to_markup(self) -> str:
        """Render the symbol element.

        Content is inserted as-is; nothing is escaped.

        Returns:
            The ``<symbol>`` markup on a single logical line.
        """
        return (
            f'<symbol id="{self.identifier}" viewBox="{self.view_box}">'
            f"{self.content}</symbol>"
        )


class SpriteParts(BaseModel):
    """Accumulated defs content and symbols, in input order."""

    model_config = ConfigDict(frozen=True)

    defs: tuple[str, ...] = ()
    symbols: tuple[SpriteSymbol, ...] = ()

    def add(self, symbol: SpriteSymbol, defs: tuple[str, ...] = ()) -> "SpriteParts":
        """Return a new accumulator with one more file's contribution.

        Args:
            symbol: The symbol built from the file.
            defs: The file's extracted defs content.

        Returns:
            A new SpriteParts; this instance is left untouched.
        """
        return SpriteParts(defs=self.defs + tuple(defs), symbols=self.symbols + (symbol,))

    @property
    def identifiers(self) -> list[str]:
        """Symbol identifiers in output order."""
        return [symbol.identifier for symbol in self.symbols]
