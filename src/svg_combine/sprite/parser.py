"""SVG parsing and extraction.

ElementTree decides whether a file is well-formed and provides the root
attributes. Content, on the other hand, is sliced out of the original text so
that it reaches the sprite byte for byte: ElementTree would rewrite namespace
prefixes, quoting and empty elements if it re-serialised the tree.

Files are handed over as bytes. ElementTree applies the encoding from the BOM
or the XML declaration, and the text used for slicing is decoded the same way
with line endings left alone.
"""

import codecs
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field

from svg_combine.constants import DEFAULT_XML_ENCODING, DEFS_ELEMENT, VIEWBOX_ATTRIBUTE
from svg_combine.exceptions import InvalidSvgError, SvgExtractionError, chain_exception
from svg_combine.models.sprite import SvgDocument

_BOMS = [
    (codecs.BOM_UTF8, "utf-8-sig"),
    (codecs.BOM_UTF16_LE, "utf-16"),
    (codecs.BOM_UTF16_BE, "utf-16"),
]

_ENCODING_DECL_RE = re.compile(
    rb"""^<\?xml\s[^>]*?encoding\s*=\s*["']([A-Za-z][A-Za-z0-9._-]*)["']"""
)

# Only markup that can contain a "<" or ">" which is not a tag boundary needs
# its own alternative. Text between matches is skipped.
_MARKUP_RE = re.compile(
    r"<!--.*?-->"
    r"|<!\[CDATA\[.*?\]\]>"
    r"|<\?.*?\?>"
    r"|<!DOCTYPE(?:[^\[>]|\[.*?\])*>"
    r"|<(?P<close>/)?(?P<name>[^\s/>]+)"
    r"(?P<attrs>(?:[^>\"']|\"[^\"]*\"|'[^']*')*?)(?P<empty>/)?>",
    re.DOTALL,
)


def _strip_ns(name: str) -> str:
    """Remove a namespace like '{http://www.w3.org/2000/svg}' or a 'svg:' prefix."""
    if "}" in name:
        name = name.split("}", 1)[1]
    return name.rsplit(":", 1)[-1]


@dataclass
class ElementSpan:
    """Offsets of one element in the source text."""

    name: str
    start: int
    content_start: int
    content_end: int = -1
    end: int = -1

    def content(self, text: str) -> str:
        return text[self.content_start : self.content_end]


@dataclass
class RootSpan:
    """Offsets of the root element and of its direct children."""

    root: ElementSpan
    children: list[ElementSpan] = field(default_factory=list)


def locate_elements(text: str) -> RootSpan:
    """Find the root element and its direct children in well-formed XML.

    Comments, CDATA sections, processing instructions and the doctype are
    skipped, so markup-looking text inside them is never mistaken for a tag.

    Args:
        text: Source text that already passed the well-formedness check.

    Returns:
        The spans of the root element and its direct children.

    Raises:
        SvgExtractionError: If the root element cannot be followed to its end.
    """
    root: ElementSpan | None = None
    children: list[ElementSpan] = []
    current: ElementSpan | None = None
    depth = 0

    for match in _MARKUP_RE.finditer(text):
        name = match.group("name")
        if name is None:
            continue

        if match.group("close"):
            depth -= 1
            if depth == 0 and root is not None:
                root.content_end = match.start()
                root.end = match.end()
                return RootSpan(root, children)
            if depth == 1 and current is not None:
                current.content_end = match.start()
                current.end = match.end()
                children.append(current)
                current = None
            continue

        self_closing = match.group("empty") is not None
        span = ElementSpan(_strip_ns(name), match.start(), match.end())
        if self_closing:
            span.content_end = span.end = match.end()

        if depth == 0:
            root = span
            if self_closing:
                return RootSpan(root, children)
        elif depth == 1:
            if self_closing:
                children.append(span)
            else:
                current = span

        if not self_closing:
            depth += 1

    raise SvgExtractionError("Root element not found in source text", {"depth": depth})


def detect_encoding(data: bytes) -> str:
    """Return the encoding an XML parser uses for data.

    A byte order mark wins over the XML declaration; without either the
    document is UTF-8.
    """
    for bom, encoding in _BOMS:
        if data.startswith(bom):
            return encoding
    match = _ENCODING_DECL_RE.match(data)
    return match.group(1).decode("ascii") if match else DEFAULT_XML_ENCODING


def decode_source(data: bytes, source: str = "<string>") -> str:
    """Decode a well-formed document for slicing.

    Args:
        data: The raw file content.
        source: Path or name of the file, used in error messages.

    Returns:
        The text, with line endings exactly as in the file.

    Raises:
        SvgExtractionError: If the declared encoding cannot decode the data.
    """
    encoding = detect_encoding(data)
    try:
        return data.decode(encoding)
    except (LookupError, UnicodeDecodeError) as e:
        raise chain_exception(
            SvgExtractionError(
                f"Cannot decode source text as {encoding}",
                {"path": source, "encoding": encoding, "error": str(e)},
            ),
            e,
        )


def validate(text: bytes | str) -> ET.Element:
    """Check that text is well-formed XML.

    Args:
        text: The file content. Bytes are decoded by the parser itself.

    Returns:
        The parsed root element.

    Raises:
        ET.ParseError: If the text is not well-formed.
    """
    return ET.fromstring(text)


def get_view_box(root: ET.Element) -> str:
    """Return the root's viewBox attribute, or an empty string."""
    for name, value in root.attrib.items():
        if _strip_ns(name) == VIEWBOX_ATTRIBUTE:
            return value
    return ""


def parse_svg(data: bytes | str, source: str = "<string>") -> SvgDocument:
    """Parse one SVG file and extract what the sprite needs from it.

    Args:
        data: The file content, raw or already decoded.
        source: Path or name of the file, used in error messages.

    Returns:
        The document's viewBox, defs content and root content.

    Raises:
        InvalidSvgError: If the data is not well-formed XML.
        SvgExtractionError: If the content cannot be decoded or located.
    """
    try:
        root = validate(data)
    except ET.ParseError as e:
        raise chain_exception(
            InvalidSvgError(f"{source}: Invalid SVG", {"path": source, "error": str(e)}),
            e,
        )

    text = decode_source(data, source) if isinstance(data, bytes) else data

    try:
        spans = locate_elements(text)
    except SvgExtractionError as e:
        e.details["path"] = source
        raise

    defs = tuple(
        child.content(text) for child in spans.children if child.name == DEFS_ELEMENT
    )

    return SvgDocument(
        view_box=get_view_box(root),
        defs=defs,
        content=spans.root.content(text),
    )
