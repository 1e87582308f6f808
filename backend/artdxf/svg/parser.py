"""SVG parser — facade over xml.etree.

Converts raw SVG text → SvgDocument. Namespaces are stripped from tags and
attribute names; comments, text and processing instructions are dropped.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET

from artdxf.models.svg_document import SvgDocument, SvgElement

logger = logging.getLogger(__name__)


def parse_svg_document(svg_text: str) -> SvgDocument:
    """Parse raw SVG text. Blank text is an empty document.

    Raises ``xml.etree.ElementTree.ParseError`` on malformed XML.
    """
    if not svg_text.strip():
        logger.debug("Empty SVG input, returning empty document")
        return SvgDocument()

    root = ET.fromstring(svg_text)
    doc = SvgDocument(children=[_convert(root)])
    logger.debug("Parsed SVG: root <%s>", doc.children[0].tag)
    return doc


def _strip_ns(name: str) -> str:
    return name.split("}")[-1] if "}" in name else name


def _convert(element: ET.Element) -> SvgElement:
    return SvgElement(
        tag=_strip_ns(element.tag).lower(),
        attributes={_strip_ns(k): v for k, v in element.attrib.items()},
        children=[_convert(child) for child in element if isinstance(child.tag, str)],
    )
