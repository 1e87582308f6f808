"""SVG → DXF conversion entry point."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from artdxf.config import Settings
from artdxf.converter.emitter import emit_dxf
from artdxf.converter.extractor import extract_primitives
from artdxf.converter.primitives import Circle, LineSegment, Primitive
from artdxf.converter.transform import IDENTITY, Transform
from artdxf.errors import ConversionError
from artdxf.svg.parser import parse_svg_document

logger = logging.getLogger(__name__)

DXF_CONTENT_TYPE = "application/dxf"


@dataclass
class ConversionResult:
    dxf: str
    primitives: list[Primitive] = field(default_factory=list)

    @property
    def line_count(self) -> int:
        return sum(1 for p in self.primitives if isinstance(p, LineSegment))

    @property
    def circle_count(self) -> int:
        return sum(1 for p in self.primitives if isinstance(p, Circle))


def convert_svg(
    svg_text: str,
    transform: Transform = IDENTITY,
    settings: Settings | None = None,
) -> ConversionResult:
    """Convert SVG text, keeping the extracted primitives alongside the DXF.

    Any failure (malformed XML included) is raised as :class:`ConversionError`
    chained to the original exception; no partial output is returned.
    """
    try:
        doc = parse_svg_document(svg_text)
        primitives = extract_primitives(doc, transform)
        dxf = emit_dxf(primitives, settings)
    except Exception as e:
        reason = str(e) or type(e).__name__
        logger.warning("SVG to DXF conversion failed: %s", reason)
        raise ConversionError(reason) from e

    result = ConversionResult(dxf=dxf, primitives=primitives)
    logger.info(
        "Converted SVG to DXF: %d entities (%d lines, %d circles)",
        len(primitives),
        result.line_count,
        result.circle_count,
    )
    return result


def convert_svg_to_dxf(
    svg_text: str,
    transform: Transform = IDENTITY,
    settings: Settings | None = None,
) -> str:
    """Convert SVG text to a DXF document string."""
    return convert_svg(svg_text, transform, settings).dxf
