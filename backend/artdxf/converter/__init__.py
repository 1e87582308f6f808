"""SVG → DXF converter: path parser, shape extractor, record emitter."""

from artdxf.converter.convert import DXF_CONTENT_TYPE, ConversionResult, convert_svg, convert_svg_to_dxf
from artdxf.converter.emitter import DxfRecordWriter, emit_dxf
from artdxf.converter.extractor import ElementKind, extract_primitives
from artdxf.converter.path_parser import ClosePath, LineTo, MoveTo, iter_path_commands
from artdxf.converter.primitives import Circle, LineSegment, Primitive
from artdxf.converter.transform import IDENTITY, Transform

__all__ = [
    "DXF_CONTENT_TYPE",
    "ConversionResult",
    "convert_svg",
    "convert_svg_to_dxf",
    "DxfRecordWriter",
    "emit_dxf",
    "ElementKind",
    "extract_primitives",
    "ClosePath",
    "LineTo",
    "MoveTo",
    "iter_path_commands",
    "Circle",
    "LineSegment",
    "Primitive",
    "IDENTITY",
    "Transform",
]
