"""artdxf: SVG → DXF conversion for barcode-art files."""

from artdxf.artifact import build_dxf_artifact
from artdxf.converter import convert_svg, convert_svg_to_dxf
from artdxf.errors import ArtDxfError, ConversionError, InvalidObjectUrlError

__all__ = [
    "build_dxf_artifact",
    "convert_svg",
    "convert_svg_to_dxf",
    "ArtDxfError",
    "ConversionError",
    "InvalidObjectUrlError",
]
