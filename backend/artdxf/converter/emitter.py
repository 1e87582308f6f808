"""DXF record emitter: ASCII group-code/value pairs, one per line.

Layout: HEADER (``$ACADVER`` only), empty TABLES and BLOCKS, ENTITIES, EOF.
Layers, line types and block definitions are never written.
"""

from __future__ import annotations

from collections.abc import Iterable

from artdxf.config import Settings, get_settings
from artdxf.converter.numbers import format_number
from artdxf.converter.primitives import Circle, LineSegment, Primitive


class DxfRecordWriter:
    """Append-only buffer of DXF lines, owned by a single conversion."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()
        self._lines: list[str] = []

    def pair(self, code: int, value: str) -> None:
        self._lines.append(str(code))
        self._lines.append(value)

    def number(self, code: int, value: float) -> None:
        self.pair(code, format_number(value, self.settings.dxf_precision))

    def begin_section(self, name: str) -> None:
        self.pair(0, "SECTION")
        self.pair(2, name)

    def end_section(self) -> None:
        self.pair(0, "ENDSEC")

    def header(self) -> None:
        self.begin_section("HEADER")
        self.pair(9, "$ACADVER")
        self.pair(1, self.settings.dxf_version)
        self.end_section()

    def empty_section(self, name: str) -> None:
        self.begin_section(name)
        self.end_section()

    def line(self, seg: LineSegment) -> None:
        self.pair(0, "LINE")
        self.pair(8, self.settings.dxf_layer)
        self.number(10, seg.x1)
        self.number(20, seg.y1)
        self.number(11, seg.x2)
        self.number(21, seg.y2)

    def circle(self, circle: Circle) -> None:
        self.pair(0, "CIRCLE")
        self.pair(8, self.settings.dxf_layer)
        self.number(10, circle.cx)
        self.number(20, circle.cy)
        self.pair(30, "0.0")
        self.number(40, circle.r)

    def entity(self, primitive: Primitive) -> None:
        if isinstance(primitive, LineSegment):
            self.line(primitive)
        elif isinstance(primitive, Circle):
            self.circle(primitive)
        else:
            raise TypeError(f"Unsupported primitive: {type(primitive).__name__}")

    def eof(self) -> None:
        self.pair(0, "EOF")

    @property
    def lines(self) -> list[str]:
        return list(self._lines)

    def render(self) -> str:
        return "\n".join(self._lines)


def emit_dxf(primitives: Iterable[Primitive], settings: Settings | None = None) -> str:
    """Serialize primitives into a complete DXF document string."""
    writer = DxfRecordWriter(settings)
    writer.header()
    writer.empty_section("TABLES")
    writer.empty_section("BLOCKS")
    writer.begin_section("ENTITIES")
    for primitive in primitives:
        writer.entity(primitive)
    writer.end_section()
    writer.eof()
    return writer.render()
