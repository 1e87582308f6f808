"""Shape extractor: walks an SvgDocument and emits line/circle primitives."""

from __future__ import annotations

import enum
import logging

import numpy as np

from artdxf.converter.numbers import parse_number
from artdxf.converter.path_parser import path_line_commands
from artdxf.converter.primitives import Circle, LineSegment, Primitive
from artdxf.converter.transform import IDENTITY, Transform
from artdxf.models.svg_document import SvgDocument, SvgElement

logger = logging.getLogger(__name__)


class ElementKind(enum.Enum):
    PATH = "path"
    LINE = "line"
    CIRCLE = "circle"
    RECT = "rect"
    OTHER = "other"

    @classmethod
    def from_tag(cls, tag: str) -> ElementKind:
        try:
            return cls(tag.lower())
        except ValueError:
            return cls.OTHER


def attr_number(element: SvgElement, name: str, default: float = 0.0) -> float:
    """Numeric attribute value; missing, empty or blank values give ``default``."""
    raw = element.get(name)
    if raw is None or not raw.strip():
        return default
    return parse_number(raw)


def extract_primitives(
    node: SvgDocument | SvgElement,
    transform: Transform = IDENTITY,
) -> list[Primitive]:
    """Collect primitives for ``node`` and its descendants in document order.

    Each element contributes its own primitives before its children's.
    Unrecognised elements contribute nothing but are still descended into.
    """
    out: list[Primitive] = []
    roots = node.children if isinstance(node, SvgDocument) else [node]
    for element in roots:
        _visit(element, transform, out)
    return out


def _visit(element: SvgElement, transform: Transform, out: list[Primitive]) -> None:
    kind = ElementKind.from_tag(element.tag)

    if kind is ElementKind.PATH:
        out.extend(_path_segments(element, transform))
    elif kind is ElementKind.LINE:
        out.append(_line_segment(element, transform))
    elif kind is ElementKind.CIRCLE:
        out.append(_circle(element, transform))
    elif kind is ElementKind.RECT:
        out.extend(_rect_segments(element, transform))
    else:
        logger.debug("Skipping <%s> (%d children)", element.tag, len(element.children))

    for child in element.children:
        _visit(child, transform, out)


def _path_segments(element: SvgElement, transform: Transform) -> list[LineSegment]:
    d = element.get("d")
    if not d:
        return []
    commands = path_line_commands(d)
    if not commands:
        return []

    # Row i holds the start and end point of command i
    ends = np.array([[c.x1, c.y1, c.x2, c.y2] for c in commands], dtype=np.float64)
    starts = transform.apply_points(ends[:, :2])
    stops = transform.apply_points(ends[:, 2:])
    return [
        LineSegment(float(a[0]), float(a[1]), float(b[0]), float(b[1]))
        for a, b in zip(starts, stops)
    ]


def _line_segment(element: SvgElement, transform: Transform) -> LineSegment:
    x1, y1 = transform.apply_point(attr_number(element, "x1"), attr_number(element, "y1"))
    x2, y2 = transform.apply_point(attr_number(element, "x2"), attr_number(element, "y2"))
    return LineSegment(x1, y1, x2, y2)


def _circle(element: SvgElement, transform: Transform) -> Circle:
    cx, cy = transform.apply_point(attr_number(element, "cx"), attr_number(element, "cy"))
    r = transform.apply_length(attr_number(element, "r"))
    return Circle(cx, cy, r)


def _rect_segments(element: SvgElement, transform: Transform) -> list[LineSegment]:
    x, y = transform.apply_point(attr_number(element, "x"), attr_number(element, "y"))
    width = transform.apply_length(attr_number(element, "width"))
    height = transform.apply_length(attr_number(element, "height"))

    # Closing corner repeated so the fourth edge is emitted explicitly
    corners = np.array(
        [
            [x, y],
            [x + width, y],
            [x + width, y + height],
            [x, y + height],
            [x, y],
        ],
        dtype=np.float64,
    )
    return [
        LineSegment(float(a[0]), float(a[1]), float(b[0]), float(b[1]))
        for a, b in zip(corners[:-1], corners[1:])
    ]
