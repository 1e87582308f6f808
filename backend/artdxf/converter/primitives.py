"""Geometric primitives produced by the shape extractor."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class LineSegment:
    x1: float
    y1: float
    x2: float
    y2: float


@dataclass(frozen=True)
class Circle:
    cx: float
    cy: float
    r: float


Primitive = Union[LineSegment, Circle]
