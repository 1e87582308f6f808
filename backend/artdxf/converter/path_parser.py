"""Minimal SVG path-data parser: absolute ``M``, ``L`` and ``Z`` only.

Curves, arcs and the H/V shorthands are not recognised; their letters are not
matched as commands and their arguments are skipped along with them.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Union

from artdxf.converter.numbers import parse_number

_COMMAND_RE = re.compile(r"([MLZ])\s*([^MLZ]*)", re.IGNORECASE)
_ARG_SPLIT_RE = re.compile(r"[\s,]+")


@dataclass(frozen=True)
class MoveTo:
    x: float
    y: float


@dataclass(frozen=True)
class LineTo:
    x1: float
    y1: float
    x2: float
    y2: float


@dataclass(frozen=True)
class ClosePath:
    pass


PathCommand = Union[MoveTo, LineTo, ClosePath]


def _parse_args(raw: str) -> list[float]:
    return [parse_number(tok) for tok in _ARG_SPLIT_RE.split(raw.strip()) if tok]


def iter_path_commands(path_data: str) -> Iterator[PathCommand]:
    """Yield path commands in textual order, tracking the pen position.

    ``M``/``L`` need at least two numbers and ignore the rest. ``Z`` is
    reported as :class:`ClosePath` but does not move the pen back to the
    subpath start.
    """
    pen_x, pen_y = 0.0, 0.0

    for match in _COMMAND_RE.finditer(path_data):
        letter = match.group(1).upper()
        args = _parse_args(match.group(2))

        if letter == "M" and len(args) >= 2:
            pen_x, pen_y = args[0], args[1]
            yield MoveTo(pen_x, pen_y)
        elif letter == "L" and len(args) >= 2:
            yield LineTo(pen_x, pen_y, args[0], args[1])
            pen_x, pen_y = args[0], args[1]
        elif letter == "Z":
            yield ClosePath()


def path_line_commands(path_data: str) -> list[LineTo]:
    """Only the line-drawing commands of ``path_data``."""
    return [cmd for cmd in iter_path_commands(path_data) if isinstance(cmd, LineTo)]
