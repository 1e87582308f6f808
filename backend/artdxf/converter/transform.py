"""Offset/scale transform applied to every coordinate of a converted subtree."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class Transform:
    """Uniform scale followed by an offset: ``x' = x * scale + offset_x``."""

    offset_x: float = 0.0
    offset_y: float = 0.0
    scale: float = 1.0

    def apply_point(self, x: float, y: float) -> tuple[float, float]:
        return (x * self.scale + self.offset_x, y * self.scale + self.offset_y)

    def apply_length(self, value: float) -> float:
        """Lengths (radius, width, height) are scaled but never offset."""
        return value * self.scale

    def apply_points(self, points: NDArray[np.float64]) -> NDArray[np.float64]:
        """Vectorised :meth:`apply_point` over an Nx2 array."""
        return points * self.scale + np.array([self.offset_x, self.offset_y])


IDENTITY = Transform()
