"""
Geometric Primitives for the curve model.
"""
from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class Point2D:
    """A point in the XY plane. Immutable once computed."""
    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        return self.x, self.y
