"""
Caustic Curve Generator
=======================
Samples a closed parametric curve and derives the two edge sets used to
draw a caustic figure from it.

The curve is sampled at ``Q`` evenly spaced angles::

    angle_i = i * 2*pi / Q
    x_i = cos(A * angle_i)
    y_i = sin(B * angle_i)

Point ``i`` is joined to its neighbour ``(i + 1) mod Q`` (boundary) and to
``(i + P) mod Q`` (chord). With ``A = B = 1`` the curve is the unit circle and
the envelope of the chords is the classic cardioid/nephroid family of
caustics.

Classes:
    CurveParameters: Immutable (Q, P, A, B) value.
    CurveSample: Ordered points on the curve.
    EdgeSet: Ordered index pairs into a CurveSample.
    CurveGeometry: Everything a renderer needs for one frame.
"""
from __future__ import annotations

import logging
import math
import operator
from dataclasses import dataclass
from typing import Iterator, TYPE_CHECKING

import numpy as np

from caustics.model.geometry_primitives import Point2D

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

# Shared by point generation and by anything that checks point angles.
TWO_PI: float = 2.0 * math.pi


class InvalidParameterError(ValueError):
    """Raised when curve parameters cannot produce a curve."""


def _as_int(value: object, name: str) -> int:
    if isinstance(value, bool):
        raise InvalidParameterError(f"{name} must be an integer, got {value!r}.")
    try:
        return operator.index(value)
    except TypeError:
        raise InvalidParameterError(f"{name} must be an integer, got {value!r}.") from None


def _check_point_count(point_count: object) -> int:
    q = _as_int(point_count, "point_count")
    if q <= 0:
        raise InvalidParameterError(f"point_count must be positive, got {q}.")
    return q


# ------------------------------------------------------------------------------
# Data Structures
# ------------------------------------------------------------------------------

@dataclass(frozen=True)
class CurveParameters:
    """
    Shape of a caustic figure.

    Attributes:
        point_count: Number of samples on the curve (Q), must be > 0.
        chord_stride: Index offset of each chord (P). Any integer, reduced modulo Q.
        freq_x: Angular multiplier of the x coordinate (A).
        freq_y: Angular multiplier of the y coordinate (B).
    """
    point_count: int = 200
    chord_stride: int = 37
    freq_x: int = 1
    freq_y: int = 1

    def __post_init__(self) -> None:
        # frozen dataclass: normalise through object.__setattr__
        object.__setattr__(self, "point_count", _check_point_count(self.point_count))
        object.__setattr__(self, "chord_stride", _as_int(self.chord_stride, "chord_stride"))
        object.__setattr__(self, "freq_x", _as_int(self.freq_x, "freq_x"))
        object.__setattr__(self, "freq_y", _as_int(self.freq_y, "freq_y"))

    @classmethod
    def default(cls) -> CurveParameters:
        return cls()

    @property
    def normalized_stride(self) -> int:
        """Chord stride reduced into [0, point_count)."""
        return self.chord_stride % self.point_count


@dataclass(frozen=True)
class CurveSample:
    """Points on the curve; index i sits at angle i * 2*pi / Q."""
    points: tuple[Point2D, ...]

    def __len__(self) -> int:
        return len(self.points)

    def __getitem__(self, index: int) -> Point2D:
        return self.points[index]

    def __iter__(self) -> Iterator[Point2D]:
        return iter(self.points)

    def to_array(self) -> npt.NDArray[np.float64]:
        """(N, 2) array of xy coordinates."""
        return np.array([p.to_tuple() for p in self.points], dtype=np.float64).reshape(-1, 2)


@dataclass(frozen=True)
class EdgeSet:
    """Index pairs (i, j) into a CurveSample."""
    edges: tuple[tuple[int, int], ...]

    def __len__(self) -> int:
        return len(self.edges)

    def __getitem__(self, index: int) -> tuple[int, int]:
        return self.edges[index]

    def __iter__(self) -> Iterator[tuple[int, int]]:
        return iter(self.edges)

    def to_array(self) -> npt.NDArray[np.int_]:
        return np.array(self.edges, dtype=np.int_).reshape(-1, 2)


@dataclass(frozen=True)
class CurveGeometry:
    """Points plus boundary and chord edges for one render request."""
    params: CurveParameters
    points: CurveSample
    boundary: EdgeSet
    chords: EdgeSet


# ------------------------------------------------------------------------------
# Generators
# ------------------------------------------------------------------------------

def generate_points(params: CurveParameters) -> CurveSample:
    """
    Sample the curve at ``params.point_count`` evenly spaced angles.

    Args:
        params: Curve parameters. ``point_count`` was validated on construction.

    Returns:
        CurveSample with exactly ``point_count`` points.
    """
    q = _check_point_count(params.point_count)
    angles = np.arange(q, dtype=np.float64) * TWO_PI / q
    xs = np.cos(params.freq_x * angles)
    ys = np.sin(params.freq_y * angles)
    points = tuple(Point2D(float(x), float(y)) for x, y in zip(xs, ys))
    logger.debug(f"Generated {q} points (A={params.freq_x}, B={params.freq_y}).")
    return CurveSample(points)


def generate_boundary_edges(point_count: int) -> EdgeSet:
    """Pairs (i, (i + 1) mod Q): one closed polyline through every point."""
    q = _check_point_count(point_count)
    return EdgeSet(tuple((i, (i + 1) % q) for i in range(q)))


def generate_chord_edges(point_count: int, stride: int) -> EdgeSet:
    """
    Pairs (i, (i + stride) mod Q).

    The stride is reduced into [0, Q) first, so negative strides never yield a
    negative index. A stride of 0 (mod Q) turns every chord into a self-loop,
    which is valid but draws nothing visible.
    """
    q = _check_point_count(point_count)
    s = _as_int(stride, "stride") % q
    if s == 0:
        logger.debug(f"Chord stride {stride} is 0 mod {q}; chords are self-loops.")
    return EdgeSet(tuple((i, (i + s) % q) for i in range(q)))


def build_geometry(params: CurveParameters) -> CurveGeometry:
    """Derive a fresh CurveGeometry. Nothing is cached between calls."""
    return CurveGeometry(
        params=params,
        points=generate_points(params),
        boundary=generate_boundary_edges(params.point_count),
        chords=generate_chord_edges(params.point_count, params.normalized_stride),
    )


def edge_segments(points: CurveSample, edges: EdgeSet) -> npt.NDArray[np.float64]:
    """
    Resolve edges to coordinates.

    Returns:
        (N, 2, 2) array; ``out[k]`` holds the start and end xy of edge k.

    Raises:
        IndexError: If an edge refers to a point outside ``points``.
    """
    xy = points.to_array()
    idx = edges.to_array()
    if idx.size and (idx.min() < 0 or idx.max() >= len(xy)):
        raise IndexError(f"Edge index out of range for {len(xy)} points.")
    return xy[idx].reshape(-1, 2, 2)
