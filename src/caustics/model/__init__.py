"""
The MODEL layer contains pure data structures and geometry.
It has NO knowledge of the GUI (Qt) or the graphics API (OpenGL).
"""
from caustics.model.curve import (
    TWO_PI,
    CurveGeometry,
    CurveParameters,
    CurveSample,
    EdgeSet,
    InvalidParameterError,
    build_geometry,
    edge_segments,
    generate_boundary_edges,
    generate_chord_edges,
    generate_points,
)
from caustics.model.geometry_primitives import Point2D

__all__ = [
    "TWO_PI",
    "CurveGeometry",
    "CurveParameters",
    "CurveSample",
    "EdgeSet",
    "InvalidParameterError",
    "Point2D",
    "build_geometry",
    "edge_segments",
    "generate_boundary_edges",
    "generate_chord_edges",
    "generate_points",
]
