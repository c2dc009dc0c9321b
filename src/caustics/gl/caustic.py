"""
Immediate-mode OpenGL caustic renderer.

Draws the curve points (blue), the closed boundary polyline (green) and the
chords (red) on a white background, with an orthographic view that leaves a
small margin around [-1, 1]^2.
"""
from __future__ import annotations

import logging

from OpenGL import GL

from caustics import config
from caustics.gl.window import GLFWWindow
from caustics.model.curve import CurveGeometry, CurveParameters, CurveSample, EdgeSet, build_geometry

logger = logging.getLogger(__name__)


class CausticRenderer:
    """Stateless draw calls for a CurveGeometry. Needs a compatibility context."""

    def __init__(self, extent: float = config.CAUSTIC_EXTENT, point_size: float = config.POINT_SIZE) -> None:
        self.extent = extent
        self.point_size = point_size

    def setup(self) -> None:
        """One-off GL state: clear colour, point size, projection."""
        GL.glClearColor(*config.CAUSTIC_BACKGROUND, 1.0)
        GL.glPointSize(self.point_size)

        GL.glMatrixMode(GL.GL_PROJECTION)
        GL.glLoadIdentity()
        e = self.extent
        GL.glOrtho(-e, e, -e, e, -1.0, 1.0)

        GL.glMatrixMode(GL.GL_MODELVIEW)
        GL.glLoadIdentity()

    def draw(self, geometry: CurveGeometry) -> None:
        GL.glClear(GL.GL_COLOR_BUFFER_BIT)

        GL.glColor3f(*config.POINT_COLOR)
        GL.glBegin(GL.GL_POINTS)
        for p in geometry.points:
            GL.glVertex2f(p.x, p.y)
        GL.glEnd()

        GL.glColor3f(*config.BOUNDARY_COLOR)
        self._draw_edges(geometry.points, geometry.boundary)

        GL.glColor3f(*config.CHORD_COLOR)
        self._draw_edges(geometry.points, geometry.chords)

        GL.glFlush()

    @staticmethod
    def _draw_edges(points: CurveSample, edges: EdgeSet) -> None:
        GL.glBegin(GL.GL_LINES)
        for i, j in edges:
            a, b = points[i], points[j]
            GL.glVertex2f(a.x, a.y)
            GL.glVertex2f(b.x, b.y)
        GL.glEnd()


def run_caustic(params: CurveParameters = config.DEFAULT_PARAMETERS) -> None:
    """Open the caustic window and redraw until it is closed."""
    title = config.window_title(params)
    logger.info(f"Starting {title}")

    with GLFWWindow(title, config.CAUSTIC_WINDOW_SIZE, position=config.CAUSTIC_WINDOW_POS) as window:
        renderer = CausticRenderer()
        renderer.setup()
        while not window.should_close():
            width, height = window.framebuffer_size()
            GL.glViewport(0, 0, width, height)
            # Geometry is re-derived per frame from the immutable parameters
            renderer.draw(build_geometry(params))
            window.end_frame()
