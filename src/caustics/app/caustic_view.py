"""
Qt/pyqtgraph caustic view.

Same picture as the OpenGL renderer, drawn with pyqtgraph items:
points as a scatter, boundary and chords as line items that join
consecutive vertex pairs.
"""
from __future__ import annotations

import logging

import numpy as np
from PySide6.QtWidgets import QWidget
import pyqtgraph as pg

from caustics import config
from caustics.app.application import create_app
from caustics.model.curve import CurveGeometry, CurveParameters, EdgeSet, build_geometry, edge_segments

logger = logging.getLogger(__name__)


def _rgb255(color: tuple[float, float, float]) -> tuple[int, int, int]:
    return tuple(int(round(c * 255)) for c in color)  # type: ignore[return-value]


class CausticView(pg.PlotWidget):
    """Plot widget locked to the [-extent, extent] square."""

    def __init__(self, parent: QWidget | None = None, extent: float = config.CAUSTIC_EXTENT) -> None:
        super().__init__(parent=parent, background=_rgb255(config.CAUSTIC_BACKGROUND))
        self.extent = extent
        self.geometry_data: CurveGeometry | None = None

        plot = self.getPlotItem()
        plot.hideAxis("left")
        plot.hideAxis("bottom")
        plot.setMouseEnabled(x=False, y=False)
        plot.hideButtons()
        self.setAspectLocked(True)
        self.setRange(xRange=(-extent, extent), yRange=(-extent, extent), padding=0.0)

        self._boundary_item = pg.PlotDataItem(pen=pg.mkPen(_rgb255(config.BOUNDARY_COLOR), width=1))
        self._chord_item = pg.PlotDataItem(pen=pg.mkPen(_rgb255(config.CHORD_COLOR), width=1))
        self._points_item = pg.ScatterPlotItem(
            size=config.POINT_SIZE,
            pen=None,
            brush=pg.mkBrush(_rgb255(config.POINT_COLOR)),
        )
        # draw order: points, boundary, chords (later items on top)
        for item in (self._points_item, self._boundary_item, self._chord_item):
            self.addItem(item)

    def set_geometry(self, geometry: CurveGeometry) -> None:
        self.geometry_data = geometry
        xy = geometry.points.to_array()
        self._points_item.setData(x=xy[:, 0], y=xy[:, 1])
        self._set_edges(self._boundary_item, geometry, geometry.boundary)
        self._set_edges(self._chord_item, geometry, geometry.chords)
        logger.debug(
            f"View updated: {len(geometry.points)} points, "
            f"{len(geometry.boundary)} boundary edges, {len(geometry.chords)} chords."
        )

    @staticmethod
    def _set_edges(item: pg.PlotDataItem, geometry: CurveGeometry, edges: EdgeSet) -> None:
        segs = edge_segments(geometry.points, edges).reshape(-1, 2)
        item.setData(x=segs[:, 0], y=segs[:, 1], connect="pairs")

    def segment_count(self) -> int:
        if self.geometry_data is None:
            return 0
        return len(self.geometry_data.boundary) + len(self.geometry_data.chords)

    def points_xy(self) -> np.ndarray:
        x, y = self._points_item.getData()
        return np.column_stack([x, y])


def run_caustic_qt(params: CurveParameters = config.DEFAULT_PARAMETERS) -> int:
    app = create_app()
    view = CausticView()
    view.setWindowTitle(config.window_title(params))
    view.resize(*config.CAUSTIC_WINDOW_SIZE)
    view.move(*config.CAUSTIC_WINDOW_POS)
    view.set_geometry(build_geometry(params))
    view.show()
    logger.info(f"Starting {config.window_title(params)} (Qt)")
    return app.exec()
