"""Shared pytest fixtures for caustics tests."""

from __future__ import annotations

import logging
import os

import pytest

# Qt widgets are created without a display server
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from caustics.model.curve import CurveParameters  # noqa: E402


@pytest.fixture
def default_params() -> CurveParameters:
    """The reference figure: Q=200, P=37, A=B=1."""
    return CurveParameters(point_count=200, chord_stride=37, freq_x=1, freq_y=1)


@pytest.fixture
def square_params() -> CurveParameters:
    """Four points on the unit circle."""
    return CurveParameters(point_count=4, chord_stride=1, freq_x=1, freq_y=1)


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Drop handlers added by setup_logging so they never outlive a captured stream."""
    yield
    logger = logging.getLogger("caustics")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
