"""
Configuration & Constants
=========================
This module serves as the central registry for the demos' fixed settings.

Why is this file needed?
------------------------
1. Abstraction: Window sizes, colours and default curve parameters live in
   one place instead of being scattered through the renderers.
2. Testability: Renderers read these values, tests compare against them.
"""
from caustics.model.curve import CurveParameters


# Identity (used by QSettings and window titles)
ORG_ID = "marquette"
APP_ID = "caustics"
VISIBLE_APP_NAME = "Caustics"

# Curve
DEFAULT_PARAMETERS: CurveParameters = CurveParameters.default()  # Q=200, P=37, A=1, B=1

# Caustic window
CAUSTIC_WINDOW_SIZE: tuple[int, int] = (640, 640)
CAUSTIC_WINDOW_POS: tuple[int, int] = (100, 100)
CAUSTIC_EXTENT: float = 1.1  # visible square is [-EXTENT, EXTENT]^2
CAUSTIC_BACKGROUND: tuple[float, float, float] = (1.0, 1.0, 1.0)
POINT_COLOR: tuple[float, float, float] = (0.0, 0.0, 1.0)
BOUNDARY_COLOR: tuple[float, float, float] = (0.0, 1.0, 0.0)
CHORD_COLOR: tuple[float, float, float] = (1.0, 0.0, 0.0)
POINT_SIZE: float = 5.0

# Triangle window
TRIANGLE_WINDOW_SIZE: tuple[int, int] = (800, 600)
TRIANGLE_TITLE = "Triangle"
TRIANGLE_CLEAR_COLOR: tuple[float, float, float, float] = (0.1, 0.1, 0.1, 1.0)
GL_CORE_VERSION: tuple[int, int] = (3, 3)

# Hello window
HELLO_TEXT = "<center>Hello Marquette!</center>"
HELLO_TITLE = "Hello Marquette QT"
HELLO_SIZE: tuple[int, int] = (400, 400)


def window_title(params: CurveParameters) -> str:
    """Caption of the caustic window, e.g. ``Caustic  Q=200  P=37  A=1  B=1``."""
    return "Caustic  Q=%d  P=%d  A=%d  B=%d" % (
        params.point_count, params.chord_stride, params.freq_x, params.freq_y
    )
