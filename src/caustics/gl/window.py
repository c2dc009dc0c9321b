"""GLFW window + OpenGL context lifecycle."""
from __future__ import annotations

import logging
from typing import Any, Optional

import glfw

logger = logging.getLogger(__name__)


class WindowError(RuntimeError):
    """GLFW could not be initialized or the window could not be created."""


class GLFWWindow:
    """
    Context manager owning one GLFW window and its current GL context.

    ``core_version=None`` requests a default (compatibility) context, which
    the immediate-mode renderer needs; pass ``(3, 3)`` for a core profile.
    """

    def __init__(
        self,
        title: str,
        size: tuple[int, int],
        *,
        position: Optional[tuple[int, int]] = None,
        core_version: Optional[tuple[int, int]] = None,
    ) -> None:
        self.title = title
        self.size = size
        self.position = position
        self.core_version = core_version
        self.handle: Any = None

    def __enter__(self) -> GLFWWindow:
        if not glfw.init():
            raise WindowError("GLFW could not be initialized.")

        if self.core_version is not None:
            major, minor = self.core_version
            glfw.window_hint(glfw.CONTEXT_VERSION_MAJOR, major)
            glfw.window_hint(glfw.CONTEXT_VERSION_MINOR, minor)
            glfw.window_hint(glfw.OPENGL_PROFILE, glfw.OPENGL_CORE_PROFILE)
            # Required on macOS for core profiles
            glfw.window_hint(glfw.OPENGL_FORWARD_COMPAT, True)

        width, height = self.size
        self.handle = glfw.create_window(width, height, self.title, None, None)
        if not self.handle:
            glfw.terminate()
            raise WindowError(f"GLFW window '{self.title}' could not be created.")

        if self.position is not None:
            glfw.set_window_pos(self.handle, *self.position)

        glfw.make_context_current(self.handle)
        logger.info(f"Opened window '{self.title}' ({width}x{height}).")
        return self

    def __exit__(self, *exc_info: object) -> None:
        if self.handle:
            glfw.destroy_window(self.handle)
            self.handle = None
        glfw.terminate()
        logger.info(f"Closed window '{self.title}'.")

    def should_close(self) -> bool:
        return bool(glfw.window_should_close(self.handle))

    def framebuffer_size(self) -> tuple[int, int]:
        return glfw.get_framebuffer_size(self.handle)

    def end_frame(self) -> None:
        """Swap buffers and process pending events."""
        glfw.swap_buffers(self.handle)
        glfw.poll_events()
