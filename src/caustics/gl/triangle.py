"""
Shader-based triangle demo on an OpenGL 3.3 core context.
"""
from __future__ import annotations

import ctypes
import logging

import numpy as np
from OpenGL import GL

from caustics import config
from caustics.gl.shaders import link_program
from caustics.gl.window import GLFWWindow

logger = logging.getLogger(__name__)

VERTEX_SHADER = """
#version 330 core
layout (location = 0) in vec3 aPos;
void main() {
    gl_Position = vec4(aPos, 1.0);
}
"""

FRAGMENT_SHADER = """
#version 330 core
out vec4 FragColor;
void main() {
    FragColor = vec4(0.2, 0.7, 0.3, 1.0); // greenish
}
"""

TRIANGLE_VERTICES = np.array([
    [-0.5, -0.5, 0.0],
    [ 0.5, -0.5, 0.0],
    [ 0.0,  0.5, 0.0],
], dtype=np.float32)


class TriangleRenderer:
    """Owns the VAO, VBO and program for one triangle."""

    def __init__(self, vertices: np.ndarray = TRIANGLE_VERTICES) -> None:
        self.vertices = np.ascontiguousarray(vertices, dtype=np.float32)
        if self.vertices.ndim != 2 or self.vertices.shape[1] != 3:
            raise ValueError(f"Expected shape (N, 3), got {self.vertices.shape}.")
        self.vao: int | None = None
        self.vbo: int | None = None
        self.program: int | None = None

    @property
    def vertex_count(self) -> int:
        return int(self.vertices.shape[0])

    def setup(self) -> None:
        self.vao = GL.glGenVertexArrays(1)
        self.vbo = GL.glGenBuffers(1)

        GL.glBindVertexArray(self.vao)
        GL.glBindBuffer(GL.GL_ARRAY_BUFFER, self.vbo)
        GL.glBufferData(GL.GL_ARRAY_BUFFER, self.vertices.nbytes, self.vertices, GL.GL_STATIC_DRAW)
        stride = self.vertices.shape[1] * self.vertices.itemsize
        GL.glVertexAttribPointer(0, 3, GL.GL_FLOAT, GL.GL_FALSE, stride, ctypes.c_void_p(0))
        GL.glEnableVertexAttribArray(0)
        GL.glBindVertexArray(0)

        self.program = link_program(VERTEX_SHADER, FRAGMENT_SHADER)

    def draw(self) -> None:
        GL.glClearColor(*config.TRIANGLE_CLEAR_COLOR)
        GL.glClear(GL.GL_COLOR_BUFFER_BIT)

        GL.glUseProgram(self.program)
        GL.glBindVertexArray(self.vao)
        GL.glDrawArrays(GL.GL_TRIANGLES, 0, self.vertex_count)

    def release(self) -> None:
        if self.vao is not None:
            GL.glDeleteVertexArrays(1, [self.vao])
            self.vao = None
        if self.vbo is not None:
            GL.glDeleteBuffers(1, [self.vbo])
            self.vbo = None
        if self.program is not None:
            GL.glDeleteProgram(self.program)
            self.program = None


def run_triangle() -> None:
    """Open the triangle window and draw until it is closed."""
    with GLFWWindow(
        config.TRIANGLE_TITLE,
        config.TRIANGLE_WINDOW_SIZE,
        core_version=config.GL_CORE_VERSION,
    ) as window:
        renderer = TriangleRenderer()
        renderer.setup()
        try:
            while not window.should_close():
                renderer.draw()
                window.end_frame()
        finally:
            renderer.release()
