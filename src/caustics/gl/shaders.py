"""GLSL shader compilation helpers."""
from __future__ import annotations

import logging

from OpenGL import GL

logger = logging.getLogger(__name__)


class ShaderError(RuntimeError):
    """A shader failed to compile or a program failed to link."""


def _as_text(log: bytes | str) -> str:
    if isinstance(log, bytes):
        return log.decode("utf-8", errors="replace")
    return log


def compile_shader(shader_type: int, source: str) -> int:
    """
    Compile a single shader stage.

    Args:
        shader_type: ``GL_VERTEX_SHADER`` or ``GL_FRAGMENT_SHADER``.
        source: GLSL source text.

    Returns:
        The shader object name.

    Raises:
        ShaderError: With the driver's info log, if compilation fails.
    """
    shader = GL.glCreateShader(shader_type)
    GL.glShaderSource(shader, source)
    GL.glCompileShader(shader)

    if not GL.glGetShaderiv(shader, GL.GL_COMPILE_STATUS):
        info = _as_text(GL.glGetShaderInfoLog(shader))
        GL.glDeleteShader(shader)
        logger.error(f"Shader compilation failed: {info}")
        raise ShaderError(f"Shader compilation failed: {info}")

    return shader


def link_program(vertex_source: str, fragment_source: str) -> int:
    """Compile both stages and link them into a program. Shader objects are released."""
    vs = compile_shader(GL.GL_VERTEX_SHADER, vertex_source)
    try:
        fs = compile_shader(GL.GL_FRAGMENT_SHADER, fragment_source)
    except ShaderError:
        GL.glDeleteShader(vs)
        raise

    program = GL.glCreateProgram()
    GL.glAttachShader(program, vs)
    GL.glAttachShader(program, fs)
    GL.glLinkProgram(program)
    GL.glDeleteShader(vs)
    GL.glDeleteShader(fs)

    if not GL.glGetProgramiv(program, GL.GL_LINK_STATUS):
        info = _as_text(GL.glGetProgramInfoLog(program))
        GL.glDeleteProgram(program)
        logger.error(f"Program link failed: {info}")
        raise ShaderError(f"Program link failed: {info}")

    logger.debug(f"Linked shader program {program}.")
    return program
