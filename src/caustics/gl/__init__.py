"""
OpenGL front-ends (GLFW windows, PyOpenGL calls).

Nothing here is imported by the model layer; importing this package needs
PyOpenGL and glfw but not a display.
"""
