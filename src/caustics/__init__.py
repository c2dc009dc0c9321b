"""Caustic curve geometry and small OpenGL/Qt demo front-ends."""
__version__ = "0.1.0"
