"""Tuples, colours, canvases, PPM output and a projectile demo for a small ray tracer."""

__version__ = "0.1.0"

__all__ = ["canvas", "color", "ppm", "projectile", "tuple"]