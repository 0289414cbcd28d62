"""Preview module for canvas storage and image output.

Components:
    canvas: Taichi-backed RGB canvas with PPM text output
    export: PPM/PNG file export utilities

Example:
    >>> from src.whitted.preview import save_png
    >>> canvas = camera.render(world)
    >>> save_png(canvas, "output.png")
"""

from src.whitted.preview.canvas import Canvas
from src.whitted.preview.export import (
    save_image,
    save_png,
    save_ppm,
)

__all__ = [
    "Canvas",
    "save_image",
    "save_png",
    "save_ppm",
]
