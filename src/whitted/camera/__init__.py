"""Camera module for primary ray generation and rendering.

Components:
    camera: Pinhole camera with view transform and the per-pixel render loop

Rays are generated through pixel centres, with pixel (0, 0) at the top-left
of the canvas. Rendering traces one ray per pixel and writes each resolved
color to the canvas exactly once.
"""

from .camera import Camera, ProgressCallback

__all__ = [
    "Camera",
    "ProgressCallback",
]
