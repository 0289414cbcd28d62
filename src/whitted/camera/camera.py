"""Pinhole camera and the render loop.

The camera sits at the origin of its own space looking toward -z, with the
image plane at z = -1. The field of view sets the width of that plane's
larger dimension; the other dimension follows from the aspect ratio:

    half_view = tan(field_of_view / 2)
    landscape (hsize >= vsize): half_width = half_view,
                                half_height = half_view / aspect
    portrait:                   half_width = half_view * aspect,
                                half_height = half_view

The camera transform is a view transform (world -> camera), so generating a
world ray maps both the pinhole and the pixel point through its inverse.

Example:
    >>> from math import pi
    >>> camera = Camera(100, 50, pi / 2,
    ...                 transform=view_transform(point(0, 1.5, -5),
    ...                                          point(0, 1, 0),
    ...                                          vector(0, 1, 0)))
    >>> canvas = camera.render(world)
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Generator

from src.whitted.core.matrix import IDENTITY, Matrix
from src.whitted.core.ray import Ray
from src.whitted.core.tuples import point
from src.whitted.preview.canvas import Canvas
from src.whitted.scene.world import REFLECTION_DEPTH, World

logger = logging.getLogger(__name__)

# Type alias for progress callback
# Callback receives (rows_done, total_rows)
ProgressCallback = Callable[[int, int], None]


class Camera:
    """A pinhole camera mapping a canvas of pixels onto world rays.

    Attributes:
        hsize: Horizontal size of the canvas in pixels.
        vsize: Vertical size of the canvas in pixels.
        field_of_view: Angle of view in radians.
        transform: World-to-camera view transform.
    """

    def __init__(
        self,
        hsize: int,
        vsize: int,
        field_of_view: float,
        transform: Matrix = IDENTITY,
    ) -> None:
        if hsize <= 0 or vsize <= 0:
            raise ValueError(f"Camera size must be positive, got {hsize}x{vsize}")

        self.hsize = hsize
        self.vsize = vsize
        self.field_of_view = field_of_view
        self.transform = transform

        half_view = math.tan(field_of_view / 2.0)
        aspect = hsize / vsize
        if aspect >= 1.0:
            self.half_width = half_view
            self.half_height = half_view / aspect
        else:
            self.half_width = half_view * aspect
            self.half_height = half_view
        self.pixel_size = (self.half_width * 2.0) / hsize

    @property
    def transform(self) -> Matrix:
        return self._transform

    @transform.setter
    def transform(self, transform: Matrix) -> None:
        self._inverse = transform.inverse()
        self._transform = transform

    def ray_for_pixel(self, px: float, py: float) -> Ray:
        """Create the world ray through the centre of pixel (px, py).

        Pixel (0, 0) is the top-left corner of the canvas.
        """
        xoffset = (px + 0.5) * self.pixel_size
        yoffset = (py + 0.5) * self.pixel_size

        # The camera looks toward -z, so +x is to the left
        world_x = self.half_width - xoffset
        world_y = self.half_height - yoffset

        pixel = self._inverse @ point(world_x, world_y, -1.0)
        origin = self._inverse @ point(0.0, 0.0, 0.0)
        direction = (pixel - origin).normalize()
        return Ray(origin, direction)

    def render_progressive(
        self,
        world: World,
        canvas: Canvas,
        depth: int = REFLECTION_DEPTH,
    ) -> Generator[tuple[int, int], None, None]:
        """Render into a canvas one row at a time.

        Yields:
            Tuple of (rows_done, total_rows) after each row.
        """
        for y in range(self.vsize):
            for x in range(self.hsize):
                ray = self.ray_for_pixel(x, y)
                canvas.write_pixel(x, y, world.color_at(ray, depth))
            yield (y + 1, self.vsize)

    def render(
        self,
        world: World,
        depth: int = REFLECTION_DEPTH,
        callback: ProgressCallback | None = None,
    ) -> Canvas:
        """Render the world to a new canvas.

        Args:
            world: The scene to render.
            depth: Recursion budget for reflection and refraction rays.
            callback: Optional function called after each row with
                (rows_done, total_rows).

        Returns:
            A canvas of hsize x vsize pixels.
        """
        logger.debug("Rendering %dx%d at depth %d", self.hsize, self.vsize, depth)
        canvas = Canvas(self.hsize, self.vsize)
        for rows_done, total_rows in self.render_progressive(world, canvas, depth):
            if callback is not None:
                callback(rows_done, total_rows)
        return canvas

    def __repr__(self) -> str:
        return (
            f"Camera({self.hsize}x{self.vsize}, field_of_view={self.field_of_view:.4f}, "
            f"transform={self.transform!r})"
        )
