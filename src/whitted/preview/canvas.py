"""Taichi-backed pixel canvas.

Pixels are stored as floating-point RGB in a Taichi vector field indexed
``[x, y]`` with y growing downward, matching the camera's pixel grid.
Colors are unbounded while rendering; they are clamped to [0, 1] and
scaled to [0, 255] only when the canvas is quantized for output, which runs
as a parallel Taichi kernel.

Taichi must be initialized before a Canvas is created:

    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from src.whitted.preview.canvas import Canvas
    >>> canvas = Canvas(10, 20)
    >>> canvas.write_pixel(2, 3, color(1, 0, 0))
    >>> text = canvas.to_ppm()
"""

import numpy as np
import numpy.typing as npt
import taichi as ti

from src.whitted.core.tuples import BLACK, Color

# Maximum characters per line of PPM pixel data
PPM_LINE_LENGTH = 70


@ti.kernel
def _fill(pixels: ti.template(), r: ti.f32, g: ti.f32, b: ti.f32):
    for i, j in pixels:
        pixels[i, j] = ti.Vector([r, g, b])


@ti.kernel
def _quantize(pixels: ti.template(), out: ti.template()):
    """Clamp to [0, 1] and scale to integer [0, 255], rounding half up."""
    for i, j in pixels:
        c = ti.math.clamp(pixels[i, j], 0.0, 1.0)
        out[i, j] = ti.cast(ti.floor(c * 255.0 + 0.5), ti.i32)


class Canvas:
    """A width x height grid of RGB colors.

    Attributes:
        width: Canvas width in pixels.
        height: Canvas height in pixels.
    """

    def __init__(self, width: int, height: int, fill: Color = BLACK) -> None:
        """Allocate the canvas and fill every pixel with one color.

        Raises:
            ValueError: If either dimension is not positive.
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas dimensions must be positive, got {width}x{height}")

        self._width = width
        self._height = height
        self._pixels = ti.Vector.field(3, dtype=ti.f32, shape=(width, height))
        self._quantized = ti.Vector.field(3, dtype=ti.i32, shape=(width, height))
        _fill(self._pixels, fill.red, fill.green, fill.blue)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(
                f"Pixel ({x}, {y}) is outside the {self._width}x{self._height} canvas"
            )

    def write_pixel(self, x: int, y: int, c: Color) -> None:
        """Set the color of one pixel.

        Raises:
            IndexError: If (x, y) lies outside the canvas.
        """
        self._check_bounds(x, y)
        self._pixels[x, y] = [c.red, c.green, c.blue]

    def pixel_at(self, x: int, y: int) -> Color:
        """Read the color of one pixel.

        Raises:
            IndexError: If (x, y) lies outside the canvas.
        """
        self._check_bounds(x, y)
        v = self._pixels[x, y]
        return Color(float(v[0]), float(v[1]), float(v[2]))

    def to_numpy(self) -> npt.NDArray[np.float32]:
        """Return the raw float colors as an (H, W, 3) array, row 0 at the top."""
        return np.ascontiguousarray(self._pixels.to_numpy().transpose(1, 0, 2))

    def to_uint8(self) -> npt.NDArray[np.uint8]:
        """Return the quantized colors as an (H, W, 3) uint8 array."""
        _quantize(self._pixels, self._quantized)
        image = self._quantized.to_numpy().transpose(1, 0, 2)
        return np.ascontiguousarray(image.astype(np.uint8))

    def to_ppm(self) -> str:
        """Render the canvas as plain-text PPM (P3).

        Each canvas row starts a new line; long rows are wrapped so that no
        line exceeds 70 characters. The text ends with a newline.
        """
        lines = ["P3", f"{self._width} {self._height}", "255"]

        for row in self.to_uint8():
            line = ""
            for token in (str(int(v)) for v in row.reshape(-1)):
                if not line:
                    line = token
                elif len(line) + 1 + len(token) > PPM_LINE_LENGTH:
                    lines.append(line)
                    line = token
                else:
                    line = f"{line} {token}"
            lines.append(line)

        return "\n".join(lines) + "\n"

    def __repr__(self) -> str:
        return f"Canvas({self._width}x{self._height})"
