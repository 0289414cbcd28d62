"""Image export utilities for rendered canvases.

Supported formats:
    - PPM (plain-text P3)
    - PNG (8-bit RGB via Pillow)

Example:
    >>> from src.whitted.preview.export import save_png
    >>> canvas = camera.render(world)
    >>> save_png(canvas, "output.png")
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from PIL import Image as PILImage

if TYPE_CHECKING:
    from src.whitted.preview.canvas import Canvas

logger = logging.getLogger(__name__)


def save_ppm(canvas: Canvas, filepath: str | Path) -> None:
    """Save the canvas as a plain-text PPM file."""
    Path(filepath).write_text(canvas.to_ppm(), encoding="ascii")
    logger.info("Saved %dx%d PPM to %s", canvas.width, canvas.height, filepath)


def save_png(canvas: Canvas, filepath: str | Path) -> None:
    """Save the canvas as an 8-bit RGB PNG file."""
    pil_image = PILImage.fromarray(canvas.to_uint8())
    pil_image.save(filepath)
    logger.info("Saved %dx%d PNG to %s", canvas.width, canvas.height, filepath)


def save_image(canvas: Canvas, filepath: str | Path) -> None:
    """Save the canvas, choosing the format from the file extension.

    ``.ppm`` writes plain-text PPM; anything else is handed to Pillow.

    Raises:
        ValueError: If the extension is missing.
    """
    suffix = Path(filepath).suffix.lower()
    if not suffix:
        raise ValueError(f"Cannot infer image format from '{filepath}'")
    if suffix == ".ppm":
        save_ppm(canvas, filepath)
    else:
        save_png(canvas, filepath)
