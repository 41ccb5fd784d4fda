"""Convert images to half-block canvases.

Each canvas cell covers two vertically stacked pixels: the cell is an
upper half block whose fg is the top pixel and whose bg is the bottom
pixel. Transparent pixels become transparent halves, which the renderers
resolve to a flipped half block or an empty cell.

Example:
    from kaku.import_image import image_to_canvas

    canvas = image_to_canvas("sprite.png", width=32)
"""

import logging
from pathlib import Path
from typing import Union

from PIL import Image, ImageEnhance, ImageFilter

from kaku.config import DEFAULT_WIDTH, MAX_DIMENSION, MIN_DIMENSION
from kaku.core.canvas import Canvas, clamp_dimension
from kaku.core.cell import DEFAULT_CELL, Cell
from kaku.core.color import Rgb
from kaku.core.constants import UPPER_HALF

logger = logging.getLogger(__name__)


def _fit(image_width: int, image_height: int, width: int) -> tuple[int, int]:
    """Target size in pixels: ``width`` columns, two pixel rows per cell."""
    width = clamp_dimension(width)
    aspect_ratio = image_height / image_width
    pixel_height = max(1, round(width * aspect_ratio))
    # Too tall for the canvas: shrink both sides to keep the aspect ratio
    if pixel_height > 2 * MAX_DIMENSION:
        width = max(MIN_DIMENSION, int(2 * MAX_DIMENSION / aspect_ratio))
        pixel_height = min(2 * MAX_DIMENSION, max(1, round(width * aspect_ratio)))
    return width, pixel_height


def image_to_canvas(
    input_path: Union[str, Path],
    width: int = DEFAULT_WIDTH,
    *,
    alpha_threshold: int = 128,
    sharpen: bool = False,
    sharpen_amount: int = 200,
    color_boost: float = 1.0,
    contrast_boost: float = 1.0,
) -> Canvas:
    """
    Rasterize an image into a Canvas of upper half blocks.

    Args:
        input_path: Path to input PNG/JPG/GIF image
        width: Target width in cells (clamped to the canvas limits)
        alpha_threshold: Alpha values below this are treated as transparent
        sharpen: Apply unsharp mask to restore crispness after downscale
        sharpen_amount: Sharpening intensity as percentage
        color_boost: Saturation multiplier
        contrast_boost: Contrast multiplier

    Returns:
        Canvas holding the image; rows past the image are default cells

    Raises:
        OSError: If the image cannot be opened
    """
    input_path = Path(input_path)
    img = Image.open(input_path).convert("RGBA")

    target_width, pixel_height = _fit(img.width, img.height, width)
    img = img.resize((target_width, pixel_height), Image.Resampling.LANCZOS)

    if sharpen or color_boost != 1.0 or contrast_boost != 1.0:
        # Enhancers work on RGB; carry alpha across unchanged
        alpha = img.getchannel("A")
        rgb = img.convert("RGB")
        if sharpen:
            rgb = rgb.filter(ImageFilter.UnsharpMask(radius=1.0, percent=sharpen_amount, threshold=5))
        if color_boost != 1.0:
            rgb = ImageEnhance.Color(rgb).enhance(color_boost)
        if contrast_boost != 1.0:
            rgb = ImageEnhance.Contrast(rgb).enhance(contrast_boost)
        img = rgb.convert("RGBA")
        img.putalpha(alpha)

    pixels = img.load()

    def pixel(x: int, y: int) -> Rgb | None:
        if y >= img.height:
            return None
        r, g, b, a = pixels[x, y]
        return (r, g, b) if a >= alpha_threshold else None

    canvas = Canvas(target_width, (pixel_height + 1) // 2)
    for cell_y in range((pixel_height + 1) // 2):
        for x in range(target_width):
            top = pixel(x, cell_y * 2)
            bottom = pixel(x, cell_y * 2 + 1)
            if top is None and bottom is None:
                cell = DEFAULT_CELL
            else:
                cell = Cell(UPPER_HALF, top, bottom)
            canvas.set(x, cell_y, cell)

    logger.info(
        "Imported %s (%dx%d) into %dx%d canvas",
        input_path, img.width, img.height, canvas.width, canvas.height,
    )
    return canvas
