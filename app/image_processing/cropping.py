"""
Image cropping utilities.
"""

from typing import Tuple

from PIL import Image

from app.config import COORDINATE_SCALE
from app.schemas import BoundingBox


def to_pixel_box(bounds: BoundingBox, image_width: int, image_height: int) -> Tuple[int, int, int, int]:
    """
    Convert a 0-1000 scale rectangle to pixel coordinates.

    Args:
        bounds: Rectangle on the 0-1000 full-image scale
        image_width: Image width in pixels
        image_height: Image height in pixels

    Returns:
        (left, top, right, bottom) in pixels, clamped to the image
    """
    left = round(bounds.xmin * image_width / COORDINATE_SCALE)
    top = round(bounds.ymin * image_height / COORDINATE_SCALE)
    right = round(bounds.xmax * image_width / COORDINATE_SCALE)
    bottom = round(bounds.ymax * image_height / COORDINATE_SCALE)

    # Clamp to image bounds
    left = max(0, min(left, image_width - 1))
    top = max(0, min(top, image_height - 1))
    right = max(left + 1, min(right, image_width))
    bottom = max(top + 1, min(bottom, image_height))

    return left, top, right, bottom


def crop_minimap(img: Image.Image, bounds: BoundingBox) -> Image.Image:
    """Crop the minimap region out of a full screenshot."""
    return img.crop(to_pixel_box(bounds, img.width, img.height))
