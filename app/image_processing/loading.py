"""
Screenshot decoding and encoding helpers.
"""

import base64
import io
from typing import Tuple

from PIL import Image, UnidentifiedImageError

# Formats every provider accepts as-is
PASSTHROUGH_FORMATS = {
    "PNG": "image/png",
    "JPEG": "image/jpeg",
    "WEBP": "image/webp",
}


def load_screenshot(data: bytes) -> Tuple[bytes, str]:
    """
    Check that uploaded bytes are an image and pick the bytes to send.

    PNG, JPEG and WEBP pass through untouched; anything else Pillow can
    read is re-encoded as PNG.

    Args:
        data: Raw uploaded file contents

    Returns:
        (image_bytes, mime_type)

    Raises:
        ValueError: If the data is not a readable image
    """
    if not data:
        raise ValueError("Empty image upload")

    try:
        img = Image.open(io.BytesIO(data))
        img.load()
    except (UnidentifiedImageError, OSError) as e:
        raise ValueError(f"Could not read image: {e}")

    mime_type = PASSTHROUGH_FORMATS.get(img.format or "")
    if mime_type:
        return data, mime_type

    buffer = io.BytesIO()
    img.convert("RGBA").save(buffer, format="PNG")
    return buffer.getvalue(), "image/png"


def open_image(data: bytes) -> Image.Image:
    """Decode image bytes into an RGBA Pillow image."""
    try:
        img = Image.open(io.BytesIO(data))
        return img.convert("RGBA")
    except (UnidentifiedImageError, OSError) as e:
        raise ValueError(f"Could not read image: {e}")


def encode_image_to_data_url(image_bytes: bytes, mime: str = "image/png") -> str:
    """
    Return a base64 data URL, e.g. data:image/png;base64,AAA...
    """
    b64 = base64.b64encode(image_bytes).decode("utf-8")
    return f"data:{mime};base64,{b64}"
