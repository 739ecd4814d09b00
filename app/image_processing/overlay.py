"""
Draw an analysis result on top of the screenshot.
"""

import io

from PIL import Image, ImageDraw

from app.image_processing.cropping import crop_minimap, to_pixel_box
from app.image_processing.loading import open_image
from app.schemas import AnalysisResult

TEAM_COLORS = {
    "red": (255, 70, 85, 255),
    "blue": (0, 229, 191, 255),
    "green": (34, 197, 94, 255),
    "yellow": (250, 204, 21, 255),
    "unknown": (255, 255, 255, 255),
}

ZONE_OUTLINE = (255, 70, 85, 200)
ZONE_FILL = (255, 70, 85, 30)


def _dot_radius(width: int, height: int) -> int:
    return max(3, min(width, height) // 40)


def _draw_players(img: Image.Image, result: AnalysisResult, origin_x: int, origin_y: int, width: int, height: int) -> None:
    draw = ImageDraw.Draw(img)
    radius = _dot_radius(width, height)
    for player in result.players:
        cx = origin_x + player.x / 100 * width
        cy = origin_y + player.y / 100 * height
        draw.ellipse(
            [cx - radius, cy - radius, cx + radius, cy + radius],
            fill=TEAM_COLORS.get(player.side, TEAM_COLORS["unknown"]),
            outline=(255, 255, 255, 255),
        )


def draw_analysis(image_bytes: bytes, result: AnalysisResult, crop: bool = False) -> bytes:
    """
    Render the minimap zone and player dots and return PNG bytes.

    Args:
        image_bytes: Original screenshot
        result: Normalized analysis result for that screenshot
        crop: Return only the minimap region instead of the full image

    Returns:
        PNG-encoded image bytes
    """
    img = open_image(image_bytes)

    if crop:
        img = crop_minimap(img, result.minimap_bounds)
        _draw_players(img, result, 0, 0, img.width, img.height)
    else:
        left, top, right, bottom = to_pixel_box(result.minimap_bounds, img.width, img.height)

        # Translucent zone highlight
        overlay = Image.new("RGBA", img.size, (255, 255, 255, 0))
        ImageDraw.Draw(overlay).rectangle([left, top, right - 1, bottom - 1], fill=ZONE_FILL, outline=ZONE_OUTLINE, width=2)
        img = Image.alpha_composite(img, overlay)

        _draw_players(img, result, left, top, right - left, bottom - top)

    with io.BytesIO() as out:
        img.convert("RGB").save(out, format="PNG")
        return out.getvalue()
