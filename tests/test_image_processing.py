import io

import pytest
from PIL import Image

from app.image_processing.cropping import crop_minimap, to_pixel_box
from app.image_processing.loading import encode_image_to_data_url, load_screenshot
from app.image_processing.overlay import TEAM_COLORS, draw_analysis
from app.schemas import AnalysisResult, BoundingBox, PlayerPosition

from conftest import make_image_bytes


def result_with(players, bounds=None):
    return AnalysisResult(
        map_name="Haven",
        minimap_bounds=bounds or BoundingBox(xmin=0, ymin=0, xmax=500, ymax=500),
        players=players,
        summary="s",
    )


def test_png_passes_through():
    data = make_image_bytes()
    assert load_screenshot(data) == (data, "image/png")


def test_jpeg_keeps_mime_type():
    data = make_image_bytes(fmt="JPEG")
    assert load_screenshot(data) == (data, "image/jpeg")


def test_other_formats_reencoded_as_png():
    data = make_image_bytes(fmt="BMP")
    image_bytes, mime_type = load_screenshot(data)
    assert mime_type == "image/png"
    assert Image.open(io.BytesIO(image_bytes)).format == "PNG"


@pytest.mark.parametrize("data", [b"", b"definitely not an image"])
def test_unreadable_upload(data):
    with pytest.raises(ValueError):
        load_screenshot(data)


def test_data_url():
    assert encode_image_to_data_url(b"abc", "image/webp") == "data:image/webp;base64,YWJj"


def test_to_pixel_box_scales_to_image():
    bounds = BoundingBox(xmin=0, ymin=0, xmax=200, ymax=200)
    assert to_pixel_box(bounds, 1920, 1080) == (0, 0, 384, 216)


def test_to_pixel_box_clamps():
    bounds = BoundingBox(xmin=-50, ymin=900, xmax=1200, ymax=1100)
    assert to_pixel_box(bounds, 100, 100) == (0, 90, 100, 100)


def test_crop_minimap_size():
    img = Image.new("RGB", (1000, 500))
    cropped = crop_minimap(img, BoundingBox(xmin=100, ymin=100, xmax=300, ymax=500))
    assert cropped.size == (200, 200)


def test_draw_analysis_full_image():
    result = result_with([PlayerPosition(team="Red", side="red", x=50, y=50)])
    png = draw_analysis(make_image_bytes(200, 100), result)
    img = Image.open(io.BytesIO(png)).convert("RGB")

    assert img.size == (200, 100)
    # Minimap spans pixels (0, 0)-(100, 50); the player sits at its center
    assert img.getpixel((50, 25)) == TEAM_COLORS["red"][:3]
    # Outside the minimap is untouched
    assert img.getpixel((180, 90)) == (0, 0, 0)


def test_draw_analysis_cropped():
    result = result_with([PlayerPosition(team="Ally", side="blue", x=50, y=50)])
    png = draw_analysis(make_image_bytes(200, 100), result, crop=True)
    img = Image.open(io.BytesIO(png)).convert("RGB")

    assert img.size == (100, 50)
    assert img.getpixel((50, 25)) == TEAM_COLORS["blue"][:3]


def test_draw_analysis_rejects_bad_image():
    with pytest.raises(ValueError):
        draw_analysis(b"nope", result_with([]))
