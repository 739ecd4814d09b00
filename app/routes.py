"""
API routes for Valomap Analyst.
"""

import json
import logging
from typing import Optional

from fastapi import APIRouter, File, Form, HTTPException, UploadFile
from fastapi.responses import FileResponse, Response
from pydantic import ValidationError

from app.analysis import analyze_screenshot, list_providers
from app.config import DEFAULT_PROVIDER, MIN_SELECTION_SIZE, STATIC_DIR
from app.errors import AnalysisError, UnknownProviderError
from app.image_processing.loading import load_screenshot
from app.image_processing.overlay import draw_analysis
from app.schemas import AnalysisResult, MinimapBounds

logger = logging.getLogger(__name__)

router = APIRouter()


def parse_manual_bounds(
    xmin: Optional[int],
    ymin: Optional[int],
    xmax: Optional[int],
    ymax: Optional[int],
) -> Optional[MinimapBounds]:
    """
    Build manual bounds from form fields.

    All four fields must be given together. Selections of
    MIN_SELECTION_SIZE or less on either axis are rejected.
    """
    values = (xmin, ymin, xmax, ymax)
    if all(v is None for v in values):
        return None
    if any(v is None for v in values):
        raise HTTPException(status_code=400, detail="Manual bounds need all of xmin, ymin, xmax, ymax")

    try:
        bounds = MinimapBounds(xmin=xmin, ymin=ymin, xmax=xmax, ymax=ymax)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=f"Invalid manual bounds: {e.errors()[0]['msg']}")

    if bounds.xmax - bounds.xmin <= MIN_SELECTION_SIZE or bounds.ymax - bounds.ymin <= MIN_SELECTION_SIZE:
        raise HTTPException(
            status_code=400,
            detail=f"Minimap selection must be larger than {MIN_SELECTION_SIZE} units on each axis",
        )
    return bounds


@router.get("/")
async def root():
    """Serve the main HTML page"""
    return FileResponse(str(STATIC_DIR / "index.html"))


@router.get("/api/providers")
async def get_providers():
    return {
        "default": DEFAULT_PROVIDER,
        "providers": [p.model_dump(by_alias=True) for p in list_providers()],
    }


@router.post("/api/analyze", response_model=AnalysisResult)
def analyze(
    file: UploadFile = File(...),
    xmin: Optional[int] = Form(None),
    ymin: Optional[int] = Form(None),
    xmax: Optional[int] = Form(None),
    ymax: Optional[int] = Form(None),
    provider: Optional[str] = Form(None),
):
    """
    Analyze an uploaded screenshot.

    Returns the map name, minimap bounds, player positions and summary.
    """
    if file.content_type and not file.content_type.startswith("image/"):
        raise HTTPException(status_code=400, detail="File must be an image")

    manual_bounds = parse_manual_bounds(xmin, ymin, xmax, ymax)

    try:
        image_bytes, mime_type = load_screenshot(file.file.read())
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    try:
        return analyze_screenshot(image_bytes, mime_type, manual_bounds, provider)
    except UnknownProviderError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except AnalysisError as e:
        logger.error(f"Analysis failed: {e}", exc_info=True)
        raise HTTPException(status_code=502, detail=f"Analysis failed: {e}")


@router.post("/api/render")
def render(
    file: UploadFile = File(...),
    result_json: str = Form(...),  # JSON string of an AnalysisResult
    crop: str = Form("false"),
):
    """
    Draw an analysis result onto its screenshot and return a PNG.
    """
    try:
        result = AnalysisResult.model_validate(json.loads(result_json))
    except (json.JSONDecodeError, ValidationError) as e:
        raise HTTPException(status_code=400, detail=f"Invalid analysis result: {e}")

    try:
        png = draw_analysis(file.file.read(), result, crop=crop.lower() == "true")
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return Response(content=png, media_type="image/png")
