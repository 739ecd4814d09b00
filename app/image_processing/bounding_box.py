"""
Minimap bounds resolution and icon coordinate normalization.

Provider replies describe every box on a 0-1000 scale relative to the full
screenshot. Players are reported as percentages (0-100) of the minimap
rectangle, origin top-left.
"""

import logging
import math
from typing import List, Optional, Sequence, Tuple

from app.errors import DegenerateBoundsError
from app.schemas import (
    AnalysisResult,
    BoundingBox,
    MinimapBounds,
    PlayerPosition,
    RawAnalysisResponse,
    RawDetection,
)
from app.utils.teams import canonical_side

logger = logging.getLogger(__name__)

# Top-left 20% of the screenshot
DEFAULT_MINIMAP_BOUNDS = BoundingBox(xmin=0, ymin=0, xmax=200, ymax=200)


def resolve_minimap_bounds(
    manual_bounds: Optional[MinimapBounds],
    model_bounds: Optional[BoundingBox],
) -> BoundingBox:
    """
    Pick the rectangle treated as the minimap.

    Manual bounds always win over the provider's guess. With neither,
    the default top-left rectangle is used.

    Args:
        manual_bounds: Rectangle drawn by the user, if any
        model_bounds: Rectangle reported by the provider, if any

    Returns:
        The resolved rectangle on the 0-1000 scale
    """
    if manual_bounds is not None:
        return manual_bounds.to_box()
    if model_bounds is not None:
        return model_bounds
    return DEFAULT_MINIMAP_BOUNDS


def contains_point(box: BoundingBox, x: float, y: float) -> bool:
    """Inclusive point-in-rectangle test."""
    return box.xmin <= x <= box.xmax and box.ymin <= y <= box.ymax


def _clamp_percent(value: float) -> float:
    return max(0.0, min(100.0, value))


def relative_position(box: BoundingBox, x: float, y: float) -> Tuple[float, float]:
    """
    Convert a full-image point to clamped percentages of the box.

    Raises:
        DegenerateBoundsError: If the box has no width or height
    """
    check_bounds(box)
    rel_x = (x - box.xmin) / box.width * 100
    rel_y = (y - box.ymin) / box.height * 100
    return _clamp_percent(rel_x), _clamp_percent(rel_y)


def check_bounds(box: BoundingBox) -> None:
    # NaN extents fail every comparison
    if not (math.isfinite(box.width) and math.isfinite(box.height) and box.width > 0 and box.height > 0):
        raise DegenerateBoundsError(
            f"Minimap bounds have no area: xmin={box.xmin}, ymin={box.ymin}, "
            f"xmax={box.xmax}, ymax={box.ymax}"
        )


def normalize_detections(
    map_box: BoundingBox,
    detections: Sequence[RawDetection],
) -> List[PlayerPosition]:
    """
    Turn full-image icon detections into minimap-relative player positions.

    An icon is kept when the center of its bounding box lies inside the
    minimap rectangle (edges included). Icons outside are dropped; providers
    routinely report scoreboard and kill-feed portraits as well.

    Args:
        map_box: Resolved minimap rectangle
        detections: Icons in the order the provider reported them

    Returns:
        Player positions, in detection order

    Raises:
        DegenerateBoundsError: If map_box has no width or height
    """
    check_bounds(map_box)

    players = []
    for detection in detections:
        cx, cy = detection.bounding_box.center
        if not contains_point(map_box, cx, cy):
            logger.debug(f"Dropping {detection.team} icon centered at ({cx}, {cy}) outside minimap")
            continue

        x, y = relative_position(map_box, cx, cy)
        players.append(PlayerPosition(
            team=detection.team,
            side=canonical_side(detection.team),
            agent_guess=detection.agent_guess,
            x=x,
            y=y,
        ))

    return players


def normalize_analysis(
    raw: RawAnalysisResponse,
    manual_bounds: Optional[MinimapBounds] = None,
) -> AnalysisResult:
    """Resolve the minimap rectangle and place every icon inside it."""
    map_box = resolve_minimap_bounds(manual_bounds, raw.minimap_location)
    players = normalize_detections(map_box, raw.detected_icons)

    logger.info(
        f"Normalized {len(players)} of {len(raw.detected_icons)} detections "
        f"on map {raw.map_name!r}"
    )

    return AnalysisResult(
        map_name=raw.map_name,
        minimap_bounds=map_box,
        players=players,
        summary=raw.summary,
    )
