"""
Pydantic models shared by the normalizer, the providers and the API.

Field names are snake_case in Python and camelCase on the wire.
"""

from typing import List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

TeamSide = Literal["red", "blue", "green", "yellow", "unknown"]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BoundingBox(CamelModel):
    """Axis-aligned rectangle on the 0-1000 full-image scale."""

    model_config = ConfigDict(allow_inf_nan=False)

    xmin: float
    ymin: float
    xmax: float
    ymax: float

    @property
    def width(self) -> float:
        return self.xmax - self.xmin

    @property
    def height(self) -> float:
        return self.ymax - self.ymin

    @property
    def center(self) -> Tuple[float, float]:
        return (self.xmin + self.xmax) / 2, (self.ymin + self.ymax) / 2


class MinimapBounds(CamelModel):
    """User-drawn minimap rectangle (integers, 0-1000 scale)."""

    xmin: int = Field(ge=0, le=1000)
    ymin: int = Field(ge=0, le=1000)
    xmax: int = Field(ge=0, le=1000)
    ymax: int = Field(ge=0, le=1000)

    @model_validator(mode="after")
    def check_extent(self) -> "MinimapBounds":
        if self.xmax <= self.xmin or self.ymax <= self.ymin:
            raise ValueError("xmax must exceed xmin and ymax must exceed ymin")
        return self

    def to_box(self) -> BoundingBox:
        return BoundingBox(xmin=self.xmin, ymin=self.ymin, xmax=self.xmax, ymax=self.ymax)


class RawDetection(CamelModel):
    team: str
    agent_guess: Optional[str] = None
    bounding_box: BoundingBox


class RawAnalysisResponse(CamelModel):
    """Provider reply, before normalization."""

    map_name: str
    minimap_location: Optional[BoundingBox] = None
    detected_icons: List[RawDetection]
    summary: str


class PlayerPosition(CamelModel):
    team: str
    side: TeamSide = "unknown"
    agent_guess: Optional[str] = None
    x: float = Field(ge=0, le=100)
    y: float = Field(ge=0, le=100)


class AnalysisResult(CamelModel):
    map_name: str
    minimap_bounds: BoundingBox
    players: List[PlayerPosition]
    summary: str


class ProviderInfo(CamelModel):
    name: str
    model: str
    configured: bool
