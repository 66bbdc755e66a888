"""Model layout: levels, floor types and grids."""

from __future__ import annotations

from pydantic import BaseModel, Field

from structural_dedup.models.geometry import Point2D
from structural_dedup.models.ids import IdPrefix, generate_id


class FloorType(BaseModel):
    """A named floor layout shared by several levels."""

    id: str = Field(default_factory=lambda: generate_id(IdPrefix.FLOOR_TYPE))
    name: str = ""


class Level(BaseModel):
    """A story level. Elevation is absolute."""

    id: str = Field(default_factory=lambda: generate_id(IdPrefix.LEVEL))
    name: str = ""
    floor_type_id: str | None = None
    elevation: float = 0.0


class Grid(BaseModel):
    """A named grid line."""

    id: str = Field(default_factory=lambda: generate_id(IdPrefix.GRID))
    name: str = ""
    start_point: Point2D | None = None
    end_point: Point2D | None = None
