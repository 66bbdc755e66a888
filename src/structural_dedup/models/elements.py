"""Structural elements: beams, columns, walls, floors, braces, footings.

Element geometry is deliberately not validated here. Imports and
parametric exports routinely produce half-built members (a beam with
no end point, a wall with one vertex); those must load so the cleanup
pass can drop them instead of the whole model failing to parse.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from structural_dedup.models.geometry import Point2D, Point3D, polygon_area
from structural_dedup.models.ids import IdPrefix, generate_id


class Beam(BaseModel):
    """A horizontal frame member on a single level."""

    id: str = Field(default_factory=lambda: generate_id(IdPrefix.BEAM))
    start_point: Point2D | None = None
    end_point: Point2D | None = None
    level_id: str | None = None
    frame_properties_id: str | None = None
    is_lateral: bool = False
    is_joist: bool = False

    @property
    def length(self) -> float:
        """Plan length, 0 when an endpoint is missing."""
        if self.start_point is None or self.end_point is None:
            return 0.0
        return self.start_point.distance_to(self.end_point)


class Column(BaseModel):
    """A vertical frame member between two levels, located by its plan point."""

    id: str = Field(default_factory=lambda: generate_id(IdPrefix.COLUMN))
    start_point: Point2D | None = None
    end_point: Point2D | None = None
    base_level_id: str | None = None
    top_level_id: str | None = None
    frame_properties_id: str | None = None
    is_lateral: bool = False


class Wall(BaseModel):
    """A wall defined by a plan polyline between a base and a top level.

    Two points describe a straight wall; more describe a polygonal
    (e.g. core) wall.
    """

    id: str = Field(default_factory=lambda: generate_id(IdPrefix.WALL))
    points: list[Point2D] = Field(default_factory=list)
    base_level_id: str | None = None
    top_level_id: str | None = None
    properties_id: str | None = None
    pier_id: str | None = Field(default=None, description="Pier label for lateral design")
    spandrel_id: str | None = Field(default=None, description="Spandrel label for lateral design")
    is_lateral: bool = False


class Floor(BaseModel):
    """A floor plate defined by a plan outline on a single level."""

    id: str = Field(default_factory=lambda: generate_id(IdPrefix.FLOOR))
    points: list[Point2D] = Field(default_factory=list)
    level_id: str | None = None
    floor_properties_id: str | None = None
    diaphragm_id: str | None = None
    surface_load_id: str | None = None
    span_direction: float = Field(default=0.0, description="Span direction in degrees")

    @property
    def area(self) -> float:
        """Outline area (0 for degenerate outlines)."""
        return polygon_area(self.points)


class Brace(BaseModel):
    """A diagonal frame member between a base and a top level."""

    id: str = Field(default_factory=lambda: generate_id(IdPrefix.BRACE))
    start_point: Point2D | None = None
    end_point: Point2D | None = None
    base_level_id: str | None = None
    top_level_id: str | None = None
    frame_properties_id: str | None = None
    material_id: str | None = None


class IsolatedFooting(BaseModel):
    """A spread footing under a single point."""

    id: str = Field(default_factory=lambda: generate_id(IdPrefix.ISOLATED_FOOTING))
    point: Point3D | None = None
    level_id: str | None = None
    material_id: str | None = None
    width: float = Field(default=48.0, ge=0)
    length: float = Field(default=48.0, ge=0)
    thickness: float = Field(default=12.0, ge=0)
