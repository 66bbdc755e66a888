"""Loads: load definitions, surface loads and load combinations."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from structural_dedup.models.ids import IdPrefix, generate_id


class LoadType(str, Enum):
    """Load pattern types."""

    DEAD = "dead"
    LIVE = "live"
    SNOW = "snow"
    WIND = "wind"
    SEISMIC = "seismic"
    THERMAL = "thermal"
    OTHER = "other"


class LoadDefinition(BaseModel):
    """A load pattern, e.g. 'DL' or 'LL'."""

    id: str = Field(default_factory=lambda: generate_id(IdPrefix.LOAD_DEFINITION))
    name: str = ""
    type: LoadType = LoadType.DEAD


class SurfaceLoad(BaseModel):
    """Area load applied to floors, split into dead and live parts."""

    id: str = Field(default_factory=lambda: generate_id(IdPrefix.SURFACE_LOAD))
    layout_type_id: str | None = None
    dead_load_id: str | None = None
    dead_load_value: float = 0.0
    live_load_id: str | None = None
    live_load_value: float = 0.0


class LoadCombination(BaseModel):
    """An ordered combination of load definitions.

    Order and repeated entries in ``load_definition_ids`` are meaningful.
    """

    id: str = Field(default_factory=lambda: generate_id(IdPrefix.LOAD_COMBINATION))
    name: str = ""
    load_definition_ids: list[str] | None = Field(default_factory=list)
