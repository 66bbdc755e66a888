"""Named properties: materials and wall/frame/floor/diaphragm definitions.

Properties are identified by their human-assigned name. Two entries
named "Concrete" and "CONCRETE" describe the same thing, whatever
their numeric content.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from structural_dedup.models.ids import IdPrefix, generate_id


class MaterialType(str, Enum):
    """Material families."""

    CONCRETE = "concrete"
    STEEL = "steel"
    WOOD = "wood"
    MASONRY = "masonry"
    COLD_FORM = "coldform"
    OTHER = "other"


class FrameMaterialType(str, Enum):
    """Frame section families."""

    STEEL = "steel"
    CONCRETE = "concrete"


class DiaphragmType(str, Enum):
    """Diaphragm behaviour in lateral analysis."""

    RIGID = "rigid"
    SEMI_RIGID = "semi-rigid"
    FLEXIBLE = "flexible"


class Material(BaseModel):
    """A structural material, e.g. '4000 psi concrete'."""

    id: str = Field(default_factory=lambda: generate_id(IdPrefix.MATERIAL))
    name: str | None = None
    type: MaterialType = MaterialType.CONCRETE
    fc: float | None = Field(default=None, description="Concrete compressive strength")
    fy: float | None = Field(default=None, description="Steel yield strength")
    elastic_modulus: float | None = None


class WallProperties(BaseModel):
    """Wall section: thickness and material."""

    id: str = Field(default_factory=lambda: generate_id(IdPrefix.WALL_PROPERTIES))
    name: str | None = None
    material_id: str | None = None
    thickness: float = Field(default=0.0, ge=0)


class FrameProperties(BaseModel):
    """Frame section used by beams, columns and braces."""

    id: str = Field(default_factory=lambda: generate_id(IdPrefix.FRAME_PROPERTIES))
    name: str | None = None
    material_id: str | None = None
    type: FrameMaterialType = FrameMaterialType.STEEL
    section_name: str = ""


class FloorProperties(BaseModel):
    """Floor section: slab or deck definition."""

    id: str = Field(default_factory=lambda: generate_id(IdPrefix.FLOOR_PROPERTIES))
    name: str | None = None
    type: str = "slab"
    thickness: float = Field(default=0.0, ge=0)
    material_id: str | None = None


class Diaphragm(BaseModel):
    """Diaphragm definition assigned to floors."""

    id: str = Field(default_factory=lambda: generate_id(IdPrefix.DIAPHRAGM))
    name: str | None = None
    type: DiaphragmType = DiaphragmType.RIGID
    stiffness_factor: float = 1.0
    mass_factor: float = 1.0
