"""Structural model data classes."""

from structural_dedup.models.ids import IdPrefix, generate_id
from structural_dedup.models.geometry import Point2D, Point3D
from structural_dedup.models.elements import (
    Beam,
    Brace,
    Column,
    Floor,
    IsolatedFooting,
    Wall,
)
from structural_dedup.models.properties import (
    Diaphragm,
    DiaphragmType,
    FloorProperties,
    FrameMaterialType,
    FrameProperties,
    Material,
    MaterialType,
    WallProperties,
)
from structural_dedup.models.layout import FloorType, Grid, Level
from structural_dedup.models.loads import (
    LoadCombination,
    LoadDefinition,
    LoadType,
    SurfaceLoad,
)
from structural_dedup.models.model import (
    ElementContainer,
    LoadContainer,
    ModelLayoutContainer,
    PropertiesContainer,
    StructuralModel,
)

__all__ = [
    "IdPrefix",
    "generate_id",
    "Point2D",
    "Point3D",
    "Beam",
    "Brace",
    "Column",
    "Floor",
    "IsolatedFooting",
    "Wall",
    "Diaphragm",
    "DiaphragmType",
    "FloorProperties",
    "FrameMaterialType",
    "FrameProperties",
    "Material",
    "MaterialType",
    "WallProperties",
    "FloorType",
    "Grid",
    "Level",
    "LoadCombination",
    "LoadDefinition",
    "LoadType",
    "SurfaceLoad",
    "ElementContainer",
    "LoadContainer",
    "ModelLayoutContainer",
    "PropertiesContainer",
    "StructuralModel",
]
