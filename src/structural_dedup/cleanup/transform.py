"""Whole-model rigid transforms: rotate in plan, translate in 3D.

Partial models exported from different tools rarely share an origin or
a plan orientation. Aligning them first lets identical members from
both sources reach the same canonical key, so a following
``remove_duplicates`` can collapse them.

Rotation is counter-clockwise in degrees about a plan point and only
touches X and Y. Translation shifts X, Y and Z; for levels the Z
offset moves the elevation.
"""

from __future__ import annotations

import logging
import math

from structural_dedup.config import TRANSFORM_TOLERANCE
from structural_dedup.models.geometry import Point2D, Point3D
from structural_dedup.models.model import StructuralModel

logger = logging.getLogger(__name__)

# (section, collection, single-point fields)
_POINT_FIELDS: tuple[tuple[str, str, tuple[str, ...]], ...] = (
    ("model_layout", "grids", ("start_point", "end_point")),
    ("elements", "beams", ("start_point", "end_point")),
    ("elements", "columns", ("start_point", "end_point")),
    ("elements", "braces", ("start_point", "end_point")),
    ("elements", "isolated_footings", ("point",)),
)

# (section, collection) holding a ``points`` outline
_OUTLINE_COLLECTIONS: tuple[tuple[str, str], ...] = (
    ("elements", "walls"),
    ("elements", "floors"),
)


def _rotate_point(point, cos_a: float, sin_a: float, center: Point2D):
    dx = point.x - center.x
    dy = point.y - center.y
    x = dx * cos_a - dy * sin_a + center.x
    y = dx * sin_a + dy * cos_a + center.y
    if isinstance(point, Point3D):
        return Point3D(x=x, y=y, z=point.z)
    return Point2D(x=x, y=y)


def _translate_point(point, offset: Point3D):
    if isinstance(point, Point3D):
        return Point3D(x=point.x + offset.x, y=point.y + offset.y, z=point.z + offset.z)
    return Point2D(x=point.x + offset.x, y=point.y + offset.y)


def _items(model: StructuralModel, section_name: str, collection_name: str) -> list:
    section = getattr(model, section_name)
    if section is None:
        return []
    return [item for item in getattr(section, collection_name) or [] if item is not None]


def _map_points(model: StructuralModel, func) -> int:
    """Apply ``func`` to every point in the model. Returns the number of entities moved."""
    moved = 0
    for section_name, collection_name, field_names in _POINT_FIELDS:
        for item in _items(model, section_name, collection_name):
            for field_name in field_names:
                point = getattr(item, field_name)
                if point is not None:
                    setattr(item, field_name, func(point))
            moved += 1
    for section_name, collection_name in _OUTLINE_COLLECTIONS:
        for item in _items(model, section_name, collection_name):
            item.points = [func(p) for p in item.points or []]
            moved += 1
    return moved


def rotate_model(
    model: StructuralModel | None,
    angle_degrees: float,
    center: Point2D | None = None,
) -> StructuralModel | None:
    """Rotate all plan geometry counter-clockwise about ``center`` (default origin).

    Floor span directions turn with the model and stay in [0, 360).
    Level elevations are unaffected. Angles below the transform
    tolerance leave the model untouched.
    """
    if model is None or abs(angle_degrees) < TRANSFORM_TOLERANCE:
        return model
    if center is None:
        center = Point2D(x=0.0, y=0.0)

    angle = math.radians(angle_degrees)
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    moved = _map_points(model, lambda p: _rotate_point(p, cos_a, sin_a, center))

    for floor in _items(model, "elements", "floors"):
        floor.span_direction = (floor.span_direction + angle_degrees) % 360.0

    logger.info(
        "Rotated %d entities by %.6g degrees about (%g, %g)",
        moved, angle_degrees, center.x, center.y,
    )
    return model


def translate_model(
    model: StructuralModel | None,
    offset: Point3D,
) -> StructuralModel | None:
    """Shift all geometry by ``offset``; level elevations move by ``offset.z``.

    An offset below the transform tolerance on every axis leaves the
    model untouched.
    """
    if model is None:
        return model
    if all(abs(v) < TRANSFORM_TOLERANCE for v in (offset.x, offset.y, offset.z)):
        return model

    moved = _map_points(model, lambda p: _translate_point(p, offset))
    for level in _items(model, "model_layout", "levels"):
        level.elevation += offset.z

    logger.info("Translated %d entities by (%g, %g, %g)", moved, offset.x, offset.y, offset.z)
    return model


def transform_model(
    model: StructuralModel | None,
    angle_degrees: float = 0.0,
    rotation_center: Point2D | None = None,
    translation: Point3D | None = None,
) -> StructuralModel | None:
    """Rotate, then translate."""
    if model is None:
        return None
    rotate_model(model, angle_degrees, rotation_center)
    if translation is not None:
        translate_model(model, translation)
    return model
