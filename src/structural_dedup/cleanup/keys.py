"""Canonical keys: when are two entities the same thing?

Every key function is pure and total. It returns a hashable key, or
None when the entity is too incomplete to take part in the cleanup
(no endpoints, a wall with fewer than 2 points, a floor with fewer
than 3, a property without a name). Callers drop None-keyed entities
silently.

Geometry is compared after rounding to ``COORDINATE_DECIMALS`` places.
Line members are orientation-independent: A→B and B→A give the same
key. Polygons are vertex-order independent. Level ids act as
discriminators so identical geometry on different levels never merges.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable
from typing import Any

from structural_dedup.models.elements import (
    Beam,
    Brace,
    Column,
    Floor,
    IsolatedFooting,
    Wall,
)
from structural_dedup.models.geometry import Point2D
from structural_dedup.models.properties import (
    Diaphragm,
    FloorProperties,
    FrameProperties,
    Material,
    WallProperties,
)

Key = Hashable
KeyFunction = Callable[[Any], Hashable | None]


def _discriminator(value: str | None) -> str:
    return value or ""


def normalize_line(start: Point2D, end: Point2D) -> tuple[Point2D, Point2D]:
    """Order a segment's endpoints so both directions compare equal.

    Horizontal-dominant segments (|dx| > |dy|) put the smaller X first,
    all others the smaller Y first. On an exact tie the input order is
    kept. The test uses raw coordinates, rounding happens afterwards.
    """
    dx = abs(end.x - start.x)
    dy = abs(end.y - start.y)
    if dx > dy:
        swap = end.x < start.x
    else:
        swap = end.y < start.y
    return (end, start) if swap else (start, end)


def _line_key(start: Point2D, end: Point2D) -> tuple:
    first, second = normalize_line(start, end)
    return (first.rounded(), second.rounded())


def _outline_key(points: list[Point2D]) -> tuple:
    return tuple(sorted(p.rounded() for p in points))


def beam_key(beam: Beam | None) -> Key | None:
    if beam is None or beam.start_point is None or beam.end_point is None:
        return None
    return (
        *_line_key(beam.start_point, beam.end_point),
        _discriminator(beam.level_id),
    )


def brace_key(brace: Brace | None) -> Key | None:
    if brace is None or brace.start_point is None or brace.end_point is None:
        return None
    return (
        *_line_key(brace.start_point, brace.end_point),
        _discriminator(brace.base_level_id),
        _discriminator(brace.top_level_id),
    )


def column_key(column: Column | None) -> Key | None:
    # Columns are single-point members in plan; only the start point counts.
    if column is None or column.start_point is None:
        return None
    return (
        column.start_point.rounded(),
        _discriminator(column.base_level_id),
        _discriminator(column.top_level_id),
    )


def wall_key(wall: Wall | None) -> Key | None:
    """Straight walls normalise like beams, polygonal walls sort their vertices."""
    if wall is None or not wall.points or len(wall.points) < 2:
        return None
    levels = (_discriminator(wall.base_level_id), _discriminator(wall.top_level_id))
    if len(wall.points) == 2:
        return (*_line_key(wall.points[0], wall.points[1]), *levels)
    return (_outline_key(wall.points), *levels)


def floor_key(floor: Floor | None) -> Key | None:
    if floor is None or not floor.points or len(floor.points) < 3:
        return None
    return (_outline_key(floor.points), _discriminator(floor.level_id))


def isolated_footing_key(footing: IsolatedFooting | None) -> Key | None:
    if footing is None or footing.point is None:
        return None
    return (footing.point.rounded(), _discriminator(footing.level_id))


def name_key(item: Any) -> Key | None:
    """Case-insensitive name key for named properties."""
    name = getattr(item, "name", None) if item is not None else None
    if not name:
        return None
    return name.casefold()


KEY_FUNCTIONS: dict[type, KeyFunction] = {
    Beam: beam_key,
    Column: column_key,
    Wall: wall_key,
    Floor: floor_key,
    Brace: brace_key,
    IsolatedFooting: isolated_footing_key,
    Material: name_key,
    WallProperties: name_key,
    FloorProperties: name_key,
    FrameProperties: name_key,
    Diaphragm: name_key,
}


def canonical_key(entity: Any) -> Key | None:
    """Key for any supported entity, None for unsupported or incomplete ones."""
    if entity is None:
        return None
    key_function = KEY_FUNCTIONS.get(type(entity))
    if key_function is None:
        return None
    return key_function(entity)
