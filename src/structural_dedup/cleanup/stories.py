"""Story slicing: split multi-story walls into one wall per story.

Importers often emit a core wall once, running from the foundation to
the roof. Analysis tools want one wall per story, so a wall whose base
and top levels enclose intermediate levels is replaced by a wall for
every consecutive level pair between them.
"""

from __future__ import annotations

import logging

from structural_dedup.models.elements import Wall
from structural_dedup.models.ids import IdPrefix, generate_id
from structural_dedup.models.layout import Level
from structural_dedup.models.model import StructuralModel

logger = logging.getLogger(__name__)


def split_wall(wall: Wall, sorted_levels: list[Level]) -> list[Wall]:
    """Split one wall at every level between its base and top.

    Returns ``[wall]`` unchanged when its levels don't resolve, when the
    base is not below the top, or when it spans a single story.
    Otherwise returns one new wall per story, each a deep copy of the
    original apart from its id and level ids.
    """
    by_id = {level.id: level for level in sorted_levels}
    base = by_id.get(wall.base_level_id) if wall.base_level_id else None
    top = by_id.get(wall.top_level_id) if wall.top_level_id else None
    if base is None or top is None:
        return [wall]
    if base.elevation >= top.elevation:
        return [wall]

    spanned = [
        level
        for level in sorted_levels
        if base.elevation <= level.elevation <= top.elevation
    ]
    if len(spanned) <= 2:
        return [wall]

    return [
        wall.model_copy(
            update={
                "id": generate_id(IdPrefix.WALL),
                "base_level_id": lower.id,
                "top_level_id": upper.id,
            },
            deep=True,
        )
        for lower, upper in zip(spanned, spanned[1:])
    ]


def slice_walls_by_story(model: StructuralModel | None) -> StructuralModel | None:
    """Replace every multi-story wall with per-story walls, in place.

    Slices take the position of the wall they replace. No duplicate
    removal is done afterwards; run ``remove_duplicates`` if slicing
    may have produced walls that already existed.
    """
    if model is None or model.elements is None or model.model_layout is None:
        return model

    sorted_levels = model.sorted_levels()
    if len(sorted_levels) < 2:
        return model

    walls: list[Wall] = []
    sliced = 0
    for wall in model.elements.walls:
        pieces = split_wall(wall, sorted_levels)
        if len(pieces) > 1:
            sliced += 1
        walls.extend(pieces)
    model.elements.walls = walls

    logger.info("Sliced %d multi-story walls into %d walls total", sliced, len(walls))
    return model
