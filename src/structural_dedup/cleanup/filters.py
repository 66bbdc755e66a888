"""Model filters: drop elements by predicate or material, prune unused properties.

Used on imported models before handing them to an exporter, e.g. to
drop all wood members from a model going to a concrete-only tool and
then discard the sections and materials nothing references any more.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Collection
from typing import Any

from structural_dedup.models.model import StructuralModel
from structural_dedup.models.properties import MaterialType

logger = logging.getLogger(__name__)

ELEMENT_CATEGORIES = (
    "beams",
    "columns",
    "walls",
    "floors",
    "braces",
    "isolated_footings",
)


def filter_elements(
    model: StructuralModel | None,
    category: str,
    predicate: Callable[[Any], bool],
) -> StructuralModel | None:
    """Keep only the elements of one category for which ``predicate`` is true.

    Raises:
        ValueError: if ``category`` is not an element collection name.
    """
    if category not in ELEMENT_CATEGORIES:
        raise ValueError(
            f"Unknown element category '{category}'. Available: {list(ELEMENT_CATEGORIES)}"
        )
    if model is None or model.elements is None:
        return model
    items = getattr(model.elements, category)
    setattr(model.elements, category, [e for e in items if predicate(e)])
    return model


def filter_elements_by_material_type(
    model: StructuralModel | None,
    material_types: Collection[MaterialType],
) -> StructuralModel | None:
    """Remove elements whose section resolves to one of ``material_types``.

    Frame members resolve through their frame properties, walls through
    wall properties and floors through floor properties. An element
    whose chain doesn't resolve (no section, unknown section, section
    without material) is kept.
    """
    if model is None or model.elements is None or model.properties is None:
        return model
    if not material_types:
        return model

    removed_types = set(material_types)
    material_type_by_id = {m.id: m.type for m in model.properties.materials}
    frame_materials = {p.id: p.material_id for p in model.properties.frame_properties}
    wall_materials = {p.id: p.material_id for p in model.properties.wall_properties}
    floor_materials = {p.id: p.material_id for p in model.properties.floor_properties}

    def should_remove(property_id: str | None, property_materials: dict[str, str | None]) -> bool:
        if not property_id or property_id not in property_materials:
            return False
        material_id = property_materials[property_id]
        if not material_id or material_id not in material_type_by_id:
            return False
        return material_type_by_id[material_id] in removed_types

    elements = model.elements
    before = sum(len(getattr(elements, c)) for c in ELEMENT_CATEGORIES)
    elements.beams = [b for b in elements.beams if not should_remove(b.frame_properties_id, frame_materials)]
    elements.columns = [c for c in elements.columns if not should_remove(c.frame_properties_id, frame_materials)]
    elements.braces = [b for b in elements.braces if not should_remove(b.frame_properties_id, frame_materials)]
    elements.walls = [w for w in elements.walls if not should_remove(w.properties_id, wall_materials)]
    elements.floors = [f for f in elements.floors if not should_remove(f.floor_properties_id, floor_materials)]
    after = sum(len(getattr(elements, c)) for c in ELEMENT_CATEGORIES)

    logger.info(
        "Removed %d elements with material types %s",
        before - after,
        sorted(t.value for t in removed_types),
    )
    return model


def remove_unused_properties(model: StructuralModel | None) -> StructuralModel | None:
    """Drop sections no element uses, then materials no surviving section uses.

    Diaphragms are never pruned. Materials referenced directly by
    braces or footings are kept so no reference is left dangling.
    """
    if model is None or model.elements is None or model.properties is None:
        return model

    elements = model.elements
    props = model.properties

    used_frame = {
        e.frame_properties_id
        for e in [*elements.beams, *elements.columns, *elements.braces]
        if e.frame_properties_id
    }
    used_wall = {w.properties_id for w in elements.walls if w.properties_id}
    used_floor = {f.floor_properties_id for f in elements.floors if f.floor_properties_id}

    props.frame_properties = [p for p in props.frame_properties if p.id in used_frame]
    props.wall_properties = [p for p in props.wall_properties if p.id in used_wall]
    props.floor_properties = [p for p in props.floor_properties if p.id in used_floor]

    used_materials = {
        p.material_id
        for p in [*props.frame_properties, *props.wall_properties, *props.floor_properties]
        if p.material_id
    }
    used_materials |= {
        e.material_id
        for e in [*elements.braces, *elements.isolated_footings]
        if e.material_id
    }
    before = len(props.materials)
    props.materials = [m for m in props.materials if m.id in used_materials]

    logger.debug("Pruned %d unused materials", before - len(props.materials))
    return model
