"""Reference repair after collapsing duplicates.

Once duplicates are retired, every foreign key that pointed at a
retired id must point at its survivor instead. The fields that carry
references are listed explicitly in ``REFERENCE_FIELDS``; nothing is
discovered at runtime.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from structural_dedup.models.model import StructuralModel

logger = logging.getLogger(__name__)

# (section, collection, scalar reference fields)
REFERENCE_FIELDS: tuple[tuple[str, str, tuple[str, ...]], ...] = (
    ("elements", "beams", ("level_id", "frame_properties_id")),
    ("elements", "columns", ("base_level_id", "top_level_id", "frame_properties_id")),
    ("elements", "walls", ("base_level_id", "top_level_id", "properties_id")),
    (
        "elements",
        "floors",
        ("level_id", "floor_properties_id", "diaphragm_id", "surface_load_id"),
    ),
    (
        "elements",
        "braces",
        ("base_level_id", "top_level_id", "frame_properties_id", "material_id"),
    ),
    ("elements", "isolated_footings", ("level_id", "material_id")),
    ("properties", "wall_properties", ("material_id",)),
    ("properties", "floor_properties", ("material_id",)),
    ("properties", "frame_properties", ("material_id",)),
    ("model_layout", "levels", ("floor_type_id",)),
    ("loads", "surface_loads", ("dead_load_id", "live_load_id", "layout_type_id")),
)

# (section, collection, list-of-ids field)
REFERENCE_LIST_FIELDS: tuple[tuple[str, str, str], ...] = (
    ("loads", "load_combinations", "load_definition_ids"),
)


def combine_mappings(mappings: Iterable[Mapping[str, str]]) -> dict[str, str]:
    """Merge per-category id mappings into one.

    Later mappings win on a key collision (ids are category-scoped, so
    in practice this is a disjoint union). Chains such as ``a → b`` and
    ``b → c`` are resolved to their final target ``a → c``; a cycle
    stops at the last id before it repeats.
    """
    combined: dict[str, str] = {}
    for mapping in mappings:
        combined.update(mapping)

    resolved: dict[str, str] = {}
    for retired, target in combined.items():
        seen = {retired}
        while target in combined:
            following = combined[target]
            if following in seen or following == target:
                break
            seen.add(target)
            target = following
        if target != retired:
            resolved[retired] = target
    return resolved


def update_id(value: str | None, id_mapping: Mapping[str, str]) -> str | None:
    """Return the mapped id, or the value unchanged when unmapped or empty."""
    if not value:
        return value
    return id_mapping.get(value, value)


def rewrite_references(
    model: StructuralModel | None,
    id_mapping: Mapping[str, str],
) -> StructuralModel | None:
    """Rewrite every known foreign key in the model through ``id_mapping``.

    Mutates the model in place and returns it. Unknown ids and empty
    fields are left as they are; the rewrite never checks that the
    target exists.
    """
    if model is None or not id_mapping:
        return model

    rewritten = 0
    for section_name, collection_name, field_names in REFERENCE_FIELDS:
        for item in _collection(model, section_name, collection_name):
            for field_name in field_names:
                old = getattr(item, field_name)
                new = update_id(old, id_mapping)
                if new != old:
                    setattr(item, field_name, new)
                    rewritten += 1

    for section_name, collection_name, field_name in REFERENCE_LIST_FIELDS:
        for item in _collection(model, section_name, collection_name):
            ids = getattr(item, field_name)
            if not ids:
                continue
            new_ids = [update_id(i, id_mapping) for i in ids]
            rewritten += sum(1 for old, new in zip(ids, new_ids) if old != new)
            setattr(item, field_name, new_ids)

    logger.debug("Rewrote %d references", rewritten)
    return model


def _collection(model: StructuralModel, section_name: str, collection_name: str) -> list:
    section = getattr(model, section_name)
    if section is None:
        return []
    return [item for item in getattr(section, collection_name) or [] if item is not None]
