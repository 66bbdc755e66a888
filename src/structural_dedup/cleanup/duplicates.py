"""Whole-model duplicate removal.

``remove_duplicates`` collapses every property and element category,
combines the retired → retained id mappings and rewrites references
once over the whole model. Between the collapse stages and the rewrite
the model's references are temporarily inconsistent, so callers must
treat a call as one atomic step and never observe or persist the model
mid-way (run it on an owned copy if others may be reading it).
"""

from __future__ import annotations

import logging

from structural_dedup.cleanup.collapse import collapse
from structural_dedup.cleanup.keys import (
    KeyFunction,
    beam_key,
    brace_key,
    column_key,
    floor_key,
    isolated_footing_key,
    name_key,
    wall_key,
)
from structural_dedup.cleanup.references import combine_mappings, rewrite_references
from structural_dedup.models.model import StructuralModel

logger = logging.getLogger(__name__)

# Collapse order. Properties first by convention; no property key
# depends on another category's id.
PROPERTY_CATEGORIES: tuple[tuple[str, KeyFunction], ...] = (
    ("materials", name_key),
    ("wall_properties", name_key),
    ("floor_properties", name_key),
    ("frame_properties", name_key),
    ("diaphragms", name_key),
)

ELEMENT_CATEGORIES: tuple[tuple[str, KeyFunction], ...] = (
    ("beams", beam_key),
    ("columns", column_key),
    ("walls", wall_key),
    ("floors", floor_key),
    ("braces", brace_key),
    ("isolated_footings", isolated_footing_key),
)


def _collapse_section(
    section,
    categories: tuple[tuple[str, KeyFunction], ...],
) -> list[dict[str, str]]:
    """Collapse each category of a section in place. Returns the id mappings."""
    mappings: list[dict[str, str]] = []
    if section is None:
        return mappings
    for collection_name, key in categories:
        items = getattr(section, collection_name)
        result = collapse(items, key)
        setattr(section, collection_name, result.retained)
        mappings.append(result.id_mapping)
        dropped = len(items or []) - len(result.retained) - result.removed_count
        logger.debug(
            "%s: kept %d, collapsed %d, dropped %d incomplete",
            collection_name,
            len(result.retained),
            result.removed_count,
            dropped,
        )
    return mappings


def remove_duplicates(model: StructuralModel | None) -> StructuralModel | None:
    """Remove duplicate properties and elements, then repair references.

    The model is modified in place and returned. Survivors keep their
    first-seen order and are the original objects. Incomplete entities
    are dropped silently. Absent sections are skipped. Running it twice
    gives the same model as running it once.

    Dropping is not followed by a rewrite: a reference to a dropped
    entity (e.g. a material with no name) is left pointing at an id
    that no longer exists. Only retired duplicates are re-pointed.
    """
    if model is None:
        return None

    mappings = _collapse_section(model.properties, PROPERTY_CATEGORIES)
    mappings += _collapse_section(model.elements, ELEMENT_CATEGORIES)

    id_mapping = combine_mappings(mappings)
    rewrite_references(model, id_mapping)

    logger.info("Removed %d duplicate entities from '%s'", len(id_mapping), model.name)
    return model


def remove_duplicate_elements(model: StructuralModel | None) -> StructuralModel | None:
    """Collapse duplicate geometric elements only.

    Properties are left alone and no references are rewritten, so any
    reference to a retired element id stays as it was. Useful for
    de-jittering geometry without touching property identity.
    """
    if model is None:
        return None

    mappings = _collapse_section(model.elements, ELEMENT_CATEGORIES)
    removed = sum(len(m) for m in mappings)
    logger.info("Removed %d duplicate elements from '%s'", removed, model.name)
    return model
