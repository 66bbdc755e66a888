"""Duplicate collapsing: first occurrence wins.

A single left-to-right pass keeps the first entity seen for each
canonical key and maps every later duplicate's id onto it. Nothing is
merged: the survivor is the original object, untouched. Callers decide
which duplicate survives purely through input order.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from structural_dedup.cleanup.keys import KeyFunction, canonical_key

T = TypeVar("T")


@dataclass
class CollapseResult(Generic[T]):
    """Survivors of a collapse plus the retired → retained id mapping."""

    retained: list[T] = field(default_factory=list)
    id_mapping: dict[str, str] = field(default_factory=dict)

    @property
    def removed_count(self) -> int:
        return len(self.id_mapping)


def collapse(
    items: Iterable[T] | None,
    key: KeyFunction = canonical_key,
) -> CollapseResult[T]:
    """Collapse duplicates in a sequence of same-category entities.

    Args:
        items: Entities in input order. None is treated as empty.
        key: Canonical key function. Entities keyed None are dropped
            without being mapped.

    Returns:
        CollapseResult with survivors in first-seen order.
    """
    result: CollapseResult[T] = CollapseResult()
    if items is None:
        return result

    canonical: dict[Any, T] = {}
    for item in items:
        item_key = key(item)
        if item_key is None:
            continue
        first = canonical.get(item_key)
        if first is None:
            canonical[item_key] = item
            result.retained.append(item)
        else:
            result.id_mapping[item.id] = first.id

    return result
