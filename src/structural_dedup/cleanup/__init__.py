"""Model cleanup passes.

- keys: canonical keys deciding when two entities are the same
- collapse: first-occurrence-wins duplicate collapsing
- references: id mapping combination and foreign-key rewriting
- duplicates: whole-model duplicate removal
- stories: per-story wall slicing
- filters: element filtering and unused property pruning
- transform: whole-model rotation and translation
"""

from structural_dedup.cleanup.keys import canonical_key, normalize_line
from structural_dedup.cleanup.collapse import CollapseResult, collapse
from structural_dedup.cleanup.references import (
    combine_mappings,
    rewrite_references,
)
from structural_dedup.cleanup.duplicates import (
    remove_duplicate_elements,
    remove_duplicates,
)
from structural_dedup.cleanup.stories import slice_walls_by_story, split_wall
from structural_dedup.cleanup.filters import (
    filter_elements,
    filter_elements_by_material_type,
    remove_unused_properties,
)
from structural_dedup.cleanup.transform import (
    rotate_model,
    transform_model,
    translate_model,
)

__all__ = [
    "canonical_key",
    "normalize_line",
    "CollapseResult",
    "collapse",
    "combine_mappings",
    "rewrite_references",
    "remove_duplicate_elements",
    "remove_duplicates",
    "slice_walls_by_story",
    "split_wall",
    "filter_elements",
    "filter_elements_by_material_type",
    "remove_unused_properties",
    "rotate_model",
    "transform_model",
    "translate_model",
]
