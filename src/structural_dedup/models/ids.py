"""Entity id generation.

Ids look like ``"BM-1a2b3c4d"``: a category prefix plus the first
eight hex characters of a random UUID. The prefix keeps ids of
different categories disjoint, so a retired beam id can never collide
with a material id in the combined rewrite mapping.
"""

from __future__ import annotations

import re
import uuid
from enum import Enum

from structural_dedup.config import ID_HEX_LENGTH


class IdPrefix(str, Enum):
    """Category prefixes for generated ids."""

    # Elements
    BEAM = "BM"
    COLUMN = "COL"
    WALL = "WL"
    FLOOR = "FL"
    BRACE = "BR"
    ISOLATED_FOOTING = "IF"

    # Properties
    MATERIAL = "MAT"
    WALL_PROPERTIES = "WP"
    FLOOR_PROPERTIES = "FP"
    FRAME_PROPERTIES = "FRP"
    DIAPHRAGM = "DIA"

    # Layout
    LEVEL = "LV"
    FLOOR_TYPE = "FT"
    GRID = "GR"

    # Loads
    LOAD_DEFINITION = "LD"
    SURFACE_LOAD = "SL"
    LOAD_COMBINATION = "LC"


_ID_PATTERN = re.compile(rf"^[A-Z]+-[0-9a-f]{{{ID_HEX_LENGTH}}}$")


def generate_id(prefix: IdPrefix | str) -> str:
    """Generate a new id for a category, e.g. ``generate_id(IdPrefix.BEAM)``."""
    if isinstance(prefix, IdPrefix):
        prefix = prefix.value
    return f"{prefix}-{uuid.uuid4().hex[:ID_HEX_LENGTH]}"


def is_generated_id(value: str) -> bool:
    """Check if a string has the generated ``PREFIX-xxxxxxxx`` shape.

    The cleanup engine never relies on this; ids from other tools are
    accepted as opaque strings.
    """
    return isinstance(value, str) and _ID_PATTERN.match(value) is not None
