"""Top-level structural model and its section containers.

A model is one owned aggregate: elements, properties, layout and loads,
cross-referencing each other by id. Any section may be absent (None)
when a producer only emitted part of a model.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from structural_dedup.models.elements import (
    Beam,
    Brace,
    Column,
    Floor,
    IsolatedFooting,
    Wall,
)
from structural_dedup.models.layout import FloorType, Grid, Level
from structural_dedup.models.loads import LoadCombination, LoadDefinition, SurfaceLoad
from structural_dedup.models.properties import (
    Diaphragm,
    FloorProperties,
    FrameProperties,
    Material,
    WallProperties,
)


class ElementContainer(BaseModel):
    beams: list[Beam] = Field(default_factory=list)
    columns: list[Column] = Field(default_factory=list)
    walls: list[Wall] = Field(default_factory=list)
    floors: list[Floor] = Field(default_factory=list)
    braces: list[Brace] = Field(default_factory=list)
    isolated_footings: list[IsolatedFooting] = Field(default_factory=list)


class PropertiesContainer(BaseModel):
    materials: list[Material] = Field(default_factory=list)
    wall_properties: list[WallProperties] = Field(default_factory=list)
    floor_properties: list[FloorProperties] = Field(default_factory=list)
    frame_properties: list[FrameProperties] = Field(default_factory=list)
    diaphragms: list[Diaphragm] = Field(default_factory=list)


class ModelLayoutContainer(BaseModel):
    levels: list[Level] = Field(default_factory=list)
    floor_types: list[FloorType] = Field(default_factory=list)
    grids: list[Grid] = Field(default_factory=list)


class LoadContainer(BaseModel):
    load_definitions: list[LoadDefinition] = Field(default_factory=list)
    surface_loads: list[SurfaceLoad] = Field(default_factory=list)
    load_combinations: list[LoadCombination] = Field(default_factory=list)


class StructuralModel(BaseModel):
    """Top-level structural model.

    Sections default to empty containers but may be set to None; every
    cleanup stage skips an absent section.
    """

    name: str = Field(default="Untitled Model", description="Model name")
    elements: ElementContainer | None = Field(default_factory=ElementContainer)
    properties: PropertiesContainer | None = Field(default_factory=PropertiesContainer)
    model_layout: ModelLayoutContainer | None = Field(default_factory=ModelLayoutContainer)
    loads: LoadContainer | None = Field(default_factory=LoadContainer)

    # ── File I/O ──────────────────────────────────────────────────────

    @classmethod
    def load(cls, path: str | Path) -> StructuralModel:
        """Load a model from a JSON file."""
        path = Path(path)
        return cls.model_validate_json(path.read_text(encoding="utf-8"))

    def save(self, path: str | Path, deduplicate: bool = True) -> Path:
        """Save the model to a JSON file. Creates parent dirs if needed.

        With ``deduplicate`` the full duplicate pass runs on a deep copy
        first, so the file on disk is duplicate-free and
        reference-consistent while this instance is left untouched.
        """
        from structural_dedup.cleanup.duplicates import remove_duplicates

        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        model = self
        if deduplicate:
            model = remove_duplicates(self.model_copy(deep=True))
        path.write_text(model.model_dump_json(indent=2), encoding="utf-8")
        return path

    # ── Lookups ───────────────────────────────────────────────────────

    def get_level(self, level_id: str) -> Level | None:
        """Find a level by id."""
        if self.model_layout is None:
            return None
        return next((lv for lv in self.model_layout.levels if lv.id == level_id), None)

    def get_level_by_name(self, name: str) -> Level | None:
        """Find a level by name (case-insensitive)."""
        if self.model_layout is None:
            return None
        return next(
            (lv for lv in self.model_layout.levels if lv.name.lower() == name.lower()),
            None,
        )

    def get_material(self, material_id: str) -> Material | None:
        """Find a material by id."""
        if self.properties is None:
            return None
        return next((m for m in self.properties.materials if m.id == material_id), None)

    def sorted_levels(self) -> list[Level]:
        """Levels ordered by elevation (stable for equal elevations)."""
        if self.model_layout is None:
            return []
        return sorted(self.model_layout.levels, key=lambda lv: lv.elevation)

    # ── Cleanup shortcuts ─────────────────────────────────────────────

    def remove_duplicates(self) -> StructuralModel:
        """Collapse duplicate properties and elements, then repair references."""
        from structural_dedup.cleanup.duplicates import remove_duplicates

        return remove_duplicates(self)

    def remove_duplicate_elements(self) -> StructuralModel:
        """Collapse duplicate elements only. References are not rewritten."""
        from structural_dedup.cleanup.duplicates import remove_duplicate_elements

        return remove_duplicate_elements(self)

    def slice_walls_by_story(self) -> StructuralModel:
        """Split multi-story walls into one wall per story."""
        from structural_dedup.cleanup.stories import slice_walls_by_story

        return slice_walls_by_story(self)

    # ── Query helpers ─────────────────────────────────────────────────

    def counts(self) -> dict[str, int]:
        """Number of entities per category, absent sections counted as 0."""
        result: dict[str, int] = {}
        for section_name, fields in _SECTION_FIELDS.items():
            section = getattr(self, section_name)
            for field_name in fields:
                items = getattr(section, field_name) if section is not None else None
                result[field_name] = len(items) if items else 0
        return result

    def summary(self) -> str:
        """Human-readable summary of the model."""
        counts = self.counts()
        lines = [f"🏗️ {self.name}"]
        lines.append(f"   Levels: {counts['levels']}")
        for level in self.sorted_levels():
            lines.append(f"   📐 {level.name or level.id} (elev {level.elevation})")
        parts = [
            f"Beams: {counts['beams']}",
            f"Columns: {counts['columns']}",
            f"Walls: {counts['walls']}",
            f"Floors: {counts['floors']}",
        ]
        if counts["braces"]:
            parts.append(f"Braces: {counts['braces']}")
        if counts["isolated_footings"]:
            parts.append(f"Footings: {counts['isolated_footings']}")
        lines.append(f"   {', '.join(parts)}")
        lines.append(
            f"   Materials: {counts['materials']}, "
            f"Frame sections: {counts['frame_properties']}, "
            f"Wall sections: {counts['wall_properties']}, "
            f"Floor sections: {counts['floor_properties']}"
        )
        return "\n".join(lines)


_SECTION_FIELDS = {
    "elements": ElementContainer.model_fields,
    "properties": PropertiesContainer.model_fields,
    "model_layout": ModelLayoutContainer.model_fields,
    "loads": LoadContainer.model_fields,
}
