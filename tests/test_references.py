"""Tests for id mapping combination and reference rewriting."""

from structural_dedup.cleanup.references import (
    REFERENCE_FIELDS,
    combine_mappings,
    rewrite_references,
    update_id,
)
from structural_dedup.models import (
    Beam,
    Brace,
    Column,
    Floor,
    FloorProperties,
    FrameProperties,
    IsolatedFooting,
    Level,
    LoadCombination,
    StructuralModel,
    SurfaceLoad,
    Wall,
    WallProperties,
)


class TestCombineMappings:
    def test_disjoint_union(self):
        combined = combine_mappings([{"MAT-2": "MAT-1"}, {"BM-2": "BM-1"}, {}])
        assert combined == {"MAT-2": "MAT-1", "BM-2": "BM-1"}

    def test_later_overwrites(self):
        assert combine_mappings([{"X-1": "X-2"}, {"X-1": "X-3"}]) == {"X-1": "X-3"}

    def test_chain_resolved(self):
        combined = combine_mappings([{"A": "B"}, {"B": "C"}, {"C": "D"}])
        assert combined == {"A": "D", "B": "D", "C": "D"}

    def test_cycle_terminates(self):
        combined = combine_mappings([{"A": "B", "B": "A"}])
        assert combined == {"A": "B", "B": "A"}

    def test_self_mapping_dropped(self):
        assert combine_mappings([{"A": "B", "B": "B"}]) == {"A": "B"}

    def test_empty(self):
        assert combine_mappings([]) == {}


class TestUpdateId:
    def test_mapped(self):
        assert update_id("LV-2", {"LV-2": "LV-1"}) == "LV-1"

    def test_unmapped_unchanged(self):
        assert update_id("LV-9", {"LV-2": "LV-1"}) == "LV-9"

    def test_empty_never_fabricated(self):
        assert update_id(None, {"": "LV-1"}) is None
        assert update_id("", {"": "LV-1"}) == ""


def _model_with_every_reference(old: str) -> StructuralModel:
    """A model where every covered reference field holds ``old``."""
    model = StructuralModel()
    model.elements.beams = [Beam(level_id=old, frame_properties_id=old)]
    model.elements.columns = [
        Column(base_level_id=old, top_level_id=old, frame_properties_id=old)
    ]
    model.elements.walls = [
        Wall(base_level_id=old, top_level_id=old, properties_id=old, pier_id=old)
    ]
    model.elements.floors = [
        Floor(level_id=old, floor_properties_id=old, diaphragm_id=old, surface_load_id=old)
    ]
    model.elements.braces = [
        Brace(base_level_id=old, top_level_id=old, frame_properties_id=old, material_id=old)
    ]
    model.elements.isolated_footings = [IsolatedFooting(level_id=old, material_id=old)]
    model.properties.wall_properties = [WallProperties(name="W", material_id=old)]
    model.properties.floor_properties = [FloorProperties(name="F", material_id=old)]
    model.properties.frame_properties = [FrameProperties(name="B", material_id=old)]
    model.model_layout.levels = [Level(floor_type_id=old)]
    model.loads.surface_loads = [
        SurfaceLoad(dead_load_id=old, live_load_id=old, layout_type_id=old)
    ]
    return model


class TestRewriteReferences:
    def test_every_listed_field_rewritten(self):
        model = _model_with_every_reference("OLD")
        rewrite_references(model, {"OLD": "NEW"})
        for section_name, collection_name, field_names in REFERENCE_FIELDS:
            items = getattr(getattr(model, section_name), collection_name)
            assert items, collection_name
            for item in items:
                for field_name in field_names:
                    assert getattr(item, field_name) == "NEW", (collection_name, field_name)

    def test_unlisted_fields_untouched(self):
        model = _model_with_every_reference("OLD")
        rewrite_references(model, {"OLD": "NEW"})
        assert model.elements.walls[0].pier_id == "OLD"

    def test_returns_same_model(self):
        model = _model_with_every_reference("OLD")
        assert rewrite_references(model, {"OLD": "NEW"}) is model

    def test_unmapped_left_alone(self):
        model = _model_with_every_reference("OTHER")
        rewrite_references(model, {"OLD": "NEW"})
        assert model.elements.beams[0].level_id == "OTHER"

    def test_null_fields_stay_null(self):
        model = StructuralModel()
        model.elements.beams = [Beam()]
        rewrite_references(model, {"OLD": "NEW"})
        assert model.elements.beams[0].level_id is None
        assert model.elements.beams[0].frame_properties_id is None

    def test_load_combination_order_and_duplicates(self):
        model = StructuralModel()
        model.loads.load_combinations = [
            LoadCombination(load_definition_ids=["LD-1", "LD-2", "LD-1"])
        ]
        rewrite_references(model, {"LD-1": "LD-9"})
        assert model.loads.load_combinations[0].load_definition_ids == ["LD-9", "LD-2", "LD-9"]

    def test_load_combination_without_ids(self):
        model = StructuralModel()
        model.loads.load_combinations = [LoadCombination(load_definition_ids=None)]
        rewrite_references(model, {"LD-1": "LD-9"})
        assert model.loads.load_combinations[0].load_definition_ids is None

    def test_absent_sections(self):
        model = StructuralModel(properties=None, model_layout=None, loads=None)
        model.elements.beams = [Beam(level_id="OLD")]
        rewrite_references(model, {"OLD": "NEW"})
        assert model.elements.beams[0].level_id == "NEW"

    def test_empty_mapping_noop(self):
        model = _model_with_every_reference("OLD")
        before = model.model_dump()
        rewrite_references(model, {})
        assert model.model_dump() == before

    def test_none_model(self):
        assert rewrite_references(None, {"A": "B"}) is None
