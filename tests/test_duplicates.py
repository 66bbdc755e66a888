"""Tests for whole-model duplicate removal."""

import pytest

from structural_dedup.cleanup.duplicates import (
    remove_duplicate_elements,
    remove_duplicates,
)
from structural_dedup.models import (
    Beam,
    Brace,
    Column,
    Diaphragm,
    Floor,
    FloorProperties,
    FloorType,
    FrameProperties,
    IsolatedFooting,
    Level,
    LoadCombination,
    LoadDefinition,
    Material,
    Point2D,
    Point3D,
    StructuralModel,
    SurfaceLoad,
    Wall,
    WallProperties,
)


def _pts(*coords) -> list[Point2D]:
    return [Point2D(x=x, y=y) for x, y in coords]


def _beam(beam_id, x1, y1, x2, y2, level_id="LV-1", frame_id=None) -> Beam:
    return Beam(
        id=beam_id,
        start_point=Point2D(x=x1, y=y1),
        end_point=Point2D(x=x2, y=y2),
        level_id=level_id,
        frame_properties_id=frame_id,
    )


@pytest.fixture
def messy_model() -> StructuralModel:
    """A two-story model merged from two sources, duplicates everywhere."""
    model = StructuralModel(name="Merged")
    model.model_layout.floor_types = [FloorType(id="FT-1", name="Typical")]
    model.model_layout.levels = [
        Level(id="LV-0", name="Base", elevation=0.0, floor_type_id="FT-1"),
        Level(id="LV-1", name="Level 1", elevation=12.0, floor_type_id="FT-1"),
        Level(id="LV-2", name="Roof", elevation=24.0, floor_type_id="FT-1"),
    ]
    model.properties.materials = [
        Material(id="MAT-1", name="Concrete", fc=4000),
        Material(id="MAT-2", name="Steel", fy=50),
        Material(id="MAT-3", name="CONCRETE", fc=5000),
        Material(id="MAT-4", name="steel"),
    ]
    model.properties.wall_properties = [
        WallProperties(id="WP-1", name="W8", material_id="MAT-3", thickness=8),
        WallProperties(id="WP-2", name="w8", material_id="MAT-1", thickness=10),
    ]
    model.properties.floor_properties = [
        FloorProperties(id="FP-1", name="Slab 8", material_id="MAT-1"),
        FloorProperties(id="FP-2", name="SLAB 8", material_id="MAT-3"),
    ]
    model.properties.frame_properties = [
        FrameProperties(id="FRP-1", name="W12X26", material_id="MAT-4"),
        FrameProperties(id="FRP-2", name="C24X24", material_id="MAT-3"),
        FrameProperties(id="FRP-3", name="w12x26", material_id="MAT-2"),
    ]
    model.properties.diaphragms = [
        Diaphragm(id="DIA-1", name="D1"),
        Diaphragm(id="DIA-2", name="d1"),
    ]
    model.elements.beams = [
        _beam("BM-1", 0, 0, 30, 0, "LV-1", "FRP-3"),
        _beam("BM-2", 30, 0, 0, 0, "LV-1", "FRP-1"),
        _beam("BM-3", 0, 0, 30, 0, "LV-2", "FRP-1"),
    ]
    model.elements.columns = [
        Column(id="COL-1", start_point=Point2D(x=0, y=0), base_level_id="LV-0",
               top_level_id="LV-1", frame_properties_id="FRP-2"),
        Column(id="COL-2", start_point=Point2D(x=0.0000002, y=0), base_level_id="LV-0",
               top_level_id="LV-1", frame_properties_id="FRP-2"),
    ]
    model.elements.walls = [
        Wall(id="WL-1", points=_pts((0, 0), (0, 20)), base_level_id="LV-0",
             top_level_id="LV-1", properties_id="WP-2"),
        Wall(id="WL-2", points=_pts((0, 20), (0, 0)), base_level_id="LV-0",
             top_level_id="LV-1", properties_id="WP-1"),
        Wall(id="WL-3", points=_pts((0, 0))),
    ]
    model.elements.floors = [
        Floor(id="FL-1", points=_pts((0, 0), (30, 0), (30, 20), (0, 20)), level_id="LV-1",
              floor_properties_id="FP-2", diaphragm_id="DIA-2", surface_load_id="SL-1"),
        Floor(id="FL-2", points=_pts((30, 20), (0, 20), (0, 0), (30, 0)), level_id="LV-1",
              floor_properties_id="FP-1", diaphragm_id="DIA-1", surface_load_id="SL-1"),
    ]
    model.elements.braces = [
        Brace(id="BR-1", start_point=Point2D(x=0, y=0), end_point=Point2D(x=30, y=0),
              base_level_id="LV-0", top_level_id="LV-1", frame_properties_id="FRP-3",
              material_id="MAT-4"),
    ]
    model.elements.isolated_footings = [
        IsolatedFooting(id="IF-1", point=Point3D(x=0, y=0, z=-4), level_id="LV-0",
                        material_id="MAT-3"),
        IsolatedFooting(id="IF-2", point=Point3D(x=0, y=0, z=-4), level_id="LV-0",
                        material_id="MAT-1"),
    ]
    model.loads.load_definitions = [
        LoadDefinition(id="LD-1", name="DL"),
        LoadDefinition(id="LD-2", name="LL"),
    ]
    model.loads.surface_loads = [
        SurfaceLoad(id="SL-1", dead_load_id="LD-1", live_load_id="LD-2", layout_type_id="FT-1"),
    ]
    model.loads.load_combinations = [
        LoadCombination(id="LC-1", load_definition_ids=["LD-1", "LD-2", "LD-1"]),
    ]
    return model


def _ids(items) -> list[str]:
    return [i.id for i in items]


class TestRemoveDuplicates:
    def test_properties_collapsed_by_name(self, messy_model):
        remove_duplicates(messy_model)
        props = messy_model.properties
        assert _ids(props.materials) == ["MAT-1", "MAT-2"]
        assert _ids(props.wall_properties) == ["WP-1"]
        assert _ids(props.floor_properties) == ["FP-1"]
        assert _ids(props.frame_properties) == ["FRP-1", "FRP-2"]
        assert _ids(props.diaphragms) == ["DIA-1"]

    def test_elements_collapsed_by_geometry(self, messy_model):
        remove_duplicates(messy_model)
        elements = messy_model.elements
        assert _ids(elements.beams) == ["BM-1", "BM-3"]
        assert _ids(elements.columns) == ["COL-1"]
        assert _ids(elements.walls) == ["WL-1"]
        assert _ids(elements.floors) == ["FL-1"]
        assert _ids(elements.braces) == ["BR-1"]
        assert _ids(elements.isolated_footings) == ["IF-1"]

    def test_property_references_rewritten(self, messy_model):
        remove_duplicates(messy_model)
        props = messy_model.properties
        assert props.wall_properties[0].material_id == "MAT-1"
        assert props.frame_properties[0].material_id == "MAT-2"
        assert props.frame_properties[1].material_id == "MAT-1"

    def test_element_references_rewritten(self, messy_model):
        remove_duplicates(messy_model)
        elements = messy_model.elements
        assert elements.beams[0].frame_properties_id == "FRP-1"
        assert elements.walls[0].properties_id == "WP-1"
        assert elements.floors[0].floor_properties_id == "FP-1"
        assert elements.floors[0].diaphragm_id == "DIA-1"
        assert elements.braces[0].frame_properties_id == "FRP-1"
        assert elements.braces[0].material_id == "MAT-2"
        assert elements.isolated_footings[0].material_id == "MAT-1"

    def test_no_dangling_references(self, messy_model):
        remove_duplicates(messy_model)
        props = messy_model.properties
        elements = messy_model.elements
        material_ids = set(_ids(props.materials))
        frame_ids = set(_ids(props.frame_properties))
        level_ids = set(_ids(messy_model.model_layout.levels))

        for p in [*props.wall_properties, *props.floor_properties, *props.frame_properties]:
            assert p.material_id in material_ids
        for e in [*elements.beams, *elements.columns, *elements.braces]:
            assert e.frame_properties_id in frame_ids
        for e in [*elements.braces, *elements.isolated_footings]:
            assert e.material_id in material_ids
        for e in elements.walls:
            assert e.properties_id in set(_ids(props.wall_properties))
            assert {e.base_level_id, e.top_level_id} <= level_ids
        for e in elements.floors:
            assert e.floor_properties_id in set(_ids(props.floor_properties))
            assert e.diaphragm_id in set(_ids(props.diaphragms))

    def test_first_occurrence_identity(self, messy_model):
        first_beam = messy_model.elements.beams[0]
        first_material = messy_model.properties.materials[0]
        remove_duplicates(messy_model)
        assert messy_model.elements.beams[0] is first_beam
        assert messy_model.properties.materials[0] is first_material
        assert messy_model.properties.materials[0].fc == 4000

    def test_idempotent(self, messy_model):
        once = remove_duplicates(messy_model).model_dump()
        twice = remove_duplicates(messy_model).model_dump()
        assert once == twice

    def test_layout_and_loads_untouched(self, messy_model):
        remove_duplicates(messy_model)
        assert len(messy_model.model_layout.levels) == 3
        assert messy_model.loads.load_combinations[0].load_definition_ids == ["LD-1", "LD-2", "LD-1"]
        assert messy_model.loads.surface_loads[0].dead_load_id == "LD-1"

    def test_returns_same_instance(self, messy_model):
        assert remove_duplicates(messy_model) is messy_model

    def test_none_model(self):
        assert remove_duplicates(None) is None

    def test_empty_model(self):
        model = StructuralModel()
        remove_duplicates(model)
        assert all(count == 0 for count in model.counts().values())

    def test_absent_sections(self):
        model = StructuralModel(properties=None, model_layout=None, loads=None)
        model.elements.beams = [_beam("BM-1", 0, 0, 5, 0), _beam("BM-2", 5, 0, 0, 0)]
        remove_duplicates(model)
        assert _ids(model.elements.beams) == ["BM-1"]
        assert model.properties is None

    def test_nameless_property_dropped_reference_kept(self):
        model = StructuralModel()
        model.properties.materials = [Material(id="MAT-1")]
        model.properties.frame_properties = [
            FrameProperties(id="FRP-1", name="W8X10", material_id="MAT-1"),
        ]
        remove_duplicates(model)
        assert model.properties.materials == []
        assert model.properties.frame_properties[0].material_id == "MAT-1"

    def test_incomplete_element_dropped_not_mapped(self):
        model = StructuralModel()
        model.elements.walls = [
            Wall(id="WL-1", points=_pts((0, 0)), properties_id="WP-1"),
            Wall(id="WL-2", points=_pts((0, 0), (5, 0))),
        ]
        remove_duplicates(model)
        assert _ids(model.elements.walls) == ["WL-2"]

    def test_context_sensitive_walls(self):
        model = StructuralModel()
        model.elements.walls = [
            Wall(id="WL-1", points=_pts((0, 0), (5, 0)), base_level_id="LV-0", top_level_id="LV-2"),
            Wall(id="WL-2", points=_pts((0, 0), (5, 0)), base_level_id="LV-1", top_level_id="LV-2"),
        ]
        remove_duplicates(model)
        assert _ids(model.elements.walls) == ["WL-1", "WL-2"]


class TestEndToEnd:
    def test_beams_material_column_chain(self):
        model = StructuralModel()
        model.model_layout.levels = [
            Level(id="LV-1", elevation=0.0),
            Level(id="LV-2", elevation=12.0),
        ]
        model.properties.materials = [
            Material(id="MAT-1", name="Concrete", fc=4000),
            Material(id="MAT-2", name="CONCRETE", fc=6000),
        ]
        model.properties.frame_properties = [
            FrameProperties(id="FRP-1", name="C24X24", material_id="MAT-2"),
        ]
        model.elements.beams = [
            _beam("BM-1", 0, 0, 10, 0, "LV-2", "FRP-1"),
            _beam("BM-2", 10, 0, 0, 0, "LV-2", "FRP-1"),
        ]
        model.elements.columns = [
            Column(id="COL-1", start_point=Point2D(x=0, y=0), base_level_id="LV-1",
                   top_level_id="LV-2", frame_properties_id="FRP-1"),
        ]

        model.remove_duplicates()

        assert len(model.elements.beams) == 1
        assert len(model.properties.materials) == 1
        column = model.elements.columns[0]
        frame = next(p for p in model.properties.frame_properties if p.id == column.frame_properties_id)
        assert model.get_material(frame.material_id).id == "MAT-1"


class TestRemoveDuplicateElements:
    def test_elements_only(self, messy_model):
        remove_duplicate_elements(messy_model)
        assert _ids(messy_model.elements.beams) == ["BM-1", "BM-3"]
        assert _ids(messy_model.elements.walls) == ["WL-1"]
        assert len(messy_model.properties.materials) == 4

    def test_references_not_rewritten(self, messy_model):
        remove_duplicate_elements(messy_model)
        assert messy_model.elements.beams[0].frame_properties_id == "FRP-3"
        assert messy_model.properties.wall_properties[0].material_id == "MAT-3"

    def test_idempotent(self, messy_model):
        once = remove_duplicate_elements(messy_model).model_dump()
        assert remove_duplicate_elements(messy_model).model_dump() == once

    def test_shortcut_method(self, messy_model):
        assert messy_model.remove_duplicate_elements() is messy_model
        assert len(messy_model.elements.columns) == 1

    def test_none_model(self):
        assert remove_duplicate_elements(None) is None
