"""
Framework tests: result helpers, material and fastener lookups, record
coercion, calculator registry.
"""

import math

import pytest
from pydantic import ValidationError

from caldeiraria.calculators.base import (
    all_positive,
    empty_result,
    error_result,
    make_result,
    safe_asin,
    safe_sqrt,
    sample_angles,
)
from caldeiraria.calculators.fastener_lookup import FastenerLookup, UnknownFastenerError
from caldeiraria.calculators.registry import (
    build_dimensions,
    get_calculator,
    get_dimension_schema,
    has_calculator,
    list_calculators,
    run_calculation,
)
from caldeiraria.calculators.cylinder import calculate_cylinder
from caldeiraria.models import ArcInputMode, MaterialType, ShapeType, VolumeShape
from caldeiraria.schemas import (
    ArcDimensions,
    BoltDimensions,
    CylinderDimensions,
    ElbowDimensions,
    PipeBranchDimensions,
    StairsDimensions,
    parse_number,
)
from caldeiraria.shape_info import SHAPE_INFO
from caldeiraria.weights import (
    DENSITIES,
    density_for,
    kg_to_kilonewtons,
    mm3_to_liters,
    weight_from_area,
    weight_from_dimensions,
)


# ============================================================
# Result helpers
# ============================================================

def test_empty_result_has_no_metrics_or_error():
    result = empty_result()
    assert result.metrics == {}
    assert result.steps == []
    assert result.calculated == {}
    assert result.error is None
    assert result.is_empty


def test_error_result_sets_error_metric():
    """Errors are reported in both the Error metric and the error field."""
    result = error_result("Bad geometry", calculated={"x": 1})
    assert result.metrics == {"Error": "Bad geometry"}
    assert result.error == "Bad geometry"
    assert result.calculated == {"x": 1}
    assert not result.is_empty


def test_make_result_builds_theory_sections():
    result = make_result({"A": "1"}, ["step"], {"a": 1}, theory=[("Title", "Body")])
    assert result.theory[0].title == "Title"
    assert result.theory[0].content == "Body"
    assert make_result({}, [], {}).theory is None


def test_guards_absorb_round_off():
    assert safe_asin(1.0000001) == pytest.approx(math.pi / 2)
    assert safe_sqrt(-1e-12) == 0.0
    assert all_positive(1, 2.5, 0.1)
    assert not all_positive(1, 0)
    assert not all_positive(-1, 5)


def test_sample_angles_closes_exactly_on_360():
    angles = sample_angles(12)
    assert len(angles) == 13
    assert angles[0] == 0.0
    assert angles[-1] == 360.0
    assert angles[3] == pytest.approx(90.0)


# ============================================================
# Materials
# ============================================================

def test_density_table():
    assert density_for("steel") == 7.85
    assert density_for("aluminum") == 2.70
    assert density_for("STAINLESS") == 7.90
    assert len(DENSITIES) == 9


def test_every_material_type_has_a_density():
    assert {m.value for m in MaterialType} == set(DENSITIES)


def test_unknown_material_falls_back_to_steel():
    assert density_for("unobtanium") == DENSITIES["steel"]
    assert density_for(None) == DENSITIES["steel"]


def test_weight_helpers():
    # 1 m² x 1 mm = 1 dm³
    assert weight_from_area(1_000_000, 1, "steel") == pytest.approx(7.85)
    assert weight_from_dimensions(2000, 1000, 10, "aluminum") == pytest.approx(54.0)
    assert mm3_to_liters(1_000_000) == 1.0
    assert kg_to_kilonewtons(1000) == pytest.approx(9.81)


# ============================================================
# Fasteners
# ============================================================

def test_fastener_lookup_thread_data():
    lookup = FastenerLookup()
    thread = lookup.get_thread("m12")
    assert thread["pitch"] == 1.75
    assert thread["stress_area"] == 84.3
    assert thread["nominal_diameter"] == 12.0


def test_fastener_lookup_strength_data():
    strength = FastenerLookup().get_strength("10.9")
    assert strength["yield_stress"] == 900.0
    assert strength["tensile_stress"] == 1000.0


def test_fastener_lookup_unknown_raises():
    lookup = FastenerLookup()
    with pytest.raises(UnknownFastenerError):
        lookup.get_thread("M14")
    with pytest.raises(UnknownFastenerError):
        lookup.get_strength("9.9")
    assert "M36" in FastenerLookup.sizes()
    assert "4.6" in FastenerLookup.classes()


# ============================================================
# Dimension records
# ============================================================

def test_parse_number_accepts_decimal_comma():
    assert parse_number("10,5") == 10.5
    assert parse_number(" 12 ") == 12.0
    assert parse_number("abc", 3.0) == 3.0
    assert parse_number(None, 1.0) == 1.0
    assert parse_number(float("nan")) == 0.0


def test_parse_number_rejects_absurd_magnitudes():
    """Values beyond any shop part fall back to the default instead of overflowing later."""
    assert parse_number(1e200) == 0.0
    assert parse_number("-2e9", 5.0) == 5.0
    assert parse_number(1e9) == 1e9
    record = CylinderDimensions.model_validate({"diameter": 1e200, "height": "1e300"})
    assert record.diameter == 0.0
    assert record.height == 0.0


def test_record_coerces_form_strings():
    record = CylinderDimensions.model_validate(
        {"diameter": "1000,5", "height": "", "thickness": None, "colour": "red"}
    )
    assert record.diameter == 1000.5
    assert record.height == 0.0
    assert record.thickness == 0.0


def test_record_keeps_negative_values():
    """Negative numbers pass through; the calculator decides they are insufficient."""
    record = CylinderDimensions.model_validate({"diameter": "-5"})
    assert record.diameter == -5.0


def test_record_integer_fields_and_defaults():
    record = ElbowDimensions.model_validate({"segments": "abc", "divisions": "8"})
    assert record.segments == 3
    assert record.divisions == 8
    assert ElbowDimensions().divisions == 12
    assert ElbowDimensions().angle == 90.0


def test_record_accepts_camel_case_and_aliases():
    branch = PipeBranchDimensions.model_validate(
        {"headerDiameter": "200", "branchDiameter": 100, "angle": "45"}
    )
    assert branch.header_diameter == 200.0
    assert branch.branch_diameter == 100.0
    assert branch.angle_deg == 45.0

    bolt = BoltDimensions.model_validate({"diameterStr": " M16 ", "boltClass": "10.9"})
    assert bolt.size == "M16"
    assert bolt.bolt_class == "10.9"

    stairs = StairsDimensions.model_validate({"stepCount": "12"})
    assert stairs.step_count == 12


def test_record_normalises_enum_values():
    arc = ArcDimensions.model_validate({"mode": "Radius-Chord"})
    assert arc.mode == ArcInputMode.RADIUS_CHORD
    volume = build_dimensions("volumes", {"subShape": "SPHERE"})
    assert volume.sub_shape == VolumeShape.SPHERE
    assert ArcDimensions.model_validate({"mode": ""}).mode == ArcInputMode.CHORD_SAGITTA


def test_record_rejects_unknown_enum_value():
    with pytest.raises(ValidationError):
        ArcDimensions.model_validate({"mode": "three_points"})


def test_records_are_immutable():
    record = CylinderDimensions(diameter=100)
    with pytest.raises(ValidationError):
        record.diameter = 200


# ============================================================
# Registry
# ============================================================

def test_registry_covers_every_shape():
    shapes = list_calculators()
    assert len(shapes) == 12
    for shape in ShapeType:
        assert shape.value in shapes
        assert has_calculator(shape)
        assert shape in SHAPE_INFO


def test_registry_accepts_hyphenated_ids():
    assert has_calculator("square-to-round")
    assert get_calculator("Plate-Weight") is get_calculator(ShapeType.PLATE_WEIGHT)
    assert get_dimension_schema("cylinder") is CylinderDimensions
    assert get_calculator("cylinder") is calculate_cylinder


def test_registry_unknown_shape_raises_value_error():
    assert not has_calculator("hexagon")
    with pytest.raises(ValueError, match="No calculator registered"):
        get_calculator("hexagon")
    with pytest.raises(ValueError):
        run_calculation("hexagon", {})


def test_run_calculation_from_raw_fields_and_records():
    raw = run_calculation("cylinder", {"diameter": "1000", "height": "2000", "thickness": "5"})
    record = run_calculation("cylinder", CylinderDimensions(diameter=1000, height=2000, thickness=5))
    assert raw.calculated["width"] == pytest.approx(record.calculated["width"])


def test_run_calculation_default_material_is_steel():
    steel = run_calculation("plate_weight", {"width": 1000, "length": 1000, "thickness": 10}, "steel")
    default = run_calculation("plate_weight", {"width": 1000, "length": 1000, "thickness": 10})
    aluminum = run_calculation("plate_weight", {"width": 1000, "length": 1000, "thickness": 10}, "aluminum")
    assert default.calculated["weight_kg"] == pytest.approx(steel.calculated["weight_kg"])
    assert aluminum.calculated["weight_kg"] < steel.calculated["weight_kg"]


def test_every_calculator_returns_empty_for_blank_form():
    """A fresh form never raises and never reports an error."""
    for shape in list_calculators():
        fields = {"count": 0} if shape == "bolts" else {}
        result = run_calculation(shape, fields)
        assert result.error is None, shape
        assert result.metrics == {}, shape
