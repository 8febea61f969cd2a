"""
Plate and pipe development calculators.

Tests:
- Cylinder: blank width, capacity, weight
- Cone: development radii and sweep, degenerate cylinder case
- Square to round: approximation vs triangulation
- Elbow: cut angle, back/belly heights, fish-mouth template
- Offset: travel and mitre
- Pipe branch: saddle template ordinates and guards
"""

import math

import pytest

from caldeiraria.calculators.cone import calculate_cone
from caldeiraria.calculators.cylinder import calculate_cylinder
from caldeiraria.calculators.elbow import calculate_elbow, fish_mouth_curve
from caldeiraria.calculators.offset import calculate_offset
from caldeiraria.calculators.pipe_branching import calculate_pipe_branching, saddle_curve
from caldeiraria.calculators.square_to_round import calculate_square_to_round, triangulate
from caldeiraria.schemas import (
    ConeDimensions,
    CylinderDimensions,
    ElbowDimensions,
    OffsetDimensions,
    PipeBranchDimensions,
    SquareToRoundDimensions,
)


# ============================================================
# Cylinder
# ============================================================

def test_cylinder_blank_and_capacity():
    """D=1000, H=2000, t=5: blank width is the mean circumference."""
    result = calculate_cylinder(CylinderDimensions(diameter=1000, height=2000, thickness=5))
    c = result.calculated
    assert math.isclose(c["width"], math.pi * 1005, rel_tol=1e-6)
    assert c["width"] == pytest.approx(3157.3, abs=0.1)
    assert math.isclose(c["internal_volume_mm3"], math.pi * 500 ** 2 * 2000, rel_tol=1e-6)
    assert c["weight_kg"] == pytest.approx(c["width"] * 2000 * 5 * 7.85 / 1e6)
    assert c["external_diameter"] == 1010
    assert result.metrics["Internal Volume"] == "1570.80 L"
    assert len(result.steps) == 5


def test_cylinder_material_changes_weight_only():
    steel = calculate_cylinder(CylinderDimensions(diameter=500, height=1000, thickness=3), "steel")
    alu = calculate_cylinder(CylinderDimensions(diameter=500, height=1000, thickness=3), "aluminum")
    assert alu.calculated["width"] == steel.calculated["width"]
    assert alu.calculated["weight_kg"] == pytest.approx(steel.calculated["weight_kg"] * 2.70 / 7.85)


def test_cylinder_insufficient_input():
    assert calculate_cylinder(CylinderDimensions(diameter=1000, height=0)).is_empty
    assert calculate_cylinder(CylinderDimensions(diameter=-10, height=100)).is_empty


# ============================================================
# Cone
# ============================================================

def test_cone_frustum_development():
    result = calculate_cone(ConeDimensions(d1=1000, d2=500, height=500, thickness=3))
    c = result.calculated
    slant = math.sqrt(500 ** 2 + 250 ** 2)
    assert c["slant_height"] == pytest.approx(slant)
    assert c["R_dev"] == pytest.approx(500 * slant / 250)
    assert c["r_dev"] == pytest.approx(c["R_dev"] - slant)
    assert c["theta"] == pytest.approx(360 * 500 / c["R_dev"])
    assert c["degenerate"] is False
    assert result.error is None
    assert [section.title for section in result.theory] == ["Generatrix", "Similar Triangles", "Sweep Angle"]


def test_cone_diameter_order_does_not_matter():
    a = calculate_cone(ConeDimensions(d1=1000, d2=500, height=500))
    b = calculate_cone(ConeDimensions(d1=500, d2=1000, height=500))
    assert a.calculated["R_dev"] == pytest.approx(b.calculated["R_dev"])


def test_cone_full_cone_has_zero_inner_radius():
    c = calculate_cone(ConeDimensions(d1=600, d2=0, height=400)).calculated
    assert c["r_dev"] == pytest.approx(0.0)
    assert c["R_dev"] == pytest.approx(c["slant_height"])


def test_cone_sagitta_matches_chord():
    c = calculate_cone(ConeDimensions(d1=1000, d2=500, height=500)).calculated
    half = math.radians(c["theta"]) / 2
    assert c["outer_chord"] == pytest.approx(2 * c["R_dev"] * math.sin(half))
    assert c["outer_sagitta"] == pytest.approx(c["R_dev"] * (1 - math.cos(half)))


def test_cone_equal_diameters_flagged_degenerate():
    """d1 == d2 is a cylinder: reported, never a division by zero."""
    result = calculate_cone(ConeDimensions(d1=800, d2=800, height=500))
    assert result.error is not None
    assert "Error" in result.metrics
    assert result.calculated["degenerate"] is True
    assert result.calculated["R_dev"] == 0.0
    assert result.calculated["theta"] == 0.0


def test_cone_near_equal_diameters_flagged_degenerate():
    result = calculate_cone(ConeDimensions(d1=800, d2=799.995, height=500))
    assert result.calculated["degenerate"] is True
    assert result.error is not None
    just_outside = calculate_cone(ConeDimensions(d1=800, d2=799.97, height=500))
    assert just_outside.calculated["degenerate"] is False


def test_cone_negative_diameter_is_insufficient():
    assert calculate_cone(ConeDimensions(d1=-500, d2=1000, height=500)).is_empty
    assert calculate_cone(ConeDimensions(d1=1000, d2=-1, height=500)).is_empty


# ============================================================
# Square to round
# ============================================================

def test_square_to_round_approximation():
    result = calculate_square_to_round(SquareToRoundDimensions(width=1000, diameter=600, height=500, thickness=3))
    c = result.calculated
    slant = math.sqrt(500 ** 2 + 200 ** 2)
    assert c["slant_height_avg"] == pytest.approx(slant)
    assert c["area_mm2"] == pytest.approx((4000 + math.pi * 600) / 2 * slant)
    assert c["weight_kg"] == pytest.approx(c["area_mm2"] * 3 * 7.85 / 1e6)


def test_square_to_round_triangulation_is_symmetric():
    layout = triangulate(1000, 600, 500)
    lengths = layout["true_lengths"]
    assert len(lengths) == 4
    assert lengths[0] == pytest.approx(lengths[3])
    assert lengths[1] == pytest.approx(lengths[2])
    # The corner-to-circle lines are never shorter than the height
    assert all(length > 500 for length in lengths)


def test_square_to_round_triangulated_area_is_close_to_approximation():
    c = calculate_square_to_round(SquareToRoundDimensions(width=1000, diameter=600, height=500)).calculated
    assert c["triangulated_area_mm2"] == pytest.approx(c["area_mm2"], rel=0.1)


# ============================================================
# Elbow
# ============================================================

def test_elbow_cut_angle_sums_to_bend():
    for segments in (2, 3, 4, 5, 7):
        c = calculate_elbow(ElbowDimensions(diameter=200, radius=300, angle=90, segments=segments)).calculated
        assert c["cut_angle"] * 2 * (segments - 1) == pytest.approx(90.0)


def test_elbow_back_and_belly_heights():
    c = calculate_elbow(ElbowDimensions(diameter=200, radius=300, angle=90, segments=4)).calculated
    tan15 = math.tan(math.radians(15))
    assert c["joints"] == 3
    assert c["joint_angle"] == pytest.approx(30.0)
    assert c["h_long_half"] == pytest.approx(400 * tan15)
    assert c["h_short_half"] == pytest.approx(200 * tan15)
    assert c["h_long_full"] == pytest.approx(2 * c["h_long_half"])


def test_elbow_template_spans_belly_to_back():
    c = calculate_elbow(ElbowDimensions(diameter=200, radius=300, angle=90, segments=4)).calculated
    curve = c["development_full"]
    assert len(curve) == 13
    assert curve[0]["height"] == pytest.approx(c["h_short_full"])
    assert curve[6]["height"] == pytest.approx(c["h_long_full"])
    assert curve[-1]["position"] == pytest.approx(c["pipe_circumference"])


def test_fish_mouth_curve_is_cosine():
    points = fish_mouth_curve(10.0, 30.0, 360.0, 4)
    assert [p["height"] for p in points] == pytest.approx([10.0, 20.0, 30.0, 20.0, 10.0])


def test_elbow_divisions_out_of_range_are_insufficient():
    assert calculate_elbow(ElbowDimensions(diameter=200, radius=300, divisions=100000)).is_empty
    assert calculate_elbow(ElbowDimensions(diameter=200, radius=300, divisions=2)).is_empty
    assert not calculate_elbow(ElbowDimensions(diameter=200, radius=300, divisions=360)).is_empty


def test_elbow_guards():
    one_segment = calculate_elbow(ElbowDimensions(diameter=200, radius=300, angle=90, segments=1))
    assert one_segment.error is not None
    tight = calculate_elbow(ElbowDimensions(diameter=200, radius=50, angle=90, segments=4))
    assert "smaller than the pipe radius" in tight.error
    steep = calculate_elbow(ElbowDimensions(diameter=200, radius=300, angle=180, segments=2))
    assert "too steep" in steep.error
    assert calculate_elbow(ElbowDimensions(diameter=0, radius=300)).is_empty


# ============================================================
# Offset
# ============================================================

def test_offset_travel_and_mitre():
    c = calculate_offset(OffsetDimensions(diameter=100, offset=300, run=400, thickness=3)).calculated
    assert c["travel"] == pytest.approx(500.0)
    assert c["angle_deg"] == pytest.approx(math.degrees(math.atan2(300, 400)))
    assert c["cut_angle"] == pytest.approx(c["angle_deg"] / 2)
    assert c["full_cutback"] == pytest.approx(100 * math.tan(math.radians(c["cut_angle"])))
    assert c["half_cutback"] == pytest.approx(c["full_cutback"] / 2)


def test_offset_needs_all_dimensions():
    assert calculate_offset(OffsetDimensions(diameter=100, offset=300, run=0)).is_empty


# ============================================================
# Pipe branch
# ============================================================

def test_pipe_branch_template_points():
    """12 divisions give 13 points over 0..360 with the baseline at exactly 0."""
    result = calculate_pipe_branching(PipeBranchDimensions(header_diameter=200, branch_diameter=100,
                                                           angle_deg=90, divisions=12))
    points = result.calculated["points"]
    assert len(points) == 13
    assert points[0]["angle_deg"] == 0.0
    assert points[-1]["angle_deg"] == 360.0
    assert min(p["height"] for p in points) == 0.0
    assert result.calculated["division_spacing"] == pytest.approx(math.pi * 100 / 12)


def test_pipe_branch_tee_depth():
    points = saddle_curve(200, 100, 90, 12)
    # Deepest cut at 90° around the branch: R - sqrt(R² - r²)
    assert points[3]["height"] == pytest.approx(100 - math.sqrt(100 ** 2 - 50 ** 2))
    assert points[0]["height"] == pytest.approx(points[6]["height"])


def test_pipe_branch_lateral_is_asymmetric():
    points = saddle_curve(200, 100, 45, 12)
    assert points[0]["height"] != pytest.approx(points[6]["height"])
    assert min(p["height"] for p in points) == 0.0


def test_pipe_branch_divisions_out_of_range_are_insufficient():
    huge = PipeBranchDimensions.model_validate({"headerDiameter": 200, "branchDiameter": 100, "divisions": "1e9"})
    assert calculate_pipe_branching(huge).is_empty
    assert calculate_pipe_branching(PipeBranchDimensions(header_diameter=200, branch_diameter=100,
                                                         divisions=361)).is_empty


def test_pipe_branch_guards():
    too_big = calculate_pipe_branching(PipeBranchDimensions(header_diameter=100, branch_diameter=200))
    assert too_big.error is not None
    flat = calculate_pipe_branching(PipeBranchDimensions(header_diameter=200, branch_diameter=100,
                                                         angle_deg=180))
    assert "between 0° and 180°" in flat.error
    assert calculate_pipe_branching(PipeBranchDimensions(header_diameter=200)).is_empty
