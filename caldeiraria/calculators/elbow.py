"""
Segmented (mitred) elbow calculator.

N segments → N-1 welded joints. Each joint turns the pipe by alpha/(N-1),
so each cut face leans beta = alpha / (2(N-1)) off the cross-section plane.
Interior segments carry a cut at both ends (span 2·beta); the two end
segments carry one cut, i.e. half an interior segment.
"""

import math

from ..schemas import CalculationResult, ElbowDimensions
from ..weights import material_name, mm2_to_m2, mm3_to_liters, weight_from_area
from .base import MAX_DIVISIONS, all_positive, empty_result, error_result, make_result, sample_angles

MIN_SEGMENTS = 2
MAX_CUT_ANGLE = 89.9    # tan() blows up at 90°
MIN_DIVISIONS = 4

THEORY = [
    ("Segment Angle",
     "A bend of α degrees built from N segments has N−1 joints. Each joint turns the pipe "
     "α/(N−1) degrees and each cut face leans half of that, β = α/(2(N−1))."),
    ("Back and Belly",
     "On the outside of the bend (back) the segment is longest: 2(R + D/2)·tan β. "
     "On the inside (belly) it is shortest: 2(R − D/2)·tan β."),
    ("Fish-Mouth Template",
     "Unrolled over the pipe circumference, the cut line is a cosine wave between the belly "
     "and back heights: h(φ) = belly + (back − belly)·(1 − cos φ)/2."),
]


def fish_mouth_curve(belly: float, back: float, circumference: float, divisions: int) -> list:
    """
    Sample the unrolled cut line of one segment.
    phi = 0 sits on the belly (inside of the bend), phi = 180 on the back.
    """
    points = []
    for angle in sample_angles(divisions):
        phi = math.radians(angle)
        points.append({
            "angle_deg": angle,
            "position": circumference * angle / 360.0,
            "height": belly + (back - belly) * (1 - math.cos(phi)) / 2,
        })
    return points


def calculate_elbow(dims: ElbowDimensions, material: str = "steel") -> CalculationResult:
    diameter = dims.diameter
    radius = dims.radius
    angle = dims.angle
    segments = dims.segments
    thickness = max(dims.thickness, 0.0)
    divisions = dims.divisions

    if (not all_positive(diameter, radius, angle)
            or not MIN_DIVISIONS <= divisions <= MAX_DIVISIONS):
        return empty_result()

    echo = {"diameter": diameter, "radius": radius, "segments": segments, "angle": angle}

    if segments < MIN_SEGMENTS:
        return error_result(
            "A segmented elbow needs at least %d segments (got %d)." % (MIN_SEGMENTS, segments),
            calculated=echo,
            steps=["Enter at least %d segments to calculate." % MIN_SEGMENTS],
        )
    if radius < diameter / 2:
        return error_result(
            "Bend radius %g mm is smaller than the pipe radius %g mm; the inside of the "
            "bend would overlap itself." % (radius, diameter / 2),
            calculated=echo,
        )

    joints = segments - 1
    joint_angle = angle / joints
    cut_angle = joint_angle / 2

    if cut_angle >= MAX_CUT_ANGLE:
        return error_result(
            "Cut angle %.2f° is too steep; add segments or reduce the bend angle." % cut_angle,
            calculated=echo,
        )

    tan_beta = math.tan(math.radians(cut_angle))
    r_outer = radius + diameter / 2
    r_inner = radius - diameter / 2

    # End segments (one cut) and full interior segments (two cuts)
    back_half = r_outer * tan_beta
    belly_half = r_inner * tan_beta
    back_full = 2 * back_half
    belly_full = 2 * belly_half

    circumference = math.pi * diameter
    centerline_length = math.pi * radius * angle / 180.0

    lateral_area = circumference * centerline_length
    weight = weight_from_area(lateral_area, thickness, material)
    volume = math.pi * (diameter / 2) ** 2 * centerline_length

    metrics = {
        "Bend Radius": "%g mm" % radius,
        "Total Angle": "%g°" % angle,
        "Segments": "%d" % segments,
        "Angle per Joint": "%.2f°" % joint_angle,
        "Cut Angle": "%.2f°" % cut_angle,
        "Cut Length (circumference)": "%.1f mm" % circumference,
        "Centerline Length (arc)": "%.1f mm" % centerline_length,
        "Back Height (segment)": "%.1f mm" % back_full,
        "Belly Height (segment)": "%.1f mm" % belly_full,
        "Surface Area": "%.2f m²" % mm2_to_m2(lateral_area),
        "Internal Volume": "%.2f L" % mm3_to_liters(volume),
        "Estimated Weight": "%.2f kg" % weight,
    }

    steps = [
        "1. PREPARATION:\n"
        "   - Material: %s pipe or plate, %g mm thick.\n"
        "   - The %g° bend is split into %d segments (%d joints).\n"
        "   - Cut angle of each face: %.2f°." % (
            material_name(material), thickness, angle, segments, joints, cut_angle),

        "2. TEMPLATE LAYOUT (DEVELOPMENT):\n"
        "   - Draw a straight line as long as the circumference: %.1f mm.\n"
        "   - Divide it into %d equal parts (points 0 to %d).\n"
        "   - At each point mark the height of the cosine curve, between the belly "
        "(%.1f mm) and the back (%.1f mm).\n"
        "   - Join the points with a flexible batten to get a smooth wave." % (
            circumference, divisions, divisions, belly_full, back_full),

        "3. CUTTING THE SEGMENTS:\n"
        "   - Wrap the template around the pipe (or mark the flat plate before rolling).\n"
        "   - Mark the cut line and the back centreline.\n"
        "   - Cut the %d segments. The first and last are half an interior segment "
        "(back %.1f mm, belly %.1f mm)." % (segments, back_half, belly_half),

        "4. FIT-UP AND ALIGNMENT:\n"
        "   - Position the first segment.\n"
        "   - Offer up the second segment rotated 180° to the first, long sides meet short sides.\n"
        "   - Check the angle between the axes is %.2f°." % joint_angle,

        "5. WELDING:\n"
        "   - Tack each joint at 4 points (crosswise).\n"
        "   - Check the total angle (%g°) and the radius (%g mm) before welding out.\n"
        "   - Weld each joint all round, controlling heat input to avoid distortion." % (angle, radius),
    ]

    calculated = {
        **echo,
        "joints": joints,
        "joint_angle": joint_angle,
        "cut_angle": cut_angle,
        "h_long_half": back_half,
        "h_short_half": belly_half,
        "h_long_full": back_full,
        "h_short_full": belly_full,
        "pipe_circumference": circumference,
        "centerline_length": centerline_length,
        "lateral_area_mm2": lateral_area,
        "volume_mm3": volume,
        "weight_kg": weight,
        "development_full": fish_mouth_curve(belly_full, back_full, circumference, divisions),
        "development_end": fish_mouth_curve(belly_half, back_half, circumference, divisions),
    }
    return make_result(metrics, steps, calculated, theory=THEORY)
