"""
Arc / rolling calculator: radius, central angle and blank length for a rolled arc.

Two explicit input modes:
  chord_sagitta: R = C²/(8h) + h/2
  radius_chord:  h = R - sqrt(R² - (C/2)²), impossible when R < C/2
"""

import math

from ..models import ArcInputMode
from ..schemas import ArcDimensions, CalculationResult
from .base import all_positive, empty_result, error_result, make_result, safe_asin, safe_sqrt


def radius_from_chord_sagitta(chord: float, sagitta: float) -> float:
    return chord ** 2 / (8 * sagitta) + sagitta / 2


def sagitta_from_radius_chord(radius: float, chord: float) -> float:
    return radius - safe_sqrt(radius ** 2 - (chord / 2) ** 2)


def central_angle(chord: float, radius: float, major: bool = False) -> float:
    """Central angle in radians. major=True for arcs larger than a half circle."""
    theta = 2 * safe_asin(chord / (2 * radius))
    return 2 * math.pi - theta if major else theta


def calculate_arc(dims: ArcDimensions, material: str = "steel") -> CalculationResult:
    chord = dims.chord

    if dims.mode == ArcInputMode.RADIUS_CHORD:
        radius = dims.radius
        if not all_positive(radius, chord):
            return empty_result()
        if radius < chord / 2:
            return error_result(
                "Radius %g mm is smaller than half the chord (%g mm); no arc can span "
                "this chord." % (radius, chord / 2),
                calculated={"radius": radius, "chord": chord},
            )
        sagitta = sagitta_from_radius_chord(radius, chord)
    else:
        sagitta = dims.sagitta
        if not all_positive(chord, sagitta):
            return empty_result()
        radius = radius_from_chord_sagitta(chord, sagitta)

    angle_rad = central_angle(chord, radius, major=sagitta > radius)
    angle_deg = math.degrees(angle_rad)
    arc_length = radius * angle_rad

    metrics = {
        "Radius (R)": "%.1f mm" % radius,
        "Arc Length": "%.1f mm" % arc_length,
        "Central Angle": "%.1f°" % angle_deg,
        "Chord (C)": "%g mm" % chord,
        "Sagitta (h)": "%.1f mm" % sagitta,
    }

    steps = [
        "1. RADIUS:\n   - Roll this part to a radius of %.1f mm." % radius,
        "2. BLANK LENGTH:\n   - Cut the plate to a length of %.1f mm." % arc_length,
        "3. CHECK:\n   - After rolling, check the chord measures %g mm and the rise (sagitta) "
        "measures %.1f mm." % (chord, sagitta),
    ]

    calculated = {
        "mode": dims.mode.value,
        "radius": radius,
        "arc_length": arc_length,
        "angle_deg": angle_deg,
        "chord": chord,
        "sagitta": sagitta,
    }
    return make_result(metrics, steps, calculated)
