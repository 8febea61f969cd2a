"""
Cone / frustum calculator: flat pattern is an annular sector.

Development radii come from similar triangles: the apex-to-base generatrix
relates to the apex-to-top generatrix as R relates to r.
"""

import math

from ..schemas import CalculationResult, ConeDimensions
from ..weights import material_name, mm2_to_m2, mm3_to_liters, weight_from_area
from .base import all_positive, empty_result, error_result, make_result


# Below this radius difference (mm) the part is a cylinder, apex at infinity
DEGENERATE_RADIUS_DIFF = 0.01

THEORY = [
    ("Generatrix",
     "The generatrix (slant height) is the straight line on the cone surface joining the "
     "two circular edges. It is the hypotenuse of the vertical height and the radius difference."),
    ("Similar Triangles",
     "Extending the generatrix up to the apex gives two similar triangles. The development "
     "radius of each edge is its distance to the apex: R_dev = R·g / (R − r)."),
    ("Sweep Angle",
     "The arc of the pattern must equal the base circumference: θ = 360·R / R_dev."),
]


def calculate_cone(dims: ConeDimensions, material: str = "steel") -> CalculationResult:
    height = dims.height
    thickness = max(dims.thickness, 0.0)
    d_large = max(dims.d1, dims.d2)
    d_small = min(dims.d1, dims.d2)

    if dims.d1 < 0 or dims.d2 < 0 or not all_positive(d_large, height):
        return empty_result()

    R = d_large / 2
    r = d_small / 2

    slant = math.sqrt(height ** 2 + (R - r) ** 2)

    if R - r < DEGENERATE_RADIUS_DIFF:
        return error_result(
            "Diameters are equal (%.2f mm); this is a cylinder, the cone development "
            "is undefined. Use the cylinder calculator." % d_large,
            calculated={
                "degenerate": True,
                "R_dev": 0.0,
                "r_dev": 0.0,
                "theta": 0.0,
                "slant_height": slant,
            },
        )

    R_dev = R * slant / (R - r)
    r_dev = R_dev - slant
    theta = 360.0 * R / R_dev
    half_rad = math.radians(theta) / 2

    # Layout verification: chords and rises of both development arcs
    outer_chord = 2 * R_dev * math.sin(half_rad)
    inner_chord = 2 * r_dev * math.sin(half_rad)
    outer_sagitta = R_dev * (1 - math.cos(half_rad))
    inner_sagitta = r_dev * (1 - math.cos(half_rad))

    lateral_area = math.pi * (R + r) * slant
    weight = weight_from_area(lateral_area, thickness, material)
    volume = (math.pi * height / 3) * (R ** 2 + r ** 2 + R * r)

    metrics = {
        "Slant Height (g)": "%.2f mm" % slant,
        "Outer Radius (R)": "%.2f mm" % R_dev,
        "Inner Radius (r)": "%.2f mm" % r_dev,
        "Sweep Angle": "%.2f°" % theta,
        "Outer Chord (C)": "%.1f mm" % outer_chord,
        "Outer Sagitta (h2)": "%.1f mm" % outer_sagitta,
        "Lateral Area": "%.2f m²" % mm2_to_m2(lateral_area),
        "Internal Volume": "%.2f L" % mm3_to_liters(volume),
        "Estimated Weight": "%.2f kg" % weight,
    }
    if r_dev > 0:
        metrics["Inner Chord (A)"] = "%.1f mm" % inner_chord
        metrics["Inner Sagitta (h1)"] = "%.1f mm" % inner_sagitta

    steps = [
        "1. PREPARATION AND LAYOUT:\n"
        "   - Material: %s plate, %g mm thick.\n"
        "   - Mark a centre point \"O\" near the plate edge to save material.\n"
        "   - With a beam compass or a tape fixed at \"O\", scribe two arcs:\n"
        "     • Outer arc, radius = %.1f mm\n"
        "     • Inner arc, radius = %.1f mm" % (material_name(material), thickness, R_dev, r_dev),

        "2. SWEEP ANGLE (CHORD):\n"
        "   - The sweep angle is %.1f°.\n"
        "   - Without a protractor, step off the chord on the outer arc: C = %.1f mm.\n"
        "   - Check the rise of the outer arc over that chord: %.1f mm." % (theta, outer_chord, outer_sagitta),

        "3. CUTTING:\n"
        "   - Cut along both arcs and the two radial lines converging on the centre.\n"
        "   - TIP: leave 10-20 mm of extra stock on one straight edge if you need an overlap "
        "or fit-up allowance.",

        "4. ROLLING (TAPER):\n"
        "   - The small-radius side must travel slower than the large side.\n"
        "   - On parallel-roll machines brake the small side slightly or use an inclined stop.\n"
        "   - Check the curvature continuously with templates for both radii.",

        "5. CLOSING:\n"
        "   - Bring the straight edges together. Check the vertical height is %g mm.\n"
        "   - Tack, check the base is square on a flat surface, then weld out." % height,
    ]

    calculated = {
        "degenerate": False,
        "R_dev": R_dev,
        "r_dev": r_dev,
        "theta": theta,
        "slant_height": slant,
        "outer_chord": outer_chord,
        "inner_chord": inner_chord,
        "outer_sagitta": outer_sagitta,
        "inner_sagitta": inner_sagitta,
        "lateral_area_mm2": lateral_area,
        "volume_mm3": volume,
        "weight_kg": weight,
    }
    return make_result(metrics, steps, calculated, theory=THEORY)
