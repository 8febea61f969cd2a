"""
Square-to-round transition calculator.

Weight and area use the shop approximation (average perimeter × average slant
height); volume uses the prismoid-style mixed formula. The true lengths of the
12-division triangulation are returned as well, together with the exact area of
that triangulated surface, so the layout and the weight estimate can be compared.
"""

import math

from ..schemas import CalculationResult, SquareToRoundDimensions
from ..weights import material_name, mm2_to_m2, mm3_to_liters, weight_from_area
from .base import all_positive, empty_result, make_result

CIRCLE_DIVISIONS = 12   # 3 per quadrant


def _triangle_area(a: tuple, b: tuple, c: tuple) -> float:
    ab = (b[0] - a[0], b[1] - a[1], b[2] - a[2])
    ac = (c[0] - a[0], c[1] - a[1], c[2] - a[2])
    cross = (
        ab[1] * ac[2] - ab[2] * ac[1],
        ab[2] * ac[0] - ab[0] * ac[2],
        ab[0] * ac[1] - ab[1] * ac[0],
    )
    return 0.5 * math.sqrt(cross[0] ** 2 + cross[1] ** 2 + cross[2] ** 2)


def triangulate(width: float, diameter: float, height: float) -> dict:
    """
    Triangulate the transition: every circle division connects to the nearest
    base corner, and each side of the square closes with one flat triangle.

    Returns the plan and true lengths of the lines from one corner to its four
    circle points (all four corners are identical by symmetry) and the total
    area of the triangulated surface in mm².
    """
    half = width / 2
    radius = diameter / 2
    per_quadrant = CIRCLE_DIVISIONS // 4

    circle = []
    for i in range(CIRCLE_DIVISIONS):
        angle = math.radians(i * 360.0 / CIRCLE_DIVISIONS)
        circle.append((radius * math.cos(angle), radius * math.sin(angle), height))

    corners = []
    for k in range(4):
        angle = math.radians(45.0 + 90.0 * k)
        corners.append((
            math.copysign(half, math.cos(angle)),
            math.copysign(half, math.sin(angle)),
            0.0,
        ))

    area = 0.0
    for k, corner in enumerate(corners):
        first = per_quadrant * k
        # Conical fan at the corner
        for i in range(first, first + per_quadrant):
            area += _triangle_area(corner, circle[i], circle[(i + 1) % CIRCLE_DIVISIONS])
        # Flat side triangle between this corner and the next
        next_corner = corners[(k + 1) % 4]
        shared = circle[(first + per_quadrant) % CIRCLE_DIVISIONS]
        area += _triangle_area(corner, next_corner, shared)

    corner = corners[0]
    plan_lengths = []
    true_lengths = []
    for i in range(per_quadrant + 1):
        point = circle[i % CIRCLE_DIVISIONS]
        plan = math.hypot(point[0] - corner[0], point[1] - corner[1])
        plan_lengths.append(plan)
        true_lengths.append(math.sqrt(plan ** 2 + height ** 2))

    return {
        "plan_lengths": plan_lengths,
        "true_lengths": true_lengths,
        "area_mm2": area,
    }


def calculate_square_to_round(dims: SquareToRoundDimensions, material: str = "steel") -> CalculationResult:
    width = dims.width
    diameter = dims.diameter
    height = dims.height
    thickness = max(dims.thickness, 0.0)

    if not all_positive(width, diameter, height):
        return empty_result()

    # Volume: prismoid mixed formula
    area_base = width * width
    area_top = math.pi * (diameter / 2) ** 2
    volume = (height / 3) * (area_base + area_top + math.sqrt(area_base * area_top))

    # Surface: average perimeter × average slant height
    perimeter_square = 4 * width
    perimeter_circle = math.pi * diameter
    slant_avg = math.sqrt(height ** 2 + ((width - diameter) / 2) ** 2)
    approx_area = ((perimeter_square + perimeter_circle) / 2) * slant_avg
    weight = weight_from_area(approx_area, thickness, material)

    layout = triangulate(width, diameter, height)
    true_lengths = layout["true_lengths"]

    metrics = {
        "Vertical Height": "%g mm" % height,
        "Square Base": "%g x %g mm" % (width, width),
        "Round Top": "Ø %g mm" % diameter,
        "Surface Area": "%.2f m²" % mm2_to_m2(approx_area),
        "Surface Area (triangulated)": "%.2f m²" % mm2_to_m2(layout["area_mm2"]),
        "True Lengths (1-4)": " / ".join("%.1f" % length for length in true_lengths) + " mm",
        "Internal Volume": "%.2f L" % mm3_to_liters(volume),
        "Estimated Weight": "%.2f kg" % weight,
    }

    steps = [
        "1. PREPARATION AND PLAN VIEW:\n"
        "   - Select a %s plate, %g mm thick.\n"
        "   - Draw the plan view full size or to scale: a %gx%g mm square with a Ø%g mm "
        "circle centred on it." % (material_name(material), thickness, width, width, diameter),

        "2. DIVISION AND TRIANGULATION:\n"
        "   - Divide the circle into %d equal parts (3 per quadrant).\n"
        "   - Join each circle point to the nearest corner of the square.\n"
        "   - This maps the transition into a series of triangles." % CIRCLE_DIVISIONS,

        "3. TRUE LENGTHS:\n"
        "   - Plan lines are not true length. Build a right triangle for each one:\n"
        "     • Vertical leg = part height (%g mm)\n"
        "     • Horizontal leg = length of the line in plan\n"
        "     • Hypotenuse = true length on the plate.\n"
        "   - True lengths from a corner: %s mm." % (
            height, ", ".join("%.1f" % length for length in true_lengths)),

        "4. FLAT PATTERN:\n"
        "   - Start from the seam line (usually the middle of one side of the square).\n"
        "   - Transfer the true lengths triangle by triangle, swinging arcs with a compass.\n"
        "   - Mark the bend lines at the square corners.",

        "5. FORMING:\n"
        "   - Make a light bend on the 4 lines that correspond to the square corners.\n"
        "   - The flat triangular sections stay flat.\n"
        "   - The conical corner sections are formed by hand or in the rolls, progressively.",

        "6. CLOSING:\n"
        "   - Bring the ends together. Check that the base is square and the top is round and level.\n"
        "   - Weld the seam and, if required, weld collars or flanges to the ends.",
    ]

    calculated = {
        "width": width,
        "diameter": diameter,
        "height": height,
        "slant_height_avg": slant_avg,
        "area_mm2": approx_area,
        "triangulated_area_mm2": layout["area_mm2"],
        "plan_lengths": layout["plan_lengths"],
        "true_lengths": true_lengths,
        "volume_mm3": volume,
        "weight_kg": weight,
    }
    return make_result(metrics, steps, calculated)
