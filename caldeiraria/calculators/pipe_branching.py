"""
Pipe branch / lateral calculator: "saddle" (fish-mouth) cut template.

The branch circumference is divided into N equal parts. At each division angle
phi the cut-back ordinate of the intersection of a header of radius R and a
branch of radius r meeting at angle alpha is

    y(phi) = (R - sqrt(R² - (r·sin phi)²)) / sin alpha  -  r·cos phi / tan alpha

The second term is the slope correction along the branch axis for laterals
(zero for a 90° tee). Ordinates are shifted so the lowest point is 0; that
point becomes the baseline of the printed template.
"""

import math

from ..schemas import CalculationResult, PipeBranchDimensions
from .base import (
    MAX_DIVISIONS,
    all_positive,
    empty_result,
    error_result,
    is_near_zero,
    make_result,
    safe_sqrt,
    sample_angles,
)

MIN_DIVISIONS = 4

THEORY = [
    ("Cylinder Intersection",
     "The fish-mouth is the curve where two cylinders (pipes) intersect. Its shape depends on "
     "both diameters and on the connection angle."),
    ("Cut Ordinates",
     "To lay out the cut, the branch is divided into equal parts and the height of the curve "
     "at each point is found with trigonometry (sine/cosine)."),
    ("Template",
     "The development is a wave that can be printed and wrapped around the branch to mark an "
     "accurate cut."),
]


def saddle_curve(header_diameter: float, branch_diameter: float, angle_deg: float,
                 divisions: int) -> list:
    """
    Sample one period of the branch cut curve.
    Returns divisions + 1 points (0° .. 360°, closing point included), heights
    normalised so the minimum is exactly 0.
    """
    R = header_diameter / 2
    r = branch_diameter / 2
    alpha = math.radians(angle_deg)
    sin_alpha = math.sin(alpha)
    tan_alpha = math.tan(alpha)
    circumference = math.pi * branch_diameter

    raw = []
    for angle in sample_angles(divisions):
        phi = math.radians(angle)
        depth = (R - safe_sqrt(R ** 2 - (r * math.sin(phi)) ** 2)) / sin_alpha
        slope_correction = r * math.cos(phi) / tan_alpha
        raw.append((angle, depth - slope_correction))

    lowest = min(height for _, height in raw)
    return [
        {
            "angle_deg": angle,
            "position": circumference * angle / 360.0,
            "height": height - lowest,
        }
        for angle, height in raw
    ]


def calculate_pipe_branching(dims: PipeBranchDimensions, material: str = "steel") -> CalculationResult:
    header_diameter = dims.header_diameter
    branch_diameter = dims.branch_diameter
    angle_deg = dims.angle_deg
    divisions = dims.divisions

    if (not all_positive(header_diameter, branch_diameter, angle_deg)
            or not MIN_DIVISIONS <= divisions <= MAX_DIVISIONS):
        return empty_result()

    echo = {
        "header_diameter": header_diameter,
        "branch_diameter": branch_diameter,
        "angle_deg": angle_deg,
    }

    if angle_deg >= 180.0 or is_near_zero(math.sin(math.radians(angle_deg))):
        return error_result(
            "Connection angle must be between 0° and 180° (got %g°)." % angle_deg,
            calculated=echo,
        )
    if branch_diameter > header_diameter:
        return error_result(
            "Branch Ø%g mm is larger than the header Ø%g mm; the branch cannot saddle "
            "onto the header. Use a reducer or swap the pipes." % (branch_diameter, header_diameter),
            calculated=echo,
        )

    points = saddle_curve(header_diameter, branch_diameter, angle_deg, divisions)
    circumference = math.pi * branch_diameter
    spacing = circumference / divisions
    max_height = max(p["height"] for p in points)

    metrics = {
        "Header Diameter": "%g mm" % header_diameter,
        "Branch Diameter": "%g mm" % branch_diameter,
        "Angle": "%g°" % angle_deg,
        "Development Length": "%.1f mm" % circumference,
        "Maximum Cut Height": "%.1f mm" % max_height,
    }

    ordinates = "\n".join(
        "     • Point %d (%.0f°): %.1f mm" % (i, p["angle_deg"], p["height"])
        for i, p in enumerate(points)
    )
    steps = [
        "1. LAYOUT:\n   - Draw a straight line as long as the branch circumference (%.1f mm)." % circumference,
        "2. DIVISION:\n   - Divide the line into %d equal parts (spacing %.1f mm)." % (divisions, spacing),
        "3. MARKING THE HEIGHTS:\n   - At each division point mark the height from the baseline:\n%s" % ordinates,
        "4. CUTTING:\n   - Join the points with a smooth curve to get the cutting template.",
    ]

    calculated = {
        **echo,
        "divisions": divisions,
        "branch_circumference": circumference,
        "division_spacing": spacing,
        "max_height": max_height,
        "points": points,
    }
    return make_result(metrics, steps, calculated, theory=THEORY)
