"""
Cylinder (tank shell) calculator.

Blank = circumference of the mean diameter × height. Rolled to the internal diameter.
"""

import math

from ..schemas import CalculationResult, CylinderDimensions
from ..weights import material_name, mm2_to_m2, mm3_to_liters, weight_from_area
from .base import all_positive, empty_result, make_result


def calculate_cylinder(dims: CylinderDimensions, material: str = "steel") -> CalculationResult:
    diameter = dims.diameter
    height = dims.height
    thickness = max(dims.thickness, 0.0)

    if not all_positive(diameter, height):
        return empty_result()

    mean_diameter = diameter + thickness
    external_diameter = diameter + 2 * thickness
    circumference = math.pi * mean_diameter   # Blank width (neutral fibre)

    # Shell weight: developed blank × thickness
    blank_area = circumference * height
    weight = weight_from_area(blank_area, thickness, material)

    # Capacity
    internal_volume = math.pi * (diameter / 2) ** 2 * height

    # External surface: lateral + both ends
    ext_radius = external_diameter / 2
    lateral_area = 2 * math.pi * ext_radius * height
    end_area = math.pi * ext_radius ** 2
    total_area = lateral_area + 2 * end_area

    metrics = {
        "Blank Size": "%.1f x %.1f mm" % (circumference, height),
        "Mean Diameter": "%.2f mm" % mean_diameter,
        "External Diameter": "%.2f mm" % external_diameter,
        "Cut Length (L)": "%.2f mm" % circumference,
        "Estimated Weight": "%.2f kg" % weight,
        "Internal Volume": "%.2f L" % mm3_to_liters(internal_volume),
        "Surface Area": "%.2f m²" % mm2_to_m2(total_area),
    }

    steps = [
        "PREPARATION: Select a %s plate, %g mm thick. Check that it is flat and free of defects." % (
            material_name(material), thickness),
        "LAYOUT: Mark a rectangle %.1f mm wide x %g mm high. "
        "Check squareness by measuring both diagonals; they must be equal." % (circumference, height),
        "CUTTING: Cut along the layout lines (shear, plasma or oxy-fuel). Deburr the edges.",
        "ROLLING: Feed the plate square to the rolls. Make progressive passes until the internal "
        "diameter reaches %g mm. Check roundness with a template." % diameter,
        "CLOSING: Prepare the edges for welding (bevel if needed). Tack the seam and check "
        "alignment before the final weld.",
    ]

    calculated = {
        "width": circumference,
        "height": height,
        "mean_diameter": mean_diameter,
        "external_diameter": external_diameter,
        "weight_kg": weight,
        "internal_volume_mm3": internal_volume,
        "surface_area_mm2": total_area,
    }
    return make_result(metrics, steps, calculated)
