"""
Structural bracket (diagonal brace / knee brace) calculator.

Right triangle: vertical leg on the wall, horizontal leg carrying the load,
diagonal working as a two-force member. Axial stress in the diagonal is
checked against yield / safety factor.
"""

import math

from ..config import settings
from ..models import SafetyStatus
from ..schemas import BracketDimensions, CalculationResult
from ..weights import GRAVITY, kg_to_newtons, material_name, weight_from_dimensions
from .base import all_positive, empty_result, make_result


def calculate_bracket(dims: BracketDimensions, material: str = "steel") -> CalculationResult:
    height = dims.height
    base = dims.base
    width = max(dims.width, 0.0)
    thickness = max(dims.thickness, 0.0)
    load = max(dims.load, 0.0)
    safety_factor = dims.safety_factor
    yield_strength = settings.STRUCTURAL_YIELD_MPA

    if not all_positive(height, base, safety_factor):
        return empty_result()

    diagonal = math.hypot(height, base)
    angle_rad = math.atan2(height, base)       # Between base and diagonal
    angle_deg = math.degrees(angle_rad)
    top_angle_deg = 90.0 - angle_deg           # Between vertical and diagonal
    sin_angle = math.sin(angle_rad)

    # Two-force member: vertical component of the diagonal force carries the load
    force_kg = load / sin_angle
    force_n = kg_to_newtons(force_kg)

    section_area = width * thickness
    allowable = yield_strength / safety_factor
    stress = 0.0
    max_load_kg = 0.0
    status = SafetyStatus.NOT_EVALUATED
    if section_area > 0:
        stress = force_n / section_area
        status = SafetyStatus.OVERLOAD if stress > allowable else SafetyStatus.SAFE
        max_load_kg = allowable * section_area * sin_angle / GRAVITY

    weight = weight_from_dimensions(diagonal, width, thickness, material)
    total_length = height + base + diagonal

    metrics = {
        "Diagonal (hypotenuse)": "%.1f mm" % diagonal,
        "Base Angle": "%.2f°" % angle_deg,
        "Top Angle": "%.2f°" % top_angle_deg,
        "Total Profile Length": "%.1f mm" % total_length,
        "Diagonal Force": "%.1f kgf" % force_kg,
        "Axial Stress": "%.1f MPa" % stress,
        "Allowable Stress": "%.1f MPa" % allowable,
        "Safety Status": status.value,
        "Theoretical Max Load": "%.1f kg" % max_load_kg,
        "Weight (diagonal)": "%.2f kg" % weight,
    }

    steps = [
        "1. ANALYSIS AND PREPARATION:\n"
        "   - Profile: %gx%g mm %s.\n"
        "   - Design load: %g kg.\n"
        "   - Safety factor: %g.\n"
        "   - IMPORTANT: check that the wall or column it is fixed to can take this load." % (
            width, thickness, material_name(material), load, safety_factor),

        "2. STRUCTURAL CHECK:\n"
        "   - The diagonal measures %.1f mm.\n"
        "   - Axial force in the diagonal: %.1f kgf.\n"
        "   - Stress: %.1f MPa against %.1f MPa allowable. Status: %s." % (
            diagonal, force_kg, stress, allowable, status.value),

        "3. CUTTING THE PROFILES:\n"
        "   - Cut the diagonal to %.1f mm.\n"
        "   - Bottom (base) cut angle: %.2f°.\n"
        "   - Top cut angle: %.2f°." % (diagonal, angle_deg, top_angle_deg),

        "4. ASSEMBLY:\n"
        "   - Set the vertical (H) and horizontal (B) legs square (90°).\n"
        "   - Fit the diagonal. If the angles are right the joints close perfectly.\n"
        "   - Tack the corners.",

        "5. WELDING AND FINISHING:\n"
        "   - Weld all joints fully. For heavy loads use 7018 electrodes or MIG/MAG with good penetration.\n"
        "   - If needed, add a gusset plate in the inside corners for stiffness.\n"
        "   - Clean the welds and apply corrosion protection.",
    ]

    calculated = {
        "height": height,
        "base": base,
        "width": width,
        "diagonal": diagonal,
        "angle_deg": angle_deg,
        "top_angle_deg": top_angle_deg,
        "force_kg": force_kg,
        "stress_mpa": stress,
        "allowable_mpa": allowable,
        "status": status.value,
        "max_load_kg": max_load_kg,
        "weight_kg": weight,
    }
    return make_result(metrics, steps, calculated)
