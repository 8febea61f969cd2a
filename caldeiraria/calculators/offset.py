"""
Offset / bypass (dogleg) calculator.

Connects two parallel pipe runs displaced by `offset` (set) over a forward `run`.
Travel = diagonal; each end of the diagonal piece is mitred at half the deviation angle.
"""

import math

from ..schemas import CalculationResult, OffsetDimensions
from ..weights import material_name, mm2_to_m2, mm3_to_liters, weight_from_area
from .base import all_positive, empty_result, make_result


def calculate_offset(dims: OffsetDimensions, material: str = "steel") -> CalculationResult:
    diameter = dims.diameter
    offset = dims.offset
    run = dims.run
    thickness = max(dims.thickness, 0.0)

    if not all_positive(diameter, offset, run):
        return empty_result()

    travel = math.hypot(offset, run)
    angle_deg = math.degrees(math.atan2(offset, run))
    cut_angle = angle_deg / 2

    # Toe-to-heel distance of the mitre measured along the pipe
    full_cutback = diameter * math.tan(math.radians(cut_angle))

    circumference = math.pi * diameter
    lateral_area = circumference * travel
    weight = weight_from_area(lateral_area, thickness, material)
    volume = math.pi * (diameter / 2) ** 2 * travel

    metrics = {
        "Offset (Set)": "%g mm" % offset,
        "Run": "%g mm" % run,
        "Travel (diagonal)": "%.1f mm" % travel,
        "Deviation Angle": "%.2f°" % angle_deg,
        "Cut Angle": "%.2f°" % cut_angle,
        "Cut Back": "%.1f mm" % full_cutback,
        "Surface Area": "%.2f m²" % mm2_to_m2(lateral_area),
        "Internal Volume": "%.2f L" % mm3_to_liters(volume),
        "Estimated Weight": "%.2f kg" % weight,
    }

    steps = [
        "1. PREPARATION:\n"
        "   - Material: %s pipe, Ø%g mm, %g mm wall.\n"
        "   - Goal: join two parallel pipes with an offset of %g mm over a run of %g mm." % (
            material_name(material), diameter, thickness, offset, run),

        "2. TRAVEL:\n"
        "   - The connecting piece measures %.1f mm end to end.\n"
        "   - It leans %.2f° off the pipe line.\n"
        "   - Each end is cut at %.2f° (half the deviation angle)." % (travel, angle_deg, cut_angle),

        "3. MARKING THE CUT BACK:\n"
        "   - Mark the total length (%.1f mm) on the pipe.\n"
        "   - At each end mark the cut back of %.1f mm.\n"
        "   - IMPORTANT: the two cuts must be PARALLEL. Mark the cut back on opposite sides "
        "of the pipe (180° apart)." % (travel, full_cutback),

        "4. CUTTING:\n"
        "   - Cut to the marks. Use a wrap-around band to join the cut-back points smoothly.\n"
        "   - Deburr and bevel if required.",

        "5. ASSEMBLY:\n"
        "   - Position the diagonal piece. Check the distance between pipe centres is exactly %g mm.\n"
        "   - Check the forward run is %g mm.\n"
        "   - Tack, check alignment and weld." % (offset, run),
    ]

    calculated = {
        "diameter": diameter,
        "offset": offset,
        "run": run,
        "travel": travel,
        "angle_deg": angle_deg,
        "cut_angle": cut_angle,
        "full_cutback": full_cutback,
        "half_cutback": full_cutback / 2,
        "lateral_area_mm2": lateral_area,
        "volume_mm3": volume,
        "weight_kg": weight,
    }
    return make_result(metrics, steps, calculated)
