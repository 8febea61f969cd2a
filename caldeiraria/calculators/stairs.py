"""
Straight industrial stair calculator: step layout and stringers.

Step count from an ideal 175 mm rise (unless given), then the exact rise and
run. Comfort check: Blondel's rule, 2·rise + run within 630-650 mm.
"""

import math

from ..schemas import CalculationResult, StairsDimensions
from ..weights import density_for, mm2_to_m2
from .base import empty_result, make_result

IDEAL_RISE = 175.0          # mm
DEFAULT_RUN = 280.0         # mm, used when no base length is given
BLONDEL_MIN = 630.0
BLONDEL_MAX = 650.0
STRINGER_COUNT = 2
STRINGER_DEPTH = 200.0      # mm, web height used for the plate-weight estimate

# Linear estimates when no plate thickness is given
STRINGER_KG_PER_M = 15.0    # Light C-channel
TREAD_KG_PER_M2 = 40.0      # Checker plate treads with supports


def blondel_ok(rise: float, run: float) -> bool:
    return BLONDEL_MIN <= 2 * rise + run <= BLONDEL_MAX


def calculate_stairs(dims: StairsDimensions, material: str = "steel") -> CalculationResult:
    height = dims.height
    width = max(dims.width, 0.0)
    thickness = max(dims.thickness, 0.0)

    if height <= 0:
        return empty_result()

    num_steps = dims.step_count if dims.step_count > 0 else max(math.floor(height / IDEAL_RISE + 0.5), 1)
    rise = height / num_steps

    if dims.base > 0:
        base = dims.base
        run = base / num_steps
    else:
        run = DEFAULT_RUN
        base = run * num_steps

    blondel = 2 * rise + run
    blondel_status = "Ideal" if blondel_ok(rise, run) else "Outside ideal (%g-%g)" % (BLONDEL_MIN, BLONDEL_MAX)

    angle_deg = math.degrees(math.atan2(height, base))
    stringer_length = math.hypot(height, base)
    total_stringer_length = stringer_length * STRINGER_COUNT
    total_step_length = num_steps * width

    # Developed plate: stringer webs + treads and risers
    stringer_area = stringer_length * STRINGER_DEPTH * STRINGER_COUNT
    step_area = num_steps * width * (run + rise)
    total_area = stringer_area + step_area

    if thickness > 0:
        weight = total_area * thickness * density_for(material) / 1_000_000.0
        weight_basis = "plate %g mm" % thickness
    else:
        weight = (total_stringer_length / 1000 * STRINGER_KG_PER_M
                  + total_step_length / 1000 * run / 1000 * TREAD_KG_PER_M2)
        weight_basis = "linear estimate"

    metrics = {
        "Total Height": "%g mm" % height,
        "Total Base": "%.0f mm" % base,
        "Number of Steps": "%d" % num_steps,
        "Rise": "%.1f mm" % rise,
        "Run (tread)": "%.1f mm" % run,
        "Blondel (2R+T)": "%.1f mm (%s)" % (blondel, blondel_status),
        "Slope Angle": "%.1f°" % angle_deg,
        "Total Stringer Length": "%.2f m" % (total_stringer_length / 1000),
        "Total Tread Length": "%.2f m" % (total_step_length / 1000),
        "Estimated Weight": "%.2f kg (%s)" % (weight, weight_basis),
    }

    steps = [
        "1. SITE SURVEY:\n"
        "   - Total height (floor to floor): %g mm.\n"
        "   - Available space (base): %.0f mm.\n"
        "   - Check that the lower floor and the upper slab are level." % (height, base),

        "2. CALCULATION AND CHECK:\n"
        "   - The stair has %d steps.\n"
        "   - Rise (step height): %.1f mm.\n"
        "   - Run (tread depth): %.1f mm.\n"
        "   - Blondel's rule (2R + T): %.1f mm (ideal: %g-%g mm)." % (
            num_steps, rise, run, blondel, BLONDEL_MIN, BLONDEL_MAX),

        "3. CUTTING THE STRINGERS:\n"
        "   - Material: U or I profile, length %.1f mm.\n"
        "   - Cut the ends at %.1f° so the stringer sits fully on the floor and the slab.\n"
        "   - TIP: cut both stringers together (mirrored) for symmetry." % (stringer_length, angle_deg),

        "4. MARKING THE STEPS:\n"
        "   - Use a framing square or a template.\n"
        "   - Step off the rise (%.1f) and the run (%.1f) along the stringer.\n"
        "   - Use a spirit level so the treads end up horizontal once the stair is inclined." % (rise, run),

        "5. ASSEMBLY AND INSTALLATION:\n"
        "   - Fit the tread brackets or weld the treads directly to the stringers.\n"
        "   - Place the stair. Fix the top (slab) first and check level before fixing the base.\n"
        "   - Install the handrail (mandatory) at 900 mm height.",
    ]

    calculated = {
        "height": height,
        "base": base,
        "width": width,
        "num_steps": num_steps,
        "rise": rise,
        "run": run,
        "blondel": blondel,
        "blondel_ok": blondel_ok(rise, run),
        "angle_deg": angle_deg,
        "stringer_length": stringer_length,
        "total_stringer_length": total_stringer_length,
        "total_step_length": total_step_length,
        "total_area_m2": mm2_to_m2(total_area),
        "weight_kg": weight,
    }
    return make_result(metrics, steps, calculated)
