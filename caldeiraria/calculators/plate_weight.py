"""
Flat plate weight calculator. Weight = volume × density × quantity.
"""

from ..schemas import CalculationResult, PlateWeightDimensions
from ..weights import density_for, material_name, mm2_to_m2, weight_from_dimensions
from .base import all_positive, empty_result, make_result


def calculate_plate_weight(dims: PlateWeightDimensions, material: str = "steel") -> CalculationResult:
    width = dims.width
    length = dims.length
    thickness = dims.thickness
    quantity = dims.quantity

    if not all_positive(width, length, thickness, quantity):
        return empty_result(steps=["Enter the dimensions to calculate."])

    density = density_for(material)
    volume_mm3 = width * length * thickness
    volume_dm3 = volume_mm3 / 1_000_000.0
    weight = weight_from_dimensions(length, width, thickness, material)
    total_weight = weight * quantity

    area_m2 = mm2_to_m2(width * length)
    total_area_m2 = area_m2 * quantity

    metrics = {
        "Unit Weight": "%.2f kg" % weight,
        "Total Weight": "%.2f kg" % total_weight,
        "Quantity": "%d pcs" % quantity,
        "Unit Area": "%.2f m²" % area_m2,
        "Total Area": "%.2f m²" % total_area_m2,
        "Unit Volume": "%.4f dm³" % volume_dm3,
    }

    steps = [
        "1. MATERIAL:\n"
        "   - Dimensions: %g mm (width) x %g mm (length) x %g mm (thickness).\n"
        "   - Quantity: %d pieces.\n"
        "   - Material: %s." % (width, length, thickness, quantity, material_name(material)),

        "2. VOLUME:\n"
        "   - Unit volume = width x length x thickness.\n"
        "   - V = %g x %g x %g = %.0f mm³ (%.4f dm³)." % (width, length, thickness, volume_mm3, volume_dm3),

        "3. WEIGHT:\n"
        "   - Density: %g kg/dm³.\n"
        "   - Unit weight = volume (dm³) x density.\n"
        "   - W = %.4f x %g = %.2f kg." % (density, volume_dm3, density, weight),

        "4. TOTALS:\n"
        "   - Batch weight: %d x %.2f = %.2f kg.\n"
        "   - Total paint/surface area (one face): %.2f m²." % (quantity, weight, total_weight, total_area_m2),

        "5. PURCHASING TIP:\n"
        "   - Always allow for cutting loss (offcuts) when cutting from a larger sheet.",
    ]

    calculated = {
        "width": width,
        "length": length,
        "thickness": thickness,
        "quantity": quantity,
        "density": density,
        "weight_kg": weight,
        "total_weight_kg": total_weight,
        "total_area_m2": total_area_m2,
        "volume_dm3": volume_dm3,
    }
    return make_result(metrics, steps, calculated)
