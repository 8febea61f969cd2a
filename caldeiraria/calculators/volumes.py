"""
Tank and solid volume calculator: capacity and total surface area of
cylinders, boxes, spheres, cones and rectangular pyramids.
"""

import math

from ..models import VolumeShape
from ..schemas import CalculationResult, VolumeDimensions
from ..weights import mm2_to_m2, mm3_to_liters
from .base import all_positive, empty_result, make_result


def _cylinder(dims: VolumeDimensions):
    diameter, height = dims.diameter, dims.height
    if not all_positive(diameter, height):
        return None
    r = diameter / 2
    base_area = math.pi * r ** 2
    volume = base_area * height
    area = 2 * math.pi * r * (r + height)
    steps = [
        "1. GEOMETRY (CYLINDER):\n"
        "   - Right circular prism.\n"
        "   - Base: circle of radius r = %g mm.\n"
        "   - Height: h = %g mm." % (r, height),
        "2. BASE AREA:\n"
        "   - A_base = π × r²\n"
        "   - A_base = 3.1416 × %g² = %.0f mm²." % (r, base_area),
        "3. VOLUME:\n"
        "   - V = A_base × h\n"
        "   - V = %.0f × %g = %.0f mm³." % (base_area, height, volume),
        "4. SURFACE AREA:\n"
        "   - Lateral area = 2 × π × r × h\n"
        "   - Total area = 2 × A_base + lateral area = %.0f mm²." % area,
    ]
    return volume, area, steps


def _cone(dims: VolumeDimensions):
    diameter, height = dims.diameter, dims.height
    if not all_positive(diameter, height):
        return None
    r = diameter / 2
    slant = math.hypot(r, height)
    volume = math.pi * r ** 2 * height / 3
    area = math.pi * r * (r + slant)
    steps = [
        "1. GEOMETRY (CONE):\n"
        "   - Solid of revolution with a circular base and an apex.\n"
        "   - Base radius (r): %g mm.\n"
        "   - Height (h): %g mm." % (r, height),
        "2. SLANT HEIGHT (g):\n"
        "   - Hypotenuse of the right triangle formed by r and h.\n"
        "   - g = √(r² + h²) = %.1f mm." % slant,
        "3. VOLUME:\n"
        "   - A cone holds 1/3 of the cylinder with the same base and height.\n"
        "   - V = (π × r² × h) / 3 = %.0f mm³." % volume,
        "4. SURFACE AREA:\n"
        "   - Lateral area = π × r × g\n"
        "   - Total area = A_base + lateral area = %.0f mm²." % area,
    ]
    return volume, area, steps


def _box(dims: VolumeDimensions):
    width, length, height = dims.width, dims.length, dims.height
    if not all_positive(width, length, height):
        return None
    volume = width * length * height
    area = 2 * (length * width + length * height + width * height)
    steps = [
        "1. GEOMETRY (RECTANGULAR PRISM):\n"
        "   - Box with square sides.\n"
        "   - Length %g mm, width %g mm, height %g mm." % (length, width, height),
        "2. VOLUME:\n"
        "   - Product of the three dimensions.\n"
        "   - V = L × W × H = %.0f mm³." % volume,
        "3. SURFACE AREA:\n"
        "   - Sum of the 6 faces (3 pairs of equal faces).\n"
        "   - A = 2(LW) + 2(LH) + 2(WH) = %.0f mm²." % area,
    ]
    return volume, area, steps


def _pyramid(dims: VolumeDimensions):
    width, length, height = dims.width, dims.length, dims.height
    if not all_positive(width, length, height):
        return None
    volume = width * length * height / 3
    # Face heights: width-side triangles rise over half the length and vice versa
    slant_width_faces = math.hypot(height, length / 2)
    slant_length_faces = math.hypot(height, width / 2)
    lateral_area = width * slant_width_faces + length * slant_length_faces
    area = width * length + lateral_area
    steps = [
        "1. GEOMETRY (RECTANGULAR PYRAMID):\n"
        "   - Rectangular base with a centred apex.\n"
        "   - Base: %gx%g mm. Height: %g mm." % (length, width, height),
        "2. VOLUME:\n"
        "   - Like the cone, 1/3 of the matching prism.\n"
        "   - V = (base × height) / 3 = %.0f mm³." % volume,
        "3. LATERAL AREA:\n"
        "   - Sum of the 4 side triangles, using the slant height of each face.\n"
        "   - Lateral area = %.0f mm².\n"
        "   - Total area (with base) = %.0f mm²." % (lateral_area, area),
    ]
    return volume, area, steps


def _sphere(dims: VolumeDimensions):
    diameter = dims.diameter
    if not all_positive(diameter):
        return None
    r = diameter / 2
    volume = 4 / 3 * math.pi * r ** 3
    area = 4 * math.pi * r ** 2
    steps = [
        "1. GEOMETRY (SPHERE):\n"
        "   - Diameter: %g mm (radius r = %g mm)." % (diameter, r),
        "2. VOLUME:\n"
        "   - V = 4/3 × π × r³\n"
        "   - V = 1.333 × 3.1416 × %.0f = %.0f mm³." % (r ** 3, volume),
        "3. SURFACE AREA:\n"
        "   - A = 4 × π × r²\n"
        "   - A = 4 × 3.1416 × %.0f = %.0f mm²." % (r ** 2, area),
    ]
    return volume, area, steps


SOLIDS = {
    VolumeShape.CYLINDER: _cylinder,
    VolumeShape.CONE: _cone,
    VolumeShape.BOX: _box,
    VolumeShape.PYRAMID: _pyramid,
    VolumeShape.SPHERE: _sphere,
}


def calculate_volumes(dims: VolumeDimensions, material: str = "steel") -> CalculationResult:
    solved = SOLIDS[dims.sub_shape](dims)
    if solved is None:
        return empty_result()

    volume, area, steps = solved
    liters = mm3_to_liters(volume)
    area_m2 = mm2_to_m2(area)

    steps.append(
        "%d. CONVERSION:\n"
        "   - 1 litre = 1,000,000 mm³ (1 dm³).\n"
        "   - Capacity: %.0f / 1,000,000 = %.2f litres." % (len(steps) + 1, volume, liters)
    )

    metrics = {
        "Volume (litres)": "%.2f L" % liters,
        "Volume (m³)": "%.4f m³" % (liters / 1000),
        "Surface Area": "%.2f m²" % area_m2,
    }

    calculated = {
        "sub_shape": dims.sub_shape.value,
        "volume_mm3": volume,
        "area_mm2": area,
        "volume_liters": liters,
        "area_m2": area_m2,
    }
    return make_result(metrics, steps, calculated)
