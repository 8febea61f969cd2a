# Material density constants, kg/dm³ (equivalently g/cm³)
# Source: usual shop handbook values for sheet and tube stock

import logging
from types import MappingProxyType

logger = logging.getLogger(__name__)

DEFAULT_MATERIAL = "steel"

# Densities (kg/dm³)
DENSITIES = MappingProxyType({
    "steel": 7.85,
    "galvanized": 7.85,
    "stainless": 7.90,
    "aluminum": 2.70,
    "copper": 8.96,
    "brass": 8.73,
    "bronze": 8.80,
    "cast_iron": 7.20,
    "nylon": 1.15,
})

# Display names used in fabrication steps
MATERIAL_NAMES = MappingProxyType({
    "steel": "carbon steel",
    "galvanized": "galvanized steel",
    "stainless": "stainless steel",
    "aluminum": "aluminum",
    "copper": "copper",
    "brass": "brass",
    "bronze": "bronze",
    "cast_iron": "cast iron",
    "nylon": "nylon",
})

GRAVITY = 9.81  # m/s²

MM2_PER_M2 = 1_000_000.0
MM3_PER_LITER = 1_000_000.0


def density_for(material: str) -> float:
    """
    Density in kg/dm³ for a material id.
    Unknown ids fall back to steel, same as an unselected material on the shop floor.
    """
    density = DENSITIES.get(str(material or "").strip().lower())
    if density is None:
        logger.debug("Unknown material %r, using %s density", material, DEFAULT_MATERIAL)
        return DENSITIES[DEFAULT_MATERIAL]
    return density


def material_name(material: str) -> str:
    """Readable material name for step text."""
    key = str(material or "").strip().lower()
    return MATERIAL_NAMES.get(key, key or MATERIAL_NAMES[DEFAULT_MATERIAL])


def weight_from_area(area_mm2: float, thickness_mm: float, material: str = DEFAULT_MATERIAL) -> float:
    """
    Weight in kg of a sheet of the given developed area (mm²) and thickness (mm).
    mm³ × kg/dm³ / 1e6 = kg
    """
    return area_mm2 * thickness_mm * density_for(material) / 1_000_000.0


def weight_from_dimensions(
    length_mm: float,
    width_mm: float,
    thickness_mm: float,
    material: str = DEFAULT_MATERIAL,
) -> float:
    """Weight in kg of a solid rectangular plate. Use for plate, flat bar, profile strips."""
    return weight_from_area(length_mm * width_mm, thickness_mm, material)


def mm2_to_m2(area_mm2: float) -> float:
    return area_mm2 / MM2_PER_M2


def mm3_to_liters(volume_mm3: float) -> float:
    return volume_mm3 / MM3_PER_LITER


def kg_to_newtons(mass_kg: float) -> float:
    return mass_kg * GRAVITY


def kg_to_kilonewtons(mass_kg: float) -> float:
    return mass_kg * GRAVITY / 1000.0
