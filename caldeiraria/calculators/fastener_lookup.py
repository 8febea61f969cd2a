"""
Fastener property tables: ISO metric coarse thread bolts.

BOLT_DATA:    nominal size -> thread pitch (mm), tensile stress area (mm²)
BOLT_CLASSES: property class -> yield / tensile strength (MPa)

Unlike materials there is no fallback here: a bolt that isn't in the table
is an error, never a guess.
"""

import logging
from types import MappingProxyType

logger = logging.getLogger(__name__)

BOLT_DATA = MappingProxyType({
    "M6": {"pitch": 1.0, "stress_area": 20.1},
    "M8": {"pitch": 1.25, "stress_area": 36.6},
    "M10": {"pitch": 1.5, "stress_area": 58.0},
    "M12": {"pitch": 1.75, "stress_area": 84.3},
    "M16": {"pitch": 2.0, "stress_area": 157.0},
    "M20": {"pitch": 2.5, "stress_area": 245.0},
    "M24": {"pitch": 3.0, "stress_area": 353.0},
    "M30": {"pitch": 3.5, "stress_area": 561.0},
    "M36": {"pitch": 4.0, "stress_area": 817.0},
})

BOLT_CLASSES = MappingProxyType({
    "4.6": {"yield_stress": 240.0, "tensile_stress": 400.0},
    "5.8": {"yield_stress": 400.0, "tensile_stress": 500.0},
    "8.8": {"yield_stress": 640.0, "tensile_stress": 800.0},
    "10.9": {"yield_stress": 900.0, "tensile_stress": 1000.0},
    "12.9": {"yield_stress": 1100.0, "tensile_stress": 1200.0},
})


class UnknownFastenerError(ValueError):
    """Raised for a bolt size or property class missing from the tables."""


class FastenerLookup:
    """
    Looks up bolt thread and strength data.
    Sizes are matched case-insensitively ("m12" == "M12").
    """

    def get_thread(self, size: str) -> dict:
        """
        Returns {"pitch", "stress_area", "nominal_diameter"} for a size like "M12".
        Raises UnknownFastenerError if the size isn't tabulated.
        """
        key = str(size or "").strip().upper()
        data = BOLT_DATA.get(key)
        if data is None:
            raise UnknownFastenerError(
                f"Unknown bolt size: {size}. Available: {list(BOLT_DATA.keys())}"
            )
        return {**data, "nominal_diameter": float(key[1:])}

    def get_strength(self, bolt_class: str) -> dict:
        """Returns {"yield_stress", "tensile_stress"} in MPa for a class like "8.8"."""
        key = str(bolt_class or "").strip()
        data = BOLT_CLASSES.get(key)
        if data is None:
            raise UnknownFastenerError(
                f"Unknown property class: {bolt_class}. Available: {list(BOLT_CLASSES.keys())}"
            )
        return dict(data)

    @staticmethod
    def sizes() -> list:
        return list(BOLT_DATA.keys())

    @staticmethod
    def classes() -> list:
        return list(BOLT_CLASSES.keys())
