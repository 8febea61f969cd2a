import enum


class ShapeType(str, enum.Enum):
    CYLINDER = "cylinder"
    CONE = "cone"
    SQUARE_TO_ROUND = "square_to_round"
    ELBOW = "elbow"
    OFFSET = "offset"
    PIPE_BRANCHING = "pipe_branching"
    ARC_CALCULATOR = "arc_calculator"
    BRACKET = "bracket"
    BOLTS = "bolts"
    STAIRS = "stairs"
    PLATE_WEIGHT = "plate_weight"
    VOLUMES = "volumes"

    @classmethod
    def parse(cls, value) -> "ShapeType":
        """Accepts enum members and the hyphenated ids used by the web front end."""
        if isinstance(value, cls):
            return value
        return cls(str(value).strip().lower().replace("-", "_"))


class MaterialType(str, enum.Enum):
    STEEL = "steel"
    GALVANIZED = "galvanized"
    STAINLESS = "stainless"
    ALUMINUM = "aluminum"
    COPPER = "copper"
    BRASS = "brass"
    BRONZE = "bronze"
    CAST_IRON = "cast_iron"
    NYLON = "nylon"


class ArcInputMode(str, enum.Enum):
    CHORD_SAGITTA = "chord_sagitta"
    RADIUS_CHORD = "radius_chord"


class VolumeShape(str, enum.Enum):
    CYLINDER = "cylinder"
    BOX = "box"
    SPHERE = "sphere"
    CONE = "cone"
    PYRAMID = "pyramid"


class SafetyStatus(str, enum.Enum):
    SAFE = "Safe"
    ALERT = "Alert"
    OVERLOAD = "Overload"
    NOT_EVALUATED = "N/A"
