"""
Dimension records (calculator inputs) and the CalculationResult output contract.

Each shape gets its own fixed-field record. Form input is coerced once here:
numeric strings are parsed (decimal comma accepted), blank or garbage values
become the field default, unknown keys are dropped. Zero and negative values
pass through untouched: calculators treat them as "insufficient input".
"""

import enum
import math
from typing import Any, Dict, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel

from .config import settings
from .models import ArcInputMode, VolumeShape


# Larger than any shop part (mm, kg); beyond this float powers overflow
MAX_MAGNITUDE = 1e9


def parse_number(value, default: float = 0.0) -> float:
    """Parse a numeric value from user input. Handles '10', '10.5', '10,5'."""
    if value is None or isinstance(value, bool):
        return default
    try:
        number = float(str(value).strip().replace(",", "."))
    except (ValueError, TypeError):
        return default
    if not math.isfinite(number) or abs(number) > MAX_MAGNITUDE:
        return default
    return number


def _curve_divisions() -> int:
    return settings.CURVE_DIVISIONS


class DimensionRecord(BaseModel):
    """Base for all shape dimension records. Accepts snake_case or the form's camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )

    @field_validator("*", mode="before")
    @classmethod
    def _coerce_form_value(cls, value, info: ValidationInfo):
        field = cls.model_fields[info.field_name]
        annotation = field.annotation
        default = field.get_default(call_default_factory=True)

        if annotation in (float, int):
            number = parse_number(value, default)
            return int(number) if annotation is int else number
        if value is None or (isinstance(value, str) and not value.strip()):
            return default
        if annotation is str:
            return str(value).strip()
        if isinstance(annotation, type) and issubclass(annotation, enum.Enum) and isinstance(value, str):
            return value.strip().lower().replace("-", "_")
        return value


class CylinderDimensions(DimensionRecord):
    diameter: float = 0.0    # Internal diameter
    height: float = 0.0
    thickness: float = 0.0


class ConeDimensions(DimensionRecord):
    d1: float = 0.0          # Larger diameter
    d2: float = 0.0          # Smaller diameter (0 = full cone)
    height: float = 0.0      # Vertical height
    thickness: float = 0.0


class SquareToRoundDimensions(DimensionRecord):
    width: float = 0.0       # Square base side
    diameter: float = 0.0    # Round top
    height: float = 0.0
    thickness: float = 0.0


class ElbowDimensions(DimensionRecord):
    diameter: float = 0.0
    radius: float = 0.0      # Bend (centerline) radius
    angle: float = 90.0      # Total bend angle
    segments: int = 3
    thickness: float = 0.0
    divisions: int = Field(default_factory=_curve_divisions)


class OffsetDimensions(DimensionRecord):
    diameter: float = 0.0
    offset: float = 0.0      # Set (lateral displacement)
    run: float = 0.0         # Forward advance
    thickness: float = 0.0


class PipeBranchDimensions(DimensionRecord):
    header_diameter: float = 0.0
    branch_diameter: float = 0.0
    angle_deg: float = Field(90.0, validation_alias=AliasChoices("angle_deg", "angleDeg", "angle"))
    divisions: int = Field(default_factory=_curve_divisions)


class ArcDimensions(DimensionRecord):
    mode: ArcInputMode = ArcInputMode.CHORD_SAGITTA
    chord: float = 0.0
    sagitta: float = 0.0
    radius: float = 0.0


class BracketDimensions(DimensionRecord):
    height: float = 0.0      # Vertical leg
    base: float = 0.0        # Horizontal leg
    width: float = 0.0       # Profile width
    thickness: float = 0.0   # Profile thickness
    load: float = 0.0        # kg
    safety_factor: float = 2.0


class BoltDimensions(DimensionRecord):
    size: str = Field("M12", validation_alias=AliasChoices("size", "diameterStr", "diameter_str"))
    bolt_class: str = "8.8"
    count: int = 1
    load: float = 0.0        # Total applied load, kg


class StairsDimensions(DimensionRecord):
    height: float = 0.0      # Total rise
    base: float = 0.0        # Available horizontal run
    width: float = 800.0
    thickness: float = 0.0
    step_count: int = Field(0, validation_alias=AliasChoices("step_count", "stepCount", "steps"))


class PlateWeightDimensions(DimensionRecord):
    width: float = 0.0
    length: float = 0.0
    thickness: float = 0.0
    quantity: int = 1


class VolumeDimensions(DimensionRecord):
    sub_shape: VolumeShape = VolumeShape.CYLINDER
    diameter: float = 0.0
    height: float = 0.0
    width: float = 0.0
    length: float = 0.0


# --- Output contract ---

class TheorySection(BaseModel):
    title: str
    content: str


class CalculationResult(BaseModel):
    metrics: Dict[str, str] = Field(default_factory=dict)
    steps: List[str] = Field(default_factory=list)
    calculated: Dict[str, Any] = Field(default_factory=dict)
    theory: Optional[List[TheorySection]] = None
    error: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return not self.metrics and not self.steps


class CalculationRequest(BaseModel):
    dimensions: Dict[str, Any] = Field(default_factory=dict)
    material: Optional[str] = None


# --- API catalogue ---

class ShapeSummary(BaseModel):
    id: str
    title: str
    description: str
    application: str
    key_params: List[str]


class MaterialDensity(BaseModel):
    id: str
    name: str
    density: float           # kg/dm³
