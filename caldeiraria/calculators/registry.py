"""
Calculator registry: maps shape ids to calculator functions and their dimension records.
"""

import logging

from ..config import settings
from ..models import ShapeType
from ..schemas import (
    ArcDimensions,
    BoltDimensions,
    BracketDimensions,
    CalculationResult,
    ConeDimensions,
    CylinderDimensions,
    DimensionRecord,
    ElbowDimensions,
    OffsetDimensions,
    PipeBranchDimensions,
    PlateWeightDimensions,
    SquareToRoundDimensions,
    StairsDimensions,
    VolumeDimensions,
)
from .arc_calculator import calculate_arc
from .bolts import calculate_bolts
from .bracket import calculate_bracket
from .cone import calculate_cone
from .cylinder import calculate_cylinder
from .elbow import calculate_elbow
from .offset import calculate_offset
from .pipe_branching import calculate_pipe_branching
from .plate_weight import calculate_plate_weight
from .square_to_round import calculate_square_to_round
from .stairs import calculate_stairs
from .volumes import calculate_volumes

logger = logging.getLogger(__name__)

CALCULATOR_REGISTRY: dict = {
    ShapeType.CYLINDER: calculate_cylinder,
    ShapeType.CONE: calculate_cone,
    ShapeType.SQUARE_TO_ROUND: calculate_square_to_round,
    ShapeType.ELBOW: calculate_elbow,
    ShapeType.OFFSET: calculate_offset,
    ShapeType.PIPE_BRANCHING: calculate_pipe_branching,
    ShapeType.ARC_CALCULATOR: calculate_arc,
    ShapeType.BRACKET: calculate_bracket,
    ShapeType.BOLTS: calculate_bolts,
    ShapeType.STAIRS: calculate_stairs,
    ShapeType.PLATE_WEIGHT: calculate_plate_weight,
    ShapeType.VOLUMES: calculate_volumes,
}

DIMENSION_SCHEMAS: dict = {
    ShapeType.CYLINDER: CylinderDimensions,
    ShapeType.CONE: ConeDimensions,
    ShapeType.SQUARE_TO_ROUND: SquareToRoundDimensions,
    ShapeType.ELBOW: ElbowDimensions,
    ShapeType.OFFSET: OffsetDimensions,
    ShapeType.PIPE_BRANCHING: PipeBranchDimensions,
    ShapeType.ARC_CALCULATOR: ArcDimensions,
    ShapeType.BRACKET: BracketDimensions,
    ShapeType.BOLTS: BoltDimensions,
    ShapeType.STAIRS: StairsDimensions,
    ShapeType.PLATE_WEIGHT: PlateWeightDimensions,
    ShapeType.VOLUMES: VolumeDimensions,
}


def _resolve(shape) -> ShapeType:
    try:
        return ShapeType.parse(shape)
    except ValueError:
        raise ValueError(
            f"No calculator registered for shape: {shape}. "
            f"Available: {list_calculators()}"
        ) from None


def get_calculator(shape):
    """Returns the calculator function for a shape id, or raises ValueError."""
    return CALCULATOR_REGISTRY[_resolve(shape)]


def get_dimension_schema(shape) -> type:
    """Returns the dimension record class for a shape id, or raises ValueError."""
    return DIMENSION_SCHEMAS[_resolve(shape)]


def has_calculator(shape) -> bool:
    """Check if a calculator exists for a shape id."""
    try:
        _resolve(shape)
    except ValueError:
        return False
    return True


def list_calculators() -> list[str]:
    """List all registered shape ids."""
    return [shape.value for shape in CALCULATOR_REGISTRY]


def build_dimensions(shape, fields: dict) -> DimensionRecord:
    """Coerce raw form fields into the shape's dimension record.

    Raises pydantic.ValidationError for values no default can absorb
    (e.g. an unknown arc mode or volume sub-shape).
    """
    return get_dimension_schema(shape).model_validate(fields or {})


def run_calculation(shape, fields, material: str = None) -> CalculationResult:
    """Dispatch a calculation. `fields` may be a raw dict or an already-built record."""
    shape = _resolve(shape)
    if isinstance(fields, DimensionRecord):
        dims = fields
    else:
        dims = build_dimensions(shape, fields)
    material = material or settings.DEFAULT_MATERIAL
    logger.debug("Calculating %s with %s", shape.value, material)
    return CALCULATOR_REGISTRY[shape](dims, material)
