from fastapi import APIRouter, HTTPException
from pydantic import ValidationError
from typing import List
import logging

from .. import schemas
from ..models import MaterialType
from ..calculators.registry import CALCULATOR_REGISTRY, has_calculator, run_calculation
from ..shape_info import describe
from ..weights import DENSITIES, material_name

logger = logging.getLogger(__name__)

router = APIRouter(tags=["calculations"])


@router.get("/shapes", response_model=List[schemas.ShapeSummary])
def list_shapes():
    """Catalogue of every registered calculator."""
    return [describe(shape) for shape in CALCULATOR_REGISTRY]


@router.get("/materials", response_model=List[schemas.MaterialDensity])
def list_materials():
    return [
        {"id": m.value, "name": material_name(m.value), "density": DENSITIES[m.value]}
        for m in MaterialType
    ]


@router.post("/calculate/{shape}", response_model=schemas.CalculationResult)
def calculate(shape: str, request: schemas.CalculationRequest):
    """
    Run one calculator.

    Empty and error results are normal 200 responses: the form is half filled
    in, or the geometry is impossible. Only an unknown shape (404) or a value
    no default can absorb (422) is an HTTP error.
    """
    if not has_calculator(shape):
        raise HTTPException(status_code=404, detail=f"Unknown shape: {shape}")
    try:
        return run_calculation(shape, request.dimensions, request.material)
    except ValidationError as e:
        logger.info("Rejected %s dimensions: %s", shape, e.errors(include_url=False))
        raise HTTPException(status_code=422, detail=e.errors(include_url=False, include_context=False))
