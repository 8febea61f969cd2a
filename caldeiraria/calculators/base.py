"""
Shared helpers for all shape calculators.

Input: a shape DimensionRecord (from schemas.py) + material id
Output: CalculationResult (metrics / steps / calculated / theory)

Calculators are plain functions: no state, no I/O. These helpers build the
result contract and guard the division and inverse-trig edge cases.
"""

import logging
import math

from ..schemas import CalculationResult, TheorySection

logger = logging.getLogger(__name__)

EPSILON = 1e-9          # Generic near-zero guard
MAX_DIVISIONS = 360     # Template points per development
ERROR_LABEL = "Error"


def empty_result(steps: list = None) -> CalculationResult:
    """Insufficient input: the normal state while a form is still being filled in."""
    return CalculationResult(metrics={}, steps=steps or [], calculated={})


def error_result(message: str, calculated: dict = None, steps: list = None) -> CalculationResult:
    """Invalid lookup or impossible geometry. Never raise, report it."""
    logger.warning("Calculation rejected: %s", message)
    return CalculationResult(
        metrics={ERROR_LABEL: message},
        steps=steps or [],
        calculated=calculated or {},
        error=message,
    )


def make_result(metrics: dict, steps: list, calculated: dict,
                theory: list = None) -> CalculationResult:
    """Build the CalculationResult. theory is a list of (title, content) tuples."""
    sections = None
    if theory:
        sections = [TheorySection(title=title, content=content) for title, content in theory]
    return CalculationResult(metrics=metrics, steps=steps, calculated=calculated, theory=sections)


def all_positive(*values) -> bool:
    """True if every dimension is strictly positive."""
    return all(v > 0 for v in values)


def clamp(value: float, low: float = -1.0, high: float = 1.0) -> float:
    return max(low, min(high, value))


def safe_asin(value: float) -> float:
    """asin with the argument clamped to [-1, 1]; absorbs float overshoot near 90°."""
    return math.asin(clamp(value))


def safe_sqrt(value: float) -> float:
    """sqrt that treats tiny negative round-off as zero."""
    return math.sqrt(max(value, 0.0))


def is_near_zero(value: float, tolerance: float = EPSILON) -> bool:
    return abs(value) < tolerance


def sample_angles(divisions: int) -> list:
    """divisions + 1 equally spaced angles in degrees, 0 through 360 inclusive."""
    step = 360.0 / divisions
    angles = [i * step for i in range(divisions)]
    angles.append(360.0)
    return angles
