"""
Bolted joint calculator: group tensile capacity and tightening torque.

Capacity per bolt = stress area × class stress. Torque uses the short-form
T = K · d · F with K = 0.2 (dry, plain finish) and F = 75% of yield load.
"""

import logging

from ..models import SafetyStatus
from ..schemas import BoltDimensions, CalculationResult
from ..weights import kg_to_kilonewtons
from .base import empty_result, error_result, make_result
from .fastener_lookup import FastenerLookup, UnknownFastenerError

logger = logging.getLogger(__name__)

lookup = FastenerLookup()

NUT_FACTOR = 0.2         # Dry, as-received
PRELOAD_RATIO = 0.75     # Preload as a fraction of yield load
ALERT_THRESHOLD = 80.0   # % utilization
OVERLOAD_THRESHOLD = 100.0


def classify_utilization(utilization_pct: float) -> SafetyStatus:
    """Safe below 80%, Alert from 80% up to and including 100%, Overload above."""
    if utilization_pct > OVERLOAD_THRESHOLD:
        return SafetyStatus.OVERLOAD
    if utilization_pct >= ALERT_THRESHOLD:
        return SafetyStatus.ALERT
    return SafetyStatus.SAFE


def calculate_bolts(dims: BoltDimensions, material: str = "steel") -> CalculationResult:
    count = dims.count
    load_kn = kg_to_kilonewtons(max(dims.load, 0.0))

    try:
        thread = lookup.get_thread(dims.size)
        strength = lookup.get_strength(dims.bolt_class)
    except UnknownFastenerError as e:
        return error_result(str(e), calculated={"size": dims.size, "bolt_class": dims.bolt_class})

    if count < 1:
        return empty_result()

    size = dims.size.strip().upper()
    stress_area = thread["stress_area"]

    # Per bolt, kN
    yield_load = stress_area * strength["yield_stress"] / 1000.0
    tensile_load = stress_area * strength["tensile_stress"] / 1000.0
    group_yield = yield_load * count

    utilization = 0.0
    status = SafetyStatus.NOT_EVALUATED
    if load_kn > 0:
        utilization = load_kn / group_yield * 100.0
        status = classify_utilization(utilization)

    preload_n = yield_load * PRELOAD_RATIO * 1000.0
    diameter_m = thread["nominal_diameter"] / 1000.0
    torque = NUT_FACTOR * diameter_m * preload_n   # N·m

    if status == SafetyStatus.OVERLOAD:
        logger.info("Bolt group %d x %s %s overloaded: %.1f%%", count, size, dims.bolt_class, utilization)

    metrics = {
        "Size": "%s (pitch %g mm)" % (size, thread["pitch"]),
        "Stress Area": "%g mm²" % stress_area,
        "Property Class": dims.bolt_class,
        "Bolt Count": "%d" % count,
        "Working Load": "%.2f kN/bolt" % (load_kn / count),
        "Group Capacity (yield)": "%.1f kN" % group_yield,
        "Utilization": "%.1f%%" % utilization,
        "Status": status.value,
        "Recommended Torque (dry)": "%.1f N·m" % torque,
    }

    steps = [
        "IDENTIFICATION: %s bolt, class %s (%d off)." % (size, dims.bolt_class, count),
        "STRENGTH: each bolt carries %.1f kN at yield and %.1f kN at ultimate." % (yield_load, tensile_load),
        "CAPACITY: the group carries up to %.1f kN (yield)." % group_yield,
        "ANALYSIS: applied load %.2f kN. Utilization %.1f%%. Status: %s." % (
            load_kn, utilization, status.value),
        "ASSEMBLY: tighten to %.1f N·m (dry) to reach the correct preload." % torque,
    ]

    calculated = {
        "size": size,
        "bolt_class": dims.bolt_class,
        "pitch": thread["pitch"],
        "diameter_mm": thread["nominal_diameter"],
        "stress_area": stress_area,
        "count": count,
        "load_kn": load_kn,
        "yield_load_kn": yield_load,
        "tensile_load_kn": tensile_load,
        "group_yield_kn": group_yield,
        "utilization_pct": utilization,
        "status": status.value,
        "preload_kn": preload_n / 1000.0,
        "torque_nm": torque,
    }
    return make_result(metrics, steps, calculated)
