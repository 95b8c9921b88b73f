"""Production planning core

Pure calculation functions; no database or HTTP imports here.
"""

from .conversion import CUTTING_DENSITY, LABEL_FACTOR, PLANT_DENSITY, SLITTING_ROW_FACTOR
from .exceptions import (
    EmptySelection,
    IncompletePlan,
    InvalidTransition,
    MicronMismatch,
    PlanningError,
    StaleSelection,
)
from .merge import MergeSession, MergeState
from .multi_up import optimize_multi_up
from .plant_plan import Order, PlanResult, calculate_plant_plan
from .single_order import EditedField, EditedValue, calculate_single_order

__all__ = [
    "PLANT_DENSITY",
    "CUTTING_DENSITY",
    "LABEL_FACTOR",
    "SLITTING_ROW_FACTOR",
    "PlanningError",
    "MicronMismatch",
    "StaleSelection",
    "InvalidTransition",
    "EmptySelection",
    "IncompletePlan",
    "MergeSession",
    "MergeState",
    "optimize_multi_up",
    "Order",
    "PlanResult",
    "calculate_plant_plan",
    "EditedField",
    "EditedValue",
    "calculate_single_order",
]
