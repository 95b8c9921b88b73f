"""Plant (tube + slitting) plan calculator

Turns a set of coil orders sharing one micron, a sizer (tube width) and a slit
roll length into the full production card:
- tube phase: 1 mtr weight, tube roll length, jumbo roll weight, production qty
- slitting phase: per-coil unit roll weight, rolls needed, metres required

All coils are slit in the same pass, so the run lasts until the coil needing
the most rolls is done (total_rolls = max rolls). When the coils need very
different run lengths (> SPLIT_RUN_THRESHOLD metres apart) the card flags a
split run.
"""

import logging
import math
from dataclasses import dataclass, field, asdict
from typing import List, Optional, Sequence

from .conversion import PLANT_DENSITY, coil_roll_weight, meters_for_weight, strip_weight, tube_meter_weight

logger = logging.getLogger(__name__)

SPLIT_RUN_THRESHOLD = 50.0  # metres


@dataclass
class Order:
    """One coil demand. Position in the order list is the coil number."""
    size: float
    quantity: float
    micron: Optional[float] = None
    order_id: Optional[int] = None
    is_multi_up: bool = False


@dataclass
class CoilBreakdown:
    coil_number: int
    size: float
    unit_roll_weight: float
    total_coil_weight: float
    rolls: int
    meters_required: float
    is_multi_up: bool = False
    order_id: Optional[int] = None


@dataclass
class PlanWarning:
    code: str
    message: str
    coil_number: Optional[int] = None
    field: Optional[str] = None


@dataclass
class SplitRunSuggestion:
    """Phase 1 runs every coil until the shortest finishes; phase 2 finishes the rest."""
    phase1_meters: float
    phase2_meters: float
    phase2_coils: List[int] = field(default_factory=list)


@dataclass
class PlanResult:
    micron: float
    sizer_width: float
    roll_length: float
    slitting_size: float
    combined_qty: float
    tube_1mtr_weight: float
    tube_roll_length: float
    jumbo_roll_weight: float
    production_qty: float
    total_rolls: int
    coil_breakdown: List[CoilBreakdown]
    max_meters_required: float
    min_meters_required: float
    needs_split_run: bool
    multi_up: bool = False
    split_run: Optional[SplitRunSuggestion] = None
    warnings: List[PlanWarning] = field(default_factory=list)

    def to_dict(self):
        return asdict(self)


def needs_split_run(max_meters: float, min_meters: float, threshold: float = SPLIT_RUN_THRESHOLD) -> bool:
    """Coil run lengths never match exactly; only a spread above the threshold counts."""
    return (max_meters - min_meters) > threshold


def _complete(orders: Sequence[Order], micron, sizer_width, roll_length) -> bool:
    if not orders:
        return False
    for value in (micron, sizer_width, roll_length):
        if value is None or value <= 0:
            return False
    if any(o.size is None or o.size <= 0 or o.quantity is None or o.quantity <= 0 for o in orders):
        return False
    return sum(o.size for o in orders) > 0 and sum(o.quantity for o in orders) > 0


def calculate_plant_plan(
    orders: Sequence[Order],
    micron: float,
    sizer_width: float,
    roll_length: float,
    split_threshold: float = SPLIT_RUN_THRESHOLD,
) -> Optional[PlanResult]:
    """Compute the production card for ``orders``.

    Returns None while any input is missing or not positive.
    """
    if not _complete(orders, micron, sizer_width, roll_length):
        return None

    slitting_size = sum(o.size for o in orders)
    total_qty = sum(o.quantity for o in orders)

    tube_1mtr_weight = tube_meter_weight(sizer_width, micron, PLANT_DENSITY)
    tube_roll_length = roll_length / 2
    jumbo_roll_weight = strip_weight(sizer_width, micron, tube_roll_length, PLANT_DENSITY)
    production_qty = total_qty / slitting_size * sizer_width

    warnings: List[PlanWarning] = []
    breakdown: List[CoilBreakdown] = []
    for number, order in enumerate(orders, start=1):
        unit_roll_weight = coil_roll_weight(order.size, micron, roll_length, PLANT_DENSITY) or 0.0
        rolls = int(math.ceil(order.quantity / unit_roll_weight)) if unit_roll_weight > 0 else 0
        if round(unit_roll_weight, 3) <= 0 or rolls <= 0:
            warnings.append(PlanWarning(
                code="non_positive_derived",
                coil_number=number,
                field="unit_roll_weight" if round(unit_roll_weight, 3) <= 0 else "rolls",
                message=f"Coil {number} ({order.size:g} mm): roll weight {unit_roll_weight:.6f} kg "
                        f"gives {rolls} rolls; check roll length and micron",
            ))
        breakdown.append(CoilBreakdown(
            coil_number=number,
            size=order.size,
            unit_roll_weight=unit_roll_weight,
            total_coil_weight=order.quantity,
            rolls=rolls,
            meters_required=meters_for_weight(order.quantity, order.size, micron, PLANT_DENSITY) or 0.0,
            is_multi_up=order.is_multi_up,
            order_id=order.order_id,
        ))

    for w in warnings:
        logger.warning("plant plan: %s", w.message)

    max_meters = max(c.meters_required for c in breakdown)
    min_meters = min(c.meters_required for c in breakdown)

    return PlanResult(
        micron=micron,
        sizer_width=sizer_width,
        roll_length=roll_length,
        slitting_size=slitting_size,
        combined_qty=total_qty,
        tube_1mtr_weight=tube_1mtr_weight,
        tube_roll_length=tube_roll_length,
        jumbo_roll_weight=jumbo_roll_weight,
        production_qty=production_qty,
        total_rolls=max(c.rolls for c in breakdown),
        coil_breakdown=breakdown,
        max_meters_required=max_meters,
        min_meters_required=min_meters,
        needs_split_run=needs_split_run(max_meters, min_meters, split_threshold),
        multi_up=any(o.is_multi_up for o in orders),
        warnings=warnings,
    )
