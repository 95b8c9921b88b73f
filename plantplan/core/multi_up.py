"""Multi-up (re-slit) optimizer

When merged coils need very different run lengths, the coil that would finish
first keeps the machine running for nothing. Slitting that coil at double
width (same target weight) halves its metres per kilogram, so the first pass
runs longer for everyone; the wide coil is re-slit into two later.

optimize_multi_up is the single entry point used by previews, confirmations
and the calculation API.
"""

import logging
from dataclasses import replace
from typing import Iterable, List, Optional, Sequence

from .conversion import PLANT_DENSITY, meters_for_weight
from .exceptions import MicronMismatch
from .plant_plan import (
    SPLIT_RUN_THRESHOLD,
    Order,
    PlanResult,
    SplitRunSuggestion,
    calculate_plant_plan,
)

logger = logging.getLogger(__name__)


def ensure_same_micron(microns: Iterable[Optional[float]]) -> None:
    """Merged orders share one extrusion, so their micron must be identical."""
    known = [m for m in microns if m is not None]
    if len(set(known)) > 1:
        raise MicronMismatch(known)


def apply_multi_up(orders: Sequence[Order], micron: float) -> List[Order]:
    """Return a copy of ``orders`` with the shortest-running coil doubled in width.

    Ties go to the first order. Fewer than two orders, or incomplete sizes,
    leave the list unchanged.
    """
    processed = list(orders)
    if len(processed) < 2:
        return processed
    lengths = [meters_for_weight(o.quantity, o.size, micron, PLANT_DENSITY) for o in processed]
    if any(length is None for length in lengths):
        return processed
    idx = lengths.index(min(lengths))
    processed[idx] = replace(processed[idx], size=processed[idx].size * 2, is_multi_up=True)
    return processed


def split_run_suggestion(plan: PlanResult) -> SplitRunSuggestion:
    """Phase 1: all coils until the shortest is done. Phase 2: the rest finish alone."""
    return SplitRunSuggestion(
        phase1_meters=plan.min_meters_required,
        phase2_meters=plan.max_meters_required - plan.min_meters_required,
        phase2_coils=[
            c.coil_number for c in plan.coil_breakdown
            if c.meters_required > plan.min_meters_required
        ],
    )


def optimize_multi_up(
    orders: Sequence[Order],
    micron: float,
    roll_length: float,
    multi_up_enabled: bool,
    sizer_override: Optional[float] = None,
    split_threshold: float = SPLIT_RUN_THRESHOLD,
) -> Optional[PlanResult]:
    """Plan a merged run, optionally re-slitting the shortest coil.

    Raises MicronMismatch before any arithmetic when the orders carry
    different microns (or one differing from ``micron``). Returns None for
    incomplete input, like calculate_plant_plan.
    """
    ensure_same_micron([micron] + [o.micron for o in orders])

    processed = apply_multi_up(orders, micron) if multi_up_enabled else list(orders)
    sizer = sum(o.size for o in processed if o.size)
    if sizer_override is not None and sizer_override > 0:
        sizer = sizer_override

    plan = calculate_plant_plan(processed, micron, sizer, roll_length, split_threshold)
    if plan is None:
        return None

    plan.multi_up = multi_up_enabled
    if plan.needs_split_run:
        plan.split_run = split_run_suggestion(plan)
        logger.info(
            "split run suggested: %.0f m combined, %.0f m for coils %s",
            plan.split_run.phase1_meters,
            plan.split_run.phase2_meters,
            plan.split_run.phase2_coils,
        )
    return plan
