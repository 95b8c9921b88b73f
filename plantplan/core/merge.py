"""Merge workflow

SELECTING -> PREVIEWING -> CONFIRMED
                        -> CANCELLED (back to SELECTING, nothing written)

Sizer, roll length and multi-up can only be edited while PREVIEWING. A
confirmed merge is final; changes need a new plan from scratch.

The selection is a frozenset; select/deselect build a new set each time so a
preview computed from an older selection is never mutated underneath it.
"""

import logging
from enum import Enum
from typing import Callable, FrozenSet, Hashable, Optional, Sequence, TypeVar

from .exceptions import EmptySelection, IncompletePlan, InvalidTransition, StaleSelection
from .multi_up import ensure_same_micron, optimize_multi_up
from .plant_plan import SPLIT_RUN_THRESHOLD, Order, PlanResult

logger = logging.getLogger(__name__)

T = TypeVar("T")


class MergeState(str, Enum):
    SELECTING = "SELECTING"
    PREVIEWING = "PREVIEWING"
    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"


class MergeSession:
    def __init__(self, default_roll_length: float = 2000, split_threshold: float = SPLIT_RUN_THRESHOLD):
        self.state = MergeState.SELECTING
        self.selected: FrozenSet[Hashable] = frozenset()
        self.default_roll_length = default_roll_length
        self.split_threshold = split_threshold
        self.orders: Sequence[Order] = ()
        self.micron: Optional[float] = None
        self.sizer: Optional[float] = None
        self.roll_length: float = default_roll_length
        self.multi_up = False
        self.plan: Optional[PlanResult] = None

    def _require(self, action: str, *states: MergeState):
        if self.state not in states:
            raise InvalidTransition(self.state, action)

    def select(self, order_id: Hashable) -> FrozenSet[Hashable]:
        self._require("select orders in", MergeState.SELECTING)
        self.selected = self.selected | {order_id}
        return self.selected

    def deselect(self, order_id: Hashable) -> FrozenSet[Hashable]:
        self._require("deselect orders in", MergeState.SELECTING)
        self.selected = self.selected - {order_id}
        return self.selected

    def preview(self, orders: Sequence[Order]) -> Optional[PlanResult]:
        """Open the preview for the selected orders.

        ``orders`` are the current records for the selection, in coil order.
        Selected ids missing from ``orders`` were consumed elsewhere.
        """
        self._require("preview", MergeState.SELECTING)
        if not self.selected:
            raise EmptySelection()
        missing = self.selected - {o.order_id for o in orders}
        if missing:
            raise StaleSelection(missing)
        selected = tuple(o for o in orders if o.order_id in self.selected)
        ensure_same_micron(o.micron for o in selected)

        self.orders = selected
        self.micron = self.orders[0].micron
        self.sizer = None
        self.roll_length = self.default_roll_length
        self.multi_up = False
        self.state = MergeState.PREVIEWING
        return self._recalculate()

    def update_preview(
        self,
        sizer: Optional[float] = None,
        roll_length: Optional[float] = None,
        multi_up: Optional[bool] = None,
    ) -> Optional[PlanResult]:
        self._require("edit", MergeState.PREVIEWING)
        if multi_up is not None and multi_up != self.multi_up:
            self.multi_up = multi_up
            # toggling re-slit falls back to the suggested sizer
            self.sizer = None
        if sizer is not None:
            self.sizer = sizer if sizer > 0 else None
        if roll_length is not None:
            self.roll_length = roll_length
        return self._recalculate()

    def _recalculate(self) -> Optional[PlanResult]:
        self.plan = optimize_multi_up(
            self.orders,
            self.micron,
            self.roll_length,
            self.multi_up,
            sizer_override=self.sizer,
            split_threshold=self.split_threshold,
        )
        return self.plan

    def confirm(self, commit: Callable[[FrozenSet[Hashable], PlanResult], T]) -> T:
        """Freeze the preview through ``commit`` (which persists the job card).

        If ``commit`` raises, the session stays in PREVIEWING.
        """
        self._require("confirm", MergeState.PREVIEWING)
        if self.plan is None:
            raise IncompletePlan()
        result = commit(self.selected, self.plan)
        self.state = MergeState.CONFIRMED
        logger.info("merge confirmed for orders %s", sorted(self.selected))
        return result

    def cancel(self) -> MergeState:
        """Drop the preview and go back to selecting. Returns CANCELLED."""
        self._require("cancel", MergeState.PREVIEWING)
        self.plan = None
        self.orders = ()
        self.state = MergeState.SELECTING
        return MergeState.CANCELLED
