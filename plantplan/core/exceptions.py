"""Planning errors

Incomplete input is not an error: calculators return None for it.
"""

from typing import Iterable, List


class PlanningError(Exception):
    """Base class for rejections the operator has to acknowledge."""


class MicronMismatch(PlanningError):
    def __init__(self, microns: Iterable[float]):
        self.microns: List[float] = sorted(set(microns))
        super().__init__(f"Microns must match to merge (got {', '.join(f'{m:g}' for m in self.microns)})")


class StaleSelection(PlanningError):
    """Some selected orders were consumed by another confirmation."""

    def __init__(self, order_ids: Iterable):
        self.order_ids = sorted(order_ids)
        super().__init__(f"Orders no longer pending: {self.order_ids}. Re-select and preview again.")


class InvalidTransition(PlanningError):
    def __init__(self, current, action: str):
        self.current = current
        self.action = action
        state = getattr(current, "value", current)
        super().__init__(f"Cannot {action} a merge in state {state}")


class EmptySelection(PlanningError):
    def __init__(self):
        super().__init__("Select at least 1 order")


class IncompletePlan(PlanningError):
    """Confirm was attempted while the preview had no result."""

    def __init__(self):
        super().__init__("Complete all plan details before confirming")
