"""Printing / cutting job calculator

Weight, meter length and piece count of one job are tied together. Whichever
field the operator edited last is the input; the other two are recomputed from
it every time. Size, micron, cutting size or job type changes recompute with
the same edited field.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..utils.helpers import round_half_up, round_to_step
from .conversion import CUTTING_DENSITY, weight_for_meters

JOB_TYPES = ["Printing", "Roll", "Winder", "St. Seal", "Round", "Open", "Intas"]

# checked in order, first substring match wins
ALLOWANCE_TABLE = (("seal", 5), ("round", 15))
DEFAULT_ALLOWANCE = 0
PRINTING_EXTRA_METER = 200
PIECE_ROUNDING = 100


class EditedField(str, Enum):
    weight = "weight"
    meter = "meter"
    pieces = "pieces"


@dataclass(frozen=True)
class EditedValue:
    field: EditedField
    value: float


@dataclass
class SingleOrderResult:
    weight: float
    meter: float
    pieces: int
    allowance: float = 0
    extra_meter: float = 0

    def to_dict(self):
        return {
            "weight": self.weight,
            "meter": self.meter,
            "pieces": self.pieces,
            "allowance": self.allowance,
            "extra_meter": self.extra_meter,
        }


def get_allowance(job_type: str) -> float:
    """Cutting allowance (mm) added to each piece for seals and round bottoms."""
    t = (job_type or "").lower()
    for needle, allowance in ALLOWANCE_TABLE:
        if needle in t:
            return allowance
    return DEFAULT_ALLOWANCE


def get_extra_meter(job_type: str) -> float:
    """Setup/waste metres reserved before pieces can be cut."""
    return PRINTING_EXTRA_METER if job_type == "Printing" else 0


def _pieces_from_meter(meter: float, effective_cut: float, extra_meter: float) -> int:
    if effective_cut <= 0:
        return 0
    available = meter - extra_meter if meter > extra_meter else 0
    pieces = round_to_step(available * 1000 / effective_cut, PIECE_ROUNDING)
    return pieces if pieces > 0 else 0


def _weight(size: float, micron: float, meter: float) -> float:
    weight = weight_for_meters(meter, size, micron, CUTTING_DENSITY)
    return round_half_up(weight, 3) if weight else 0.0


def calculate_single_order(
    size: float,
    micron: float,
    cutting_size: float,
    job_type: str,
    edited: EditedValue,
) -> Optional[SingleOrderResult]:
    """Recompute the two fields the operator did not edit.

    Returns None until size and micron are both positive.
    cutting_size <= 0 means the job is not cut to pieces; pieces is then 0.
    """
    if not size or not micron or size <= 0 or micron <= 0:
        return None

    allowance = get_allowance(job_type)
    extra_meter = get_extra_meter(job_type)
    effective_cut = cutting_size + allowance if cutting_size and cutting_size > 0 else 0
    value = edited.value if edited.value and edited.value > 0 else 0

    field = EditedField(edited.field)
    if field == EditedField.weight:
        raw_meter = value * 1000 / (size * micron * CUTTING_DENSITY)
        weight = value
        meter = int(math.floor(raw_meter))
        pieces = _pieces_from_meter(raw_meter, effective_cut, extra_meter)
    elif field == EditedField.pieces:
        pieces = int(value)
        total_meter = effective_cut * value / 1000 + extra_meter
        meter = int(math.ceil(total_meter))
        weight = _weight(size, micron, total_meter)
    else:
        meter = value
        weight = _weight(size, micron, value)
        pieces = _pieces_from_meter(value, effective_cut, extra_meter)

    return SingleOrderResult(
        weight=weight,
        meter=meter,
        pieces=pieces,
        allowance=allowance,
        extra_meter=extra_meter,
    )
