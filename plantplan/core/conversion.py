"""Unit conversion for film production

Weight/length formulas shared by every planner. A strip of film weighs
``width_mm * micron * density`` kilograms per metre-equivalent unit; everything
else scales from that.

Each calculator owns its own factor; they are not interchangeable (see DESIGN.md):
- PLANT_DENSITY: plant tube / slitting plan
- CUTTING_DENSITY: printing and cutting jobs
- LABEL_FACTOR: label order entry (qty <-> meter)
- SLITTING_ROW_FACTOR: slitting floor meter estimate from net roll weight

Inputs that are missing or not positive mean the form is not filled in yet;
the functions return None instead of raising.
"""

from typing import Optional

from ..utils.helpers import round_half_up, round_to_step

PLANT_DENSITY = 0.00276
CUTTING_DENSITY = 0.00280
LABEL_FACTOR = 0.00138
SLITTING_ROW_FACTOR = 0.00139


def _positive(*values) -> bool:
    return all(v is not None and v > 0 for v in values)


def strip_weight(width_mm: float, micron: float, length_m: float, density: float = PLANT_DENSITY) -> Optional[float]:
    """Weight (kg) of a strip of film.

    Formula: width × micron × density for a 1 m strip, scaled by length / 1000.
    """
    if not _positive(width_mm, micron, length_m, density):
        return None
    return width_mm * micron * density * length_m / 1000


def tube_meter_weight(sizer_mm: float, micron: float, density: float = PLANT_DENSITY) -> Optional[float]:
    """Weight of the parent tube per 1000 m (displayed as "1 mtr weight")."""
    if not _positive(sizer_mm, micron, density):
        return None
    return sizer_mm * micron * density


def coil_roll_weight(width_mm: float, micron: float, roll_length_m: float, density: float = PLANT_DENSITY) -> Optional[float]:
    """Weight of one slit roll.

    Slit coils are single-layer, so half the tube density applies.
    """
    if not _positive(width_mm, micron, roll_length_m, density):
        return None
    return width_mm * micron * density / 2 * roll_length_m / 1000


def meters_for_weight(weight_kg: float, width_mm: float, micron: float, density: float = PLANT_DENSITY, layers: int = 2) -> Optional[float]:
    """Metres of film that weigh ``weight_kg``.

    ``layers=2`` gives the single-layer coil figure used by slitting plans
    (density / 2); ``layers=1`` is the printing/cutting form.
    """
    if not _positive(weight_kg, width_mm, micron, density):
        return None
    return weight_kg * 1000 / (width_mm * micron * (density / layers))


def weight_for_meters(length_m: float, width_mm: float, micron: float, density: float = CUTTING_DENSITY) -> Optional[float]:
    if not _positive(length_m, width_mm, micron, density):
        return None
    return width_mm * density * length_m * micron / 1000


def label_meter_for_qty(size_mm: float, micron: float, qty_kg: float) -> Optional[int]:
    """Label order entry: metres for a target quantity, rounded to whole metres."""
    if not _positive(size_mm, micron, qty_kg):
        return None
    meter = qty_kg / (micron * LABEL_FACTOR * (size_mm / 1000))
    return int(round_half_up(meter))


def label_qty_for_meter(size_mm: float, micron: float, meter: float) -> Optional[float]:
    """Label order entry: quantity (kg, 3 dp) for a metre length."""
    if not _positive(size_mm, micron, meter):
        return None
    return round_half_up((size_mm / 1000) * LABEL_FACTOR * meter * micron, 3)


def meter_from_net_weight(net_weight_kg: float, size_mm: float, micron: float) -> Optional[int]:
    """Estimate roll length on the slitting floor from the weighed net weight.

    Rounded to the nearest 10 m, the resolution operators record.
    """
    if not _positive(net_weight_kg, size_mm, micron):
        return None
    meter = net_weight_kg / micron / SLITTING_ROW_FACTOR / (size_mm / 1000)
    return round_to_step(meter, 10)
