"""Utility helpers

Small shared helpers for rounding and display strings.
"""

import math
import time
from typing import Optional


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round halves away from zero for positive values (the shop-floor convention).

    Python's round() uses banker's rounding, which gives 2400 for 2450 pieces.
    """
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor


def round_to_step(value: float, step: int) -> int:
    """Round to the nearest multiple of ``step``."""
    return int(round_half_up(value / step)) * step


def parse_size(raw) -> float:
    """Parse a size field; sizes arrive as strings like '250' or '250 mm'.

    Unparseable input counts as 0 (an unfilled field).
    """
    if raw is None:
        return 0.0
    if isinstance(raw, (int, float)):
        return float(raw)
    text = str(raw).strip().lower().replace("mm", "").strip()
    try:
        return float(text)
    except ValueError:
        return 0.0


def format_size(size: float) -> str:
    """250.0 -> '250', 252.5 -> '252.5'"""
    return f"{size:g}"


def display_size(size: str, cutting_size: float = 0, job_type: Optional[str] = None, print_name: Optional[str] = None) -> str:
    """Dispatch-row label for a production plan, e.g. '300x450 (Rose)'."""
    label = f"{size}x{format_size(cutting_size)}" if cutting_size and cutting_size > 0 else str(size)
    if job_type == "Printing" and print_name:
        label = f"{label} ({print_name})"
    return label


def make_job_no(prefix: str) -> str:
    """Job numbers are the prefix plus the last four digits of the epoch millis."""
    return f"{prefix}-{str(int(time.time() * 1000))[-4:]}"
