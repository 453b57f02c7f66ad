from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves rounding up (912.5 -> 913).

    Built-in ``round`` uses banker's rounding (912.5 -> 912), which would shift
    the food constants and the savings figures by one kg.
    """
    return int(math.floor(float(value) + 0.5))
