from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Optional

from footprint.Electricity import ELECTRICITY_UNITS
from footprint.estimator import UserInputs
from footprint.FoodEmissions import DIET_TYPES

ELECTRICITY_UNIT_LABELS: Dict[str, str] = {
    "kwh": "kWh (Units)",
    "rupees": "₹ (Rupees)",
    "bulbs": "Light Bulbs",
}

DIET_LABELS: Dict[str, str] = {
    "veg": "Vegetarian",
    "mixed": "Mixed Diet",
    "non-veg": "Non-Vegetarian",
}

_USAGE_LABELS = {
    "kwh": "Monthly Electricity Usage (kWh)",
    "rupees": "Monthly Electricity Bill (₹)",
    "bulbs": "Number of Light Bulbs",
}


@dataclass
class FormBounds:
    min_usage: float = 0.0
    usage_step: float = 1.0
    max_usage: float = 1e9
    min_distance: float = 0.0
    max_distance: float = 1e9
    distance_step: float = 5.0


BOUNDS = FormBounds()


def electricity_label(unit: str) -> str:
    return _USAGE_LABELS.get(unit, "Monthly Electricity Usage")


def sanitize_number(value: Any, upper: Optional[float] = None) -> float:
    """Coerce a raw form value to a float >= 0, capped at `upper` when given.

    Empty, unparsable, NaN, infinite and negative values all become 0.0.
    """
    if value is None:
        return 0.0
    try:
        x = float(value)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(x) or math.isinf(x) or x < 0:
        return 0.0
    if upper is not None and x > upper:
        return float(upper)
    return x


def build_inputs(
    electricity_usage: Any,
    electricity_unit: str,
    driving_distance: Any,
    diet_type: str,
) -> UserInputs:
    """Sanitize raw form values into estimator inputs."""
    if electricity_unit not in ELECTRICITY_UNITS:
        raise ValueError(f"Unknown electricity unit '{electricity_unit}'. Expected one of {ELECTRICITY_UNITS}.")
    if diet_type not in DIET_TYPES:
        raise ValueError(f"Unknown diet type '{diet_type}'. Expected one of {DIET_TYPES}.")

    return UserInputs(
        electricity_usage=sanitize_number(electricity_usage, BOUNDS.max_usage),
        electricity_unit=electricity_unit,  # type: ignore[arg-type]
        driving_distance=sanitize_number(driving_distance, BOUNDS.max_distance),
        diet_type=diet_type,  # type: ignore[arg-type]
    )
