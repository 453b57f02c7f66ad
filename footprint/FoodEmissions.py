from __future__ import annotations

from typing import Literal

from .Parameters import food_parameters, time_constants

DietType = Literal["veg", "non-veg", "mixed"]

_DIET_EF_KG_PER_DAY = dict(food_parameters["diet_ef_kgco2_per_day"])

# Public constants (used by food tips and UI defaults)
DIET_TYPES = ("veg", "mixed", "non-veg")
VEG_EF_PER_DAY = _DIET_EF_KG_PER_DAY["veg"]
MIXED_EF_PER_DAY = _DIET_EF_KG_PER_DAY["mixed"]
NON_VEG_EF_PER_DAY = _DIET_EF_KG_PER_DAY["non-veg"]

__all__ = [
    "DietType",
    "DIET_TYPES",
    "VEG_EF_PER_DAY",
    "MIXED_EF_PER_DAY",
    "NON_VEG_EF_PER_DAY",
    "food_emissions_kgco2",
]


def food_emissions_kgco2(diet_type: DietType) -> float:
    """Annual food emissions (kg CO2, unrounded) for one person on the given diet."""
    return float(_DIET_EF_KG_PER_DAY[diet_type] * time_constants["days_per_year"])
