"""Household carbon footprint estimator (annual, kg CO2).

Converts three lifestyle inputs into annual emissions with fixed linear
emission factors:
- Electricity: monthly kWh, monthly bill in rupees, or a count of light bulbs
- Transport: weekly driving distance (km)
- Food: diet type (vegetarian, mixed, non-vegetarian)

Each category is rounded to whole kg on its own and the total is the sum of the
rounded categories, so `total` can differ by 1-2 kg from rounding the raw sum.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Dict, List, Tuple

from .Electricity import ElectricityUnit, electricity_emissions_kgco2
from .FoodEmissions import DietType, food_emissions_kgco2
from .Parameters import offset_parameters
from .rounding import round_half_up
from .Transport import transport_emissions_kgco2

logger = logging.getLogger(__name__)

CATEGORIES = ("electricity", "transport", "food")


@dataclass(frozen=True)
class UserInputs:
    # Electricity: monthly kWh / monthly rupees, or number of bulbs
    electricity_usage: float = 0.0
    electricity_unit: ElectricityUnit = "kwh"
    # Transport (km per week)
    driving_distance: float = 0.0
    # Food
    diet_type: DietType = "mixed"


@dataclass(frozen=True)
class CarbonFootprint:
    """Annual emissions per category, in whole kg CO2."""
    electricity: int = 0
    transport: int = 0
    food: int = 0
    total: int = 0

    def as_dict(self) -> Dict[str, int]:
        return asdict(self)

    def categories(self) -> List[Tuple[str, int]]:
        return [(name, getattr(self, name)) for name in CATEGORIES]

    def share_pct(self, category: str) -> int:
        """Percentage of the total for one category (0 when the total is 0)."""
        if self.total <= 0:
            return 0
        return round_half_up(getattr(self, category) / self.total * 100)

    def trees_needed(self) -> int:
        """Trees needed to absorb the whole annual total."""
        return round_half_up(self.total / offset_parameters["tree_absorption_kgco2_per_year"])


def estimate(inputs: UserInputs) -> CarbonFootprint:
    """Return the annual footprint for one set of inputs.

    Inputs are expected to be sanitized already (non-negative numbers, known tags).
    """
    logger.debug("Calculating carbon footprint with inputs: %s", inputs)

    # 1) Electricity (annualized per unit type)
    electricity = round_half_up(
        electricity_emissions_kgco2(inputs.electricity_usage, inputs.electricity_unit)
    )

    # 2) Transport (weekly km * 52)
    transport = round_half_up(transport_emissions_kgco2(inputs.driving_distance))

    # 3) Food (daily diet factor * 365)
    food = round_half_up(food_emissions_kgco2(inputs.diet_type))

    footprint = CarbonFootprint(
        electricity=electricity,
        transport=transport,
        food=food,
        total=electricity + transport + food,
    )
    logger.debug("Calculated footprint: %s", footprint)
    return footprint
