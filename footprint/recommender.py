"""Rule-based reduction tips.

Every rule in `TIP_RULES` is checked on its own (several can fire for the same
category). Fired tips are stably sorted by estimated savings, highest first, and
only the first `MAX_TIPS` are returned.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable, List, Literal, Sequence, Tuple

from .estimator import CarbonFootprint, UserInputs
from .FoodEmissions import MIXED_EF_PER_DAY, NON_VEG_EF_PER_DAY, VEG_EF_PER_DAY
from .Parameters import offset_parameters, time_constants
from .rounding import round_half_up
from .Transport import CAR_EF_KG_PER_KM

logger = logging.getLogger(__name__)

Difficulty = Literal["Easy", "Medium", "Hard"]
TipCategory = Literal["electricity", "transport", "food"]

MAX_TIPS = 6

# Thresholds (kg CO2/year unless noted)
_ELECTRICITY_TIP_THRESHOLD = 500
_APPLIANCE_TIP_THRESHOLD = 1000
_TRANSPORT_TIP_THRESHOLD = 300
_WFH_DISTANCE_THRESHOLD_KM = 100  # km/week

# Savings fractions
_LED_SAVING = 0.15
_UNPLUG_SAVING = 0.1
_APPLIANCE_SAVING = 0.25
_PUBLIC_TRANSPORT_SAVING = 0.2
_COMBINE_ERRANDS_SAVING = 0.15
_WFH_SAVING = 0.3
_LOCAL_FOOD_SAVING = 0.1
_MEAT_PORTION_SAVING = 0.3

_TREE_KG = offset_parameters["tree_absorption_kgco2_per_year"]
_TREE_SHARE = offset_parameters["tree_offset_share"]


@dataclass(frozen=True)
class Tip:
    title: str
    description: str
    impact_text: str
    savings_kg: int
    difficulty: Difficulty
    category: TipCategory


Predicate = Callable[[UserInputs, CarbonFootprint], bool]
Builder = Callable[[UserInputs, CarbonFootprint], Tip]


@dataclass(frozen=True)
class TipRule:
    name: str
    applies: Predicate
    build: Builder


def _saving_tip(title: str, description: str, savings: float, difficulty: Difficulty, category: TipCategory) -> Tip:
    kg = round_half_up(savings)
    return Tip(
        title=title,
        description=description,
        impact_text=f"Save {kg} kg CO₂ annually",
        savings_kg=kg,
        difficulty=difficulty,
        category=category,
    )


def trees_to_plant(total_kg: float) -> int:
    """Trees that offset a tenth of the annual total."""
    return int(math.ceil(total_kg / _TREE_KG / _TREE_SHARE))


# ---------------------------------------------------------------------
# Tip builders
# ---------------------------------------------------------------------
def _led_bulbs(inputs: UserInputs, fp: CarbonFootprint) -> Tip:
    return _saving_tip(
        "Switch to LED Bulbs",
        "Replace incandescent bulbs with LED bulbs to reduce electricity consumption by up to 80%",
        fp.electricity * _LED_SAVING,
        "Easy",
        "electricity",
    )


def _unplug_electronics(inputs: UserInputs, fp: CarbonFootprint) -> Tip:
    return _saving_tip(
        "Unplug Electronics",
        "Unplug devices when not in use to eliminate phantom power consumption",
        fp.electricity * _UNPLUG_SAVING,
        "Easy",
        "electricity",
    )


def _efficient_appliances(inputs: UserInputs, fp: CarbonFootprint) -> Tip:
    return _saving_tip(
        "Energy-Efficient Appliances",
        "Upgrade to 5-star rated appliances for significant energy savings",
        fp.electricity * _APPLIANCE_SAVING,
        "Hard",
        "electricity",
    )


def _public_transport(inputs: UserInputs, fp: CarbonFootprint) -> Tip:
    return _saving_tip(
        "Use Public Transport",
        "Replace 20% of car trips with public transport or carpooling",
        fp.transport * _PUBLIC_TRANSPORT_SAVING,
        "Medium",
        "transport",
    )


def _combine_errands(inputs: UserInputs, fp: CarbonFootprint) -> Tip:
    return _saving_tip(
        "Combine Errands",
        "Plan trips efficiently to reduce total driving distance by 15%",
        fp.transport * _COMBINE_ERRANDS_SAVING,
        "Easy",
        "transport",
    )


def _work_from_home(inputs: UserInputs, fp: CarbonFootprint) -> Tip:
    # Uses the raw weekly distance, not the rounded transport figure
    return _saving_tip(
        "Work from Home",
        "Work from home 1-2 days per week to reduce commuting",
        inputs.driving_distance * time_constants["weeks_per_year"] * CAR_EF_KG_PER_KM * _WFH_SAVING,
        "Medium",
        "transport",
    )


def _meatless_mondays(inputs: UserInputs, fp: CarbonFootprint) -> Tip:
    return _saving_tip(
        "Meatless Mondays",
        "Go vegetarian one day per week to reduce your food carbon footprint",
        (NON_VEG_EF_PER_DAY - VEG_EF_PER_DAY) * time_constants["weeks_per_year"],
        "Easy",
        "food",
    )


def _local_seasonal(inputs: UserInputs, fp: CarbonFootprint) -> Tip:
    return _saving_tip(
        "Choose Local & Seasonal",
        "Buy locally grown, seasonal produce to reduce transportation emissions",
        fp.food * _LOCAL_FOOD_SAVING,
        "Medium",
        "food",
    )


def _reduce_meat_portions(inputs: UserInputs, fp: CarbonFootprint) -> Tip:
    return _saving_tip(
        "Reduce Meat Portions",
        "Reduce meat consumption by 30% and increase plant-based meals",
        (MIXED_EF_PER_DAY - VEG_EF_PER_DAY) * time_constants["days_per_year"] * _MEAT_PORTION_SAVING,
        "Medium",
        "food",
    )


def _plant_trees(inputs: UserInputs, fp: CarbonFootprint) -> Tip:
    trees = trees_to_plant(fp.total)
    kg = _TREE_KG * trees
    return Tip(
        title="Plant Trees",
        description=f"Plant native trees in your area - each tree absorbs ~{_TREE_KG}kg CO₂ annually",
        impact_text=f"Offset {kg} kg CO₂ with {trees} trees",
        savings_kg=kg,
        difficulty="Medium",
        category="electricity",
    )


# Evaluated in order; the order is the tie-break for equal savings.
TIP_RULES: Tuple[TipRule, ...] = (
    TipRule("led_bulbs", lambda i, fp: fp.electricity > _ELECTRICITY_TIP_THRESHOLD, _led_bulbs),
    TipRule("unplug_electronics", lambda i, fp: fp.electricity > _ELECTRICITY_TIP_THRESHOLD, _unplug_electronics),
    TipRule("efficient_appliances", lambda i, fp: fp.electricity > _APPLIANCE_TIP_THRESHOLD, _efficient_appliances),
    TipRule("public_transport", lambda i, fp: fp.transport > _TRANSPORT_TIP_THRESHOLD, _public_transport),
    TipRule("combine_errands", lambda i, fp: fp.transport > _TRANSPORT_TIP_THRESHOLD, _combine_errands),
    TipRule("work_from_home", lambda i, fp: i.driving_distance > _WFH_DISTANCE_THRESHOLD_KM, _work_from_home),
    TipRule("meatless_mondays", lambda i, fp: i.diet_type == "non-veg", _meatless_mondays),
    TipRule("local_seasonal", lambda i, fp: i.diet_type == "non-veg", _local_seasonal),
    TipRule("reduce_meat_portions", lambda i, fp: i.diet_type == "mixed", _reduce_meat_portions),
    TipRule("plant_trees", lambda i, fp: True, _plant_trees),
)


def generate_candidates(
    inputs: UserInputs,
    footprint: CarbonFootprint,
    rules: Sequence[TipRule] = TIP_RULES,
) -> List[Tip]:
    """All tips whose rule fires, in rule order (unsorted, untruncated)."""
    return [rule.build(inputs, footprint) for rule in rules if rule.applies(inputs, footprint)]


def recommend(
    inputs: UserInputs,
    footprint: CarbonFootprint,
    *,
    limit: int = MAX_TIPS,
) -> List[Tip]:
    """Top tips by estimated savings (highest first, rule order on ties)."""
    candidates = generate_candidates(inputs, footprint)
    # sorted() is stable, so equal savings keep rule order
    ranked = sorted(candidates, key=lambda t: t.savings_kg, reverse=True)[:limit]
    logger.debug("Generated %d tip candidates, surfacing %d", len(candidates), len(ranked))
    return ranked


def total_potential_savings(tips: Sequence[Tip]) -> int:
    """Sum of savings over the surfaced tips only."""
    return sum(t.savings_kg for t in tips)


def reduction_pct(tips: Sequence[Tip], footprint: CarbonFootprint) -> int:
    if footprint.total <= 0:
        return 0
    return round_half_up(total_potential_savings(tips) / footprint.total * 100)
