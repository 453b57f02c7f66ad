from __future__ import annotations

from dataclasses import asdict
from typing import Any, Dict, Sequence

from .estimator import CarbonFootprint, UserInputs, estimate
from .recommender import Tip, recommend, reduction_pct, total_potential_savings


def result_dict(inputs: UserInputs, footprint: CarbonFootprint, tips: Sequence[Tip]) -> Dict[str, Any]:
    """An already computed footprint and its tips as plain JSON-ready data."""
    return {
        "inputs": asdict(inputs),
        "footprint": footprint.as_dict(),
        "tips": [asdict(t) for t in tips],
        "total_potential_savings": total_potential_savings(tips),
        "reduction_pct": reduction_pct(tips, footprint),
        "trees_needed": footprint.trees_needed(),
    }


def calculate(inputs: UserInputs) -> Dict[str, Any]:
    """Footprint plus tips as plain JSON-ready data."""
    footprint = estimate(inputs)
    return result_dict(inputs, footprint, recommend(inputs, footprint))
