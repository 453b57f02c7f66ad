from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from footprint.estimator import CarbonFootprint, UserInputs, estimate
from footprint.recommender import Tip, recommend


@dataclass
class CalculatorSession:
    """State owned by one browser session.

    `footprint` and `tips` are replaced together on each calculation and are
    only shown while `is_calculated` is True.
    """
    inputs: UserInputs = field(default_factory=UserInputs)
    footprint: CarbonFootprint = field(default_factory=CarbonFootprint)
    tips: List[Tip] = field(default_factory=list)
    is_calculated: bool = False

    def update_inputs(self, new_inputs: UserInputs) -> None:
        """Store edited inputs. Any change hides the previous result."""
        if new_inputs != self.inputs:
            self.inputs = new_inputs
            self.is_calculated = False

    def calculate(self) -> CarbonFootprint:
        footprint = estimate(self.inputs)
        self.footprint = footprint
        self.tips = recommend(self.inputs, footprint)
        self.is_calculated = True
        return footprint

    def result(self) -> Optional[CarbonFootprint]:
        return self.footprint if self.is_calculated else None
