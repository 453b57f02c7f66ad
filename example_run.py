import json
import logging

from footprint.carbon import calculate
from footprint.estimator import UserInputs

logging.basicConfig(level=logging.INFO)

inputs = UserInputs(
    electricity_usage=200,
    electricity_unit="kwh",
    driving_distance=150,
    diet_type="non-veg",
)

print(json.dumps(calculate(inputs), indent=2, ensure_ascii=False))
