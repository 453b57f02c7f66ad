from __future__ import annotations

from .Parameters import time_constants, transport_parameters

_CAR_EF_KG_PER_KM = transport_parameters["car_ef_kgco2_per_km"]

# Public constant (used by the work-from-home tip)
CAR_EF_KG_PER_KM = _CAR_EF_KG_PER_KM


def transport_emissions_kgco2(weekly_km: float) -> float:
    """Annual driving emissions (kg CO2, unrounded) from a weekly distance in km."""
    return float(weekly_km * time_constants["weeks_per_year"] * _CAR_EF_KG_PER_KM)
