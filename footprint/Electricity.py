from __future__ import annotations

from typing import Literal

from .Parameters import electricity_parameters, time_constants

ElectricityUnit = Literal["kwh", "rupees", "bulbs"]

_GRID_EF_KG_PER_KWH = electricity_parameters["grid_ef_kgco2_per_kwh"]

# kg CO2 per input unit. kwh/rupees are monthly inputs, bulbs is a count.
_EF_KG_PER_UNIT = {
    "kwh": _GRID_EF_KG_PER_KWH,
    "rupees": _GRID_EF_KG_PER_KWH * electricity_parameters["kwh_per_rupee"],
    # bulb-year: W * days * hours / 1000 gives annual kWh per bulb
    "bulbs": (
        _GRID_EF_KG_PER_KWH
        * electricity_parameters["bulb_watts"]
        * electricity_parameters["bulb_days_per_month"]
        * electricity_parameters["bulb_hours_per_day"]
        / 1000
    ),
}

_MONTHLY_UNITS = frozenset({"kwh", "rupees"})

# Public list for UI dropdowns
ELECTRICITY_UNITS = ("kwh", "rupees", "bulbs")

__all__ = [
    "ElectricityUnit",
    "ELECTRICITY_UNITS",
    "electricity_emissions_kgco2",
]


def electricity_emissions_kgco2(usage: float, unit: ElectricityUnit = "kwh") -> float:
    """Annual electricity emissions (kg CO2, unrounded).

    kwh / rupees: monthly figure, annualized with x12.
    bulbs: number of bulbs, factor is already annual.
    """
    ef = _EF_KG_PER_UNIT[unit]
    if unit in _MONTHLY_UNITS:
        return float(usage * time_constants["months_per_year"] * ef)
    return float(usage * ef)
