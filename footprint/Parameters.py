# ==========================
# Parameters.py
# ==========================

# ==========================
# Time basis
# ==========================
time_constants = {
    "months_per_year": 12,
    "weeks_per_year": 52,
    "days_per_year": 365,
}

# ==========================
# Electricity Parameters
# ==========================
electricity_parameters = {
    "grid_ef_kgco2_per_kwh": 0.82,  # Regional grid average (India)
    "kwh_per_rupee": 0.15,          # Rough tariff conversion, 1 rupee ~ 0.15 kWh
    "bulb_watts": 5,                # LED bulb rating (W)
    "bulb_days_per_month": 30,      # Days counted per bulb-month
    "bulb_hours_per_day": 12,       # Hours lit per day
}

# ==========================
# Transport Parameters
# ==========================
transport_parameters = {
    "car_ef_kgco2_per_km": 0.2,     # Average passenger car
}

# ==========================
# Food Parameters
# ==========================
food_parameters = {
    "diet_ef_kgco2_per_day": {      # kg CO2 per person per day
        "veg": 1.7,
        "non-veg": 2.5,
        "mixed": 2.1,
    },
}

# ==========================
# Offset Parameters
# ==========================
offset_parameters = {
    "tree_absorption_kgco2_per_year": 22,  # One mature tree, kg CO2 absorbed per year
    "tree_offset_share": 10,               # Plant trees for a tenth of the footprint
}


"""
References

1. Grid emission factor:

Central Electricity Authority (CEA), India - CO2 Baseline Database for the Indian Power Sector.
0.82 kg CO2/kWh is the rounded weighted average used for household estimates.

2. Passenger car factor:

Average petrol car tailpipe emissions, ~0.2 kg CO2/km (DEFRA conversion factors, small/medium car).

3. Diet factors:

Scarborough, P., et al. (2014). Dietary greenhouse gas emissions of meat-eaters, fish-eaters,
vegetarians and vegans in the UK. Climatic Change, 125(2), 179-192.
Values are rounded per-day estimates for vegetarian, mixed and meat-heavy diets.

4. Tree absorption:

~22 kg CO2 per tree per year is the commonly quoted figure for a mature broadleaf tree
(European Environment Agency).
"""
