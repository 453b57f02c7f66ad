"""
Recommender Tests

- Rule thresholds and non-exclusive firing
- Ranking, truncation and tie order
- Savings figures and the surfaced-only savings summary
"""

import pytest

from footprint.estimator import CarbonFootprint, UserInputs, estimate
from footprint.recommender import (
    MAX_TIPS,
    TIP_RULES,
    generate_candidates,
    recommend,
    reduction_pct,
    total_potential_savings,
    trees_to_plant,
)


# ==================== FIXTURES ====================

@pytest.fixture
def scenario_inputs():
    return UserInputs(electricity_usage=200, electricity_unit="kwh", driving_distance=150, diet_type="non-veg")


@pytest.fixture
def scenario_footprint(scenario_inputs):
    return estimate(scenario_inputs)


def titles(tips):
    return [t.title for t in tips]


def by_title(tips):
    return {t.title: t for t in tips}


# ==================== REFERENCE SCENARIO ====================

class TestReferenceScenario:

    def test_candidates(self, scenario_inputs, scenario_footprint):
        tips = by_title(generate_candidates(scenario_inputs, scenario_footprint))
        assert tips["Energy-Efficient Appliances"].savings_kg == 492
        assert tips["Meatless Mondays"].savings_kg == 42
        assert tips["Switch to LED Bulbs"].savings_kg == 295
        assert tips["Unplug Electronics"].savings_kg == 197
        assert tips["Use Public Transport"].savings_kg == 312
        assert tips["Combine Errands"].savings_kg == 234
        assert tips["Work from Home"].savings_kg == 468
        assert tips["Choose Local & Seasonal"].savings_kg == 91
        assert tips["Plant Trees"].savings_kg == 462
        assert "Reduce Meat Portions" not in tips

    def test_ranked_and_truncated(self, scenario_inputs, scenario_footprint):
        tips = recommend(scenario_inputs, scenario_footprint)
        assert titles(tips) == [
            "Energy-Efficient Appliances",
            "Work from Home",
            "Plant Trees",
            "Use Public Transport",
            "Switch to LED Bulbs",
            "Combine Errands",
        ]

    def test_potential_savings_counts_surfaced_tips_only(self, scenario_inputs, scenario_footprint):
        tips = recommend(scenario_inputs, scenario_footprint)
        assert total_potential_savings(tips) == 2263
        assert reduction_pct(tips, scenario_footprint) == 51
        all_candidates = generate_candidates(scenario_inputs, scenario_footprint)
        assert total_potential_savings(all_candidates) > total_potential_savings(tips)


# ==================== RULES ====================

class TestRules:

    def test_rule_table_order(self):
        assert [r.name for r in TIP_RULES][0] == "led_bulbs"
        assert [r.name for r in TIP_RULES][-1] == "plant_trees"
        assert len(TIP_RULES) == 10

    def test_thresholds_are_strict(self):
        inputs = UserInputs(driving_distance=100, diet_type="veg")
        fp = CarbonFootprint(electricity=500, transport=300, food=621, total=1421)
        assert titles(generate_candidates(inputs, fp)) == ["Plant Trees"]

    def test_thresholds_just_above(self):
        inputs = UserInputs(driving_distance=100.5, diet_type="veg")
        fp = CarbonFootprint(electricity=501, transport=301, food=621, total=1423)
        assert titles(generate_candidates(inputs, fp)) == [
            "Switch to LED Bulbs",
            "Unplug Electronics",
            "Use Public Transport",
            "Combine Errands",
            "Work from Home",
            "Plant Trees",
        ]

    def test_appliance_tip_needs_over_1000(self):
        inputs = UserInputs(diet_type="veg")
        assert "Energy-Efficient Appliances" not in titles(
            generate_candidates(inputs, CarbonFootprint(electricity=1000, food=621, total=1621))
        )
        assert "Energy-Efficient Appliances" in titles(
            generate_candidates(inputs, CarbonFootprint(electricity=1001, food=621, total=1622))
        )

    def test_mixed_diet(self):
        inputs = UserInputs(diet_type="mixed")
        tips = by_title(generate_candidates(inputs, estimate(inputs)))
        assert tips["Reduce Meat Portions"].savings_kg == 44
        assert "Meatless Mondays" not in tips

    def test_veg_diet_has_no_food_tips(self):
        inputs = UserInputs(diet_type="veg")
        assert all(t.category != "food" for t in generate_candidates(inputs, estimate(inputs)))

    def test_plant_trees_offsets_a_tenth(self):
        assert trees_to_plant(4441) == 21
        assert trees_to_plant(0) == 0
        assert trees_to_plant(220) == 1
        assert trees_to_plant(221) == 2

    def test_plant_trees_impact_text(self, scenario_inputs, scenario_footprint):
        tip = by_title(generate_candidates(scenario_inputs, scenario_footprint))["Plant Trees"]
        assert tip.impact_text == "Offset 462 kg CO₂ with 21 trees"
        assert tip.category == "electricity"

    def test_impact_text_matches_savings(self, scenario_inputs, scenario_footprint):
        for tip in generate_candidates(scenario_inputs, scenario_footprint):
            if tip.title != "Plant Trees":
                assert tip.impact_text == f"Save {tip.savings_kg} kg CO₂ annually"


# ==================== RANKING ====================

class TestRanking:

    @pytest.mark.parametrize(
        "inputs",
        [
            UserInputs(),
            UserInputs(electricity_usage=5000, electricity_unit="kwh", driving_distance=2000, diet_type="non-veg"),
            UserInputs(electricity_usage=80, electricity_unit="bulbs", driving_distance=40, diet_type="veg"),
            UserInputs(electricity_usage=3000, electricity_unit="rupees", driving_distance=400, diet_type="mixed"),
        ],
    )
    def test_capped_sorted_and_includes_trees(self, inputs):
        tips = recommend(inputs, estimate(inputs))
        assert len(tips) <= MAX_TIPS
        savings = [t.savings_kg for t in tips]
        assert savings == sorted(savings, reverse=True)
        assert "Plant Trees" in titles(tips)
        assert all(s >= 0 for s in savings)

    def test_ties_keep_rule_order(self):
        inputs = UserInputs(diet_type="veg")
        fp = CarbonFootprint(electricity=1000, transport=500, food=621, total=2121)
        tips = recommend(inputs, fp)
        assert titles(tips) == [
            "Plant Trees",
            "Switch to LED Bulbs",
            "Unplug Electronics",
            "Use Public Transport",
            "Combine Errands",
        ]
        assert [t.savings_kg for t in tips] == [220, 150, 100, 100, 75]

    def test_default_inputs(self):
        inputs = UserInputs()
        tips = recommend(inputs, estimate(inputs))
        assert titles(tips) == ["Plant Trees", "Reduce Meat Portions"]
        assert [t.savings_kg for t in tips] == [88, 44]

    def test_custom_limit(self, scenario_inputs, scenario_footprint):
        assert len(recommend(scenario_inputs, scenario_footprint, limit=3)) == 3

    def test_reduction_pct_zero_total(self):
        assert reduction_pct([], CarbonFootprint()) == 0
