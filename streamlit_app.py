from __future__ import annotations

import json
import logging

import streamlit as st

from footprint.carbon import result_dict
from footprint.Electricity import ELECTRICITY_UNITS
from footprint.FoodEmissions import DIET_TYPES
from footprint.recommender import Tip, reduction_pct, total_potential_savings
from ui.chart import build_chart, category_icon
from ui.forms import (
    BOUNDS,
    DIET_LABELS,
    ELECTRICITY_UNIT_LABELS,
    build_inputs,
    electricity_label,
)
from ui.session import CalculatorSession

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger("streamlit_app")

st.set_page_config(page_title="Carbon Footprint Calculator", page_icon="🌱", layout="wide")
st.title("🌱 Carbon Footprint Calculator")

st.caption(
    "Calculate your household's annual CO₂ emissions and discover personalized ways "
    "to reduce your environmental impact"
)

# --------- Helpers ---------
DIFFICULTY_BADGES = {"Easy": "🟢 Easy", "Medium": "🟡 Medium", "Hard": "🔴 Hard"}


def get_session() -> CalculatorSession:
    if "calculator" not in st.session_state:
        st.session_state.calculator = CalculatorSession()
    return st.session_state.calculator


def render_tip(tip: Tip) -> None:
    with st.container(border=True):
        left, right = st.columns([5, 1])
        with left:
            st.markdown(
                f"{category_icon(tip.category)} **{tip.title}** "
                f"· {DIFFICULTY_BADGES.get(tip.difficulty, tip.difficulty)}"
            )
            st.write(tip.description)
            st.caption(f"💚 {tip.impact_text}")
        with right:
            st.markdown(f"### -{tip.savings_kg}")
            st.caption("kg CO₂")


session = get_session()

# --------- Sidebar inputs ---------
with st.sidebar:
    st.header("⚡ Electricity Usage")
    electricity_unit = st.selectbox(
        "Unit Type",
        list(ELECTRICITY_UNITS),
        index=list(ELECTRICITY_UNITS).index(session.inputs.electricity_unit),
        format_func=lambda u: ELECTRICITY_UNIT_LABELS[u],
    )
    electricity_usage = st.number_input(
        electricity_label(electricity_unit),
        min_value=BOUNDS.min_usage,
        max_value=BOUNDS.max_usage,
        value=float(session.inputs.electricity_usage),
        step=BOUNDS.usage_step,
    )

    st.divider()
    st.header("🚗 Transportation")
    driving_distance = st.number_input(
        "Weekly Driving Distance (km)",
        min_value=BOUNDS.min_distance,
        max_value=BOUNDS.max_distance,
        value=float(session.inputs.driving_distance),
        step=BOUNDS.distance_step,
    )

    st.divider()
    st.header("🍽️ Dietary Habits")
    diet_type = st.selectbox(
        "Diet Type",
        list(DIET_TYPES),
        index=list(DIET_TYPES).index(session.inputs.diet_type),
        format_func=lambda d: DIET_LABELS[d],
    )

    st.divider()
    run = st.button("Calculate My Carbon Footprint", type="primary", use_container_width=True)

# --------- Calculation ---------
session.update_inputs(build_inputs(electricity_usage, electricity_unit, driving_distance, diet_type))

if run:
    try:
        session.calculate()
    except Exception as e:
        logger.exception("Footprint calculation failed")
        st.error(f"Calculation error: {e}")

footprint = session.result()
if footprint is None:
    st.info("Enter your lifestyle inputs in the sidebar and press **Calculate My Carbon Footprint**.")
    st.stop()

# --------- Results ---------
st.metric("Annual CO₂ Emissions", f"{footprint.total:,} kg")
st.caption(f"🌳 Equivalent to {footprint.trees_needed():,} trees needed annually")

m1, m2, m3 = st.columns(3)
m1.metric(f"{category_icon('electricity')} Electricity", f"{footprint.electricity:,} kg")
m2.metric(f"{category_icon('transport')} Transport", f"{footprint.transport:,} kg")
m3.metric(f"{category_icon('food')} Food", f"{footprint.food:,} kg")

st.subheader("♻️ Emissions Breakdown")
st.plotly_chart(build_chart(footprint), use_container_width=True)

st.subheader("💡 Personalized Reduction Tips")
tips = session.tips
savings = total_potential_savings(tips)
s1, s2 = st.columns(2)
s1.metric("Potential Impact", f"{savings:,} kg")
s2.metric("Reduction", f"{reduction_pct(tips, footprint)}%")
st.caption("By following these tips, you could save this much CO₂ every year.")

for tip in tips:
    render_tip(tip)

st.success(
    "**Every small action counts!** Your commitment to reducing carbon emissions helps protect our planet "
    "for future generations. Start with the easy changes and gradually work towards the bigger ones."
)

st.download_button(
    "Download result JSON",
    data=json.dumps(result_dict(session.inputs, footprint, tips), indent=2, ensure_ascii=False),
    file_name="carbon_footprint.json",
    mime="application/json",
)
