from __future__ import annotations

from dataclasses import dataclass
from typing import List

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from footprint.estimator import CarbonFootprint

CHART_TITLE = "Annual CO₂ Emissions by Category"

CATEGORY_COLORS = {
    "Electricity": "#f59e0b",  # amber
    "Transport": "#3b82f6",    # blue
    "Food": "#f97316",         # orange
}

CATEGORY_ICONS = {
    "Electricity": "⚡",
    "Transport": "🚗",
    "Food": "🍽️",
}


def category_icon(category: str) -> str:
    """Icon for a category key in any case ("food" or "Food")."""
    return CATEGORY_ICONS.get(category.title(), "🌱")


@dataclass(frozen=True)
class ChartRow:
    category: str
    icon: str
    color: str
    value: int
    share_pct: int

    @property
    def axis_label(self) -> str:
        return f"{self.icon} {self.category}"


def chart_rows(footprint: CarbonFootprint) -> List[ChartRow]:
    """One row per category with a positive value, in category order."""
    rows: List[ChartRow] = []
    for key, value in footprint.categories():
        if value <= 0:
            continue
        name = key.title()
        rows.append(
            ChartRow(
                category=name,
                icon=category_icon(key),
                color=CATEGORY_COLORS[name],
                value=int(value),
                share_pct=footprint.share_pct(key),
            )
        )
    return rows


def build_chart(footprint: CarbonFootprint) -> go.Figure:
    """Bar chart of the footprint breakdown.

    A new figure is built on every call; nothing carries over between renders.
    Hover shows the category, its annual kg and its share of the total.
    """
    rows = chart_rows(footprint)
    if not rows:
        fig = go.Figure()
        fig.update_layout(title=CHART_TITLE)
        return fig

    df = pd.DataFrame(
        {
            "label": [r.axis_label for r in rows],
            "category": [r.category for r in rows],
            "kg": [r.value for r in rows],
            "pct": [r.share_pct for r in rows],
        }
    )
    fig = px.bar(
        df,
        x="label",
        y="kg",
        color="category",
        color_discrete_map=CATEGORY_COLORS,
        custom_data=["category", "pct"],
        category_orders={"label": list(df["label"])},
        title=CHART_TITLE,
    )
    fig.update_traces(
        texttemplate="%{y} kg",
        textposition="inside",
        textfont_color="white",
        marker_line_color="white",
        marker_line_width=2,
        hovertemplate=(
            "<b>%{customdata[0]}</b><br>"
            "%{y} kg CO₂ annually<br>"
            "%{customdata[1]}% of total emissions"
            "<extra></extra>"
        ),
    )
    fig.update_layout(
        showlegend=False,
        xaxis_title="",
        yaxis_title="",
        yaxis_ticksuffix=" kg",
        yaxis_tickformat=",",
        bargap=0.3,
        transition_duration=1000,
    )
    return fig
