"""
Constituency map drill-down: municipalities, then one municipality's wards,
then the voters of one ward.

The drill position is a plain dict ({"municipality": ..., "ward": ...}) so it
can live in a dcc.Store. Every read goes through the engine's full-dataset map
aggregates, so the sidebar filters never hide an area.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import pandas as pd
import plotly.graph_objects as go

from voter_browser.core.base_view import BaseView
from voter_browser.core.engine import VoterEngine
from voter_browser.views.gender_view import GENDER_COLOURS
from voter_browser.views.municipality_view import short_municipality

DrillState = Dict[str, Optional[str]]

MAP_TITLE = "Constituency Map"


def drill_state(data: Optional[Dict[str, Any]] = None) -> DrillState:
    """Normalise a stored drill dict; a ward without a municipality is dropped."""
    data = data or {}
    municipality = data.get("municipality") or None
    ward = (data.get("ward") or None) if municipality else None
    return {"municipality": municipality, "ward": ward}


def drill_into(state: DrillState, clicked: str) -> DrillState:
    """
    Follow a click on the map graph. At the top level the clicked bar is a
    municipality; below that it is a ward of the selected municipality.
    """
    state = drill_state(state)
    if state["municipality"] is None:
        return {"municipality": clicked, "ward": None}
    return {"municipality": state["municipality"], "ward": clicked}


def drill_back(state: DrillState) -> DrillState:
    state = drill_state(state)
    if state["ward"] is not None:
        return {"municipality": state["municipality"], "ward": None}
    return drill_state()


def drill_title(state: DrillState) -> str:
    state = drill_state(state)
    if state["municipality"] is None:
        return MAP_TITLE
    if state["ward"] is None:
        return state["municipality"]
    return f"{state['municipality']} - {state['ward']}"


def back_label(state: DrillState) -> Optional[str]:
    """Caption for the back button, None at the top level."""
    state = drill_state(state)
    if state["municipality"] is None:
        return None
    return "Back to Wards" if state["ward"] is not None else "Back to Map"


def clicked_label(click_data: Optional[Dict[str, Any]]) -> Optional[str]:
    """Full municipality or ward label carried in a clicked bar's customdata."""
    points = (click_data or {}).get("points") or []
    if not points:
        return None
    custom = points[0].get("customdata")
    if isinstance(custom, (list, tuple)):
        custom = custom[0] if custom else None
    return str(custom) if custom else None


class ConstituencyMapView(BaseView):
    """
    Stacked male/female bars per municipality, or per ward once a municipality
    is selected. Each bar carries its full label in customdata for drilling.
    """

    id = "constituency_map"
    label = "Constituency Map"

    def __init__(self, engine: VoterEngine, municipality: Optional[str] = None):
        super().__init__(engine)
        self.municipality = municipality

    def compute_data(self) -> pd.DataFrame:
        if self.municipality is None:
            data = self.engine.map_municipality_stats()
            data["key"] = data["municipality"]
            data["bar_label"] = data["municipality"].map(short_municipality)
        else:
            data = self.engine.map_ward_stats(self.municipality)
            data["key"] = data["ward"]
            data["bar_label"] = data["ward"]
        return data

    def render_figure(self, data: pd.DataFrame) -> go.Figure:
        if data is None or data.empty:
            return self.empty_figure("No voter data loaded")

        fig = go.Figure()
        for column, name in (("male", "Male"), ("female", "Female"), ("other", "Other")):
            fig.add_bar(
                x=data["bar_label"],
                y=data[column],
                name=name,
                customdata=data[["key", "total"]].to_numpy(),
                hovertemplate="%{customdata[0]}<br>" + name + ": %{y}<br>Total: %{customdata[1]}<extra></extra>",
                marker_color=GENDER_COLOURS[name],
            )

        if self.municipality is None:
            title = "Click a municipality to explore wards"
        else:
            title = f"{len(data)} wards | {int(data['total'].sum())} total voters. Click a ward to list voters"
        fig.update_layout(
            barmode="stack",
            title=title,
            xaxis_title="",
            yaxis_title="# voters",
            margin=dict(l=40, r=20, t=50, b=40),
        )
        return fig
