from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, List, Optional, Tuple

import dash
import plotly.graph_objs as go
from dash import Input, Output, State

from voter_browser.core.engine import VoterEngine
from voter_browser.ui.helpers import selected_voter_id, voter_card
from voter_browser.ui.ids import IDs
from voter_browser.ui.layout.build_map_panel import MAP_VOTER_COLUMNS
from voter_browser.views.map_view import (
    ConstituencyMapView,
    DrillState,
    back_label,
    clicked_label,
    drill_back,
    drill_into,
    drill_state,
    drill_title,
)

if TYPE_CHECKING:
    from voter_browser.ui.context import AppContext

logger = logging.getLogger(__name__)

HIDDEN = {"display": "none"}
SHOWN: dict = {}


def render_map(engine: VoterEngine, state: DrillState) -> Tuple[go.Figure, str, Optional[str], List[dict]]:
    """
    Everything the map page shows for one drill position: the bar figure, the
    breadcrumb title, the back button caption and the selected ward's voters.
    """
    state = drill_state(state)
    municipality, ward = state["municipality"], state["ward"]

    figure = ConstituencyMapView(engine, municipality).figure()
    rows: List[dict] = []
    if municipality is not None and ward is not None:
        voters = engine.ward_voters(municipality, ward)
        rows = [dict(r, id=r["voter_id"]) for r in voters[list(MAP_VOTER_COLUMNS)].to_dict("records")]

    return figure, drill_title(state), back_label(state), rows


def register_map_callbacks(app: dash.Dash, ctx: AppContext) -> None:
    engine = ctx.engine

    # ---------------------------------------------------------
    # Drill position: bar clicks go down, the back button goes up,
    # a new dataset starts over at the top
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.MAP_DRILL, "data"),
        Input(IDs.Control.MAP_GRAPH, "clickData"),
        Input(IDs.Control.MAP_BACK_BTN, "n_clicks"),
        Input(IDs.Store.DATASET_VERSION, "data"),
        State(IDs.Store.MAP_DRILL, "data"),
        prevent_initial_call=True,
    )
    def update_drill(click_data, _back_clicks, _version, drill_data: dict[str, Any] | None):
        triggered = dash.ctx.triggered_id
        state = drill_state(drill_data)

        if triggered == IDs.Control.MAP_BACK_BTN:
            return drill_back(state)
        if triggered == IDs.Control.MAP_GRAPH:
            clicked = clicked_label(click_data)
            if clicked is None:
                return dash.no_update
            logger.debug("Map drill", extra={"clicked": clicked, "from": state})
            return drill_into(state, clicked)
        return drill_state()

    # ---------------------------------------------------------
    # Figure, breadcrumb, back button and ward voter list
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.MAP_GRAPH, "figure"),
        Output(IDs.Control.MAP_TITLE, "children"),
        Output(IDs.Control.MAP_BACK_BTN, "children"),
        Output(IDs.Control.MAP_BACK_BTN, "style"),
        Output(IDs.Control.MAP_VOTER_TABLE, "data"),
        Output(IDs.Control.MAP_VOTERS, "style"),
        Input(IDs.Store.MAP_DRILL, "data"),
        Input(IDs.Store.DATASET_VERSION, "data"),
    )
    def update_map(drill_data, _version):
        state = drill_state(drill_data)
        figure, title, back, rows = render_map(engine, state)
        ward_selected = state["ward"] is not None
        return (
            figure,
            title,
            back or "",
            SHOWN if back else HIDDEN,
            rows,
            SHOWN if ward_selected else HIDDEN,
        )

    # ---------------------------------------------------------
    # Profile card for the clicked ward voter
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.MAP_VOTER_DETAIL, "children"),
        Input(IDs.Control.MAP_VOTER_TABLE, "active_cell"),
        Input(IDs.Control.MAP_VOTER_TABLE, "data"),
    )
    def show_map_voter_detail(active_cell, rows):
        voter_id = selected_voter_id(active_cell, rows)
        return voter_card(engine.voter(voter_id) if voter_id else None)
