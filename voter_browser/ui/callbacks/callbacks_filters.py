from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import dash
from dash import Input, Output

from voter_browser.core.filter_state import DEFAULT_AGE_RANGE
from voter_browser.ui.helpers import active_filters_text, dataset_status_text, filter_dropdown_options
from voter_browser.ui.ids import IDs

if TYPE_CHECKING:
    from voter_browser.ui.context import AppContext

logger = logging.getLogger(__name__)

# Sidebar control -> FilterState field
CONTROL_FIELDS = {
    IDs.Control.SEARCH_INPUT: "search",
    IDs.Control.GENDER_SELECT: "gender",
    IDs.Control.MUNICIPALITY_SELECT: "municipality",
    IDs.Control.WARD_SELECT: "ward",
    IDs.Control.BOOTH_SELECT: "booth",
    IDs.Control.AGE_RANGE: "age_range",
}


def register_filter_callbacks(app: dash.Dash, ctx: AppContext) -> None:
    engine = ctx.engine

    # ---------------------------------------------------------
    # Sidebar controls -> engine criteria -> FilterState store
    #
    # One callback owns every control value so the cascading reset
    # (municipality clears ward + booth, ward clears booth) is written
    # back to the dropdowns in the same round trip.
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.SEARCH_INPUT, "value"),
        Output(IDs.Control.GENDER_SELECT, "value"),
        Output(IDs.Control.MUNICIPALITY_SELECT, "options"),
        Output(IDs.Control.MUNICIPALITY_SELECT, "value"),
        Output(IDs.Control.WARD_SELECT, "options"),
        Output(IDs.Control.WARD_SELECT, "value"),
        Output(IDs.Control.BOOTH_SELECT, "options"),
        Output(IDs.Control.BOOTH_SELECT, "value"),
        Output(IDs.Control.AGE_RANGE, "value"),
        Output(IDs.Control.ACTIVE_FILTERS, "children"),
        Output(IDs.Control.DATASET_STATUS, "children"),
        Output(IDs.Store.FILTER_STATE, "data"),
        Input(IDs.Control.SEARCH_INPUT, "value"),
        Input(IDs.Control.GENDER_SELECT, "value"),
        Input(IDs.Control.MUNICIPALITY_SELECT, "value"),
        Input(IDs.Control.WARD_SELECT, "value"),
        Input(IDs.Control.BOOTH_SELECT, "value"),
        Input(IDs.Control.AGE_RANGE, "value"),
        Input(IDs.Control.RESET_BTN, "n_clicks"),
        Input(IDs.Store.DATASET_VERSION, "data"),
    )
    def sync_filters(search, gender, municipality, ward, booth, age_range, _reset_clicks, _dataset_version):
        values: dict[str, Any] = {
            "search": search,
            "gender": gender,
            "municipality": municipality,
            "ward": ward,
            "booth": booth,
            "age_range": age_range if age_range else DEFAULT_AGE_RANGE,
        }

        trigger = dash.ctx.triggered_id
        if trigger == IDs.Control.RESET_BTN:
            engine.reset_criteria()
        elif trigger in CONTROL_FIELDS:
            field = CONTROL_FIELDS[trigger]
            engine.update_criteria(field, values[field])
        # Initial load and dataset replacement: the engine already holds the
        # criteria to show, so the controls are just re-synced from it.

        state = engine.criteria
        municipality_options, ward_options, booth_options = filter_dropdown_options(engine)

        return (
            state.search,
            state.gender,
            municipality_options,
            state.municipality,
            ward_options,
            state.ward,
            booth_options,
            state.booth,
            list(state.age_range),
            active_filters_text(engine),
            dataset_status_text(engine),
            {"version": engine.version, "criteria": state.to_dict()},
        )
