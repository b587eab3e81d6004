from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from voter_browser.core.engine import VoterEngine
from voter_browser.core.filter_state import AGE_LIMITS, DEFAULT_AGE_RANGE
from voter_browser.ui.helpers import active_filters_text, filter_dropdown_options, gender_options

AGE_SLIDER_MIN, AGE_SLIDER_MAX = AGE_LIMITS


def _dropdown(label: str, component_id: str, options, placeholder: str) -> html.Div:
    return html.Div(
        [
            html.Label(label, className="form-label"),
            dcc.Dropdown(
                id=component_id,
                options=options,
                value=None,
                placeholder=placeholder,
                className="mb-3",
            ),
        ]
    )


def build_filter_panel(engine: VoterEngine) -> dbc.Card:
    municipality_options, ward_options, booth_options = filter_dropdown_options(engine)

    return dbc.Card(
        [
            dbc.CardHeader("Filters", className="fw-semibold"),
            dbc.CardBody(
                [
                    html.Label("Search", className="form-label"),
                    dcc.Input(
                        id="search-input",
                        type="text",
                        debounce=True,
                        placeholder="Name, voter ID or parent name",
                        className="form-control mb-3",
                    ),
                    _dropdown("Gender", "gender-select", gender_options(), "All genders"),
                    _dropdown("Municipality", "municipality-select", municipality_options, "All municipalities"),
                    _dropdown("Ward", "ward-select", ward_options, "All wards"),
                    _dropdown("Booth", "booth-select", booth_options, "All booths"),
                    html.Label("Age range", className="form-label"),
                    dcc.RangeSlider(
                        id="age-range-slider",
                        min=AGE_SLIDER_MIN,
                        max=AGE_SLIDER_MAX,
                        step=1,
                        value=list(DEFAULT_AGE_RANGE),
                        marks={a: str(a) for a in (AGE_SLIDER_MIN, *range(20, AGE_SLIDER_MAX + 1, 10))},
                        tooltip={"placement": "bottom"},
                    ),
                    html.Hr(),
                    html.Div(
                        active_filters_text(engine),
                        id="active-filters-text",
                        className="text-muted small mb-2",
                    ),
                    dbc.Button(
                        "Reset filters",
                        id="reset-filters-btn",
                        color="secondary",
                        size="sm",
                        outline=True,
                    ),
                ]
            ),
        ],
        className="vb-sidebar",
    )
