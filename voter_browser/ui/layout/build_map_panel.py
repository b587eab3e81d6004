from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from voter_browser.ui.helpers import voter_card
from voter_browser.ui.layout.build_voters_panel import voter_data_table
from voter_browser.views.map_view import MAP_TITLE, drill_state

MAP_VOTER_COLUMNS = ("voter_id", "name", "age", "gender", "booth")


def build_map_panel(page_size: int) -> dbc.Card:
    """
    Constituency map page:
    - Header with the drill breadcrumb and a back button
    - Bars per municipality, or per ward of the selected municipality
    - Once a ward is picked, its voters and a profile card for the clicked one
    """
    header = html.Div(
        [
            html.Div(MAP_TITLE, id="map-title", className="fw-semibold"),
            dbc.Button(
                "Back to Map",
                id="map-back-btn",
                color="link",
                size="sm",
                style={"display": "none"},
            ),
        ],
        className="d-flex justify-content-between align-items-center",
    )

    voters = html.Div(
        dbc.Row(
            [
                dbc.Col(voter_data_table("map-voter-table", MAP_VOTER_COLUMNS, page_size), lg=8),
                dbc.Col(html.Div(voter_card(None), id="map-voter-detail"), lg=4),
            ],
            className="g-3 mt-2",
        ),
        id="map-voters",
        style={"display": "none"},
    )

    return dbc.Card(
        [
            dcc.Store(id="map-drill", data=drill_state()),
            dbc.CardHeader(header),
            dbc.CardBody(
                [
                    dcc.Graph(id="map-graph", style={"height": "420px"}, config={"responsive": True}),
                    voters,
                ]
            ),
        ],
        className="vb-maincard mt-3",
    )
