from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from voter_browser.ui.ids import OVERVIEW_GRAPHS


def build_overview_panel() -> html.Div:
    graphs = [
        dbc.Col(
            dbc.Card(
                dbc.CardBody(
                    dcc.Graph(id=graph_id, style={"height": "380px"}, config={"responsive": True})
                ),
                className="vb-chart-card",
            ),
            lg=6,
            className="mt-3",
        )
        for graph_id, _view_id in OVERVIEW_GRAPHS
    ]

    return html.Div(
        [
            html.Div(id="kpi-row", className="mt-3"),
            dbc.Row(graphs, className="g-3"),
        ]
    )
