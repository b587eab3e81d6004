from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from voter_browser.core.view_registry import ViewRegistry


def build_analytics_panel(registry: ViewRegistry) -> dbc.Card:
    view_classes = registry.all_classes()
    view_options = [{"label": cls.label, "value": cls.id} for cls in view_classes]
    default_view = view_classes[0].id if view_classes else None

    return dbc.Card(
        [
            dbc.CardHeader(
                html.Div(
                    [
                        html.Strong("Chart", className="me-3"),
                        dcc.Dropdown(
                            id="view-select",
                            options=view_options,
                            value=default_view,
                            clearable=False,
                            style={"minWidth": "280px"},
                        ),
                    ],
                    className="d-flex align-items-center",
                ),
                className="p-2",
            ),
            dbc.CardBody(
                dcc.Loading(
                    id="main-graph-loading",
                    type="default",
                    children=dcc.Graph(
                        id="main-graph",
                        style={"height": "600px"},
                        config={"responsive": True},
                    ),
                ),
            ),
        ],
        className="vb-maincard mt-3",
    )
