from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from voter_browser.config.model import GlobalConfig


def build_navbar(global_config: GlobalConfig, status_text: str) -> dbc.Navbar:
    return dbc.Navbar(
        dbc.Container(
            fluid=True,
            children=[
                html.Div(
                    [
                        html.H2(global_config.ui_title, className="mb-0"),
                        html.Small(global_config.subtitle, className="text-muted"),
                    ],
                    className="d-flex flex-column justify-content-center",
                ),
                html.Div(
                    status_text,
                    id="navbar-dataset-status",
                    className="ms-auto text-muted small",
                ),
            ],
        ),
        dark=False,
        className="shadow-sm vb-navbar",
    )
