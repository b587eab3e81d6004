from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from voter_browser.services.export_service import REPORT_TITLES


def build_reports_panel() -> dbc.Card:
    """
    Reports page:
    - Report type picker (demographic / municipality / ward / age / gender)
    - Active filters and headline numbers for the filtered voters
    - The report table (populated via callbacks)
    - CSV export of the filtered voters
    """
    report_options = [
        {"label": title.replace(" Report", ""), "value": key} for key, title in REPORT_TITLES.items()
    ]

    actions = html.Div(
        [
            dcc.Dropdown(
                id="report-type-select",
                options=report_options,
                value="demographic",
                clearable=False,
                style={"minWidth": "260px"},
                className="me-2",
            ),
            dbc.Button("Export CSV", id="report-export-btn", color="primary", size="sm"),
            dcc.Download(id="report-download"),
        ],
        className="d-flex justify-content-end align-items-center",
    )

    return dbc.Card(
        [
            dbc.CardHeader("Reports"),
            dbc.CardBody(
                [
                    dbc.Row(
                        [
                            dbc.Col(
                                [
                                    html.H4(id="report-title", className="mb-1"),
                                    html.Div(id="report-filters", className="text-muted small"),
                                ],
                                md=6,
                            ),
                            dbc.Col(actions, md=6),
                        ],
                        className="mb-3",
                    ),
                    html.Div(id="report-summary", className="mb-3"),
                    html.Hr(),
                    html.Div(id="report-table"),
                ]
            ),
        ],
        className="vb-maincard mt-3",
    )
