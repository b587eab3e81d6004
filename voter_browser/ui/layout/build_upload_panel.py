from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from voter_browser.core.voter import VOTER_COLUMNS


def build_upload_panel() -> dbc.Card:
    return dbc.Card(
        [
            dbc.CardHeader("Upload Voter Data"),
            dbc.CardBody(
                [
                    dcc.Upload(
                        id="csv-upload",
                        children=html.Div(
                            ["Drag and drop your CSV file here, or ", html.A("choose a file")]
                        ),
                        multiple=False,
                        accept=".csv",
                        className="vb-upload border border-2 rounded p-5 text-center",
                        style={"borderStyle": "dashed", "cursor": "pointer"},
                    ),
                    html.Div(id="upload-status", className="mt-3"),
                    html.Hr(),
                    html.Div(
                        [
                            html.Strong("Expected columns: "),
                            html.Code(", ".join(VOTER_COLUMNS)),
                        ],
                        className="small",
                    ),
                    html.Div(
                        "Header names are case-insensitive. Values must not contain the delimiter; "
                        "quoting is not supported. Rows without voter_id or name are skipped.",
                        className="text-muted small mt-1",
                    ),
                    dbc.Button(
                        "Load sample data",
                        id="sample-reload-btn",
                        color="secondary",
                        size="sm",
                        outline=True,
                        className="mt-3",
                    ),
                ]
            ),
        ],
        className="vb-maincard mt-3",
    )
