from __future__ import annotations

from typing import TYPE_CHECKING

import dash_bootstrap_components as dbc
from dash import dcc

from voter_browser.ui.helpers import dataset_status_text
from voter_browser.ui.layout.build_analytics_panel import build_analytics_panel
from voter_browser.ui.layout.build_filter_panel import build_filter_panel
from voter_browser.ui.layout.build_map_panel import build_map_panel
from voter_browser.ui.layout.build_navbar import build_navbar
from voter_browser.ui.layout.build_overview_panel import build_overview_panel
from voter_browser.ui.layout.build_reports_panel import build_reports_panel
from voter_browser.ui.layout.build_upload_panel import build_upload_panel
from voter_browser.ui.layout.build_voters_panel import build_voters_panel

if TYPE_CHECKING:
    from voter_browser.ui.context import AppContext


def build_layout(ctx: AppContext) -> dbc.Container:
    engine = ctx.engine

    navbar = build_navbar(ctx.global_config, dataset_status_text(engine))
    filter_panel = build_filter_panel(engine)

    return dbc.Container(
        fluid=True,
        className="vb-root",
        children=[
            navbar,

            # Criteria snapshot + dataset version; every render callback listens to this
            dcc.Store(id="filter-state", data={"version": engine.version, "criteria": engine.criteria.to_dict()}),
            dcc.Store(id="dataset-version", data=engine.version),

            dbc.Row(
                [
                    dbc.Col(filter_panel, md=3, className="mt-3"),
                    dbc.Col(
                        dcc.Tabs(
                            id="page-tabs",
                            value="overview",
                            children=[
                                dcc.Tab(label="Overview", value="overview", children=[build_overview_panel()]),
                                dcc.Tab(label="Analytics", value="analytics", children=[build_analytics_panel(ctx.registry)]),
                                dcc.Tab(
                                    label="Voters",
                                    value="voters",
                                    children=[build_voters_panel(ctx.global_config.page_size)],
                                ),
                                dcc.Tab(
                                    label="Map",
                                    value="map",
                                    children=[build_map_panel(ctx.global_config.page_size)],
                                ),
                                dcc.Tab(label="Reports", value="reports", children=[build_reports_panel()]),
                                dcc.Tab(label="Upload", value="upload", children=[build_upload_panel()]),
                            ],
                            className="mt-3",
                        ),
                        md=9,
                    ),
                ],
                className="gx-3",
            ),
        ],
    )
