from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
import dash_bootstrap_components as dbc
from dash import Input, Output, State, dcc, html

from voter_browser.core.aggregates import ReportSummary
from voter_browser.core.exceptions import UnknownReportTypeError
from voter_browser.services.export_service import export_filename
from voter_browser.ui.helpers import frame_table
from voter_browser.ui.ids import IDs

if TYPE_CHECKING:
    from voter_browser.ui.context import AppContext

logger = logging.getLogger(__name__)


def _summary_row(summary: ReportSummary) -> dbc.Row:
    items = [
        ("Total Voters", f"{summary.total:,}"),
        ("Male", f"{summary.male:,}"),
        ("Female", f"{summary.female:,}"),
        ("Average Age", str(summary.average_age)),
    ]
    return dbc.Row(
        [
            dbc.Col(
                [
                    html.Div(label, className="text-muted small"),
                    html.H4(value, className="mb-0"),
                ],
                md=3,
            )
            for label, value in items
        ],
        className="g-3",
    )


def register_reports_callbacks(app: dash.Dash, ctx: AppContext) -> None:
    # ---------------------------------------------------------
    # Report preview for the current filters
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.REPORT_TITLE, "children"),
        Output(IDs.Control.REPORT_FILTERS, "children"),
        Output(IDs.Control.REPORT_SUMMARY, "children"),
        Output(IDs.Control.REPORT_TABLE, "children"),
        Input(IDs.Control.REPORT_TYPE_SELECT, "value"),
        Input(IDs.Store.FILTER_STATE, "data"),
    )
    def update_report(report_type, _fs_data):
        try:
            report = ctx.report_service.build(report_type)
        except UnknownReportTypeError as exc:
            return "Report", "", dbc.Alert(str(exc), color="warning"), None

        filters = "Filters: " + (", ".join(report.filters) if report.filters else "None (all voters)")
        return report.title, filters, _summary_row(report.summary), frame_table(report.table)

    # ---------------------------------------------------------
    # CSV download of the filtered voters
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.REPORT_DOWNLOAD, "data"),
        Input(IDs.Control.REPORT_EXPORT_BTN, "n_clicks"),
        State(IDs.Control.REPORT_TYPE_SELECT, "value"),
        prevent_initial_call=True,
    )
    def export_report(n_clicks, report_type):
        if not n_clicks:
            raise dash.exceptions.PreventUpdate

        text = ctx.report_service.export_csv(delimiter=ctx.global_config.csv_delimiter)
        filename = export_filename(report_type or "demographic")
        logger.info("CSV export", extra={"report_type": report_type, "export_filename": filename})
        return dcc.send_string(text, filename)
