from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

import dash
import plotly.graph_objs as go
from dash import Input, Output

from voter_browser.ui.helpers import kpi_cards
from voter_browser.ui.ids import IDs, OVERVIEW_GRAPHS

if TYPE_CHECKING:
    from voter_browser.ui.context import AppContext

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Helper: Empty/Error Figures
# -----------------------------------------------------------------------------
def _message_figure(title: str, details: Optional[str] = None) -> go.Figure:
    fig = go.Figure()
    text = title if details is None else f"{title}<br><br>{details}"
    fig.add_annotation(
        text=text,
        showarrow=False,
        xref="paper",
        yref="paper",
        x=0.5,
        y=0.5,
    )
    fig.update_xaxes(visible=False)
    fig.update_yaxes(visible=False)
    fig.update_layout(margin=dict(l=40, r=40, t=40, b=40))
    return fig


def _error_figure(details: str) -> go.Figure:
    return _message_figure("Something went wrong while rendering this view.", details)


def render_view(ctx: AppContext, view_id: Optional[str]) -> go.Figure:
    if not view_id:
        return _message_figure("No view selected.", "Choose a chart from the dropdown.")

    try:
        view = ctx.registry.create(view_id, ctx.engine)
    except KeyError:
        return _error_figure(f"Unknown view '{view_id}'.")

    try:
        logger.info("render_start", extra={"view_id": view_id, "version": ctx.engine.version})
        return view.figure()
    except Exception:
        logger.exception("Error rendering view", extra={"view_id": view_id})
        return _error_figure(
            "The app hit an unexpected error. "
            "If this keeps happening, grab the logs and open an issue."
        )


def register_render_callbacks(app: dash.Dash, ctx: AppContext) -> None:
    # ---------------------------------------------------------
    # Overview: KPI cards + the four fixed charts
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.KPI_ROW, "children"),
        *[Output(graph_id, "figure") for graph_id, _view_id in OVERVIEW_GRAPHS],
        Input(IDs.Store.FILTER_STATE, "data"),
    )
    def update_overview(_fs_data: dict[str, Any] | None):
        figures = [render_view(ctx, view_id) for _graph_id, view_id in OVERVIEW_GRAPHS]
        return (kpi_cards(ctx.engine.kpis()), *figures)

    # ---------------------------------------------------------
    # Analytics: selected view -> main figure
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.MAIN_GRAPH, "figure"),
        Input(IDs.Store.FILTER_STATE, "data"),
        Input(IDs.Control.VIEW_SELECT, "value"),
    )
    def update_main_graph(_fs_data: dict[str, Any] | None, view_id: str | None):
        return render_view(ctx, view_id)
