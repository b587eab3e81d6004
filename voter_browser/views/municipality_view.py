from __future__ import annotations

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from voter_browser.core.base_view import BaseView

MUNICIPALITY_SUFFIX = " Municipality"


def short_municipality(name: str) -> str:
    return name[: -len(MUNICIPALITY_SUFFIX)] if name.endswith(MUNICIPALITY_SUFFIX) else name


class MunicipalityVotersView(BaseView):
    """
    Horizontal bars of voters per municipality, largest first.
    """

    id = "municipality_voters"
    label = "Voters by Municipality"

    def compute_data(self) -> pd.DataFrame:
        counts = self.engine.municipality_counts().copy()
        counts["short_name"] = counts["municipality"].map(short_municipality)
        return counts

    def render_figure(self, data: pd.DataFrame) -> go.Figure:
        if data is None or data.empty:
            return self.empty_figure("No voters match the current filters")

        fig = px.bar(
            data,
            x="count",
            y="short_name",
            orientation="h",
            hover_data={"municipality": True, "short_name": False},
        )
        fig.update_layout(
            title="Voters by municipality",
            xaxis_title="# voters",
            yaxis_title="",
            yaxis={"autorange": "reversed"},
            margin=dict(l=40, r=20, t=40, b=40),
        )
        return fig
