from __future__ import annotations

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from voter_browser.core.base_view import BaseView
from voter_browser.views.municipality_view import short_municipality


class WardSizeAgeView(BaseView):
    """
    Scatter of ward size (voters) against ward average age, one point per
    municipality/ward pair.
    """

    id = "ward_size_age"
    label = "Ward Size vs Average Age"

    def compute_data(self) -> pd.DataFrame:
        stats = self.engine.ward_stats().copy()
        stats["short_name"] = stats["municipality"].map(short_municipality)
        return stats

    def render_figure(self, data: pd.DataFrame) -> go.Figure:
        if data is None or data.empty:
            return self.empty_figure("No voters match the current filters")

        fig = px.scatter(
            data,
            x="total",
            y="average_age",
            color="short_name",
            hover_data={"ward": True, "booths": True, "short_name": False},
        )
        fig.update_layout(
            title="Ward size vs average age",
            xaxis_title="# voters in ward",
            yaxis_title="Average age",
            legend_title="Municipality",
            margin=dict(l=40, r=20, t=40, b=40),
        )
        return fig
