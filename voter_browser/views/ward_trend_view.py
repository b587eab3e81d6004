from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go

from voter_browser.core.base_view import BaseView
from voter_browser.views.gender_view import GENDER_COLOURS


class WardGenderTrendView(BaseView):
    """
    Male/female voters per ward label, wards in numeric order.
    """

    id = "ward_gender_trend"
    label = "Ward Gender Trend"

    def compute_data(self) -> pd.DataFrame:
        return self.engine.ward_gender_trend()

    def render_figure(self, data: pd.DataFrame) -> go.Figure:
        if data is None or data.empty:
            return self.empty_figure("No voters match the current filters")

        fig = go.Figure()
        for column, name in (("male", "Male"), ("female", "Female")):
            fig.add_scatter(
                x=data["ward"],
                y=data[column],
                mode="lines+markers",
                fill="tozeroy",
                name=name,
                line={"color": GENDER_COLOURS[name]},
            )

        fig.update_layout(
            title="Gender by ward",
            xaxis_title="Ward",
            yaxis_title="# voters",
            margin=dict(l=40, r=20, t=40, b=40),
        )
        return fig
