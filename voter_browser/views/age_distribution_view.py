from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go

from voter_browser.core.base_view import BaseView
from voter_browser.views.gender_view import GENDER_COLOURS


class AgeDistributionView(BaseView):
    """
    Stacked bars of male/female/other voters per report age bucket (18-25 ... 66+).
    """

    id = "age_distribution"
    label = "Age Distribution"

    def compute_data(self) -> pd.DataFrame:
        return self.engine.age_bucket_stats()

    def render_figure(self, data: pd.DataFrame) -> go.Figure:
        if data is None or data.empty or int(data["total"].sum()) == 0:
            return self.empty_figure("No voters match the current filters")

        fig = go.Figure()
        for column, name in (("male", "Male"), ("female", "Female"), ("other", "Other")):
            fig.add_bar(
                x=data["label"],
                y=data[column],
                name=name,
                marker_color=GENDER_COLOURS[name],
            )

        fig.update_layout(
            barmode="stack",
            title="Age distribution",
            xaxis_title="Age group",
            yaxis_title="# voters",
            margin=dict(l=40, r=20, t=40, b=40),
        )
        return fig
