from __future__ import annotations

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from voter_browser.core.base_view import BaseView

GENDER_COLOURS = {"Male": "#2563eb", "Female": "#14b8a6", "Other": "#f59e0b"}


class GenderDistributionView(BaseView):
    """
    Pie of voter counts per gender for the filtered subset.
    """

    id = "gender_distribution"
    label = "Gender Distribution"

    def compute_data(self) -> pd.DataFrame:
        stats = self.engine.gender_stats()
        return stats[stats["count"] > 0].reset_index(drop=True)

    def render_figure(self, data: pd.DataFrame) -> go.Figure:
        if data is None or data.empty:
            return self.empty_figure("No voters match the current filters")

        fig = px.pie(
            data,
            names="gender",
            values="count",
            color="gender",
            color_discrete_map=GENDER_COLOURS,
            hole=0.45,
        )
        fig.update_traces(textinfo="label+percent")
        fig.update_layout(
            margin=dict(l=20, r=20, t=40, b=20),
            title="Gender distribution",
            showlegend=False,
        )
        return fig
