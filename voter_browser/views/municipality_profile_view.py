from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go
from plotly.subplots import make_subplots

from voter_browser.core.base_view import BaseView
from voter_browser.views.municipality_view import short_municipality


class MunicipalityProfileView(BaseView):
    """
    Side-by-side comparison of municipalities: voters, wards, booths, average age.
    """

    id = "municipality_profile"
    label = "Municipality Comparison"

    METRICS = (
        ("total", "Voters"),
        ("wards", "Wards"),
        ("booths", "Booths"),
        ("average_age", "Avg age"),
    )

    def compute_data(self) -> pd.DataFrame:
        stats = self.engine.municipality_stats().copy()
        stats["short_name"] = stats["municipality"].map(short_municipality)
        return stats

    def render_figure(self, data: pd.DataFrame) -> go.Figure:
        if data is None or data.empty:
            return self.empty_figure("No voters match the current filters")

        fig = make_subplots(
            rows=1,
            cols=len(self.METRICS),
            subplot_titles=[title for _, title in self.METRICS],
        )
        for i, (column, title) in enumerate(self.METRICS, start=1):
            fig.add_bar(x=data["short_name"], y=data[column], name=title, row=1, col=i)

        fig.update_layout(
            title="Municipality comparison",
            showlegend=False,
            margin=dict(l=40, r=20, t=60, b=40),
        )
        return fig
