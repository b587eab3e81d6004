from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go

from voter_browser.core.base_view import BaseView
from voter_browser.views.gender_view import GENDER_COLOURS


class BoothGenderView(BaseView):
    """
    Grouped bars of voters per booth label, split by gender.
    """

    id = "booth_gender"
    label = "Booth-wise Voters"

    def compute_data(self) -> pd.DataFrame:
        return self.engine.booth_stats()

    def render_figure(self, data: pd.DataFrame) -> go.Figure:
        if data is None or data.empty:
            return self.empty_figure("No voters match the current filters")

        fig = go.Figure()
        for column, name in (("male", "Male"), ("female", "Female"), ("other", "Other")):
            if int(data[column].sum()) == 0:
                continue
            fig.add_bar(x=data["booth"], y=data[column], name=name, marker_color=GENDER_COLOURS[name])

        fig.update_layout(
            barmode="group",
            title="Booth-wise voter distribution",
            xaxis_title="Booth",
            yaxis_title="# voters",
            margin=dict(l=40, r=20, t=40, b=40),
        )
        return fig
