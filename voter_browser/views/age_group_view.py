from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go

from voter_browser.core.base_view import BaseView
from voter_browser.views.gender_view import GENDER_COLOURS


class AgeGroupGenderView(BaseView):
    """
    Gender split within the coarse age groups (Youth / Adult / Middle / Senior).

    This uses a different bucketing than AgeDistributionView on purpose.
    """

    id = "age_group_gender"
    label = "Age Group by Gender"

    def compute_data(self) -> pd.DataFrame:
        return self.engine.age_group_gender()

    def render_figure(self, data: pd.DataFrame) -> go.Figure:
        if data is None or data.empty or int(data["total"].sum()) == 0:
            return self.empty_figure("No voters match the current filters")

        fig = go.Figure()
        for column, name in (("male", "Male"), ("female", "Female"), ("other", "Other")):
            fig.add_bar(
                y=data["group"],
                x=data[column],
                name=name,
                orientation="h",
                marker_color=GENDER_COLOURS[name],
            )

        fig.update_layout(
            barmode="stack",
            title="Age group by gender",
            xaxis_title="# voters",
            margin=dict(l=40, r=20, t=40, b=40),
        )
        return fig
