from __future__ import annotations

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from voter_browser.core.base_view import BaseView
from voter_browser.views.municipality_view import short_municipality


class GeographyTreemapView(BaseView):
    """
    Municipality -> ward treemap over the full dataset.

    Like the constituency map, this ignores the current filters so that every
    area stays visible.
    """

    id = "geography"
    label = "Constituency Overview"

    def compute_data(self) -> pd.DataFrame:
        frames = [self.engine.map_ward_stats(m) for m in self.engine.available_municipalities()]
        frames = [f for f in frames if not f.empty]
        if not frames:
            return pd.DataFrame()
        data = pd.concat(frames, ignore_index=True)
        data["short_name"] = data["municipality"].map(short_municipality)
        return data

    def render_figure(self, data: pd.DataFrame) -> go.Figure:
        if data is None or data.empty:
            return self.empty_figure("No voter data loaded")

        fig = px.treemap(
            data,
            path=["short_name", "ward"],
            values="total",
            hover_data={"male": True, "female": True, "booths": True},
        )
        fig.update_layout(
            title="Voters by municipality and ward",
            margin=dict(l=10, r=10, t=40, b=10),
        )
        return fig
