from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

import plotly.graph_objs as go

from .engine import VoterEngine


class BaseView(ABC):
    """
    Abstract base class for all chart views.

    Defines the contract that every view in the app must follow
    - expose an 'id' - used internally
    - expose a 'label' - used for UI/human-readable applications
    - implement 'compute_data' - read the aggregates this view needs from the engine
    - implement 'render_figure' - used to render the figure using Plotly

    Views only read from the engine; they never mutate criteria or the dataset.
    """

    id: str = None
    label: str = None

    def __init__(self, engine: VoterEngine):
        self.engine = engine

    @abstractmethod
    def compute_data(self) -> Any:
        """
        Compute the data for the engine's current criteria
        :return: data: usually a DataFrame produced by one of the engine aggregates
        """
        raise NotImplementedError()

    @abstractmethod
    def render_figure(self, data: Any) -> go.Figure:
        """
        Render the figure given the computed data
        :param data: the data provided by {@link compute_data()}
        :return: the Plotly figure
        """
        raise NotImplementedError()

    def figure(self) -> go.Figure:
        return self.render_figure(self.compute_data())

    # ------------------------------------------------------------------
    # Common helpers for all views
    # ------------------------------------------------------------------
    @staticmethod
    def empty_figure(message: str) -> go.Figure:
        """
        Standardised 'no data' figure used by all views.
        """
        fig = go.Figure()
        fig.update_layout(
            title=message,
            xaxis={"visible": False},
            yaxis={"visible": False},
        )
        return fig
