"""
UI adapters for the voter browser.

Currently provides a Dash-based web UI via create_dash_app().
The UI only reads engine snapshots and calls the engine's mutation operations.
"""

from .dash_app import create_dash_app

__all__ = ["create_dash_app"]
