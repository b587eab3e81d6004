"""
Core domain layer: voter model, dataset store, filter state, the filter &
derived-view engine, the view base class and the view registry
"""

from .voter import Voter
from .store import VoterStore
from .filter_state import FilterState
from .engine import VoterEngine
from .base_view import BaseView
from .view_registry import ViewRegistry

__all__ = ["Voter", "VoterStore", "FilterState", "VoterEngine", "BaseView", "ViewRegistry"]
