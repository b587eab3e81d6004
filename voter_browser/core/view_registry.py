from __future__ import annotations
from typing import Dict, List, Type

from .engine import VoterEngine
from .base_view import BaseView


class ViewRegistry:
    """
    Registry for view classes so the app can build the analytics picker dynamically

    Purpose:
    - Decouples UI/Dash layer from hardcoded view implementations by exposing {@link create(view_id, engine)}
    - Enables dynamic construction of navigation (dropdowns, chart grids) based on the registered views

    Design Notes:
    - Stores the subclasses of {@link BaseView}, not instances, so that each view can be instantiated on demand
    - Enforces variants:
        * only {@link BaseView} subclasses can be registered
        * each view 'id' is unique across the registry
    """

    def __init__(self):
        self._views: Dict[str, Type[BaseView]] = {}

    def register(self, view_cls: Type[BaseView]) -> None:
        """
        Register a {@link BaseView} with the registry

        :param view_cls: the subclass of {@link BaseView}

        Raises:
            TypeError: if view_cls is not a subclass of {@link BaseView}
            ValueError: if a view with same 'id' already exists
        """

        if not isinstance(view_cls, type) or not issubclass(view_cls, BaseView):
            raise TypeError(f"View '{getattr(view_cls, 'id', view_cls)}' must be a subclass of BaseView")

        if view_cls.id in self._views:
            raise ValueError(f"View '{view_cls.id}' already registered")

        self._views[view_cls.id] = view_cls

    def create(self, view_id: str, engine: VoterEngine) -> BaseView:
        """
        Instantiate a view for the given view_id.
        :param view_id: the id of the view
        :param engine: the engine the view reads from
        :return cls(): the instantiated view

        Raises:
            KeyError: if no view with the given id exists in the registry
        """
        try:
            cls = self._views[view_id]
        except KeyError:
            raise KeyError(f"View '{view_id}' not found")
        return cls(engine)

    def all_classes(self) -> List[Type[BaseView]]:
        """
        Used at UI layer to build navigation elements - dropdowns.
        :return list: the registered view classes, in registration order
        """
        return list(self._views.values())
