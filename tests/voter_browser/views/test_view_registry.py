from __future__ import annotations

import pytest

from voter_browser.core.base_view import BaseView
from voter_browser.core.engine import VoterEngine
from voter_browser.core.store import VoterStore
from voter_browser.core.view_registry import ViewRegistry
from voter_browser.views import AgeDistributionView, GenderDistributionView


def test_register_and_create():
    registry = ViewRegistry()
    registry.register(GenderDistributionView)
    registry.register(AgeDistributionView)

    engine = VoterEngine(VoterStore())
    view = registry.create("age_distribution", engine)

    assert isinstance(view, AgeDistributionView)
    assert view.engine is engine
    assert registry.all_classes() == [GenderDistributionView, AgeDistributionView]


def test_duplicate_id_is_rejected():
    registry = ViewRegistry()
    registry.register(GenderDistributionView)

    with pytest.raises(ValueError):
        registry.register(GenderDistributionView)


def test_only_base_view_subclasses():
    registry = ViewRegistry()

    with pytest.raises(TypeError):
        registry.register(object)
    with pytest.raises(TypeError):
        registry.register(GenderDistributionView(VoterEngine(VoterStore())))


def test_unknown_view_id():
    with pytest.raises(KeyError):
        ViewRegistry().create("missing", VoterEngine(VoterStore()))


def test_base_view_is_abstract():
    with pytest.raises(TypeError):
        BaseView(VoterEngine(VoterStore()))
