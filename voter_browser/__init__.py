"""
Top-level package for the voter browser.

This package exposes the core architecture (store, engine, views, UI adapters).
Most code should import from submodules such as:
    voter_browser.core
    voter_browser.views
    voter_browser.ui
"""

__all__: list[str] = []
