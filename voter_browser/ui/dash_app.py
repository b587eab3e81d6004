from __future__ import annotations

import logging
from pathlib import Path

import dash_bootstrap_components as dbc
from dash import Dash

from voter_browser.config.io import load_global_config
from voter_browser.core.engine import VoterEngine
from voter_browser.core.store import VoterStore
from voter_browser.core.view_registry import ViewRegistry
from voter_browser.services.export_service import ReportService
from voter_browser.ui.callbacks.callbacks_filters import register_filter_callbacks
from voter_browser.ui.callbacks.callbacks_map import register_map_callbacks
from voter_browser.ui.callbacks.callbacks_render import register_render_callbacks
from voter_browser.ui.callbacks.callbacks_reports import register_reports_callbacks
from voter_browser.ui.callbacks.callbacks_upload import register_upload_callbacks
from voter_browser.ui.callbacks.callbacks_voters import register_voter_table_callbacks
from voter_browser.ui.context import AppContext
from voter_browser.ui.layout.build_layout import build_layout

logger = logging.getLogger(__name__)


def _build_view_registry() -> ViewRegistry:
    from voter_browser.views import (
        AgeDistributionView,
        AgeGroupGenderView,
        BoothGenderView,
        GenderDistributionView,
        GeographyTreemapView,
        MunicipalityProfileView,
        MunicipalityVotersView,
        WardGenderTrendView,
        WardSizeAgeView,
    )

    registry = ViewRegistry()
    registry.register(GenderDistributionView)
    registry.register(AgeDistributionView)
    registry.register(MunicipalityVotersView)
    registry.register(WardGenderTrendView)
    registry.register(BoothGenderView)
    registry.register(AgeGroupGenderView)
    registry.register(MunicipalityProfileView)
    registry.register(WardSizeAgeView)
    registry.register(GeographyTreemapView)
    return registry


def build_context(config_root: Path | str = Path("config")) -> AppContext:
    config_root = Path(config_root)

    # 1) Load Config
    global_config = load_global_config(config_root)

    # 2) Store + engine, seeded with sample voters
    store = VoterStore()
    engine = VoterEngine(store)
    store.load_sample(global_config.sample_size, seed=global_config.sample_seed)

    # 3) Views + reports
    registry = _build_view_registry()
    report_service = ReportService(engine)

    return AppContext(
        config_root=config_root,
        global_config=global_config,
        store=store,
        engine=engine,
        registry=registry,
        report_service=report_service,
    )


def create_dash_app(config_root: Path | str = Path("config")) -> Dash:
    ctx = build_context(config_root)

    assets_path = Path(__file__).parent / "assets"

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
        assets_folder=str(assets_path),
    )
    app.title = ctx.global_config.ui_title

    app.layout = build_layout(ctx)

    # Register callbacks
    register_filter_callbacks(app, ctx)
    register_render_callbacks(app, ctx)
    register_voter_table_callbacks(app, ctx)
    register_map_callbacks(app, ctx)
    register_reports_callbacks(app, ctx)
    register_upload_callbacks(app, ctx)

    logger.info("Dash app created", extra={"n_voters": len(ctx.store), "n_views": len(ctx.registry.all_classes())})
    return app
