from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from voter_browser.config.model import GlobalConfig
from voter_browser.core.engine import VoterEngine
from voter_browser.core.store import VoterStore
from voter_browser.core.view_registry import ViewRegistry
from voter_browser.services.export_service import ReportService


@dataclass
class AppContext:
    """
    Holds shared state for the Dash app: config, the voter store, the engine
    over it, the view registry and the report service. This is passed into
    layout + callback registration functions instead of using module-level globals.
    """
    config_root: Path
    global_config: GlobalConfig
    store: VoterStore
    engine: VoterEngine
    registry: ViewRegistry
    report_service: ReportService
